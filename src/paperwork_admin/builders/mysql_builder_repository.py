from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.ids import next_display_id
from ..core.constants import BUILDER_ID_PREFIX, DIRECTORY_ID_WIDTH
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json, fetchall, fetchone, load_json_list
from .model import Builder
from .repository import BuilderRepository

_COLUMNS = "builder_id, name, contact_person, phone, address, email, registration_number, documents, created_at"


def _to_builder(r: dict[str, Any]) -> Builder:
    return Builder(
        builder_id=r["builder_id"],
        name=r["name"],
        contact_person=r.get("contact_person") or "",
        phone=r.get("phone") or "",
        address=r.get("address") or "",
        email=r.get("email"),
        registration_number=r.get("registration_number"),
        documents=tuple(load_json_list(r.get("documents"))),
        created_at=r["created_at"],
    )


class MySQLBuilderRepository(BuilderRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, builder_id: str) -> Optional[Builder]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM builders WHERE builder_id=%s", (builder_id,))
            r = fetchone(cur)
            return _to_builder(r) if r else None

    def find_by_name(self, name: str, *, case_sensitive: bool = True) -> Optional[Builder]:
        # The default collation is case-insensitive; BINARY forces an exact match.
        where = "BINARY name=%s" if case_sensitive else "name=%s"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM builders WHERE {where} ORDER BY created_at, builder_id LIMIT 1",
                (name,),
            )
            r = fetchone(cur)
            return _to_builder(r) if r else None

    def list_all(self) -> Sequence[Builder]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM builders ORDER BY created_at, builder_id")
            return [_to_builder(r) for r in fetchall(cur)]

    def next_id(self) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT builder_id FROM builders")
            ids = [r["builder_id"] for r in fetchall(cur)]
        return next_display_id(BUILDER_ID_PREFIX, ids, width=DIRECTORY_ID_WIDTH)

    def add(self, builder: Builder) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO builders ({_COLUMNS})
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    builder.builder_id,
                    builder.name,
                    builder.contact_person,
                    builder.phone,
                    builder.address,
                    builder.email,
                    builder.registration_number,
                    dump_json(list(builder.documents)),
                    builder.created_at,
                ),
            )

    def save(self, builder: Builder) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE builders
                SET name=%s, contact_person=%s, phone=%s, address=%s, email=%s,
                    registration_number=%s, documents=%s
                WHERE builder_id=%s
                """,
                (
                    builder.name,
                    builder.contact_person,
                    builder.phone,
                    builder.address,
                    builder.email,
                    builder.registration_number,
                    dump_json(list(builder.documents)),
                    builder.builder_id,
                ),
            )
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS ok FROM builders WHERE builder_id=%s", (builder.builder_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, builder_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM builders WHERE builder_id=%s", (builder_id,))
            return cur.rowcount > 0
