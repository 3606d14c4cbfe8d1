from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.ids import next_display_id
from ..core.constants import CUSTOMER_ID_PREFIX, DIRECTORY_ID_WIDTH
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json, fetchall, fetchone, load_json_list
from .model import Customer
from .repository import CustomerRepository

_COLUMNS = "customer_id, name, phone, email, address, documents, created_at"


def _to_customer(r: dict[str, Any]) -> Customer:
    return Customer(
        customer_id=r["customer_id"],
        name=r["name"],
        phone=r["phone"],
        email=r.get("email"),
        address=r.get("address") or "",
        documents=tuple(load_json_list(r.get("documents"))),
        created_at=r["created_at"],
    )


class MySQLCustomerRepository(CustomerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _find_one(self, where: str, value: str) -> Optional[Customer]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM customers WHERE {where}=%s ORDER BY created_at, customer_id LIMIT 1",
                (value,),
            )
            r = fetchone(cur)
            return _to_customer(r) if r else None

    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        return self._find_one("customer_id", customer_id)

    def find_by_phone(self, phone: str) -> Optional[Customer]:
        # BINARY keeps the match exact regardless of the column collation.
        return self._find_one("BINARY phone", phone)

    def find_by_email(self, email: str) -> Optional[Customer]:
        return self._find_one("email", email)

    def list_all(self) -> Sequence[Customer]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM customers ORDER BY created_at, customer_id")
            return [_to_customer(r) for r in fetchall(cur)]

    def next_id(self) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT customer_id FROM customers")
            ids = [r["customer_id"] for r in fetchall(cur)]
        return next_display_id(CUSTOMER_ID_PREFIX, ids, width=DIRECTORY_ID_WIDTH)

    def add(self, customer: Customer) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO customers ({_COLUMNS})
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    customer.customer_id,
                    customer.name,
                    customer.phone,
                    customer.email,
                    customer.address,
                    dump_json(list(customer.documents)),
                    customer.created_at,
                ),
            )

    def save(self, customer: Customer) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE customers
                SET name=%s, phone=%s, email=%s, address=%s, documents=%s
                WHERE customer_id=%s
                """,
                (
                    customer.name,
                    customer.phone,
                    customer.email,
                    customer.address,
                    dump_json(list(customer.documents)),
                    customer.customer_id,
                ),
            )
            # MySQL reports 0 affected rows when nothing changed; treat existence as success.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS ok FROM customers WHERE customer_id=%s", (customer.customer_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, customer_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM customers WHERE customer_id=%s", (customer_id,))
            return cur.rowcount > 0
