from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import DocumentStatus, DocumentType, FileType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json, fetchall, fetchone, iso, load_json_list, parse_iso
from .model import Document, DocumentFile
from .repository import DocumentRepository

_COLUMNS = (
    "document_id, document_number, document_type, status, customer_name, customer_phone, customer_email, "
    "builder_name, property_details, assigned_to, collection_date, data_entry_date, registration_date, "
    "delivery_date, notes, files, created_at, updated_at"
)


def _file_to_json(f: DocumentFile) -> dict:
    return {
        "file_id": f.file_id,
        "name": f.name,
        "file_type": f.file_type.value,
        "url": f.url,
        "uploaded_by": f.uploaded_by,
        "uploaded_at": iso(f.uploaded_at),
    }


def _file_from_json(raw: dict) -> DocumentFile:
    return DocumentFile(
        file_id=raw["file_id"],
        name=raw["name"],
        file_type=FileType(raw["file_type"]),
        url=raw.get("url") or "",
        uploaded_by=raw.get("uploaded_by") or "",
        uploaded_at=parse_iso(raw.get("uploaded_at")),
    )


def _to_document(r: dict[str, Any]) -> Document:
    return Document(
        document_id=r["document_id"],
        document_number=r["document_number"],
        document_type=DocumentType(r["document_type"]),
        status=DocumentStatus(r["status"]),
        customer_name=r.get("customer_name") or "",
        customer_phone=r.get("customer_phone") or "",
        customer_email=r.get("customer_email"),
        builder_name=r.get("builder_name") or "",
        property_details=r.get("property_details") or "",
        assigned_to=r.get("assigned_to"),
        collection_date=r.get("collection_date"),
        data_entry_date=r.get("data_entry_date"),
        registration_date=r.get("registration_date"),
        delivery_date=r.get("delivery_date"),
        notes=tuple(load_json_list(r.get("notes"))),
        files=tuple(_file_from_json(f) for f in load_json_list(r.get("files"))),
        created_at=r["created_at"],
        updated_at=r["updated_at"],
    )


def _row_params(d: Document) -> tuple:
    return (
        d.document_number,
        d.document_type.value,
        d.status.value,
        d.customer_name,
        d.customer_phone,
        d.customer_email,
        d.builder_name,
        d.property_details,
        d.assigned_to,
        d.collection_date,
        d.data_entry_date,
        d.registration_date,
        d.delivery_date,
        dump_json(list(d.notes)),
        dump_json([_file_to_json(f) for f in d.files]),
        d.created_at,
        d.updated_at,
    )


class MySQLDocumentRepository(DocumentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, document_id: str) -> Optional[Document]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM documents WHERE document_id=%s", (document_id,))
            r = fetchone(cur)
            return _to_document(r) if r else None

    def list_all(self) -> Sequence[Document]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM documents ORDER BY created_at, document_id")
            return [_to_document(r) for r in fetchall(cur)]

    def count_by_type(self, document_type: DocumentType) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM documents WHERE document_type=%s", (document_type.value,))
            r = fetchone(cur)
            return int(r["n"]) if r else 0

    def list_numbers(self, document_type: DocumentType) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT document_number FROM documents WHERE document_type=%s", (document_type.value,))
            return [r["document_number"] for r in fetchall(cur)]

    def add(self, document: Document) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO documents ({_COLUMNS})
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (document.document_id, *_row_params(document)),
            )

    def save(self, document: Document) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE documents
                SET document_number=%s, document_type=%s, status=%s, customer_name=%s, customer_phone=%s,
                    customer_email=%s, builder_name=%s, property_details=%s, assigned_to=%s,
                    collection_date=%s, data_entry_date=%s, registration_date=%s, delivery_date=%s,
                    notes=%s, files=%s, created_at=%s, updated_at=%s
                WHERE document_id=%s
                """,
                (*_row_params(document), document.document_id),
            )
            # updated_at always changes, so an existing row always reports one affected row.
            return cur.rowcount > 0

    def delete_by_id(self, document_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM documents WHERE document_id=%s", (document_id,))
            return cur.rowcount > 0
