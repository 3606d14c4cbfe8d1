from datetime import date, datetime

from paperwork_admin.core.enums import DocumentStatus, FileType
from paperwork_admin.database.bootstrap import SCHEMA_PATH, _iter_sql_statements, _strip_create_db_and_use
from paperwork_admin.documents.model import DocumentFile
from paperwork_admin.documents.mysql_document_repository import _row_params, _to_document


def test_schema_splits_into_table_statements():
    sql = _strip_create_db_and_use(SCHEMA_PATH.read_text(encoding="utf-8"))

    stmts = list(_iter_sql_statements(sql))

    assert [s.split("CREATE TABLE IF NOT EXISTS ")[1].split()[0] for s in stmts] == [
        "customers",
        "builders",
        "documents",
    ]
    assert "USE paperwork_db" not in sql


def test_splitter_keeps_semicolons_inside_quotes():
    stmts = list(_iter_sql_statements("INSERT INTO t VALUES ('a;b'); SELECT 1;"))
    assert stmts == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]


def test_document_row_round_trips_json_columns():
    row = {
        "document_id": "DOC001",
        "document_number": "AGR/2024/001",
        "document_type": "agreement",
        "status": "registered",
        "customer_name": "Rajesh Kumar",
        "customer_phone": "+91 9876543210",
        "customer_email": None,
        "builder_name": "ABC Properties Ltd.",
        "property_details": "Plot No. 123",
        "assigned_to": "John Doe",
        "collection_date": date(2024, 11, 1),
        "data_entry_date": None,
        "registration_date": None,
        "delivery_date": None,
        "notes": '["Initial collection completed", "All documents verified"]',
        "files": b'[{"file_id": "FILE1", "name": "deed.pdf", "file_type": "scan", "url": "/uploads/deed.pdf",'
        b' "uploaded_by": "Jane", "uploaded_at": "2024-11-02T10:00:00"}]',
        "created_at": datetime(2024, 10, 28),
        "updated_at": datetime(2024, 11, 10),
    }

    doc = _to_document(row)

    assert doc.status == DocumentStatus.REGISTERED
    assert doc.notes == ("Initial collection completed", "All documents verified")
    assert doc.files == (
        DocumentFile(
            file_id="FILE1",
            name="deed.pdf",
            file_type=FileType.SCAN,
            url="/uploads/deed.pdf",
            uploaded_by="Jane",
            uploaded_at=datetime(2024, 11, 2, 10, 0),
        ),
    )

    params = _row_params(doc)
    assert params[0] == "AGR/2024/001"
    assert params[13] == '["Initial collection completed", "All documents verified"]'
    assert '"file_type": "scan"' in params[14]
