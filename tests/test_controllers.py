from __future__ import annotations

import io

import pytest

from paperwork_admin.container import build_container
from paperwork_admin.database.seed import seed_demo_data
from paperwork_admin.main import create_app

DOCUMENT = {
    "document_type": "agreement",
    "customer_name": "A",
    "customer_phone": "+91111",
    "builder_name": "B Corp",
    "property_details": "Plot 1",
}


@pytest.fixture
def app(monkeypatch, tmp_path, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def test_create_document_provisions_directory(client):
    resp = client.post("/api/documents", json=DOCUMENT)

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["success"] is True
    doc = body["data"]
    assert doc["document_number"] == "AGREEMENT/2024/001"
    assert doc["status"] == "pending_collection"
    assert doc["notes"] == [] and doc["files"] == []

    customers = client.get("/api/customers").get_json()["data"]
    builders = client.get("/api/builders").get_json()["data"]
    assert customers[0]["documents"] == [doc["document_id"]]
    assert builders[0]["contact_person"] == "Contact Person"


def test_create_document_requires_form_fields(client):
    resp = client.post("/api/documents", json={**DOCUMENT, "builder_name": "  "})

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Builder name is required"}
    assert client.get("/api/documents").get_json()["data"] == []


def test_create_document_rejects_non_json_body(client):
    resp = client.post("/api/documents", data="not json", content_type="text/plain")
    assert resp.status_code == 400


def test_unknown_document_type_is_400(client):
    resp = client.post("/api/documents", json={**DOCUMENT, "document_type": "will"})
    assert resp.status_code == 400


def test_patch_status_and_notes(client):
    doc_id = client.post("/api/documents", json=DOCUMENT).get_json()["data"]["document_id"]

    patched = client.patch(
        f"/api/documents/{doc_id}",
        json={"assigned_to": "John Doe", "collection_date": "2024-11-21"},
    ).get_json()["data"]
    status = client.post(f"/api/documents/{doc_id}/status", json={"status": "collected"}).get_json()["data"]
    noted = client.post(f"/api/documents/{doc_id}/notes", json={"note": "Originals received"})

    assert patched["assigned_to"] == "John Doe"
    assert patched["collection_date"] == "2024-11-21"
    assert status["status"] == "collected"
    assert noted.status_code == 201
    assert noted.get_json()["data"]["notes"] == ["Originals received"]


def test_patch_rejects_bad_input(client):
    doc_id = client.post("/api/documents", json=DOCUMENT).get_json()["data"]["document_id"]

    assert client.patch(f"/api/documents/{doc_id}", json={"document_number": "X"}).status_code == 400
    assert client.patch(f"/api/documents/{doc_id}", json={"delivery_date": "tomorrow"}).status_code == 400
    assert client.post(f"/api/documents/{doc_id}/status", json={"status": "lost"}).status_code == 400
    assert client.patch(f"/api/documents/{doc_id}", json={"document_id": "X"}).status_code == 400


def test_patch_rejects_malformed_lists(client):
    doc_id = client.post("/api/documents", json=DOCUMENT).get_json()["data"]["document_id"]

    notes = client.patch(f"/api/documents/{doc_id}", json={"notes": "call back"})
    files = client.patch(f"/api/documents/{doc_id}", json={"files": [{"file_id": "FILE1", "name": "deed.pdf"}]})

    assert notes.status_code == 400
    assert files.status_code == 400
    stored = client.get(f"/api/documents/{doc_id}").get_json()["data"]
    assert stored["notes"] == [] and stored["files"] == []


def test_customer_patch_guards_id_and_documents(client):
    cust_id = client.post("/api/customers", json={"name": "Rajesh", "phone": "+91 9876543210"}).get_json()["data"][
        "customer_id"
    ]

    assert client.patch(f"/api/customers/{cust_id}", json={"customer_id": "CUST999"}).status_code == 400
    patched = client.patch(f"/api/customers/{cust_id}", json={"documents": ["D1", "D1"]})
    assert patched.status_code == 200
    assert patched.get_json()["data"]["documents"] == ["D1"]


def test_missing_document_is_404(client):
    assert client.get("/api/documents/DOC404").status_code == 404
    assert client.patch("/api/documents/DOC404", json={"notes": []}).status_code == 404
    assert client.delete("/api/documents/DOC404").status_code == 404
    assert client.post("/api/documents/DOC404/notes", json={"note": "x"}).status_code == 404


def test_strict_mode_maps_to_409(monkeypatch, tmp_path, clock):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=build_container(strict_status_transitions=True, clock=clock))
    client = app.test_client()
    doc_id = client.post("/api/documents", json=DOCUMENT).get_json()["data"]["document_id"]

    resp = client.post(f"/api/documents/{doc_id}/status", json={"status": "delivered"})

    assert resp.status_code == 409
    assert resp.get_json()["success"] is False


def test_list_filters_and_stats(client):
    first = client.post("/api/documents", json=DOCUMENT).get_json()["data"]
    client.post("/api/documents", json={**DOCUMENT, "document_type": "sale_deed", "customer_name": "Rajesh"})
    client.post(f"/api/documents/{first['document_id']}/status", json={"status": "delivered"})

    assert len(client.get("/api/documents?type=sale_deed").get_json()["data"]) == 1
    assert len(client.get("/api/documents?status=delivered").get_json()["data"]) == 1
    assert len(client.get("/api/documents?search=rajesh").get_json()["data"]) == 1
    assert client.get("/api/documents/stats").get_json()["data"] == {
        "total": 2,
        "pending_collection": 1,
        "in_progress": 0,
        "completed": 1,
    }
    assert len(client.get("/api/documents/statuses").get_json()["data"]) == 8


def test_upload_and_download_file(client):
    doc_id = client.post("/api/documents", json=DOCUMENT).get_json()["data"]["document_id"]

    resp = client.post(
        f"/api/documents/{doc_id}/files",
        data={"file": (io.BytesIO(b"scanned deed"), "deed scan.pdf"), "uploaded_by": "Jane"},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 201
    attachment = resp.get_json()["data"]
    assert attachment["name"] == "deed scan.pdf"
    assert attachment["uploaded_by"] == "Jane"
    assert attachment["url"] == f"/uploads/{doc_id}_deed_scan.pdf"

    download = client.get(attachment["url"])
    assert download.status_code == 200
    assert download.data == b"scanned deed"
    download.close()

    files = client.get(f"/api/documents/{doc_id}").get_json()["data"]["files"]
    assert [f["file_id"] for f in files] == [attachment["file_id"]]


def test_upload_without_file_is_400(client):
    doc_id = client.post("/api/documents", json=DOCUMENT).get_json()["data"]["document_id"]
    resp = client.post(f"/api/documents/{doc_id}/files", data={}, content_type="multipart/form-data")
    assert resp.status_code == 400


def test_customer_routes(client):
    bad = client.post("/api/customers", json={"name": "No Phone"})
    created = client.post("/api/customers", json={"name": "Rajesh", "phone": "+91 9876543210"})
    cust_id = created.get_json()["data"]["customer_id"]

    assert bad.status_code == 400
    assert created.status_code == 201
    assert client.patch(f"/api/customers/{cust_id}", json={"address": "Gurgaon"}).get_json()["data"]["address"] == "Gurgaon"
    assert client.get("/api/customers?search=rajesh").get_json()["data"][0]["customer_id"] == cust_id
    assert client.get("/api/customers/stats").get_json()["data"]["total"] == 1
    assert client.delete(f"/api/customers/{cust_id}").status_code == 200
    assert client.get(f"/api/customers/{cust_id}").status_code == 404


def test_builder_routes(client):
    bad = client.post("/api/builders", json={"name": "Only Name"})
    created = client.post(
        "/api/builders",
        json={"name": "XYZ Developers", "contact_person": "Ms. Priya Patel", "phone": "+91 9876543221", "address": "Noida"},
    )
    bld_id = created.get_json()["data"]["builder_id"]

    assert bad.status_code == 400
    assert created.status_code == 201
    assert client.patch(f"/api/builders/{bld_id}", json={"builder_id": "BLD999"}).status_code == 400
    assert client.get(f"/api/builders/{bld_id}").get_json()["data"]["name"] == "XYZ Developers"
    assert client.delete(f"/api/builders/{bld_id}").status_code == 200
    assert client.delete(f"/api/builders/{bld_id}").status_code == 404


def test_seeded_demo_data_continues_numbering(client, container):
    assert seed_demo_data(container) == 6
    assert seed_demo_data(container) == 0

    doc = client.post("/api/documents", json={**DOCUMENT, "customer_phone": "+91 9876543210"}).get_json()["data"]

    assert doc["document_number"] == "AGREEMENT/2024/002"
    customer = container.customer_directory.require("CUST001")
    assert customer.documents == ("DOC001", doc["document_id"])
    assert container.customer_directory.create(name="New", phone="5").customer_id == "CUST003"
