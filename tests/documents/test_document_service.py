from __future__ import annotations

from dataclasses import fields
from datetime import date

import pytest

from paperwork_admin.builders.memory_builder_repository import InMemoryBuilderRepository
from paperwork_admin.builders.service import BuilderDirectory
from paperwork_admin.common.unit_of_work import InMemoryUnitOfWork
from paperwork_admin.core.constants import PLACEHOLDER_ADDRESS, PLACEHOLDER_CONTACT_PERSON, PLACEHOLDER_PHONE
from paperwork_admin.core.enums import DocumentStatus, DocumentType, FileType
from paperwork_admin.core.exceptions import NotFoundError, ValidationError
from paperwork_admin.customers.memory_customer_repository import InMemoryCustomerRepository
from paperwork_admin.customers.service import CustomerDirectory
from paperwork_admin.documents.memory_document_repository import InMemoryDocumentRepository
from paperwork_admin.documents.service import DocumentWorkflowService


def _create(service, **overrides):
    data = {
        "document_type": "agreement",
        "customer_name": "A",
        "customer_phone": "+91111",
        "builder_name": "B Corp",
        "property_details": "Plot 1",
    }
    data.update(overrides)
    return service.create(**data)


def test_sequential_creates_number_one_to_n(container):
    service = container.document_service

    numbers = [_create(service).document_number for _ in range(4)]

    assert numbers == [
        "AGREEMENT/2024/001",
        "AGREEMENT/2024/002",
        "AGREEMENT/2024/003",
        "AGREEMENT/2024/004",
    ]


def test_numbering_counts_per_type_and_strips_underscores(container):
    service = container.document_service

    _create(service, document_type="agreement")
    lease = _create(service, document_type=DocumentType.LEASE_DEED)
    gift = _create(service, document_type="gift_deed")

    assert lease.document_number == "LEASEDEED/2024/001"
    assert gift.document_number == "GIFTDEED/2024/001"


def test_caller_supplied_document_number_is_kept(container):
    doc = _create(container.document_service, document_number="AGR/MANUAL/9")
    assert doc.document_number == "AGR/MANUAL/9"


def test_same_phone_provisions_one_customer(container):
    service = container.document_service

    first = _create(service)
    second = _create(service, customer_name="A. Renamed")

    customers = container.customer_directory.list_all()
    assert len(customers) == 1
    assert customers[0].documents == (first.document_id, second.document_id)
    # existing record is only linked, never renamed
    assert customers[0].name == "A"

    container.customer_directory.link_document(customers[0].customer_id, first.document_id)
    assert container.customer_directory.require(customers[0].customer_id).documents == (
        first.document_id,
        second.document_id,
    )


def test_new_customer_takes_address_from_property(container):
    doc = _create(container.document_service, customer_email="a@example.com")

    customer = container.customer_directory.get_by_phone("+91111")
    assert customer.customer_id == "CUST001"
    assert customer.address == "Plot 1"
    assert customer.email == "a@example.com"
    assert customer.documents == (doc.document_id,)


def test_new_builder_gets_placeholder_contact(container):
    doc = _create(container.document_service, builder_name="Fresh Builders")

    builder = container.builder_directory.get_by_name("Fresh Builders")
    assert builder.builder_id == "BLD001"
    assert builder.contact_person == PLACEHOLDER_CONTACT_PERSON == "Contact Person"
    assert builder.phone == PLACEHOLDER_PHONE == "+91 0000000000"
    assert builder.address == PLACEHOLDER_ADDRESS == "Address not provided"
    assert builder.documents == (doc.document_id,)


def test_existing_builder_is_linked_not_overwritten(container):
    container.builder_directory.create(
        name="B Corp", contact_person="Ms. Rao", phone="+91 9000000001", address="Sector 5"
    )

    doc = _create(container.document_service)

    builders = container.builder_directory.list_all()
    assert len(builders) == 1
    assert builders[0].contact_person == "Ms. Rao"
    assert builders[0].documents == (doc.document_id,)


def test_builder_match_is_case_sensitive_by_default(container):
    _create(container.document_service, builder_name="ABC Corp")
    _create(container.document_service, builder_name="abc corp")

    assert len(container.builder_directory.list_all()) == 2


def test_missing_phone_skips_customer_provisioning(container):
    _create(container.document_service, customer_phone="")
    _create(container.document_service, builder_name="")

    assert [c.phone for c in container.customer_directory.list_all()] == ["+91111"]
    assert [b.name for b in container.builder_directory.list_all()] == ["B Corp"]


def test_status_on_create_is_ignored(container):
    doc = _create(container.document_service, status="delivered")
    assert doc.status == DocumentStatus.PENDING_COLLECTION


def test_unknown_document_type_is_rejected(container):
    with pytest.raises(ValidationError):
        _create(container.document_service, document_type="will")
    assert container.documents_repo.list_all() == []


def test_update_changes_only_named_fields(container, clock):
    service = container.document_service
    doc = _create(service)

    updated = service.update(doc.document_id, notes=["called customer"])

    assert updated.notes == ("called customer",)
    assert updated.updated_at > doc.updated_at
    for f in fields(doc):
        if f.name in ("notes", "updated_at"):
            continue
        assert getattr(updated, f.name) == getattr(doc, f.name)
    assert service.require(doc.document_id) == updated


def test_updated_at_moves_forward_when_clock_advances(container, clock):
    service = container.document_service
    doc = _create(service)

    clock.advance(hours=2)
    updated = service.update(doc.document_id, assigned_to="John Doe", collection_date=date(2024, 11, 21))

    assert updated.updated_at == clock.current
    assert updated.collection_date == date(2024, 11, 21)


def test_update_rejects_identity_and_unknown_fields(container):
    service = container.document_service
    doc = _create(service)

    with pytest.raises(ValidationError, match="document_number"):
        service.update(doc.document_id, document_number="X/1")
    with pytest.raises(ValidationError, match="document_id"):
        service.update(doc.document_id, document_id="X")
    with pytest.raises(ValidationError, match="Unknown field"):
        service.update(doc.document_id, colour="red")


def test_update_rejects_malformed_notes_and_files(container):
    service = container.document_service
    doc = _create(service)

    with pytest.raises(ValidationError, match="notes"):
        service.update(doc.document_id, notes="call back")
    with pytest.raises(ValidationError, match="notes"):
        service.update(doc.document_id, notes=["ok", 3])
    with pytest.raises(ValidationError, match="files"):
        service.update(doc.document_id, files=[{"file_id": "FILE1", "name": "deed.pdf"}])

    assert service.require(doc.document_id) == doc


def test_update_status_allows_any_jump_by_default(container):
    service = container.document_service
    doc = _create(service)

    delivered = service.update_status(doc.document_id, "delivered")
    back = service.update_status(doc.document_id, DocumentStatus.COLLECTED)

    assert delivered.status == DocumentStatus.DELIVERED
    assert back.status == DocumentStatus.COLLECTED


def test_update_status_rejects_unknown_value(container):
    doc = _create(container.document_service)
    with pytest.raises(ValidationError):
        container.document_service.update_status(doc.document_id, "archived")


def test_add_note_appends_in_order(container):
    service = container.document_service
    doc = _create(service)

    service.add_note(doc.document_id, "first")
    service.add_note(doc.document_id, "first")
    result = service.add_note(doc.document_id, "second")

    assert result.notes == ("first", "first", "second")


def test_attach_file_records_type_from_content(container, fixed_now):
    service = container.document_service
    doc = _create(service)

    photo = service.attach_file(doc.document_id, name="site.jpg", url="/uploads/site.jpg", content_type="image/jpeg")
    pdf = service.attach_file(
        doc.document_id, name="deed.pdf", url="/uploads/deed.pdf", content_type="application/pdf", uploaded_by="Jane"
    )

    assert photo.file_type == FileType.PHOTO
    assert pdf.file_type == FileType.DOCUMENT
    assert pdf.uploaded_by == "Jane"
    assert photo.uploaded_at == fixed_now
    assert service.require(doc.document_id).files == (photo, pdf)


def test_missing_document_raises_not_found(container):
    service = container.document_service

    assert service.get("DOC404") is None
    with pytest.raises(NotFoundError):
        service.require("DOC404")
    with pytest.raises(NotFoundError):
        service.update("DOC404", notes=["x"])
    with pytest.raises(NotFoundError):
        service.add_note("DOC404", "x")
    with pytest.raises(NotFoundError):
        service.delete("DOC404")


def test_delete_document_leaves_directory_links(container):
    service = container.document_service
    doc = _create(service)

    service.delete(doc.document_id)

    assert service.get(doc.document_id) is None
    assert container.customer_directory.get_by_phone("+91111").documents == (doc.document_id,)
    assert container.builder_directory.get_by_name("B Corp").documents == (doc.document_id,)


def test_deleting_customer_keeps_documents(container):
    service = container.document_service
    doc = _create(service)
    customer = container.customer_directory.get_by_phone("+91111")

    container.customer_directory.delete(customer.customer_id)

    kept = service.require(doc.document_id)
    assert kept == doc


def test_directory_edits_do_not_rewrite_documents(container):
    doc = _create(container.document_service)
    customer = container.customer_directory.get_by_phone("+91111")

    container.customer_directory.update(customer.customer_id, name="Someone Else")

    assert container.document_service.require(doc.document_id).customer_name == "A"


def test_three_agreements_end_to_end(container):
    service = container.document_service

    docs = [_create(service) for _ in range(3)]

    assert [d.document_number for d in docs] == ["AGREEMENT/2024/001", "AGREEMENT/2024/002", "AGREEMENT/2024/003"]
    customers = container.customer_directory.list_all()
    builders = container.builder_directory.list_all()
    assert len(customers) == 1 and len(customers[0].documents) == 3
    assert len(builders) == 1 and len(builders[0].documents) == 3


def test_list_documents_filters(container):
    service = container.document_service
    a = _create(service, customer_name="Rajesh Kumar", assigned_to="John Doe")
    b = _create(service, document_type="sale_deed", customer_phone="+91222", builder_name="XYZ Developers")
    service.update_status(b.document_id, "collected")

    assert service.list_documents(status="collected") == [service.require(b.document_id)]
    assert service.list_documents(document_type="agreement") == [a]
    assert service.list_documents(search="rajesh") == [a]
    assert service.list_documents(search="xyz") == [service.require(b.document_id)]
    assert service.list_documents(search="SALEDEED/") == [service.require(b.document_id)]
    assert service.list_documents(assigned_to="John Doe") == [a]
    assert len(service.list_documents()) == 2


def test_stats_groups_statuses(container):
    service = container.document_service
    docs = [_create(service) for _ in range(4)]
    service.update_status(docs[1].document_id, "data_entry_pending")
    service.update_status(docs[2].document_id, "registration_pending")
    service.update_status(docs[3].document_id, "delivered")

    stats = service.stats()

    assert (stats.total, stats.pending_collection, stats.in_progress, stats.completed) == (4, 1, 2, 1)


class ExplodingBuilderRepository(InMemoryBuilderRepository):
    def add(self, builder) -> None:
        raise RuntimeError("disk full")


def test_failed_builder_write_rolls_back_customer_and_document(fixed_now):
    documents = InMemoryDocumentRepository()
    customers = InMemoryCustomerRepository()
    builders = ExplodingBuilderRepository()
    service = DocumentWorkflowService(
        documents,
        CustomerDirectory(customers, clock=lambda: fixed_now),
        BuilderDirectory(builders, clock=lambda: fixed_now),
        transaction=InMemoryUnitOfWork([documents, customers, builders]),
        clock=lambda: fixed_now,
    )

    with pytest.raises(RuntimeError):
        _create(service)

    assert documents.list_all() == []
    assert customers.list_all() == []
    assert customers.next_id() == "CUST001"
