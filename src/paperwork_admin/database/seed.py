from __future__ import annotations

import logging
from datetime import date, datetime

from ..core.enums import DocumentStatus, DocumentType
from ..documents.model import Document

logger = logging.getLogger(__name__)

DEMO_CUSTOMERS = (
    {
        "customer_id": "CUST001",
        "name": "Rajesh Kumar",
        "phone": "+91 9876543210",
        "email": "rajesh@email.com",
        "address": "H-123, Sector 15, Gurgaon, Haryana - 122001",
        "documents": ("DOC001",),
        "created_at": datetime(2024, 9, 15),
    },
    {
        "customer_id": "CUST002",
        "name": "Priya Sharma",
        "phone": "+91 9876543211",
        "email": "priya.sharma@email.com",
        "address": "Flat 4B, Tower 2, Green Valley, Noida, UP - 201301",
        "documents": ("DOC002",),
        "created_at": datetime(2024, 10, 10),
    },
)

DEMO_BUILDERS = (
    {
        "builder_id": "BLD001",
        "name": "ABC Properties Ltd.",
        "contact_person": "Mr. Rajesh Gupta",
        "phone": "+91 9876543220",
        "email": "contact@abcproperties.com",
        "address": "Tower A, Business Park, Sector 62, Gurgaon, Haryana - 122001",
        "registration_number": "REG/2020/001234",
        "documents": ("DOC001",),
        "created_at": datetime(2024, 8, 15),
    },
    {
        "builder_id": "BLD002",
        "name": "XYZ Developers",
        "contact_person": "Ms. Priya Patel",
        "phone": "+91 9876543221",
        "email": "info@xyzdev.com",
        "address": "Plot 45, Industrial Area, Noida, UP - 201301",
        "registration_number": "REG/2021/005678",
        "documents": ("DOC002",),
        "created_at": datetime(2024, 9, 10),
    },
)

DEMO_DOCUMENTS = (
    Document(
        document_id="DOC001",
        document_number="AGR/2024/001",
        document_type=DocumentType.AGREEMENT,
        status=DocumentStatus.REGISTERED,
        customer_name="Rajesh Kumar",
        customer_phone="+91 9876543210",
        customer_email="rajesh@email.com",
        builder_name="ABC Properties Ltd.",
        property_details="Plot No. 123, Sector 15, Gurgaon",
        assigned_to="John Doe",
        collection_date=date(2024, 11, 1),
        data_entry_date=date(2024, 11, 3),
        registration_date=date(2024, 11, 10),
        notes=("Initial collection completed", "All documents verified"),
        created_at=datetime(2024, 10, 28),
        updated_at=datetime(2024, 11, 10),
    ),
    Document(
        document_id="DOC002",
        document_number="LEASE/2024/002",
        document_type=DocumentType.LEASE_DEED,
        status=DocumentStatus.DATA_ENTRY_PENDING,
        customer_name="Priya Sharma",
        customer_phone="+91 9876543211",
        builder_name="XYZ Developers",
        property_details="Flat 4B, Tower 2, Green Valley",
        assigned_to="Jane Smith",
        collection_date=date(2024, 11, 15),
        notes=("Documents collected from field",),
        created_at=datetime(2024, 11, 12),
        updated_at=datetime(2024, 11, 15),
    ),
)


def seed_demo_data(container) -> int:
    """Load the demo directory and documents; existing ids are left alone.

    Returns the number of records written.
    """

    written = 0
    for data in DEMO_CUSTOMERS:
        if container.customer_directory.get_by_id(data["customer_id"]) is None:
            container.customer_directory.create(**data)
            written += 1

    for data in DEMO_BUILDERS:
        if container.builder_directory.get_by_id(data["builder_id"]) is None:
            container.builder_directory.create(**data)
            written += 1

    # Stored as-is: demo documents carry historical statuses and numbers.
    for document in DEMO_DOCUMENTS:
        if container.documents_repo.get_by_id(document.document_id) is None:
            container.documents_repo.add(document)
            written += 1

    logger.info("Demo seed wrote %d records", written)
    return written
