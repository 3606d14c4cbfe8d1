"""Drive the service layer directly, without Flask.

Controllers stay thin; the document workflow and directory sync live in the services.
"""

from paperwork_admin.container import build_container


def main():
    container = build_container(storage_backend="memory")
    docs = container.document_service

    first = docs.create(
        document_type="sale_deed",
        customer_name="Anita Verma",
        customer_phone="+91 9811122233",
        builder_name="Sunrise Estates",
        property_details="Plot 7, Sector 21, Faridabad",
    )
    second = docs.create(
        document_type="sale_deed",
        customer_name="Anita Verma",
        customer_phone="+91 9811122233",
        builder_name="Sunrise Estates",
        property_details="Plot 8, Sector 21, Faridabad",
    )
    docs.update_status(first.document_id, "collected")
    docs.add_note(first.document_id, "Originals received at the office")

    print(first.document_number, second.document_number)
    print(container.customer_directory.get_by_phone("+91 9811122233"))
    print(container.builder_directory.get_by_name("Sunrise Estates"))
    print(docs.stats())


if __name__ == "__main__":
    main()
