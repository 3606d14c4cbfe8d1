from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, ContextManager, Optional

from .builders.memory_builder_repository import InMemoryBuilderRepository
from .builders.mysql_builder_repository import MySQLBuilderRepository
from .builders.repository import BuilderRepository
from .builders.service import BuilderDirectory
from .common.datetime_utils import now_local
from .common.unit_of_work import InMemoryUnitOfWork
from .core.exceptions import ValidationError
from .customers.memory_customer_repository import InMemoryCustomerRepository
from .customers.mysql_customer_repository import MySQLCustomerRepository
from .customers.repository import CustomerRepository
from .customers.service import CustomerDirectory
from .database.connection import DatabaseConnection
from .documents.factory import WorkflowPolicyFactory
from .documents.memory_document_repository import InMemoryDocumentRepository
from .documents.mysql_document_repository import MySQLDocumentRepository
from .documents.repository import DocumentRepository
from .documents.service import DocumentWorkflowService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    documents_repo: DocumentRepository
    customers_repo: CustomerRepository
    builders_repo: BuilderRepository

    customer_directory: CustomerDirectory
    builder_directory: BuilderDirectory
    document_service: DocumentWorkflowService


def build_container(
    *,
    storage_backend: str = "memory",
    db_config: Optional[dict] = None,
    document_numbering: str = "count",
    strict_status_transitions: bool = False,
    builder_name_case_sensitive: bool = True,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    """Wire repositories and services for one application/session lifetime."""

    backend = (storage_backend or "memory").strip().lower()
    conn: Optional[DatabaseConnection] = None
    transaction: Callable[[], ContextManager[Any]]

    if backend == "memory":
        documents_repo = InMemoryDocumentRepository()
        customers_repo = InMemoryCustomerRepository()
        builders_repo = InMemoryBuilderRepository()
        transaction = InMemoryUnitOfWork([documents_repo, customers_repo, builders_repo])
    elif backend == "mysql":
        if not db_config:
            raise ValidationError("DB_CONFIG is required for the mysql storage backend")
        conn = DatabaseConnection.from_dict(db_config)
        documents_repo = MySQLDocumentRepository(conn)
        customers_repo = MySQLCustomerRepository(conn)
        builders_repo = MySQLBuilderRepository(conn)
        transaction = conn.transaction
    else:
        raise ValidationError(f"Unknown storage backend: {storage_backend}")

    factory = WorkflowPolicyFactory()
    customer_directory = CustomerDirectory(customers_repo, clock=clock)
    builder_directory = BuilderDirectory(builders_repo, case_sensitive=builder_name_case_sensitive, clock=clock)
    document_service = DocumentWorkflowService(
        documents_repo,
        customer_directory,
        builder_directory,
        numbering=factory.numbering(document_numbering),
        transitions=factory.transitions(strict=strict_status_transitions),
        transaction=transaction,
        clock=clock,
    )

    return Container(
        conn=conn,
        documents_repo=documents_repo,
        customers_repo=customers_repo,
        builders_repo=builders_repo,
        customer_directory=customer_directory,
        builder_directory=builder_directory,
        document_service=document_service,
    )
