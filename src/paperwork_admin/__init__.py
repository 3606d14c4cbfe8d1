"""Paperwork Admin package.

Feature modules (documents, customers, builders) each follow the same
layering: frozen dataclass models, Protocol repositories with in-memory and
MySQL implementations, use-case services and a thin Flask controller.
"""
