"""Persistence package.

Exports the SQLAlchemy repository, the CRUD service built on it, and the
scoped transaction helper both use.
"""

from sqla_crud.infrastructure.persistence.repositories import SqlRepository
from sqla_crud.infrastructure.persistence.services import SimpleCrudService
from sqla_crud.infrastructure.persistence.transaction import transactional

__all__ = [
    "SimpleCrudService",
    "SqlRepository",
    "transactional",
]
