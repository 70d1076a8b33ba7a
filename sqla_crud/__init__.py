"""Generic async CRUD services over SQLAlchemy repositories.

Import from this package to avoid coupling application code to individual
module paths.
"""

from sqla_crud.domain.errors import (
    CrudError,
    InvalidArgumentError,
    MappingError,
    PersistenceError,
)
from sqla_crud.domain.models import Direction, Order, Page, PageRequest, Result, Sort
from sqla_crud.domain.repositories import CrudRepository, KeyedRepository, SpecificationExecutor
from sqla_crud.domain.services import CrudService
from sqla_crud.domain.specification import UNFILTERED, Specification
from sqla_crud.infrastructure.persistence import SimpleCrudService, SqlRepository, transactional

__all__ = [
    # results and errors
    "Result",
    "CrudError",
    "InvalidArgumentError",
    "MappingError",
    "PersistenceError",
    # paging
    "Direction",
    "Order",
    "Page",
    "PageRequest",
    "Sort",
    # querying
    "Specification",
    "UNFILTERED",
    # contracts
    "CrudRepository",
    "KeyedRepository",
    "SpecificationExecutor",
    "CrudService",
    # implementations
    "SqlRepository",
    "SimpleCrudService",
    "transactional",
]
