"""Repository capability interfaces.

A CRUD service needs two narrow capabilities from its repository:

  - KeyedRepository: basic persistence keyed by primary key, plus full scans
    (sorted or paged) and a scoped transaction block.
  - SpecificationExecutor: queries driven by a composable Specification,
    optionally sorted or paged.

CrudRepository requires both. Concrete implementations live in
sqla_crud/infrastructure/persistence/.

Design notes:
  - All methods are async to accommodate async database drivers.
  - E is the persistent entity type (an ORM class), never a DTO.
  - Lookups that miss return None; they never raise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Generic, Sequence, TypeVar

from sqla_crud.domain.models.paging import Page, PageRequest, Sort
from sqla_crud.domain.specification import Specification

E = TypeVar("E")
ID = TypeVar("ID")


class KeyedRepository(ABC, Generic[E, ID]):
    """Persistence operations addressed by primary key."""

    @abstractmethod
    async def get_by_id(self, id: ID) -> E | None:
        """Return the entity with the given primary key, or None if not found."""

    @abstractmethod
    async def save(self, entity: E) -> E:
        """Insert or update depending on whether the identity already exists."""

    @abstractmethod
    async def delete_by_id(self, id: ID) -> None:
        """Remove the entity with the given primary key; a missing id is a no-op."""

    @abstractmethod
    async def delete_all_by_id(self, ids: Sequence[ID]) -> None:
        """Remove every listed entity with a single batch statement."""

    @abstractmethod
    async def find_all(self, sort: Sort) -> list[E]:
        """Return every entity, ordered by sort."""

    @abstractmethod
    async def find_page(self, page_request: PageRequest) -> Page[E]:
        """Return one page of all entities."""

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored entities."""

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Scoped transaction: commit on clean exit, roll back on error."""


class SpecificationExecutor(ABC, Generic[E]):
    """Queries driven by a Specification."""

    @abstractmethod
    async def find_one(self, spec: Specification[E]) -> E | None:
        """Return the single match, None if nothing matches.

        Raises if more than one entity matches.
        """

    @abstractmethod
    async def find_all_by(self, spec: Specification[E], sort: Sort) -> list[E]:
        """Return every match, ordered by sort."""

    @abstractmethod
    async def find_page_by(self, spec: Specification[E], page_request: PageRequest) -> Page[E]:
        """Return one page of matches."""

    @abstractmethod
    async def count_by(self, spec: Specification[E]) -> int:
        """Return the number of matches."""


class CrudRepository(KeyedRepository[E, ID], SpecificationExecutor[E], ABC):
    """Both capabilities together: what a CRUD service is parameterized over."""
