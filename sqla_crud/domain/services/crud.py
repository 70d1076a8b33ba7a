"""Generic CRUD service contract.

CrudService[E, ID, D, R] exposes the operations every concrete CRUD service
offers, where E is the entity type, ID its primary key type, D the DTO type
handed to callers and R a repository with both persistence capabilities.

Every operation returns a Result. Failures are reported through the envelope,
never raised past the boundary; "not found" is a success carrying None.
save / delete / delete_all run inside a transaction and roll back on failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Sequence, TypeVar

from sqla_crud.domain.models.paging import Page, PageRequest, Sort
from sqla_crud.domain.models.result import Result
from sqla_crud.domain.repositories.base import CrudRepository
from sqla_crud.domain.specification import UNFILTERED, Specification

E = TypeVar("E")
ID = TypeVar("ID")
D = TypeVar("D")
R = TypeVar("R", bound=CrudRepository[Any, Any])


class CrudService(ABC, Generic[E, ID, D, R]):
    """Abstract CRUD interface over a repository and an entity/DTO pair."""

    @abstractmethod
    async def find_all(
        self,
        sort: Sort,
        spec: Specification[E] | None = UNFILTERED,
    ) -> Result[list[D]]:
        """Return every matching record as DTOs, ordered by sort.

        spec may be UNFILTERED (or None) to return every record. sort is
        mandatory; use Sort.unsorted() for storage order.
        """

    @abstractmethod
    async def retrieve(
        self,
        page_request: PageRequest,
        spec: Specification[E] | None = UNFILTERED,
    ) -> Result[Page[D]]:
        """Return one page of matching records as DTOs."""

    @abstractmethod
    async def find_by_id(self, id: ID) -> Result[D]:
        """Return the record with the given id, or an empty success."""

    @abstractmethod
    async def find_one(self, spec: Specification[E]) -> Result[D]:
        """Return the single record matching spec, or an empty success."""

    @abstractmethod
    async def save(self, dto: D) -> Result[bool]:
        """Insert or update the record described by dto."""

    @abstractmethod
    async def delete(self, id: ID) -> Result[bool]:
        """Delete the record with the given id."""

    @abstractmethod
    async def delete_all(self, ids: Sequence[ID]) -> Result[bool]:
        """Delete every listed record in one transaction."""

    @abstractmethod
    def convert_entity_to_dto(self, entity: E) -> D:
        """Structural entity → DTO conversion. Raises MappingError."""

    @abstractmethod
    def convert_dto_to_entity(self, dto: D) -> E:
        """Structural DTO → entity conversion. Raises MappingError."""
