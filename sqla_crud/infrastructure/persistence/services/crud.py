"""CrudService implementation on top of a CrudRepository.

Concrete services subclass SimpleCrudService and hand-write the two
conversion hooks for their entity / DTO pair:

    class MemberService(SimpleCrudService[Member, int, MemberDto, SqlRepository[Member, int]]):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(Member, SqlRepository(session, Member))

        @staticmethod
        def _to_dto(row: Member) -> MemberDto:
            return MemberDto(id=row.id, name=row.name)

        @staticmethod
        def _to_entity(dto: MemberDto) -> Member:
            return Member(id=dto.id, name=dto.name)

Error policy: every operation catches CrudError and SQLAlchemyError at its
boundary and returns Result.fail(); SQLAlchemy errors are wrapped in
PersistenceError. Mutations run in a transaction block, so the rollback has
already happened by the time the failure is returned.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any, Awaitable, Callable, Sequence, TypeVar

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from sqla_crud.domain.errors import CrudError, InvalidArgumentError, MappingError, PersistenceError
from sqla_crud.domain.models.paging import Page, PageRequest, Sort
from sqla_crud.domain.models.result import Result
from sqla_crud.domain.repositories.base import CrudRepository
from sqla_crud.domain.services.crud import CrudService
from sqla_crud.domain.specification import UNFILTERED, Specification, or_unfiltered

E = TypeVar("E")
ID = TypeVar("ID")
D = TypeVar("D")
R = TypeVar("R", bound=CrudRepository[Any, Any])
T = TypeVar("T")

_MAPPING_ERRORS = (ValidationError, TypeError, ValueError, AttributeError, KeyError)


def _require(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")


class SimpleCrudService(CrudService[E, ID, D, R]):
    def __init__(
        self,
        entity_class: type[E],
        repository: R,
        logger: logging.Logger | None = None,
    ) -> None:
        self._entity_class = entity_class
        self._repository = repository
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    @property
    def repository(self) -> R:
        return self._repository

    @property
    def _name(self) -> str:
        return self._entity_class.__name__

    # --- conversion hooks ---

    @staticmethod
    @abstractmethod
    def _to_dto(entity: Any) -> Any:
        """Field-for-field entity → DTO copy for this service's pair."""

    @staticmethod
    @abstractmethod
    def _to_entity(dto: Any) -> Any:
        """Field-for-field DTO → entity copy for this service's pair."""

    def convert_entity_to_dto(self, entity: E) -> D:
        try:
            return self._to_dto(entity)
        except _MAPPING_ERRORS as exc:
            raise MappingError(f"[{self._name}] cannot convert entity to DTO: {exc}") from exc

    def convert_dto_to_entity(self, dto: D) -> E:
        try:
            return self._to_entity(dto)
        except _MAPPING_ERRORS as exc:
            raise MappingError(f"[{self._name}] cannot convert DTO to entity: {exc}") from exc

    # --- reads ---

    async def find_all(
        self,
        sort: Sort,
        spec: Specification[E] | None = UNFILTERED,
    ) -> Result[list[D]]:
        spec = or_unfiltered(spec)
        self._logger.debug("[%s] find all [spec: %r, sort: %s]", self._name, spec, sort)

        async def _find_all() -> list[D]:
            _require(sort, "sort")
            if spec.is_unfiltered:
                entities = await self._repository.find_all(sort)
            else:
                entities = await self._repository.find_all_by(spec, sort)
            return [self.convert_entity_to_dto(e) for e in entities]

        return await self._run("find all", _find_all)

    async def retrieve(
        self,
        page_request: PageRequest,
        spec: Specification[E] | None = UNFILTERED,
    ) -> Result[Page[D]]:
        spec = or_unfiltered(spec)
        self._logger.debug(
            "[%s] retrieve [spec: %r, pageable: %s]", self._name, spec, page_request
        )

        async def _retrieve() -> Page[D]:
            _require(page_request, "page_request")
            if spec.is_unfiltered:
                page = await self._repository.find_page(page_request)
            else:
                page = await self._repository.find_page_by(spec, page_request)
            return page.map(self.convert_entity_to_dto)

        return await self._run("retrieve", _retrieve)

    async def find_by_id(self, id: ID) -> Result[D]:
        self._logger.debug("[%s] find by id [id: %s]", self._name, id)

        async def _find_by_id() -> D | None:
            _require(id, "id")
            entity = await self._repository.get_by_id(id)
            if entity is None:
                self._logger.debug("[%s] no result [id: %s]", self._name, id)
                return None
            return self.convert_entity_to_dto(entity)

        return await self._run("find by id", _find_by_id)

    async def find_one(self, spec: Specification[E]) -> Result[D]:
        self._logger.debug("[%s] find one [spec: %r]", self._name, spec)

        async def _find_one() -> D | None:
            _require(spec, "spec")
            entity = await self._repository.find_one(spec)
            if entity is None:
                self._logger.debug("[%s] no result [spec: %r]", self._name, spec)
                return None
            return self.convert_entity_to_dto(entity)

        return await self._run("find one", _find_one)

    # --- mutations ---

    async def save(self, dto: D) -> Result[bool]:
        self._logger.debug("[%s] save", self._name)

        async def _save() -> bool:
            _require(dto, "dto")
            entity = self.convert_dto_to_entity(dto)
            async with self._repository.transaction():
                await self._repository.save(entity)
            return True

        return await self._run("save", _save)

    async def delete(self, id: ID) -> Result[bool]:
        self._logger.debug("[%s] delete by id [id: %s]", self._name, id)

        async def _delete() -> bool:
            _require(id, "id")
            async with self._repository.transaction():
                await self._repository.delete_by_id(id)
            return True

        return await self._run("delete", _delete)

    async def delete_all(self, ids: Sequence[ID]) -> Result[bool]:
        self._logger.debug("[%s] delete all by ids [ids: %s]", self._name, ids)

        async def _delete_all() -> bool:
            _require(ids, "ids")
            async with self._repository.transaction():
                await self._repository.delete_all_by_id(list(ids))
            return True

        return await self._run("delete all", _delete_all)

    async def _run(self, operation: str, action: Callable[[], Awaitable[T]]) -> Result[T]:
        try:
            return Result.ok(await action())
        except CrudError as exc:
            self._logger.warning("[%s] %s failed: %s", self._name, operation, exc)
            return Result.fail(exc)
        except SQLAlchemyError as exc:
            self._logger.warning("[%s] %s failed: %s", self._name, operation, exc)
            return Result.fail(
                PersistenceError(f"[{self._name}] {operation} failed: {exc}", cause=exc)
            )
