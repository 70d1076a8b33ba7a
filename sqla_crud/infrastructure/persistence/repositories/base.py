"""SQLAlchemy implementation of CrudRepository for any mapped entity."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, and_, delete, func, inspect, not_, or_, select, true
from sqlalchemy.ext.asyncio import AsyncSession

from sqla_crud.domain.errors import InvalidArgumentError
from sqla_crud.domain.models.paging import Page, PageRequest, Sort
from sqla_crud.domain.repositories.base import CrudRepository
from sqla_crud.domain.specification import (
    AndSpecification,
    NotSpecification,
    OrSpecification,
    Specification,
    Where,
)
from sqla_crud.infrastructure.persistence.transaction import transactional

E = TypeVar("E")
ID = TypeVar("ID")


class SqlRepository(CrudRepository[E, ID], Generic[E, ID]):
    """Keyed and specification-driven persistence for one ORM entity class.

    The entity must map a single-column primary key. All statements run on
    the injected session; flushing happens inside save / delete so that
    constraint violations surface within the caller's transaction block.
    """

    def __init__(self, session: AsyncSession, entity_class: type[E]) -> None:
        mapper = inspect(entity_class)
        if len(mapper.primary_key) != 1:
            raise ValueError(
                f"{entity_class.__name__} must map exactly one primary key column, "
                f"found {len(mapper.primary_key)}"
            )
        self._session = session
        self._entity_class = entity_class
        self._mapper = mapper
        self._id_attribute = mapper.get_property_by_column(mapper.primary_key[0]).class_attribute

    @property
    def entity_class(self) -> type[E]:
        return self._entity_class

    @property
    def session(self) -> AsyncSession:
        return self._session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with transactional(self._session):
            yield

    # --- keyed persistence ---

    async def get_by_id(self, id: ID) -> E | None:
        return await self._session.get(self._entity_class, id)

    async def save(self, entity: E) -> E:
        merged = await self._session.merge(entity)
        await self._session.flush()
        return merged

    async def delete_by_id(self, id: ID) -> None:
        row = await self.get_by_id(id)
        if row is not None:
            await self._session.delete(row)
            await self._session.flush()

    async def delete_all_by_id(self, ids: Sequence[ID]) -> None:
        if not ids:
            return
        stmt = delete(self._entity_class).where(self._id_attribute.in_(list(ids)))
        await self._session.execute(stmt)

    async def find_all(self, sort: Sort) -> list[E]:
        return await self._fetch(select(self._entity_class), sort)

    async def find_page(self, page_request: PageRequest) -> Page[E]:
        return await self._fetch_page(select(self._entity_class), page_request)

    async def count(self) -> int:
        return await self._count(select(self._entity_class))

    # --- specification queries ---

    async def find_one(self, spec: Specification[E]) -> E | None:
        stmt = select(self._entity_class).where(self._predicate(spec))
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_all_by(self, spec: Specification[E], sort: Sort) -> list[E]:
        return await self._fetch(self._filtered(spec), sort)

    async def find_page_by(self, spec: Specification[E], page_request: PageRequest) -> Page[E]:
        return await self._fetch_page(self._filtered(spec), page_request)

    async def count_by(self, spec: Specification[E]) -> int:
        return await self._count(self._filtered(spec))

    # --- statement building ---

    def _filtered(self, spec: Specification[E]) -> Select:
        stmt = select(self._entity_class)
        if not spec.is_unfiltered:
            stmt = stmt.where(self._predicate(spec))
        return stmt

    def _predicate(self, spec: Specification[E]) -> Any:
        if spec.is_unfiltered:
            return true()
        if isinstance(spec, Where):
            try:
                return spec.build(self._entity_class)
            except AttributeError as exc:
                raise InvalidArgumentError(
                    f"Cannot apply {spec!r} to type '{self._entity_class.__name__}': {exc}"
                ) from exc
        if isinstance(spec, AndSpecification):
            return and_(*(self._predicate(p) for p in spec.parts))
        if isinstance(spec, OrSpecification):
            return or_(*(self._predicate(p) for p in spec.parts))
        if isinstance(spec, NotSpecification):
            return not_(self._predicate(spec.part))
        raise InvalidArgumentError(f"Unsupported specification type {type(spec).__name__}")

    def _order_by(self, sort: Sort) -> list[Any]:
        clauses = []
        for order in sort.orders:
            if order.attribute not in self._mapper.column_attrs:
                raise InvalidArgumentError(
                    f"No property '{order.attribute}' found for type "
                    f"'{self._entity_class.__name__}'"
                )
            column: Any = getattr(self._entity_class, order.attribute)
            if order.ignore_case:
                column = func.lower(column)
            clauses.append(column.asc() if order.direction.is_ascending else column.desc())
        return clauses

    async def _fetch(self, stmt: Select, sort: Sort) -> list[E]:
        result = await self._session.execute(stmt.order_by(*self._order_by(sort)))
        return list(result.scalars())

    async def _count(self, stmt: Select) -> int:
        count_stmt = select(func.count()).select_from(stmt.subquery())
        return (await self._session.execute(count_stmt)).scalar() or 0

    async def _fetch_page(self, stmt: Select, page_request: PageRequest) -> Page[E]:
        total = await self._count(stmt)
        paged = (
            stmt.order_by(*self._order_by(page_request.sort))
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        result = await self._session.execute(paged)
        return Page.of(list(result.scalars()), page_request, total)
