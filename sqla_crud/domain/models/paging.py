"""Sorting and pagination value objects.

These are pure domain objects; the SQLAlchemy repository translates them into
ORDER BY / OFFSET / LIMIT clauses. Page numbers are zero-based.
"""

from __future__ import annotations

from math import ceil
from typing import Callable, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .enums import Direction

T = TypeVar("T")
U = TypeVar("U")


class Order(BaseModel):
    """One ORDER BY term: a mapped attribute name and a direction."""

    model_config = ConfigDict(frozen=True)

    attribute: str = Field(min_length=1)
    direction: Direction = Direction.ASC
    ignore_case: bool = False

    @classmethod
    def asc(cls, attribute: str) -> Order:
        return cls(attribute=attribute, direction=Direction.ASC)

    @classmethod
    def desc(cls, attribute: str) -> Order:
        return cls(attribute=attribute, direction=Direction.DESC)

    def with_ignore_case(self) -> Order:
        return self.model_copy(update={"ignore_case": True})


class Sort(BaseModel):
    """Ordered collection of Order terms. An empty Sort means "unsorted"."""

    model_config = ConfigDict(frozen=True)

    orders: tuple[Order, ...] = ()

    @classmethod
    def by(cls, *attributes: str, direction: Direction = Direction.ASC) -> Sort:
        return cls(orders=tuple(Order(attribute=a, direction=direction) for a in attributes))

    @classmethod
    def unsorted(cls) -> Sort:
        return cls()

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)

    def ascending(self) -> Sort:
        return self._with_direction(Direction.ASC)

    def descending(self) -> Sort:
        return self._with_direction(Direction.DESC)

    def and_(self, other: Sort) -> Sort:
        return Sort(orders=self.orders + other.orders)

    def _with_direction(self, direction: Direction) -> Sort:
        return Sort(
            orders=tuple(o.model_copy(update={"direction": direction}) for o in self.orders)
        )

    def __str__(self) -> str:
        if not self.orders:
            return "UNSORTED"
        return ", ".join(f"{o.attribute}: {o.direction.value.upper()}" for o in self.orders)


class PageRequest(BaseModel):
    """Zero-based page index, page size and the sort applied before slicing."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1)
    sort: Sort = Field(default_factory=Sort.unsorted)

    @classmethod
    def of(cls, page: int, size: int, sort: Sort | None = None) -> PageRequest:
        return cls(page=page, size=size, sort=sort or Sort.unsorted())

    @property
    def offset(self) -> int:
        return self.page * self.size

    def next(self) -> PageRequest:
        return self.model_copy(update={"page": self.page + 1})

    def previous_or_first(self) -> PageRequest:
        return self.model_copy(update={"page": max(self.page - 1, 0)})

    def __str__(self) -> str:
        return f"Page request [number: {self.page}, size {self.size}, sort: {self.sort}]"


class Page(BaseModel, Generic[T]):
    """A slice of a larger result set plus the metadata needed to navigate it.

    size is the requested page size; number_of_elements is what the slice
    actually holds (smaller on the last page).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    content: list[T] = Field(default_factory=list)
    number: int = Field(ge=0)
    size: int = Field(ge=1)
    total_elements: int = Field(ge=0)

    @classmethod
    def of(cls, content: list[T], page_request: PageRequest, total_elements: int) -> Page[T]:
        return cls(
            content=content,
            number=page_request.page,
            size=page_request.size,
            total_elements=total_elements,
        )

    @property
    def total_pages(self) -> int:
        return ceil(self.total_elements / self.size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    def map(self, fn: Callable[[T], U]) -> Page[U]:
        """Convert every item, keeping the page metadata."""
        return Page(
            content=[fn(item) for item in self.content],
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
        )
