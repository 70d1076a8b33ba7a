"""Uniform success / failure envelope returned by every CRUD operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from sqla_crud.domain.errors import CrudError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a success value or a CrudError.

    A success may carry None: that is how "no value" lookups are reported.
    Build instances with ok() / fail() rather than the constructor.
    """

    value: T | None = None
    error: CrudError | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> Result[T]:
        return cls(value=value)

    @classmethod
    def fail(cls, error: CrudError) -> Result[T]:
        return cls(error=error)

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def is_empty(self) -> bool:
        """True for a success that carries no value."""
        return self.success and self.value is None

    def unwrap(self) -> T | None:
        """Return the value, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value

    def map(self, fn: Callable[[T], U]) -> Result[U]:
        """Transform a present success value; failures and empty results pass through."""
        if self.error is not None:
            return Result.fail(self.error)
        if self.value is None:
            return Result.ok(None)
        return Result.ok(fn(self.value))
