"""Composable query specifications.

A Specification is a small predicate tree. Leaves (Where) hold a callable that
receives the entity class and returns a boolean SQL expression; inner nodes
combine children with AND / OR / NOT. The tree itself is framework-neutral:
repositories compile it into whatever their query layer understands.

"No filter" is an explicit variant, UNFILTERED, rather than None. It is the
identity for ``&`` and absorbs ``|``:

    active = Specification.equals("status", "active")
    recent = Specification.where(lambda m: m.created_at >= cutoff, "created recently")

    await service.find_all(Sort.by("name"), active & ~recent)
    await service.find_all(Sort.by("name"))  # UNFILTERED
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

E = TypeVar("E")


class Specification(Generic[E]):
    """Base class for every node of a predicate tree."""

    @property
    def is_unfiltered(self) -> bool:
        return False

    def __and__(self, other: Specification[E]) -> Specification[E]:
        if other.is_unfiltered:
            return self
        return AndSpecification((self, other))

    def __or__(self, other: Specification[E]) -> Specification[E]:
        if other.is_unfiltered:
            return other
        return OrSpecification((self, other))

    def __invert__(self) -> Specification[E]:
        return NotSpecification(self)

    @staticmethod
    def where(build: Callable[[type], Any], description: str | None = None) -> Specification[Any]:
        return Where(build, description)

    @staticmethod
    def equals(attribute: str, value: Any) -> Specification[Any]:
        return Where(
            lambda entity: getattr(entity, attribute) == value,
            f"{attribute} = {value!r}",
        )

    @staticmethod
    def all_of(*specs: Specification[E]) -> Specification[E]:
        result: Specification[E] = UNFILTERED
        for spec in specs:
            result = result & spec
        return result


class Unfiltered(Specification[Any]):
    """Matches every row."""

    _instance: Unfiltered | None = None

    def __new__(cls) -> Unfiltered:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_unfiltered(self) -> bool:
        return True

    def __and__(self, other: Specification[Any]) -> Specification[Any]:
        return other

    def __or__(self, other: Specification[Any]) -> Specification[Any]:
        return self

    def __repr__(self) -> str:
        return "UNFILTERED"


UNFILTERED = Unfiltered()


@dataclass(frozen=True, eq=False)
class Where(Specification[E]):
    build: Callable[[type], Any]
    description: str | None = None

    def __repr__(self) -> str:
        return f"Where({self.description or getattr(self.build, '__name__', 'predicate')})"


@dataclass(frozen=True, eq=False)
class AndSpecification(Specification[E]):
    parts: tuple[Specification[E], ...]

    def __repr__(self) -> str:
        return "(" + " AND ".join(repr(p) for p in self.parts) + ")"


@dataclass(frozen=True, eq=False)
class OrSpecification(Specification[E]):
    parts: tuple[Specification[E], ...]

    def __repr__(self) -> str:
        return "(" + " OR ".join(repr(p) for p in self.parts) + ")"


@dataclass(frozen=True, eq=False)
class NotSpecification(Specification[E]):
    part: Specification[E]

    def __repr__(self) -> str:
        return f"NOT {self.part!r}"


def or_unfiltered(spec: Specification[E] | None) -> Specification[E]:
    """Normalize an optional predicate: None means UNFILTERED."""
    return UNFILTERED if spec is None else spec
