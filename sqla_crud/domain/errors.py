"""Error taxonomy carried by failed results.

"Not found" is not an error: lookups that miss succeed with a None value.
"""

from __future__ import annotations


class CrudError(Exception):
    """Base class for every failure a CRUD service reports."""


class InvalidArgumentError(CrudError):
    """A mandatory argument was missing or referenced an unknown attribute."""


class MappingError(CrudError):
    """Conversion between an entity and its DTO could not complete."""


class PersistenceError(CrudError):
    """The underlying store rejected or failed an operation.

    cause holds the original driver / ORM exception.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause
