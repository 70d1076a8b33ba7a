"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in sqla_crud/infrastructure/persistence/.
"""

from .base import CrudRepository, KeyedRepository, SpecificationExecutor

__all__ = [
    "CrudRepository",
    "KeyedRepository",
    "SpecificationExecutor",
]
