"""Domain services package."""

from .crud import CrudService

__all__ = ["CrudService"]
