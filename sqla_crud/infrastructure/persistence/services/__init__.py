"""Concrete CRUD service implementations."""

from .crud import SimpleCrudService

__all__ = ["SimpleCrudService"]
