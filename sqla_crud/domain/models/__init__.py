"""Domain model package.

Value objects shared by the repository and service contracts. None of them
depend on SQLAlchemy.
"""

from .enums import Direction
from .paging import Order, Page, PageRequest, Sort
from .result import Result

__all__ = [
    "Direction",
    "Order",
    "Page",
    "PageRequest",
    "Result",
    "Sort",
]
