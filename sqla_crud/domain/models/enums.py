"""Domain enumerations.

String-valued enums use the str mixin so they serialize cleanly and remain
comparable to plain strings.
"""

from enum import Enum


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def is_ascending(self) -> bool:
        return self is Direction.ASC

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        """Case-insensitive lookup ("ASC", "desc", ...)."""
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(
                f"Invalid value '{value}' for orders given; has to be either 'desc' or 'asc'"
            ) from None
