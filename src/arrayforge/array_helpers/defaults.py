"""Library-wide default values.

Centralizes the constants shared by several helpers so that path notation
and sort orders stay consistent across the package.
"""
from typing import Final, Literal, TypeAlias

__all__ = [
    "ASCENDING",
    "DEFAULT_PATH_SEPARATOR",
    "DESCENDING",
    "SortOrder",
]

SortOrder: TypeAlias = Literal["asc", "desc"]

DEFAULT_PATH_SEPARATOR: Final[str] = "/"
ASCENDING: Final[SortOrder] = "asc"
DESCENDING: Final[SortOrder] = "desc"
