"""Error kind and not-found marker shared by all array helpers."""
from __future__ import annotations

from typing import Final

__all__ = ["InvalidArgumentError", "NOT_FOUND"]


class InvalidArgumentError(TypeError, ValueError):
    """Raised when a helper receives an argument it cannot work with.

    Subclasses both TypeError and ValueError: wrong container types and
    out-of-domain values (e.g. a zero step) are reported with one kind,
    while code catching the builtin exceptions keeps working.
    """


class _NotFoundType:
    """Type of the NOT_FOUND singleton.

    Distinguishes "no match" from legitimate falsy row values such as
    None, False, or an empty dict.
    """
    _instance: _NotFoundType | None = None

    def __new__(cls) -> _NotFoundType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "NOT_FOUND"

    def __copy__(self) -> _NotFoundType:
        return self

    def __deepcopy__(self, memo: dict) -> _NotFoundType:
        return self


NOT_FOUND: Final = _NotFoundType()
