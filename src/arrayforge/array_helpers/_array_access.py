"""Internal primitives for treating mappings and sequences as one array type.

A "generic array" is either a Mapping (keys as given) or a non-string
Sequence (keys are positions). Every public helper goes through these
primitives so that presence checks, key lookup, and strict comparison
behave identically everywhere.
"""
from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping, Sequence
from typing import Any, Final, TypeAlias

from .errors import InvalidArgumentError

GenericArray: TypeAlias = Mapping[Any, Any] | Sequence[Any]

_MISSING: Final = object()  # private sentinel

_SCALAR_SEQUENCE_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray)


def _is_array(obj: Any) -> bool:
    """Check if obj can be used as a generic array."""
    if isinstance(obj, Mapping):
        return True
    return isinstance(obj, Sequence) and not isinstance(obj, _SCALAR_SEQUENCE_TYPES)


def _ensure_array(obj: Any, arg_name: str = "array") -> None:
    """Validate that obj is a generic array.

    Raises:
        InvalidArgumentError: If obj is neither a Mapping nor a non-string
            Sequence.
    """
    if not _is_array(obj):
        raise InvalidArgumentError(
            f"{arg_name} must be a mapping or a non-string sequence, "
            f"got {type(obj).__name__} instead")


def _iter_items(array: GenericArray) -> Iterator[tuple[Any, Any]]:
    """Yield (key, value) pairs in iteration order."""
    if isinstance(array, Mapping):
        return iter(array.items())
    return enumerate(array)


def _iter_values(array: GenericArray) -> Iterator[Any]:
    """Yield values in iteration order, ignoring keys."""
    if isinstance(array, Mapping):
        return iter(array.values())
    return iter(array)


def _as_int_key(key: Any) -> int | None:
    """Convert a canonical integer literal such as "12" or "-3" to int.

    Non-canonical spellings ("012", "+1", " 1") are not converted.
    """
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key:
        digits = key[1:] if key[0] == "-" else key
        if digits.isascii() and digits.isdigit():
            if digits == "0" and key[0] == "-":
                return None
            if len(digits) > 1 and digits[0] == "0":
                return None
            return int(key)
    return None


def _lookup(container: Any, key: Any) -> Any:
    """Return container[key], or _MISSING when the key does not exist.

    Non-array containers have no keys at all. Integer keys and their
    canonical string spellings address each other in both directions: "1"
    finds the mapping key 1 or sequence position 1, and 1 finds the mapping
    key "1" (as in JSON-decoded objects). Non-canonical spellings such as
    "01" or "+1" never match an integer.
    """
    if isinstance(container, Mapping):
        # Membership test first: subscripting a defaultdict would insert.
        try:
            if key in container:
                return container[key]
        except TypeError:
            # unhashable key
            return _MISSING
        if isinstance(key, str):
            int_key = _as_int_key(key)
            if int_key is not None and int_key in container:
                return container[int_key]
        elif isinstance(key, int) and not isinstance(key, bool):
            str_key = str(key)
            if str_key in container:
                return container[str_key]
        return _MISSING

    if _is_array(container):
        position = _as_int_key(key)
        if position is None or position < 0 or position >= len(container):
            return _MISSING
        return container[position]

    return _MISSING


def _strictly_equal(left: Any, right: Any) -> bool:
    """Check identity-free strict equality: same type and equal value."""
    return type(left) is type(right) and left == right


def _ensure_hashable_key(value: Any, context: str) -> Hashable:
    """Validate that value can be used as a dictionary key.

    Raises:
        InvalidArgumentError: If value is unhashable.
    """
    try:
        hash(value)
    except TypeError:
        raise InvalidArgumentError(
            f"{context} must be hashable to be used as a key, "
            f"got {type(value).__name__} instead") from None
    return value
