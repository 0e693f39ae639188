"""Combining arrays positionally and reordering entries by priority."""
from typing import Any

from ._array_access import (
    GenericArray,
    _MISSING,
    _ensure_array,
    _ensure_hashable_key,
    _iter_items,
    _iter_values,
    _lookup,
)
from .errors import InvalidArgumentError

__all__ = ["combine", "combine2", "sort_by_priority"]


def combine(keys: GenericArray, values: GenericArray) -> dict[Any, Any]:
    """Pair keys[i] with values[i] for every position i of keys.

    Args:
        keys: Array providing the result keys at positions 0..len(keys)-1.
        values: Array providing the values; missing positions give None.

    Returns:
        A new dict. A key repeated in keys keeps its last paired value.

    Raises:
        InvalidArgumentError: If keys lacks one of its positions or holds
            an unhashable key.

    Example:
        >>> combine(["a", "b"], [1])
        {'a': 1, 'b': None}
    """
    _ensure_array(keys, "keys")
    _ensure_array(values, "values")

    result: dict[Any, Any] = {}
    for position in range(len(keys)):
        key = _lookup(keys, position)
        if key is _MISSING:
            raise InvalidArgumentError(
                f"keys has no element at position {position}")
        _ensure_hashable_key(key, f"Element {position} of keys")
        value = _lookup(values, position)
        result[key] = None if value is _MISSING else value
    return result


def combine2(*arrays: GenericArray) -> list[list[Any]]:
    """Zip arrays by position, padding missing entries with None.

    Zipping continues until the first position that none of the arrays
    has, so the result is as long as the longest contiguous input.

    Returns:
        A list of rows; row i holds the i-th entry of every array.
    """
    for array in arrays:
        _ensure_array(array, "each array")

    result: list[list[Any]] = []
    position = 0
    while True:
        row: list[Any] = []
        any_present = False
        for array in arrays:
            value = _lookup(array, position)
            if value is _MISSING:
                row.append(None)
            else:
                any_present = True
                row.append(value)
        if not any_present:
            return result
        result.append(row)
        position += 1


def sort_by_priority(array: GenericArray, priorities: GenericArray) -> dict[Any, Any]:
    """Move the listed keys to the front, keeping everything else in order.

    Keys from priorities that the array does not have are ignored. The
    remaining entries follow in their original order.

    Args:
        array: Mapping or sequence to reorder.
        priorities: Keys to put first, in this order.

    Returns:
        A new dict holding every entry of array exactly once.

    Example:
        >>> sort_by_priority({"x": 1, "y": 2, "z": 3}, ["z", "x"])
        {'z': 3, 'x': 1, 'y': 2}
    """
    _ensure_array(array)
    _ensure_array(priorities, "priorities")

    entries = dict(_iter_items(array))
    result: dict[Any, Any] = {}
    for key in _iter_values(priorities):
        _ensure_hashable_key(key, "Priority key")
        if key in entries and key not in result:
            result[key] = entries[key]
    for key, value in entries.items():
        if key not in result:
            result[key] = value
    return result
