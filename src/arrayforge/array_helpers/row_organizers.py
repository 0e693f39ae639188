"""Reordering, grouping and re-keying of collections of records.

Grouping and keying use field values directly as dictionary keys, with no
string/integer coercion: rows with 1 and "1" end up under different keys.
Python's own key equality still applies, so 1, 1.0 and True share a key.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from numbers import Real
from operator import itemgetter
from typing import Any, Final

from ._array_access import (
    GenericArray,
    _MISSING,
    _ensure_array,
    _ensure_hashable_key,
    _iter_items,
    _lookup,
)
from .defaults import ASCENDING, DESCENDING, SortOrder
from .errors import InvalidArgumentError

__all__ = ["assign_keys", "categorize", "sort_by_key"]

logger = logging.getLogger(__name__)

_NUMERIC_STRING_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*"
)


def _require_field(row_key: Any, row: Any, field: Any) -> Any:
    """Return row[field] or raise if the row does not have it."""
    value = _lookup(row, field)
    if value is _MISSING:
        raise InvalidArgumentError(
            f"Row {row_key!r} has no field {field!r}")
    return value


def _sort_key(value: Any) -> tuple[Any, ...]:
    """Build a key ordering None first, then numbers, then text, then the rest.

    Real numbers and numeric strings ("10", " 2.5", "1e3") share one
    numeric scale, so "9" sorts before "10" and 2 compares with "1".
    Other strings compare lexicographically. Remaining values are grouped
    by type name and compared natively within their type.
    """
    if value is None:
        return (0,)
    if isinstance(value, Real):
        return (1, value)
    if isinstance(value, str):
        if _NUMERIC_STRING_PATTERN.fullmatch(value):
            text = value.strip()
            if any(marker in text for marker in ".eE"):
                return (1, float(text))
            return (1, int(text))
        return (2, value)
    return (3, type(value).__qualname__, value)


def sort_by_key(
        array: GenericArray,
        field: Any,
        order: SortOrder = ASCENDING) -> list[Any]:
    """Sort rows by the value of one field.

    The sort is stable in both directions: rows with equal field values
    keep their original relative order. Numbers and numeric strings are
    compared numerically, other strings lexicographically, and None sorts
    before everything else.

    Args:
        array: Collection of rows.
        field: Field to sort by; every row must have it.
        order: "asc" (default) or "desc".

    Returns:
        A new list of the rows, re-indexed from 0.

    Raises:
        InvalidArgumentError: If order is unknown, a row lacks the field,
            or two field values of the same non-numeric, non-string type
            cannot be compared with each other.
    """
    _ensure_array(array)
    if order not in (ASCENDING, DESCENDING):
        raise InvalidArgumentError(
            f"order must be {ASCENDING!r} or {DESCENDING!r}, got {order!r}")

    keyed = [(_sort_key(_require_field(row_key, row, field)), row)
             for row_key, row in _iter_items(array)]
    try:
        keyed.sort(key=itemgetter(0), reverse=order == DESCENDING)
    except TypeError as e:
        raise InvalidArgumentError(
            f"Values of field {field!r} cannot be ordered: {e}") from e
    return [row for _, row in keyed]


def categorize(
        array: GenericArray,
        key: Any,
        preserve_keys: bool = False) -> dict[Any, Any]:
    """Group rows into nested buckets by one or more fields.

    With a single field the result maps each distinct value to the rows
    carrying it. With a list of fields the grouping nests one level per
    field, in the given order.

    Args:
        array: Collection of rows.
        key: A field, or a list/tuple of fields for multi-level grouping.
        preserve_keys: If True, leaf buckets are dicts keyed by the rows'
            original keys. Otherwise they are lists.

    Returns:
        A new nested dict. Buckets keep the rows' original order.

    Raises:
        InvalidArgumentError: If no field is given, a row lacks one of the
            fields, or a field value is unhashable.

    Example:
        >>> rows = [{"t": "a", "n": 1}, {"t": "b", "n": 2}, {"t": "a", "n": 3}]
        >>> categorize(rows, "t")
        {'a': [{'t': 'a', 'n': 1}, {'t': 'a', 'n': 3}], 'b': [{'t': 'b', 'n': 2}]}
    """
    _ensure_array(array)
    fields: Sequence[Any] = key if isinstance(key, (list, tuple)) else [key]
    if not fields:
        raise InvalidArgumentError("key must name at least one field")

    result: dict[Any, Any] = {}
    last_level = len(fields) - 1
    for row_key, row in _iter_items(array):
        node = result
        for level, field in enumerate(fields):
            value = _require_field(row_key, row, field)
            _ensure_hashable_key(value, f"Value of field {field!r}")
            if level < last_level:
                node = node.setdefault(value, {})
            elif preserve_keys:
                node.setdefault(value, {})[row_key] = row
            else:
                node.setdefault(value, []).append(row)

    logger.debug("Categorized rows into %d top-level groups by %r",
                 len(result), list(fields))
    return result


def assign_keys(array: GenericArray, key: Any) -> dict[Any, Any]:
    """Re-key rows by the value of one of their fields.

    When several rows share a value the last one wins, but the entry keeps
    the position where that value was first seen.

    Raises:
        InvalidArgumentError: If a row lacks the field or its value is
            unhashable.
    """
    _ensure_array(array)
    result: dict[Any, Any] = {}
    for row_key, row in _iter_items(array):
        value = _require_field(row_key, row, key)
        _ensure_hashable_key(value, f"Value of field {key!r}")
        result[value] = row
    return result
