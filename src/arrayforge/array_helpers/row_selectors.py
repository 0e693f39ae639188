"""Selection of rows and columns from collections of records.

A collection of records is an array whose values (rows) are arrays
sharing a conventional key set, e.g. a list of dicts. Rows that are not
arrays, or that lack the requested key, simply never match.

Matching is strict: a row matches when row[key] exists, has the same type
as the wanted value, and compares equal to it. So 1, 1.0, True and "1"
are four different values here.
"""
from collections.abc import Iterator
from typing import Any

from ._array_access import (
    GenericArray,
    _MISSING,
    _ensure_array,
    _ensure_hashable_key,
    _iter_items,
    _lookup,
    _strictly_equal,
)
from .errors import NOT_FOUND

__all__ = [
    "column",
    "columns",
    "get_row",
    "get_row_key",
    "get_rows",
    "get_rows_but",
]


def _matching_items(array: GenericArray, key: Any, value: Any) -> Iterator[tuple[Any, Any]]:
    """Yield (row_key, row) pairs whose row[key] strictly equals value."""
    for row_key, row in _iter_items(array):
        field = _lookup(row, key)
        if field is not _MISSING and _strictly_equal(field, value):
            yield row_key, row


def column(
        array: GenericArray,
        key: Any,
        skip_empties: bool = False,
        distinct: bool = False) -> list[Any]:
    """Extract the value of one field from every row.

    Args:
        array: Collection of rows.
        key: Field to extract.
        skip_empties: If True, rows without the field (or with a None
            value) contribute nothing. Otherwise they contribute None.
        distinct: If True, a value equal to one already extracted is
            dropped (first occurrence wins). None placeholders for rows
            without the field are never dropped.

    Returns:
        The extracted values in row order.
    """
    _ensure_array(array)
    result: list[Any] = []
    for _, row in _iter_items(array):
        field = _lookup(row, key)
        if field is _MISSING or field is None:
            if not skip_empties:
                result.append(None)
            continue
        if distinct and field in result:
            continue
        result.append(field)
    return result


def columns(array: GenericArray, *keys: Any) -> list[dict[Any, Any]]:
    """Project every row onto the requested fields.

    Fields a row does not have are omitted from its projection rather than
    filled with None.

    Returns:
        One dict per input row, in row order.
    """
    _ensure_array(array)
    for key in keys:
        _ensure_hashable_key(key, "key")

    result: list[dict[Any, Any]] = []
    for _, row in _iter_items(array):
        projection: dict[Any, Any] = {}
        for key in keys:
            field = _lookup(row, key)
            if field is not _MISSING:
                projection[key] = field
        result.append(projection)
    return result


def get_row(array: GenericArray, key: Any, value: Any, default: Any = NOT_FOUND) -> Any:
    """Return the first row whose row[key] strictly equals value.

    Args:
        array: Collection of rows.
        key: Field to compare.
        value: Wanted field value.
        default: Returned when no row matches.

    Returns:
        The matching row object itself (not a copy), or default.
    """
    _ensure_array(array)
    for _, row in _matching_items(array, key, value):
        return row
    return default


def get_row_key(array: GenericArray, key: Any, value: Any, default: Any = NOT_FOUND) -> Any:
    """Return the key of the first row whose row[key] strictly equals value.

    Returns:
        The row's key (its position for sequences), or default.
    """
    _ensure_array(array)
    for row_key, _ in _matching_items(array, key, value):
        return row_key
    return default


def get_rows(array: GenericArray, key: Any, value: Any) -> dict[Any, Any]:
    """Return all rows whose row[key] strictly equals value.

    Returns:
        A dict of the matching rows under their original keys, in order.
    """
    _ensure_array(array)
    return dict(_matching_items(array, key, value))


def get_rows_but(array: GenericArray, key: Any, value: Any) -> dict[Any, Any]:
    """Return all rows that have the field, and whose value is not strictly equal to value.

    Rows without the field are excluded, exactly as they are excluded by
    get_rows. A row therefore ends up in neither result when it lacks the
    field.

    Returns:
        A dict of the selected rows under their original keys, in order.
    """
    _ensure_array(array)
    result: dict[Any, Any] = {}
    for row_key, row in _iter_items(array):
        field = _lookup(row, key)
        if field is not _MISSING and not _strictly_equal(field, value):
            result[row_key] = row
    return result
