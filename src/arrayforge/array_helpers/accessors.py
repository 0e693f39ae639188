"""Key and path based element access with default-value fallbacks.

Every accessor treats a key as present when it exists in the array, even
if the stored value is None or otherwise falsy. Missing keys never raise;
they produce the caller-supplied default (or None).
"""
from __future__ import annotations

import random
import threading
from typing import Any

from ._array_access import (
    GenericArray,
    _MISSING,
    _ensure_array,
    _ensure_hashable_key,
    _iter_values,
    _lookup,
)
from .defaults import DEFAULT_PATH_SEPARATOR
from .errors import InvalidArgumentError

__all__ = [
    "get",
    "get_array",
    "get_array_path",
    "get_first",
    "get_path",
    "get_random",
]

_thread_local = threading.local()


def _thread_random() -> random.Random:
    """Return the random generator owned by the current thread."""
    rng = getattr(_thread_local, "rng", None)
    if rng is None:
        rng = random.Random()
        _thread_local.rng = rng
    return rng


def _resolve_path(array: GenericArray, path: str, separator: str) -> Any:
    """Descend into nested arrays one path segment at a time.

    Returns:
        The value addressed by path, or _MISSING as soon as a segment
        does not exist.
    """
    if not isinstance(path, str):
        raise InvalidArgumentError(
            f"path must be a string, got {type(path).__name__} instead")
    if not isinstance(separator, str) or not separator:
        raise InvalidArgumentError(
            f"separator must be a non-empty string, got {separator!r}")

    current: Any = array
    for segment in path.split(separator):
        current = _lookup(current, segment)
        if current is _MISSING:
            return _MISSING
    return current


def get_first(array: GenericArray, default: Any = None) -> Any:
    """Return the first value in iteration order.

    For mappings this is the first inserted value, regardless of its key.

    Args:
        array: Mapping or sequence to read from.
        default: Returned when the array is empty.

    Returns:
        The first value, or default.
    """
    _ensure_array(array)
    return next(_iter_values(array), default)


def get(array: GenericArray, key: Any, default: Any = None) -> Any:
    """Return array[key] if the key exists, otherwise default.

    Args:
        array: Mapping or sequence to read from.
        key: Key (or position) to look up.
        default: Returned when the key does not exist.

    Returns:
        The stored value (even if it is None or falsy), or default.
    """
    _ensure_array(array)
    value = _lookup(array, key)
    return default if value is _MISSING else value


def get_array(array: GenericArray, *keys: Any) -> dict[Any, Any]:
    """Pick several keys at once.

    Args:
        array: Mapping or sequence to read from.
        *keys: Keys to extract.

    Returns:
        A dict with one entry per requested key, in request order. Keys
        that do not exist map to None.
    """
    _ensure_array(array)
    result: dict[Any, Any] = {}
    for key in keys:
        _ensure_hashable_key(key, "key")
        value = _lookup(array, key)
        result[key] = None if value is _MISSING else value
    return result


def get_path(
        array: GenericArray,
        path: str,
        default: Any = None,
        separator: str = DEFAULT_PATH_SEPARATOR) -> Any:
    """Access a nested value using path notation.

    The path is split on separator and each segment is used as a key one
    level deeper. Segments spelling an integer also address integer keys
    and sequence positions.

    Args:
        array: Root mapping or sequence.
        path: Separator-delimited key sequence, e.g. "a/b/c".
        default: Returned as soon as a segment does not exist.
        separator: Segment delimiter.

    Returns:
        The value at the end of the path, or default.

    Raises:
        InvalidArgumentError: If path is not a string or separator is empty.

    Example:
        >>> get_path({"a": {"b": {"c": 5}}}, "a/b/c")
        5
    """
    _ensure_array(array)
    value = _resolve_path(array, path, separator)
    return default if value is _MISSING else value


def get_array_path(array: GenericArray, *paths: str) -> dict[str, Any]:
    """Resolve several "/"-separated paths at once.

    Returns:
        A dict mapping each path to its value, or to None when the path
        does not resolve.
    """
    _ensure_array(array)
    result: dict[str, Any] = {}
    for path in paths:
        value = _resolve_path(array, path, DEFAULT_PATH_SEPARATOR)
        result[path] = None if value is _MISSING else value
    return result


def get_random(array: GenericArray, rng: random.Random | None = None) -> Any:
    """Return a uniformly chosen value, ignoring keys.

    Args:
        array: Mapping or sequence to choose from.
        rng: Random generator to use. Defaults to a generator private to
            the calling thread; results are not reproducible.

    Returns:
        A random value, or None if the array is empty.
    """
    _ensure_array(array)
    values = list(_iter_values(array))
    if not values:
        return None
    if rng is None:
        rng = _thread_random()
    return rng.choice(values)
