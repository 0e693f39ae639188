"""Flattening of arbitrarily nested arrays into one flat list."""
from collections import deque
from collections.abc import Iterator
from typing import Any

from ._array_access import _is_array, _iter_values
from .errors import InvalidArgumentError

__all__ = ["flat"]


def flat(*values: Any) -> list[Any]:
    """Flatten the given values into a single list.

    Arrays (mappings and non-string sequences) are expanded recursively,
    at any depth; for mappings only the values are kept. Everything else,
    strings included, is emitted as-is. Encounter order is preserved.

    Args:
        *values: Scalars and/or arrays to flatten.

    Returns:
        A new flat list. Empty when called without arguments.

    Raises:
        InvalidArgumentError: If an array contains itself.

    Example:
        >>> flat(1, [2, [3, 4], 5], {"a": 6})
        [1, 2, 3, 4, 5, 6]
    """
    result: list[Any] = []
    stack: deque[Iterator[Any]] = deque([iter(values)])
    path_ids: deque[int] = deque([id(values)])
    active_ids: set[int] = {id(values)}

    while stack:
        try:
            current = next(stack[-1])
        except StopIteration:
            stack.pop()
            active_ids.discard(path_ids.pop())
            continue

        if not _is_array(current):
            result.append(current)
            continue

        current_id = id(current)
        if current_id in active_ids:
            raise InvalidArgumentError(
                f"Cannot flatten a {type(current).__name__} that contains itself")
        active_ids.add(current_id)
        path_ids.append(current_id)
        stack.append(_iter_values(current))

    return result
