"""Inclusive numeric ranges with integer or fractional steps."""
from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any

from .errors import InvalidArgumentError

__all__ = ["number_range"]

logger = logging.getLogger(__name__)


def _ensure_finite_real(value: Any, arg_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(
            f"{arg_name} must be a real number, got {type(value).__name__} instead")
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{arg_name} must be finite, got {value!r}")


def number_range(
        minimum: Real,
        maximum: Real,
        step: Real = 1,
        with_keys: bool = False) -> list[Real] | dict[Real, Real]:
    """Build the sequence minimum, minimum + step, ... up to maximum inclusive.

    The k-th element is computed as ``minimum + k * step`` rather than by
    repeated addition, so fractional steps do not accumulate rounding
    error. Generation stops at the first element greater than maximum;
    if minimum > maximum the result is empty, whatever the sign of step.

    Args:
        minimum: First element.
        maximum: Inclusive upper bound.
        step: Increment; may be fractional. Must be positive unless
            minimum > maximum.
        with_keys: If True, return a dict where every element is its own
            key. Otherwise return a list.

    Returns:
        The generated elements as a list, or as a self-keyed dict.

    Raises:
        InvalidArgumentError: If a bound or the step is not a finite real
            number, if step is zero, or if step is negative while
            minimum <= maximum.

    Example:
        >>> number_range(0, 10, 2)
        [0, 2, 4, 6, 8, 10]
    """
    _ensure_finite_real(minimum, "minimum")
    _ensure_finite_real(maximum, "maximum")
    _ensure_finite_real(step, "step")
    if step == 0 or (step < 0 and minimum <= maximum):
        raise InvalidArgumentError(
            f"step must be positive for {minimum!r}..{maximum!r}, got {step!r}; "
            "the range would never pass its upper bound")

    values: list[Real] = []
    value = minimum
    while value <= maximum:
        values.append(value)
        value = minimum + len(values) * step

    logger.debug("Generated %d values from %r to %r with step %r",
                 len(values), minimum, maximum, step)

    if with_keys:
        return {value: value for value in values}
    return values
