"""Scalar math helpers: wrap-around interpolation, floor mod/div, sign."""

import logging
import math
import numbers
import warnings
from typing import Union

logger = logging.getLogger(__name__)

Number = Union[int, float]

SQRT3 = math.sqrt(3)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp a value to a range.

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Value clamped to [min_val, max_val]
    """
    return max(min_val, min(max_val, value))


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate from a to b, with t clamped to [0, 1]."""
    t = clamp(t, 0.0, 1.0)
    return a + (b - a) * t


def layer_mask_contains(mask: int, layer: int) -> bool:
    """Check whether a layer's bit is set in a layer mask.

    Args:
        mask: Bit mask of enabled layers
        layer: Layer number (bit position)

    Returns:
        True if bit ``layer`` is set in ``mask``
    """
    return mask == (mask | (1 << layer))


def in_range(value: float, closed_left: float, open_right: float) -> bool:
    """Test whether value lies in the half-open interval [closed_left, open_right)."""
    return closed_left <= value < open_right


def in_range01(value: float) -> bool:
    """Test whether value lies in [0, 1)."""
    return in_range(value, 0, 1)


def wlerp01(v1: float, v2: float, t: float) -> float:
    """Interpolate between two values in [0, 1) that wrap around from 1 back to 0.

    Useful for lerping between angles expressed as fractions of a revolution:
    interpolating 0.9 towards 0.1 passes through 0.0 instead of 0.5.

    Args:
        v1: Start value in [0, 1)
        v2: End value in [0, 1)
        t: Interpolation factor, clamped to [0, 1]

    Returns:
        Interpolated value in [0, 1)
    """
    if not in_range01(v1):
        logger.error("wlerp01 v1 is not in [0, 1): %s", v1)
    if not in_range01(v2):
        logger.error("wlerp01 v2 is not in [0, 1): %s", v2)

    if abs(v1 - v2) <= 0.5:
        return lerp(v1, v2, t)
    elif v1 <= v2:
        return frac(lerp(v1 + 1, v2, t))
    else:
        return frac(lerp(v1, v2 + 1, t))


def _truncated_mod(m: int, n: int) -> int:
    # Remainder takes the sign of the dividend.
    remainder = abs(m) % abs(n)
    return remainder if m >= 0 else -remainder


def _truncated_div(m: int, n: int) -> int:
    quotient = abs(m) // abs(n)
    return quotient if (m >= 0) == (n >= 0) else -quotient


def floor_mod(m: Number, n: Number) -> Number:
    """Modulo that also works for negative m.

    Integer arguments give an integer result, anything else a float.

    Args:
        m: Dividend
        n: Divisor

    Returns:
        m mod n, e.g. floor_mod(-1, 3) == 2
    """
    if isinstance(m, numbers.Integral) and isinstance(n, numbers.Integral):
        m, n = int(m), int(n)
        if m >= 0:
            return _truncated_mod(m, n)
        return _truncated_mod(m - 2 * m * n, n)

    if m >= 0:
        return math.fmod(m, n)
    return math.fmod(m, n) + n


def floor_div(m: int, n: int) -> int:
    """Floor division that also works for negative m.

    Args:
        m: Dividend
        n: Divisor

    Returns:
        m divided by n rounded down, e.g. floor_div(-1, 3) == -1
    """
    if m >= 0:
        return _truncated_div(m, n)

    t = _truncated_div(m, n)
    if t * n == m:
        return t
    return t - 1


def frac(x: float) -> float:
    """Return the fractional part of x, always x - floor(x)."""
    return x - math.floor(x)


def sign(x: Number) -> int:
    """Return 1 if x is positive, -1 if negative and 0 if zero."""
    if x > 0:
        return 1
    if x < 0:
        return -1
    return 0


def _deprecated(old: str, new: str) -> None:
    warnings.warn(f"{old} is deprecated, use {new} instead", DeprecationWarning, stacklevel=3)


def div(m: int, n: int) -> int:
    """Deprecated alias of floor_div."""
    _deprecated("div", "floor_div")
    return floor_div(m, n)


def mod(m: Number, n: Number) -> Number:
    """Deprecated alias of floor_mod."""
    _deprecated("mod", "floor_mod")
    return floor_mod(m, n)


def floor_to_int(x: float) -> int:
    """Deprecated, use math.floor."""
    _deprecated("floor_to_int", "math.floor")
    return math.floor(x)


def wrap01(value: float) -> float:
    """Deprecated alias of frac."""
    _deprecated("wrap01", "frac")
    return value - math.floor(value)
