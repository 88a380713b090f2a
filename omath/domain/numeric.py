"""Scalar helpers shared by the angular units.

Every angle holds a single numpy floating scalar. These helpers pick its
dtype, cast raw operands into it and apply the IEEE-754 operations whose
edge cases (division by zero, remainder of infinity) must produce inf/NaN
quietly instead of raising or warning.
"""

from typing import Any, TypeAlias

import numpy as np
from numpy.typing import DTypeLike

from omath.domain.validators import validate_float_dtype, validate_scalar

Scalar: TypeAlias = float | np.floating

DEFAULT_DTYPE = np.dtype(np.float64)

# Magnitudes outside this window are displayed in scientific notation
_POSITIONAL_MAX = 1e16
_POSITIONAL_MIN = 1e-4


def resolve_dtype(value: Any, dtype: DTypeLike | None = None) -> np.dtype:
    """Pick the floating dtype an angle scalar is stored in.

    An explicit dtype wins, a numpy floating scalar keeps its own dtype and
    anything else (Python numbers, numpy integers) becomes float64.
    """
    if dtype is not None:
        return validate_float_dtype(dtype)
    if isinstance(value, np.floating):
        return value.dtype
    return DEFAULT_DTYPE


def to_scalar(value: Any, dtype: np.dtype) -> np.floating:
    """Validate a raw number and cast it into dtype."""
    validate_scalar(value)
    return dtype.type(value)


def fmod(value: np.floating, divisor: np.floating) -> np.floating:
    """Floating-point remainder with the sign of the dividend (C fmod)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.fmod(value, divisor)


def divide(value: np.floating, divisor: np.floating) -> np.floating:
    with np.errstate(divide="ignore", invalid="ignore"):
        return value / divisor


def coarser_dtype(first: np.dtype, second: np.dtype) -> np.dtype:
    """Return whichever of two floating dtypes has the lower precision."""
    if np.finfo(first).eps >= np.finfo(second).eps:
        return first
    return second


def format_scalar(value: np.floating) -> str:
    """Shortest text that parses back to the same scalar, without a trailing '.0'.

    Examples:
        >>> format_scalar(np.float64(1.0))
        '1'
        >>> format_scalar(np.float32(0.1))
        '0.1'
    """
    magnitude = abs(value)
    if np.isfinite(value) and magnitude != 0 and not (
        _POSITIONAL_MIN <= magnitude < _POSITIONAL_MAX
    ):
        return np.format_float_scientific(value, trim="-")
    return np.format_float_positional(value, trim="-")
