"""Input validation utilities for angle construction and tolerances."""

import math
from numbers import Real
from typing import Any

import numpy as np
from numpy.typing import DTypeLike


class ValidationError(ValueError):
    """Raised when validation fails."""

    pass


def validate_scalar(value: Any) -> None:
    """Validate a raw angle scalar.

    NaN and infinity pass: they follow floating-point semantics downstream.

    Args:
        value: Raw scalar in the angle's own unit

    Raises:
        ValidationError: If the value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(
            f"Angle value must be a real number, got {type(value).__name__}"
        )


def validate_float_dtype(dtype: DTypeLike) -> np.dtype:
    """Validate and normalize a scalar dtype.

    Args:
        dtype: Anything numpy.dtype() accepts

    Returns:
        The normalized numpy dtype

    Raises:
        ValidationError: If the dtype is unknown or not a floating type
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise ValidationError(f"Unknown dtype {dtype!r}") from exc

    if not np.issubdtype(resolved, np.floating):
        raise ValidationError(
            f"Angle dtype must be a floating type, got {resolved.name}"
        )
    return resolved


def validate_epsilon(epsilon: float) -> None:
    """Validate a fuzzy equality tolerance.

    Args:
        epsilon: Absolute tolerance

    Raises:
        ValidationError: If epsilon is negative, NaN or infinite
    """
    if not isinstance(epsilon, Real):
        raise ValidationError(f"Epsilon must be numeric, got {type(epsilon)}")

    if not math.isfinite(epsilon) or epsilon < 0:
        raise ValidationError(
            f"Epsilon must be a finite non-negative number, got {epsilon}"
        )
