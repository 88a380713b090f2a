"""
Angular units for the vector, matrix and quaternion types.

Two units share one contract:

    Radians  - one turn is 2π
    Degrees  - one turn is 360

Both wrap a single numpy floating scalar and never mutate it; every
operation returns a new value. Arithmetic only combines values of the same
unit, so mixing them requires an explicit to_radians() / to_degrees().

Usage:
    from omath.domain.models.angle import Degrees, Radians

    heading = Degrees(-90.0).wrap()          # Degrees(270)
    back = heading.opposite()                # Degrees(90)
    assert back.to_radians().fuzzy_eq(Radians.quadrant())
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, TypeVar

import numpy as np
from numpy.typing import DTypeLike

from omath.domain import constants
from omath.domain.exceptions import UnitMismatchError
from omath.domain.numeric import (
    DEFAULT_DTYPE,
    Scalar,
    divide,
    fmod,
    format_scalar,
    resolve_dtype,
    to_scalar,
)
from omath.domain.tolerance import DEFAULT_TOLERANCE
from omath.domain.validators import (
    ValidationError,
    validate_epsilon,
    validate_scalar,
)

AngleT = TypeVar("AngleT", bound="Angle")


class Angle(ABC):
    """
    Base contract for angular units.

    Subclasses provide the turn fractions in their own scale, the display
    suffix and the two unit conversions; everything else is shared.

    Attributes:
        FULL_TURN: One full rotation in the unit's scale
        HALF_TURN: Half a rotation
        QUADRANT: A quarter rotation
        SEXTANT: A sixth of a rotation
        OCTANT: An eighth of a rotation
        SYMBOL: Suffix appended to the value when displayed
    """

    __slots__ = ("_value",)

    FULL_TURN: ClassVar[float]
    HALF_TURN: ClassVar[float]
    QUADRANT: ClassVar[float]
    SEXTANT: ClassVar[float]
    OCTANT: ClassVar[float]
    SYMBOL: ClassVar[str]

    def __init__(self, value: Scalar, dtype: DTypeLike | None = None) -> None:
        """
        Args:
            value: Raw scalar in this unit, any real number
            dtype: Floating type to store it as. Defaults to the dtype of a
                numpy floating value, float64 otherwise.

        Raises:
            ValidationError: If value is not a real number or dtype is not a
                floating type
        """
        object.__setattr__(self, "_value", to_scalar(value, resolve_dtype(value, dtype)))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return type(self), (self._value,)

    # ------------------------------------------------------------------
    # Turn fractions
    # ------------------------------------------------------------------

    @classmethod
    def full_turn(cls: type[AngleT], dtype: DTypeLike = DEFAULT_DTYPE) -> AngleT:
        return cls(cls.FULL_TURN, dtype)

    @classmethod
    def half_turn(cls: type[AngleT], dtype: DTypeLike = DEFAULT_DTYPE) -> AngleT:
        return cls(cls.HALF_TURN, dtype)

    @classmethod
    def quadrant(cls: type[AngleT], dtype: DTypeLike = DEFAULT_DTYPE) -> AngleT:
        return cls(cls.QUADRANT, dtype)

    @classmethod
    def sextant(cls: type[AngleT], dtype: DTypeLike = DEFAULT_DTYPE) -> AngleT:
        return cls(cls.SEXTANT, dtype)

    @classmethod
    def octant(cls: type[AngleT], dtype: DTypeLike = DEFAULT_DTYPE) -> AngleT:
        return cls(cls.OCTANT, dtype)

    @classmethod
    def zero(cls: type[AngleT], dtype: DTypeLike = DEFAULT_DTYPE) -> AngleT:
        return cls(0.0, dtype)

    # ------------------------------------------------------------------
    # Scalar access
    # ------------------------------------------------------------------

    @property
    def value(self) -> np.floating:
        """The raw scalar in this unit."""
        return self._value

    @property
    def dtype(self) -> np.dtype:
        return self._value.dtype

    def astype(self: AngleT, dtype: DTypeLike) -> AngleT:
        """Same angle with its scalar cast to another floating type."""
        return type(self)(self._value, dtype=dtype)

    def __float__(self) -> float:
        return float(self._value)

    # ------------------------------------------------------------------
    # Conversion and normalization
    # ------------------------------------------------------------------

    @abstractmethod
    def to_radians(self) -> Radians:
        """Convert to radians."""

    @abstractmethod
    def to_degrees(self) -> Degrees:
        """Convert to degrees."""

    def wrap(self: AngleT) -> AngleT:
        """Normalize into [zero, full_turn).

        The remainder keeps the sign of a negative input, so such results
        are shifted up by one turn. NaN stays NaN and infinities become NaN.
        """
        full_turn = self.full_turn(self.dtype)
        zero = self.zero(self.dtype)
        theta = self.modulo(full_turn.value)

        if theta >= zero:
            wrapped = theta
        else:
            wrapped = theta + full_turn

        # A tiny negative remainder plus a full turn can round up to the turn itself
        if wrapped >= full_turn:
            return zero
        return wrapped

    def opposite(self: AngleT) -> AngleT:
        """The angle half a turn away, wrapped."""
        return (self + self.half_turn(self.dtype)).wrap()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _new(self: AngleT, value: np.floating) -> AngleT:
        return type(self)(value)

    def _require_same_unit(self, other: Any) -> None:
        if type(other) is not type(self):
            raise UnitMismatchError(
                f"Expected {type(self).__name__}, got {type(other).__name__}"
            )

    def _coerce_factor(self, other: Any) -> np.floating | None:
        try:
            validate_scalar(other)
        except ValidationError:
            return None
        return self.dtype.type(other)

    def __add__(self: AngleT, other: Any) -> AngleT:
        if type(other) is not type(self):
            return NotImplemented
        return self._new(self._value + other._value)

    def __sub__(self: AngleT, other: Any) -> AngleT:
        if type(other) is not type(self):
            return NotImplemented
        return self._new(self._value - other._value)

    def __mul__(self: AngleT, other: Any) -> AngleT:
        factor = self._coerce_factor(other)
        if factor is None:
            return NotImplemented
        return self._new(self._value * factor)

    __rmul__ = __mul__

    def __truediv__(self: AngleT, other: Any) -> AngleT:
        divisor = self._coerce_factor(other)
        if divisor is None:
            return NotImplemented
        return self._new(divide(self._value, divisor))

    def __mod__(self: AngleT, other: Any) -> AngleT:
        divisor = self._coerce_factor(other)
        if divisor is None:
            return NotImplemented
        return self._new(fmod(self._value, divisor))

    def __neg__(self: AngleT) -> AngleT:
        return self._new(-self._value)

    def add(self: AngleT, other: AngleT) -> AngleT:
        self._require_same_unit(other)
        return self + other

    def sub(self: AngleT, other: AngleT) -> AngleT:
        self._require_same_unit(other)
        return self - other

    def mul(self: AngleT, factor: Scalar) -> AngleT:
        validate_scalar(factor)
        return self * factor

    def div(self: AngleT, divisor: Scalar) -> AngleT:
        """Scale down by a raw scalar; zero gives inf or NaN."""
        validate_scalar(divisor)
        return self / divisor

    def modulo(self: AngleT, divisor: Scalar) -> AngleT:
        """Remainder by a raw scalar, with the sign of this angle."""
        validate_scalar(divisor)
        return self % divisor

    def neg(self: AngleT) -> AngleT:
        return -self

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value == other._value)

    def __ne__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value != other._value)

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value < other._value)

    def __le__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value <= other._value)

    def __gt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value > other._value)

    def __ge__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value >= other._value)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def fuzzy_eq(self: AngleT, other: AngleT, epsilon: float | None = None) -> bool:
        """Equality up to an absolute tolerance.

        Args:
            other: Angle of the same unit
            epsilon: Absolute tolerance. Defaults to the package tolerance
                policy for the coarser dtype of the two angles.

        Returns:
            True when the scalars differ by less than epsilon

        Raises:
            UnitMismatchError: If other is not the same unit
            ValidationError: If epsilon is negative or not finite
        """
        self._require_same_unit(other)
        if epsilon is None:
            epsilon = DEFAULT_TOLERANCE.epsilon_for(self.dtype, other.dtype)
        else:
            validate_epsilon(epsilon)

        if self._value == other._value:
            return True
        with np.errstate(invalid="ignore"):
            return bool(abs(self._value - other._value) < epsilon)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{format_scalar(self._value)}{self.SYMBOL}"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return f"{format(float(self._value), format_spec)}{self.SYMBOL}"

    def __repr__(self) -> str:
        name = type(self).__name__
        if self.dtype == DEFAULT_DTYPE:
            return f"{name}({format_scalar(self._value)})"
        return f"{name}({format_scalar(self._value)}, dtype={self.dtype.name!r})"


class Radians(Angle):
    """Angle in radians: a full turn is 2π.

    Example:
        >>> str(Radians(1.0))
        '1 rad'
    """

    __slots__ = ()

    FULL_TURN = constants.TWO_PI
    HALF_TURN = constants.PI
    QUADRANT = constants.FRAC_PI_2
    SEXTANT = constants.FRAC_PI_3
    OCTANT = constants.FRAC_PI_4
    SYMBOL = " rad"

    def to_radians(self) -> Radians:
        return self

    def to_degrees(self) -> Degrees:
        ratio = self.dtype.type(constants.DEGREES_PER_RADIAN)
        return Degrees(self._value * ratio)


class Degrees(Angle):
    """Angle in degrees: a full turn is 360.

    Example:
        >>> str(Degrees(180.0))
        '180°'
    """

    __slots__ = ()

    FULL_TURN = constants.FULL_TURN_DEGREES
    HALF_TURN = constants.HALF_TURN_DEGREES
    QUADRANT = constants.QUADRANT_DEGREES
    SEXTANT = constants.SEXTANT_DEGREES
    OCTANT = constants.OCTANT_DEGREES
    SYMBOL = "°"

    def to_radians(self) -> Radians:
        ratio = self.dtype.type(constants.RADIANS_PER_DEGREE)
        return Radians(self._value * ratio)

    def to_degrees(self) -> Degrees:
        return self
