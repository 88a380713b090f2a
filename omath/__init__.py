"""Angular units for vector and matrix math."""

from omath.domain.exceptions import AngleException, UnitMismatchError
from omath.domain.models.angle import Angle, Degrees, Radians
from omath.domain.tolerance import DEFAULT_TOLERANCE, TolerancePolicy
from omath.domain.validators import ValidationError

__version__ = "0.1.0"
__all__ = [
    "Angle",
    "AngleException",
    "DEFAULT_TOLERANCE",
    "Degrees",
    "Radians",
    "TolerancePolicy",
    "UnitMismatchError",
    "ValidationError",
]
