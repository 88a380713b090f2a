# omath/domain/models/__init__.py
from .angle import Angle, Degrees, Radians

__all__ = [
    "Angle",
    "Degrees",
    "Radians",
]
