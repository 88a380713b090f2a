class AngleException(Exception):
    """
    Base exception for all angle-related errors.
    """


class UnitMismatchError(AngleException, TypeError):
    """
    Raised when a same-unit operation receives a different angular unit.
    Convert with to_radians() or to_degrees() first.
    """
