"""Tolerance policy for fuzzy angle equality.

The absolute epsilon scales with the precision of the scalar type,

    epsilon(dtype) = max(floor, sqrt(finfo(dtype).eps))

which yields exactly the floor (1e-6 by default) for float64 and roughly
3.5e-4 for float32.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

import numpy as np
from environs import Env
from numpy.typing import DTypeLike

from omath.domain.constants import FUZZY_EPSILON
from omath.domain.exceptions import UnitMismatchError
from omath.domain.numeric import coarser_dtype
from omath.domain.validators import validate_epsilon, validate_float_dtype
from omath.logging_config import get_logger

if TYPE_CHECKING:
    from omath.domain.models.angle import Angle

logger = get_logger(__name__)


@lru_cache(maxsize=None)
def _scaled_epsilon(floor: float, dtype: np.dtype) -> float:
    epsilon = max(floor, math.sqrt(float(np.finfo(dtype).eps)))
    logger.debug("Fuzzy epsilon for %s resolved to %g", dtype.name, epsilon)
    return epsilon


@dataclass(frozen=True, slots=True)
class TolerancePolicy:
    """Absolute tolerance used to compare angles despite rounding error."""

    floor: float = FUZZY_EPSILON

    def __post_init__(self):
        validate_epsilon(self.floor)

    @classmethod
    def from_env(cls, env: Env) -> TolerancePolicy:
        """
        Build a policy from environment settings.

        Args:
            env: Environment variable handler (Env instance)

        Returns:
            Policy whose floor is OMATH_FUZZY_EPSILON, or the package default

        Example:
            >>> from environs import Env
            >>> env = Env()
            >>> env.read_env()
            >>> policy = TolerancePolicy.from_env(env)
        """
        floor = env.float("OMATH_FUZZY_EPSILON", FUZZY_EPSILON)
        logger.debug("Loaded tolerance policy with floor %g", floor)
        return cls(floor=floor)

    def epsilon_for(self, dtype: DTypeLike, other: DTypeLike | None = None) -> float:
        """Epsilon for one dtype, or for the coarser of two."""
        resolved = validate_float_dtype(dtype)
        if other is not None:
            resolved = coarser_dtype(resolved, validate_float_dtype(other))
        return _scaled_epsilon(self.floor, resolved)

    def close(self, first: Angle, second: Angle) -> bool:
        """Fuzzy-compare two same-unit angles under this policy."""
        if type(first) is not type(second):
            raise UnitMismatchError(
                f"Cannot compare {type(first).__name__} with {type(second).__name__}"
            )
        return first.fuzzy_eq(
            second, epsilon=self.epsilon_for(first.dtype, second.dtype)
        )


DEFAULT_TOLERANCE = TolerancePolicy()
