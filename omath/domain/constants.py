"""Constants used across the package."""

import math
import os

# Tolerance floor for fuzzy angle equality - configurable via environment variable
# Coarser float types get a looser epsilon, see omath.domain.tolerance
FUZZY_EPSILON = float(os.getenv("OMATH_FUZZY_EPSILON", "1e-6"))

# Turn fractions in radians
TWO_PI = 2.0 * math.pi
PI = math.pi
FRAC_PI_2 = math.pi / 2.0
FRAC_PI_3 = math.pi / 3.0
FRAC_PI_4 = math.pi / 4.0

# Turn fractions in degrees
FULL_TURN_DEGREES = 360.0
HALF_TURN_DEGREES = 180.0
QUADRANT_DEGREES = 90.0
SEXTANT_DEGREES = 60.0
OCTANT_DEGREES = 45.0

# Unit conversion ratios
DEGREES_PER_RADIAN = 180.0 / math.pi
RADIANS_PER_DEGREE = math.pi / 180.0
