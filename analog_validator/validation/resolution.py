"""Resolution and floating-point tolerance policy shared by every check."""

from __future__ import annotations

import math
import sys

# Relative tolerance used for every approximate comparison: sqrt(machine eps).
RELATIVE_TOLERANCE = math.sqrt(sys.float_info.epsilon)


def approx_equal(a: float, b: float) -> bool:
    """Relative-tolerance equality with no absolute tolerance."""
    return math.isclose(a, b, rel_tol=RELATIVE_TOLERANCE, abs_tol=0.0)


def is_off_resolution(resolution: float, value: float) -> bool:
    """Return True if ``value`` is not an integer multiple of ``resolution``.

    Zero is always on resolution, whatever the resolution is.
    """
    if value == 0:
        return False
    ratio = abs(value) / resolution
    return not approx_equal(round(ratio), ratio)
