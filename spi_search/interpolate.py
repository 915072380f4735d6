"""Vertex of the parabola through a sample triple."""
from __future__ import annotations

import math

import numpy as np

from .triple import SampleTriple, Slot

__all__ = ["interpolate", "is_finite"]


def is_finite(value: float) -> bool:
    """Return ``True`` unless *value* is +inf, -inf or NaN."""
    return math.isfinite(value)


def interpolate(triple: SampleTriple) -> float:
    """Return the abscissa of the vertex of the parabola through *triple*.

    The parabola may open up or down; the formula does not care which.  When
    the three points are collinear (or the arithmetic overflows) the result is
    infinite or NaN, which is how a degenerate fit is reported.  Every y slot
    must be evaluated.
    """
    x1, x2, x3 = (np.float64(x) for x in triple.x)
    y1, y2, y3 = (np.float64(triple.value(s)) for s in Slot)
    with np.errstate(all="ignore"):
        z1 = x1 * (y2 - y3)
        z2 = x2 * (y3 - y1)
        z3 = x3 * (y1 - y2)
        vertex = 0.5 * (x1 * z1 + x2 * z2 + x3 * z3) / (z1 + z2 + z3)
    return float(vertex)
