"""Fold a new candidate abscissa into a sample triple."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .interpolate import is_finite
from .triple import PENDING, SampleTriple, Slot

__all__ = ["SqueezeResult", "Zone", "locate_zone", "squeeze"]


class Zone(Enum):
    """Where a candidate falls relative to ``x1 <= x2 <= x3``."""

    BELOW_FIRST = "x <= x1"
    FIRST_TO_SECOND = "x1 < x <= x2"
    SECOND_TO_THIRD = "x2 < x <= x3"
    ABOVE_THIRD = "x > x3"


@dataclass(frozen=True, slots=True)
class SqueezeResult:
    """Outcome of :func:`squeeze`: the slot now holding ``x`` and awaiting ``f(x)``."""

    zone: Zone
    slot: Slot
    x: float


def locate_zone(triple: SampleTriple, x: float) -> Zone:
    # Ties resolve to the lower zone.
    x1, x2, x3 = triple.x
    if x <= x1:
        return Zone.BELOW_FIRST
    if x <= x2:
        return Zone.FIRST_TO_SECOND
    if x <= x3:
        return Zone.SECOND_TO_THIRD
    return Zone.ABOVE_THIRD


def squeeze(triple: SampleTriple, x: float) -> SqueezeResult:
    """Insert *x* into *triple*, dropping one endpoint, and keep it ordered.

    Left of the middle sample the right endpoint is dropped, right of it the
    left endpoint is dropped.  The slot receiving *x* is marked pending and
    reported back so the caller can evaluate the function there and store the
    value with :meth:`SampleTriple.set_value`.
    """
    if not is_finite(x):
        raise ValueError(f"cannot squeeze non-finite abscissa {x!r}")
    x = float(x)
    zone = locate_zone(triple, x)
    xs, ys = triple.x, triple.y

    if zone is Zone.BELOW_FIRST:
        xs[:] = [x, xs[0], xs[1]]
        ys[:] = [PENDING, ys[0], ys[1]]
        slot = Slot.FIRST
    elif zone is Zone.FIRST_TO_SECOND:
        xs[:] = [xs[0], x, xs[1]]
        ys[:] = [ys[0], PENDING, ys[1]]
        slot = Slot.SECOND
    elif zone is Zone.SECOND_TO_THIRD:
        xs[:] = [xs[1], x, xs[2]]
        ys[:] = [ys[1], PENDING, ys[2]]
        slot = Slot.SECOND
    else:
        xs[:] = [xs[1], xs[2], x]
        ys[:] = [ys[1], ys[2], PENDING]
        slot = Slot.THIRD

    return SqueezeResult(zone=zone, slot=slot, x=x)
