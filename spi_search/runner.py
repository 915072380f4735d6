"""Iteration driver for successive parabolic interpolation."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .constants import MAX_ITERATIONS
from .interpolate import interpolate, is_finite
from .squeeze import squeeze
from .triple import SampleTriple, TripleSnapshot

__all__ = ["Observer", "RunResult", "StopReason", "run_approximation"]

logger = logging.getLogger(__name__)

Observer = Callable[[int, TripleSnapshot], None]


class StopReason(Enum):
    """Why a run ended. Both are normal terminations."""

    DEGENERATE = "degenerate"  # vertex was inf or NaN
    CAPPED = "capped"  # iteration budget exhausted


@dataclass(slots=True)
class RunResult:
    triple: TripleSnapshot
    iterations: int
    reason: StopReason
    last_vertex: float | None = None

    @property
    def degenerate(self) -> bool:
        return self.reason is StopReason.DEGENERATE


def run_approximation(
    f: Callable[[float], float],
    a: float,
    b: float,
    c: float,
    observer: Optional[Observer] = None,
    *,
    max_iterations: int = MAX_ITERATIONS,
) -> RunResult:
    """Approximate an extremum of *f* starting from the abscissas ``a, b, c``.

    The abscissas may come in any order.  Each iteration interpolates the
    vertex of the parabola through the current triple, stops if that vertex is
    not finite, otherwise squeezes it into the triple and evaluates *f* there.
    *observer* sees the initial triple as iteration 0 and the triple after
    every completed iteration.  Exceptions raised by *f* or *observer*
    propagate.
    """
    if max_iterations < 0:
        raise ValueError(f"max_iterations must be non-negative, got {max_iterations}")

    triple = SampleTriple.from_abscissas(f, a, b, c)
    snap = triple.snapshot()
    logger.info(
        "[spi] start x=(%.9g, %.9g, %.9g) cap=%d", snap.x1, snap.x2, snap.x3, max_iterations
    )
    if observer is not None:
        observer(0, snap)

    vertex: float | None = None
    for i in range(1, max_iterations + 1):
        vertex = interpolate(triple)
        if not is_finite(vertex):
            logger.info("[spi] iteration %d: vertex %r is not finite; stopping", i, vertex)
            return RunResult(snap, i - 1, StopReason.DEGENERATE, vertex)

        step = squeeze(triple, vertex)
        triple.set_value(step.slot, f(step.x))
        snap = triple.snapshot()
        logger.debug(
            "[spi] iteration %d: vertex=%.12g zone=%s slot=%s",
            i,
            vertex,
            step.zone.name,
            step.slot.name,
        )
        if observer is not None:
            observer(i, snap)

    logger.info("[spi] iteration cap %d reached", max_iterations)
    return RunResult(snap, max_iterations, StopReason.CAPPED, vertex)
