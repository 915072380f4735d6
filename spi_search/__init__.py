"""Successive parabolic interpolation.

Typical usage
-------------
>>> from spi_search import run_approximation
>>> result = run_approximation(lambda x: (x - 2) ** 2, 0, 1, 4)
>>> result.triple.x2
2.0
"""
from importlib.metadata import version as _version  # type: ignore

from .constants import MAX_ITERATIONS
from .interpolate import interpolate, is_finite
from .runner import RunResult, StopReason, run_approximation
from .squeeze import SqueezeResult, Zone, squeeze
from .triple import PENDING, PendingSampleError, SampleTriple, Slot, TripleSnapshot, ord3

__all__ = [
    "MAX_ITERATIONS",
    "PENDING",
    "PendingSampleError",
    "RunResult",
    "SampleTriple",
    "Slot",
    "SqueezeResult",
    "StopReason",
    "TripleSnapshot",
    "Zone",
    "interpolate",
    "is_finite",
    "ord3",
    "run_approximation",
    "squeeze",
    "__version__",
]

try:
    __version__ = _version("spi_search")
except Exception:  # pragma: no cover – package not installed yet
    __version__ = "0.0.0"
