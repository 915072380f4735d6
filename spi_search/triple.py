"""Sample triple bookkeeping for successive parabolic interpolation."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable

__all__ = [
    "PENDING",
    "Pending",
    "PendingSampleError",
    "SampleTriple",
    "Slot",
    "TripleSnapshot",
    "ord3",
]


class Slot(IntEnum):
    """Logical position inside a :class:`SampleTriple`."""

    FIRST = 0
    SECOND = 1
    THIRD = 2


class Pending:
    """Marker for a y slot whose function value has not been computed yet."""

    _instance: "Pending | None" = None

    def __new__(cls) -> "Pending":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "PENDING"

    def __bool__(self) -> bool:
        return False


PENDING = Pending()


class PendingSampleError(RuntimeError):
    """Raised when a pending y slot is read as if it held a measurement."""


def ord3(a: float, b: float, c: float) -> tuple[float, float, float]:
    """Return ``a, b, c`` in ascending order using three compare/swap steps."""
    if a > b:
        a, b = b, a
    if b > c:
        b, c = c, b
    if a > b:
        a, b = b, a
    return a, b, c


@dataclass(frozen=True, slots=True)
class TripleSnapshot:
    """Immutable copy of the six numbers of a fully evaluated triple."""

    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float

    @property
    def xs(self) -> tuple[float, float, float]:
        return (self.x1, self.x2, self.x3)

    @property
    def ys(self) -> tuple[float, float, float]:
        return (self.y1, self.y2, self.y3)

    def as_dict(self) -> dict[str, float]:
        return {
            "x1": self.x1,
            "y1": self.y1,
            "x2": self.x2,
            "y2": self.y2,
            "x3": self.x3,
            "y3": self.y3,
        }


class SampleTriple:
    """Three ``(x, y)`` samples kept in ascending ``x`` order.

    The x values live in ``self.x`` and the y values in ``self.y``, both
    indexed by :class:`Slot`.  A y entry is either a float returned by the
    evaluator or :data:`PENDING` while a freshly inserted abscissa awaits its
    evaluation.  Callers update y entries through :meth:`set_value`; the
    ordering of ``x`` is maintained by :func:`spi_search.squeeze.squeeze`.
    """

    __slots__ = ("x", "y")

    def __init__(
        self,
        x1: float,
        y1: Any,
        x2: float,
        y2: Any,
        x3: float,
        y3: Any,
    ) -> None:
        self.x: list[float] = [float(x1), float(x2), float(x3)]
        self.y: list[Any] = [_as_y(y1), _as_y(y2), _as_y(y3)]

    @classmethod
    def from_abscissas(
        cls, f: Callable[[float], float], a: float, b: float, c: float
    ) -> "SampleTriple":
        """Sort ``a, b, c`` and evaluate ``f`` at each of them."""
        x1, x2, x3 = ord3(float(a), float(b), float(c))
        return cls(x1, f(x1), x2, f(x2), x3, f(x3))

    def abscissa(self, slot: Slot) -> float:
        return self.x[slot]

    def value(self, slot: Slot) -> float:
        y = self.y[slot]
        if y is PENDING:
            raise PendingSampleError(
                f"{Slot(slot).name.lower()} sample at x={self.x[slot]!r} has not been evaluated"
            )
        return y

    def set_value(self, slot: Slot, y: float) -> None:
        self.y[slot] = float(y)

    def pending_slots(self) -> list[Slot]:
        return [Slot(i) for i, y in enumerate(self.y) if y is PENDING]

    def is_ordered(self) -> bool:
        x1, x2, x3 = self.x
        return x1 <= x2 <= x3

    def snapshot(self) -> TripleSnapshot:
        """Return an immutable copy; every slot must already be evaluated."""
        y1, y2, y3 = (self.value(s) for s in Slot)
        x1, x2, x3 = self.x
        return TripleSnapshot(x1, y1, x2, y2, x3, y3)

    def __repr__(self) -> str:
        pairs = ", ".join(f"({x!r}, {y!r})" for x, y in zip(self.x, self.y))
        return f"SampleTriple({pairs})"


def _as_y(value: Any) -> Any:
    if value is PENDING:
        return PENDING
    return float(value)
