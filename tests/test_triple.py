import dataclasses
import itertools
import math

import pytest

from spi_search.triple import (
    PENDING,
    Pending,
    PendingSampleError,
    SampleTriple,
    Slot,
    TripleSnapshot,
    ord3,
)


@pytest.mark.parametrize("perm", list(itertools.permutations((1.0, 2.0, 3.0))))
def test_ord3_sorts_every_permutation(perm: tuple[float, float, float]) -> None:
    assert ord3(*perm) == (1.0, 2.0, 3.0)


def test_ord3_handles_duplicates() -> None:
    assert ord3(2.0, 1.0, 2.0) == (1.0, 2.0, 2.0)
    assert ord3(5.0, 5.0, 5.0) == (5.0, 5.0, 5.0)
    assert ord3(-1.0, -1.0, -3.0) == (-3.0, -1.0, -1.0)


def test_pending_is_a_singleton_distinct_from_nan() -> None:
    assert Pending() is PENDING
    assert repr(PENDING) == "PENDING"
    assert not PENDING
    triple = SampleTriple(0, math.nan, 1, 2.0, 2, PENDING)
    assert triple.pending_slots() == [Slot.THIRD]
    assert math.isnan(triple.value(Slot.FIRST))


def test_from_abscissas_sorts_and_evaluates() -> None:
    calls: list[float] = []

    def f(x: float) -> float:
        calls.append(x)
        return x * x

    triple = SampleTriple.from_abscissas(f, 4, 0, 1)
    assert triple.x == [0.0, 1.0, 4.0]
    assert triple.y == [0.0, 1.0, 16.0]
    assert calls == [0.0, 1.0, 4.0]
    assert triple.is_ordered()
    assert triple.pending_slots() == []


def test_reading_pending_slot_raises() -> None:
    triple = SampleTriple(0, 1.0, 1, PENDING, 2, 3.0)
    with pytest.raises(PendingSampleError, match="second sample at x=1.0"):
        triple.value(Slot.SECOND)
    with pytest.raises(PendingSampleError):
        triple.snapshot()
    triple.set_value(Slot.SECOND, 0.5)
    assert triple.value(Slot.SECOND) == 0.5
    assert triple.abscissa(Slot.SECOND) == 1.0


def test_snapshot_is_immutable_copy() -> None:
    triple = SampleTriple(0, 1.0, 1, 2.0, 2, 3.0)
    snap = triple.snapshot()
    assert snap == TripleSnapshot(0.0, 1.0, 1.0, 2.0, 2.0, 3.0)
    assert snap.xs == (0.0, 1.0, 2.0)
    assert snap.ys == (1.0, 2.0, 3.0)
    assert snap.as_dict() == {"x1": 0.0, "y1": 1.0, "x2": 1.0, "y2": 2.0, "x3": 2.0, "y3": 3.0}

    triple.set_value(Slot.FIRST, 42.0)
    assert snap.y1 == 1.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.x1 = 5.0  # type: ignore[misc]
