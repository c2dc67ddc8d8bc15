"""Tests for the Interval value type."""

from dataclasses import FrozenInstanceError

import pytest

from intseq import Interval, InvalidRange


def test_interval_rejects_inverted_bounds() -> None:
    with pytest.raises(InvalidRange):
        Interval(start=5, end=4)


def test_single_value_interval_is_valid() -> None:
    interval = Interval(start=7, end=7)
    assert interval.size == 1
    assert str(interval) == "7"


def test_interval_is_immutable() -> None:
    interval = Interval(start=1, end=3)
    with pytest.raises(FrozenInstanceError):
        interval.start = 0  # type: ignore[misc]


def test_str_renders_range_token() -> None:
    assert str(Interval(start=4, end=17)) == "4-17"
    assert str(Interval(start=-5, end=-3)) == "-5--3"


def test_contains() -> None:
    outer = Interval(start=1, end=10)

    assert outer.contains(Interval(start=1, end=10))
    assert outer.contains(Interval(start=3, end=4))
    assert not outer.contains(Interval(start=0, end=4))
    assert not outer.contains(Interval(start=5, end=11))
    assert not Interval(start=3, end=4).contains(outer)


class TestOverlaps:
    """Overlap counts shared values, including a single shared boundary."""

    def test_shared_boundary(self):
        assert Interval(start=1, end=3).overlaps(Interval(start=3, end=5))
        assert Interval(start=3, end=5).overlaps(Interval(start=1, end=3))

    def test_equal_starts(self):
        assert Interval(start=2, end=2).overlaps(Interval(start=2, end=9))

    def test_nested(self):
        assert Interval(start=0, end=10).overlaps(Interval(start=4, end=5))
        assert Interval(start=4, end=5).overlaps(Interval(start=0, end=10))

    def test_adjacent_is_not_overlap(self):
        assert not Interval(start=1, end=3).overlaps(Interval(start=4, end=6))
        assert not Interval(start=4, end=6).overlaps(Interval(start=1, end=3))

    def test_far_apart(self):
        assert not Interval(start=1, end=3).overlaps(Interval(start=10, end=12))


@pytest.mark.parametrize("start,end", [("1", "3"), (1, 3.0), (None, 2), (False, 1)])
def test_interval_rejects_non_integer_bounds(start: object, end: object) -> None:
    with pytest.raises(InvalidRange):
        Interval(start=start, end=end)  # type: ignore[arg-type]
