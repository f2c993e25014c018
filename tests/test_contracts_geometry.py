"""Unit tests for the Point and RGBA primitives."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from blockcanvas.core.contracts.geometry import RGBA, Point, Size


def test_point_arithmetic() -> None:
    """add/subtract/get_diff are componentwise and match the operators."""
    a = Point(px=7, py=3)
    b = Point(px=2, py=5)

    assert a.add(b) == Point(px=9, py=8) == a + b
    assert a.subtract(b) == Point(px=5, py=-2) == a - b
    assert a.get_diff(b) == a.subtract(b)
    assert a.as_tuple() == (7, 3)


def test_point_accepts_pairs() -> None:
    """Tuples and lists validate into points; other lengths are rejected."""
    assert Point.model_validate((1, 2)) == Point(px=1, py=2)
    assert Point.model_validate([3, 4]) == Point(px=3, py=4)
    with pytest.raises(ValidationError):
        Point.model_validate((1, 2, 3))


def test_point_is_hashable_and_frozen() -> None:
    p = Point(px=1, py=1)
    assert len({p, Point(px=1, py=1)}) == 1
    with pytest.raises(ValidationError):
        p.px = 2  # type: ignore[misc]


def test_size_is_a_point() -> None:
    assert Size is Point


def test_rgba_channels_and_equality() -> None:
    """Colors compare by value; alpha defaults to opaque for 3-channel input."""
    assert RGBA.model_validate((10, 20, 30, 40)) == RGBA(r=10, g=20, b=30, a=40)
    assert RGBA.model_validate([10, 20, 30]).a == 255
    assert RGBA(r=1, g=2, b=3, a=4).as_tuple() == (1, 2, 3, 4)
    assert RGBA(r=1, g=2, b=3) != RGBA(r=1, g=2, b=3, a=0)


@pytest.mark.parametrize(
    "channels", [(256, 0, 0, 0), (0, -1, 0, 0), (0, 0), (1, 2, 3, 4, 5)]
)  # type: ignore[misc]
def test_rgba_rejects_bad_channels(channels: tuple[int, ...]) -> None:
    with pytest.raises(ValidationError):
        RGBA.model_validate(channels)
