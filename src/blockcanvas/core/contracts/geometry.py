"""Geometry primitives consumed by the block model.

This module defines two small, frozen Pydantic v2 models:

- `Point`: an integer 2-D vector ``(px, py)``. Also used as a `Size`.
- `RGBA` : a 4-channel color, each channel in ``[0, 255]``.

Both accept a plain tuple/list as input wherever they are expected, so
``SimpleBlock(bottom_left=(0, 0), ...)`` validates without spelling out
``Point(px=0, py=0)``.

Coordinates
-----------
Origin is bottom-left, x grows to the right and y grows upwards.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

Channel = Annotated[int, Field(ge=0, le=255)]


class Point(BaseModel):
    """Integer point / vector on the canvas grid."""

    model_config = ConfigDict(frozen=True)

    px: int
    py: int

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        """Accept ``(x, y)`` tuples and lists in addition to mappings."""
        if isinstance(data, tuple | list):
            if len(data) != 2:
                raise ValueError(f"a point needs exactly 2 coordinates, got {len(data)}")
            return {"px": data[0], "py": data[1]}
        return data

    def add(self, other: Point) -> Point:
        """Return the componentwise sum ``self + other``."""
        return Point(px=self.px + other.px, py=self.py + other.py)

    def subtract(self, other: Point) -> Point:
        """Return the componentwise difference ``self - other``."""
        return Point(px=self.px - other.px, py=self.py - other.py)

    def get_diff(self, other: Point) -> Point:
        """Alias of :meth:`subtract`, used to derive block sizes."""
        return self.subtract(other)

    def __add__(self, other: Point) -> Point:
        return self.add(other)

    def __sub__(self, other: Point) -> Point:
        return self.subtract(other)

    def as_tuple(self) -> tuple[int, int]:
        return (self.px, self.py)

    def __str__(self) -> str:  # pragma: no cover - trivial representation
        return f"({self.px}, {self.py})"


# A size is a point measured from the origin.
Size = Point


class RGBA(BaseModel):
    """Opaque 4-channel color value; only stored and compared."""

    model_config = ConfigDict(frozen=True)

    r: Channel
    g: Channel
    b: Channel
    a: Channel = 255

    @model_validator(mode="before")
    @classmethod
    def _from_channels(cls, data: Any) -> Any:
        if isinstance(data, tuple | list):
            if len(data) not in (3, 4):
                raise ValueError(f"a color needs 3 or 4 channels, got {len(data)}")
            return dict(zip(("r", "g", "b", "a"), data, strict=False))
        return data

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def __str__(self) -> str:  # pragma: no cover - trivial representation
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a})"


__all__ = ["Channel", "Point", "RGBA", "Size"]
