"""
Block Contract

The canvas is a tree of axis-aligned rectangles called *blocks*. This module
defines the two block variants as frozen Pydantic models and the closed
union over them:

- `SimpleBlock` : a leaf rectangle filled with one color.
- `ComplexBlock`: a rectangle decomposed into an ordered tuple of leaves.
- `Block`       : ``SimpleBlock | ComplexBlock``, discriminated on ``kind``.

Geometry
--------
A block covers the half-open rectangle ``[bottom_left, top_right)``. Both
variants reject inverted corners at construction time with
:class:`InvalidBlockGeometry`. Zero-width or zero-height blocks are allowed.

Structure
---------
The tree is at most two levels deep: a ComplexBlock's children are always
SimpleBlocks. ``get_children()`` is never recursive, so flattening a canvas
only needs :func:`iter_leaves`.

Whether a ComplexBlock's leaves actually tile its rectangle is not checked
here; see :mod:`blockcanvas.core.checks.tiling`.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Annotated, Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    computed_field,
    model_validator,
)

from .geometry import RGBA, Point, Size

BlockId = Annotated[str, Field(min_length=1, description="Stable block identifier, e.g. '0.1'.")]


class BlockError(Exception):
    """Base class for block model errors."""


class InvalidBlockGeometry(BlockError):
    """Raised when a block's bottom-left corner lies above or right of its top-right one."""

    def __init__(self, block_id: str, bottom_left: Point, top_right: Point) -> None:
        self.block_id = block_id
        self.bottom_left = bottom_left
        self.top_right = top_right
        super().__init__(
            f"Invalid block {block_id!r}: bottom_left {bottom_left} "
            f"must not exceed top_right {top_right}"
        )


def _check_bounds(block_id: str, bottom_left: Point, top_right: Point) -> None:
    if bottom_left.px > top_right.px or bottom_left.py > top_right.py:
        raise InvalidBlockGeometry(block_id, bottom_left, top_right)


def _revalidated_copy(
    block: BaseModel, update: Mapping[str, Any] | None, deep: bool
) -> dict[str, Any]:
    """Field values of ``block`` merged with ``update``, ready for validation."""
    data = {name: getattr(block, name) for name in type(block).model_fields}
    data.update(update or {})
    return copy.deepcopy(data) if deep else data


_FROZEN = ConfigDict(frozen=True)


class SimpleBlock(BaseModel):
    """A leaf block: one rectangle, one color."""

    model_config = _FROZEN

    kind: Literal["simple"] = "simple"
    id: BlockId
    bottom_left: Point = Field(validation_alias=AliasChoices("bottom_left", "bottomLeft"))
    top_right: Point = Field(validation_alias=AliasChoices("top_right", "topRight"))
    color: RGBA

    @model_validator(mode="after")
    def _non_degenerate(self) -> SimpleBlock:
        _check_bounds(self.id, self.bottom_left, self.top_right)
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def size(self) -> Size:
        """Width and height, always ``top_right - bottom_left``."""
        return self.top_right.get_diff(self.bottom_left)

    def get_children(self) -> list[SimpleBlock]:
        """A leaf is its own only child."""
        return [self]

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> SimpleBlock:
        """Build the replacement block through full validation.

        Raises :class:`InvalidBlockGeometry` if ``update`` inverts the corners.
        """
        return type(self).model_validate(_revalidated_copy(self, update, deep))


class ComplexBlock(BaseModel):
    """A block made of an ordered group of leaves.

    The order of ``sub_blocks`` is the painting order and is kept as given.
    """

    model_config = _FROZEN

    kind: Literal["complex"] = "complex"
    id: BlockId
    bottom_left: Point = Field(validation_alias=AliasChoices("bottom_left", "bottomLeft"))
    top_right: Point = Field(validation_alias=AliasChoices("top_right", "topRight"))
    sub_blocks: tuple[SimpleBlock, ...] = Field(
        default=(),
        validation_alias=AliasChoices("sub_blocks", "subBlocks"),
        description="Leaves partitioning this block; never nested ComplexBlocks.",
    )

    @model_validator(mode="after")
    def _non_degenerate(self) -> ComplexBlock:
        _check_bounds(self.id, self.bottom_left, self.top_right)
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def size(self) -> Size:
        """Width and height, always ``top_right - bottom_left``."""
        return self.top_right.get_diff(self.bottom_left)

    def get_children(self) -> Sequence[SimpleBlock]:
        """Return the stored leaves unchanged, in construction order."""
        return self.sub_blocks

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> ComplexBlock:
        """Build the replacement block through full validation.

        Inverted corners raise :class:`InvalidBlockGeometry`; a non-leaf in
        ``sub_blocks`` raises ``pydantic.ValidationError``.
        """
        return type(self).model_validate(_revalidated_copy(self, update, deep))


Block = Annotated[SimpleBlock | ComplexBlock, Field(discriminator="kind")]

_BLOCK_ADAPTER: TypeAdapter[SimpleBlock | ComplexBlock] = TypeAdapter(Block)


def parse_block(data: Any) -> SimpleBlock | ComplexBlock:
    """Validate ``data`` (a mapping carrying ``kind``) into the matching variant.

    Raises
    ------
    InvalidBlockGeometry
        If the corners are inverted.
    pydantic.ValidationError
        For any other malformed input.
    """
    return _BLOCK_ADAPTER.validate_python(data)


def iter_leaves(blocks: Iterable[SimpleBlock | ComplexBlock]) -> Iterator[SimpleBlock]:
    """Yield every leaf reachable from ``blocks``, in order."""
    for block in blocks:
        yield from block.get_children()


__all__ = [
    "Block",
    "BlockError",
    "BlockId",
    "ComplexBlock",
    "InvalidBlockGeometry",
    "SimpleBlock",
    "iter_leaves",
    "parse_block",
]
