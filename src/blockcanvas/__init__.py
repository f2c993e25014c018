"""blockcanvas: the block tree model behind the image-construction contest canvas.

A canvas is one rectangular block that gets recursively cut, merged, colored
and swapped. This package defines the block variants, their geometry
invariants, and the structural checks (tiling, id uniqueness) the move layer
runs before accepting a new tree.
"""

from __future__ import annotations

from blockcanvas.core.contracts.block import (
    Block,
    BlockError,
    ComplexBlock,
    InvalidBlockGeometry,
    SimpleBlock,
    iter_leaves,
    parse_block,
)
from blockcanvas.core.contracts.geometry import RGBA, Point, Size

__all__ = [
    "RGBA",
    "Block",
    "BlockError",
    "ComplexBlock",
    "InvalidBlockGeometry",
    "Point",
    "SimpleBlock",
    "Size",
    "__version__",
    "iter_leaves",
    "parse_block",
]
__version__ = "0.1.0"
