"""
Tiling validator for composite blocks.

A ComplexBlock is expected to be partitioned by its leaves: every leaf lies
inside the parent rectangle, no two leaves overlap, and together they leave
no gap. Block constructors do not check this; whichever operation assembles
``sub_blocks`` (cut, merge) calls into this module instead.

All rectangles are half-open, ``[bottom_left, top_right)``, so two leaves
sharing an edge do not overlap and a zero-area leaf covers nothing.

Entry points
------------
- :func:`find_tiling_issues` -> ``list[TilingIssue]`` (empty when valid)
- :func:`check_tiling`       -> ``Result[block, list[TilingIssue]]``
- :func:`assert_tiling`      -> raises :class:`InvalidTiling`
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Literal

from blockcanvas.core.contracts.block import BlockError, ComplexBlock, SimpleBlock
from blockcanvas.core.contracts.geometry import Point
from blockcanvas.core.result import Result, err, ok
from blockcanvas.core.settings import get_logger

logger = get_logger(__name__)

AnyBlock = SimpleBlock | ComplexBlock
IssueKind = Literal["out_of_bounds", "overlap", "gap"]


@dataclass(frozen=True, slots=True)
class TilingIssue:
    """
    One reason a composite block's leaves fail to tile it.

    Attributes
    ----------
    kind : IssueKind
        ``out_of_bounds`` (leaf escapes the parent), ``overlap`` (two leaves
        share area) or ``gap`` (part of the parent is uncovered).
    block_ids : tuple[str, ...]
        Ids involved: the leaf, the two overlapping leaves, or the parent.
    detail : str
        Human-readable description for logs and the CLI.
    """

    kind: IssueKind
    block_ids: tuple[str, ...]
    detail: str


class InvalidTiling(BlockError):
    """Raised by :func:`assert_tiling` when a block's leaves do not tile it."""

    def __init__(self, block_id: str, issues: list[TilingIssue]) -> None:
        self.block_id = block_id
        self.issues = issues
        summary = "; ".join(issue.detail for issue in issues)
        super().__init__(f"Block {block_id!r} is not tiled by its sub-blocks: {summary}")


# ---- Rectangle helpers ---------------------------------------------------------


def area(block: AnyBlock) -> int:
    """Number of grid cells covered by ``block``."""
    return block.size.px * block.size.py


def contains_point(block: AnyBlock, point: Point) -> bool:
    """True if ``point`` lies in the half-open rectangle of ``block``."""
    return (
        block.bottom_left.px <= point.px < block.top_right.px
        and block.bottom_left.py <= point.py < block.top_right.py
    )


def contains(outer: AnyBlock, inner: AnyBlock) -> bool:
    """True if the rectangle of ``inner`` lies entirely within ``outer``."""
    return (
        outer.bottom_left.px <= inner.bottom_left.px
        and outer.bottom_left.py <= inner.bottom_left.py
        and inner.top_right.px <= outer.top_right.px
        and inner.top_right.py <= outer.top_right.py
    )


def intersection_area(a: AnyBlock, b: AnyBlock) -> int:
    """Area shared by the rectangles of ``a`` and ``b`` (0 when disjoint)."""
    width = min(a.top_right.px, b.top_right.px) - max(a.bottom_left.px, b.bottom_left.px)
    height = min(a.top_right.py, b.top_right.py) - max(a.bottom_left.py, b.bottom_left.py)
    if width <= 0 or height <= 0:
        return 0
    return width * height


# ---- Validator -----------------------------------------------------------------


def find_tiling_issues(block: AnyBlock) -> list[TilingIssue]:
    """Return every reason the leaves of ``block`` fail to tile it.

    A SimpleBlock always tiles itself. The gap check only runs once no leaf
    escapes and no two leaves overlap; otherwise summing leaf areas says
    nothing about coverage.
    """
    if isinstance(block, SimpleBlock):
        return []

    issues: list[TilingIssue] = []
    leaves = block.get_children()

    for leaf in leaves:
        if not contains(block, leaf):
            issues.append(
                TilingIssue(
                    kind="out_of_bounds",
                    block_ids=(leaf.id,),
                    detail=(
                        f"leaf {leaf.id!r} [{leaf.bottom_left}, {leaf.top_right}) "
                        f"escapes parent [{block.bottom_left}, {block.top_right})"
                    ),
                )
            )

    for first, second in combinations(leaves, 2):
        shared = intersection_area(first, second)
        if shared > 0:
            issues.append(
                TilingIssue(
                    kind="overlap",
                    block_ids=(first.id, second.id),
                    detail=f"leaves {first.id!r} and {second.id!r} overlap on {shared} cells",
                )
            )

    if not issues:
        uncovered = area(block) - sum(area(leaf) for leaf in leaves)
        if uncovered:
            issues.append(
                TilingIssue(
                    kind="gap",
                    block_ids=(block.id,),
                    detail=f"{uncovered} cells of {block.id!r} are not covered by any leaf",
                )
            )

    for issue in issues:
        logger.warning("tiling issue in %s: %s", block.id, issue.detail)
    if not issues:
        logger.debug("block %s is tiled by %d leaves", block.id, len(leaves))
    return issues


def check_tiling(block: AnyBlock) -> Result[AnyBlock, list[TilingIssue]]:
    """Non-raising variant: ``Ok(block)`` when tiled, else ``Err(issues)``."""
    issues = find_tiling_issues(block)
    if issues:
        return err(issues)
    return ok(block)


def assert_tiling(block: AnyBlock) -> None:
    """Raise :class:`InvalidTiling` unless the leaves of ``block`` tile it."""
    issues = find_tiling_issues(block)
    if issues:
        raise InvalidTiling(block.id, issues)


__all__ = [
    "InvalidTiling",
    "IssueKind",
    "TilingIssue",
    "area",
    "assert_tiling",
    "check_tiling",
    "contains",
    "contains_point",
    "find_tiling_issues",
    "intersection_area",
]
