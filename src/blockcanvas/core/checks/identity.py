"""Id uniqueness checks over the blocks reachable from one or more roots.

Block ids are chosen by callers (the move layer mints fresh ids on every cut
or merge); this module only reports collisions.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator

from blockcanvas.core.contracts.block import BlockError, ComplexBlock, SimpleBlock
from blockcanvas.core.result import Result, err, ok
from blockcanvas.core.settings import get_logger

logger = get_logger(__name__)


class DuplicateBlockId(BlockError):
    """Raised by :func:`assert_unique_ids` when two reachable blocks share an id."""

    def __init__(self, duplicates: dict[str, int]) -> None:
        self.duplicates = duplicates
        listed = ", ".join(f"{bid!r} x{count}" for bid, count in duplicates.items())
        super().__init__(f"Duplicate block ids: {listed}")


def iter_ids(blocks: Iterable[SimpleBlock | ComplexBlock]) -> Iterator[str]:
    """Yield the id of every root and of each ComplexBlock's leaves, in order."""
    for block in blocks:
        yield block.id
        # a leaf's only child is itself
        if isinstance(block, ComplexBlock):
            for leaf in block.get_children():
                yield leaf.id


def find_duplicate_ids(blocks: Iterable[SimpleBlock | ComplexBlock]) -> dict[str, int]:
    """Map each id seen more than once to its number of occurrences."""
    counts = Counter(iter_ids(blocks))
    return {bid: count for bid, count in counts.items() if count > 1}


def check_unique_ids(
    blocks: Iterable[SimpleBlock | ComplexBlock],
) -> Result[list[str], dict[str, int]]:
    """``Ok(ids in traversal order)`` when unique, else ``Err(duplicates)``."""
    roots = list(blocks)
    duplicates = find_duplicate_ids(roots)
    if duplicates:
        logger.warning("duplicate block ids: %s", sorted(duplicates))
        return err(duplicates)
    return ok(list(iter_ids(roots)))


def assert_unique_ids(blocks: Iterable[SimpleBlock | ComplexBlock]) -> None:
    """Raise :class:`DuplicateBlockId` if any reachable id occurs more than once."""
    duplicates = find_duplicate_ids(blocks)
    if duplicates:
        raise DuplicateBlockId(duplicates)


__all__ = [
    "DuplicateBlockId",
    "assert_unique_ids",
    "check_unique_ids",
    "find_duplicate_ids",
    "iter_ids",
]
