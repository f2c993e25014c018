"""Unit tests for block id uniqueness checks."""

from __future__ import annotations

import pytest

from blockcanvas.core.checks.identity import (
    DuplicateBlockId,
    assert_unique_ids,
    check_unique_ids,
    find_duplicate_ids,
    iter_ids,
)
from blockcanvas.core.contracts.block import ComplexBlock, SimpleBlock
from blockcanvas.core.contracts.geometry import RGBA

BLACK = RGBA(r=0, g=0, b=0, a=255)


def _leaf(bid: str, x0: int) -> SimpleBlock:
    return SimpleBlock(id=bid, bottom_left=(x0, 0), top_right=(x0 + 1, 1), color=BLACK)


def test_unique_ids_in_traversal_order() -> None:
    """Roots come before their leaves; a leaf root is listed once."""
    root = ComplexBlock(
        id="0", bottom_left=(0, 0), top_right=(2, 1), sub_blocks=[_leaf("0.0", 0), _leaf("0.1", 1)]
    )
    other = _leaf("1", 5)

    assert list(iter_ids([root, other])) == ["0", "0.0", "0.1", "1"]
    assert check_unique_ids([root, other]).unwrap() == ["0", "0.0", "0.1", "1"]
    assert find_duplicate_ids([root, other]) == {}
    assert_unique_ids([root, other])


def test_duplicate_among_siblings() -> None:
    root = ComplexBlock(
        id="0", bottom_left=(0, 0), top_right=(2, 1), sub_blocks=[_leaf("0.0", 0), _leaf("0.0", 1)]
    )
    assert find_duplicate_ids([root]) == {"0.0": 2}
    assert check_unique_ids([root]).unwrap_err() == {"0.0": 2}


def test_duplicate_across_roots_and_levels() -> None:
    """A leaf id may not repeat its parent's id or another root's id."""
    root = ComplexBlock(id="0", bottom_left=(0, 0), top_right=(1, 1), sub_blocks=[_leaf("0", 0)])
    assert find_duplicate_ids([root, _leaf("0", 3)]) == {"0": 3}


def test_assert_unique_ids_raises() -> None:
    with pytest.raises(DuplicateBlockId) as exc_info:
        assert_unique_ids([_leaf("a", 0), _leaf("a", 1)])
    assert exc_info.value.duplicates == {"a": 2}
    assert "'a'" in str(exc_info.value)


def test_check_unique_ids_accepts_a_one_shot_iterator() -> None:
    """Roots given as a generator are traversed for both the check and the id list."""
    roots = (_leaf(bid, i) for i, bid in enumerate(["a", "b", "c"]))
    assert check_unique_ids(roots).unwrap() == ["a", "b", "c"]
