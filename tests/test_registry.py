"""Tests for EntityRegistry: ordered storage with removal during traversal.

Covers:
- Append keeps insertion order
- for_each_removable visits every element exactly once
- Removal of head, tail, middle and all elements
- Appends after removals relink correctly
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from sims.core.registry import EntityRegistry


def _registry(values) -> EntityRegistry:
    reg = EntityRegistry()
    for v in values:
        reg.append(v)
    return reg


class TestAppendAndTraverse:

    def test_empty_registry(self):
        reg = EntityRegistry()
        assert len(reg) == 0
        assert reg.length() == 0
        assert list(reg) == []

    def test_append_preserves_order(self):
        reg = _registry(["a", "b", "c"])
        seen: list[str] = []
        reg.for_each(seen.append)
        assert seen == ["a", "b", "c"]
        assert len(reg) == 3

    def test_duplicates_by_value_are_kept(self):
        """Only reference identity matters; equal values coexist."""
        reg = _registry([1, 1, 1])
        assert list(reg) == [1, 1, 1]


class TestForEachRemovable:

    def test_remove_middle(self):
        """[A, B, C] removing B leaves [A, C] and visits each once."""
        reg = _registry(["A", "B", "C"])
        visited: list[str] = []

        def decide(v: str) -> bool:
            visited.append(v)
            return v == "B"

        removed = reg.for_each_removable(decide)
        assert removed == 1
        assert visited == ["A", "B", "C"]
        assert list(reg) == ["A", "C"]
        assert len(reg) == 2

    def test_remove_head_and_tail(self):
        reg = _registry([1, 2, 3, 4])
        reg.for_each_removable(lambda v: v in (1, 4))
        assert list(reg) == [2, 3]

    def test_remove_all(self):
        reg = _registry([1, 2, 3])
        visited: list[int] = []
        reg.for_each_removable(lambda v: visited.append(v) or True)
        assert visited == [1, 2, 3]
        assert list(reg) == []
        assert len(reg) == 0

    def test_consecutive_removals_do_not_skip(self):
        """Removing two neighbours in a row must not skip the element after them."""
        reg = _registry(list(range(6)))
        visited: list[int] = []

        def decide(v: int) -> bool:
            visited.append(v)
            return v in (1, 2)

        reg.for_each_removable(decide)
        assert visited == [0, 1, 2, 3, 4, 5]
        assert list(reg) == [0, 3, 4, 5]

    @pytest.mark.parametrize("mask", [0b0000000, 0b1111111, 0b1010101, 0b0101010, 0b1100011, 0b0011100])
    def test_result_is_input_minus_removed(self, mask):
        values = list(range(7))
        doomed = {v for v in values if mask & (1 << v)}
        reg = _registry(values)
        visits: dict[int, int] = {}

        def decide(v: int) -> bool:
            visits[v] = visits.get(v, 0) + 1
            return v in doomed

        assert reg.for_each_removable(decide) == len(doomed)
        assert visits == {v: 1 for v in values}
        assert list(reg) == [v for v in values if v not in doomed]
        assert len(reg) == len(values) - len(doomed)

    def test_append_after_removals(self):
        """Tail pointer stays valid after the old tail is unlinked."""
        reg = _registry([1, 2, 3])
        reg.for_each_removable(lambda v: v == 3)
        reg.append(4)
        reg.for_each_removable(lambda v: v == 1)
        reg.append(5)
        assert list(reg) == [2, 4, 5]

    def test_empty_traversal(self):
        reg = EntityRegistry()
        assert reg.for_each_removable(lambda v: True) == 0
