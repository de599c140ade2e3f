"""Tests for structural value equality.

Covers:
- Scalars, bool/int separation
- Nested mappings and sequences
- contains_value membership
- shallow_equal identity semantics for nested containers
"""

from __future__ import annotations

import pytest

from checktree.tree.equality import (
    contains_value,
    shallow_equal,
    shallow_equal_sequence,
    structural_equal,
)


class TestStructuralEqual:
    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (1, 1),
            ("x", "x"),
            (None, None),
            (1.5, 1.5),
            ({"id": 1}, {"id": 1}),
            ([1, [2, 3]], [1, [2, 3]]),
            ((1, 2), [1, 2]),
            ({"a": {"b": [1, {"c": 2}]}}, {"a": {"b": [1, {"c": 2}]}}),
        ],
    )
    def test_equal_values(self, a: object, b: object) -> None:
        assert structural_equal(a, b)

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (1, 2),
            ("x", "y"),
            ({"id": 1}, {"id": 2}),
            ({"id": 1}, {"id": 1, "extra": 0}),
            ([1, 2], [1, 2, 3]),
            ([1, 2], [2, 1]),
            (None, 0),
        ],
    )
    def test_unequal_values(self, a: object, b: object) -> None:
        assert not structural_equal(a, b)

    def test_bool_is_not_int(self) -> None:
        assert not structural_equal(True, 1)
        assert not structural_equal(0, False)

    def test_bool_equals_bool(self) -> None:
        assert structural_equal(True, True)
        assert not structural_equal(True, False)

    def test_nested_bool_is_not_int(self) -> None:
        assert not structural_equal({"flag": True}, {"flag": 1})

    def test_distinct_objects_are_compared_by_content(self) -> None:
        left = {"id": [1, 2]}
        right = {"id": [1, 2]}
        assert left is not right
        assert structural_equal(left, right)


class TestContainsValue:
    def test_finds_composite_value(self) -> None:
        assert contains_value([{"id": 1}, {"id": 2}], {"id": 2})

    def test_missing_value(self) -> None:
        assert not contains_value(["a", "b"], "c")

    def test_empty_list(self) -> None:
        assert not contains_value([], "a")

    def test_accepts_generators(self) -> None:
        assert contains_value((v for v in ["a", "b"]), "b")


class TestShallowEqual:
    def test_same_object(self) -> None:
        node = {"label": "A", "children": []}
        assert shallow_equal(node, node)

    def test_copies_with_shared_children_are_equal(self) -> None:
        children = [{"label": "B"}]
        assert shallow_equal(
            {"label": "A", "children": children},
            {"label": "A", "children": children},
        )

    def test_copies_with_rebuilt_children_differ(self) -> None:
        assert not shallow_equal(
            {"label": "A", "children": [{"label": "B"}]},
            {"label": "A", "children": [{"label": "B"}]},
        )

    def test_sequence_of_same_nodes(self) -> None:
        nodes = [{"label": "A"}, {"label": "B"}]
        assert shallow_equal_sequence(nodes, list(nodes))

    def test_sequence_length_mismatch(self) -> None:
        nodes = [{"label": "A"}]
        assert not shallow_equal_sequence(nodes, [*nodes, {"label": "B"}])

    def test_sequence_against_none(self) -> None:
        assert not shallow_equal_sequence([], None)
