"""Tests for CheckStatePropagator.

Covers:
- Copy-on-toggle (the input index is never mutated)
- Downward cascade, including walking through uncheckable nodes
- Upward recomputation of ancestors (binary check/check_all)
- Cascade off
- Idempotence and the cascade-down / cascade-up properties over every node
- UnknownNodeError for stale ref_keys
"""

from __future__ import annotations

from typing import Any

import pytest

from checktree.algorithm.propagation import CheckStatePropagator
from checktree.errors import UnknownNodeError
from checktree.tree.accessors import KeyAccessor
from checktree.tree.indexer import NodeIndexer
from checktree.tree.nodes import TreeIndex

A, B, C, D = "0-0", "0-0-0", "0-0-0-0", "0-0-0-1"


def _index(data: list[dict[str, Any]], uncheckable: tuple[Any, ...] = ()) -> TreeIndex:
    return NodeIndexer(KeyAccessor(), uncheckable_values=uncheckable).flatten(data)


def _descendants(index: TreeIndex, ref_key: str) -> list[str]:
    result: list[str] = []
    for child_key in index[ref_key].child_keys:
        result.append(child_key)
        result.extend(_descendants(index, child_key))
    return result


def _ancestors(index: TreeIndex, ref_key: str) -> list[str]:
    result: list[str] = []
    parent_key = index[ref_key].parent_key
    while parent_key is not None:
        result.append(parent_key)
        parent_key = index[parent_key].parent_key
    return result


def _checked(index: TreeIndex) -> set[str]:
    return {key for key, node in index.items() if node.check}


@pytest.fixture
def propagator() -> CheckStatePropagator:
    return CheckStatePropagator()


# ---------------------------------------------------------------------------
# Copy semantics
# ---------------------------------------------------------------------------


class TestCopyOnToggle:
    def test_input_index_untouched(
        self, propagator: CheckStatePropagator, abcd: list[dict[str, Any]]
    ) -> None:
        index = _index(abcd)
        result = propagator.toggle(index, A, True)
        assert _checked(index) == set()
        assert _checked(result) == {A, B, C, D}

    def test_returns_new_mapping(
        self, propagator: CheckStatePropagator, abcd: list[dict[str, Any]]
    ) -> None:
        index = _index(abcd)
        result = propagator.toggle(index, C, True)
        assert result is not index
        assert all(result[key] is not index[key] for key in index)

    def test_unknown_ref_key(
        self, propagator: CheckStatePropagator, abcd: list[dict[str, Any]]
    ) -> None:
        with pytest.raises(UnknownNodeError) as exc_info:
            propagator.toggle(_index(abcd), "0-9", True)
        assert exc_info.value.ref_key == "0-9"
        assert isinstance(exc_info.value, KeyError)


# ---------------------------------------------------------------------------
# Downward pass
# ---------------------------------------------------------------------------


class TestPropagateDown:
    def test_root_checks_everything(
        self, propagator: CheckStatePropagator, abcd: list[dict[str, Any]]
    ) -> None:
        result = propagator.toggle(_index(abcd), A, True)
        assert _checked(result) == {A, B, C, D}

    def test_check_all_set_on_parents_only(
        self, propagator: CheckStatePropagator, abcd: list[dict[str, Any]]
    ) -> None:
        result = propagator.toggle(_index(abcd), A, True)
        assert result[A].check_all
        assert result[B].check_all
        assert not result[C].check_all
        assert not result[D].check_all

    def test_uncheckable_leaf_not_overwritten(
        self, propagator: CheckStatePropagator, abcd: list[dict[str, Any]]
    ) -> None:
        result = propagator.toggle(_index(abcd, ("d",)), A, True)
        assert _checked(result) == {A, B, C}

    def test_walks_through_uncheckable_group(
        self, propagator: CheckStatePropagator, abcd: list[dict[str, Any]]
    ) -> None:
        result = propagator.toggle(_index(abcd, ("b",)), A, True)
        assert not result[B].check
        assert not result[B].check_all
        assert result[C].check
        assert result[D].check

    def test_uncheck_clears_subtree(
        self, propagator: CheckStatePropagator, abcd: list[dict[str, Any]]
    ) -> None:
        checked = propagator.toggle(_index(abcd), A, True)
        result = propagator.toggle(checked, B, False)
        assert _checked(result) == set()
        assert not result[A].check_all


# ---------------------------------------------------------------------------
# Upward pass
# ---------------------------------------------------------------------------


class TestPropagateUp:
    def test_single_child_leaves_parent_unchecked(
        self, propagator: CheckStatePropagator, abcd: list[dict[str, Any]]
    ) -> None:
        result = propagator.toggle(_index(abcd), C, True)
        assert _checked(result) == {C}

    def test_last_child_completes_parents(
        self, propagator: CheckStatePropagator, abcd: list[dict[str, Any]]
    ) -> None:
        index = propagator.toggle(_index(abcd), C, True)
        result = propagator.toggle(index, D, True)
        assert _checked(result) == {A, B, C, D}
        assert result[A].check_all
        assert result[B].check_all

    def test_uncheckable_sibling_ignored(
        self, propagator: CheckStatePropagator, abcd: list[dict[str, Any]]
    ) -> None:
        result = propagator.toggle(_index(abcd, ("d",)), C, True)
        assert _checked(result) == {A, B, C}
        assert result[B].check_all

    def test_uncheck_breaks_ancestor_chain(
        self, propagator: CheckStatePropagator, abcd: list[dict[str, Any]]
    ) -> None:
        checked = propagator.toggle(_index(abcd), A, True)
        result = propagator.toggle(checked, C, False)
        assert _checked(result) == {D}
        assert not result[A].check_all
        assert not result[B].check_all

    def test_uncheckable_ancestor_not_overwritten(
        self, propagator: CheckStatePropagator, abcd: list[dict[str, Any]]
    ) -> None:
        index = propagator.toggle(_index(abcd, ("b",)), C, True)
        result = propagator.toggle(index, D, True)
        assert not result[B].check
        # A has no checkable direct child left, so any check below completes it
        assert result[A].check
        assert result[A].check_all

    def test_uncheckable_group_ignored_by_ancestor(self, make_node: Any) -> None:
        # A[U*[X, Y], Z]: only Z decides A
        data = [
            make_node(
                "A",
                "a",
                make_node("U", "u", make_node("X", "x"), make_node("Y", "y")),
                make_node("Z", "z"),
            )
        ]
        result = CheckStatePropagator().toggle(_index(data, ("u",)), "0-0-1", True)
        assert result["0-0"].check
        assert result["0-0"].check_all
        assert not result["0-0-0"].check
        assert not result["0-0-0-0"].check

    def test_uncheckable_group_members_do_not_complete_ancestor(
        self, make_node: Any
    ) -> None:
        data = [
            make_node(
                "A",
                "a",
                make_node("U", "u", make_node("X", "x")),
                make_node("Z", "z"),
            )
        ]
        result = CheckStatePropagator().toggle(_index(data, ("u",)), "0-0-0-0", True)
        assert result["0-0-0-0"].check
        assert not result["0-0"].check

    def test_other_branch_untouched(
        self, propagator: CheckStatePropagator, regions: list[dict[str, Any]]
    ) -> None:
        result = propagator.toggle(_index(regions), "0-0-0", True)
        assert _checked(result) == {"0-0-0", "0-0-0-0", "0-0-0-1"}


# ---------------------------------------------------------------------------
# Cascade off
# ---------------------------------------------------------------------------


class TestCascadeOff:
    def test_only_target_changes(self, abcd: list[dict[str, Any]]) -> None:
        result = CheckStatePropagator(cascade=False).toggle(_index(abcd), A, True)
        assert _checked(result) == {A}
        assert not result[A].check_all

    def test_children_do_not_complete_parent(self, abcd: list[dict[str, Any]]) -> None:
        propagator = CheckStatePropagator(cascade=False)
        index = propagator.toggle(_index(abcd), C, True)
        result = propagator.toggle(index, D, True)
        assert _checked(result) == {C, D}


# ---------------------------------------------------------------------------
# Properties over every node
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "uncheckable", [(), ("lyon",), ("es", "jp"), ("fr",), ("eu", "fr")]
)
@pytest.mark.parametrize(
    "target", ["0-0", "0-0-0", "0-0-0-0", "0-0-0-1", "0-0-1", "0-1", "0-1-0"]
)
class TestProperties:
    def test_cascade_down(
        self,
        regions: list[dict[str, Any]],
        uncheckable: tuple[str, ...],
        target: str,
    ) -> None:
        index = _index(regions, uncheckable)
        if index[target].uncheckable:
            pytest.skip("inert target")
        result = CheckStatePropagator().toggle(index, target, True)
        for key in _descendants(result, target):
            assert result[key].check != result[key].uncheckable

    def test_cascade_up(
        self,
        regions: list[dict[str, Any]],
        uncheckable: tuple[str, ...],
        target: str,
    ) -> None:
        index = _index(regions, uncheckable)
        if index[target].uncheckable:
            pytest.skip("inert target")
        result = CheckStatePropagator().toggle(index, target, True)
        for key in _ancestors(result, target):
            if result[key].uncheckable:
                continue
            children = [
                result[c] for c in result[key].child_keys if not result[c].uncheckable
            ]
            assert result[key].check == all(c.check for c in children)

    def test_idempotent(
        self,
        regions: list[dict[str, Any]],
        uncheckable: tuple[str, ...],
        target: str,
    ) -> None:
        propagator = CheckStatePropagator()
        for checked in (True, False):
            once = propagator.toggle(_index(regions, uncheckable), target, checked)
            twice = propagator.toggle(once, target, checked)
            assert once == twice

    def test_uncheckable_never_checked(
        self,
        regions: list[dict[str, Any]],
        uncheckable: tuple[str, ...],
        target: str,
    ) -> None:
        propagator = CheckStatePropagator()
        result = _index(regions, uncheckable)
        for key in [target, "0-0", "0-1"]:
            result = propagator.toggle(result, key, True)
        assert not any(n.check for n in result.values() if n.uncheckable)
