"""Shared tree fixtures.

All trees are built fresh per test because the engine writes ``refKey`` and
``visible`` onto the caller's nodes.
"""

from __future__ import annotations

from typing import Any

import pytest


def node(
    label: str, value: Any, *children: dict[str, Any], **extra: Any
) -> dict[str, Any]:
    """Build a mapping-shaped tree node."""
    result: dict[str, Any] = {"label": label, "value": value, **extra}
    if children:
        result["children"] = list(children)
    return result


def abcd_tree() -> list[dict[str, Any]]:
    """A[B[C, D]] with values "a".."d"."""
    return [node("A", "a", node("B", "b", node("C", "c"), node("D", "d")))]


def region_tree() -> list[dict[str, Any]]:
    """Two roots, three levels, used for multi-branch scenarios.

    0-0 Europe (eu)
        0-0-0 France (fr)
            0-0-0-0 Paris (paris)
            0-0-0-1 Lyon (lyon)
        0-0-1 Spain (es)
    0-1 Asia (asia)
        0-1-0 Japan (jp)
    """
    return [
        node(
            "Europe",
            "eu",
            node("France", "fr", node("Paris", "paris"), node("Lyon", "lyon")),
            node("Spain", "es"),
        ),
        node("Asia", "asia", node("Japan", "jp")),
    ]


@pytest.fixture
def abcd() -> list[dict[str, Any]]:
    return abcd_tree()


@pytest.fixture
def regions() -> list[dict[str, Any]]:
    return region_tree()


@pytest.fixture
def make_node() -> Any:
    """The ``node(label, value, *children, **extra)`` builder."""
    return node
