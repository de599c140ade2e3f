"""pytest plugin for checktree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from checktree.tree.equality import structural_equal


def _missing(source: Sequence[Any], other: Sequence[Any]) -> list[Any]:
    """Items of ``source`` not matched one-for-one by items of ``other``."""
    remaining = list(other)
    missing: list[Any] = []
    for item in source:
        for position, candidate in enumerate(remaining):
            if structural_equal(item, candidate):
                del remaining[position]
                break
        else:
            missing.append(item)
    return missing


@pytest.fixture(scope="session")
def assert_selection_equal() -> Any:
    """Fixture that returns a callable selected-value list asserter.

    Selected-value lists are compared as multisets under structural
    equality: order is ignored, duplicates count.

    Usage in tests::

        def test_toggle(assert_selection_equal):
            values = tree.select("0-0")
            assert_selection_equal(values, ["a"])

    Returns:
        A callable ``_assert(actual, expected) -> None`` that raises
        ``AssertionError`` listing the missing and unexpected values.
    """

    def _assert(actual: Sequence[Any], expected: Sequence[Any]) -> None:
        missing = _missing(expected, actual)
        unexpected = _missing(actual, expected)
        if missing or unexpected:
            raise AssertionError(
                f"selected values differ\n"
                f"  actual:     {list(actual)}\n"
                f"  expected:   {list(expected)}\n"
                f"  missing:    {missing}\n"
                f"  unexpected: {unexpected}"
            )

    return _assert
