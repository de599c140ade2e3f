"""Structural value equality for tree node values.

Node values are opaque to the engine: they may be scalars or composite
objects built from dicts, lists and tuples.  Two values are equal when they
have the same structure, never when they merely share identity.

Booleans are compared first and only against booleans: ``bool`` subclasses
``int``, so ``True == 1`` would otherwise let a boolean value match an
integer one.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

__all__ = [
    "contains_value",
    "shallow_equal",
    "shallow_equal_sequence",
    "structural_equal",
]


def structural_equal(a: Any, b: Any) -> bool:
    """Return True if ``a`` and ``b`` are deeply equal.

    Mappings compare by key set and recursively by value.  Lists and tuples
    are interchangeable sequences compared element-wise.  Strings are
    compared as scalars.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True when both values have the same structure and contents.
    """
    # CRITICAL: bool before numbers (True == 1 in Python)
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(structural_equal(a[key], b[key]) for key in a)

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(structural_equal(x, y) for x, y in zip(a, b, strict=True))

    return bool(a == b)


def contains_value(values: Iterable[Any], value: Any) -> bool:
    """Return True if ``value`` is structurally equal to any item of ``values``."""
    return any(structural_equal(candidate, value) for candidate in values)


def _same(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if isinstance(a, (Mapping, list, tuple)) or isinstance(b, (Mapping, list, tuple)):
        return False
    return structural_equal(a, b)


def shallow_equal(a: Any, b: Any) -> bool:
    """One-level equality: containers must hold the *same* nested objects.

    Used to decide whether a caller handed back the same tree.  Nested
    children lists are compared by identity so that a caller who rebuilds a
    subtree is seen as a structural change.
    """
    if a is b:
        return True
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(_same(a[key], b[key]) for key in a)
    return _same(a, b)


def shallow_equal_sequence(a: Sequence[Any] | None, b: Sequence[Any] | None) -> bool:
    """Return True if two sequences hold shallow-equal items in the same order."""
    if a is b:
        return True
    if a is None or b is None or len(a) != len(b):
        return False
    return all(shallow_equal(x, y) for x, y in zip(a, b, strict=True))
