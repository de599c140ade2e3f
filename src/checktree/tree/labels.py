"""Flatten node labels to plain text for keyword matching.

Labels are usually strings but may be composite markup fragments: nested
lists of text runs, or mapping-shaped elements carrying their content under
``"children"`` (or ``"text"``).  Only the textual content takes part in a
search match.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["label_to_text"]


def label_to_text(label: Any) -> str:
    """Return the concatenated text content of ``label``.

    Args:
        label: A string, number, list/tuple of parts, markup mapping, or an
            object exposing a ``text`` attribute.

    Returns:
        The flattened text.  ``None`` and booleans contribute nothing.
    """
    if label is None or isinstance(label, bool):
        return ""
    if isinstance(label, str):
        return label
    if isinstance(label, (int, float)):
        return str(label)
    if isinstance(label, (list, tuple)):
        return "".join(label_to_text(part) for part in label)
    if isinstance(label, Mapping):
        if "children" in label:
            return label_to_text(label["children"])
        return label_to_text(label.get("text"))
    return label_to_text(getattr(label, "text", None))
