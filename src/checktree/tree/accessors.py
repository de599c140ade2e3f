"""KeyAccessor: field-name based access to caller tree nodes.

Nodes may be mappings (read and written by key) or plain objects (read and
written by attribute).  The field names for label, value and children are
fixed at construction; the synthetic ``refKey`` and ``visible`` fields use
the same names the engine has always exposed to renderers.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

__all__ = ["EXPAND_FIELD", "REF_KEY_FIELD", "VISIBLE_FIELD", "KeyAccessor"]

REF_KEY_FIELD = "refKey"
VISIBLE_FIELD = "visible"
EXPAND_FIELD = "expand"

_MISSING = object()


def _read(node: Any, name: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(name, _MISSING)
    return getattr(node, name, _MISSING)


def _write(node: Any, name: str, value: Any) -> None:
    if isinstance(node, MutableMapping):
        node[name] = value
    else:
        setattr(node, name, value)


@dataclass(frozen=True, slots=True)
class KeyAccessor:
    """Reads label, value and children from nodes by configured field name.

    Satisfies the ``NodeAccessor`` Protocol structurally.

    Attributes:
        value_key:    Field holding the node value.
        label_key:    Field holding the node label.
        children_key: Field holding the ordered child nodes.

    Example::

        accessor = KeyAccessor(value_key="id", label_key="title")
        accessor.get_value({"id": 7, "title": "Seven"})   # 7
    """

    value_key: str = "value"
    label_key: str = "label"
    children_key: str = "children"

    def get_label(self, node: Any) -> Any:
        label = _read(node, self.label_key)
        return None if label is _MISSING else label

    def get_value(self, node: Any) -> Any:
        value = _read(node, self.value_key)
        return None if value is _MISSING else value

    def get_children(self, node: Any) -> list[Any]:
        """Return the node's children, or ``[]`` when the field is malformed."""
        children = _read(node, self.children_key)
        if isinstance(children, (list, tuple)):
            return list(children)
        return []

    def has_children_field(self, node: Any) -> bool:
        """True when the children field is present and not None, even if empty."""
        children = _read(node, self.children_key)
        return children is not _MISSING and children is not None

    def get_expand_hint(self, node: Any) -> bool | None:
        hint = _read(node, EXPAND_FIELD)
        if hint is _MISSING:
            return None
        return bool(hint)

    def get_ref_key(self, node: Any) -> str | None:
        ref_key = _read(node, REF_KEY_FIELD)
        return None if ref_key is _MISSING else ref_key

    def set_ref_key(self, node: Any, ref_key: str) -> None:
        _write(node, REF_KEY_FIELD, ref_key)

    def set_children(self, node: Any, children: list[Any]) -> None:
        _write(node, self.children_key, children)

    def set_visible(self, node: Any, visible: bool) -> None:
        _write(node, VISIBLE_FIELD, visible)

    def get_visible(self, node: Any) -> bool:
        visible = _read(node, VISIBLE_FIELD)
        return True if visible is _MISSING else bool(visible)
