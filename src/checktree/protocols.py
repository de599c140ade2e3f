"""NodeAccessor Protocol: the read/write seam between the engine and caller nodes.

Caller trees are made of arbitrary node objects.  The engine never looks up
fields by name at its call sites; it goes through an accessor resolved once
from the configured field names.  Any class with the methods below passes
``isinstance`` checks, so callers with exotic node types can plug in their
own accessor without inheriting from anything.

Example::

    from checktree.protocols import NodeAccessor

    class PathAccessor:
        def get_label(self, node): return node.name
        def get_value(self, node): return node.path
        def get_children(self, node): return node.entries
        def has_children_field(self, node): return node.entries is not None
        def get_expand_hint(self, node): return None
        def get_ref_key(self, node): return node.ref_key
        def set_ref_key(self, node, ref_key): node.ref_key = ref_key
        def set_children(self, node, children): node.entries = children
        def set_visible(self, node, visible): node.visible = visible
        def get_visible(self, node): return node.visible

    assert isinstance(PathAccessor(), NodeAccessor)
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class NodeAccessor(Protocol):
    """Structural protocol for reading and augmenting caller-owned nodes.

    ``get_children`` must return a list; a node whose children field is
    missing or is not a list/tuple is reported as having no children.
    ``set_ref_key`` and ``set_visible`` are the only writes the engine
    performs on caller nodes.
    """

    def get_label(self, node: Any) -> Any: ...

    def get_value(self, node: Any) -> Any: ...

    def get_children(self, node: Any) -> list[Any]: ...

    def has_children_field(self, node: Any) -> bool: ...

    def get_expand_hint(self, node: Any) -> bool | None: ...

    def get_ref_key(self, node: Any) -> str | None: ...

    def set_ref_key(self, node: Any, ref_key: str) -> None: ...

    def set_children(self, node: Any, children: list[Any]) -> None: ...

    def set_visible(self, node: Any, visible: bool) -> None: ...

    def get_visible(self, node: Any) -> bool: ...
