"""CheckTreeConfig: immutable configuration for a check-tree engine.

The accessor field names, cascade mode, the uncheckable/disabled value lists
and the externally driven options (``expand_all``, ``search_keyword``) all
live here.  Changing any of them goes through ``evolve()``, which returns a
new validated config.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

from checktree.tree.accessors import KeyAccessor

__all__ = ["CheckTreeConfig"]


@dataclass(frozen=True, slots=True)
class CheckTreeConfig:
    """Immutable configuration for ``CheckTree``.

    Attributes:
        cascade: When True, checking a node checks its descendants and
            recomputes its ancestors.  Default True.
        value_key: Field name of the node value.  Default ``"value"``.
        label_key: Field name of the node label.  Default ``"label"``.
        children_key: Field name of the child list.  Default ``"children"``.
        uncheckable_item_values: Values whose checkbox is inert.
        disabled_item_values: Values whose node is fully non-interactive.
        expand_all: When not None, written onto every parent (over its own
            hint) each time the index is built; nodes can still be toggled
            individually afterwards.
        default_expand_all: Initial expansion when ``expand_all`` is None.
        search_keyword: When not None, the search keyword is owned by the
            caller and the engine does not track its own.
    """

    cascade: bool = True
    value_key: str = "value"
    label_key: str = "label"
    children_key: str = "children"
    uncheckable_item_values: Sequence[Any] = ()
    disabled_item_values: Sequence[Any] = ()
    expand_all: bool | None = None
    default_expand_all: bool = False
    search_keyword: str | None = None

    def __post_init__(self) -> None:
        keys = (self.value_key, self.label_key, self.children_key)
        for name in keys:
            if not isinstance(name, str) or not name:
                msg = f"field names must be non-empty strings, got {name!r}"
                raise ValueError(msg)
        if len(set(keys)) != len(keys):
            msg = f"value_key, label_key and children_key must differ, got {keys}"
            raise ValueError(msg)
        object.__setattr__(
            self, "uncheckable_item_values", tuple(self.uncheckable_item_values or ())
        )
        object.__setattr__(
            self, "disabled_item_values", tuple(self.disabled_item_values or ())
        )

    @property
    def effective_expand_all(self) -> bool:
        if self.expand_all is not None:
            return self.expand_all
        return self.default_expand_all

    @property
    def accessor(self) -> KeyAccessor:
        return KeyAccessor(
            value_key=self.value_key,
            label_key=self.label_key,
            children_key=self.children_key,
        )

    def evolve(self, **changes: Any) -> CheckTreeConfig:
        """Return a copy of this config with ``changes`` applied and validated."""
        return replace(self, **changes)
