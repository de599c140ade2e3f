"""Exception hierarchy for checktree.

All failure modes in the engine are caller-contract violations.  They are
raised as ``CheckTreeError`` subclasses so callers can catch the whole family
with one clause.
"""

from __future__ import annotations

__all__ = ["CheckTreeError", "UnknownNodeError"]


class CheckTreeError(Exception):
    """Base class for every error raised by checktree."""


class UnknownNodeError(CheckTreeError, KeyError):
    """Raised when a ref_key is not present in the current index.

    This happens when a caller keeps a node reference across a tree swap and
    issues a toggle or expand against it without reindexing first.

    Attributes:
        ref_key: The ref_key that could not be resolved.
    """

    def __init__(self, ref_key: str) -> None:
        self.ref_key = ref_key
        super().__init__(ref_key)

    def __str__(self) -> str:
        return f"no node with ref_key {self.ref_key!r} in the current index"
