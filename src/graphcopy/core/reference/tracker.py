"""Aliasing tracker: identity map scoped to one top-level copy.

AliasTracker is a stateful service that remembers, for every reference copied
so far, the cell that was produced for it.
"""

from __future__ import annotations

from typing import Any


class AliasTracker:
    """Maps original reference identity to the copy produced for it.

    Keys are `id()` of the original. The original is pinned alongside its copy
    so its id cannot be recycled by another object while the tracker lives.
    Holds at most one entry per identity.
    """

    def __init__(self) -> None:
        """Initialize empty tracker."""
        self._copies: dict[int, tuple[Any, Any]] = {}

    def lookup(self, original: Any) -> Any | None:
        """Get the copy already produced for original.

        Args:
            original: Reference being copied.

        Returns:
            The registered copy, or None if original was not seen yet.
        """
        entry = self._copies.get(id(original))
        if entry is None:
            return None
        return entry[1]

    def register(self, original: Any, copied: Any) -> None:
        """Record copied as the copy of original.

        Must be called before recursing into original's target so that a
        cycle back to original finds this entry.

        Args:
            original: Reference being copied.
            copied: Newly allocated cell standing in for original.

        Raises:
            RuntimeError: If original is already registered.
        """
        key = id(original)
        if key in self._copies:
            raise RuntimeError(f"Reference {original!r} is already tracked")
        self._copies[key] = (original, copied)

    def __contains__(self, original: object) -> bool:
        return id(original) in self._copies

    def __len__(self) -> int:
        return len(self._copies)
