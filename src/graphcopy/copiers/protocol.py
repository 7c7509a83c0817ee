"""Copier protocol: one structural copy strategy per shape.

Copiers never call each other directly. Every contained value goes back
through the dispatcher so it is classified again at its own level.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from graphcopy.config import CopySettings
    from graphcopy.core.reference import AliasTracker
    from graphcopy.core.shape import Shape


class Dispatch(Protocol):
    """What a copier needs from the dispatcher that invoked it."""

    @property
    def settings(self) -> CopySettings:
        """Settings of the current copy."""
        ...

    def dispatch(self, value: Any, tracker: AliasTracker) -> Any:
        """Copy a contained value, threading the same tracker."""
        ...


class Copier(Protocol):
    """Copy strategy for a single shape."""

    shape: Shape

    def copy(self, value: Any, tracker: AliasTracker, dispatcher: Dispatch) -> Any:
        """Return a deep copy of value.

        Args:
            value: Value of this copier's shape.
            tracker: Aliasing tracker of the current top-level copy.
            dispatcher: Used to copy every contained value.

        Returns:
            New value of the same class, disjoint from value.

        Raises:
            ShapeMismatchError: If value does not have this copier's shape.
            CopyError: If a contained value cannot be copied.
        """
        ...
