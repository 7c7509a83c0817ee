"""Reference cells: the value shape with identity semantics.

Python objects are all references, but the copier only preserves aliasing for
explicit `Ref` cells. Two fields holding the same `Ref` share storage, and the
copy keeps them sharing one new cell. Everything else is copied structurally.

Usage:
    node = Ref()              # null reference
    node.set([1, 2, 3])       # now points to a list
    node.get().append(4)
    empty = Ref.null()
"""

from __future__ import annotations

from typing import Any, cast

from graphcopy.errors import NullReferenceError

# Marks an unset cell. Distinct from None so Ref(None) is not null.
_NULL: Any = object()


class Ref[T]:
    """Mutable single-slot cell, compared and hashed by identity."""

    __slots__ = ("_target",)

    def __init__(self, target: T = _NULL) -> None:
        self._target = target

    @classmethod
    def null(cls) -> Ref[T]:
        """Return a new null reference of this class."""
        return cls()

    @property
    def is_null(self) -> bool:
        """Whether this reference points to nothing."""
        return self._target is _NULL

    def get(self) -> T:
        """Return the target.

        Raises:
            NullReferenceError: If the reference is null.
        """
        if self._target is _NULL:
            raise NullReferenceError(f"dereferenced a null {type(self).__name__}")
        return cast(T, self._target)

    def set(self, target: T) -> None:
        """Point this reference at target."""
        self._target = target

    def __repr__(self) -> str:
        # Never recurse into the target: cyclic graphs must stay printable.
        if self._target is _NULL:
            return f"{type(self).__name__}(null)"
        return f"{type(self).__name__}(-> {type(self._target).__name__} at {id(self):#x})"
