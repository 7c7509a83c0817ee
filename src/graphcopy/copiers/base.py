"""Shared copier plumbing: shape checks and value descriptions."""

from __future__ import annotations

import reprlib
from typing import Any, ClassVar

from graphcopy.core.shape import Shape, shape_of
from graphcopy.errors import ShapeMismatchError

_describer = reprlib.Repr()
_describer.maxother = 80
_describer.maxstring = 60
_describer.maxlevel = 3


def describe(value: Any) -> str:
    """Short, bounded repr of value for error messages."""
    return _describer.repr(value)


class BaseCopier:
    """Base class for copiers. Subclasses set `shape` and implement `copy`."""

    shape: ClassVar[Shape]
    mismatch_error: ClassVar[type[ShapeMismatchError]] = ShapeMismatchError

    def _expect_shape(self, value: Any) -> None:
        """Guard against a dispatcher/copier mismatch.

        Raises:
            ShapeMismatchError: If value's shape differs from this copier's.
        """
        actual = shape_of(value)
        if actual is not self.shape:
            raise self.mismatch_error(expected=self.shape, actual=actual)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.shape.name})"
