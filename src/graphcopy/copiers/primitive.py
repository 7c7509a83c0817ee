"""Primitive copier: immutable scalars are their own copy."""

from __future__ import annotations

from typing import Any

from graphcopy.copiers.base import BaseCopier
from graphcopy.copiers.protocol import Dispatch
from graphcopy.core.reference import AliasTracker
from graphcopy.core.shape import Shape
from graphcopy.errors import NotAPrimitiveError


class PrimitiveCopier(BaseCopier):
    shape = Shape.PRIMITIVE
    mismatch_error = NotAPrimitiveError

    def copy(self, value: Any, tracker: AliasTracker, dispatcher: Dispatch) -> Any:
        self._expect_shape(value)
        return value
