"""Sequence copiers: tuples (fixed arrays) and lists (dynamic sequences).

Both copy items in ascending index order and stop at the first failing item,
reporting its index.
"""

from __future__ import annotations

from typing import Any

from graphcopy.copiers.base import BaseCopier
from graphcopy.copiers.protocol import Dispatch
from graphcopy.core.reference import AliasTracker
from graphcopy.core.shape import Shape
from graphcopy.errors import CopyError, ElementCopyError


def _allocate_list(cls: type[list[Any]], size: int) -> list[Any]:
    """Allocate a list of class cls holding size None slots, bypassing __init__."""
    if cls is list:
        return [None] * size
    copied = cls.__new__(cls)
    list.extend(copied, [None] * size)
    return copied


class FixedArrayCopier(BaseCopier):
    """Copies tuples, keeping the tuple subclass (named tuples included)."""

    shape = Shape.FIXED_ARRAY

    def copy(self, value: Any, tracker: AliasTracker, dispatcher: Dispatch) -> Any:
        self._expect_shape(value)
        items = [None] * len(value)
        for index, item in enumerate(value):
            try:
                items[index] = dispatcher.dispatch(item, tracker)
            except CopyError as err:
                raise ElementCopyError(index, err) from err

        cls = type(value)
        if cls is tuple:
            return tuple(items)
        return tuple.__new__(cls, items)


class DynamicSequenceCopier(BaseCopier):
    """Copies lists into a new list of the same class and length."""

    shape = Shape.DYNAMIC_SEQUENCE

    def copy(self, value: Any, tracker: AliasTracker, dispatcher: Dispatch) -> Any:
        self._expect_shape(value)
        copied = _allocate_list(type(value), len(value))
        for index, item in enumerate(value):
            try:
                item_copy = dispatcher.dispatch(item, tracker)
            except CopyError as err:
                raise ElementCopyError(index, err) from err
            if item_copy is not None:
                copied[index] = item_copy
        return copied
