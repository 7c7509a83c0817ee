"""Reference copier: carries the aliasing contract.

A reference seen twice within one copy yields the same new cell both times.
The new cell is registered before its target is copied, so a target that
leads back to the same reference finds the cell instead of recursing forever.
"""

from __future__ import annotations

import logging
from typing import Any

from graphcopy.copiers.base import BaseCopier
from graphcopy.copiers.protocol import Dispatch
from graphcopy.core.reference import AliasTracker, Ref
from graphcopy.core.shape import Shape
from graphcopy.errors import CopyError, ReferenceCopyError

logger = logging.getLogger(__name__)


class ReferenceCopier(BaseCopier):
    shape = Shape.REFERENCE

    def copy(self, value: Any, tracker: AliasTracker, dispatcher: Dispatch) -> Any:
        self._expect_shape(value)
        cls: type[Ref[Any]] = type(value)

        if value.is_null:
            return cls.null()

        existing = tracker.lookup(value)
        if existing is not None:
            logger.debug("Reusing copy of %r", value)
            return existing

        # Register the empty cell first; the order breaks cycles.
        copied = cls.null()
        tracker.register(value, copied)

        try:
            target = dispatcher.dispatch(value.get(), tracker)
        except CopyError as err:
            raise ReferenceCopyError(repr(value), err) from err

        copied.set(target)
        return copied
