"""Shape dispatcher: routes every value to the copier for its shape.

Usage:
    dispatcher = Dispatcher(CopySettings())
    copied = dispatcher.dispatch(value, AliasTracker())
"""

from __future__ import annotations

from typing import Any

from graphcopy.config import CopySettings
from graphcopy.copiers import copier_for, describe
from graphcopy.core.reference import AliasTracker
from graphcopy.core.shape import Shape, shape_of
from graphcopy.errors import DepthExceededError, ShapeNotSupportedError


class Dispatcher:
    """Classifies values and hands them to copiers.

    Classification happens at every level; no type is assumed copyable.
    Tracks the current nesting depth to enforce `settings.max_depth`.

    Args:
        settings: Settings for this copy.
    """

    def __init__(self, settings: CopySettings) -> None:
        self._settings = settings
        self._depth = 0

    @property
    def settings(self) -> CopySettings:
        """Settings of the current copy."""
        return self._settings

    @property
    def depth(self) -> int:
        """Number of dispatches currently on the stack."""
        return self._depth

    def dispatch(self, value: Any, tracker: AliasTracker) -> Any:
        """Copy value with the copier for its shape.

        Args:
            value: Value to copy. None is returned unchanged.
            tracker: Aliasing tracker of the current top-level copy.

        Returns:
            Deep copy of value.

        Raises:
            ShapeNotSupportedError: If value (at this level) cannot be copied.
            DepthExceededError: If settings.max_depth is exceeded.
            CopyError: If a contained value cannot be copied.
        """
        if value is None:
            return None

        shape = shape_of(value)
        copier = copier_for(shape)
        if copier is None:
            raise ShapeNotSupportedError(
                describe(value), type(value).__qualname__, Shape.UNSUPPORTED
            )

        limit = self._settings.max_depth
        if limit is not None and self._depth >= limit:
            raise DepthExceededError(limit)

        self._depth += 1
        try:
            return copier.copy(value, tracker, self)
        finally:
            self._depth -= 1
