"""Public entry points: copy and must_copy."""

from __future__ import annotations

import logging

from graphcopy.config import CopySettings, default_settings
from graphcopy.core.reference import AliasTracker
from graphcopy.dispatch import Dispatcher
from graphcopy.errors import CopyError, CopyPanic

logger = logging.getLogger(__name__)


def copy[T](value: T, *, settings: CopySettings | None = None) -> T:
    """Deep copy an arbitrary value graph.

    Each call uses a fresh AliasTracker, so references shared inside value
    stay shared inside the copy, and cycles through references terminate.

    Args:
        value: Value to copy. None is returned unchanged.
        settings: Copy settings. Defaults to the cached default_settings().

    Returns:
        Copy of value, disjoint from it for every composite shape.

    Raises:
        CopyError: If any value in the graph cannot be copied. The error
            wraps one layer of context per level between value and the
            failing element.
    """
    if value is None:
        return value

    tracker = AliasTracker()
    dispatcher = Dispatcher(settings if settings is not None else default_settings())
    copied = dispatcher.dispatch(value, tracker)
    logger.debug(
        "Copied %s value (%d references tracked)", type(value).__qualname__, len(tracker)
    )
    return copied  # type: ignore[no-any-return]


def must_copy[T](value: T, *, settings: CopySettings | None = None) -> T:
    """Deep copy value, treating failure as a programming error.

    Args:
        value: Value to copy.
        settings: Copy settings, as for copy().

    Returns:
        Copy of value.

    Raises:
        CopyPanic: If the copy fails. Not an Exception subclass, so generic
            error handlers do not swallow it. The CopyError is its __cause__.
    """
    try:
        return copy(value, settings=settings)
    except CopyError as err:
        logger.critical("Deep copy of %s failed: %s", type(value).__qualname__, err)
        raise CopyPanic(str(err)) from err
