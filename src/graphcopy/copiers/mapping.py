"""Mapping copier.

Keys and values are copied independently. Two distinct keys can copy to equal
keys (for example records that differ only in a private field); the later
entry then overwrites the earlier one. That is accepted behaviour, reported
through KeyCollisionWarning rather than an error.
"""

from __future__ import annotations

import os
import warnings
from collections import defaultdict
from typing import Any

from graphcopy.copiers.base import BaseCopier, describe
from graphcopy.copiers.protocol import Dispatch
from graphcopy.core.reference import AliasTracker
from graphcopy.core.shape import Shape
from graphcopy.errors import CopyError, EntryCopyError, KeyCollisionWarning

# Warnings are attributed to the first frame outside the package.
_PACKAGE_PREFIX = os.path.dirname(os.path.dirname(__file__)) + os.sep


def _allocate_dict(value: dict[Any, Any]) -> dict[Any, Any]:
    """Allocate an empty mapping of value's class, bypassing __init__."""
    cls = type(value)
    if cls is dict:
        return {}
    copied = cls.__new__(cls)
    if isinstance(value, defaultdict):
        copied.default_factory = value.default_factory
    return copied


class MappingCopier(BaseCopier):
    shape = Shape.MAPPING

    def copy(self, value: Any, tracker: AliasTracker, dispatcher: Dispatch) -> Any:
        self._expect_shape(value)
        copied = _allocate_dict(value)
        for key, item in value.items():
            try:
                key_copy = dispatcher.dispatch(key, tracker)
            except CopyError as err:
                raise EntryCopyError("key", describe(key), err) from err
            try:
                item_copy = dispatcher.dispatch(item, tracker)
            except CopyError as err:
                raise EntryCopyError("value", describe(item), err) from err

            if key_copy in copied and dispatcher.settings.warn_on_key_collision:
                warnings.warn(
                    f"Mapping key {describe(key)} copied to an existing key. "
                    f"Only the last entry will be kept.",
                    KeyCollisionWarning,
                    skip_file_prefixes=(_PACKAGE_PREFIX,),
                )
            copied[key_copy] = item_copy
        return copied
