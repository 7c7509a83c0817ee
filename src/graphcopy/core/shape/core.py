"""Shape classification.

Usage:
    shape_of(3)            # Shape.PRIMITIVE
    shape_of((1, 2))       # Shape.FIXED_ARRAY
    shape_of(Ref([]))      # Shape.REFERENCE
    shape_of(print)        # Shape.UNSUPPORTED
"""

from __future__ import annotations

from dataclasses import is_dataclass
from enum import Enum
from typing import Any

from graphcopy.core.reference.models import Ref
from graphcopy.core.shape.models import Shape

_PRIMITIVE_TYPES = (bool, int, float, complex, str, bytes, Enum)


def is_pydantic_model(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def is_record_type(cls: type) -> bool:
    """Check if instances of class are copied as records.

    Args:
        cls: Class to check.

    Returns:
        True for dataclasses and Pydantic models, False otherwise.
    """
    return is_dataclass(cls) or is_pydantic_model(cls)


def shape_of(value: Any) -> Shape:
    """Classify a value by its runtime shape.

    `Ref` is checked first so that a reference is never mistaken for the
    value it points to. Classes themselves are unsupported even when they
    are dataclasses; only instances are records.

    Args:
        value: Any non-None value.

    Returns:
        The value's Shape. Never raises.
    """
    if isinstance(value, Ref):
        return Shape.REFERENCE
    if isinstance(value, _PRIMITIVE_TYPES):
        return Shape.PRIMITIVE
    if isinstance(value, tuple):
        return Shape.FIXED_ARRAY
    if isinstance(value, list):
        return Shape.DYNAMIC_SEQUENCE
    if isinstance(value, dict):
        return Shape.MAPPING
    if not isinstance(value, type) and is_record_type(type(value)):
        return Shape.RECORD
    return Shape.UNSUPPORTED
