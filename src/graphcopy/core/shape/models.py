"""Shape models: the closed set of structural categories a value can have."""

from __future__ import annotations

from enum import Enum, auto


class Shape(Enum):
    """Runtime structural category of a value. Selects the copier."""

    PRIMITIVE = auto()
    """Immutable scalar: bool, int, float, complex, str, bytes, Enum member."""

    FIXED_ARRAY = auto()
    """Fixed-length ordered container: tuple and tuple subclasses."""

    DYNAMIC_SEQUENCE = auto()
    """Variable-length ordered container: list and list subclasses."""

    MAPPING = auto()
    """Key/value container: dict and dict subclasses."""

    REFERENCE = auto()
    """Identity-carrying cell: `Ref`. The only shape tracked for aliasing."""

    RECORD = auto()
    """Named fields: dataclass and Pydantic model instances."""

    UNSUPPORTED = auto()
    """Anything else. Rejected by the dispatcher."""
