"""Record field descriptors."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """One named slot of a record type.

    Attributes:
        name: Attribute name on the instance.
        exported: Whether the field takes part in copying.
        default: Produces the value a non-exported field receives in a copy.
    """

    name: str
    exported: bool
    default: Callable[[], Any]


def is_exported(name: str) -> bool:
    """Underscore-prefixed names are private to the record."""
    return not name.startswith("_")
