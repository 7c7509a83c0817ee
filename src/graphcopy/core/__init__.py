"""Core functionalities: shapes, references, and record descriptors.

Architecture Note:
    core/ contains the pure building blocks the copiers are made of.
    The only stateful piece is AliasTracker, which lives for one copy.
    For the copy strategies themselves, see copiers/ and dispatch.py.
"""

from graphcopy.core.record import FieldDescriptor, is_exported, record_fields, zero_value
from graphcopy.core.reference import AliasTracker, Ref
from graphcopy.core.shape import Shape, is_record_type, shape_of

__all__ = [
    # Shape
    "Shape",
    "shape_of",
    "is_record_type",
    # Reference
    "Ref",
    "AliasTracker",
    # Record
    "FieldDescriptor",
    "is_exported",
    "record_fields",
    "zero_value",
]
