"""Record functionality: field descriptors, enumeration, and zero values."""

from graphcopy.core.record.core import record_fields, zero_value
from graphcopy.core.record.models import FieldDescriptor, is_exported

__all__ = [
    "FieldDescriptor",
    "is_exported",
    "record_fields",
    "zero_value",
]
