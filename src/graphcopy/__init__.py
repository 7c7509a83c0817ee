"""graphcopy: structural deep copies of in-memory value graphs.

Usage:
    from dataclasses import dataclass, field
    from graphcopy import Ref, copy

    @dataclass
    class Node:
        label: str
        children: list["Node"] = field(default_factory=list)
        parent: Ref["Node"] = field(default_factory=Ref)
        _cache: dict = field(default_factory=dict)

    root = Ref()
    root.set(Node("root"))
    root.get().children.append(Node("leaf", parent=root))

    copied = copy(root)
    assert copied.get().children[0].parent is copied
"""

__version__ = "0.1.0"

# Entry points
from graphcopy.api import copy, must_copy

# Configuration
from graphcopy.config import CopySettings, default_settings

# Core primitives
from graphcopy.core import AliasTracker, FieldDescriptor, Ref, Shape, record_fields, shape_of

# Dispatch
from graphcopy.dispatch import Dispatcher

# Errors
from graphcopy.errors import (
    CopyError,
    CopyPanic,
    DepthExceededError,
    ElementCopyError,
    EntryCopyError,
    FieldCopyError,
    KeyCollisionWarning,
    NotAPrimitiveError,
    NullReferenceError,
    ReferenceCopyError,
    ShapeMismatchError,
    ShapeNotSupportedError,
)

__all__ = [
    # Version
    "__version__",
    # Entry points
    "copy",
    "must_copy",
    # Config
    "CopySettings",
    "default_settings",
    # Core
    "Ref",
    "Shape",
    "shape_of",
    "AliasTracker",
    "FieldDescriptor",
    "record_fields",
    "Dispatcher",
    # Errors
    "CopyError",
    "CopyPanic",
    "ShapeNotSupportedError",
    "ShapeMismatchError",
    "NotAPrimitiveError",
    "ElementCopyError",
    "EntryCopyError",
    "FieldCopyError",
    "ReferenceCopyError",
    "DepthExceededError",
    "NullReferenceError",
    "KeyCollisionWarning",
]
