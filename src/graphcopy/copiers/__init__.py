"""Structural copiers, one per copyable shape.

Usage:
    copier = copier_for(Shape.MAPPING)
    copied = copier.copy({1: [2]}, AliasTracker(), dispatcher)
"""

from __future__ import annotations

from graphcopy.copiers.base import BaseCopier, describe
from graphcopy.copiers.mapping import MappingCopier
from graphcopy.copiers.primitive import PrimitiveCopier
from graphcopy.copiers.protocol import Copier, Dispatch
from graphcopy.copiers.record import RecordCopier
from graphcopy.copiers.reference import ReferenceCopier
from graphcopy.copiers.sequence import DynamicSequenceCopier, FixedArrayCopier
from graphcopy.core.shape import Shape

COPIERS: dict[Shape, Copier] = {
    copier.shape: copier
    for copier in (
        PrimitiveCopier(),
        FixedArrayCopier(),
        DynamicSequenceCopier(),
        MappingCopier(),
        ReferenceCopier(),
        RecordCopier(),
    )
}

_missing = {shape for shape in Shape if shape is not Shape.UNSUPPORTED} - COPIERS.keys()
if _missing:
    raise RuntimeError(f"No copier registered for shapes: {sorted(s.name for s in _missing)}")


def copier_for(shape: Shape) -> Copier | None:
    """Get the copier registered for shape.

    Args:
        shape: Shape to look up.

    Returns:
        The copier, or None for Shape.UNSUPPORTED.
    """
    return COPIERS.get(shape)


__all__ = [
    "COPIERS",
    "BaseCopier",
    "Copier",
    "Dispatch",
    "DynamicSequenceCopier",
    "FixedArrayCopier",
    "MappingCopier",
    "PrimitiveCopier",
    "RecordCopier",
    "ReferenceCopier",
    "copier_for",
    "describe",
]
