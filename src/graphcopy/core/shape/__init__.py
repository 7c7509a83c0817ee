"""Shape functionality: the closed shape enum and runtime classification."""

from graphcopy.core.shape.core import is_pydantic_model, is_record_type, shape_of
from graphcopy.core.shape.models import Shape

__all__ = [
    "Shape",
    "shape_of",
    "is_record_type",
    "is_pydantic_model",
]
