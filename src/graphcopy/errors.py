"""Copy error taxonomy.

Every failure inside one copy is fatal to that copy. Composite copiers catch
the `CopyError` raised by a child and re-raise it wrapped in exactly one layer
of context, so the chain of `cause` attributes reads like a path from the root
value down to the value that could not be copied:

    FieldCopyError('items') -> ElementCopyError(2) -> ShapeNotSupportedError
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from graphcopy.core.shape import Shape


class CopyError(Exception):
    """Base class for all deep copy failures."""

    pass


class ShapeNotSupportedError(CopyError, TypeError):
    """Raised when a value's shape is outside the copyable set."""

    def __init__(self, description: str, type_name: str, shape: Shape) -> None:
        self.description = description
        self.type_name = type_name
        self.shape = shape
        super().__init__(
            f"unable to make a deep copy of {description} (type: {type_name}) - "
            f"shape {shape.name} is not supported"
        )


class ShapeMismatchError(CopyError, TypeError):
    """Raised when a copier receives a value of a shape it does not handle."""

    def __init__(self, expected: Shape, actual: Shape) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"must pass a value with shape {expected.name}; got {actual.name}")


class NotAPrimitiveError(ShapeMismatchError):
    """Raised when the primitive copier receives a composite value."""

    pass


class ElementCopyError(CopyError):
    """Raised when an item of a tuple or list cannot be copied."""

    def __init__(self, index: int, cause: CopyError) -> None:
        self.index = index
        self.cause = cause
        super().__init__(f"failed to copy item at index {index}: {cause}")


class EntryCopyError(CopyError):
    """Raised when a key or value of a mapping cannot be copied."""

    def __init__(self, side: Literal["key", "value"], original: str, cause: CopyError) -> None:
        self.side = side
        self.original = original
        self.cause = cause
        super().__init__(f"failed to copy the mapping {side} {original}: {cause}")


class FieldCopyError(CopyError):
    """Raised when an exported record field cannot be copied."""

    def __init__(self, field: str, record: str, cause: CopyError) -> None:
        self.field = field
        self.record = record
        self.cause = cause
        super().__init__(f"failed to copy the field {field} in the record {record}: {cause}")


class ReferenceCopyError(CopyError):
    """Raised when the target of a reference cannot be copied."""

    def __init__(self, reference: str, cause: CopyError) -> None:
        self.reference = reference
        self.cause = cause
        super().__init__(f"failed to copy the value under the reference {reference}: {cause}")


class DepthExceededError(CopyError):
    """Raised when nesting goes deeper than the configured `max_depth`."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"value graph is nested deeper than max_depth={limit}")


class NullReferenceError(ValueError):
    """Raised when dereferencing a null `Ref`."""

    pass


class CopyPanic(BaseException):  # noqa: N818
    """Raised by `must_copy` when a copy fails.

    Derives from BaseException so that `except Exception` handlers do not
    recover from it. The failing `CopyError` is available as `__cause__`.
    """

    pass


class KeyCollisionWarning(UserWarning):
    """Two distinct mapping keys produced equal copies; the later entry won."""

    pass
