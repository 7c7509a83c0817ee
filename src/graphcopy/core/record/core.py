"""Record field enumeration and zero values.

Field descriptors are built once per record class from its declarations
(dataclass fields or Pydantic model fields) and cached.

Usage:
    @dataclass
    class Account:
        owner: str
        _balance: int = 0

    [f.name for f in record_fields(Account) if f.exported]   # ["owner"]
    zero_value(list[int])                                     # []
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import sys
import types
import typing
from collections.abc import Callable
from typing import Any

from graphcopy.core.record.models import FieldDescriptor, is_exported
from graphcopy.core.reference.models import Ref
from graphcopy.core.shape import is_pydantic_model

_SCALAR_ZEROS: dict[type, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    str: "",
    bytes: b"",
}

_EMPTY_CONTAINERS: dict[type, Callable[[], Any]] = {
    list: list,
    dict: dict,
    set: set,
    tuple: tuple,
}


def zero_value(annotation: Any, _seen: frozenset[type] = frozenset()) -> Any:
    """Build the zero value for a type annotation.

    Scalars map to their falsy value, containers to an empty instance, `Ref`
    to a null reference and dataclasses to an instance whose fields all hold
    their own defaults. Optional and unrecognised annotations give None, and
    so does a dataclass already being zeroed further up (self-referential or
    mutually recursive records).

    Args:
        annotation: Resolved annotation (a class or a typing construct).
        _seen: Dataclasses currently being zeroed.

    Returns:
        A fresh zero value.
    """
    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)

    if origin is typing.Union or origin is types.UnionType:
        return None
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return ()
        return tuple(zero_value(arg, _seen) for arg in args)

    cls = origin if origin is not None else annotation
    if not isinstance(cls, type):
        return None
    if cls in _SCALAR_ZEROS:
        return _SCALAR_ZEROS[cls]
    if cls in _EMPTY_CONTAINERS:
        return _EMPTY_CONTAINERS[cls]()
    if issubclass(cls, Ref):
        return cls.null()
    if dataclasses.is_dataclass(cls):
        if cls in _seen:
            return None
        return _zero_dataclass(cls, _seen | {cls})
    return None


def _zero_dataclass(cls: type, seen: frozenset[type]) -> Any:
    """Allocate a dataclass without __init__ and fill every field with its default."""
    hints = _resolve_hints(cls)
    instance = object.__new__(cls)
    for field in dataclasses.fields(cls):
        default = _dataclass_default(field, hints.get(field.name), seen)
        object.__setattr__(instance, field.name, default())
    return instance


def _evaluate(annotation: Any, globalns: dict[str, Any], localns: dict[str, Any]) -> Any:
    """Evaluate one string annotation; None when it cannot be resolved."""
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, globalns, localns)  # noqa: S307
    except (NameError, AttributeError, SyntaxError, TypeError):
        return None


def _resolve_hints(cls: type) -> dict[str, Any]:
    """Resolve annotations of cls and its bases.

    Falls back to resolving field by field when the class-wide resolution
    fails, so one unresolvable name (a TYPE_CHECKING-only import, a local
    type) only costs that field its annotation.
    """
    try:
        return typing.get_type_hints(cls)
    except (NameError, AttributeError, TypeError):
        pass

    hints: dict[str, Any] = {}
    for owner in reversed(cls.__mro__):
        module = sys.modules.get(owner.__module__)
        globalns = vars(module) if module is not None else {}
        localns = dict(vars(owner))
        for name, annotation in inspect.get_annotations(owner).items():
            hints[name] = _evaluate(annotation, globalns, localns)
    return hints


def _dataclass_default(
    field: dataclasses.Field[Any], annotation: Any, seen: frozenset[type]
) -> Callable[[], Any]:
    if field.default is not dataclasses.MISSING:
        value = field.default
        return lambda: value
    if field.default_factory is not dataclasses.MISSING:
        return field.default_factory
    return functools.partial(zero_value, annotation, seen)


def _dataclass_fields(cls: type) -> tuple[FieldDescriptor, ...]:
    hints = _resolve_hints(cls)
    seen = frozenset({cls})
    return tuple(
        FieldDescriptor(
            name=field.name,
            exported=is_exported(field.name),
            default=_dataclass_default(field, hints.get(field.name), seen),
        )
        for field in dataclasses.fields(cls)
    )


def _pydantic_fields(cls: type) -> tuple[FieldDescriptor, ...]:
    # Pydantic rejects underscore field names, so every declared field is
    # exported. Private attributes are restored by model_construct.
    model_fields = cls.model_fields  # type: ignore[attr-defined]
    return tuple(
        FieldDescriptor(
            name=name,
            exported=True,
            default=functools.partial(info.get_default, call_default_factory=True),
        )
        for name, info in model_fields.items()
    )


@functools.cache
def record_fields(cls: type) -> tuple[FieldDescriptor, ...]:
    """Get the field descriptors of a record class in declaration order.

    Args:
        cls: Dataclass or Pydantic model class.

    Returns:
        Tuple of FieldDescriptor, one per declared field.

    Raises:
        TypeError: If cls is neither a dataclass nor a Pydantic model.
    """
    if dataclasses.is_dataclass(cls):
        return _dataclass_fields(cls)
    if is_pydantic_model(cls):
        return _pydantic_fields(cls)
    raise TypeError(f"{cls.__name__} must be a dataclass or Pydantic model")
