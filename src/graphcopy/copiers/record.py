"""Record copier for dataclass and Pydantic model instances.

The copy is allocated without running __init__, __post_init__ or validators.
Exported fields are copied in declaration order; non-exported fields get
their declared default or the zero value of their annotation.
"""

from __future__ import annotations

from typing import Any

from graphcopy.copiers.base import BaseCopier, describe
from graphcopy.copiers.protocol import Dispatch
from graphcopy.core.record import record_fields
from graphcopy.core.reference import AliasTracker
from graphcopy.core.shape import Shape, is_pydantic_model
from graphcopy.errors import CopyError, FieldCopyError

_UNSET: Any = object()


class RecordCopier(BaseCopier):
    shape = Shape.RECORD

    def copy(self, value: Any, tracker: AliasTracker, dispatcher: Dispatch) -> Any:
        self._expect_shape(value)
        cls = type(value)
        values = self._copy_fields(value, tracker, dispatcher)

        if is_pydantic_model(cls):
            return cls.model_construct(_fields_set=set(value.model_fields_set), **values)

        copied = object.__new__(cls)
        for name, field_value in values.items():
            # object.__setattr__ also works for frozen dataclasses.
            object.__setattr__(copied, name, field_value)
        return copied

    def _copy_fields(
        self, value: Any, tracker: AliasTracker, dispatcher: Dispatch
    ) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for descriptor in record_fields(type(value)):
            if not descriptor.exported:
                values[descriptor.name] = descriptor.default()
                continue

            current = getattr(value, descriptor.name, _UNSET)
            if current is _UNSET:
                # Declared with init=False and never assigned.
                continue
            try:
                values[descriptor.name] = dispatcher.dispatch(current, tracker)
            except CopyError as err:
                raise FieldCopyError(descriptor.name, describe(value), err) from err
        return values
