"""Storable object base class with field-level import and export contracts.

A storable type declares its fields as class attributes built with
`storable_field`. Declaration order defines positional import order and
export key order:

    class Player(StorableObject):
        name = storable_field(StringBox)
        level = storable_field(IntBox, required=False)
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from .errors import (
    ExpectedFieldCountMismatchError,
    MissingKeyFromImportDataError,
    NoFieldsFoundError,
    OperationNotSupportedError,
    UnsupportedTypeError,
)
from .payload_shape import (
    PayloadShape,
    domain_payload_decode_structured_json,
    domain_payload_describe_value,
    domain_payload_resolve_shape,
)
from .types import TypeBox


class StorableField:
    """Descriptor binding one declared field name to a per-instance value box.

    Attributes:
        box_type: Value box class instantiated for every object instance.
        required: Whether keyed import data must contain this field.
        name: Attribute name assigned by the owning class.
    """

    def __init__(self, box_type: type[TypeBox], required: bool = True):
        self.box_type = box_type
        self.required = required
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: StorableObject | None, owner: type) -> Any:
        if instance is None:
            return self
        return instance.storable_box(self.name).type_get()

    def __set__(self, instance: StorableObject, value: object) -> None:
        instance.storable_box(self.name).type_set(value)


def storable_field(box_type: type[TypeBox], required: bool = True) -> Any:
    """Declare one storable field on a `StorableObject` subclass.

    Args:
        box_type: Value box class backing the field.
        required: Whether keyed import data must contain this field.

    Returns:
        Any: Field descriptor typed loosely so declarations read as plain attributes.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return StorableField(box_type=box_type, required=required)


class StorableObject:
    """Base class for domain objects with a field-level import/export contract."""

    _storable_fields: ClassVar[tuple[StorableField, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        fields_by_name: dict[str, StorableField] = {}
        for klass in reversed(cls.__mro__):
            for attribute in vars(klass).values():
                if isinstance(attribute, StorableField):
                    fields_by_name[attribute.name] = attribute
        cls._storable_fields = tuple(fields_by_name.values())

    def __init__(self) -> None:
        self._storable_boxes: dict[str, TypeBox] = {
            field.name: field.box_type() for field in self._storable_fields
        }

    @classmethod
    def storable_fields(cls) -> tuple[StorableField, ...]:
        return cls._storable_fields

    def storable_box(self, field_name: str) -> TypeBox:
        """Return the value box for one declared field.

        Args:
            field_name: Declared field name.

        Returns:
            TypeBox: Value box owned by this instance.

        Raises:
            KeyError: Raised when the field is not declared on this type.
        """

        return self._storable_boxes[field_name]

    def storable_import(self) -> StorableObjectImporter:
        return StorableObjectImporter(storable=self)

    def storable_export(self) -> StorableObjectExporter:
        return StorableObjectExporter(storable=self)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(
            self._storable_boxes[name].type_get() == other._storable_boxes[name].type_get()
            and self._storable_boxes[name].type_is_set() == other._storable_boxes[name].type_is_set()
            for name in self._storable_boxes
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        field_text = ", ".join(f"{name}={box.type_get()!r}" for name, box in self._storable_boxes.items())
        return f"{type(self).__name__}({field_text})"


class StorableObjectImporter:
    """Field-level importer for one storable object instance."""

    def __init__(self, storable: StorableObject):
        self._storable = storable

    def import_from_map(self, data: Mapping[str, object]) -> bool:
        """Import field values by name from keyed data.

        Args:
            data: Mapping of field name to raw value. Unknown keys are ignored.

        Returns:
            bool: True when every present field was imported.

        Raises:
            UnsupportedTypeError: Raised when data is not a mapping or a value cannot be coerced.
            NoFieldsFoundError: Raised when the storable type declares no fields.
            MissingKeyFromImportDataError: Raised when a required field is absent.
        """

        if domain_payload_resolve_shape(data) is not PayloadShape.MAP:
            raise UnsupportedTypeError(
                f"Keyed import requires a mapping. data={domain_payload_describe_value(data)}"
            )
        fields = self._importer_require_fields()

        for field in fields:
            if field.required and field.name not in data:
                raise MissingKeyFromImportDataError(
                    f"Required key missing from import data. type={type(self._storable).__name__} "
                    f"key={field.name}",
                    field_name=field.name,
                )

        for field in fields:
            if field.name in data:
                self._storable.storable_box(field.name).type_set(data[field.name])
        return True

    def import_from_list(self, data: Sequence[object]) -> bool:
        """Import field values positionally in field declaration order.

        Args:
            data: Ordered raw values, one per declared field.

        Returns:
            bool: True when every field was imported.

        Raises:
            UnsupportedTypeError: Raised when data is not a list or a value cannot be coerced.
            NoFieldsFoundError: Raised when the storable type declares no fields.
            ExpectedFieldCountMismatchError: Raised when value count differs from field count.
        """

        if domain_payload_resolve_shape(data) is not PayloadShape.LIST:
            raise UnsupportedTypeError(
                f"Positional import requires a list. data={domain_payload_describe_value(data)}"
            )
        fields = self._importer_require_fields()

        if len(data) != len(fields):
            raise ExpectedFieldCountMismatchError(
                f"Positional import value count does not match field count. "
                f"type={type(self._storable).__name__} expected={len(fields)} actual={len(data)}",
                expected_count=len(fields),
                actual_count=len(data),
            )

        for field, value in zip(fields, data):
            self._storable.storable_box(field.name).type_set(value)
        return True

    def import_from_json(self, payload: str | bytes) -> bool:
        """Decode JSON text and import it as keyed or positional data.

        Args:
            payload: JSON object or array text.

        Returns:
            bool: True when import succeeds.

        Raises:
            PayloadDecodeError: Raised when payload is malformed or not an object/array.
        """

        payload_shape, decoded_value = domain_payload_decode_structured_json(payload)
        if payload_shape is PayloadShape.MAP:
            return self.import_from_map(decoded_value)  # type: ignore[arg-type]
        return self.import_from_list(decoded_value)  # type: ignore[arg-type]

    def import_from_binary(self, payload: bytes) -> bool:
        raise OperationNotSupportedError(
            f"method={type(self).__name__}.import_from_binary not supported"
        )

    def _importer_require_fields(self) -> tuple[StorableField, ...]:
        fields = self._storable.storable_fields()
        if not fields:
            raise NoFieldsFoundError(f"No fields declared on type={type(self._storable).__name__}")
        return fields


class StorableObjectExporter:
    """Field-level exporter for one storable object instance."""

    def __init__(self, storable: StorableObject):
        self._storable = storable

    def export_as_map(self) -> dict[str, Any]:
        """Export field values keyed by field name in declaration order.

        Returns:
            dict[str, Any]: Field name to exported value; unset fields export as None.

        Raises:
            NoFieldsFoundError: Raised when the storable type declares no fields.
        """

        fields = self._storable.storable_fields()
        if not fields:
            raise NoFieldsFoundError(f"No fields declared on type={type(self._storable).__name__}")
        return {field.name: self._storable.storable_box(field.name).type_export() for field in fields}

    def export_as_json(self) -> str:
        return json.dumps(self.export_as_map())

    def export_as_binary(self) -> bytes:
        raise OperationNotSupportedError(
            f"method={type(self).__name__}.export_as_binary not supported"
        )


__all__ = [
    "StorableField",
    "StorableObject",
    "StorableObjectExporter",
    "StorableObjectImporter",
    "storable_field",
]
