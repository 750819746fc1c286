"""Typed value boxes backing storable object fields.

Each box owns one field value, coerces raw import values into its native type
and tracks whether a value was ever assigned.
"""

from __future__ import annotations

import math
from typing import Any, ClassVar

from .errors import UnsupportedTypeError
from .payload_shape import domain_payload_describe_value

_TYPE_BOOL_TRUE_TEXT = frozenset({"true", "1", "yes"})
_TYPE_BOOL_FALSE_TEXT = frozenset({"false", "0", "no"})


class TypeBox:
    """Base value box with coercion and set-state tracking.

    Attributes:
        type_name: Label used in coercion error messages.
    """

    type_name: ClassVar[str] = "value"

    def __init__(self) -> None:
        self._value: Any = None
        self._is_set = False

    def type_get(self) -> Any:
        """Return the current value, or None when the box was never set."""

        return self._value

    def type_set(self, value: object) -> None:
        """Coerce and assign one raw value; None clears the box.

        Args:
            value: Raw value to store.

        Returns:
            None: Value is stored as side effect.

        Raises:
            UnsupportedTypeError: Raised when the value cannot be represented by this box.
        """

        if value is None:
            self.type_reset()
            return
        self._value = self._type_coerce(value)
        self._is_set = True

    def type_is_set(self) -> bool:
        return self._is_set

    def type_reset(self) -> None:
        self._value = None
        self._is_set = False

    def type_export(self) -> Any:
        return self._value

    def _type_coerce(self, value: object) -> Any:
        raise NotImplementedError

    def _type_reject(self, value: object) -> UnsupportedTypeError:
        return UnsupportedTypeError(
            f"Unable to import value into {self.type_name}. value={domain_payload_describe_value(value)}"
        )


class StringBox(TypeBox):
    """Text value box; numeric scalars are converted to their text form."""

    type_name = "string"

    def _type_coerce(self, value: object) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            raise self._type_reject(value)
        if isinstance(value, (int, float)):
            return str(value)
        raise self._type_reject(value)


class IntBox(TypeBox):
    """Integer value box; accepts integral floats and integer text."""

    type_name = "int"

    def _type_coerce(self, value: object) -> int:
        if isinstance(value, bool):
            raise self._type_reject(value)
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                raise self._type_reject(value) from None
        raise self._type_reject(value)


class FloatBox(TypeBox):
    """Floating-point value box; accepts integers and numeric text.

    NaN and infinities are rejected because they have no JSON representation.
    """

    type_name = "float"

    def _type_coerce(self, value: object) -> float:
        if isinstance(value, bool):
            raise self._type_reject(value)
        if isinstance(value, (int, float)):
            try:
                coerced_value = float(value)
            except OverflowError:
                raise self._type_reject(value) from None
        elif isinstance(value, str):
            try:
                coerced_value = float(value.strip())
            except ValueError:
                raise self._type_reject(value) from None
        else:
            raise self._type_reject(value)
        if not math.isfinite(coerced_value):
            raise self._type_reject(value)
        return coerced_value


class BoolBox(TypeBox):
    """Boolean value box; accepts 0/1 integers and common true/false text."""

    type_name = "bool"

    def _type_coerce(self, value: object) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            normalized_value = value.strip().lower()
            if normalized_value in _TYPE_BOOL_TRUE_TEXT:
                return True
            if normalized_value in _TYPE_BOOL_FALSE_TEXT:
                return False
        raise self._type_reject(value)


__all__ = ["BoolBox", "FloatBox", "IntBox", "StringBox", "TypeBox"]
