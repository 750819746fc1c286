"""Project-native typed exceptions for storable object import and export failures."""

from __future__ import annotations


class StorableError(Exception):
    """Base exception for storable object and collection failures.

    Attributes:
        message: Human-readable failure description.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PayloadDecodeError(StorableError, ValueError):
    """Structured text payload could not be decoded into a map or list value."""


class UnsupportedTypeError(StorableError, TypeError):
    """Raw value shape cannot be imported into the requested target."""


class OperationNotSupportedError(StorableError, NotImplementedError):
    """Requested import or export operation is not implemented for this target."""


class ExpectedFieldCountMismatchError(StorableError, ValueError):
    """Positional import data length does not match the declared field count."""

    def __init__(self, message: str, expected_count: int, actual_count: int):
        super().__init__(message)
        self.expected_count = expected_count
        self.actual_count = actual_count


class MissingKeyFromImportDataError(StorableError, LookupError):
    """Keyed import data does not contain a required field name."""

    def __init__(self, message: str, field_name: str):
        super().__init__(message)
        self.field_name = field_name

    def __str__(self) -> str:
        return self.message


class NoFieldsFoundError(StorableError, RuntimeError):
    """Storable type declares no fields to import into or export from."""


class UnknownStorableTypeError(StorableError, LookupError):
    """Type registry has no factory for the requested type name."""

    def __init__(self, message: str, type_name: str):
        super().__init__(message)
        self.type_name = type_name

    def __str__(self) -> str:
        return self.message


class DuplicateStorableTypeError(StorableError, ValueError):
    """Type registry already holds a factory for the requested type name."""
