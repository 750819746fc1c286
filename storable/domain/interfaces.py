"""Typed interfaces for storable object import and export responsibilities."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol


class ImportPort(Protocol):
    """Port definition for importing raw payloads into a storable target."""

    def import_from_list(self, data: Sequence[object]) -> bool:
        """Import ordered raw data into the target.

        Args:
            data: Ordered raw values.

        Returns:
            bool: True when import succeeds.

        Raises:
            UnsupportedTypeError: Raised when a raw value shape cannot be imported.
        """

    def import_from_map(self, data: Mapping[str, object]) -> bool:
        """Import keyed raw data into the target.

        Args:
            data: Keyed raw values.

        Returns:
            bool: True when import succeeds.

        Raises:
            UnsupportedTypeError: Raised when a raw value shape cannot be imported.
        """

    def import_from_json(self, payload: str | bytes) -> bool:
        """Decode JSON text and import it into the target.

        Args:
            payload: JSON object or array text.

        Returns:
            bool: True when import succeeds.

        Raises:
            PayloadDecodeError: Raised when payload cannot be decoded to an object or array.
        """

    def import_from_binary(self, payload: bytes) -> bool:
        """Import a binary payload into the target.

        Args:
            payload: Binary payload.

        Returns:
            bool: This operation does not return for current importers.

        Raises:
            OperationNotSupportedError: Raised by every current importer.
        """


class ExportPort(Protocol):
    """Port definition for exporting a storable source to JSON-compatible values."""

    def export_as_map(self) -> dict[str, Any]:
        """Export field values keyed by field name.

        Returns:
            dict[str, Any]: JSON-compatible field map.

        Raises:
            NoFieldsFoundError: Raised when a storable type declares no fields.
        """

    def export_as_json(self) -> str:
        """Export the source as JSON text.

        Returns:
            str: JSON text.

        Raises:
            NoFieldsFoundError: Raised when a storable type declares no fields.
        """

    def export_as_binary(self) -> bytes:
        """Export the source as a binary payload.

        Returns:
            bytes: This operation does not return for current exporters.

        Raises:
            OperationNotSupportedError: Raised by every current exporter.
        """


class StorableObjectPort(Protocol):
    """Port definition for objects created and populated by collection importers."""

    def storable_import(self) -> ImportPort:
        """Return the field-level importer bound to this instance."""

    def storable_export(self) -> ExportPort:
        """Return the field-level exporter bound to this instance."""


class StorableCollectionPort(Protocol):
    """Port definition for caller-owned destination collections."""

    def clear(self) -> None:
        """Remove every item from the collection."""

    def add(self, item: StorableObjectPort) -> None:
        """Append one item to the end of the collection."""
