"""Collection importer turning raw payloads into populated storable objects.

Import data is expected to carry key/value pairs (or complete positional
rows) per item so each value lands in a known field. For a type declaring
`foo = storable_field(StringBox)`, this payload imports two items:

    [{"foo": "myString"}, {"foo": "myString2"}]

Every import call replaces the destination collection contents. When one item
fails, items imported before it stay in the collection and the error
propagates unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from storable.domain import (
    OperationNotSupportedError,
    PayloadShape,
    StorableCollectionPort,
    StorableObjectPort,
    UnsupportedTypeError,
    domain_payload_decode_structured_json,
    domain_payload_resolve_shape,
)
from storable.domain.payload_shape import domain_payload_describe_value
from storable.observability import observability_get_logger
from storable.registry import StorableTypeRegistry

_logger = observability_get_logger(__name__)


class StorableCollectionImporter:
    """Import list, map, or JSON payloads into a caller-owned storable collection.

    Attributes:
        type_name: Registered type name instantiated once per payload item.
    """

    def __init__(
        self,
        collection: StorableCollectionPort,
        type_name: str,
        registry: StorableTypeRegistry,
    ):
        self._collection = collection
        self._registry = registry
        self.type_name = type_name

    def import_from_list(self, data: Sequence[object]) -> bool:
        """Replace collection contents with one storable per list item, in order.

        Args:
            data: Ordered raw items, each a mapping or a positional list.

        Returns:
            bool: True when every item was imported.

        Raises:
            UnsupportedTypeError: Raised when an item is neither a mapping nor a list.
            UnknownStorableTypeError: Raised when the configured type is not registered.
        """

        return self._importer_replace_items(items=data, source_shape=PayloadShape.LIST)

    def import_from_map(self, data: Mapping[str, object]) -> bool:
        """Replace collection contents with one storable per mapping value.

        Keys are discarded; values are imported in mapping iteration order.

        Args:
            data: Keyed raw items, each value a mapping or a positional list.

        Returns:
            bool: True when every item was imported.

        Raises:
            UnsupportedTypeError: Raised when a value is neither a mapping nor a list.
            UnknownStorableTypeError: Raised when the configured type is not registered.
        """

        return self._importer_replace_items(items=data.values(), source_shape=PayloadShape.MAP)

    def import_from_json(self, payload: str | bytes) -> bool:
        """Decode JSON text and import object payloads as maps and array payloads as lists.

        Args:
            payload: JSON object or array text.

        Returns:
            bool: True when every item was imported.

        Raises:
            PayloadDecodeError: Raised when payload is malformed or not an object/array.
            UnsupportedTypeError: Raised when an item is neither a mapping nor a list.
        """

        payload_shape, decoded_value = domain_payload_decode_structured_json(payload)
        if payload_shape is PayloadShape.MAP:
            return self.import_from_map(decoded_value)  # type: ignore[arg-type]
        return self.import_from_list(decoded_value)  # type: ignore[arg-type]

    def import_from_binary(self, payload: bytes) -> bool:
        raise OperationNotSupportedError(
            f"method={type(self).__name__}.import_from_binary not supported"
        )

    def _importer_replace_items(self, items, source_shape: PayloadShape) -> bool:
        """Clear the collection and append one populated storable per raw item.

        Args:
            items: Iterable of raw items.
            source_shape: Shape of the top-level payload for diagnostics.

        Returns:
            bool: True when every item was imported.

        Raises:
            UnsupportedTypeError: Raised when an item is neither a mapping nor a list.
        """

        _logger.debug("collection_import_started", type_name=self.type_name, source_shape=source_shape.value)
        self._collection.clear()

        imported_count = 0
        for item in items:
            self._collection.add(self._importer_build_storable(item))
            imported_count += 1

        _logger.debug(
            "collection_import_completed",
            type_name=self.type_name,
            source_shape=source_shape.value,
            imported_count=imported_count,
        )
        return True

    def _importer_build_storable(self, item: object) -> StorableObjectPort:
        """Create one storable of the configured type and import one raw item into it.

        Args:
            item: Raw item value.

        Returns:
            StorableObjectPort: Populated storable instance.

        Raises:
            UnsupportedTypeError: Raised when item is neither a mapping nor a list.
        """

        storable = self._registry.registry_create(self.type_name)

        item_shape = domain_payload_resolve_shape(item)
        if item_shape is PayloadShape.MAP:
            storable.storable_import().import_from_map(item)  # type: ignore[arg-type]
        elif item_shape is PayloadShape.LIST:
            storable.storable_import().import_from_list(item)  # type: ignore[arg-type]
        else:
            raise UnsupportedTypeError(f"Unable to import item. item={domain_payload_describe_value(item)}")
        return storable
