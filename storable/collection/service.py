"""Shared import workflow used by the API and CLI surfaces."""

from __future__ import annotations

from storable.domain import CollectionImportResult, UnknownStorableTypeError
from storable.registry import StorableTypeRegistry

from .collection import StorableCollection
from .importer import StorableCollectionImporter


def collection_import_json_payload(
    registry: StorableTypeRegistry,
    type_name: str,
    payload: str | bytes,
) -> CollectionImportResult:
    """Import one JSON payload into a fresh collection and export the result.

    Args:
        registry: Registry resolving the storable type.
        type_name: Registered type name for every payload item.
        payload: JSON object or array text.

    Returns:
        CollectionImportResult: Imported item count and exported field maps.

    Raises:
        UnknownStorableTypeError: Raised before decoding when type_name is not registered.
        PayloadDecodeError: Raised when payload is malformed or not an object/array.
        UnsupportedTypeError: Raised when an item or field value cannot be imported.
        MissingKeyFromImportDataError: Raised when an item lacks a required field.
        ExpectedFieldCountMismatchError: Raised when a positional item has the wrong length.
    """

    if not registry.registry_has(type_name):
        raise UnknownStorableTypeError(f"Storable type is not registered. type={type_name}", type_name=type_name)

    collection = StorableCollection(item_type_name=type_name)
    importer = StorableCollectionImporter(collection=collection, type_name=type_name, registry=registry)
    importer.import_from_json(payload)
    return CollectionImportResult(
        type_name=type_name,
        count=len(collection),
        items=collection.storable_export().export_as_list(),
    )
