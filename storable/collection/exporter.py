"""Collection exporter producing JSON-compatible item lists."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from storable.domain import OperationNotSupportedError, StorableObjectPort


class StorableCollectionExporter:
    """Export every collection item through its own field-level exporter."""

    def __init__(self, collection: Iterable[StorableObjectPort]):
        self._collection = collection

    def export_as_list(self) -> list[dict[str, Any]]:
        """Export items as field maps in collection order.

        Returns:
            list[dict[str, Any]]: One exported field map per item.

        Raises:
            NoFieldsFoundError: Raised when an item type declares no fields.
        """

        return [item.storable_export().export_as_map() for item in self._collection]

    def export_as_json(self) -> str:
        return json.dumps(self.export_as_list())

    def export_as_binary(self) -> bytes:
        raise OperationNotSupportedError(
            f"method={type(self).__name__}.export_as_binary not supported"
        )
