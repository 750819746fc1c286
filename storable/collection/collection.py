"""Ordered in-memory container of storable object instances."""

from __future__ import annotations

from collections.abc import Iterator

from storable.domain import StorableObjectPort

from .exporter import StorableCollectionExporter


class StorableCollection:
    """Caller-owned ordered collection of storable objects of one registered type.

    Attributes:
        item_type_name: Registered type name of the items this collection holds.
    """

    def __init__(self, item_type_name: str):
        self.item_type_name = item_type_name
        self._items: list[StorableObjectPort] = []

    def clear(self) -> None:
        self._items.clear()

    def add(self, item: StorableObjectPort) -> None:
        self._items.append(item)

    def get(self, index: int) -> StorableObjectPort:
        """Return the item stored at one position.

        Args:
            index: Zero-based position; negative values count from the end.

        Returns:
            StorableObjectPort: Stored item.

        Raises:
            IndexError: Raised when index is out of range.
        """

        return self._items[index]

    def is_empty(self) -> bool:
        return not self._items

    def storable_export(self) -> StorableCollectionExporter:
        return StorableCollectionExporter(collection=self)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[StorableObjectPort]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StorableCollection):
            return NotImplemented
        return self.item_type_name == other.item_type_name and self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"StorableCollection(item_type_name={self.item_type_name!r}, size={len(self._items)})"
