"""Collection package for storable containers, importers, and exporters."""

from .collection import StorableCollection
from .exporter import StorableCollectionExporter
from .importer import StorableCollectionImporter
from .service import collection_import_json_payload

__all__ = [
	"StorableCollection",
	"StorableCollectionExporter",
	"StorableCollectionImporter",
	"collection_import_json_payload",
]
