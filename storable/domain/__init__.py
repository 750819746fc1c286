"""Domain models used across application layer boundaries."""

from .errors import (
	DuplicateStorableTypeError,
	ExpectedFieldCountMismatchError,
	MissingKeyFromImportDataError,
	NoFieldsFoundError,
	OperationNotSupportedError,
	PayloadDecodeError,
	StorableError,
	UnknownStorableTypeError,
	UnsupportedTypeError,
)
from .interfaces import ExportPort, ImportPort, StorableCollectionPort, StorableObjectPort
from .models import AppMetadata, CollectionImportResult, HealthStatus
from .objects import (
	StorableField,
	StorableObject,
	StorableObjectExporter,
	StorableObjectImporter,
	storable_field,
)
from .payload_shape import PayloadShape, domain_payload_decode_structured_json, domain_payload_resolve_shape
from .types import BoolBox, FloatBox, IntBox, StringBox, TypeBox

__all__ = [
	"AppMetadata",
	"BoolBox",
	"CollectionImportResult",
	"DuplicateStorableTypeError",
	"ExpectedFieldCountMismatchError",
	"ExportPort",
	"FloatBox",
	"HealthStatus",
	"ImportPort",
	"IntBox",
	"MissingKeyFromImportDataError",
	"NoFieldsFoundError",
	"OperationNotSupportedError",
	"PayloadDecodeError",
	"PayloadShape",
	"StorableCollectionPort",
	"StorableError",
	"StorableField",
	"StorableObject",
	"StorableObjectExporter",
	"StorableObjectImporter",
	"StorableObjectPort",
	"StringBox",
	"TypeBox",
	"UnknownStorableTypeError",
	"UnsupportedTypeError",
	"domain_payload_decode_structured_json",
	"domain_payload_resolve_shape",
	"storable_field",
]
