"""Registry package mapping storable type names to factories."""

from .loader import REGISTRY_MODULE_HOOK_NAME, registry_load_type_modules
from .type_registry import StorableFactory, StorableTypeRegistry

__all__ = [
	"REGISTRY_MODULE_HOOK_NAME",
	"StorableFactory",
	"StorableTypeRegistry",
	"registry_load_type_modules",
]
