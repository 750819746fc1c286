"""Startup loading of storable type modules into a registry."""

from __future__ import annotations

import importlib
from collections.abc import Iterable

from storable.observability import observability_get_logger

from .type_registry import StorableTypeRegistry

REGISTRY_MODULE_HOOK_NAME = "storable_register_types"

_logger = observability_get_logger(__name__)


def registry_load_type_modules(registry: StorableTypeRegistry, module_names: Iterable[str]) -> int:
    """Import configured type modules and let each register its storable types.

    Every module must expose `storable_register_types(registry)`.

    Args:
        registry: Registry receiving the module-provided types.
        module_names: Dotted module paths to import, in order.

    Returns:
        int: Number of types added to the registry.

    Raises:
        ImportError: Raised when a module cannot be imported.
        ValueError: Raised when a module does not expose the registration hook.
        DuplicateStorableTypeError: Raised when two modules register the same type name.
    """

    initial_count = len(registry)
    for module_name in module_names:
        normalized_module_name = module_name.strip()
        if not normalized_module_name:
            continue

        module = importlib.import_module(normalized_module_name)
        register_hook = getattr(module, REGISTRY_MODULE_HOOK_NAME, None)
        if not callable(register_hook):
            raise ValueError(
                f"Storable type module does not define {REGISTRY_MODULE_HOOK_NAME}(registry). "
                f"module={normalized_module_name}"
            )

        before_count = len(registry)
        register_hook(registry)
        _logger.info(
            "storable_type_module_loaded",
            module=normalized_module_name,
            registered_types=len(registry) - before_count,
        )
    return len(registry) - initial_count
