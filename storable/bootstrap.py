"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from storable.api import create_api_application
from storable.config import AppSettings, config_load_settings
from storable.observability import observability_configure_logging
from storable.registry import StorableTypeRegistry, registry_load_type_modules


def bootstrap_create_registry(settings: AppSettings) -> StorableTypeRegistry:
    """Build the type registry from configured storable type modules.

    Args:
        settings: Validated runtime settings.

    Returns:
        StorableTypeRegistry: Registry holding every configured type.

    Raises:
        ImportError: Raised when a configured module cannot be imported.
        ValueError: Raised when a configured module lacks the registration hook.
    """

    registry = StorableTypeRegistry()
    registry_load_type_modules(registry=registry, module_names=settings.storable_type_modules)
    return registry


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    observability_configure_logging(
        log_level=resolved_settings.log_level,
        json_output=resolved_settings.log_json_output,
    )
    registry = bootstrap_create_registry(settings=resolved_settings)
    return create_api_application(settings=resolved_settings, registry=registry)
