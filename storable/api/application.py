"""FastAPI application factory for the storable import service."""

from fastapi import FastAPI

from storable.config import AppSettings
from storable.domain import AppMetadata
from storable.registry import StorableTypeRegistry

from .routers import api_create_health_router, api_create_imports_router

API_APPLICATION_NAME = "storable-importer"


def create_api_application(settings: AppSettings, registry: StorableTypeRegistry) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata and limits.
        registry: Type registry populated during startup wiring.

    Returns:
        FastAPI: Framework application instance with health and import routes.

    Raises:
        ValueError: Raised when router dependencies are invalid.
    """
    metadata = AppMetadata(application_name=API_APPLICATION_NAME, environment_name=settings.environment_name)
    application = FastAPI(title="Storable Importer")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return service identification metadata.

        Returns:
            dict[str, str]: Service name, readiness marker, and environment label.

        Raises:
            RuntimeError: Raised if route handler cannot produce a response.
        """

        return {
            "service": metadata.application_name,
            "status": "ready",
            "environment": metadata.environment_name,
        }

    application.include_router(api_create_health_router(registry=registry))
    application.include_router(api_create_imports_router(settings=settings, registry=registry))

    return application
