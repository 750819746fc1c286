"""Health endpoint router composition for app and registry checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from storable.domain import HealthStatus
from storable.registry import StorableTypeRegistry


def api_create_health_router(registry: StorableTypeRegistry) -> APIRouter:
    """Create health-check router with app status and registered type count.

    Args:
        registry: Type registry shared with import endpoints.

    Returns:
        APIRouter: Router exposing `/health` and `/types` endpoints.

    Raises:
        ValueError: Raised when registry is invalid.
    """

    if registry is None:
        raise ValueError("registry must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application health and registry size.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.

        Raises:
            RuntimeError: Raised if route handler cannot produce a response.
        """

        health = HealthStatus(status="ok", registered_types=len(registry))
        payload = {
            "status": health.status,
            "app": "up",
            "registered_types": health.registered_types,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/types")
    def api_registered_types() -> dict[str, list[str]]:
        return {"type_names": list(registry.registry_type_names())}

    return router
