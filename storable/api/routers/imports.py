"""Import API router composition for JSON collection import endpoints."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from storable.collection import collection_import_json_payload
from storable.config import AppSettings
from storable.domain import (
    ExpectedFieldCountMismatchError,
    MissingKeyFromImportDataError,
    NoFieldsFoundError,
    PayloadDecodeError,
    UnknownStorableTypeError,
    UnsupportedTypeError,
)
from storable.observability import observability_get_logger
from storable.registry import StorableTypeRegistry

_API_STATUS_PAYLOAD_TOO_LARGE = 413
_API_STATUS_UNPROCESSABLE = 422

_API_UNPROCESSABLE_IMPORT_ERRORS = (
    PayloadDecodeError,
    UnsupportedTypeError,
    MissingKeyFromImportDataError,
    NoFieldsFoundError,
    ExpectedFieldCountMismatchError,
)

_logger = observability_get_logger(__name__)


def api_create_imports_router(settings: AppSettings, registry: StorableTypeRegistry) -> APIRouter:
    """Create import router accepting raw JSON bodies per registered type.

    Args:
        settings: Runtime settings used for request size limits.
        registry: Type registry resolving import targets.

    Returns:
        APIRouter: Router exposing `/imports/{type_name}`.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if registry is None:
        raise ValueError("registry must not be None")

    router = APIRouter(prefix="/imports", tags=["imports"])

    @router.post("/{type_name}")
    async def api_import_collection(type_name: str, request: Request) -> JSONResponse:
        """Import a JSON object or array body into a collection of one type.

        Args:
            type_name: Registered storable type name.
            request: Incoming request carrying the raw JSON body.

        Returns:
            JSONResponse: Imported count and exported items, or an error payload.

        Raises:
            RuntimeError: Unmapped import failures propagate to the framework error handler.
        """

        payload_bytes = await request.body()
        if len(payload_bytes) > settings.api_max_payload_bytes:
            _logger.warning(
                "collection_import_rejected",
                type_name=type_name,
                reason="payload_too_large",
                payload_bytes=len(payload_bytes),
            )
            return _api_error_response(
                status_code=_API_STATUS_PAYLOAD_TOO_LARGE,
                error_code="PayloadTooLarge",
                detail=f"payload exceeds {settings.api_max_payload_bytes} bytes",
            )

        try:
            import_result = collection_import_json_payload(
                registry=registry,
                type_name=type_name,
                payload=payload_bytes,
            )
        except UnknownStorableTypeError as error:
            _logger.warning("collection_import_rejected", type_name=type_name, reason="unknown_type")
            return _api_error_response(
                status_code=status.HTTP_404_NOT_FOUND,
                error_code=type(error).__name__,
                detail=str(error),
            )
        except _API_UNPROCESSABLE_IMPORT_ERRORS as error:
            _logger.warning(
                "collection_import_rejected",
                type_name=type_name,
                reason=type(error).__name__,
                detail=str(error),
            )
            return _api_error_response(
                status_code=_API_STATUS_UNPROCESSABLE,
                error_code=type(error).__name__,
                detail=str(error),
            )

        return JSONResponse(content=asdict(import_result), status_code=status.HTTP_200_OK)

    return router


def _api_error_response(status_code: int, error_code: str, detail: str) -> JSONResponse:
    """Build one deterministic error payload response.

    Args:
        status_code: HTTP status code.
        error_code: Stable error identifier, usually the exception class name.
        detail: Human-readable failure detail.

    Returns:
        JSONResponse: Error response.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return JSONResponse(
        content={"status": "error", "error_code": error_code, "detail": detail},
        status_code=status_code,
    )


__all__ = ["api_create_imports_router"]
