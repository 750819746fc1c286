"""Typed domain models shared across runtime layers.

This module provides simple data contracts for cross-layer communication
between the API surface and the importer runtime.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AppMetadata:
    """Static application metadata for runtime identification.

    Attributes:
        application_name: Human-readable app name.
        environment_name: Runtime environment label.
    """

    application_name: str
    environment_name: str


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        registered_types: Number of storable types available to importers.
    """

    status: str
    registered_types: int


@dataclass(frozen=True)
class CollectionImportResult:
    """Result contract for one collection import executed by a runtime surface.

    Attributes:
        type_name: Registered storable type name used for every item.
        count: Number of imported items.
        items: Exported field maps in collection order.
    """

    type_name: str
    count: int
    items: list[dict[str, Any]]
