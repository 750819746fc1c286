"""Shape classification for decoded import payload values.

Decoded payloads are classified once into a `PayloadShape` tag so importers
dispatch on the tag instead of probing container types inline.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum

from .errors import PayloadDecodeError


class PayloadShape(str, Enum):
    """Structural category of one decoded payload value."""

    MAP = "map"
    LIST = "list"
    SCALAR = "scalar"


def domain_payload_resolve_shape(value: object) -> PayloadShape:
    """Classify one raw value as keyed map, ordered list, or scalar.

    Args:
        value: Candidate raw value from a decoded payload.

    Returns:
        PayloadShape: Structural category of the value.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if isinstance(value, Mapping):
        return PayloadShape.MAP
    if isinstance(value, (list, tuple)):
        return PayloadShape.LIST
    return PayloadShape.SCALAR


def domain_payload_decode_structured_json(payload: str | bytes) -> tuple[PayloadShape, object]:
    """Decode JSON text and require a structured (object or array) top-level value.

    Args:
        payload: JSON text payload.

    Returns:
        tuple[PayloadShape, object]: Resolved shape and decoded value.

    Raises:
        PayloadDecodeError: Raised when payload is malformed or decodes to a scalar.
    """

    try:
        decoded_value = json.loads(payload)
    except (TypeError, ValueError, RecursionError) as error:
        raise PayloadDecodeError(f"Payload is not valid JSON. payload={payload!r}") from error

    payload_shape = domain_payload_resolve_shape(decoded_value)
    if payload_shape is PayloadShape.SCALAR:
        raise PayloadDecodeError(f"Payload must decode to a JSON object or array. payload={payload!r}")
    return payload_shape, decoded_value


def domain_payload_describe_value(value: object) -> str:
    """Render one raw value for error messages without failing on unserializable input.

    Args:
        value: Raw value to describe.

    Returns:
        str: JSON text when serializable, else Python representation.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


__all__ = [
    "PayloadShape",
    "domain_payload_decode_structured_json",
    "domain_payload_describe_value",
    "domain_payload_resolve_shape",
]
