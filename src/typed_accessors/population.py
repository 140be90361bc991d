"""Bulk assignment of raw values through generated typed writers."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

import orjson

from .accessors import typed_fields

logger = logging.getLogger(__name__)

__all__ = ["populate", "populate_from_json"]


def populate(instance: Any, values: Mapping[str, Any], *, strict: bool = True) -> Any:
    """
    Assign each entry of *values* through the matching typed writer.

    Args:
        instance: Object whose class declares typed fields
        values: Raw values keyed by field name
        strict: Reject keys that are not writable typed fields

    Returns:
        The populated instance

    Raises:
        KeyError: If *strict* and a key has no writable typed field
        ArgumentTypeError: If a Float or Integer writer rejects its value
        DateParseError: If a Date writer cannot parse its text
    """
    fields = typed_fields(type(instance))
    for name, raw in values.items():
        field = fields.get(name)
        if field is None or not field.writable:
            if strict:
                raise KeyError(f"{type(instance).__name__} has no writable typed field {name!r}")
            logger.debug("Skipping %r: no writable typed field on %s", name, type(instance).__name__)
            continue
        setattr(instance, name, raw)
    return instance


def populate_from_json(instance: Any, payload: Union[bytes, str], *, strict: bool = True) -> Any:
    """
    Decode a JSON object and assign its members through typed writers.

    Raises:
        orjson.JSONDecodeError: If the payload is not valid JSON
        TypeError: If the payload does not hold a JSON object
    """
    decoded = orjson.loads(payload)
    if not isinstance(decoded, dict):
        raise TypeError(f"JSON payload must contain an object, got {type(decoded).__name__}")
    return populate(instance, decoded, strict=strict)
