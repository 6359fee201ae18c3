"""
JSON field access — the "parse a JSON object" capability used by every
event attribute.

Implements:
- JSON parse (string/bytes → dict, dicts pass through)
- Type conformance of known keys (jsonschema, type-only)
- Typed getters: get_string, get_boolean, get_object

A key that is missing, or present with a JSON ``null``, reads as absent.
A key whose value has the wrong JSON type raises TypeMismatchError; callers
in the attribute layer let it propagate.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from jsonschema import ValidationError, validate

from src.config.constants import FALSE_LITERALS, TRUE_LITERALS
from src.config.settings import MAX_PAYLOAD_LOG_CHARS
from src.events.metrics import record_type_mismatch

logger = logging.getLogger(__name__)

# Pseudo key reported when the payload itself is not an object.
PAYLOAD_KEY: str = "<payload>"


# ======================================================================
# Exceptions
# ======================================================================

class TypeMismatchError(TypeError):
    """Raised when a payload value has the wrong JSON type for its key."""

    def __init__(self, key: str, expected: str, actual: Any) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Key '{key}' expected {expected}, got {type(actual).__name__}: {_excerpt(actual)}"
        )


class JsonParseError(ValueError):
    """Raised when raw input is not valid JSON or not a JSON object."""


# ======================================================================
# Helpers
# ======================================================================

def _excerpt(value: Any) -> str:
    text = repr(value)
    if len(text) > MAX_PAYLOAD_LOG_CHARS:
        return text[:MAX_PAYLOAD_LOG_CHARS] + "..."
    return text


def type_mismatch(key: str, expected: str, actual: Any) -> TypeMismatchError:
    """Log, count and build the error for a wrong-typed *key*; the caller raises it."""
    logger.warning("Type mismatch for key '%s': expected %s, got %s", key, expected, _excerpt(actual))
    record_type_mismatch(key)
    return TypeMismatchError(key, expected, actual)


# ======================================================================
# Parse & type conformance
# ======================================================================

def parse_json_object(raw: str | bytes | Mapping) -> dict:
    """
    Return *raw* as a dict, decoding it first if it is a JSON string.

    Raises:
        TypeMismatchError: If *raw* is neither a mapping nor JSON text.
        JsonParseError: If *raw* is not valid JSON or decodes to something
            other than an object.
    """
    if isinstance(raw, Mapping):
        return dict(raw)
    if not isinstance(raw, (str, bytes, bytearray)):
        raise type_mismatch(PAYLOAD_KEY, "object", raw)

    try:
        data = json.loads(raw)
    except ValueError as e:
        raise JsonParseError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise JsonParseError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def ensure_payload_types(payload: Any, schema: dict) -> None:
    """
    Check the JSON type of every known key of *payload* against *schema*.

    Only types are enforced: the schemas in ``src.config.schemas`` declare
    no required keys and allow additional properties.

    Raises:
        TypeMismatchError: On the first key with a wrong type.
    """
    try:
        validate(instance=payload, schema=schema["schema"])
    except ValidationError as e:
        key = str(e.path[0]) if e.path else PAYLOAD_KEY
        expected = e.validator_value
        if isinstance(expected, list):
            expected = " | ".join(expected)
        raise type_mismatch(key, str(expected), e.instance) from e


# ======================================================================
# Typed getters
# ======================================================================

def get_string(json_obj: Mapping, key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Read *key* as a string.

    Numbers are coerced with ``str()``; objects, arrays and booleans are
    rejected.
    """
    value = json_obj.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise type_mismatch(key, "string", value)
    return str(value)


def get_boolean(json_obj: Mapping, key: str, default: Optional[bool] = None) -> Optional[bool]:
    """
    Read *key* as a boolean.

    Accepts JSON booleans and the strings ``"true"`` / ``"false"`` in any case.
    """
    value = json_obj.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_LITERALS:
            return True
        if lowered in FALSE_LITERALS:
            return False
    raise type_mismatch(key, "boolean", value)


def get_object(json_obj: Mapping, key: str) -> Optional[dict]:
    """Read *key* as a nested JSON object."""
    value = json_obj.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise type_mismatch(key, "object", value)
    return dict(value)
