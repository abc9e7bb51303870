"""JSON helpers for response bodies."""

import json
from typing import Any

_MISSING: Any = object()


def parse_json(data: Any, default: Any = _MISSING) -> Any:
    """
    Parse ``data`` as JSON, degrading instead of raising.

    Args:
        data: Raw payload (str or bytes), or an already-decoded value
        default: Value returned when parsing fails. Falsy values are honoured.

    Returns:
        The decoded value, ``default`` on failure, or ``data`` unchanged when
        no default was given.
    """
    try:
        return json.loads(data)
    except (TypeError, ValueError, RecursionError):
        return data if default is _MISSING else default


def to_json(body: Any) -> Any:
    """Parse a response body, returning it unchanged if it is not JSON."""
    return parse_json(body)
