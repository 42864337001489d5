"""Form-field encoding helpers for SRM Web API requests."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


def json_param(value: Any) -> str:
    """Serialize *value* as compact JSON, the way the SRM web UI sends it.

    Lists, objects and some string parameters (MAC addresses, gateway
    types) are sent as JSON text inside a single form field.

    Examples:
        >>> json_param(["device", "total_timespent"])
        '["device","total_timespent"]'
        >>> json_param("aa:bb:cc:dd:ee:ff")
        '"aa:bb:cc:dd:ee:ff"'
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def form_value(value: object) -> str:
    """Convert a scalar to its form-field text.

    Booleans become ``true``/``false`` and ``None`` becomes an empty string.

    Raises:
        TypeError: If *value* is not a scalar; serialize it with
            :func:`json_param` first.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(
        f"Form value must be a scalar, got {type(value).__name__}; "
        "serialize it with json_param() first"
    )


def encode_form(data: Mapping[str, object] | None) -> list[tuple[str, str]]:
    """Turn a parameter mapping into ordered ``(key, text)`` pairs.

    Insertion order is kept so the body matches the order fields were built in.
    """
    if not data:
        return []
    return [(key, form_value(value)) for key, value in data.items()]
