"""JSON response helpers shared by the controllers."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from flask import jsonify

from ..core.enums import ErrorKind

_STATUS_BY_KIND = {
    ErrorKind.ATTENDANCE_NOT_FOUND: 404,
    ErrorKind.DATABASE_ERROR: 500,
}


def camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_json(value: Any) -> Any:
    """Dataclasses -> camelCase dicts, datetimes -> ISO-8601, enums -> value."""
    if value is None or isinstance(value, (str, int, float, bool)) and not isinstance(value, Enum):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if is_dataclass(value):
        return {camel_case(f.name): to_json(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    raise TypeError(f"Cannot serialize {type(value)!r}")


def http_status_for(error) -> int:
    # Every other rejection is a client mistake.
    return _STATUS_BY_KIND.get(error.kind, 400)


def error_response(error):
    return jsonify({"error": error.kind.value, "message": error.message}), http_status_for(error)
