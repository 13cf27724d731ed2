from __future__ import annotations

from dataclasses import asdict, is_dataclass
from datetime import date
from enum import Enum
from typing import Any, Mapping

from flask import jsonify, request

from ..core.exceptions import CreditingError, DomainError, NotFoundError


def to_jsonable(value: Any) -> Any:
    """Dataclasses, enums and dates to plain JSON types (dates as YYYY-MM-DD)."""
    if is_dataclass(value) and not isinstance(value, type):
        return to_jsonable(asdict(value))
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(k.value if isinstance(k, Enum) else k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def status_for(error: DomainError) -> int:
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, CreditingError):
        return 409
    return 400


def error_response(error: DomainError):
    return jsonify({"error": str(error)}), status_for(error)


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
