"""Helpers for describing decoded JSON values in messages"""

import json
from typing import Any


def json_type_name(value: Any) -> str:
    """JSON type name of a decoded value (string, number, boolean, object, array, null)"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def is_number(value: Any) -> bool:
    """True for JSON numbers (booleans excluded)"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_value(value: Any) -> str:
    """Compact JSON rendering of a value for error messages"""
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)
