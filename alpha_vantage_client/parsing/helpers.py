"""Shared helpers for turning loosely typed payload values into Python types."""

import json
import math
import re
from datetime import date, datetime
from typing import Any, Callable, TypeVar

from alpha_vantage_client.errors import (
    FieldParseError,
    MalformedPayloadError,
    MissingKeyError,
)


META_DATA_KEY = "Meta Data"
TIME_SERIES_PREFIX = "Time Series"

T = TypeVar("T")

# No underscores, whitespace, inf or nan.
FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def load_object(raw: bytes | str) -> dict[str, Any]:
    """Parse a JSON document whose top level must be an object."""
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedPayloadError(f"payload is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedPayloadError(
            f"expected a JSON object at the top level, got {type(data).__name__}"
        )
    return data


def require_object(container: dict[str, Any], key: str) -> dict[str, Any]:
    """Return ``container[key]``, which must exist and be an object."""
    if key not in container:
        raise MissingKeyError(f"key not found: '{key}'", key=key)
    value = container[key]
    if not isinstance(value, dict):
        raise MalformedPayloadError(
            f"expected map for '{key}', got {type(value).__name__}"
        )
    return value


def find_prefixed_key(container: dict[str, Any], prefix: str) -> tuple[str, dict[str, Any]]:
    """
    Find the single entry whose key starts with ``prefix``.

    Args:
        container: Top-level payload object
        prefix: Key prefix, e.g. "Time Series"

    Returns:
        The matching key and its object value

    Raises:
        MissingKeyError: no key matches
        MalformedPayloadError: more than one key matches, or the value is not an object
    """
    matches = [key for key in container if key.startswith(prefix)]
    if not matches:
        raise MissingKeyError(f"expected a key starting with '{prefix}'", key=prefix)
    if len(matches) > 1:
        raise MalformedPayloadError(
            f"expected one key starting with '{prefix}', found {len(matches)}: {matches}"
        )
    key = matches[0]
    return key, require_object(container, key)


def parse_float(value: Any, field: str) -> float:
    """Parse a quoted number such as ``"330.0500"``."""
    if not isinstance(value, str):
        raise FieldParseError(field, value, "expected a numeric string")
    if not FLOAT_PATTERN.fullmatch(value):
        raise FieldParseError(field, value)
    result = float(value)
    if not math.isfinite(result):
        raise FieldParseError(field, value, "out of range")
    return result


def parse_int(value: Any, field: str) -> int:
    """Parse a quoted integer such as ``"1000000"``."""
    if not isinstance(value, str):
        raise FieldParseError(field, value, "expected a numeric string")
    if not INT_PATTERN.fullmatch(value):
        raise FieldParseError(field, value)
    return int(value)


def parse_timestamp(value: str, formats: tuple[str, ...], field: str = "timestamp") -> datetime:
    """Parse ``value`` with the first of ``formats`` that matches."""
    for fmt in formats:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        # strptime accepts unpadded fields such as "2023-9-8"
        if parsed.strftime(fmt) == value:
            return parsed
    raise FieldParseError(field, value, f"expected format {' or '.join(formats)}")


def parse_date(value: Any, field: str) -> date:
    if not isinstance(value, str):
        raise FieldParseError(field, value, "expected a date string")
    return parse_timestamp(value, ("%Y-%m-%d",), field).date()


def field_value(entry: dict[str, Any], keys: tuple[str, ...], field: str) -> Any:
    """Return the value under the first of ``keys`` present in ``entry``."""
    for key in keys:
        if key in entry:
            return entry[key]
    raise FieldParseError(field, None, f"missing key '{keys[0]}'")


def sort_by_timestamp(items: list[T], key: Callable[[T], datetime] = lambda x: x.timestamp) -> list[T]:
    """Sort ascending by timestamp. ``sorted`` is stable, so ties keep input order."""
    return sorted(items, key=key)
