"""Metadata extraction for the three ordinal-key dialects.

The API names metadata fields with ordinal prefixes, and the prefixes differ
by endpoint family: time series use ``"2. Symbol"``, indicators use
``"1: Symbol"`` and report the indicator name under ``"2: Indicator"``.
Each family gets its own table of key literal -> (attribute, expected type).
Keys missing from a table are ignored.
"""

from typing import Any

from alpha_vantage_client.errors import FieldTypeError
from alpha_vantage_client.models import CryptoMetaData, MetaData


STRING = "string"
NUMBER = "number"

TIME_SERIES_FIELDS: dict[str, tuple[str, str]] = {
    "1. Information": ("information", STRING),
    "2. Symbol": ("symbol", STRING),
    "3. Last Refreshed": ("last_refreshed", STRING),
    "4. Interval": ("interval", STRING),
    "5. Output Size": ("output_size", STRING),
    "6. Time Zone": ("time_zone", STRING),
    "5. Time Period": ("time_period", NUMBER),
    "6. Series Type": ("series_type", STRING),
    "6. Volume Factor (vFactor)": ("volume_factor", STRING),
    # daily, weekly and monthly payloads have no interval, so later fields shift up
    "4. Output Size": ("output_size", STRING),
    "5. Time Zone": ("time_zone", STRING),
    "4. Time Zone": ("time_zone", STRING),
}

INDICATOR_FIELDS: dict[str, tuple[str, str]] = {
    "1: Symbol": ("symbol", STRING),
    "2: Indicator": ("information", STRING),
    "3: Last Refreshed": ("last_refreshed", STRING),
    "4: Interval": ("interval", STRING),
    "5: Time Period": ("time_period", NUMBER),
    "6: Series Type": ("series_type", STRING),
    "7: Time Zone": ("time_zone", STRING),
}

CRYPTO_FIELDS: dict[str, tuple[str, str]] = {
    "1. Information": ("information", STRING),
    "2. Digital Currency Code": ("digital_currency_code", STRING),
    "3. Digital Currency Name": ("digital_currency_name", STRING),
    "4. Market Code": ("market_code", STRING),
    "5. Market Name": ("market_name", STRING),
    "6. Last Refreshed": ("last_refreshed", STRING),
    "7. Time Zone": ("time_zone", STRING),
}


def _convert(key: str, value: Any, expected: str) -> Any:
    if expected == NUMBER:
        # bool is an int subclass but never a valid period
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise FieldTypeError(key, "number", value)
        return float(value)
    if not isinstance(value, str):
        raise FieldTypeError(key, "string", value)
    return value


def _apply(target: Any, raw: dict[str, Any], table: dict[str, tuple[str, str]]) -> Any:
    for key, value in raw.items():
        if key not in table:
            continue
        attribute, expected = table[key]
        setattr(target, attribute, _convert(key, value, expected))
    return target


def extract_metadata(raw: dict[str, Any]) -> MetaData:
    """Build MetaData from a time series or quote "Meta Data" block."""
    return _apply(MetaData(), raw, TIME_SERIES_FIELDS)


def extract_indicator_metadata(raw: dict[str, Any]) -> MetaData:
    """Build MetaData from a technical indicator "Meta Data" block."""
    return _apply(MetaData(), raw, INDICATOR_FIELDS)


def extract_crypto_metadata(raw: dict[str, Any]) -> CryptoMetaData:
    """Build CryptoMetaData from a digital currency "Meta Data" block."""
    return _apply(CryptoMetaData(), raw, CRYPTO_FIELDS)
