"""Decoders for digital currency series and the realtime exchange rate."""

import logging
from typing import Any

from alpha_vantage_client.errors import FieldTypeError, MalformedPayloadError
from alpha_vantage_client.models import (
    CryptoSeriesResponse,
    CryptoTimeSeriesData,
    ExchangeRateInfo,
)
from alpha_vantage_client.parsing.helpers import (
    META_DATA_KEY,
    TIME_SERIES_PREFIX,
    field_value,
    find_prefixed_key,
    load_object,
    parse_float,
    parse_timestamp,
    require_object,
    sort_by_timestamp,
)
from alpha_vantage_client.parsing.metadata import extract_crypto_metadata


logger = logging.getLogger(__name__)

EXCHANGE_RATE_KEY = "Realtime Currency Exchange Rate"

# attribute -> literal payload key; the "(USD)" suffix is part of the key
CRYPTO_VALUE_KEYS = {
    "open": "1a. open (USD)",
    "high": "2a. high (USD)",
    "low": "3a. low (USD)",
    "close": "4a. close (USD)",
    "volume": "5. volume",
    "market_cap": "6. market cap (USD)",
}

EXCHANGE_RATE_FIELDS = {
    "from_currency_code": "1. From_Currency Code",
    "from_currency_name": "2. From_Currency Name",
    "to_currency_code": "3. To_Currency Code",
    "to_currency_name": "4. To_Currency Name",
    "exchange_rate": "5. Exchange Rate",
    "last_refreshed": "6. Last Refreshed",
    "time_zone": "7. Time Zone",
    "bid_price": "8. Bid Price",
    "ask_price": "9. Ask Price",
}


def _parse_bar(key: str, entry: Any) -> CryptoTimeSeriesData:
    if not isinstance(entry, dict):
        raise MalformedPayloadError(f"expected map for timestamp data: '{key}'")

    values = {
        attribute: parse_float(field_value(entry, (payload_key,), payload_key), payload_key)
        for attribute, payload_key in CRYPTO_VALUE_KEYS.items()
    }
    return CryptoTimeSeriesData(timestamp=parse_timestamp(key, ("%Y-%m-%d",)), **values)


def decode_crypto_series(raw: bytes | str) -> CryptoSeriesResponse:
    """
    Decode a daily, weekly or monthly digital currency payload.

    Every bar must carry all six values as numeric strings; a missing or
    malformed value fails the whole decode.
    """
    data = load_object(raw)
    meta_data = extract_crypto_metadata(require_object(data, META_DATA_KEY))
    label, series = find_prefixed_key(data, TIME_SERIES_PREFIX)

    entries = [_parse_bar(key, entry) for key, entry in series.items()]

    logger.debug(f"Decoded {len(entries)} bars from '{label}'")
    return CryptoSeriesResponse(
        meta_data=meta_data,
        entries=sort_by_timestamp(entries),
        interval_label=label,
    )


def decode_exchange_rate(raw: bytes | str) -> ExchangeRateInfo:
    """Decode a realtime currency exchange rate payload. Values stay strings."""
    data = load_object(raw)
    block = require_object(data, EXCHANGE_RATE_KEY)

    values = {}
    for attribute, key in EXCHANGE_RATE_FIELDS.items():
        value = block.get(key)
        if not isinstance(value, str):
            raise FieldTypeError(key, "string", value)
        values[attribute] = value
    return ExchangeRateInfo(**values)
