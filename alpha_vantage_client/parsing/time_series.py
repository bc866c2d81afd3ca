"""Decoders for the stock time series and Global Quote endpoints."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from alpha_vantage_client.errors import FieldTypeError, MalformedPayloadError
from alpha_vantage_client.models import (
    AdjustedOHLCV,
    OHLCV,
    Quote,
    SeriesKind,
    TimeSeries,
)
from alpha_vantage_client.parsing.helpers import (
    META_DATA_KEY,
    TIME_SERIES_PREFIX,
    field_value,
    find_prefixed_key,
    load_object,
    parse_date,
    parse_float,
    parse_int,
    parse_timestamp,
    require_object,
    sort_by_timestamp,
)
from alpha_vantage_client.parsing.metadata import extract_metadata


logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
INTRADAY_FORMAT = "%Y-%m-%d %H:%M:%S"

GLOBAL_QUOTE_KEY = "Global Quote"


@dataclass(frozen=True)
class SeriesLayout:
    """Where a series kind keeps its bars and how its timestamps look."""

    series_key: str | None  # None: find the single "Time Series*" key
    time_format: str


SERIES_LAYOUTS: dict[SeriesKind, SeriesLayout] = {
    SeriesKind.INTRADAY: SeriesLayout(None, INTRADAY_FORMAT),
    SeriesKind.DAILY: SeriesLayout("Time Series (Daily)", DATE_FORMAT),
    SeriesKind.DAILY_ADJUSTED: SeriesLayout("Time Series (Daily Adjusted)", DATE_FORMAT),
    SeriesKind.WEEKLY: SeriesLayout("Weekly Time Series", DATE_FORMAT),
    SeriesKind.WEEKLY_ADJUSTED: SeriesLayout("Weekly Adjusted Time Series", DATE_FORMAT),
    SeriesKind.MONTHLY: SeriesLayout("Monthly Time Series", DATE_FORMAT),
    SeriesKind.MONTHLY_ADJUSTED: SeriesLayout("Monthly Adjusted Time Series", DATE_FORMAT),
}

# Adjusted payloads put volume at position 6; accept position 5 as well.
ADJUSTED_VOLUME_KEYS = ("6. volume", "5. volume")

QUOTE_FIELDS = {
    "symbol": "01. symbol",
    "open": "02. open",
    "high": "03. high",
    "low": "04. low",
    "price": "05. price",
    "volume": "06. volume",
    "latest trading day": "07. latest trading day",
    "previous close": "08. previous close",
    "change": "09. change",
    "change percent": "10. change percent",
}


def _bar_object(timestamp_key: str, value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedPayloadError(f"expected map for time series entry '{timestamp_key}'")
    return value


def _parse_ohlcv(timestamp: datetime, entry: dict[str, Any]) -> OHLCV:
    return OHLCV(
        timestamp=timestamp,
        open=parse_float(field_value(entry, ("1. open",), "open"), "open"),
        high=parse_float(field_value(entry, ("2. high",), "high"), "high"),
        low=parse_float(field_value(entry, ("3. low",), "low"), "low"),
        close=parse_float(field_value(entry, ("4. close",), "close"), "close"),
        volume=parse_int(field_value(entry, ("5. volume",), "volume"), "volume"),
    )


def _parse_adjusted(timestamp: datetime, entry: dict[str, Any]) -> AdjustedOHLCV:
    split = entry.get("8. split coefficient")
    return AdjustedOHLCV(
        timestamp=timestamp,
        open=parse_float(field_value(entry, ("1. open",), "open"), "open"),
        high=parse_float(field_value(entry, ("2. high",), "high"), "high"),
        low=parse_float(field_value(entry, ("3. low",), "low"), "low"),
        close=parse_float(field_value(entry, ("4. close",), "close"), "close"),
        volume=parse_int(field_value(entry, ADJUSTED_VOLUME_KEYS, "volume"), "volume"),
        adjusted_close=parse_float(
            field_value(entry, ("5. adjusted close",), "adjusted close"), "adjusted close"
        ),
        dividend=parse_float(
            field_value(entry, ("7. dividend amount",), "dividend amount"), "dividend amount"
        ),
        split_coefficient=None if split is None else parse_float(split, "split coefficient"),
    )


def coerce_kind(kind: SeriesKind | str) -> SeriesKind:
    """Accept a SeriesKind or its API function name."""
    if isinstance(kind, SeriesKind):
        return kind
    try:
        return SeriesKind(kind)
    except ValueError:
        raise ValueError(f"Unknown time series kind: {kind}") from None


def decode_time_series(raw: bytes | str, kind: SeriesKind | str) -> TimeSeries:
    """
    Decode a time series payload.

    Args:
        raw: Response body
        kind: Series kind the caller requested

    Returns:
        TimeSeries with bars in ascending timestamp order

    Raises:
        MalformedPayloadError: body is not a JSON object or a block has the wrong shape
        MissingKeyError: "Meta Data" or the series block is absent
        FieldParseError: a timestamp or number could not be parsed
    """
    kind = coerce_kind(kind)
    layout = SERIES_LAYOUTS[kind]
    data = load_object(raw)

    meta_data = extract_metadata(require_object(data, META_DATA_KEY))

    if layout.series_key is None:
        _, series = find_prefixed_key(data, TIME_SERIES_PREFIX)
    else:
        series = require_object(data, layout.series_key)

    parse_entry = _parse_adjusted if kind.adjusted else _parse_ohlcv
    entries = [
        parse_entry(
            parse_timestamp(key, (layout.time_format,)),
            _bar_object(key, value),
        )
        for key, value in series.items()
    ]

    logger.debug(f"Decoded {len(entries)} {kind.name.lower()} bars for {meta_data.symbol}")
    return TimeSeries(kind=kind, meta_data=meta_data, entries=sort_by_timestamp(entries))


def decode_quote(raw: bytes | str) -> Quote:
    """
    Decode a Global Quote payload.

    Parse errors name the quote field that failed, e.g. "error parsing 'open'".
    """
    data = load_object(raw)
    quote = require_object(data, GLOBAL_QUOTE_KEY)

    def value(name: str) -> Any:
        return field_value(quote, (QUOTE_FIELDS[name],), name)

    symbol = value("symbol")
    change_percent = value("change percent")
    for name, text in (("symbol", symbol), ("change percent", change_percent)):
        if not isinstance(text, str):
            raise FieldTypeError(name, "string", text)

    return Quote(
        symbol=symbol,
        open=parse_float(value("open"), "open"),
        high=parse_float(value("high"), "high"),
        low=parse_float(value("low"), "low"),
        price=parse_float(value("price"), "price"),
        volume=parse_int(value("volume"), "volume"),
        latest_trading_day=parse_date(value("latest trading day"), "latest trading day"),
        previous_close=parse_float(value("previous close"), "previous close"),
        change=parse_float(value("change"), "change"),
        change_percent=change_percent,
    )
