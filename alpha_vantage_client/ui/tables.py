"""Fixed-width text rendering of decoded records.

Column widths are part of the output contract: callers diff these tables, so
the time column is 25 characters wide (24 for indicators) and value columns
are 15 (20 for digital currency series).
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from alpha_vantage_client.models import (
        OHLCV,
        CryptoMetaData,
        CryptoTimeSeriesData,
        ExchangeRateInfo,
        IndicatorValue,
        MetaData,
        Quote,
    )

TIME_WIDTH = 25
INDICATOR_TIME_WIDTH = 24
COLUMN_WIDTH = 15
CRYPTO_COLUMN_WIDTH = 20

OHLCV_HEADERS = ["Time", "Open", "High", "Low", "Close", "Volume"]
ADJUSTED_HEADERS = [
    "Time", "Open", "High", "Low", "Close", "Adjusted Close", "Volume", "Dividend",
]
CRYPTO_HEADERS = ["Time", "Open", "High", "Low", "Close", "Volume", "MarketCap"]


def _header_block(headers: list[str], time_width: int, column_width: int) -> list[str]:
    line = f"{headers[0]:<{time_width}}"
    line += "".join(f"{h:<{column_width}}" for h in headers[1:])
    rule = "=" * (time_width + column_width * (len(headers) - 1))
    return [line, rule]


def format_time_series(
    meta_data: "MetaData",
    entries: Sequence["OHLCV"],
    *,
    adjusted: bool,
    time_format: str,
    show_interval: bool,
) -> str:
    """Render a stock time series as metadata lines followed by a table."""
    lines = [
        meta_data.information,
        f"Symbol: {meta_data.symbol}",
        f"Last Refreshed: {meta_data.last_refreshed}",
    ]
    if show_interval:
        lines.append(f"Interval: {meta_data.interval}")
    lines += [
        f"Output Size: {meta_data.output_size}",
        f"Time Zone: {meta_data.time_zone}",
        "",
    ]

    headers = ADJUSTED_HEADERS if adjusted else OHLCV_HEADERS
    lines += _header_block(headers, TIME_WIDTH, COLUMN_WIDTH)

    w = COLUMN_WIDTH
    for v in entries:
        row = f"{v.timestamp.strftime(time_format):<{TIME_WIDTH}}"
        row += f"{v.open:<{w}.2f}{v.high:<{w}.2f}{v.low:<{w}.2f}{v.close:<{w}.2f}"
        if adjusted:
            row += f"{v.adjusted_close:<{w}.2f}{v.volume:<{w}d}{v.dividend:<{w}.2f}"
        else:
            row += f"{v.volume:<{w}d}"
        lines.append(row)

    return "\n".join(lines) + "\n"


def format_indicator(meta_data: "MetaData", values: Sequence["IndicatorValue"]) -> str:
    """Render indicator readings; columns follow the first reading's keys."""
    lines = [
        meta_data.information,
        f"Symbol: {meta_data.symbol}",
        f"Last Refreshed: {meta_data.last_refreshed}",
        f"Interval: {meta_data.interval}",
        f"Output Size: {meta_data.output_size}",
        f"Time Zone: {meta_data.time_zone}",
        "",
    ]

    names = list(values[0].values) if values else []
    lines += _header_block(["Time", *names], INDICATOR_TIME_WIDTH, COLUMN_WIDTH)

    for v in values:
        row = f"{v.timestamp.strftime('%Y-%m-%d %H:%M:%S'):<{INDICATOR_TIME_WIDTH}}"
        for name in names:
            if name in v.values:
                row += f"{v.values[name]:>{COLUMN_WIDTH}.2f}"
            else:
                row += " " * COLUMN_WIDTH
        lines.append(row)

    return "\n".join(lines) + "\n"


def format_crypto_series(
    meta_data: "CryptoMetaData", entries: Sequence["CryptoTimeSeriesData"]
) -> str:
    """Render a digital currency series."""
    lines = [
        meta_data.information,
        f"Digital Currency: {meta_data.digital_currency_name} ({meta_data.digital_currency_code})",
        f"Market: {meta_data.market_name} ({meta_data.market_code})",
        f"Last Refreshed: {meta_data.last_refreshed}",
        f"Time Zone: {meta_data.time_zone}",
        "",
    ]
    lines += _header_block(CRYPTO_HEADERS, TIME_WIDTH, CRYPTO_COLUMN_WIDTH)

    w = CRYPTO_COLUMN_WIDTH
    for v in entries:
        row = f"{v.timestamp.strftime('%Y-%m-%d %H:%M:%S'):<{TIME_WIDTH}}"
        row += "".join(
            f"{x:<{w}.2f}"
            for x in (v.open, v.high, v.low, v.close, v.volume, v.market_cap)
        )
        lines.append(row)

    return "\n".join(lines) + "\n"


def format_quote(quote: "Quote") -> str:
    return (
        f"Symbol: {quote.symbol}\n"
        f"Open: {quote.open:.2f}\n"
        f"High: {quote.high:.2f}\n"
        f"Low: {quote.low:.2f}\n"
        f"Price: {quote.price:.2f}\n"
        f"Volume: {quote.volume}\n"
        f"Latest Trading Day: {quote.latest_trading_day.strftime('%Y-%m-%d')}\n"
        f"Previous Close: {quote.previous_close:.2f}\n"
        f"Change: {quote.change:.2f}\n"
        f"Change Percent: {quote.change_percent}\n"
    )


def format_exchange_rate(info: "ExchangeRateInfo") -> str:
    return (
        f"From: {info.from_currency_name} ({info.from_currency_code})\n"
        f"To: {info.to_currency_name} ({info.to_currency_code})\n"
        f"Exchange Rate: {info.exchange_rate}\n"
        f"Last Refreshed: {info.last_refreshed}\n"
        f"Time Zone: {info.time_zone}\n"
        f"Bid Price: {info.bid_price}\n"
        f"Ask Price: {info.ask_price}"
    )
