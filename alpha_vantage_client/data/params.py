"""Query parameters for the Alpha Vantage endpoints.

Optional fields default to ``None``, which means "leave the parameter out and
let the API apply its default".
"""

from dataclasses import dataclass, field


# Technical indicator function names accepted by get_indicator
INDICATORS: tuple[str, ...] = (
    "SMA", "EMA", "WMA", "DEMA", "TEMA", "TRIMA", "KAMA", "MAMA", "VWAP", "T3",
    "MACD", "MACDEXT", "STOCH", "STOCHF", "RSI", "STOCHRSI", "WILLR", "ADX",
    "ADXR", "APO", "PPO", "MOM", "BOP", "CCI", "CMO", "ROC", "ROCR", "AROON",
    "AROONOSC", "MFI", "TRIX", "ULTOSC", "DX", "MINUS_DI", "PLUS_DI",
    "MINUS_DM", "PLUS_DM", "BBANDS", "MIDPOINT", "MIDPRICE", "SAR", "TRANGE",
    "ATR", "NATR", "AD", "ADOSC", "OBV", "HT_TRENDLINE", "HT_SINE",
    "HT_TRENDMODE", "HT_DCPERIOD", "HT_DCPHASE", "HT_PHASOR",
)

CRYPTO_FUNCTIONS: tuple[str, ...] = (
    "DIGITAL_CURRENCY_DAILY",
    "DIGITAL_CURRENCY_WEEKLY",
    "DIGITAL_CURRENCY_MONTHLY",
)


def _flag(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class TimeSeriesParams:
    """Parameters for the TIME_SERIES_* and GLOBAL_QUOTE functions."""

    symbol: str
    interval: str | None = None  # intraday only: 1min, 5min, 15min, 30min, 60min
    adjusted: bool | None = None
    extended_hours: bool | None = None
    month: str | None = None  # YYYY-MM
    output_size: str | None = None  # compact or full

    def to_query(self) -> dict[str, str]:
        query = {"symbol": self.symbol}
        if self.interval is not None:
            query["interval"] = self.interval
        if self.adjusted is not None:
            query["adjusted"] = _flag(self.adjusted)
        if self.extended_hours is not None:
            query["extended_hours"] = _flag(self.extended_hours)
        if self.month is not None:
            query["month"] = self.month
        if self.output_size is not None:
            query["outputsize"] = self.output_size
        return query


@dataclass
class IndicatorParams:
    """Parameters shared by the technical indicator functions.

    ``extra`` carries indicator-specific settings such as ``fastperiod`` or
    ``nbdevup`` verbatim.
    """

    symbol: str
    interval: str = "daily"
    time_period: int | None = None
    series_type: str | None = None  # close, open, high, low
    month: str | None = None
    output_size: str | None = None  # compact or full
    extra: dict[str, str] = field(default_factory=dict)

    def to_query(self) -> dict[str, str]:
        query = {"symbol": self.symbol, "interval": self.interval}
        if self.time_period is not None:
            query["time_period"] = str(self.time_period)
        if self.series_type is not None:
            query["series_type"] = self.series_type
        if self.month is not None:
            query["month"] = self.month
        if self.output_size is not None:
            query["outputsize"] = self.output_size
        query.update(self.extra)
        return query


@dataclass
class CryptoParams:
    """Parameters for the DIGITAL_CURRENCY_* functions."""

    symbol: str
    market: str = "USD"

    def to_query(self) -> dict[str, str]:
        return {"symbol": self.symbol, "market": self.market}


@dataclass
class ExchangeRateParams:
    """Parameters for CURRENCY_EXCHANGE_RATE. Works for fiat and crypto codes."""

    from_currency: str
    to_currency: str

    def to_query(self) -> dict[str, str]:
        return {"from_currency": self.from_currency, "to_currency": self.to_currency}
