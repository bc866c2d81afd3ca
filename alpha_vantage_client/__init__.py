"""Alpha Vantage market data client."""

from alpha_vantage_client.config import Settings
from alpha_vantage_client.data import (
    AlphaVantageFetcher,
    CryptoParams,
    ExchangeRateParams,
    IndicatorParams,
    TimeSeriesParams,
)
from alpha_vantage_client.models import SeriesKind
from alpha_vantage_client.parsing import (
    decode_crypto_series,
    decode_exchange_rate,
    decode_indicator,
    decode_quote,
    decode_time_series,
)

__all__ = [
    "AlphaVantageFetcher",
    "CryptoParams",
    "ExchangeRateParams",
    "IndicatorParams",
    "SeriesKind",
    "Settings",
    "TimeSeriesParams",
    "decode_crypto_series",
    "decode_exchange_rate",
    "decode_indicator",
    "decode_quote",
    "decode_time_series",
]
