"""Data fetching."""

from .alphavantage_fetcher import AlphaVantageFetcher
from .params import CryptoParams, ExchangeRateParams, IndicatorParams, TimeSeriesParams

__all__ = [
    "AlphaVantageFetcher",
    "CryptoParams",
    "ExchangeRateParams",
    "IndicatorParams",
    "TimeSeriesParams",
]
