"""Decoded record types."""

from .time_series import AdjustedOHLCV, MetaData, OHLCV, Quote, SeriesKind, TimeSeries
from .indicators import IndicatorResponse, IndicatorValue
from .crypto import (
    CryptoMetaData,
    CryptoSeriesResponse,
    CryptoTimeSeriesData,
    ExchangeRateInfo,
)

__all__ = [
    "AdjustedOHLCV",
    "CryptoMetaData",
    "CryptoSeriesResponse",
    "CryptoTimeSeriesData",
    "ExchangeRateInfo",
    "IndicatorResponse",
    "IndicatorValue",
    "MetaData",
    "OHLCV",
    "Quote",
    "SeriesKind",
    "TimeSeries",
]
