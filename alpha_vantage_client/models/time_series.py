"""Data models for stock time series and quotes."""

from dataclasses import asdict, dataclass, field, fields
from datetime import date, datetime
from enum import Enum

import pandas as pd

from alpha_vantage_client.ui import tables


class SeriesKind(Enum):
    """Time series endpoints, valued by their API function name."""
    INTRADAY = "TIME_SERIES_INTRADAY"
    DAILY = "TIME_SERIES_DAILY"
    DAILY_ADJUSTED = "TIME_SERIES_DAILY_ADJUSTED"
    WEEKLY = "TIME_SERIES_WEEKLY"
    WEEKLY_ADJUSTED = "TIME_SERIES_WEEKLY_ADJUSTED"
    MONTHLY = "TIME_SERIES_MONTHLY"
    MONTHLY_ADJUSTED = "TIME_SERIES_MONTHLY_ADJUSTED"

    @property
    def adjusted(self) -> bool:
        return self.value.endswith("_ADJUSTED")

    @property
    def intraday(self) -> bool:
        return self is SeriesKind.INTRADAY


@dataclass
class MetaData:
    """Descriptive block shared by time series, quote and indicator payloads."""

    information: str = ""
    symbol: str = ""
    last_refreshed: str = ""
    interval: str = ""
    output_size: str = ""
    time_zone: str = ""
    time_period: float | None = None
    series_type: str | None = None
    volume_factor: str | None = None


@dataclass
class OHLCV:
    """One price bar."""

    timestamp: datetime
    open: float
    high: float
    low: float
    close: float
    volume: int


@dataclass
class AdjustedOHLCV(OHLCV):
    """Price bar with split/dividend-adjusted close."""

    adjusted_close: float
    dividend: float
    split_coefficient: float | None = None


@dataclass
class TimeSeries:
    """Metadata plus bars in ascending timestamp order."""

    kind: SeriesKind
    meta_data: MetaData
    entries: list[OHLCV] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        time_format = "%Y-%m-%d %H:%M:%S" if self.kind.intraday else "%Y-%m-%d"
        return tables.format_time_series(
            self.meta_data,
            self.entries,
            adjusted=self.kind.adjusted,
            time_format=time_format,
            show_interval=self.kind.intraday,
        )

    def to_frame(self) -> pd.DataFrame:
        """
        Convert the bars to a DataFrame.

        Returns:
            DataFrame indexed by timestamp with one column per bar field
        """
        row_type = AdjustedOHLCV if self.kind.adjusted else OHLCV
        if not self.entries:
            columns = [f.name for f in fields(row_type)]
            return pd.DataFrame(columns=columns).set_index("timestamp")
        return pd.DataFrame([asdict(e) for e in self.entries]).set_index("timestamp")


@dataclass
class Quote:
    """Latest price snapshot from the Global Quote endpoint."""

    symbol: str
    open: float
    high: float
    low: float
    price: float
    volume: int
    latest_trading_day: date
    previous_close: float
    change: float
    change_percent: str  # kept verbatim, e.g. "0.5989%"

    def __len__(self) -> int:
        return 1

    def __str__(self) -> str:
        return tables.format_quote(self)
