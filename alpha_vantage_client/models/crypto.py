"""Data models for digital currency series and exchange rates."""

from dataclasses import asdict, dataclass, field, fields
from datetime import datetime

import pandas as pd

from alpha_vantage_client.ui import tables


@dataclass
class CryptoMetaData:
    """Metadata block of a digital currency series."""

    information: str = ""
    digital_currency_code: str = ""
    digital_currency_name: str = ""
    market_code: str = ""
    market_name: str = ""
    last_refreshed: str = ""
    time_zone: str = ""


@dataclass
class CryptoTimeSeriesData:
    """One digital currency bar. Every value is a float, volume included."""

    timestamp: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float
    market_cap: float


@dataclass
class CryptoSeriesResponse:
    """Digital currency series.

    ``interval_label`` is the literal top-level key the bars were read from,
    e.g. ``"Time Series (Digital Currency Daily)"``.
    """

    meta_data: CryptoMetaData
    entries: list[CryptoTimeSeriesData] = field(default_factory=list)
    interval_label: str = ""

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return tables.format_crypto_series(self.meta_data, self.entries)

    def to_frame(self) -> pd.DataFrame:
        """Convert the bars to a DataFrame indexed by timestamp."""
        if not self.entries:
            columns = [f.name for f in fields(CryptoTimeSeriesData)]
            return pd.DataFrame(columns=columns).set_index("timestamp")
        return pd.DataFrame([asdict(e) for e in self.entries]).set_index("timestamp")


@dataclass
class ExchangeRateInfo:
    """Realtime exchange rate for a currency pair, all values verbatim."""

    from_currency_code: str
    from_currency_name: str
    to_currency_code: str
    to_currency_name: str
    exchange_rate: str
    last_refreshed: str
    time_zone: str
    bid_price: str
    ask_price: str

    def __len__(self) -> int:
        return 1

    def __str__(self) -> str:
        return tables.format_exchange_rate(self)
