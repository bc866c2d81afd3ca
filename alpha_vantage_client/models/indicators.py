"""Data models for technical indicator responses."""

from dataclasses import dataclass, field
from datetime import datetime

import pandas as pd

from alpha_vantage_client.models.time_series import MetaData
from alpha_vantage_client.ui import tables


@dataclass
class IndicatorValue:
    """Indicator readings for one timestamp.

    ``values`` maps each sub-field name emitted by the API (``"SMA"``,
    ``"Real Upper Band"``, ...) to its value, in payload order.
    """

    timestamp: datetime
    values: dict[str, float] = field(default_factory=dict)


@dataclass
class IndicatorResponse:
    """Indicator metadata plus readings in ascending timestamp order."""

    indicator: str
    meta_data: MetaData
    values: list[IndicatorValue] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        return tables.format_indicator(self.meta_data, self.values)

    def columns(self) -> list[str]:
        """Sub-field names of the first reading, or an empty list."""
        if not self.values:
            return []
        return list(self.values[0].values)

    def to_frame(self) -> pd.DataFrame:
        """Convert the readings to a DataFrame indexed by timestamp."""
        if not self.values:
            return pd.DataFrame(columns=["timestamp"]).set_index("timestamp")
        records = [{"timestamp": v.timestamp, **v.values} for v in self.values]
        return pd.DataFrame(records).set_index("timestamp")
