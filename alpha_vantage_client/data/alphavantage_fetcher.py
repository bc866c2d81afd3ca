"""Alpha Vantage HTTP fetcher.

Builds query strings, performs the GET and hands the raw body to the matching
decoder. No caching, retries or rate limiting: a failed call is final.
"""

import json
import logging

import httpx

from alpha_vantage_client.config import Settings
from alpha_vantage_client.data.params import (
    CRYPTO_FUNCTIONS,
    INDICATORS,
    CryptoParams,
    ExchangeRateParams,
    IndicatorParams,
    TimeSeriesParams,
)
from alpha_vantage_client.errors import AlphaVantageApiError
from alpha_vantage_client.models import (
    CryptoSeriesResponse,
    ExchangeRateInfo,
    IndicatorResponse,
    Quote,
    SeriesKind,
    TimeSeries,
)
from alpha_vantage_client.parsing import (
    decode_crypto_series,
    decode_exchange_rate,
    decode_indicator,
    decode_quote,
    decode_time_series,
)
from alpha_vantage_client.parsing.time_series import coerce_kind


logger = logging.getLogger(__name__)


class AlphaVantageFetcher:
    """Fetches and decodes data from the Alpha Vantage API."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._transport = transport
        self._client: httpx.Client | None = None

        if not self.settings.has_api_key():
            logger.warning("ALPHA_VANTAGE_API_KEY not set")

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.settings.timeout, transport=self._transport
            )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "AlphaVantageFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _request(self, function: str, params: dict[str, str]) -> bytes:
        """
        Call one API function.

        Args:
            function: API function name, e.g. "TIME_SERIES_DAILY"
            params: Query parameters besides function and apikey

        Returns:
            Raw response body
        """
        query = {"function": function, **params}
        logger.info(f"Fetching {function} {params}")
        query["apikey"] = self.settings.alpha_vantage_api_key

        response = self.client.get(self.settings.base_url, params=query)
        response.raise_for_status()

        body = response.content
        try:
            data = json.loads(body)
        except ValueError:
            # left for the decoder to report
            return body

        if isinstance(data, dict):
            if "Error Message" in data:
                raise AlphaVantageApiError(data["Error Message"])
            for notice in ("Note", "Information"):
                if notice in data:
                    # Rate limit and premium-endpoint notices
                    logger.warning(f"API {notice}: {data[notice]}")

        return body

    def get_time_series(self, kind: SeriesKind | str, params: TimeSeriesParams) -> TimeSeries:
        """
        Fetch one of the stock time series.

        Args:
            kind: Series kind or its function name
            params: Symbol and optional settings; interval is required for intraday

        Returns:
            Decoded TimeSeries
        """
        kind = coerce_kind(kind)
        if kind.intraday and not params.interval:
            raise ValueError("interval is required for intraday time series")

        body = self._request(kind.value, params.to_query())
        series = decode_time_series(body, kind)
        logger.info(f"  Decoded {len(series)} bars")
        return series

    def get_intraday(self, params: TimeSeriesParams) -> TimeSeries:
        return self.get_time_series(SeriesKind.INTRADAY, params)

    def get_daily(self, params: TimeSeriesParams) -> TimeSeries:
        return self.get_time_series(SeriesKind.DAILY, params)

    def get_daily_adjusted(self, params: TimeSeriesParams) -> TimeSeries:
        return self.get_time_series(SeriesKind.DAILY_ADJUSTED, params)

    def get_weekly(self, params: TimeSeriesParams) -> TimeSeries:
        return self.get_time_series(SeriesKind.WEEKLY, params)

    def get_weekly_adjusted(self, params: TimeSeriesParams) -> TimeSeries:
        return self.get_time_series(SeriesKind.WEEKLY_ADJUSTED, params)

    def get_monthly(self, params: TimeSeriesParams) -> TimeSeries:
        return self.get_time_series(SeriesKind.MONTHLY, params)

    def get_monthly_adjusted(self, params: TimeSeriesParams) -> TimeSeries:
        return self.get_time_series(SeriesKind.MONTHLY_ADJUSTED, params)

    def get_quote(self, params: TimeSeriesParams) -> Quote:
        """Fetch the latest Global Quote for a symbol."""
        body = self._request("GLOBAL_QUOTE", {"symbol": params.symbol})
        return decode_quote(body)

    def get_indicator(self, name: str, params: IndicatorParams) -> IndicatorResponse:
        """
        Fetch a technical indicator.

        Args:
            name: Indicator function name, one of INDICATORS (e.g. "SMA", "BBANDS")
            params: Symbol, interval and indicator settings

        Returns:
            Decoded IndicatorResponse
        """
        name = name.upper()
        if name not in INDICATORS:
            raise ValueError(f"Unknown indicator: {name}")

        body = self._request(name, params.to_query())
        response = decode_indicator(body, name)
        logger.info(f"  Decoded {len(response)} {name} readings")
        return response

    def get_crypto_series(self, function: str, params: CryptoParams) -> CryptoSeriesResponse:
        """Fetch a DIGITAL_CURRENCY_* series."""
        if function not in CRYPTO_FUNCTIONS:
            raise ValueError(f"Unknown digital currency function: {function}")

        body = self._request(function, params.to_query())
        return decode_crypto_series(body)

    def get_crypto_daily(self, params: CryptoParams) -> CryptoSeriesResponse:
        return self.get_crypto_series("DIGITAL_CURRENCY_DAILY", params)

    def get_crypto_weekly(self, params: CryptoParams) -> CryptoSeriesResponse:
        return self.get_crypto_series("DIGITAL_CURRENCY_WEEKLY", params)

    def get_crypto_monthly(self, params: CryptoParams) -> CryptoSeriesResponse:
        return self.get_crypto_series("DIGITAL_CURRENCY_MONTHLY", params)

    def get_exchange_rate(self, params: ExchangeRateParams) -> ExchangeRateInfo:
        """Fetch the realtime exchange rate between two currencies."""
        body = self._request("CURRENCY_EXCHANGE_RATE", params.to_query())
        return decode_exchange_rate(body)
