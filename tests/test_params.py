from alpha_vantage_client.data import (
    CryptoParams,
    ExchangeRateParams,
    IndicatorParams,
    TimeSeriesParams,
)
from alpha_vantage_client.data.params import INDICATORS


def test_time_series_params_skip_unset():
    assert TimeSeriesParams(symbol="IBM").to_query() == {"symbol": "IBM"}


def test_time_series_params_all_set():
    query = TimeSeriesParams(
        symbol="IBM",
        interval="15min",
        adjusted=False,
        extended_hours=True,
        month="2023-08",
        output_size="full",
    ).to_query()

    assert query == {
        "symbol": "IBM",
        "interval": "15min",
        "adjusted": "false",
        "extended_hours": "true",
        "month": "2023-08",
        "outputsize": "full",
    }


def test_indicator_params():
    query = IndicatorParams(symbol="SPY", time_period=14, series_type="close").to_query()

    assert query == {
        "symbol": "SPY",
        "interval": "daily",
        "time_period": "14",
        "series_type": "close",
    }


def test_indicator_params_output_size():
    query = IndicatorParams(symbol="SPY", output_size="full").to_query()

    assert query["outputsize"] == "full"
    assert "outputsize" not in IndicatorParams(symbol="SPY").to_query()


def test_indicator_params_without_period():
    assert "time_period" not in IndicatorParams(symbol="SPY", interval="weekly").to_query()


def test_crypto_and_exchange_params():
    assert CryptoParams(symbol="ETH").to_query() == {"symbol": "ETH", "market": "USD"}
    assert ExchangeRateParams("BTC", "EUR").to_query() == {
        "from_currency": "BTC",
        "to_currency": "EUR",
    }


def test_indicator_names():
    assert "BBANDS" in INDICATORS
    assert "HT_PHASOR" in INDICATORS
    assert len(INDICATORS) == len(set(INDICATORS))
