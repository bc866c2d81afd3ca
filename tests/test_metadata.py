import pytest

from alpha_vantage_client.errors import FieldTypeError
from alpha_vantage_client.parsing.metadata import (
    extract_crypto_metadata,
    extract_indicator_metadata,
    extract_metadata,
)


def test_time_series_dialect():
    meta = extract_metadata({
        "1. Information": "Intraday (1min)",
        "2. Symbol": "IBM",
        "3. Last Refreshed": "2023-09-08 19:59:00",
        "4. Interval": "1min",
        "5. Output Size": "Full size",
        "6. Time Zone": "US/Eastern",
        "7. Something New": "ignored",
    })

    assert meta.information == "Intraday (1min)"
    assert meta.symbol == "IBM"
    assert meta.interval == "1min"
    assert meta.output_size == "Full size"
    assert meta.time_zone == "US/Eastern"
    assert meta.time_period is None


def test_daily_positions_shift_up():
    meta = extract_metadata({
        "1. Information": "Daily Prices",
        "2. Symbol": "IBM",
        "3. Last Refreshed": "2023-09-08",
        "4. Output Size": "Compact",
        "5. Time Zone": "US/Eastern",
    })

    assert meta.output_size == "Compact"
    assert meta.time_zone == "US/Eastern"
    assert meta.interval == ""


def test_dialects_are_not_mixed():
    meta = extract_indicator_metadata({"2. Symbol": "IBM", "1: Symbol": "MSFT"})
    assert meta.symbol == "MSFT"

    meta = extract_metadata({"1: Symbol": "MSFT", "2: Indicator": "SMA"})
    assert meta.symbol == ""
    assert meta.information == ""


def test_indicator_assigns_indicator_to_information():
    meta = extract_indicator_metadata({"2: Indicator": "Relative Strength Index (RSI)"})
    assert meta.information == "Relative Strength Index (RSI)"


def test_time_period_accepts_int_and_float():
    assert extract_indicator_metadata({"5: Time Period": 14}).time_period == 14.0
    assert extract_indicator_metadata({"5: Time Period": 14.5}).time_period == 14.5


@pytest.mark.parametrize("value", ["14", True, None])
def test_time_period_rejects_non_numbers(value):
    with pytest.raises(FieldTypeError):
        extract_indicator_metadata({"5: Time Period": value})


def test_string_field_rejects_number():
    with pytest.raises(FieldTypeError):
        extract_metadata({"2. Symbol": 123})


def test_crypto_dialect():
    meta = extract_crypto_metadata({
        "1. Information": "Weekly Prices",
        "4. Market Code": "CNY",
        "5. Market Name": "Chinese Yuan",
        "8. Extra": "ignored",
    })

    assert meta.information == "Weekly Prices"
    assert meta.market_code == "CNY"
    assert meta.market_name == "Chinese Yuan"
    assert meta.digital_currency_code == ""
