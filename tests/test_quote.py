from datetime import date

import pytest

from alpha_vantage_client.errors import FieldParseError, FieldTypeError, MissingKeyError
from alpha_vantage_client.parsing import decode_quote
from tests._helpers import to_bytes


def test_quote_fields(quote_payload):
    quote = decode_quote(to_bytes(quote_payload))

    assert quote.symbol == "IBM"
    assert quote.open == 147.26
    assert quote.price == 147.68
    assert quote.volume == 2645651
    assert quote.latest_trading_day == date(2023, 9, 8)
    assert quote.previous_close == 147.0
    assert quote.change == 0.68
    assert quote.change_percent == "0.4626%"
    assert len(quote) == 1


@pytest.mark.parametrize(
    "key,field",
    [
        ("02. open", "open"),
        ("05. price", "price"),
        ("06. volume", "volume"),
        ("07. latest trading day", "latest trading day"),
        ("09. change", "change"),
    ],
)
def test_quote_error_names_field(quote_payload, key, field):
    quote_payload["Global Quote"][key] = "N/A"
    with pytest.raises(FieldParseError, match=f"error parsing '{field}'") as exc:
        decode_quote(to_bytes(quote_payload))
    assert exc.value.field == field


def test_quote_missing_field(quote_payload):
    del quote_payload["Global Quote"]["08. previous close"]
    with pytest.raises(FieldParseError) as exc:
        decode_quote(to_bytes(quote_payload))
    assert exc.value.field == "previous close"


def test_quote_unpadded_trading_day(quote_payload):
    quote_payload["Global Quote"]["07. latest trading day"] = "2023-9-8"
    with pytest.raises(FieldParseError) as exc:
        decode_quote(to_bytes(quote_payload))
    assert exc.value.field == "latest trading day"


def test_quote_symbol_must_be_string(quote_payload):
    quote_payload["Global Quote"]["01. symbol"] = 42
    with pytest.raises(FieldTypeError):
        decode_quote(to_bytes(quote_payload))


def test_quote_missing_block():
    with pytest.raises(MissingKeyError):
        decode_quote(b"{}")
