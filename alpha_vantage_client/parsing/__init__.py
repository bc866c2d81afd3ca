"""Decoders from raw response bytes to typed records."""

from .crypto import decode_crypto_series, decode_exchange_rate
from .indicators import decode_indicator
from .time_series import decode_quote, decode_time_series

__all__ = [
    "decode_crypto_series",
    "decode_exchange_rate",
    "decode_indicator",
    "decode_quote",
    "decode_time_series",
]
