"""Decoder for technical indicator payloads.

Indicators differ in how many numbers they emit per timestamp (SMA has one,
BBANDS three), so each reading is decoded into an open name -> value mapping
instead of a fixed record.
"""

import logging

from alpha_vantage_client.errors import MalformedPayloadError
from alpha_vantage_client.models import IndicatorResponse, IndicatorValue
from alpha_vantage_client.parsing.helpers import (
    META_DATA_KEY,
    load_object,
    parse_float,
    parse_timestamp,
    require_object,
    sort_by_timestamp,
)
from alpha_vantage_client.parsing.metadata import extract_indicator_metadata


logger = logging.getLogger(__name__)

TECHNICAL_ANALYSIS_PREFIX = "Technical Analysis: "

# Intraday readings are minute resolution; daily and coarser ones are bare dates.
INDICATOR_TIME_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%d")


def indicator_key(indicator_name: str) -> str:
    return TECHNICAL_ANALYSIS_PREFIX + indicator_name


def decode_indicator(raw: bytes | str, indicator_name: str) -> IndicatorResponse:
    """
    Decode a technical indicator payload.

    Args:
        raw: Response body
        indicator_name: Function name the caller requested, e.g. "SMA"

    Returns:
        IndicatorResponse with readings in ascending timestamp order

    Raises:
        MissingKeyError: "Meta Data" or "Technical Analysis: <name>" is absent
        FieldParseError: a timestamp or sub-field value is not parseable
    """
    data = load_object(raw)
    meta_data = extract_indicator_metadata(require_object(data, META_DATA_KEY))
    block = require_object(data, indicator_key(indicator_name))

    readings = []
    for key, fields in block.items():
        timestamp = parse_timestamp(key, INDICATOR_TIME_FORMATS)
        if not isinstance(fields, dict):
            raise MalformedPayloadError(f"expected map for each timestamp data: '{key}'")
        values = {name: parse_float(value, name) for name, value in fields.items()}
        readings.append(IndicatorValue(timestamp=timestamp, values=values))

    logger.debug(f"Decoded {len(readings)} {indicator_name} readings for {meta_data.symbol}")
    return IndicatorResponse(
        indicator=indicator_name,
        meta_data=meta_data,
        values=sort_by_timestamp(readings),
    )
