"""Command line entry point: fetch or load a payload, decode it, print it."""

import argparse
import logging
import sys
from pathlib import Path

import httpx

from alpha_vantage_client.config import Settings
from alpha_vantage_client.data import (
    AlphaVantageFetcher,
    CryptoParams,
    ExchangeRateParams,
    IndicatorParams,
    TimeSeriesParams,
)
from alpha_vantage_client.errors import AlphaVantageError
from alpha_vantage_client.models import SeriesKind
from alpha_vantage_client.parsing import (
    decode_crypto_series,
    decode_exchange_rate,
    decode_indicator,
    decode_quote,
    decode_time_series,
)


logger = logging.getLogger(__name__)

SERIES_FUNCTIONS: dict[str, SeriesKind] = {
    "intraday": SeriesKind.INTRADAY,
    "daily": SeriesKind.DAILY,
    "daily-adjusted": SeriesKind.DAILY_ADJUSTED,
    "weekly": SeriesKind.WEEKLY,
    "weekly-adjusted": SeriesKind.WEEKLY_ADJUSTED,
    "monthly": SeriesKind.MONTHLY,
    "monthly-adjusted": SeriesKind.MONTHLY_ADJUSTED,
}

CRYPTO_FUNCTIONS: dict[str, str] = {
    "crypto-daily": "DIGITAL_CURRENCY_DAILY",
    "crypto-weekly": "DIGITAL_CURRENCY_WEEKLY",
    "crypto-monthly": "DIGITAL_CURRENCY_MONTHLY",
}

FUNCTIONS = [*SERIES_FUNCTIONS, "quote", "indicator", *CRYPTO_FUNCTIONS, "exchange-rate"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch and decode Alpha Vantage data")
    parser.add_argument(
        "--function",
        choices=FUNCTIONS,
        default="daily",
        help="Endpoint to call (default: daily)",
    )
    parser.add_argument("--symbol", type=str, default="IBM", help="Symbol (default: IBM)")
    parser.add_argument("--interval", type=str, help="Bar interval, e.g. 5min or daily")
    parser.add_argument("--output-size", type=str, choices=["compact", "full"])
    parser.add_argument("--indicator", type=str, default="SMA", help="Indicator name (default: SMA)")
    parser.add_argument("--time-period", type=int, help="Indicator time period")
    parser.add_argument("--series-type", type=str, help="Indicator price series (close, open, ...)")
    parser.add_argument("--market", type=str, default="USD", help="Crypto market (default: USD)")
    parser.add_argument("--from-currency", type=str, default="USD")
    parser.add_argument("--to-currency", type=str, default="EUR")
    parser.add_argument(
        "--input",
        type=Path,
        help="Decode a saved JSON payload instead of calling the API",
    )
    parser.add_argument("--csv", type=Path, help="Also write the series to this CSV file")
    return parser


def decode_saved(args: argparse.Namespace, raw: bytes):
    """Decode a saved payload according to --function."""
    if args.function in SERIES_FUNCTIONS:
        return decode_time_series(raw, SERIES_FUNCTIONS[args.function])
    if args.function == "quote":
        return decode_quote(raw)
    if args.function == "indicator":
        return decode_indicator(raw, args.indicator.upper())
    if args.function in CRYPTO_FUNCTIONS:
        return decode_crypto_series(raw)
    return decode_exchange_rate(raw)


def fetch(args: argparse.Namespace, fetcher: AlphaVantageFetcher):
    """Call the API according to --function."""
    if args.function in SERIES_FUNCTIONS:
        params = TimeSeriesParams(
            symbol=args.symbol,
            interval=args.interval,
            output_size=args.output_size,
        )
        return fetcher.get_time_series(SERIES_FUNCTIONS[args.function], params)
    if args.function == "quote":
        return fetcher.get_quote(TimeSeriesParams(symbol=args.symbol))
    if args.function == "indicator":
        params = IndicatorParams(
            symbol=args.symbol,
            interval=args.interval or "daily",
            time_period=args.time_period,
            series_type=args.series_type,
            output_size=args.output_size,
        )
        return fetcher.get_indicator(args.indicator, params)
    if args.function in CRYPTO_FUNCTIONS:
        params = CryptoParams(symbol=args.symbol, market=args.market)
        return fetcher.get_crypto_series(CRYPTO_FUNCTIONS[args.function], params)
    return fetcher.get_exchange_rate(
        ExchangeRateParams(from_currency=args.from_currency, to_currency=args.to_currency)
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        if args.input:
            record = decode_saved(args, args.input.read_bytes())
        else:
            settings = Settings()
            settings.validate()
            with AlphaVantageFetcher(settings) as fetcher:
                record = fetch(args, fetcher)
    except AlphaVantageError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        print(f"API error: {e.response.status_code} - {e.response.text}")
        sys.exit(1)

    print(record)

    if args.csv:
        if not hasattr(record, "to_frame"):
            print(f"--csv is not supported for {args.function}")
            sys.exit(1)
        record.to_frame().to_csv(args.csv)
        logger.info(f"Wrote {len(record)} rows to {args.csv}")


if __name__ == "__main__":
    main()
