"""Get the USD to CAD exchange rate from the Bank of Canada for a single date, or a range.

Intended for adjusted cost basis calculations for tax purposes. Returns the
preceding business day when the selected date has no published rate.
"""

from __future__ import annotations

import argparse
import sys
from datetime import date
from typing import Sequence

import requests

from boc_fx import BocFx, InversionStrategy, RateDirection
from boc_fx.ingestion.valet import DEFAULT_TIMEOUT, ValetClient, ValetError, ValetResponseError
from boc_fx.selector import ObservationSelectionError
from boc_fx.utils.date_range import DEFAULT_LOOKBACK_DAYS, InvalidDateRangeError, validate_range
from boc_fx.utils.logger import get_logger, set_verbosity
from boc_fx.utils.rates import format_observation

LOGGER = get_logger(__name__)

__all__ = ["build_parser", "parse_args", "main"]


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r} (expected YYYY-MM-DD)") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="boc-fx", description=__doc__)
    parser.add_argument(
        "start_date",
        metavar="DATE",
        type=_iso_date,
        help="A single date, or start date of the range (format: YYYY-MM-DD)",
    )
    parser.add_argument(
        "end_date",
        metavar="END_DATE",
        nargs="?",
        type=_iso_date,
        help="End date of the range (format: YYYY-MM-DD)",
    )
    parser.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Provide the exchange rate from CAD to USD",
    )
    parser.add_argument(
        "--reciprocal",
        dest="inversion",
        action="store_const",
        const=InversionStrategy.RECIPROCAL,
        default=InversionStrategy.SERIES,
        help="With --reverse, invert the USD/CAD series locally instead of fetching FXCADUSD",
    )
    parser.add_argument(
        "--lookback-days",
        type=int,
        default=DEFAULT_LOOKBACK_DAYS,
        help=f"Calendar days fetched before DATE to find a prior business day (default: {DEFAULT_LOOKBACK_DAYS})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"HTTP timeout in seconds (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.lookback_days < 0:
        parser.error("--lookback-days must not be negative")
    try:
        validate_range(args.start_date, args.end_date)
    except InvalidDateRangeError as exc:
        parser.error(str(exc))
    return args


def main(argv: Sequence[str] | None = None, *, client: BocFx | None = None) -> int:
    args = parse_args(argv)
    set_verbosity(args.verbose)

    fx = client or BocFx(
        ValetClient(timeout=args.timeout),
        lookback_days=args.lookback_days,
        inversion=args.inversion,
    )
    direction = RateDirection.CAD_USD if args.reverse else RateDirection.USD_CAD
    try:
        observations = fx.observations(args.start_date, args.end_date, direction=direction)
    except ValetResponseError as exc:
        print(exc.payload, file=sys.stderr)
        return 1
    except (ValetError, ObservationSelectionError, requests.RequestException) as exc:
        LOGGER.debug("Lookup failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for observation in observations:
        print(format_observation(observation))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
