from __future__ import annotations

import argparse
import sys
from typing import Sequence

from cashflow.config import get_settings
from cashflow.logging import configure_logging, get_logger
from cashflow.services.report import format_settlements, format_summary, summarize
from cashflow.services.settlement import minimize
from cashflow.utils.parse import parse_transactions


MAX_PLACES = 8


def places_type(value: str) -> int:
    try:
        places = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from exc
    if not 0 <= places <= MAX_PLACES:
        raise argparse.ArgumentTypeError(f"must be between 0 and {MAX_PLACES}, got {places}")
    return places


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="cashflow",
        description="Reduce a list of IOUs to the fewest payments that settle everyone.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="file with one 'A -> B: amount' per line (default: stdin)",
    )
    parser.add_argument("--symbol", default=settings.currency_symbol, help="currency symbol for output")
    parser.add_argument("--places", type=places_type, default=settings.amount_places, help="decimal places for output")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    log = get_logger(__name__)
    log.info("cli.start")

    try:
        try:
            transactions = parse_transactions(args.input)
        finally:
            if args.input is not sys.stdin:
                args.input.close()
        settlements = minimize(transactions)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(format_settlements(settlements, args.symbol, args.places))
    print()
    print(format_summary(summarize(transactions, settlements), args.symbol, args.places))
    return 0


if __name__ == "__main__":
    sys.exit(main())
