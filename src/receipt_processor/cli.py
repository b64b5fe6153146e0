"""Command line entry point: receipt-processor PATH"""
import argparse
import sys
from typing import List, Optional

from loguru import logger

from .accounting import aggregate, calculate_settlement, participants
from .config import settings
from .discovery import discover_receipts
from .receipt_parser import parse_receipts
from .report import format_ledger, format_most_expensive, format_people, format_settlement


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)
    if settings.log_file:
        logger.add(settings.log_file, rotation="1 MB", level="DEBUG")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="receipt-processor",
        description="Sum up shared spending from receipt files and settle the debt.",
    )
    parser.add_argument("path", help=f"Receipt file, or folder searched for *{settings.receipt_extension} files")
    parser.add_argument("--no-settlement", action="store_true", help="Only print the spending breakdown.")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level (DEBUG, INFO, WARNING, ...).")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if settings.debug else args.log_level)
    logger.debug(f"Starting {settings.app_name} v{settings.app_version}")

    try:
        files = discover_receipts(args.path)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1

    receipts, _ = parse_receipts(files)
    people = participants(receipts)
    ledger = aggregate(receipts)

    print(format_people(receipts))
    print(format_most_expensive(receipts))
    print()
    if ledger:
        print(format_ledger(ledger, people))
        print()

    if not args.no_settlement:
        parties = settings.settlement_parties
        if not any(party.name in ledger for party in parties):
            logger.warning(f"Neither {parties[0].name} nor {parties[1].name} bought anything, skipping settlement")
        else:
            print(format_settlement(calculate_settlement(ledger, parties)))

    return 0


if __name__ == "__main__":
    sys.exit(main())
