from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import ValidationError

from partial_updater.adapters import InvalidPayloadError
from partial_updater.app import patch_book
from partial_updater.config import (
    ConfigurationError,
    configure_logging,
    get_log_level,
    parse_log_level,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Apply partial updates")
    parser.add_argument(
        "--log-level",
        type=str,
        help="Log level name (defaults to $PARTIAL_UPDATER_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    book = subparsers.add_parser("update-book", help="Partially update the sample book")
    book.add_argument(
        "--id",
        dest="book_id",
        type=int,
        required=True,
        help="Id of the book to update (the sample store holds book 17)",
    )
    book.add_argument(
        "--input",
        dest="payload",
        type=str,
        required=True,
        help='JSON object with the fields to change, e.g. \'{"title": "1984"}\'',
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    try:
        level = parse_log_level(parsed_args.log_level) if parsed_args.log_level else get_log_level()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)  # noqa: T201
        sys.exit(2)
    configure_logging(level=level)

    try:
        if parsed_args.command == "update-book":
            book = patch_book(parsed_args.book_id, parsed_args.payload)
            print(json.dumps(asdict(book)))  # noqa: T201
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (InvalidPayloadError, ValidationError):
        log.exception("Invalid update input")
        sys.exit(2)
    except Exception:
        log.exception("Update failed")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
