"""Console interface for the expense tracker."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from expense_core.exceptions import NotFoundError, StorageError, ValidationError
from expense_core.logger import configure_logging, get_logger
from expense_core.services import ExpenseStore
from expense_core.storage import JSONStorage

from . import __version__
from .commands import command_from_args
from .config import load_environment, resolve_data_dir, resolve_log_level

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


def _load_store(data_dir: Path) -> ExpenseStore:
    storage = JSONStorage(data_dir)
    return ExpenseStore(storage)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="expense-tracker", description="Expense Tracker CLI")
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Directory holding expenses.json "
        "(default: $EXPENSE_TRACKER_DATA_DIR, else ~/.local/share/expense-tracker)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    add = subparsers.add_parser("add", help="Add a new expense")
    add.add_argument("--description", required=True)
    add.add_argument("--amount", required=True, help="Positive amount, e.g. 3.50")
    add.add_argument("--date", help="Expense date as YYYY-MM-DD (default: today, UTC)")

    subparsers.add_parser("list", help="List expenses")

    summary = subparsers.add_parser("summary", help="Show the total of expenses")
    summary.add_argument("--month", type=int, help="Restrict to a month (1-12)")
    summary.add_argument("--year", type=int, help="Restrict to a year (default with --month: current year)")

    delete = subparsers.add_parser("delete", help="Delete an expense")
    delete.add_argument("--id", type=int, required=True)

    return parser


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    err = err or sys.stderr

    load_environment()
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(resolve_log_level(args.verbose))

    command = command_from_args(args)
    data_dir = resolve_data_dir(args.data_dir)
    logger.debug("Running %s against %s", args.command, data_dir)

    try:
        store = _load_store(data_dir)
        command.run(store, out)
    except ValidationError as exc:
        print(f"Validation error: {exc}", file=err)
        return EXIT_ERROR
    except NotFoundError as exc:
        print(f"Not found: {exc}", file=err)
        return EXIT_ERROR
    except StorageError as exc:
        print(f"Storage error: {exc}", file=err)
        return EXIT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
