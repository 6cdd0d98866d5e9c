"""Typed command objects built from parsed arguments."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional, TextIO, Union

from expense_core.models import Expense, format_amount
from expense_core.services import ExpenseStore

TABLE_HEADER = ("ID", "Date", "Description", "Amount")
MIN_WIDTHS = (6, 10, 30, 12)


def _money(amount: Decimal) -> str:
    return f"${format_amount(amount)}"


def format_table(expenses: Iterable[Expense]) -> List[str]:
    """Render expenses as aligned columns, each as wide as its longest cell."""
    rows = [
        (str(expense.id), expense.date.isoformat(), expense.description, _money(expense.amount))
        for expense in expenses
    ]
    widths = [
        max([minimum, len(header), *(len(row[column]) for row in rows)])
        for column, (header, minimum) in enumerate(zip(TABLE_HEADER, MIN_WIDTHS))
    ]
    row_format = "{:>%d}  {:<%d}  {:<%d}  {:>%d}" % tuple(widths)
    return [row_format.format(*row) for row in [TABLE_HEADER, *rows]]


@dataclass(frozen=True)
class AddCommand:
    description: str
    amount: str
    date: Optional[str] = None

    def run(self, store: ExpenseStore, out: TextIO) -> None:
        expense = store.add(self.description, self.amount, self.date)
        print(f"Expense added successfully (ID: {expense.id}): {expense.description}", file=out)


@dataclass(frozen=True)
class ListCommand:
    def run(self, store: ExpenseStore, out: TextIO) -> None:
        expenses = store.list()
        if not expenses:
            print("No expenses found.", file=out)
            return
        for line in format_table(expenses):
            print(line, file=out)


@dataclass(frozen=True)
class SummaryCommand:
    month: Optional[int] = None
    year: Optional[int] = None

    def run(self, store: ExpenseStore, out: TextIO) -> None:
        total = store.summary(month=self.month, year=self.year)
        if self.month is not None:
            year = self.year if self.year is not None else store.today().year
            print(f"Total expenses for {year:04d}-{self.month:02d}: {_money(total)}", file=out)
        elif self.year is not None:
            print(f"Total expenses for {self.year:04d}: {_money(total)}", file=out)
        else:
            print(f"Total expenses: {_money(total)}", file=out)


@dataclass(frozen=True)
class DeleteCommand:
    id: int

    def run(self, store: ExpenseStore, out: TextIO) -> None:
        store.delete(self.id)
        print(f"Expense {self.id} deleted.", file=out)


Command = Union[AddCommand, ListCommand, SummaryCommand, DeleteCommand]


def command_from_args(args: argparse.Namespace) -> Command:
    """Translate an argparse namespace into the matching command object."""
    if args.command == "add":
        return AddCommand(description=args.description, amount=args.amount, date=args.date)
    if args.command == "list":
        return ListCommand()
    if args.command == "summary":
        return SummaryCommand(month=args.month, year=args.year)
    if args.command == "delete":
        return DeleteCommand(id=args.id)
    raise ValueError(f"Unknown command: {args.command}")
