"""Framework-agnostic expense store."""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .exceptions import NotFoundError, StorageError, ValidationError
from .logger import get_logger
from .models import Expense
from .storage import JSONStorage
from .validators import (
    parse_amount,
    validate_date,
    validate_id,
    validate_month,
    validate_required_str,
    validate_year,
)

logger = get_logger(__name__)

FORMAT_VERSION = 1

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _check_record(expense: Expense) -> Expense:
    """Apply the same rules to a loaded record as to a freshly added one."""
    validate_id(expense.id)
    validate_required_str(expense.description, "description")
    if parse_amount(expense.amount, "amount") != expense.amount:
        raise ValidationError("amount must have at most two fraction digits")
    return expense


class ExpenseStore:
    """Durable, ordered collection of expenses with a monotonic id counter."""

    def __init__(
        self,
        storage: JSONStorage,
        resource: str = "expenses.json",
        clock: Optional[Clock] = None,
    ) -> None:
        self._storage = storage
        self._resource = resource
        self._clock = clock or _utc_now
        # Dicts keep insertion order, which is the listing order.
        self._expenses: Dict[int, Expense] = {}
        self._next_id = 1
        self.load()

    # Public API -----------------------------------------------------------
    def add(self, description: object, amount: object, date: Optional[object] = None) -> Expense:
        expense = Expense(
            id=self._next_id,
            description=validate_required_str(description, "description"),
            amount=parse_amount(amount, "amount"),
            date=validate_date(date, "date") if date is not None else self.today(),
        )
        expenses = dict(self._expenses)
        expenses[expense.id] = expense
        self._persist(expenses, self._next_id + 1)
        logger.info("Added expense %d (%s, %s)", expense.id, expense.description, expense.amount)
        return expense

    def delete(self, expense_id: object) -> None:
        expense_id = validate_id(expense_id)
        self._get_or_raise(expense_id)
        expenses = {key: value for key, value in self._expenses.items() if key != expense_id}
        self._persist(expenses, self._next_id)
        logger.info("Deleted expense %d", expense_id)

    def get(self, expense_id: object) -> Expense:
        """Return an expense or raise if it does not exist."""
        return self._get_or_raise(validate_id(expense_id))

    def list(self) -> List[Expense]:
        return list(self._expenses.values())

    def summary(self, month: Optional[int] = None, year: Optional[int] = None) -> Decimal:
        """Total amount, optionally restricted to a month and/or year.

        A month without a year refers to the current year.
        """
        if month is not None:
            month = validate_month(month)
            if year is None:
                year = self.today().year
        if year is not None:
            year = validate_year(year)

        def matches(expense: Expense) -> bool:
            if year is not None and expense.date.year != year:
                return False
            if month is not None and expense.date.month != month:
                return False
            return True

        return sum(
            (expense.amount for expense in self._expenses.values() if matches(expense)),
            start=Decimal("0.00"),
        )

    def load(self) -> None:
        """Load existing expenses from persistence."""
        document = self._storage.load(self._resource)
        if not document:
            self._expenses = {}
            self._next_id = 1
            return

        version = document.get("version", FORMAT_VERSION)
        if version != FORMAT_VERSION:
            raise StorageError(f"Unsupported data format version: {version!r}")
        try:
            records = [
                _check_record(Expense.from_dict(payload))
                for payload in document.get("expenses", [])
            ]
            stored_next_id = int(document.get("next_id", 1))
        except (KeyError, TypeError, ValueError, AttributeError, ArithmeticError) as exc:
            raise StorageError(f"Malformed expense record in {self.path}") from exc

        expenses: Dict[int, Expense] = {}
        for expense in records:
            if expense.id in expenses:
                raise StorageError(f"Duplicate expense id {expense.id} in {self.path}")
            expenses[expense.id] = expense

        self._expenses = expenses
        self._next_id = max([stored_next_id, *(key + 1 for key in expenses)])
        logger.debug("Loaded %d expenses (next id %d)", len(expenses), self._next_id)

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def path(self) -> Path:
        return self._storage.path_for(self._resource)

    def today(self) -> date:
        """Current UTC date according to the store clock."""
        return self._clock().astimezone(timezone.utc).date()

    # Internal helpers -----------------------------------------------------
    def _persist(self, expenses: Dict[int, Expense], next_id: int) -> None:
        # Write first, then swap in the new state so a failed write changes nothing.
        document: Dict[str, Any] = {
            "version": FORMAT_VERSION,
            "next_id": next_id,
            "expenses": [expense.to_dict() for expense in expenses.values()],
        }
        self._storage.save(self._resource, document)
        self._expenses = expenses
        self._next_id = next_id

    def _get_or_raise(self, expense_id: int) -> Expense:
        try:
            return self._expenses[expense_id]
        except KeyError as exc:
            raise NotFoundError(f"Expense with ID {expense_id} not found") from exc
