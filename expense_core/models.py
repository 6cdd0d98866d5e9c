"""Data models for the expense store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Dict

__all__ = ["Expense", "format_amount", "parse_date"]


def format_amount(amount: Decimal) -> str:
    """Render an amount with exactly two fraction digits."""
    return f"{amount:.2f}"


def parse_date(value: str) -> date:
    """Parse an ISO 8601 calendar date (``YYYY-MM-DD``)."""
    if not isinstance(value, str):
        raise TypeError(f"date must be an ISO 8601 string, not {type(value).__name__}")
    return date.fromisoformat(value.strip())


@dataclass(frozen=True)
class Expense:
    id: int
    description: str
    amount: Decimal
    date: date

    @property
    def month(self) -> int:
        return self.date.month

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the expense to JSON-friendly natives."""
        return {
            "id": self.id,
            "description": self.description,
            "amount": format_amount(self.amount),
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Expense":
        """Hydrate an Expense from JSON-native data."""
        return cls(
            id=int(data["id"]),
            description=data["description"],
            amount=Decimal(str(data["amount"])),
            date=parse_date(data["date"]),
        )
