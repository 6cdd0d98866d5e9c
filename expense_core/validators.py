"""Validation helpers used by the expense store."""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .exceptions import ValidationError
from .models import parse_date

DESCRIPTION_MAX_LENGTH = 200
MIN_YEAR = 1
MAX_YEAR = 9999


def _quantize_two_decimals(amount: Decimal) -> Decimal:
    """Round the amount to two decimal places using HALF_UP rounding."""
    return amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def parse_amount(raw: object, field: str = "amount") -> Decimal:
    """Convert raw input to a positive Decimal with exactly two fraction digits."""
    if isinstance(raw, bool) or raw is None:
        raise ValidationError(f"{field} must be a numeric value")
    try:
        amount = Decimal(str(raw).strip())
    except (InvalidOperation, TypeError) as exc:
        raise ValidationError(f"{field} must be a numeric value") from exc

    if not amount.is_finite():
        raise ValidationError(f"{field} must be a finite number")

    try:
        amount = _quantize_two_decimals(amount)
    except InvalidOperation as exc:
        raise ValidationError(f"{field} is too large") from exc
    # Checked after rounding so 0.001 does not sneak through as 0.00.
    if amount <= 0:
        raise ValidationError(f"{field} must be greater than zero")
    return amount


def validate_required_str(value: object, field: str, max_length: int = DESCRIPTION_MAX_LENGTH) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(f"{field} cannot be empty")
    if len(trimmed) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return trimmed


def validate_date(value: object, field: str = "date") -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_date(value)
        except ValueError as exc:
            raise ValidationError(f"{field} must be a date in YYYY-MM-DD format") from exc
    raise ValidationError(f"{field} must be a date or ISO 8601 string")


def validate_month(value: object, field: str = "month") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer")
    if not 1 <= value <= 12:
        raise ValidationError(f"{field} must be between 1 and 12")
    return value


def validate_year(value: object, field: str = "year") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer")
    if not MIN_YEAR <= value <= MAX_YEAR:
        raise ValidationError(f"{field} must be between {MIN_YEAR} and {MAX_YEAR}")
    return value


def validate_id(value: object, field: str = "id") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer")
    if value <= 0:
        raise ValidationError(f"{field} must be a positive integer")
    return value
