"""Core business logic package for the expense tracker."""

from .models import Expense
from .services import ExpenseStore
from .storage import JSONStorage
from .exceptions import NotFoundError, StorageError, ValidationError

__all__ = [
    "Expense",
    "ExpenseStore",
    "JSONStorage",
    "NotFoundError",
    "StorageError",
    "ValidationError",
]
