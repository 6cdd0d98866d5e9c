from datetime import datetime, timezone

import pytest

from expense_core.services import ExpenseStore
from expense_core.storage import JSONStorage

FIXED_NOW = datetime(2026, 7, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def storage(tmp_path):
    return JSONStorage(tmp_path / "data")


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def store(storage, clock):
    return ExpenseStore(storage, clock=clock)
