# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for budget-tracker tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Callable

import pytest

from budget_tracker.manager import BudgetManager
from budget_tracker.storage.memory import (
    MemoryBudgetStore,
    MemoryCategoryLookup,
    MemoryExpenseLedger,
)
from budget_tracker.types import Expense

# Saturday; its week runs Monday 2024-02-05 to Sunday 2024-02-11.
AS_OF = date(2024, 2, 10)
USER = "user-1"


@pytest.fixture
def store() -> MemoryBudgetStore:
    return MemoryBudgetStore()


@pytest.fixture
def ledger() -> MemoryExpenseLedger:
    return MemoryExpenseLedger()


@pytest.fixture
def categories() -> MemoryCategoryLookup:
    return MemoryCategoryLookup()


@pytest.fixture
def manager(
    store: MemoryBudgetStore,
    ledger: MemoryExpenseLedger,
    categories: MemoryCategoryLookup,
) -> BudgetManager:
    """A BudgetManager over empty in-memory stores and the default categories."""
    return BudgetManager(store, ledger, categories)


@pytest.fixture
def spend(ledger: MemoryExpenseLedger) -> Callable[..., Expense]:
    """Record an expense for USER on AS_OF unless told otherwise."""

    def _spend(
        amount: str,
        category_id: str = "food",
        on: date = AS_OF,
        user_id: str = USER,
    ) -> Expense:
        return ledger.add(
            Expense(user_id=user_id, amount=Decimal(amount), category_id=category_id, date=on)
        )

    return _spend
