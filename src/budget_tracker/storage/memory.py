# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable

from budget_tracker.errors import BudgetNotFoundError, DuplicateBudgetError
from budget_tracker.storage.interface import BudgetStore, CategoryLookup, ExpenseLedger
from budget_tracker.types import Budget, Category, Expense

DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(id="food", name="Groceries", icon="🛒"),
    Category(id="restaurant", name="Restaurants", icon="🍽️"),
    Category(id="transport", name="Transport", icon="🚗"),
    Category(id="fuel", name="Fuel", icon="⛽"),
    Category(id="health", name="Health", icon="💊"),
    Category(id="entertainment", name="Entertainment", icon="🎬"),
    Category(id="shopping", name="Shopping", icon="🛍️"),
    Category(id="bills", name="Bills", icon="📄"),
    Category(id="home", name="Home", icon="🏠"),
    Category(id="other", name="Other", icon="📦"),
)


def _scope_order(budget: Budget) -> tuple[bool, str]:
    # Global budgets sort first, then by category id.
    return (budget.category_id is not None, budget.category_id or "")


class MemoryBudgetStore(BudgetStore):
    """
    In-process budget store, suitable for single-process use and testing.

    All state is lost when the process exits. ``create`` enforces the
    one-active-budget-per-scope constraint and raises DuplicateBudgetError
    when it would be violated.
    """

    def __init__(self) -> None:
        self._budgets: dict[str, Budget] = {}

    def get_by_id(self, budget_id: str) -> Budget | None:
        budget = self._budgets.get(budget_id)
        return budget.model_copy(deep=True) if budget is not None else None

    def get_by_user_id(self, user_id: str) -> list[Budget]:
        owned = [b for b in self._budgets.values() if b.user_id == user_id]
        return [b.model_copy(deep=True) for b in sorted(owned, key=_scope_order)]

    def get_active_by_user_id(self, user_id: str) -> list[Budget]:
        return [b for b in self.get_by_user_id(user_id) if b.is_active]

    def get_by_category(self, user_id: str, category_id: str | None) -> Budget | None:
        for budget in self._budgets.values():
            if (
                budget.user_id == user_id
                and budget.category_id == category_id
                and budget.is_active
            ):
                return budget.model_copy(deep=True)
        return None

    def create(self, budget: Budget) -> Budget:
        if budget.id in self._budgets:
            raise ValueError(f"Budget id {budget.id!r} is already in use.")
        if budget.is_active and self.get_by_category(budget.user_id, budget.category_id) is not None:
            raise DuplicateBudgetError(budget.user_id, budget.category_id)
        self._budgets[budget.id] = budget.model_copy(deep=True)
        return budget.model_copy(deep=True)

    def update(self, budget: Budget) -> Budget:
        if budget.id not in self._budgets:
            raise BudgetNotFoundError(budget_id=budget.id)
        if budget.is_active:
            current = self.get_by_category(budget.user_id, budget.category_id)
            if current is not None and current.id != budget.id:
                raise DuplicateBudgetError(budget.user_id, budget.category_id)
        self._budgets[budget.id] = budget.model_copy(deep=True)
        return budget.model_copy(deep=True)

    def delete(self, budget_id: str) -> bool:
        return self._budgets.pop(budget_id, None) is not None


class MemoryExpenseLedger(ExpenseLedger):
    """In-process expense ledger. Records are append-only."""

    def __init__(self, expenses: Iterable[Expense] = ()) -> None:
        self._expenses: list[Expense] = []
        for expense in expenses:
            self.add(expense)

    def add(self, expense: Expense) -> Expense:
        self._expenses.append(expense.model_copy(deep=True))
        return expense

    def list_expenses(self, user_id: str) -> list[Expense]:
        return [e.model_copy(deep=True) for e in self._expenses if e.user_id == user_id]

    def sum_amount(
        self,
        user_id: str,
        start: date,
        end: date,
        category_id: str | None = None,
    ) -> Decimal:
        total = Decimal("0")
        for expense in self._expenses:
            if expense.user_id != user_id:
                continue
            if not start <= expense.date <= end:
                continue
            if category_id is not None and expense.category_id != category_id:
                continue
            total += expense.amount
        return total


class MemoryCategoryLookup(CategoryLookup):
    """Static category catalogue, seeded with DEFAULT_CATEGORIES unless given."""

    def __init__(self, categories: Iterable[Category] | None = None) -> None:
        source = DEFAULT_CATEGORIES if categories is None else categories
        self._categories: dict[str, Category] = {c.id: c for c in source}

    def add(self, category: Category) -> None:
        self._categories[category.id] = category

    def remove(self, category_id: str) -> bool:
        return self._categories.pop(category_id, None) is not None

    def get_all(self) -> dict[str, Category]:
        return dict(self._categories)
