# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal

from budget_tracker.types import Budget, Category


class BudgetStore(ABC):
    """
    Persistence contract for budget records.

    Implementors may back this with SQLite, Postgres, or any key-value store.
    The engine performs no locking: a store that must survive concurrent
    ``set_budget`` calls for the same scope should enforce uniqueness of the
    active ``(user_id, category_id)`` pair in ``create``.
    """

    @abstractmethod
    def get_by_id(self, budget_id: str) -> Budget | None:
        ...

    @abstractmethod
    def get_by_user_id(self, user_id: str) -> list[Budget]:
        """All budgets of a user, active or not, global scope first."""
        ...

    @abstractmethod
    def get_active_by_user_id(self, user_id: str) -> list[Budget]:
        ...

    @abstractmethod
    def get_by_category(self, user_id: str, category_id: str | None) -> Budget | None:
        """The active budget for a scope. ``category_id=None`` is the global scope."""
        ...

    @abstractmethod
    def create(self, budget: Budget) -> Budget:
        ...

    @abstractmethod
    def update(self, budget: Budget) -> Budget:
        ...

    @abstractmethod
    def delete(self, budget_id: str) -> bool:
        """Remove a budget. Returns True only if a record was removed."""
        ...


class ExpenseLedger(ABC):
    """Read-side aggregation contract over a user's expense records."""

    @abstractmethod
    def sum_amount(
        self,
        user_id: str,
        start: date,
        end: date,
        category_id: str | None = None,
    ) -> Decimal:
        """
        Total spent by ``user_id`` between ``start`` and ``end`` inclusive.

        ``category_id=None`` sums every category. Returns ``Decimal("0")`` when
        no expense matches.
        """
        ...


class CategoryLookup(ABC):
    """Source of category display metadata."""

    @abstractmethod
    def get_all(self) -> dict[str, Category]:
        """Every known category, keyed by id."""
        ...
