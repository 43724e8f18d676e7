# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal, InvalidOperation

from budget_tracker.alerts import Threshold, as_decimal, collect_alerts
from budget_tracker.config import BudgetTrackerConfig
from budget_tracker.errors import (
    BudgetNotFoundError,
    BudgetValidationError,
    CategoryNotFoundError,
)
from budget_tracker.status import compute_status
from budget_tracker.storage.interface import BudgetStore, CategoryLookup, ExpenseLedger
from budget_tracker.storage.memory import MemoryCategoryLookup
from budget_tracker.types import Budget, BudgetAlert, BudgetStatus, parse_period

logger = logging.getLogger("budget_tracker")


class BudgetManager:
    """
    Tracks per-user spending limits against an expense ledger.

    Each user has at most one active budget per scope, where a scope is a
    single category or the global scope (``category_id=None``) covering all
    categories. ``set_budget`` updates the existing budget for a scope in
    place instead of creating a second one.

    Statuses and alerts are derived on every call from the current contents
    of the budget store and the expense ledger; nothing is cached.

    The manager performs no locking. Two concurrent ``set_budget`` calls for
    the same scope can both miss the existing budget unless the store rejects
    the second insert (MemoryBudgetStore raises DuplicateBudgetError).

    Example::

        manager = BudgetManager(MemoryBudgetStore(), ledger)
        manager.set_budget("user-1", Decimal("500"), period="monthly")
        manager.set_budget("user-1", Decimal("200"), category_id="food")
        for alert in manager.check_budget_alerts("user-1"):
            print(alert.message)
    """

    def __init__(
        self,
        store: BudgetStore,
        ledger: ExpenseLedger,
        categories: CategoryLookup | None = None,
        config: BudgetTrackerConfig | None = None,
    ) -> None:
        self._store = store
        self._ledger = ledger
        self._categories: CategoryLookup = categories if categories is not None else MemoryCategoryLookup()
        self._config = config or BudgetTrackerConfig()

    @property
    def config(self) -> BudgetTrackerConfig:
        return self._config

    # ------------------------------------------------------------------
    # Budget management
    # ------------------------------------------------------------------

    def set_budget(
        self,
        user_id: str,
        amount: Decimal | float | int | str,
        period: str | None = None,
        category_id: str | None = None,
    ) -> Budget:
        """
        Create or update the active budget for a scope.

        Args:
            user_id: Owner of the budget.
            amount: Spending limit per period. Must be greater than zero.
            period: ``'weekly'``, ``'monthly'`` or ``'yearly'``. Unrecognised
                values fall back to ``'monthly'``; None uses the configured
                default period.
            category_id: Category to scope the budget to, or None (or an
                empty string) for the global budget.

        Returns:
            The persisted budget. When a budget already existed for the
            scope, its id is preserved.

        Raises:
            BudgetValidationError: If ``user_id`` is empty or ``amount`` is
                not a positive number.
            CategoryNotFoundError: If ``validate_categories`` is enabled and
                ``category_id`` is unknown.
        """
        if not user_id:
            raise BudgetValidationError("user_id", user_id, "must not be empty")
        category_id = _scope(category_id)
        limit = self._validate_amount(amount)
        resolved_period = parse_period(period) if period is not None else self._config.default_period

        if category_id is not None and self._config.validate_categories:
            if category_id not in self._categories.get_all():
                raise CategoryNotFoundError(category_id)

        existing = self._store.get_by_category(user_id, category_id)
        if existing is not None:
            existing.amount = limit
            existing.period = resolved_period
            existing.is_active = True
            updated = self._store.update(existing)
            logger.info(
                "Updated budget %s for user %s (%s): %s %s",
                updated.id,
                user_id,
                category_id or "global",
                resolved_period,
                limit,
            )
            return updated

        created = self._store.create(
            Budget(
                user_id=user_id,
                category_id=category_id,
                amount=limit,
                period=resolved_period,
            )
        )
        logger.info(
            "Created budget %s for user %s (%s): %s %s",
            created.id,
            user_id,
            category_id or "global",
            resolved_period,
            limit,
        )
        return created

    def get_budget(self, budget_id: str) -> Budget:
        """
        Return a budget by id, active or not.

        Raises:
            BudgetNotFoundError: If no budget has this id.
        """
        budget = self._store.get_by_id(budget_id)
        if budget is None:
            raise BudgetNotFoundError(budget_id=budget_id)
        return budget

    def get_budgets(self, user_id: str) -> list[Budget]:
        """Return every budget owned by ``user_id``, including inactive ones."""
        return self._store.get_by_user_id(user_id)

    def deactivate_budget(self, budget_id: str) -> Budget:
        """
        Mark a budget inactive.

        Inactive budgets are skipped by status and alert sweeps and no longer
        occupy their scope, so a later ``set_budget`` creates a new record.

        Raises:
            BudgetNotFoundError: If no budget has this id.
        """
        budget = self.get_budget(budget_id)
        if not budget.is_active:
            return budget
        budget.is_active = False
        updated = self._store.update(budget)
        logger.info("Deactivated budget %s for user %s", budget_id, budget.user_id)
        return updated

    def delete_budget(self, budget_id: str) -> bool:
        """Hard-delete a budget. Returns False when nothing was deleted."""
        deleted = self._store.delete(budget_id)
        if deleted:
            logger.info("Deleted budget %s", budget_id)
        return deleted

    def delete_budget_by_scope(self, user_id: str, category_id: str | None = None) -> bool:
        """
        Hard-delete the active budget for a scope.

        Returns:
            True if a budget was removed, False if the scope had none.
        """
        budget = self._store.get_by_category(user_id, _scope(category_id))
        if budget is None:
            return False
        return self.delete_budget(budget.id)

    # ------------------------------------------------------------------
    # Status and alerts
    # ------------------------------------------------------------------

    def get_budget_status(self, user_id: str, as_of: date | None = None) -> list[BudgetStatus]:
        """
        Return the status of every active budget of ``user_id``.

        Args:
            user_id: The budget owner.
            as_of: Reference date selecting the current period. Defaults to today.
        """
        budgets = self._store.get_active_by_user_id(user_id)
        if not budgets:
            return []
        categories = self._categories.get_all()
        statuses = [
            compute_status(budget, self._ledger, categories, as_of=as_of, config=self._config)
            for budget in budgets
        ]
        logger.debug("Computed %d budget statuses for user %s", len(statuses), user_id)
        return statuses

    def get_scope_status(
        self,
        user_id: str,
        category_id: str | None = None,
        as_of: date | None = None,
    ) -> BudgetStatus | None:
        """
        Return the status of the active budget for one scope.

        Returns:
            The status, or None when the scope has no active budget.
        """
        budget = self._store.get_by_category(user_id, _scope(category_id))
        if budget is None:
            return None
        return compute_status(
            budget,
            self._ledger,
            self._categories.get_all(),
            as_of=as_of,
            config=self._config,
        )

    def check_budget_alerts(
        self,
        user_id: str,
        warning_threshold: Threshold | None = None,
        as_of: date | None = None,
    ) -> list[BudgetAlert]:
        """
        Sweep every active budget of ``user_id`` for alerts.

        Args:
            user_id: The budget owner.
            warning_threshold: Usage fraction at which a budget starts
                alerting. Defaults to the configured threshold (0.8).
            as_of: Reference date selecting the current period.

        Returns:
            Alerting budgets only, sorted by usage percentage descending.

        Raises:
            BudgetValidationError: If ``warning_threshold`` is not a positive
                finite number.
        """
        threshold = (
            self._validate_threshold(warning_threshold)
            if warning_threshold is not None
            else self._config.warning_threshold
        )
        alerts = collect_alerts(
            self.get_budget_status(user_id, as_of=as_of),
            warning_threshold=threshold,
            critical_threshold=self._config.critical_threshold,
            currency=self._config.currency,
        )
        logger.debug(
            "Budget alert sweep for user %s at threshold %s: %d alert(s)",
            user_id,
            threshold,
            len(alerts),
        )
        return alerts

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_amount(amount: Decimal | float | int | str) -> Decimal:
        try:
            limit = as_decimal(amount)
        except (InvalidOperation, ValueError, TypeError):
            raise BudgetValidationError("amount", amount, "not a number") from None
        if not limit.is_finite():
            raise BudgetValidationError("amount", amount, "must be a finite number")
        if limit <= 0:
            raise BudgetValidationError("amount", amount, "must be greater than zero")
        return limit

    @staticmethod
    def _validate_threshold(threshold: Threshold) -> Decimal:
        try:
            value = as_decimal(threshold)
        except (InvalidOperation, ValueError, TypeError):
            raise BudgetValidationError("warning_threshold", threshold, "not a number") from None
        if not value.is_finite():
            raise BudgetValidationError("warning_threshold", threshold, "must be a finite number")
        if value <= 0:
            raise BudgetValidationError("warning_threshold", threshold, "must be greater than zero")
        return value


def _scope(category_id: str | None) -> str | None:
    # An empty category id addresses the global scope.
    return category_id or None
