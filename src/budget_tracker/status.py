# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Mapping

from budget_tracker.config import EXCEEDED_THRESHOLD, WARNING_THRESHOLD, BudgetTrackerConfig
from budget_tracker.period import compute_period
from budget_tracker.storage.interface import ExpenseLedger
from budget_tracker.types import Budget, BudgetStatus, Category


def usage_fraction(spent: Decimal, amount: Decimal) -> Decimal:
    """Spent as a fraction of the limit. A zero limit reports zero usage."""
    if amount > 0:
        return spent / amount
    return Decimal("0")


def scope_display(
    budget: Budget,
    categories: Mapping[str, Category],
    config: BudgetTrackerConfig,
) -> tuple[str, str]:
    """
    Resolve the display name and icon for a budget's scope.

    A category that has since been deleted falls back to its raw id and the
    configured placeholder icon.
    """
    if budget.category_id is None:
        return config.global_label, config.global_icon
    category = categories.get(budget.category_id)
    if category is None:
        return budget.category_id, config.fallback_icon
    return category.name, category.icon


def compute_status(
    budget: Budget,
    ledger: ExpenseLedger,
    categories: Mapping[str, Category],
    as_of: date | None = None,
    config: BudgetTrackerConfig | None = None,
) -> BudgetStatus:
    """
    Derive a BudgetStatus snapshot for the period containing ``as_of``.

    Never raises for missing data: no expenses yields zero spend, and a zero
    limit yields zero usage. Errors raised by the ledger propagate unchanged.
    """
    config = config or BudgetTrackerConfig()
    period_start, period_end = compute_period(budget.period, as_of)

    spent = ledger.sum_amount(budget.user_id, period_start, period_end, budget.category_id)
    percentage = usage_fraction(spent, budget.amount)
    name, icon = scope_display(budget, categories, config)

    return BudgetStatus(
        budget_id=budget.id,
        category_id=budget.category_id,
        category_name=name,
        category_icon=icon,
        budget_amount=budget.amount,
        period=budget.period,
        spent_amount=spent,
        remaining_amount=budget.amount - spent,
        usage_percentage=percentage,
        period_start=period_start,
        period_end=period_end,
        is_over_budget=spent > budget.amount,
        is_warning=WARNING_THRESHOLD <= percentage < EXCEEDED_THRESHOLD,
    )
