# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
budget-tracker: spending limits, live budget status and threshold alerts.

Quick start::

    from decimal import Decimal
    from budget_tracker import BudgetManager, Expense, MemoryBudgetStore, MemoryExpenseLedger

    ledger = MemoryExpenseLedger()
    manager = BudgetManager(MemoryBudgetStore(), ledger)
    manager.set_budget("user-1", Decimal("200"), period="monthly", category_id="food")

    ledger.add(Expense(user_id="user-1", amount=Decimal("170"), category_id="food"))
    for alert in manager.check_budget_alerts("user-1"):
        print(alert.level, alert.message)
"""

from budget_tracker.alerts import build_alert, classify, collect_alerts
from budget_tracker.config import BudgetTrackerConfig
from budget_tracker.errors import (
    BudgetNotFoundError,
    BudgetTrackerError,
    BudgetValidationError,
    CategoryNotFoundError,
    DuplicateBudgetError,
)
from budget_tracker.manager import BudgetManager
from budget_tracker.period import compute_period, month_bounds, week_bounds, year_bounds
from budget_tracker.render import format_alerts, format_remaining, format_status_report
from budget_tracker.status import compute_status
from budget_tracker.storage import (
    DEFAULT_CATEGORIES,
    BudgetStore,
    CategoryLookup,
    ExpenseLedger,
    MemoryBudgetStore,
    MemoryCategoryLookup,
    MemoryExpenseLedger,
)
from budget_tracker.types import (
    BUDGET_PERIOD_VALUES,
    AlertLevel,
    Budget,
    BudgetAlert,
    BudgetPeriod,
    BudgetStatus,
    Category,
    Expense,
    parse_period,
)

__all__ = [
    # Core class
    "BudgetManager",
    "BudgetTrackerConfig",
    # Types
    "Budget",
    "BudgetPeriod",
    "BUDGET_PERIOD_VALUES",
    "BudgetStatus",
    "BudgetAlert",
    "AlertLevel",
    "Category",
    "Expense",
    # Errors
    "BudgetTrackerError",
    "BudgetValidationError",
    "BudgetNotFoundError",
    "CategoryNotFoundError",
    "DuplicateBudgetError",
    # Storage
    "BudgetStore",
    "ExpenseLedger",
    "CategoryLookup",
    "MemoryBudgetStore",
    "MemoryExpenseLedger",
    "MemoryCategoryLookup",
    "DEFAULT_CATEGORIES",
    # Utilities
    "parse_period",
    "compute_period",
    "week_bounds",
    "month_bounds",
    "year_bounds",
    "compute_status",
    "classify",
    "build_alert",
    "collect_alerts",
    "format_status_report",
    "format_alerts",
    "format_remaining",
]
