# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Plain-text rendering of budget statuses and alerts.

The engine itself returns structured data; these helpers exist for callers
(CLI, chat bots, notification jobs) that need a human-readable summary.
"""

from __future__ import annotations

from typing import Sequence

from budget_tracker.alerts import format_amount, format_percent
from budget_tracker.types import BudgetAlert, BudgetStatus


def status_icon(status: BudgetStatus) -> str:
    if status.is_over_budget:
        return "🔴"
    if status.is_warning:
        return "🟡"
    return "🟢"


def format_status(status: BudgetStatus, currency: str = "EUR") -> str:
    lines = [
        f"{status_icon(status)} {status.category_icon} {status.category_name} ({status.period}):",
        f"   Budget: {format_amount(status.budget_amount, currency)}",
        f"   Spent: {format_amount(status.spent_amount, currency)} "
        f"({format_percent(status.usage_percentage)})",
        f"   Remaining: {format_amount(status.remaining_amount, currency)}",
        f"   Period: {status.period_start:%d/%m} - {status.period_end:%d/%m}",
    ]
    return "\n".join(lines)


def format_status_report(statuses: Sequence[BudgetStatus], currency: str = "EUR") -> str:
    """Render every status as one block, or a hint when no budget exists."""
    if not statuses:
        return "No budgets configured."
    blocks = [format_status(status, currency) for status in statuses]
    return "Budget Status:\n\n" + "\n\n".join(blocks)


def format_alerts(alerts: Sequence[BudgetAlert]) -> str:
    if not alerts:
        return "All budgets are within limits. No alerts at this time."
    header = f"Budget Alerts ({len(alerts)}):"
    return header + "\n\n" + "\n\n".join(alert.message for alert in alerts)


def format_remaining(status: BudgetStatus | None, currency: str = "EUR") -> str:
    """Answer "how much can I still spend" for a single scope."""
    if status is None:
        return "No budget configured for this scope."

    spent = format_amount(status.spent_amount, currency)
    limit = format_amount(status.budget_amount, currency)
    if status.is_over_budget:
        return (
            f"You've exceeded your {status.period} {status.category_name} budget by "
            f"{format_amount(abs(status.remaining_amount), currency)}. "
            f"(Spent {spent} of {limit} budget)"
        )
    return (
        f"You have {format_amount(status.remaining_amount, currency)} remaining in your "
        f"{status.period} {status.category_name} budget. "
        f"(Spent {spent} of {limit}, {format_percent(status.usage_percentage)} used)"
    )
