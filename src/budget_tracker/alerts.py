# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Threshold-based budget alert classification.

A status whose usage reaches the warning threshold becomes an alert. The
severity is picked by checking the fixed bands from the top down:

    usage >= critical threshold (default 120%)  -> "critical"
    usage >= 100%                               -> "exceeded"
    otherwise                                   -> "warning"

Alerts are recomputed from current state on every call; nothing is stored.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Union

from budget_tracker.config import CRITICAL_THRESHOLD, EXCEEDED_THRESHOLD, WARNING_THRESHOLD
from budget_tracker.types import AlertLevel, BudgetAlert, BudgetStatus

Threshold = Union[Decimal, float, int, str]


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def as_decimal(value: Threshold) -> Decimal:
    """Convert a threshold to Decimal without binary float artefacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_percent(fraction: Decimal) -> str:
    """Render a usage fraction as a whole percent, e.g. ``Decimal("1.25")`` -> ``"125%"``."""
    whole = (fraction * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{whole}%"


def format_amount(amount: Decimal, currency: str = "EUR") -> str:
    return f"{amount:,.2f} {currency}"


def scope_name(status: BudgetStatus) -> str:
    """Name used in alert text: ``'global'`` for the global scope."""
    return "global" if status.category_id is None else status.category_name


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def alert_level(
    usage: Decimal,
    critical_threshold: Threshold = CRITICAL_THRESHOLD,
) -> AlertLevel:
    """Severity for a usage already known to be at or above the warning threshold."""
    if usage >= as_decimal(critical_threshold):
        return "critical"
    if usage >= EXCEEDED_THRESHOLD:
        return "exceeded"
    return "warning"


def alert_message(status: BudgetStatus, level: AlertLevel, currency: str = "EUR") -> str:
    name = scope_name(status)
    percent = format_percent(status.usage_percentage)
    overage = format_amount(abs(status.remaining_amount), currency)

    if level == "critical":
        return (
            f"CRITICAL: Your {name} budget is at {percent}! "
            f"You've exceeded it by {overage}."
        )
    if level == "exceeded":
        return (
            f"EXCEEDED: Your {name} budget is at {percent}. "
            f"You've spent {overage} over budget."
        )
    return (
        f"WARNING: Your {name} budget is at {percent}. "
        f"Only {format_amount(status.remaining_amount, currency)} remaining."
    )


def classify(
    status: BudgetStatus,
    warning_threshold: Threshold = WARNING_THRESHOLD,
    critical_threshold: Threshold = CRITICAL_THRESHOLD,
    currency: str = "EUR",
) -> tuple[AlertLevel, str] | None:
    """
    Classify a budget status.

    Args:
        status:             The snapshot to classify.
        warning_threshold:  Usage fraction below which no alert is raised.
        critical_threshold: Usage fraction at which severity becomes critical.
        currency:           Currency label for the rendered message.

    Returns:
        ``(level, message)``, or None when usage is below the warning threshold.
    """
    if status.usage_percentage < as_decimal(warning_threshold):
        return None
    level = alert_level(status.usage_percentage, critical_threshold)
    return level, alert_message(status, level, currency)


def build_alert(
    status: BudgetStatus,
    warning_threshold: Threshold = WARNING_THRESHOLD,
    critical_threshold: Threshold = CRITICAL_THRESHOLD,
    currency: str = "EUR",
) -> BudgetAlert | None:
    classified = classify(status, warning_threshold, critical_threshold, currency)
    if classified is None:
        return None
    level, message = classified
    return BudgetAlert(status=status, level=level, message=message)


def collect_alerts(
    statuses: Iterable[BudgetStatus],
    warning_threshold: Threshold = WARNING_THRESHOLD,
    critical_threshold: Threshold = CRITICAL_THRESHOLD,
    currency: str = "EUR",
) -> list[BudgetAlert]:
    """
    Classify every status and keep the alerting ones, sorted by usage
    descending (worst first).
    """
    alerts = [
        alert
        for alert in (
            build_alert(status, warning_threshold, critical_threshold, currency)
            for status in statuses
        )
        if alert is not None
    ]
    return sorted(alerts, key=lambda alert: alert.status.usage_percentage, reverse=True)
