# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from datetime import date, timedelta

from budget_tracker.types import parse_period


def week_bounds(reference: date) -> tuple[date, date]:
    """Return the Monday-to-Sunday week containing ``reference``."""
    start = reference - timedelta(days=reference.weekday())
    return start, start + timedelta(days=6)


def month_bounds(reference: date) -> tuple[date, date]:
    """Return the first and last calendar day of ``reference``'s month."""
    start = reference.replace(day=1)
    if start.month == 12:
        next_start = start.replace(year=start.year + 1, month=1)
    else:
        next_start = start.replace(month=start.month + 1)
    return start, next_start - timedelta(days=1)


def year_bounds(reference: date) -> tuple[date, date]:
    """Return January 1st and December 31st of ``reference``'s year."""
    return date(reference.year, 1, 1), date(reference.year, 12, 31)


def compute_period(period: str | None, reference: date | None = None) -> tuple[date, date]:
    """
    Calculate the calendar window a budget period covers.

    Args:
        period: One of ``'weekly'``, ``'monthly'`` or ``'yearly'``. Any other
            value, including None, is treated as ``'monthly'``.
        reference: The date the window must contain. Defaults to today.

    Returns:
        ``(start, end)``, both inclusive.
    """
    base = reference or date.today()
    resolved = parse_period(period)

    if resolved == "weekly":
        return week_bounds(base)
    if resolved == "yearly":
        return year_bounds(base)
    return month_bounds(base)
