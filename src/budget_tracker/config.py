# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field

from budget_tracker.types import DEFAULT_PERIOD, BudgetPeriod

WARNING_THRESHOLD = Decimal("0.8")
EXCEEDED_THRESHOLD = Decimal("1.0")
CRITICAL_THRESHOLD = Decimal("1.2")


class BudgetTrackerConfig(BaseModel, frozen=True):
    """
    Configuration for the BudgetManager.

    All fields are optional; the defaults reproduce the standard
    80% / 100% / 120% alert bands.

    Attributes:
        warning_threshold: Default usage fraction at which the alert sweep
            starts reporting a budget.
        critical_threshold: Usage fraction at or above which an alert is
            classified as critical rather than exceeded.
        default_period: Period used by ``set_budget`` when none is given.
        currency: Currency label used in rendered alert messages.
        global_label: Display name for budgets covering all categories.
        global_icon: Display icon for budgets covering all categories.
        fallback_icon: Icon used when a budget's category no longer exists.
        validate_categories: When True, ``set_budget`` rejects category ids
            the category lookup does not know about.

    Example::

        config = BudgetTrackerConfig(warning_threshold=Decimal("0.9"), currency="USD")
        manager = BudgetManager(store, ledger, categories, config=config)
    """

    warning_threshold: Annotated[Decimal, Field(gt=0, le=1)] = WARNING_THRESHOLD
    critical_threshold: Annotated[Decimal, Field(ge=1)] = CRITICAL_THRESHOLD
    default_period: BudgetPeriod = DEFAULT_PERIOD
    currency: str = "EUR"
    global_label: str = "Global"
    global_icon: str = "💰"
    fallback_icon: str = "📦"
    validate_categories: bool = False
