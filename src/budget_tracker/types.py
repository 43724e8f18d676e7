# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

# ─── Period ───────────────────────────────────────────────────────────────────

BudgetPeriod = Literal["weekly", "monthly", "yearly"]

BUDGET_PERIOD_VALUES = frozenset({"weekly", "monthly", "yearly"})

DEFAULT_PERIOD: BudgetPeriod = "monthly"


def parse_period(value: object) -> BudgetPeriod:
    """
    Normalise a period identifier.

    Matching is case-insensitive and ignores surrounding whitespace. Anything
    that is not ``'weekly'`` or ``'yearly'`` resolves to ``'monthly'``.
    """
    if isinstance(value, str):
        normalised = value.strip().lower()
        if normalised == "weekly":
            return "weekly"
        if normalised == "yearly":
            return "yearly"
    return DEFAULT_PERIOD


# ─── Budget ───────────────────────────────────────────────────────────────────


class Budget(BaseModel):
    """A user's spending limit for one scope (one category, or global)."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    user_id: str = Field(..., min_length=1)
    category_id: Optional[str] = None
    amount: Decimal = Field(..., ge=0, description="Spending limit for the period")
    period: BudgetPeriod = DEFAULT_PERIOD
    is_active: bool = True
    created_at: dt.datetime = Field(default_factory=lambda: dt.datetime.now(tz=dt.timezone.utc))

    @field_validator("period", mode="before")
    @classmethod
    def coerce_period(cls, value: object) -> BudgetPeriod:
        return parse_period(value)

    @property
    def is_global(self) -> bool:
        """True when the budget covers all categories combined."""
        return self.category_id is None


# ─── Expense / Category ───────────────────────────────────────────────────────


class Expense(BaseModel):
    """A single spending record as held by an expense ledger."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    user_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0)
    category_id: str = "other"
    date: dt.date = Field(default_factory=dt.date.today)
    description: Optional[str] = None


class Category(BaseModel, frozen=True):
    """Display metadata for an expense category."""

    id: str = Field(..., min_length=1)
    name: str
    icon: str = ""


# ─── Status ───────────────────────────────────────────────────────────────────


class BudgetStatus(BaseModel, frozen=True):
    """
    Point-in-time spending snapshot for one budget over its current period.

    Recomputed on every call; never persisted.
    """

    budget_id: str
    category_id: Optional[str]
    category_name: str
    category_icon: str
    budget_amount: Decimal
    period: BudgetPeriod
    spent_amount: Decimal
    remaining_amount: Decimal
    usage_percentage: Decimal
    period_start: dt.date
    period_end: dt.date
    is_over_budget: bool
    is_warning: bool

    @property
    def is_global(self) -> bool:
        return self.category_id is None


# ─── Alerts ───────────────────────────────────────────────────────────────────

AlertLevel = Literal["warning", "exceeded", "critical"]


class BudgetAlert(BaseModel, frozen=True):
    """A budget status that crossed the warning threshold."""

    status: BudgetStatus
    level: AlertLevel
    message: str

    @property
    def overage(self) -> Decimal:
        """Amount spent beyond the limit; zero while still within budget."""
        if self.status.remaining_amount < 0:
            return abs(self.status.remaining_amount)
        return Decimal("0")
