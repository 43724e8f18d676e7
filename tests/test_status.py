# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Tests for BudgetStatus derivation."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Callable

import pytest

from budget_tracker.config import BudgetTrackerConfig
from budget_tracker.status import compute_status, usage_fraction
from budget_tracker.storage.memory import MemoryCategoryLookup, MemoryExpenseLedger
from budget_tracker.types import Budget, Expense

from conftest import AS_OF, USER


def _budget(amount: str, category_id: str | None = None, period: str = "monthly") -> Budget:
    return Budget(user_id=USER, amount=Decimal(amount), category_id=category_id, period=period)


# ---------------------------------------------------------------------------
# TestComputeStatus
# ---------------------------------------------------------------------------


class TestComputeStatus:
    def test_no_expenses_yields_zero_spend_and_usage(
        self, ledger: MemoryExpenseLedger, categories: MemoryCategoryLookup
    ) -> None:
        status = compute_status(_budget("300", "food"), ledger, categories.get_all(), as_of=AS_OF)
        assert status.spent_amount == Decimal("0")
        assert status.usage_percentage == Decimal("0")
        assert status.remaining_amount == Decimal("300")
        assert status.is_over_budget is False
        assert status.is_warning is False

    def test_global_budget_sums_every_category(
        self,
        ledger: MemoryExpenseLedger,
        categories: MemoryCategoryLookup,
        spend: Callable[..., Expense],
    ) -> None:
        spend("250", "food")
        spend("150", "transport")
        status = compute_status(_budget("500"), ledger, categories.get_all(), as_of=AS_OF)
        assert status.spent_amount == Decimal("400")
        assert status.remaining_amount == Decimal("100")
        assert status.usage_percentage == Decimal("0.8")
        assert status.is_warning is True
        assert status.is_over_budget is False

    def test_category_budget_only_counts_its_category(
        self,
        ledger: MemoryExpenseLedger,
        categories: MemoryCategoryLookup,
        spend: Callable[..., Expense],
    ) -> None:
        spend("250", "food")
        spend("999", "transport")
        status = compute_status(_budget("200", "food"), ledger, categories.get_all(), as_of=AS_OF)
        assert status.spent_amount == Decimal("250")
        assert status.remaining_amount == Decimal("-50")
        assert status.usage_percentage == Decimal("1.25")
        assert status.is_over_budget is True
        assert status.is_warning is False

    def test_expenses_outside_the_period_are_ignored(
        self,
        ledger: MemoryExpenseLedger,
        categories: MemoryCategoryLookup,
        spend: Callable[..., Expense],
    ) -> None:
        spend("10", on=date(2024, 1, 31))
        spend("20", on=date(2024, 2, 1))
        spend("30", on=date(2024, 2, 29))
        spend("40", on=date(2024, 3, 1))
        status = compute_status(_budget("100", "food"), ledger, categories.get_all(), as_of=AS_OF)
        assert status.spent_amount == Decimal("50")
        assert status.period_start == date(2024, 2, 1)
        assert status.period_end == date(2024, 2, 29)

    def test_weekly_budget_uses_monday_to_sunday_window(
        self,
        ledger: MemoryExpenseLedger,
        categories: MemoryCategoryLookup,
        spend: Callable[..., Expense],
    ) -> None:
        spend("5", on=date(2024, 2, 4))
        spend("7", on=date(2024, 2, 5))
        spend("11", on=date(2024, 2, 11))
        status = compute_status(
            _budget("100", "food", period="weekly"), ledger, categories.get_all(), as_of=AS_OF
        )
        assert status.spent_amount == Decimal("18")
        assert (status.period_start, status.period_end) == (date(2024, 2, 5), date(2024, 2, 11))

    def test_other_users_expenses_are_ignored(
        self,
        ledger: MemoryExpenseLedger,
        categories: MemoryCategoryLookup,
        spend: Callable[..., Expense],
    ) -> None:
        spend("80", user_id="someone-else")
        status = compute_status(_budget("100"), ledger, categories.get_all(), as_of=AS_OF)
        assert status.spent_amount == Decimal("0")

    def test_spend_equal_to_amount_is_not_over_budget(
        self,
        ledger: MemoryExpenseLedger,
        categories: MemoryCategoryLookup,
        spend: Callable[..., Expense],
    ) -> None:
        spend("100")
        status = compute_status(_budget("100", "food"), ledger, categories.get_all(), as_of=AS_OF)
        assert status.usage_percentage == Decimal("1")
        assert status.is_over_budget is False
        assert status.is_warning is False

    def test_zero_amount_budget_reports_zero_usage(
        self,
        ledger: MemoryExpenseLedger,
        categories: MemoryCategoryLookup,
        spend: Callable[..., Expense],
    ) -> None:
        spend("45")
        status = compute_status(_budget("0", "food"), ledger, categories.get_all(), as_of=AS_OF)
        assert status.usage_percentage == Decimal("0")
        assert status.is_over_budget is True
        assert status.remaining_amount == Decimal("-45")

    def test_global_scope_uses_configured_label_and_icon(
        self, ledger: MemoryExpenseLedger, categories: MemoryCategoryLookup
    ) -> None:
        config = BudgetTrackerConfig(global_label="Everything", global_icon="$")
        status = compute_status(
            _budget("100"), ledger, categories.get_all(), as_of=AS_OF, config=config
        )
        assert status.category_id is None
        assert status.is_global is True
        assert (status.category_name, status.category_icon) == ("Everything", "$")

    def test_category_scope_uses_category_metadata(
        self, ledger: MemoryExpenseLedger, categories: MemoryCategoryLookup
    ) -> None:
        status = compute_status(_budget("100", "food"), ledger, categories.get_all(), as_of=AS_OF)
        assert (status.category_name, status.category_icon) == ("Groceries", "🛒")

    def test_deleted_category_falls_back_to_raw_id(
        self, ledger: MemoryExpenseLedger, categories: MemoryCategoryLookup
    ) -> None:
        categories.remove("food")
        status = compute_status(_budget("100", "food"), ledger, categories.get_all(), as_of=AS_OF)
        assert status.category_name == "food"
        assert status.category_icon == "📦"


# ---------------------------------------------------------------------------
# TestStatusFlags
# ---------------------------------------------------------------------------


class TestStatusFlags:
    @pytest.mark.parametrize(
        ("amount", "spent"),
        [
            ("100", "0"),
            ("100", "79.99"),
            ("100", "80"),
            ("100", "99.99"),
            ("100", "100"),
            ("100", "100.01"),
            ("100", "120"),
            ("250", "600"),
            ("0.01", "0.01"),
        ],
    )
    def test_flags_follow_spend_and_usage(self, amount: str, spent: str) -> None:
        ledger = MemoryExpenseLedger()
        if Decimal(spent) > 0:
            ledger.add(Expense(user_id=USER, amount=Decimal(spent), category_id="food", date=AS_OF))
        status = compute_status(_budget(amount, "food"), ledger, {}, as_of=AS_OF)

        usage = Decimal(spent) / Decimal(amount)
        assert status.usage_percentage == usage
        assert status.is_over_budget == (Decimal(spent) > Decimal(amount))
        assert status.is_warning == (Decimal("0.8") <= usage < Decimal("1.0"))
        assert status.remaining_amount == Decimal(amount) - Decimal(spent)

    def test_usage_fraction_guards_zero_limit(self) -> None:
        assert usage_fraction(Decimal("10"), Decimal("0")) == Decimal("0")
