# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
monthly_alerts.py

Demonstrates the budget status and alert loop:
  1. Set a global budget and two category budgets.
  2. Record expenses in the ledger.
  3. Print the status report and the alert sweep.

Run with:  python examples/monthly_alerts.py
(from the repository root with budget-tracker installed)
"""

import logging
from datetime import date
from decimal import Decimal

from budget_tracker import (
    BudgetManager,
    Expense,
    MemoryBudgetStore,
    MemoryExpenseLedger,
    format_alerts,
    format_remaining,
    format_status_report,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# ─── Setup ────────────────────────────────────────────────────────────────────

today = date.today()
ledger = MemoryExpenseLedger()
manager = BudgetManager(MemoryBudgetStore(), ledger)

manager.set_budget("demo-user", Decimal("500"), period="monthly")
manager.set_budget("demo-user", Decimal("200"), period="monthly", category_id="food")
manager.set_budget("demo-user", Decimal("60"), period="weekly", category_id="fuel")

# ─── Record some spending ─────────────────────────────────────────────────────

expenses = [
    ("food", "142.30", "Weekly groceries"),
    ("food", "107.70", "Supermarket"),
    ("fuel", "48.00", "Full tank"),
    ("restaurant", "35.50", "Dinner"),
]

for category_id, amount, description in expenses:
    ledger.add(
        Expense(
            user_id="demo-user",
            amount=Decimal(amount),
            category_id=category_id,
            date=today,
            description=description,
        )
    )

# ─── Report ───────────────────────────────────────────────────────────────────

print(format_status_report(manager.get_budget_status("demo-user")))
print()
print(format_alerts(manager.check_budget_alerts("demo-user")))
print()
print(format_remaining(manager.get_scope_status("demo-user", "fuel")))
