# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from budget_tracker.storage.interface import BudgetStore, CategoryLookup, ExpenseLedger
from budget_tracker.storage.memory import (
    DEFAULT_CATEGORIES,
    MemoryBudgetStore,
    MemoryCategoryLookup,
    MemoryExpenseLedger,
)

__all__ = [
    "BudgetStore",
    "ExpenseLedger",
    "CategoryLookup",
    "MemoryBudgetStore",
    "MemoryExpenseLedger",
    "MemoryCategoryLookup",
    "DEFAULT_CATEGORIES",
]
