# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations


class BudgetTrackerError(Exception):
    """Base class for all budget-tracker errors."""

    def __init__(self, message: str, code: str = "BUDGET_TRACKER_ERROR") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


def _scope_text(category_id: str | None) -> str:
    return "global scope" if category_id is None else f"category '{category_id}'"


class BudgetValidationError(BudgetTrackerError):
    """
    Raised when budget input fails validation. No state is mutated.

    Attributes:
        field: Name of the offending input.
        value: The rejected value.
        reason: Why the value was rejected.
    """

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(
            f"Invalid budget {field} {value!r}: {reason}.",
            code="BUDGET_VALIDATION",
        )
        self.field = field
        self.value = value
        self.reason = reason


class BudgetNotFoundError(BudgetTrackerError):
    """Raised when an operation requires a budget that does not exist."""

    def __init__(
        self,
        budget_id: str | None = None,
        user_id: str | None = None,
        category_id: str | None = None,
    ) -> None:
        if budget_id is not None:
            text = f"Budget '{budget_id}' does not exist."
        else:
            text = (
                f"User '{user_id}' has no active budget for "
                f"{_scope_text(category_id)}."
            )
        super().__init__(text, code="BUDGET_NOT_FOUND")
        self.budget_id = budget_id
        self.user_id = user_id
        self.category_id = category_id


class CategoryNotFoundError(BudgetTrackerError):
    """Raised when a budget references a category unknown to the lookup."""

    def __init__(self, category_id: str) -> None:
        super().__init__(
            f"Category '{category_id}' does not exist.",
            code="CATEGORY_NOT_FOUND",
        )
        self.category_id = category_id


class DuplicateBudgetError(BudgetTrackerError):
    """
    Raised by a budget store when inserting a second active budget for a scope.

    Attributes:
        user_id: Owner of the conflicting budget.
        category_id: The contested category, or None for the global scope.
    """

    def __init__(self, user_id: str, category_id: str | None) -> None:
        super().__init__(
            f"User '{user_id}' already has an active budget for "
            f"{_scope_text(category_id)}.",
            code="DUPLICATE_BUDGET",
        )
        self.user_id = user_id
        self.category_id = category_id
