# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .category import (
    AutomaticSpending,
    Category,
    RuleDrivenSpending,
    SpendingBasis,
    validate_category,
)
from .context import BudgetContext, ValidationContext, ValidationIssue
from .group import CategoryGroup
from .overlap import RuleOverlap, find_overlapping_rules
from .rule import CategoryRule

__all__ = [
    # Records
    "Category",
    "CategoryGroup",
    "CategoryRule",
    # Spending basis
    "AutomaticSpending",
    "RuleDrivenSpending",
    "SpendingBasis",
    # Validation
    "BudgetContext",
    "ValidationContext",
    "ValidationIssue",
    "validate_category",
    # Overlap detection
    "RuleOverlap",
    "find_overlapping_rules",
]
