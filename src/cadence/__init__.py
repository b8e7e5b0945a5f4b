# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
Cadence - Recurring Budget Category Rules

Immutable budget categories whose expected spending is described by
recurring rules, and the engine that counts how often a rule occurs in a
date range.

Key Entry Points:
- cadence.category.CategoryRule.count_occurrences_between() - occurrence counting
- cadence.category.Category.validate_against() - budget-level validation
- cadence.analysis.monthly_schedule() - month-by-month expected spending

Example Usage:
    ```python
    from cadence.category import Category, CategoryRule
    from cadence.core.primitives import CalendarDate, RecurrencePeriod

    rent = CategoryRule(amount=-1500, start_date="2014-01-01", period=RecurrencePeriod.MONTH)
    rent.count_occurrences_between(
        CalendarDate.parse("2016-01-01"), CalendarDate.parse("2016-12-31")
    )  # 12
    ```
"""

# Add a NullHandler so that applications which don't configure logging
# don't see "No handlers could be found" warnings.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "analysis",
    "category",
    "core",
]


_LAZY_MODULES = {
    "analysis": "cadence.analysis",
    "category": "cadence.category",
    "core": "cadence.core",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'cadence' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
