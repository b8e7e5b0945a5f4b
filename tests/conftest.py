# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for Cadence tests.
"""

from __future__ import annotations

import pytest

from cadence.category import BudgetContext, CategoryGroup


@pytest.fixture
def housing_group() -> CategoryGroup:
    return CategoryGroup(id=1, name="Housing")


@pytest.fixture
def budget(housing_group: CategoryGroup) -> BudgetContext:
    """A calendar-year 2016 budget with a single category group."""
    return BudgetContext(
        start_date="2016-01-01",
        end_date="2016-12-31",
        category_groups=[housing_group, {"id": 2, "name": "Everyday"}],
    )
