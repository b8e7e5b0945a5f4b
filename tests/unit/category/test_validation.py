# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for budget-level category validation.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cadence.category import (
    BudgetContext,
    Category,
    ValidationContext,
    ValidationIssue,
    validate_category,
)
from cadence.core.primitives import CalendarDate, ValidationSettings

GROUP_MESSAGE = "Every Category must be assigned to a valid CategoryGroup."
DAILY = {"amount": -5, "period": "day"}


def test_valid_category_has_no_issues(budget):
    category = Category(
        name="Rent",
        group_id=1,
        rules=[{"amount": -1500, "startDate": "2014-01-01", "period": "month"}],
    )
    context = ValidationContext(budget)

    assert category.validate_against(context) == ()
    assert context.is_valid


@pytest.mark.parametrize("group_id", [None, 3])
def test_category_must_belong_to_a_budget_group(budget, group_id):
    issues = validate_category(Category(group_id=group_id), budget)
    assert issues == (ValidationIssue(field=None, message=GROUP_MESSAGE),)


def test_overlapping_rules_are_reported(budget):
    issues = validate_category(Category(group_id=1, rules=[DAILY, DAILY]), budget)
    assert [issue.field for issue in issues] == ["rules"]
    assert "must not overlap" in issues[0].message


def test_rules_in_disjoint_windows_are_valid(budget):
    category = Category(
        group_id=2,
        rules=[
            {"amount": -50, "startDate": "2016-01-01", "endDate": "2016-03-31", "period": "month"},
            {"amount": -75, "startDate": "2016-04-01", "endDate": "2016-06-30", "period": "month"},
        ],
    )
    assert validate_category(category, budget) == ()


def test_automatic_category_skips_rule_checks(budget):
    assert validate_category(Category(group_id=1), budget) == ()


def test_rule_ending_before_it_starts_is_reported(budget):
    category = Category(
        group_id=1,
        rules=[{"amount": 5, "startDate": "2016-03-01", "endDate": "2016-02-01"}],
    )
    context = ValidationContext(budget)
    category.validate_against(context)
    assert context.errors_for("rules") == ["Rule 1 ends before it starts."]

    relaxed = ValidationSettings(check_rule_date_order=False)
    assert validate_category(category, budget, relaxed) == ()


def test_overlap_report_policy(budget):
    category = Category(group_id=1, rules=[DAILY, DAILY, DAILY])

    assert len(validate_category(category, budget)) == 3

    first_only = ValidationSettings(report_all_overlaps=False)
    assert len(validate_category(category, budget, first_only)) == 1


def test_all_problems_are_collected(budget):
    """Validation keeps going after the first problem."""
    context = ValidationContext(budget)
    Category(group_id=None, rules=[DAILY, DAILY]).validate_against(context)

    assert not context.is_valid
    assert context.errors_for(None) == [GROUP_MESSAGE]
    assert len(context.errors_for("rules")) == 1


def test_context_accumulates_across_categories(budget):
    context = ValidationContext(budget)
    Category(group_id=None).validate_against(context)
    issues = Category(group_id=9).validate_against(context)
    assert len(issues) == 2


def test_budget_context(budget):
    assert budget.group_ids == frozenset({1, 2})
    assert budget.has_group(2)
    assert not budget.has_group(None)
    assert budget.start_date == CalendarDate.parse("2016-01-01")


def test_budget_context_accepts_wire_field_names():
    budget = BudgetContext(startDate=16801, endDate=17166, categoryGroups=[{"id": 5}])
    assert budget.end_date == CalendarDate.parse("2016-12-31")
    assert budget.group_ids == frozenset({5})


def test_budget_context_rejects_inverted_period():
    with pytest.raises(ValidationError, match="must not be before"):
        BudgetContext(start_date="2016-12-31", end_date="2016-01-01")


def test_validation_issue_str():
    assert str(ValidationIssue(field="rules", message="Bad.")) == "rules: Bad."
    assert str(ValidationIssue(message="Bad.")) == "Bad."
