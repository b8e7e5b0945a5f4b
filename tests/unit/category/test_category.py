# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from types import MappingProxyType

import pytest
from pydantic import ValidationError

from cadence.category import (
    AutomaticSpending,
    Category,
    CategoryGroup,
    CategoryRule,
    RuleDrivenSpending,
)
from cadence.core.primitives import (
    CadenceSettings,
    CalendarDate,
    RecurrencePeriod,
    SpendingBasisKind,
)

D = CalendarDate.parse

RENT_RULE = {"amount": -1500, "startDate": "2014-01-01", "period": "month"}


def test_category_defaults():
    category = Category()
    assert category.id is None
    assert category.name == ""
    assert category.rules is None
    assert category.is_automatic is True
    assert category.notes == ""
    assert category.currency_code == "USD"
    assert category.group_id is None
    assert dict(category.metadata) == {}


def test_raw_rules_are_cleaned_into_rule_records():
    existing = CategoryRule(amount=-20, period=RecurrencePeriod.WEEK)
    category = Category(name="Rent", rules=[RENT_RULE, existing])

    assert isinstance(category.rules, tuple)
    assert category.rules[0] == CategoryRule(
        amount=-1500, start_date="2014-01-01", period=RecurrencePeriod.MONTH
    )
    assert category.rules[1] is existing
    assert category.is_automatic is False


def test_rules_accept_any_iterable():
    category = Category(rules=(dict(RENT_RULE) for _ in range(2)))
    assert len(category.rules) == 2


@pytest.mark.parametrize("rules", ["monthly", {"amount": 5}, 5])
def test_rules_must_be_a_sequence(rules):
    with pytest.raises(ValidationError):
        Category(rules=rules)


def test_invalid_raw_rule_is_rejected():
    with pytest.raises(ValidationError):
        Category(rules=[{"amount": 5, "repeatN": 0}])


def test_spending_basis_variants():
    automatic = Category()
    assert automatic.spending_basis == AutomaticSpending()
    assert automatic.spending_basis.kind is SpendingBasisKind.AUTOMATIC

    empty = Category(rules=[])
    assert empty.is_automatic is False
    assert empty.spending_basis == RuleDrivenSpending(rules=())

    rent = Category(rules=[RENT_RULE])
    assert rent.spending_basis.kind is SpendingBasisKind.RULES
    assert rent.spending_basis.rules == rent.rules


@pytest.mark.parametrize(
    "values",
    [{"id": 0}, {"id": -3}, {"id": True}, {"groupId": "1"}, {"group_id": 0}],
)
def test_ids_must_be_positive_integers(values):
    with pytest.raises(ValidationError):
        Category(**values)


def test_currency_must_be_supported():
    with pytest.raises(ValidationError):
        Category(currency_code="XYZ")


def test_currency_lookup():
    category = Category(currencyCode="EUR")
    assert category.currency.code == "EUR"
    assert category.currency.symbol == "€"


def test_metadata_is_deeply_read_only():
    category = Category(metadata={"color": "blue", "tags": ["fixed", "home"], "ui": {"order": 3}})

    assert isinstance(category.metadata, MappingProxyType)
    assert category.metadata["tags"] == ("fixed", "home")
    assert category.metadata["ui"]["order"] == 3
    with pytest.raises(TypeError):
        category.metadata["color"] = "red"
    with pytest.raises(TypeError):
        category.metadata["ui"]["order"] = 4


def test_metadata_must_be_a_mapping():
    with pytest.raises(ValidationError):
        Category(metadata=["color", "blue"])


def test_to_dict_shape():
    category = Category(
        id=7,
        name="Rent",
        rules=[RENT_RULE],
        notes="Due on the 1st",
        group_id=1,
        metadata={"tags": ["fixed"]},
    )
    assert category.to_dict() == {
        "id": 7,
        "name": "Rent",
        "rules": [
            {"amount": -1500.0, "startDate": 16071, "endDate": None, "repeatN": 1, "period": 4}
        ],
        "notes": "Due on the 1st",
        "currencyCode": "USD",
        "groupId": 1,
        "metadata": {"tags": ["fixed"]},
    }


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"name": "Automatic", "rules": None},
        {"id": 3, "rules": [RENT_RULE, {"amount": 2, "period": 2, "repeatN": 3}]},
        {"groupId": 2, "metadata": {"a": {"b": [1, 2, {"c": None}]}}},
    ],
)
def test_cleaning_is_idempotent(raw):
    once = Category.from_dict(raw)
    assert Category.from_dict(once.to_dict()) == once
    assert once.replace() == once
    assert Category(**{name: getattr(once, name) for name in Category.model_fields}) == once


def test_from_dict_uses_default_currency_setting():
    settings = CadenceSettings(default_currency_code="GBP")
    assert Category.from_dict({"name": "Tea"}, settings=settings).currency_code == "GBP"
    assert Category.from_dict({"currencyCode": "EUR"}, settings=settings).currency_code == "EUR"


def test_replace_is_copy_on_write():
    category = Category(name="Rent", rules=[RENT_RULE], group_id=1)
    renamed = category.replace(name="Mortgage")

    assert category.name == "Rent"
    assert renamed.name == "Mortgage"
    assert renamed.rules == category.rules

    with pytest.raises(ValidationError):
        category.replace(currency_code="XYZ")


def test_expected_total_between():
    begin, end = D("2016-01-01"), D("2016-12-31")
    assert Category(rules=[RENT_RULE]).expected_total_between(begin, end) == -18000.0
    assert Category(rules=[]).expected_total_between(begin, end) == 0.0
    assert Category().expected_total_between(begin, end) is None

    category = Category(
        rules=[
            RENT_RULE,
            {"amount": -10, "startDate": "2016-12-25", "period": "day"},
        ]
    )
    assert category.expected_total_between(begin, end) == -18070.0


def test_category_group():
    group = CategoryGroup(id=4, name="Everyday")
    assert group.replace(name="Daily") == CategoryGroup(id=4, name="Daily")
    with pytest.raises(ValidationError):
        CategoryGroup(id=0)


def test_categories_are_hashable_values():
    assert hash(Category()) == hash(Category())

    a = Category(name="Rent", rules=[RENT_RULE], metadata={"ui": {"order": 1}, "tags": ["fixed"]})
    b = Category.from_dict(a.to_dict())
    c = a.replace(name="Mortgage")

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, c}) == 2
