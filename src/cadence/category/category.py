# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Budget categories such as "Rent", "Groceries" or "Insurance".
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping as MappingABC, Set as SetABC
from types import MappingProxyType
from typing import Any, Dict, Literal, Mapping, Optional, Tuple, Union

from pydantic import AliasChoices, Field, field_serializer, field_validator

from ..core.currency import Currency, get_currency
from ..core.primitives.calendar_date import CalendarDate
from ..core.primitives.enums import SpendingBasisKind
from ..core.primitives.model import Model
from ..core.primitives.settings import CadenceSettings, ValidationSettings
from ..core.primitives.types import PositiveInt
from .context import BudgetContext, ValidationContext, ValidationIssue
from .overlap import find_overlapping_rules
from .rule import CategoryRule

logger = logging.getLogger(__name__)


class AutomaticSpending(Model):
    """Expected spending is computed from existing and pending transactions."""

    kind: Literal[SpendingBasisKind.AUTOMATIC] = SpendingBasisKind.AUTOMATIC


class RuleDrivenSpending(Model):
    """Expected spending is computed from rules (and is zero if there are none)."""

    kind: Literal[SpendingBasisKind.RULES] = SpendingBasisKind.RULES
    rules: Tuple[CategoryRule, ...] = ()


SpendingBasis = Union[AutomaticSpending, RuleDrivenSpending]


class Category(Model):
    """
    A category of spending, tagged with a currency and assigned to a group.

    Attributes:
        id: Unique positive ID, or None before the category is stored.
        name: Display name.
        rules: Rules defining expected spending, such as "$10 per day".
            None makes this an "automatic" category whose expected total is
            computed from existing and pending transactions. A tuple (even an
            empty one) means the expected total is computed from the rules.
        notes: Free text editable by the user.
        currency_code: ISO 4217 code; must be a supported currency.
        group_id: ID of the CategoryGroup this category belongs to.
        metadata: Read-only key/value data whose meaning depends on the application.

    Categories are hashable; metadata contributes through its frozen items.

    Examples:
        >>> category = Category(
        ...     name="Rent",
        ...     group_id=1,
        ...     rules=[{"amount": -1500, "startDate": "2016-01-01", "period": "month"}],
        ... )
        >>> category.is_automatic
        False
    """

    id: Optional[PositiveInt] = None
    name: str = ""
    rules: Optional[Tuple[CategoryRule, ...]] = None
    notes: str = ""
    currency_code: str = Field(
        default="USD",
        validation_alias=AliasChoices("currency_code", "currencyCode"),
        serialization_alias="currencyCode",
    )
    group_id: Optional[PositiveInt] = Field(
        default=None,
        validation_alias=AliasChoices("group_id", "groupId"),
        serialization_alias="groupId",
    )
    metadata: Mapping[str, Any] = Field(default_factory=lambda: MappingProxyType({}))

    @field_validator("rules", mode="before")
    @classmethod
    def clean_rules(cls, v: Any) -> Any:
        """Accept any iterable of CategoryRule instances or CategoryRule field mappings."""
        if v is None:
            return None
        if isinstance(v, (str, bytes, MappingABC)) or not isinstance(v, Iterable):
            raise ValueError("rules must be None or a sequence of rules")
        return tuple(v)

    @field_validator("currency_code", mode="after")
    @classmethod
    def check_currency_code(cls, v: str) -> str:
        get_currency(v)
        return v

    @field_validator("metadata", mode="before")
    @classmethod
    def clean_metadata(cls, v: Any) -> Any:
        if v is None:
            return {}
        if not isinstance(v, MappingABC):
            raise ValueError("metadata must be a mapping")
        return dict(v)

    @field_validator("metadata", mode="after")
    @classmethod
    def freeze_metadata(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return _freeze(v)

    @field_serializer("metadata")
    def serialize_metadata(self, value: Mapping[str, Any]) -> Dict[str, Any]:
        return _thaw(value)

    def __hash__(self) -> int:
        # Read-only metadata mappings are not hashable themselves; hash their frozen items
        return hash(
            (
                type(self),
                self.id,
                self.name,
                self.rules,
                self.notes,
                self.currency_code,
                self.group_id,
                _hashable(self.metadata),
            )
        )

    @property
    def is_automatic(self) -> bool:
        """Is this an "automatic" category (see 'rules')?"""
        return self.rules is None

    @property
    def spending_basis(self) -> SpendingBasis:
        if self.rules is None:
            return AutomaticSpending()
        return RuleDrivenSpending(rules=self.rules)

    @property
    def currency(self) -> Currency:
        return get_currency(self.currency_code)

    def expected_total_between(
        self, date_begin: CalendarDate, date_end: CalendarDate
    ) -> Optional[float]:
        """
        Total spending the rules call for between two dates (inclusive).

        Returns None for automatic categories, whose totals come from transactions.
        """
        if self.rules is None:
            return None
        return sum(
            (rule.total_between(date_begin, date_end) for rule in self.rules), 0.0
        )

    def validate_against(self, context: ValidationContext) -> Tuple[ValidationIssue, ...]:
        """
        Check business rules that depend on the enclosing budget.

        Problems are added to the context rather than raised, so all of them
        can be reported at once.

        Returns:
            Every issue collected by the context so far
        """
        budget = context.budget
        settings = context.settings

        # Group must be valid
        if not budget.has_group(self.group_id):
            context.add_error(None, "Every Category must be assigned to a valid CategoryGroup.")

        if self.rules is not None:
            if settings.check_rule_date_order:
                for index, rule in enumerate(self.rules):
                    if (
                        rule.start_date is not None
                        and rule.end_date is not None
                        and rule.end_date < rule.start_date
                    ):
                        context.add_error(
                            "rules", f"Rule {index + 1} ends before it starts."
                        )

            # Ensure that no rules overlap
            overlaps = find_overlapping_rules(
                self.rules,
                budget.start_date,
                budget.end_date,
                stop_at_first=not settings.report_all_overlaps,
            )
            for overlap in overlaps:
                context.add_error("rules", overlap.message)

        logger.debug(f"Validated category {self.name!r}: {len(context.issues)} issue(s)")
        return context.issues

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON-compatible shape used by the surrounding application."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], settings: Optional[CadenceSettings] = None
    ) -> "Category":
        """
        Build a category from loosely-typed input.

        A missing currency code falls back to the configured default.
        """
        values = dict(data)
        if "currency_code" not in values and "currencyCode" not in values:
            values["currency_code"] = (settings or CadenceSettings()).default_currency_code
        return cls.model_validate(values)


def validate_category(
    category: Category,
    budget: BudgetContext,
    settings: Optional[ValidationSettings] = None,
) -> Tuple[ValidationIssue, ...]:
    """Validate one category against a budget and return the issues found."""
    return category.validate_against(ValidationContext(budget, settings))


def _freeze(value: Any) -> Any:
    if isinstance(value, MappingABC):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, SetABC):
        return frozenset(_freeze(item) for item in value)
    return value


def _hashable(value: Any) -> Any:
    if isinstance(value, MappingABC):
        return frozenset((key, _hashable(item)) for key, item in value.items())
    if isinstance(value, tuple):
        return tuple(_hashable(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, MappingABC):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, (tuple, frozenset)):
        return [_thaw(item) for item in value]
    return value
