# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Budget context for cross-entity validation.

Structural invariants are enforced when a record is built. Business rules
that need to see the enclosing budget (group membership, overlapping rules)
are checked on demand against a ValidationContext, which collects every
problem it is told about instead of failing on the first one.
"""

from __future__ import annotations

import logging
from typing import Any, FrozenSet, List, Optional, Tuple

from pydantic import AliasChoices, Field, field_validator, model_validator

from ..core.primitives.calendar_date import CalendarDate
from ..core.primitives.model import Model
from ..core.primitives.settings import ValidationSettings
from ..core.primitives.validation import ValidationMixin, clean_calendar_date
from .group import CategoryGroup

logger = logging.getLogger(__name__)


class BudgetContext(Model, ValidationMixin):
    """
    The parts of an enclosing budget that category validation depends on.

    Attributes:
        start_date: First day of the budget period; fallback start for rules
            without a start date.
        end_date: Last day of the budget period; fallback end for rules
            without an end date.
        category_groups: The budget's category groups.
    """

    start_date: CalendarDate = Field(
        ..., validation_alias=AliasChoices("start_date", "startDate")
    )
    end_date: CalendarDate = Field(
        ..., validation_alias=AliasChoices("end_date", "endDate")
    )
    category_groups: Tuple[CategoryGroup, ...] = Field(
        default=(), validation_alias=AliasChoices("category_groups", "categoryGroups")
    )

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def clean_dates(cls, v: Any) -> Optional[CalendarDate]:
        return clean_calendar_date(v)

    @model_validator(mode="after")
    def check_date_order(self) -> "BudgetContext":
        return self.validate_date_ordering(
            self, "start_date", "end_date", "Budget end_date must not be before start_date"
        )

    @property
    def group_ids(self) -> FrozenSet[int]:
        return frozenset(group.id for group in self.category_groups if group.id is not None)

    def has_group(self, group_id: Optional[int]) -> bool:
        return group_id is not None and group_id in self.group_ids


class ValidationIssue(Model):
    """A business-rule failure, tagged with the field it concerns (None for the whole record)."""

    field: Optional[str] = None
    message: str

    def __str__(self) -> str:
        return self.message if self.field is None else f"{self.field}: {self.message}"


class ValidationContext:
    """
    Collects validation issues raised while checking records against a budget.

    Examples:
        >>> context = ValidationContext(budget)
        >>> category.validate_against(context)
        >>> if not context.is_valid:
        ...     for issue in context.issues:
        ...         print(issue)
    """

    def __init__(
        self,
        budget: BudgetContext,
        settings: Optional[ValidationSettings] = None,
    ):
        self.budget = budget
        self.settings = settings or ValidationSettings()
        self._issues: List[ValidationIssue] = []

    def add_error(self, field: Optional[str], message: str) -> None:
        logger.debug(f"Validation issue on {field or '<record>'}: {message}")
        self._issues.append(ValidationIssue(field=field, message=message))

    @property
    def issues(self) -> Tuple[ValidationIssue, ...]:
        return tuple(self._issues)

    @property
    def is_valid(self) -> bool:
        return not self._issues

    def errors_for(self, field: Optional[str]) -> List[str]:
        """Messages of every issue reported against one field."""
        return [issue.message for issue in self._issues if issue.field == field]
