# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Recurring spending rules and the occurrence-counting engine.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Dict, Optional

from pydantic import AliasChoices, Field, field_serializer, field_validator, model_validator

from ..core.primitives.calendar_date import CalendarDate, coerce_calendar_date
from ..core.primitives.enums import RecurrencePeriod
from ..core.primitives.exceptions import (
    InvalidPeriodError,
    InvalidRangeError,
    OccurrenceCountError,
)
from ..core.primitives.model import Model
from ..core.primitives.types import PositiveInt
from ..core.primitives.validation import clean_calendar_date

logger = logging.getLogger(__name__)


class CategoryRule(Model):
    """
    One rule of expected spending in a category, such as "$10 per day" or
    "$1,200 every month starting 2014-01-01".

    Attributes:
        amount: Amount spent at each occurrence (any sign or magnitude).
        start_date: First day the rule is active, if any.
        end_date: Last day the rule is active, if any. Must not precede
            start_date but need not fall within the budget period.
        repeat_n: Stride; "repeat every 6 weeks" has repeat_n=6. Meaningless
            when period is None.
        period: Calendar unit of the stride, or None for spending that
            happens once (or randomly) within the active window.

    Examples:
        >>> rule = CategoryRule(amount=-1200, start_date="2014-01-01", period="month")
        >>> rule.count_occurrences_between(
        ...     CalendarDate.parse("2016-01-01"), CalendarDate.parse("2016-12-31")
        ... )
        12
    """

    amount: Annotated[float, Field(strict=True)] = 0.0
    start_date: Optional[CalendarDate] = Field(
        default=None,
        validation_alias=AliasChoices("start_date", "startDate"),
        serialization_alias="startDate",
    )
    end_date: Optional[CalendarDate] = Field(
        default=None,
        validation_alias=AliasChoices("end_date", "endDate"),
        serialization_alias="endDate",
    )
    repeat_n: PositiveInt = Field(
        default=1,
        validation_alias=AliasChoices("repeat_n", "repeatN"),
        serialization_alias="repeatN",
    )
    period: Optional[RecurrencePeriod] = None

    # Possible future addition: round up to nearest business day, nearest Thursday, etc.

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def clean_dates(cls, v: Any) -> Optional[CalendarDate]:
        return clean_calendar_date(v)

    @field_validator("period", mode="before")
    @classmethod
    def clean_period(cls, v: Any) -> Optional[RecurrencePeriod]:
        if v is None:
            return None
        return RecurrencePeriod.from_value(v)

    @model_validator(mode="after")
    def flag_yearly_stride(self) -> "CategoryRule":
        if self.period is RecurrencePeriod.YEAR and self.repeat_n != 1:
            logger.warning(
                f"Yearly rule built with repeat_n={self.repeat_n}; "
                "yearly occurrences are counted every year regardless of repeat_n"
            )
        return self

    @field_serializer("start_date", "end_date")
    def serialize_date(self, value: Optional[CalendarDate]) -> Optional[int]:
        return None if value is None else value.day_number

    @field_serializer("period")
    def serialize_period(self, value: Optional[RecurrencePeriod]) -> Optional[int]:
        return None if value is None else int(value.value)

    @property
    def is_repeating(self) -> bool:
        return self.period is not None

    def count_occurrences_between(
        self, date_begin: CalendarDate, date_end: CalendarDate
    ) -> int:
        """
        Count how many times this rule's amount occurs between two dates.

        For example, if start_date is 2014-01-01, end_date is None, repeat_n is 1
        and period is MONTH (repeat every month from Jan 1, 2014 onward), then
        count_occurrences_between(2016-01-01, 2016-12-31) returns 12.

        Args:
            date_begin: Start of the range in question (inclusive)
            date_end: End of the range in question (inclusive)

        Returns:
            Number of occurrences, never negative

        Raises:
            InvalidRangeError: If date_end is before date_begin
        """
        date_begin = _require_date(date_begin, "date_begin")
        date_end = _require_date(date_end, "date_end")
        if date_end < date_begin:
            raise InvalidRangeError(
                f"Invalid range: {date_end} is before {date_begin}"
            )

        # Short circuit checks:
        if self.start_date is not None and date_end < self.start_date:
            return 0  # This rule doesn't start until after the range has ended
        if self.end_date is not None and date_begin > self.end_date:
            return 0  # This rule ended before the range began
        if self.period is None:
            # Not a repeating rule; its window overlaps the range, so it fires once
            return 1

        # Occurrences from the rule's first day through the earlier of end_date and date_end
        first_day = self.start_date if self.start_date is not None else date_begin
        if self.end_date is not None and self.end_date < date_end:
            last_day = self.end_date
        else:
            last_day = date_end
        result = self._occurrences_through(first_day, last_day)

        # If date_begin falls after start_date, remove the occurrences between
        # start_date and the day before date_begin. That window starts on the
        # rule's own first day, so it needs no correction of its own.
        if first_day < date_begin:
            result -= self._occurrences_through(first_day, min(last_day, date_begin - 1))

        if result < 0:
            raise OccurrenceCountError(
                f"Negative occurrence count {result} for {self!r} "
                f"between {date_begin} and {date_end}"
            )
        return result

    def total_between(self, date_begin: CalendarDate, date_end: CalendarDate) -> float:
        """Total amount this rule contributes between two dates (inclusive)."""
        return self.amount * self.count_occurrences_between(date_begin, date_end)

    def _occurrences_through(self, first_day: CalendarDate, last_day: CalendarDate) -> int:
        """Occurrences from first_day through last_day, with one landing on first_day."""
        days_diff = max(0, last_day - first_day)  # never negative

        if self.period is RecurrencePeriod.DAY:
            return days_diff // self.repeat_n + 1
        if self.period is RecurrencePeriod.WEEK:
            return days_diff // (self.repeat_n * 7) + 1
        if self.period is RecurrencePeriod.MONTH:
            months = (
                (last_day.year - first_day.year) * 12
                + (last_day.month - first_day.month)
                + (1 if last_day.day >= first_day.day else 0)
            )
            # When repeat_n == 1 this simplifies to 'months'
            return (months - 1) // self.repeat_n + 1
        if self.period is RecurrencePeriod.YEAR:
            # repeat_n is not applied to yearly rules
            anniversary_reached = last_day.month > first_day.month or (
                last_day.month == first_day.month and last_day.day >= first_day.day
            )
            return (last_day.year - first_day.year) + (1 if anniversary_reached else 0)
        raise InvalidPeriodError(f"Invalid period: {self.period!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON-compatible shape (dates as day numbers, period as its code)."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CategoryRule":
        return cls.model_validate(data)


def _require_date(value: Any, name: str) -> CalendarDate:
    date_value = coerce_calendar_date(value)
    if date_value is None:
        raise TypeError(f"{name} is required")
    return date_value
