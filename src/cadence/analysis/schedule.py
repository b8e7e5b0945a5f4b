# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Expected-spending schedules for rule-driven categories.

Breaks a category's expected spending down by calendar month, and its rules
down into occurrence counts, as pandas objects ready for reporting.
"""

from __future__ import annotations

import logging
from typing import Any, Tuple

import pandas as pd

from ..category.category import Category
from ..core.primitives.calendar_date import CalendarDate, coerce_calendar_date
from ..core.primitives.exceptions import InvalidRangeError

logger = logging.getLogger(__name__)


def _range(start: Any, end: Any) -> Tuple[CalendarDate, CalendarDate]:
    start_date = coerce_calendar_date(start)
    end_date = coerce_calendar_date(end)
    if start_date is None or end_date is None:
        raise TypeError("Both start and end dates are required")
    if end_date < start_date:
        raise InvalidRangeError(f"Invalid range: {end_date} is before {start_date}")
    return start_date, end_date


def monthly_schedule(category: Category, start: Any, end: Any) -> pd.Series:
    """
    Expected spending of a rule-driven category for each month of a date range.

    The first and last months are clipped to the range, so a range starting
    mid-month only counts occurrences from its start date onward. Rules are
    counted over the whole range, so the months add up to
    `category.expected_total_between(start, end)`.

    Args:
        category: A category with rules (not automatic)
        start: First day of the range (inclusive)
        end: Last day of the range (inclusive)

    Returns:
        Series indexed by a monthly PeriodIndex, named after the category

    Raises:
        ValueError: If the category is automatic

    Example:
        ```python
        schedule = monthly_schedule(rent, "2016-01-01", "2016-12-31")
        schedule.sum()  # same as rent.expected_total_between(...)
        ```
    """
    if category.is_automatic:
        raise ValueError(
            f"Category {category.name!r} is automatic; its spending comes from transactions"
        )
    start_date, end_date = _range(start, end)

    periods = pd.period_range(
        start=start_date.to_timestamp(), end=end_date.to_timestamp(), freq="M"
    )
    # Month value = growth of the running total counted from the range start
    values = []
    running_total = 0.0
    for period in periods:
        month_end = min(end_date, CalendarDate.from_timestamp(period.end_time))
        total = category.expected_total_between(start_date, month_end)
        values.append(total - running_total)
        running_total = total

    logger.debug(
        f"Built {len(periods)}-month schedule for {category.name!r} "
        f"from {start_date} to {end_date}"
    )
    return pd.Series(values, index=periods, name=category.name, dtype="float64")


def occurrence_table(category: Category, start: Any, end: Any) -> pd.DataFrame:
    """
    One row per rule of a category with its occurrence count and total in a range.

    Automatic categories produce an empty table.
    """
    start_date, end_date = _range(start, end)
    columns = ["amount", "start_date", "end_date", "repeat_n", "period", "occurrences", "total"]

    rows = []
    for rule in category.rules or ():
        occurrences = rule.count_occurrences_between(start_date, end_date)
        rows.append(
            {
                "amount": rule.amount,
                "start_date": None if rule.start_date is None else rule.start_date.to_timestamp(),
                "end_date": None if rule.end_date is None else rule.end_date.to_timestamp(),
                "repeat_n": rule.repeat_n,
                "period": None if rule.period is None else rule.period.name.lower(),
                "occurrences": occurrences,
                "total": rule.amount * occurrences,
            }
        )
    return pd.DataFrame(rows, columns=columns)
