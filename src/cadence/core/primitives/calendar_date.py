# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Whole-day calendar dates.

A CalendarDate is an immutable count of days since 1970-01-01. It has no
time-of-day and no time zone; arithmetic is day-granular only. Dates run
from 0001-01-01 to 9999-12-31, the range of `datetime.date`.
"""

from __future__ import annotations

from datetime import date
from functools import total_ordering
from typing import Any, Optional, Union

import pandas as pd

_EPOCH_ORDINAL = date(1970, 1, 1).toordinal()

# Day numbers of date.min (0001-01-01) and date.max (9999-12-31)
MIN_DAY_NUMBER = date.min.toordinal() - _EPOCH_ORDINAL
MAX_DAY_NUMBER = date.max.toordinal() - _EPOCH_ORDINAL


@total_ordering
class CalendarDate:
    """
    An immutable whole-day timestamp.

    Examples:
        >>> d = CalendarDate.from_ymd(2016, 1, 1)
        >>> d.day_number
        16801
        >>> (d + 30).isoformat()
        '2016-01-31'
        >>> CalendarDate.parse("2016-12-31") - d
        365
    """

    __slots__ = ("_day_number",)

    def __init__(self, day_number: int):
        if isinstance(day_number, bool) or not isinstance(day_number, int):
            raise TypeError(
                f"CalendarDate requires an integer day number, got {type(day_number).__name__}"
            )
        if not MIN_DAY_NUMBER <= day_number <= MAX_DAY_NUMBER:
            raise ValueError(
                f"Day number {day_number} is outside the supported range "
                f"{MIN_DAY_NUMBER}..{MAX_DAY_NUMBER} (years 1 to 9999)"
            )
        object.__setattr__(self, "_day_number", day_number)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("CalendarDate is immutable")

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(value.toordinal() - _EPOCH_ORDINAL)

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> "CalendarDate":
        return cls.from_date(date(year, month, day))

    @classmethod
    def parse(cls, value: str) -> "CalendarDate":
        """Parse an ISO 8601 calendar date ("YYYY-MM-DD")."""
        return cls.from_date(date.fromisoformat(value.strip()))

    @classmethod
    def from_timestamp(cls, value: pd.Timestamp) -> "CalendarDate":
        """Convert a pandas Timestamp, discarding any time-of-day component."""
        return cls.from_date(value.date())

    @classmethod
    def today(cls) -> "CalendarDate":
        return cls.from_date(date.today())

    @property
    def day_number(self) -> int:
        return self._day_number

    def to_date(self) -> date:
        return date.fromordinal(self._day_number + _EPOCH_ORDINAL)

    def to_timestamp(self) -> pd.Timestamp:
        return pd.Timestamp(self.to_date())

    def isoformat(self) -> str:
        return self.to_date().isoformat()

    @property
    def year(self) -> int:
        return self.to_date().year

    @property
    def month(self) -> int:
        return self.to_date().month

    @property
    def day(self) -> int:
        return self.to_date().day

    def __int__(self) -> int:
        return self._day_number

    def __index__(self) -> int:
        return self._day_number

    def __add__(self, days: int) -> "CalendarDate":
        if isinstance(days, bool) or not isinstance(days, int):
            return NotImplemented
        return CalendarDate(self._day_number + days)

    __radd__ = __add__

    def __sub__(self, other: Union["CalendarDate", int]):
        """`date - n` is a CalendarDate; `date1 - date2` is a day count."""
        if isinstance(other, CalendarDate):
            return self._day_number - other._day_number
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return CalendarDate(self._day_number - other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._day_number == other._day_number

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._day_number < other._day_number

    def __hash__(self) -> int:
        return hash(("CalendarDate", self._day_number))

    def __reduce__(self):
        return (CalendarDate, (self._day_number,))

    def __repr__(self) -> str:
        return f"CalendarDate({self.isoformat()})"

    def __str__(self) -> str:
        return self.isoformat()


def coerce_calendar_date(value: Any) -> Optional[CalendarDate]:
    """
    Convert loosely-typed date input to a CalendarDate.

    Accepts a CalendarDate, an integer day number, a `datetime.date`, a
    `pandas.Timestamp`, an ISO date string, or None (returned unchanged).

    Raises:
        TypeError: If the value has none of the accepted types
        ValueError: If a string is not a valid ISO date
    """
    if value is None or isinstance(value, CalendarDate):
        return value
    if isinstance(value, bool):
        raise TypeError("A boolean is not a valid calendar date")
    if isinstance(value, int):
        return CalendarDate(value)
    # Timestamp before date: pd.Timestamp is a datetime subclass
    if isinstance(value, pd.Timestamp):
        return CalendarDate.from_timestamp(value)
    if isinstance(value, date):
        return CalendarDate.from_date(value)
    if isinstance(value, str):
        return CalendarDate.parse(value)
    raise TypeError(f"Cannot interpret {type(value).__name__} as a calendar date")
