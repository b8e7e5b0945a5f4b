# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Any


class RecurrencePeriod(int, Enum):
    """
    Calendar unit a repeating rule advances by between occurrences.

    The integer values are the codes used in the serialized form of a rule.
    Periods have no ordering relation between them; each one has its own
    occurrence-counting formula.

    Options:
        DAY: Every N days
        WEEK: Every N weeks (7 * N days)
        MONTH: Every N month-anniversaries of the first day
        YEAR: Every year-anniversary of the first day
    """

    DAY = 2
    WEEK = 3
    MONTH = 4
    YEAR = 5

    @classmethod
    def from_value(cls, value: Any) -> "RecurrencePeriod":
        """
        Resolve a period from an enum member, its integer code or its name.

        Names are matched case-insensitively ("month", "Month", "MONTH").

        Raises:
            ValueError: If the value does not name a supported period
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid recurrence period: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(
            f"Invalid recurrence period: {value!r}. "
            f"Expected one of {[member.name.lower() for member in cls]}"
        )


class SpendingBasisKind(str, Enum):
    """How the expected spending of a category is derived."""

    AUTOMATIC = "automatic"  # From existing and pending transactions
    RULES = "rules"  # From the category's recurrence rules
