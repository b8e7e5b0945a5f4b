# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Detection of overlapping rules within one category.

Rule counts per category are small, so every pair of rules is checked with
the occurrence-counting engine acting as the overlap test.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Set, Tuple

from ..core.primitives.calendar_date import CalendarDate
from ..core.primitives.model import Model
from ..core.primitives.types import NonNegativeInt
from .rule import CategoryRule

logger = logging.getLogger(__name__)


class RuleOverlap(Model):
    """Two rules (by position) that produce occurrences in each other's active window."""

    first_index: NonNegativeInt
    second_index: NonNegativeInt

    @property
    def message(self) -> str:
        return (
            "A budget category's rules must not overlap "
            f"(rules {self.first_index + 1} and {self.second_index + 1})."
        )


def find_overlapping_rules(
    rules: Sequence[CategoryRule],
    budget_start: CalendarDate,
    budget_end: CalendarDate,
    stop_at_first: bool = False,
) -> List[RuleOverlap]:
    """
    Find pairs of distinct rules whose occurrences overlap.

    For each ordered pair (rule, other) of rules at different positions, the
    other rule's active window is taken from its own start/end dates, falling
    back to the budget period where it is unbounded. If the rule occurs at
    least once inside that window, the pair overlaps. Rules that are equal
    but sit at different positions are still distinct.

    Args:
        rules: Rules of one category, in order
        budget_start: Fallback start for rules without a start date
        budget_end: Fallback end for rules without an end date
        stop_at_first: Return as soon as one overlapping pair is found

    Returns:
        One RuleOverlap per overlapping unordered pair, in discovery order
    """
    overlaps: List[RuleOverlap] = []
    seen: Set[Tuple[int, int]] = set()

    for i, rule in enumerate(rules):
        for j, other_rule in enumerate(rules):
            if i == j:
                continue
            pair = (min(i, j), max(i, j))
            if pair in seen:
                continue

            other_start = other_rule.start_date if other_rule.start_date is not None else budget_start
            other_end = other_rule.end_date if other_rule.end_date is not None else budget_end
            if other_end < other_start:
                # Rule lies entirely outside the budget period (or its bounds are inverted)
                logger.debug(
                    f"Skipping overlap check of rule {i} against rule {j}: "
                    f"empty window {other_start}..{other_end}"
                )
                continue

            if rule.count_occurrences_between(other_start, other_end) != 0:
                seen.add(pair)
                overlaps.append(RuleOverlap(first_index=pair[0], second_index=pair[1]))
                if stop_at_first:
                    return overlaps

    return overlaps
