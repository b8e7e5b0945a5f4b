# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reusable Pydantic validation utilities for common patterns across the codebase.

This module provides standardized validators for:
- Calendar date coercion at the model boundary
- Date ordering (end not before start)
"""

from __future__ import annotations

from typing import Any, Optional

from .calendar_date import CalendarDate, coerce_calendar_date


def clean_calendar_date(value: Any) -> Optional[CalendarDate]:
    """
    Field-validator form of `coerce_calendar_date`.

    Pydantic only reports ValueError and AssertionError as validation
    errors, so type mismatches are re-raised as ValueError.
    """
    try:
        return coerce_calendar_date(value)
    except TypeError as e:
        raise ValueError(str(e)) from e


class ValidationMixin:
    """
    Mixin class providing reusable validation methods for Pydantic models.

    This class can be inherited alongside Pydantic Model to add common
    validation patterns without code duplication.
    """

    @classmethod
    def validate_date_ordering(
        cls,
        data: Any,
        start_field: str,
        end_field: str,
        error_message: Optional[str] = None
    ) -> Any:
        """
        Validate that the end date does not fall before the start date.

        Works on a model instance (mode="after") or a data dictionary. Either
        bound may be None, in which case there is nothing to check.

        Raises:
            ValueError: If end date precedes start date
        """
        if isinstance(data, dict):
            start_date = data.get(start_field)
            end_date = data.get(end_field)
        else:
            start_date = getattr(data, start_field, None)
            end_date = getattr(data, end_field, None)

        if start_date is not None and end_date is not None:
            if end_date < start_date:
                msg = error_message or f"{end_field} must not be before {start_field}"
                raise ValueError(msg)

        return data
