# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cadence Core Primitives

Essential building blocks: the immutable base model, whole-day calendar
dates, recurrence periods, settings, errors and validation helpers.
"""

from .calendar_date import CalendarDate, coerce_calendar_date
from .enums import RecurrencePeriod, SpendingBasisKind
from .exceptions import InvalidPeriodError, InvalidRangeError, OccurrenceCountError
from .model import Model
from .settings import CadenceSettings, ValidationSettings
from .types import NonNegativeInt, PositiveInt
from .validation import ValidationMixin, clean_calendar_date

__all__ = [
    # Core models
    "Model",
    "CalendarDate",
    "coerce_calendar_date",
    # Settings
    "CadenceSettings",
    "ValidationSettings",
    # Enums
    "RecurrencePeriod",
    "SpendingBasisKind",
    # Errors
    "InvalidPeriodError",
    "InvalidRangeError",
    "OccurrenceCountError",
    # Types
    "NonNegativeInt",
    "PositiveInt",
    # Validation
    "ValidationMixin",
    "clean_calendar_date",
]
