# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Exceptions raised by the occurrence-counting engine.

Construction-time invariant violations surface as `pydantic.ValidationError`;
business-rule problems are collected as issues by a validation context and
are never raised.
"""


class InvalidRangeError(ValueError):
    """A date range whose end falls before its beginning."""


class InvalidPeriodError(ValueError):
    """A recurrence period outside the supported calendar units."""


class OccurrenceCountError(RuntimeError):
    """The counting algorithm produced an impossible (negative) result."""
