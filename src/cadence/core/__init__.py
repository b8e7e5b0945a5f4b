# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cadence Core Framework

Primitives shared by every record: the immutable base model, calendar dates,
recurrence periods, settings and currency metadata.
"""

from . import primitives
from .currency import SUPPORTED_CURRENCIES, Currency, get_currency

__all__ = [
    "primitives",
    "Currency",
    "SUPPORTED_CURRENCIES",
    "get_currency",
]
