# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .schedule import monthly_schedule, occurrence_table

__all__ = [
    "monthly_schedule",
    "occurrence_table",
]
