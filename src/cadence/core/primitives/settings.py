# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .model import Model


class ValidationSettings(Model):
    """Settings controlling how category business rules are checked."""

    report_all_overlaps: bool = Field(
        default=True,
        description="Report every overlapping pair of rules instead of stopping at the first.",
    )
    check_rule_date_order: bool = Field(
        default=True,
        description="Report rules whose end date falls before their start date.",
    )


class CadenceSettings(Model):
    """
    Top-level configuration container.

    Examples:
        >>> settings = CadenceSettings(validation={"report_all_overlaps": False})
        >>> settings.validation.report_all_overlaps
        False
    """

    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    default_currency_code: str = Field(
        default="USD", description="ISO 4217 code given to categories that omit one."
    )
