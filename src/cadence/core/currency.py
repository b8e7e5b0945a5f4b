# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Currency metadata lookup.

Categories store only an ISO 4217 code; the code must resolve to one of the
currencies registered here.
"""

from __future__ import annotations

from typing import Dict

from pydantic import Field

from .primitives.model import Model
from .primitives.types import NonNegativeInt


class Currency(Model):
    """An ISO 4217 currency."""

    code: str = Field(..., min_length=3, max_length=3)
    name: str
    symbol: str
    decimals: NonNegativeInt = 2


SUPPORTED_CURRENCIES: Dict[str, Currency] = {
    currency.code: currency
    for currency in (
        Currency(code="AUD", name="Australian Dollar", symbol="A$"),
        Currency(code="BRL", name="Brazilian Real", symbol="R$"),
        Currency(code="CAD", name="Canadian Dollar", symbol="CA$"),
        Currency(code="CHF", name="Swiss Franc", symbol="CHF "),
        Currency(code="CNY", name="Chinese Yuan", symbol="CN¥"),
        Currency(code="EUR", name="Euro", symbol="€"),
        Currency(code="GBP", name="British Pound", symbol="£"),
        Currency(code="INR", name="Indian Rupee", symbol="₹"),
        Currency(code="JPY", name="Japanese Yen", symbol="¥", decimals=0),
        Currency(code="MXN", name="Mexican Peso", symbol="MX$"),
        Currency(code="NZD", name="New Zealand Dollar", symbol="NZ$"),
        Currency(code="SEK", name="Swedish Krona", symbol="kr "),
        Currency(code="USD", name="US Dollar", symbol="$"),
    )
}


def get_currency(code: str) -> Currency:
    """
    Look up a supported currency by its ISO 4217 code.

    Raises:
        ValueError: If the code is not a supported currency
    """
    try:
        return SUPPORTED_CURRENCIES[code]
    except (KeyError, TypeError):
        raise ValueError(f"Unsupported currency code: {code!r}") from None
