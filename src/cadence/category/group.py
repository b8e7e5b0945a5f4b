# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from ..core.primitives.model import Model
from ..core.primitives.types import PositiveInt


class CategoryGroup(Model):
    """An ordered group of categories, such as "Housing" or "Everyday"."""

    id: Optional[PositiveInt] = None
    name: str = ""
