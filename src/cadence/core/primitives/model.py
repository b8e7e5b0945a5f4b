# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable value records with structural equality. Edits never mutate a
    record in place; they produce a new, fully validated record.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Immutable models; edits go through replace()
        extra="forbid",  # Catches typos and missing field definitions immediately
    )

    def replace(self, **changes: Any) -> "Model":
        """
        Return a copy of this record with the given fields replaced.

        Unlike `model_copy(update=...)`, the changed values go through the same
        cleaning and invariant checks as the constructor.
        """
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return type(self)(**values)
