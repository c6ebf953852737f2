# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Dict, TypeVar

from pydantic import BaseModel, ConfigDict

M = TypeVar("M", bound="Model")


class Model(BaseModel):
    """Base Pydantic model for lotwise records.

    Records are immutable; selection, caches, and request generations live on
    controllers. Fields accept either their Python name or the camelCase alias
    used by stored documents.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",  # Unknown document keys fail loudly
        populate_by_name=True,
    )

    def copy_with(self: M, **updates: Any) -> M:
        """
        Copy with fields replaced, running validation on the result.

        Unlike `model_copy(update=...)`, a bad value raises here instead of
        producing an invalid record.
        """
        values: Dict[str, Any] = dict(self)
        values.update(updates)
        return type(self).model_validate(values)
