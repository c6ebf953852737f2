# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator

from .enums import AmbiguousFallbackPolicy
from .model import Model
from .types import PositiveInt


class LotNumberSettings(Model):
    """Bounds applied when creating lots from admin input."""

    min_lot_number: PositiveInt = Field(
        default=1, description="Smallest lot number that may be created."
    )
    max_lot_number: PositiveInt = Field(
        default=9999, description="Largest lot number that may be created."
    )

    @model_validator(mode="after")
    def check_bounds(self) -> "LotNumberSettings":
        """Ensure the bounds describe a non-empty range."""
        if self.min_lot_number > self.max_lot_number:
            raise ValueError(
                "min_lot_number must be less than or equal to max_lot_number"
            )
        return self


class ReconciliationSettings(Model):
    """
    Settings controlling how lots are matched to residents.

    Usage Examples:
        # Observed behavior: first legacy candidate wins, ambiguity is flagged
        settings = ReconciliationSettings()

        # Leave ambiguous legacy matches for an operator to resolve
        settings = ReconciliationSettings(
            ambiguous_fallback=AmbiguousFallbackPolicy.UNRESOLVED
        )
    """

    ambiguous_fallback: AmbiguousFallbackPolicy = Field(
        default=AmbiguousFallbackPolicy.FIRST_MATCH,
        description="Resolution when several residents share a legacy lot label.",
    )
    legacy_fallback_enabled: bool = Field(
        default=True,
        description=(
            "Match unassigned lots to residents by legacy lot label. "
            "Disable once all lots carry an authoritative assignment."
        ),
    )


class PreferenceSettings(Model):
    """Defaults and key namespace for remembered view selections."""

    namespace: Optional[str] = Field(
        default=None, description="Optional prefix for preference keys (e.g. 'td')."
    )
    default_phase: str = "Phase 1"
    default_block: str = "Block 1"


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global settings

    Groups the settings consumed by reconciliation, the mutation guard,
    and the session layer. Each component also accepts its own settings
    model directly.
    """

    lot_numbers: LotNumberSettings = Field(default_factory=LotNumberSettings)
    reconciliation: ReconciliationSettings = Field(
        default_factory=ReconciliationSettings
    )
    preferences: PreferenceSettings = Field(default_factory=PreferenceSettings)
