# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from lotwise.core.primitives import (
    AmbiguousFallbackPolicy,
    GlobalSettings,
    LotNumberSettings,
    Model,
    PreferenceSettings,
    ReconciliationSettings,
)


def test_global_settings_default_instantiation():
    """Test that GlobalSettings can be instantiated with default values."""
    settings = GlobalSettings()
    assert settings.lot_numbers.min_lot_number == 1
    assert settings.lot_numbers.max_lot_number == 9999
    assert settings.reconciliation.ambiguous_fallback == AmbiguousFallbackPolicy.FIRST_MATCH
    assert settings.reconciliation.legacy_fallback_enabled is True
    assert settings.preferences.default_phase == "Phase 1"
    assert settings.preferences.default_block == "Block 1"


def test_global_settings_custom_instantiation():
    """Nested settings accept dicts as well as models."""
    settings = GlobalSettings(
        reconciliation={"ambiguous_fallback": "unresolved"},
        preferences=PreferenceSettings(namespace="td"),
    )
    assert settings.reconciliation.ambiguous_fallback == AmbiguousFallbackPolicy.UNRESOLVED
    assert settings.preferences.namespace == "td"


def test_lot_number_settings_rejects_inverted_bounds():
    with pytest.raises(ValueError, match="min_lot_number must be less than or equal"):
        LotNumberSettings(min_lot_number=10, max_lot_number=5)


def test_lot_number_settings_rejects_non_positive():
    with pytest.raises(ValidationError):
        LotNumberSettings(min_lot_number=0)


def test_settings_are_immutable():
    settings = ReconciliationSettings()
    with pytest.raises(ValidationError):
        settings.legacy_fallback_enabled = False


def test_model_forbids_extra_fields():
    class Sample(Model):
        name: str

    with pytest.raises(ValidationError):
        Sample(name="x", unexpected=1)
