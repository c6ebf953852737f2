# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Session layer: view scope, remembered selections, stale-request handling,
and the async controller that drives the admin resident list.
"""

from .controller import ConfirmCallback, MutationOutcome, ResidentListController
from .generation import RequestGeneration
from .preferences import (
    KEY_BLOCK,
    KEY_EXPANDED_LOT,
    KEY_PHASE,
    InMemoryPreferenceStore,
    PreferenceStore,
    ScopePreferences,
)
from .scope import ViewScope, pick_valid_selection

__all__ = [
    "ConfirmCallback",
    "InMemoryPreferenceStore",
    "KEY_BLOCK",
    "KEY_EXPANDED_LOT",
    "KEY_PHASE",
    "MutationOutcome",
    "PreferenceStore",
    "RequestGeneration",
    "ResidentListController",
    "ScopePreferences",
    "ViewScope",
    "pick_valid_selection",
]
