# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lotwise Core Framework

Foundational building blocks shared by the registry, reconciliation,
guard, and session layers.
"""

from . import primitives
from .primitives import (
    AmbiguousFallbackPolicy,
    DecisionKindEnum,
    GlobalSettings,
    LotNumberSettings,
    LotStateEnum,
    LotStatusEnum,
    Model,
    MutationKindEnum,
    OccupancyTypeEnum,
    PreferenceSettings,
    ReconciliationSettings,
    ResidencyTypeEnum,
)

__all__ = [
    "primitives",
    "AmbiguousFallbackPolicy",
    "DecisionKindEnum",
    "GlobalSettings",
    "LotNumberSettings",
    "LotStateEnum",
    "LotStatusEnum",
    "Model",
    "MutationKindEnum",
    "OccupancyTypeEnum",
    "PreferenceSettings",
    "ReconciliationSettings",
    "ResidencyTypeEnum",
]
