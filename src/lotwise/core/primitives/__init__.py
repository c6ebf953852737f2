# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lotwise Core Primitives

Essential building blocks shared by every component: the immutable model
base, enums, constrained types, and settings.
"""

from .enums import (
    AmbiguousFallbackPolicy,
    DecisionKindEnum,
    LotStateEnum,
    LotStatusEnum,
    MutationKindEnum,
    OccupancyTypeEnum,
    ResidencyTypeEnum,
)
from .labels import (
    clamp_lot_number,
    lot_label,
    lot_number_from_label,
    make_id,
    make_lot_id,
    normalize_label,
    unique_id,
)
from .model import Model
from .settings import (
    GlobalSettings,
    LotNumberSettings,
    PreferenceSettings,
    ReconciliationSettings,
)
from .types import LotBound, LotNumber, NonEmptyStr, NonNegativeInt, PositiveInt

__all__ = [
    # Enums
    "AmbiguousFallbackPolicy",
    "DecisionKindEnum",
    "LotStateEnum",
    "LotStatusEnum",
    "MutationKindEnum",
    "OccupancyTypeEnum",
    "ResidencyTypeEnum",
    # Labels
    "clamp_lot_number",
    "lot_label",
    "lot_number_from_label",
    "make_id",
    "make_lot_id",
    "normalize_label",
    "unique_id",
    # Model
    "Model",
    # Settings
    "GlobalSettings",
    "LotNumberSettings",
    "PreferenceSettings",
    "ReconciliationSettings",
    # Types
    "LotBound",
    "LotNumber",
    "NonEmptyStr",
    "NonNegativeInt",
    "PositiveInt",
]
