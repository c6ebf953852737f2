# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Mutation guard: policy decisions for structural changes to the
Phase -> Block -> Lot hierarchy and lot assignments.
"""

from .actions import (
    AddLot,
    AddLotRange,
    ClearAssignment,
    DeleteBlock,
    DeleteLot,
    DeletePhase,
    MutationAction,
    parse_action,
)
from .decisions import Decision, GuardContext
from .guard import guard_mutation, normalize_lot_range

__all__ = [
    "AddLot",
    "AddLotRange",
    "ClearAssignment",
    "Decision",
    "DeleteBlock",
    "DeleteLot",
    "DeletePhase",
    "GuardContext",
    "MutationAction",
    "guard_mutation",
    "normalize_lot_range",
    "parse_action",
]
