# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lot-resident reconciliation: identity index, lot ordering, and the engine
that resolves occupants and flags ghost, ambiguous, and duplicate data.
"""

from .engine import reconcile, reconcile_detailed
from .index import IdentityIndex, build_identity_index
from .ordering import find_duplicate_lot_numbers, order_lots
from .results import ReconciledLotView, ReconciliationResult

__all__ = [
    "IdentityIndex",
    "ReconciledLotView",
    "ReconciliationResult",
    "build_identity_index",
    "find_duplicate_lot_numbers",
    "order_lots",
    "reconcile",
    "reconcile_detailed",
]
