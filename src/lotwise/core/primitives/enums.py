# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class ResidencyTypeEnum(str, Enum):
    """How a resident holds their lot."""

    OWNER = "Owner"
    RENTER = "Renter"


class OccupancyTypeEnum(str, Enum):
    """Self-reported occupancy of a resident's unit (descriptive only)."""

    OCCUPIED = "Occupied"
    VACANT = "Vacant"


class LotStatusEnum(str, Enum):
    """
    Display status stored on a lot document.

    Informational only: reconciliation never trusts it as the source of
    truth for occupancy.
    """

    OCCUPIED = "Occupied"
    VACANT = "Vacant"


class LotStateEnum(str, Enum):
    """
    Reconciled state of a lot.

    Options:
        ASSIGNED: assigned_resident_id resolves to an existing resident
        LEGACY_MATCH: no assignment; resident found by legacy lot label
        GHOST: assigned_resident_id references a resident that no longer exists
        AMBIGUOUS: no assignment; several legacy candidates and the policy
            refuses to pick one
        VACANT: no assignment and no legacy candidate
    """

    ASSIGNED = "Assigned"
    LEGACY_MATCH = "Legacy Match"
    GHOST = "Ghost"
    AMBIGUOUS = "Ambiguous"
    VACANT = "Vacant"


class AmbiguousFallbackPolicy(str, Enum):
    """What to do when several residents share the same legacy lot label."""

    FIRST_MATCH = "first_match"  # First candidate in input order wins
    UNRESOLVED = "unresolved"  # Leave the lot unresolved for an operator


class MutationKindEnum(str, Enum):
    """Structural mutations checked by the guard."""

    DELETE_LOT = "delete_lot"
    CLEAR_ASSIGNMENT = "clear_assignment"
    DELETE_BLOCK = "delete_block"
    DELETE_PHASE = "delete_phase"
    ADD_LOT = "add_lot"
    ADD_LOT_RANGE = "add_lot_range"


class DecisionKindEnum(str, Enum):
    """Outcome of a guard check."""

    PROCEED = "Proceed"
    CONFIRM = "ProceedWithConfirmation"
    REJECT = "Reject"
