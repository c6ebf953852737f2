# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reconciliation output models.

A `ReconciledLotView` is the per-lot row a UI renders; a
`ReconciliationResult` wraps the rows of one pass together with the
data-integrity findings surfaced along the way.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import Field, computed_field

from ..core.primitives import LotStateEnum, Model
from ..registry import Lot, Resident


class ReconciledLotView(Model):
    """
    Derived, non-persistent view of one lot and its resolved occupant.

    Attributes:
        lot: The source lot
        resident: Resolved occupant, or None
        ghost_assigned: True iff assigned_resident_id is set but resolves to
            no existing resident
        assigned_resident_id: Carried through for diagnostics
        state: Classification of how (or whether) the occupant was resolved
        fallback_candidates: Resident ids matched by legacy lot label; more
            than one entry means the legacy match was ambiguous
    """

    lot: Lot
    resident: Optional[Resident] = None
    ghost_assigned: bool = False
    assigned_resident_id: Optional[str] = None
    state: LotStateEnum = LotStateEnum.VACANT
    fallback_candidates: Tuple[str, ...] = ()

    @property
    def lot_no(self) -> int:
        return self.lot.lot_no

    @property
    def is_occupied(self) -> bool:
        return self.resident is not None

    @property
    def is_ambiguous(self) -> bool:
        return len(self.fallback_candidates) > 1

    @property
    def has_valid_assignment(self) -> bool:
        """Assignment present and resolving to an existing resident."""
        return self.state == LotStateEnum.ASSIGNED


class ReconciliationResult(Model):
    """
    Views for one reconciliation pass plus integrity findings.

    Duplicate lot numbers and duplicate resident ids are reported, never
    repaired; ghost and ambiguous lots are listed by lot id so the caller
    can offer the matching repair action.
    """

    views: List[ReconciledLotView] = Field(default_factory=list)
    duplicate_lot_numbers: Dict[Tuple[str, str], List[int]] = Field(
        default_factory=dict
    )
    duplicate_resident_ids: Tuple[str, ...] = ()
    ghost_lots: Tuple[str, ...] = ()
    ambiguous_lots: Tuple[str, ...] = ()

    @computed_field
    @property
    def total_lots(self) -> int:
        return len(self.views)

    @computed_field
    @property
    def occupied_lots(self) -> int:
        """Lots with a resolved occupant (authoritative or legacy)."""
        return sum(1 for view in self.views if view.is_occupied)

    @computed_field
    @property
    def vacant_lots(self) -> int:
        """Lots genuinely vacant; ghost and ambiguous lots are not counted."""
        return sum(1 for view in self.views if view.state == LotStateEnum.VACANT)

    @computed_field
    @property
    def ghost_count(self) -> int:
        return len(self.ghost_lots)

    @computed_field
    @property
    def legacy_match_count(self) -> int:
        return sum(
            1 for view in self.views if view.state == LotStateEnum.LEGACY_MATCH
        )

    @computed_field
    @property
    def occupancy_rate(self) -> float:
        """Share of lots with a resolved occupant."""
        if self.total_lots == 0:
            return 0.0
        return self.occupied_lots / self.total_lots

    @property
    def has_integrity_issues(self) -> bool:
        return bool(
            self.duplicate_lot_numbers
            or self.duplicate_resident_ids
            or self.ghost_lots
            or self.ambiguous_lots
        )
