# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lot-resident reconciliation.

Resolves which resident occupies each lot. The lot's `assigned_resident_id`
is authoritative; lots without one fall back to matching residents by the
number in their legacy lot label. A present assignment is never overridden
by the fallback, even when it dangles.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from ..core.primitives import (
    AmbiguousFallbackPolicy,
    LotStateEnum,
    ReconciliationSettings,
)
from ..registry import Lot, Resident
from .index import IdentityIndex, build_identity_index
from .ordering import find_duplicate_lot_numbers, order_lots
from .results import ReconciledLotView, ReconciliationResult

logger = logging.getLogger(__name__)


def _in_fallback_scope(
    resident: Resident, phase: Optional[str], block: Optional[str]
) -> bool:
    # Residents without a legacy phase/block label are not excluded on that axis
    if phase is not None and resident.phase is not None and resident.phase != phase:
        return False
    if block is not None and resident.block is not None and resident.block != block:
        return False
    return True


def _legacy_candidates(
    residents: Sequence[Resident],
    phase: Optional[str],
    block: Optional[str],
) -> Dict[int, List[Resident]]:
    """
    Residents grouped by legacy lot number, in input order.

    Only the record the identity index keeps for each id takes part, so a
    superseded duplicate never claims a lot.
    """
    # Position of the record each id resolves to, last write wins as in the index
    winner = {resident.id: position for position, resident in enumerate(residents)}
    candidates: Dict[int, List[Resident]] = defaultdict(list)
    for position, resident in enumerate(residents):
        if winner[resident.id] != position:
            continue
        lot_no = resident.legacy_lot_number
        if lot_no is None or not _in_fallback_scope(resident, phase, block):
            continue
        candidates[lot_no].append(resident)
    return candidates


def _resolve_lot(
    lot: Lot,
    index: IdentityIndex,
    candidates: Dict[int, List[Resident]],
    settings: ReconciliationSettings,
) -> ReconciledLotView:
    assigned_id = lot.assigned_resident_id

    # Authoritative path
    if assigned_id is not None:
        resident = index.get(assigned_id)
        if resident is not None:
            return ReconciledLotView(
                lot=lot,
                resident=resident,
                assigned_resident_id=assigned_id,
                state=LotStateEnum.ASSIGNED,
            )
        logger.warning(
            f"{lot.label} ({lot.id}) references missing resident '{assigned_id}'"
        )
        return ReconciledLotView(
            lot=lot,
            ghost_assigned=True,
            assigned_resident_id=assigned_id,
            state=LotStateEnum.GHOST,
        )

    # Legacy fallback
    matches = candidates.get(lot.lot_no, []) if settings.legacy_fallback_enabled else []
    if not matches:
        return ReconciledLotView(lot=lot, state=LotStateEnum.VACANT)

    candidate_ids = tuple(r.id for r in matches)
    if len(matches) == 1:
        return ReconciledLotView(
            lot=lot,
            resident=matches[0],
            state=LotStateEnum.LEGACY_MATCH,
            fallback_candidates=candidate_ids,
        )

    logger.warning(
        f"{lot.label} ({lot.id}) has {len(matches)} legacy candidates: "
        f"{', '.join(candidate_ids)}"
    )
    if settings.ambiguous_fallback == AmbiguousFallbackPolicy.UNRESOLVED:
        return ReconciledLotView(
            lot=lot,
            state=LotStateEnum.AMBIGUOUS,
            fallback_candidates=candidate_ids,
        )
    return ReconciledLotView(
        lot=lot,
        resident=matches[0],
        state=LotStateEnum.LEGACY_MATCH,
        fallback_candidates=candidate_ids,
    )


def reconcile_detailed(
    lots: Sequence[Lot],
    residents: Sequence[Resident],
    *,
    phase: Optional[str] = None,
    block: Optional[str] = None,
    settings: Optional[ReconciliationSettings] = None,
) -> ReconciliationResult:
    """
    Reconcile lots against residents and report integrity findings.

    Args:
        lots: Lots to resolve, usually one (phase, block) scope
        residents: Full resident collection
        phase: Legacy phase name restricting fallback candidates
        block: Legacy block name restricting fallback candidates
        settings: Reconciliation settings; defaults when omitted

    Returns:
        ReconciliationResult with one view per lot, ordered by lot number

    Raises:
        TypeError: If lots or residents is None
    """
    if lots is None or residents is None:
        raise TypeError("reconcile requires lot and resident collections, got None")

    lots = list(lots)
    residents = list(residents)
    settings = settings or ReconciliationSettings()
    index = build_identity_index(residents)
    candidates = _legacy_candidates(residents, phase, block)

    duplicates = find_duplicate_lot_numbers(lots)
    for (phase_id, block_id), numbers in duplicates.items():
        logger.warning(
            f"Duplicate lot numbers in {phase_id}/{block_id}: {numbers}"
        )

    views = [_resolve_lot(lot, index, candidates, settings) for lot in order_lots(lots)]

    return ReconciliationResult(
        views=views,
        duplicate_lot_numbers=duplicates,
        duplicate_resident_ids=index.duplicate_ids,
        ghost_lots=tuple(v.lot.id for v in views if v.ghost_assigned),
        ambiguous_lots=tuple(v.lot.id for v in views if v.is_ambiguous),
    )


def reconcile(
    lots: Sequence[Lot],
    residents: Sequence[Resident],
    *,
    phase: Optional[str] = None,
    block: Optional[str] = None,
    settings: Optional[ReconciliationSettings] = None,
) -> List[ReconciledLotView]:
    """One reconciled view per lot, ordered by lot number."""
    return reconcile_detailed(
        lots, residents, phase=phase, block=block, settings=settings
    ).views
