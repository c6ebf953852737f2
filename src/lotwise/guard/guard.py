# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Mutation guard.

Decides whether a structural change may proceed, needs an explicit
confirmation, or must be rejected. The guard only returns a decision;
performing the change against the repository is the caller's job.

Rules:
- Deleting a lot with a valid assignment needs confirmation; a ghost or
  absent assignment affects no real occupant and proceeds.
- Clearing an assignment always proceeds.
- Deleting a block or phase that still has lots needs confirmation, since
  the delete cascades.
- Adding lots never overwrites: existing numbers are skipped and a request
  with nothing left to create is rejected.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..core.primitives import LotNumberSettings, clamp_lot_number
from .actions import (
    AddLot,
    AddLotRange,
    ClearAssignment,
    DeleteBlock,
    DeleteLot,
    DeletePhase,
    MutationAction,
)
from .decisions import Decision, GuardContext

logger = logging.getLogger(__name__)


def normalize_lot_range(
    start: int, end: int, settings: Optional[LotNumberSettings] = None
) -> Tuple[int, int]:
    """
    Clamp both bounds into the configured limits and order them ascending.

    Raises:
        ValueError: If either bound is negative
    """
    if start < 0 or end < 0:
        raise ValueError(f"Lot range bounds must not be negative, got {start}..{end}")
    low = clamp_lot_number(start, settings)
    high = clamp_lot_number(end, settings)
    return (min(low, high), max(low, high))


def _guard_delete_lot(action: DeleteLot, context: GuardContext) -> Decision:
    lot = context.find_lot(action.lot_id)
    if lot is None:
        return Decision.reject(f"Lot '{action.lot_id}' does not exist.")
    if context.has_valid_assignment(lot):
        return Decision.confirm(f"{lot.label} is assigned to a resident. Delete anyway?")
    if lot.assigned_resident_id is not None:
        logger.debug(
            f"{lot.label} has a ghost assignment to '{lot.assigned_resident_id}'; "
            "deleting without confirmation"
        )
    return Decision.proceed()


def _guard_clear_assignment(action: ClearAssignment, context: GuardContext) -> Decision:
    if context.find_lot(action.lot_id) is None:
        return Decision.reject(f"Lot '{action.lot_id}' does not exist.")
    return Decision.proceed()


def _guard_delete_block(action: DeleteBlock, context: GuardContext) -> Decision:
    if context.lots_in_block(action.phase_id, action.block_id):
        return Decision.confirm(
            "This block has lots. Deleting it will delete ALL its lots. Continue?"
        )
    return Decision.proceed()


def _guard_delete_phase(action: DeletePhase, context: GuardContext) -> Decision:
    if context.lots_in_phase(action.phase_id):
        return Decision.confirm(
            "This phase has lots. Deleting it will also delete ALL its blocks "
            "and lots. Continue?"
        )
    return Decision.proceed()


def _guard_add_lots(
    phase_id: str,
    block_id: str,
    start: int,
    end: int,
    context: GuardContext,
) -> Decision:
    existing = {lot.lot_no for lot in context.lots_in_block(phase_id, block_id)}
    requested = range(start, end + 1)
    to_create = [n for n in requested if n not in existing]
    skipped = [n for n in requested if n in existing]

    if not to_create:
        if start == end:
            return Decision.reject(f"Lot {start} already exists.", skipped=skipped)
        return Decision.reject(
            f"Lots {start}-{end} already exist.", skipped=skipped
        )
    if skipped:
        logger.info(f"Skipping existing lots {skipped} in {phase_id}/{block_id}")
    return Decision.proceed(lot_numbers=to_create, skipped=skipped)


def guard_mutation(
    action: MutationAction,
    context: GuardContext,
    settings: Optional[LotNumberSettings] = None,
) -> Decision:
    """
    Decide whether a structural mutation may proceed.

    Args:
        action: The requested mutation
        context: Snapshot of known lots and existing resident ids
        settings: Lot number bounds for add actions; defaults when omitted

    Returns:
        Decision of PROCEED, CONFIRM (with a reason to show the operator),
        or REJECT (with the reason)

    Raises:
        TypeError: If the action is not a known mutation
    """
    if isinstance(action, DeleteLot):
        return _guard_delete_lot(action, context)
    if isinstance(action, ClearAssignment):
        return _guard_clear_assignment(action, context)
    if isinstance(action, DeleteBlock):
        return _guard_delete_block(action, context)
    if isinstance(action, DeletePhase):
        return _guard_delete_phase(action, context)
    if isinstance(action, AddLot):
        lot_no = clamp_lot_number(action.lot_no, settings)
        return _guard_add_lots(action.phase_id, action.block_id, lot_no, lot_no, context)
    if isinstance(action, AddLotRange):
        start, end = normalize_lot_range(action.start, action.end, settings)
        return _guard_add_lots(action.phase_id, action.block_id, start, end, context)
    raise TypeError(f"Unsupported mutation action: {type(action).__name__}")
