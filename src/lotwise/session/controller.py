# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Resident list controller.

Owns the mutable state behind the admin "List of Residents" screen: the
hierarchy, the resident collection, the current scope, and the cached lots
for that scope. Reconciliation and guard checks run as pure functions over
snapshots of that state.

Fetches race against scope changes. Each fetch takes a token from a
`RequestGeneration` before awaiting and only commits if no newer fetch
has been issued since, so a slow response for a previously selected scope
can never overwrite the lots of the current one.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from ..core.primitives import GlobalSettings, Model
from ..guard import (
    AddLot,
    AddLotRange,
    ClearAssignment,
    Decision,
    DeleteBlock,
    DeleteLot,
    DeletePhase,
    GuardContext,
    MutationAction,
    guard_mutation,
)
from ..reconciliation import ReconciledLotView, ReconciliationResult, reconcile_detailed
from ..registry import (
    Lot,
    Phase,
    Resident,
    blocks_for_phase_name,
    filter_residents,
    find_phase,
)
from ..store import LotRepository, ResidentRepository
from .generation import RequestGeneration
from .preferences import InMemoryPreferenceStore, ScopePreferences
from .scope import ViewScope, pick_valid_selection

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], bool]


class MutationOutcome(Model):
    """Guard decision for a requested mutation and whether it was carried out."""

    decision: Decision
    performed: bool = False


class ResidentListController:
    """
    Async controller for browsing and maintaining lots per (phase, block).

    Args:
        lots: Repository for the hierarchy and lots
        residents: Repository for residents
        preferences: Remembered selections; an in-memory store when omitted
        settings: Global settings; defaults when omitted
    """

    def __init__(
        self,
        lots: LotRepository,
        residents: ResidentRepository,
        preferences: Optional[ScopePreferences] = None,
        settings: Optional[GlobalSettings] = None,
    ):
        self.settings = settings or GlobalSettings()
        self.lot_repository = lots
        self.resident_repository = residents
        self.preferences = preferences or ScopePreferences(
            InMemoryPreferenceStore(), self.settings.preferences
        )

        self.phases: List[Phase] = []
        self.residents: List[Resident] = []
        self.lots: List[Lot] = []
        self.scope: ViewScope = self.preferences.read_scope()
        self.expanded_lot: Optional[int] = self.preferences.read_expanded_lot(self.scope)

        self.phases_loading = False
        self.lots_loading = False
        self._phase_requests = RequestGeneration()
        self._lot_requests = RequestGeneration()

    # --- Loading ---

    async def load_residents(self) -> List[Resident]:
        self.residents = await self.resident_repository.get_residents()
        return self.residents

    async def load_phase_nodes(self) -> Optional[List[Phase]]:
        """Fetch the hierarchy; returns None when superseded by a newer fetch."""
        token = self._phase_requests.issue()
        self.phases_loading = True
        try:
            nodes = await self.lot_repository.get_phases_with_blocks()
            if not self._phase_requests.is_current(token):
                logger.debug(f"Discarding stale hierarchy fetch #{token}")
                return None
            self.phases = nodes
            return nodes
        finally:
            if self._phase_requests.is_current(token):
                self.phases_loading = False

    async def load_lots_for(self, scope: ViewScope) -> Optional[List[Lot]]:
        """
        Fetch lots for a scope and commit them if this is still the latest request.

        Returns:
            The committed lots, or None if a newer request superseded this one
        """
        token = self._lot_requests.issue()
        self.lots_loading = True
        try:
            ids = scope.resolve_ids(self.phases)
            if ids is None:
                lots: List[Lot] = []
            else:
                lots = await self.lot_repository.get_lots(*ids)
            if not self._lot_requests.is_current(token):
                logger.debug(
                    f"Discarding stale lot fetch #{token} for "
                    f"{scope.phase_name}/{scope.block_name}"
                )
                return None
            self.lots = lots
            return lots
        finally:
            if self._lot_requests.is_current(token):
                self.lots_loading = False

    def _select(self, scope: ViewScope) -> None:
        self.scope = scope
        self.preferences.write_scope(scope)
        self.expanded_lot = self.preferences.read_expanded_lot(scope)

    async def initialize(self) -> None:
        """Load residents and hierarchy, restore the remembered scope, load its lots."""
        await self.load_residents()
        nodes = await self.load_phase_nodes()
        if nodes is None:
            return
        remembered = self.preferences.read_scope()
        self._select(
            pick_valid_selection(
                nodes,
                remembered.phase_name,
                remembered.block_name,
                self.settings.preferences,
            )
        )
        await self.load_lots_for(self.scope)

    async def change_phase(self, phase_name: str) -> None:
        """Select a phase and its first block."""
        blocks = blocks_for_phase_name(self.phases, phase_name)
        block_name = blocks[0] if blocks else self.settings.preferences.default_block
        self._select(ViewScope(phase_name=phase_name, block_name=block_name))
        await self.load_lots_for(self.scope)

    async def change_block(self, block_name: str) -> None:
        self._select(ViewScope(phase_name=self.scope.phase_name, block_name=block_name))
        await self.load_lots_for(self.scope)

    async def apply_selection(self, phase_name: str, block_name: str) -> None:
        """Reload the hierarchy, then select the closest valid scope."""
        nodes = await self.load_phase_nodes()
        if nodes is None:
            return
        self._select(
            pick_valid_selection(nodes, phase_name, block_name, self.settings.preferences)
        )
        await self.load_lots_for(self.scope)

    def toggle_expanded(self, lot_no: int) -> Optional[int]:
        """Expand a lot row, or collapse it if already expanded."""
        self.expanded_lot = None if self.expanded_lot == lot_no else lot_no
        self.preferences.write_expanded_lot(self.scope, self.expanded_lot)
        return self.expanded_lot

    # --- Derived views ---

    def reconciliation(self) -> ReconciliationResult:
        return reconcile_detailed(
            self.lots,
            self.residents,
            phase=self.scope.phase_name,
            block=self.scope.block_name,
            settings=self.settings.reconciliation,
        )

    def rows(self) -> List[ReconciledLotView]:
        """Reconciled lot rows for the current scope."""
        return self.reconciliation().views

    def search_residents(self, query: str = "") -> List[Resident]:
        """Residents registered to the current scope matching a search query."""
        return filter_residents(
            self.residents,
            phase=self.scope.phase_name,
            block=self.scope.block_name,
            query=query,
        )

    # --- Guarded mutations ---

    def _context(self, lots: List[Lot]) -> GuardContext:
        return GuardContext(
            lots=lots, resident_ids=frozenset(r.id for r in self.residents)
        )

    def _current_ids(self) -> Optional[Tuple[str, str]]:
        return self.scope.resolve_ids(self.phases)

    def _decide(
        self,
        action: MutationAction,
        context: GuardContext,
        confirm: Optional[ConfirmCallback],
    ) -> MutationOutcome:
        decision = guard_mutation(action, context, self.settings.lot_numbers)
        if decision.is_rejected:
            logger.info(f"{action.kind} rejected: {decision.reason}")
            return MutationOutcome(decision=decision)
        if decision.requires_confirmation and (
            confirm is None or not confirm(decision.reason or "")
        ):
            logger.info(f"{action.kind} not confirmed")
            return MutationOutcome(decision=decision)
        return MutationOutcome(decision=decision, performed=True)

    async def delete_lot(
        self, lot_id: str, confirm: Optional[ConfirmCallback] = None
    ) -> MutationOutcome:
        outcome = self._decide(DeleteLot(lot_id=lot_id), self._context(self.lots), confirm)
        if outcome.performed:
            lot = next(lot for lot in self.lots if lot.id == lot_id)
            await self.lot_repository.delete_lot(lot.phase_id, lot.block_id, lot.id)
            await self.load_lots_for(self.scope)
        return outcome

    async def clear_assignment(self, lot_id: str) -> MutationOutcome:
        outcome = self._decide(
            ClearAssignment(lot_id=lot_id), self._context(self.lots), None
        )
        if outcome.performed:
            lot = next(lot for lot in self.lots if lot.id == lot_id)
            await self.lot_repository.set_lot_assignment(
                lot.phase_id, lot.block_id, lot.id, None
            )
            await self.load_lots_for(self.scope)
        return outcome

    async def assign_resident(self, lot_id: str, resident_id: str) -> MutationOutcome:
        """Point a lot at an existing resident; unknown ids would create a ghost."""
        lot = next((lot for lot in self.lots if lot.id == lot_id), None)
        if lot is None:
            return MutationOutcome(decision=Decision.reject(f"Lot '{lot_id}' does not exist."))
        if all(r.id != resident_id for r in self.residents):
            return MutationOutcome(
                decision=Decision.reject(f"Resident '{resident_id}' does not exist.")
            )
        await self.lot_repository.set_lot_assignment(
            lot.phase_id, lot.block_id, lot.id, resident_id
        )
        await self.load_lots_for(self.scope)
        return MutationOutcome(decision=Decision.proceed(), performed=True)

    def _stored_outcome(
        self, decision: Decision, created: List[Lot]
    ) -> MutationOutcome:
        """
        Outcome of an add as the store carried it out.

        The guard ran against the cached lots; when those were stale the store
        skips numbers that already exist, so report what it actually created.
        """
        numbers = tuple(lot.lot_no for lot in created)
        if numbers == decision.lot_numbers:
            return MutationOutcome(decision=decision, performed=True)
        skipped = sorted(set(decision.lot_numbers + decision.skipped) - set(numbers))
        if not numbers:
            logger.info(f"Store created no lots; {skipped} already exist")
            return MutationOutcome(
                decision=Decision.reject("Lots already exist.", skipped=skipped)
            )
        return MutationOutcome(
            decision=Decision.proceed(lot_numbers=numbers, skipped=skipped),
            performed=True,
        )

    async def add_lot(self, lot_no: int) -> MutationOutcome:
        ids = self._current_ids()
        if ids is None:
            return MutationOutcome(decision=Decision.reject("No phase/block selected."))
        outcome = self._decide(
            AddLot(phase_id=ids[0], block_id=ids[1], lot_no=lot_no),
            self._context(self.lots),
            None,
        )
        if outcome.performed:
            created = await self.lot_repository.add_lot(
                *ids, outcome.decision.lot_numbers[0]
            )
            await self.load_lots_for(self.scope)
            return self._stored_outcome(outcome.decision, created)
        return outcome

    async def add_lot_range(self, start: int, end: int) -> MutationOutcome:
        ids = self._current_ids()
        if ids is None:
            return MutationOutcome(decision=Decision.reject("No phase/block selected."))
        outcome = self._decide(
            AddLotRange(phase_id=ids[0], block_id=ids[1], start=start, end=end),
            self._context(self.lots),
            None,
        )
        if outcome.performed:
            created = await self.lot_repository.add_lot_range(*ids, start, end)
            await self.load_lots_for(self.scope)
            return self._stored_outcome(outcome.decision, created)
        return outcome

    async def delete_block(
        self, phase_id: str, block_id: str, confirm: Optional[ConfirmCallback] = None
    ) -> MutationOutcome:
        lots = await self.lot_repository.get_lots(phase_id, block_id)
        outcome = self._decide(
            DeleteBlock(phase_id=phase_id, block_id=block_id), self._context(lots), confirm
        )
        if outcome.performed:
            await self.lot_repository.delete_block(phase_id, block_id)
            await self.apply_selection(self.scope.phase_name, self.scope.block_name)
        return outcome

    async def delete_phase(
        self, phase_id: str, confirm: Optional[ConfirmCallback] = None
    ) -> MutationOutcome:
        # The cascade reaches every block the store holds, not just cached ones
        nodes = await self.lot_repository.get_phases_with_blocks()
        phase = find_phase(nodes, phase_id)
        lots: List[Lot] = []
        for block in phase.blocks if phase else []:
            lots.extend(await self.lot_repository.get_lots(phase_id, block.id))
        outcome = self._decide(DeletePhase(phase_id=phase_id), self._context(lots), confirm)
        if outcome.performed:
            await self.lot_repository.delete_phase(phase_id)
            await self.apply_selection(self.scope.phase_name, self.scope.block_name)
        return outcome

    async def add_phase(self, name: str) -> Optional[str]:
        phase_id = await self.lot_repository.add_phase(name)
        if phase_id is not None:
            await self.load_phase_nodes()
        return phase_id

    async def add_block(self, phase_id: str, name: str) -> Optional[str]:
        block_id = await self.lot_repository.add_block(phase_id, name)
        if block_id is not None:
            await self.load_phase_nodes()
        return block_id
