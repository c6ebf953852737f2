# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
In-memory repository.

Stands in for the hosted document store in tests, demos, and local
tooling. Reads hand back copies so callers can never mutate stored state,
and an optional latency simulates a network round trip, which is what lets
stale-fetch handling be exercised.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.primitives import (
    LotNumberSettings,
    LotStatusEnum,
    make_id,
    make_lot_id,
    normalize_label,
    unique_id,
)
from ..guard import AddLot, AddLotRange, GuardContext, guard_mutation
from ..reconciliation import order_lots
from ..registry import Block, Lot, Phase, Resident
from .repository import LotRepository, ResidentRepository

logger = logging.getLogger(__name__)

ScopeKey = Tuple[str, str]


def _now_ms() -> int:
    return int(time.time() * 1000)


class InMemoryRepository(LotRepository, ResidentRepository):
    """
    Dict-backed implementation of both repository interfaces.

    Args:
        phases: Initial hierarchy
        lots: Initial lots, grouped by their (phase_id, block_id)
        residents: Initial residents
        latency: Seconds to sleep before each operation completes
        settings: Lot number bounds applied to add operations
    """

    def __init__(
        self,
        phases: Optional[Iterable[Phase]] = None,
        lots: Optional[Iterable[Lot]] = None,
        residents: Optional[Iterable[Resident]] = None,
        latency: float = 0.0,
        settings: Optional[LotNumberSettings] = None,
    ):
        self._phases: List[Phase] = list(phases or [])
        self._lots: Dict[ScopeKey, List[Lot]] = {}
        for lot in lots or []:
            self._lots.setdefault(lot.scope, []).append(lot)
        self._residents: List[Resident] = list(residents or [])
        self.latency = latency
        self.settings = settings or LotNumberSettings()

    async def _delay(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    # --- Residents ---

    async def get_residents(self) -> List[Resident]:
        await self._delay()
        return list(self._residents)

    def put_resident(self, resident: Resident) -> None:
        """Insert or replace a resident (registration happens elsewhere)."""
        self._residents = [r for r in self._residents if r.id != resident.id]
        self._residents.append(resident)

    def remove_resident(self, resident_id: str) -> None:
        """Out-of-band resident deletion; lots referencing it become ghosts."""
        self._residents = [r for r in self._residents if r.id != resident_id]

    # --- Hierarchy ---

    async def get_phases_with_blocks(self) -> List[Phase]:
        await self._delay()
        return [phase.model_copy(deep=True) for phase in self._phases]

    async def add_phase(self, name: str) -> Optional[str]:
        await self._delay()
        clean = normalize_label(name)
        if not clean:
            return None
        phase_id = unique_id(make_id(clean), {p.id for p in self._phases})
        self._phases.append(Phase(id=phase_id, name=clean))
        logger.debug(f"Added phase '{clean}' as {phase_id}")
        return phase_id

    async def delete_phase(self, phase_id: str) -> None:
        await self._delay()
        self._phases = [p for p in self._phases if p.id != phase_id]
        for key in [key for key in self._lots if key[0] == phase_id]:
            del self._lots[key]

    async def add_block(self, phase_id: str, name: str) -> Optional[str]:
        await self._delay()
        clean = normalize_label(name)
        if not clean:
            return None
        for i, phase in enumerate(self._phases):
            if phase.id != phase_id:
                continue
            block_id = unique_id(make_id(clean), {b.id for b in phase.blocks})
            self._phases[i] = phase.copy_with(
                blocks=[*phase.blocks, Block(id=block_id, name=clean)]
            )
            return block_id
        return None

    async def delete_block(self, phase_id: str, block_id: str) -> None:
        await self._delay()
        self._phases = [
            p
            if p.id != phase_id
            else p.copy_with(blocks=[b for b in p.blocks if b.id != block_id])
            for p in self._phases
        ]
        self._lots.pop((phase_id, block_id), None)

    # --- Lots ---

    async def get_lots(self, phase_id: str, block_id: str) -> List[Lot]:
        await self._delay()
        return [
            lot.model_copy(deep=True)
            for lot in order_lots(self._lots.get((phase_id, block_id), []))
        ]

    def _create(self, phase_id: str, block_id: str, numbers: Iterable[int]) -> List[Lot]:
        key = (phase_id, block_id)
        stamp = _now_ms()
        created = [
            Lot(
                id=make_lot_id(phase_id, block_id, n),
                phase_id=phase_id,
                block_id=block_id,
                lot_no=n,
                status=LotStatusEnum.VACANT,
                created_at=stamp,
                updated_at=stamp,
            )
            for n in numbers
        ]
        self._lots[key] = order_lots([*self._lots.get(key, []), *created])
        return created

    async def add_lot(self, phase_id: str, block_id: str, lot_no: int) -> List[Lot]:
        await self._delay()
        context = GuardContext(lots=self._lots.get((phase_id, block_id), []))
        decision = guard_mutation(
            AddLot(phase_id=phase_id, block_id=block_id, lot_no=lot_no),
            context,
            self.settings,
        )
        if decision.is_rejected:
            logger.info(decision.reason)
            return []
        return self._create(phase_id, block_id, decision.lot_numbers)

    async def add_lot_range(
        self, phase_id: str, block_id: str, start: int, end: int
    ) -> List[Lot]:
        await self._delay()
        context = GuardContext(lots=self._lots.get((phase_id, block_id), []))
        decision = guard_mutation(
            AddLotRange(phase_id=phase_id, block_id=block_id, start=start, end=end),
            context,
            self.settings,
        )
        if decision.is_rejected:
            logger.info(decision.reason)
            return []
        return self._create(phase_id, block_id, decision.lot_numbers)

    async def set_lot_assignment(
        self,
        phase_id: str,
        block_id: str,
        lot_id: str,
        resident_id: Optional[str],
    ) -> Optional[Lot]:
        await self._delay()
        key = (phase_id, block_id)
        updated: Optional[Lot] = None
        lots = []
        for lot in self._lots.get(key, []):
            if lot.id == lot_id:
                lot = lot.with_assignment(resident_id, updated_at=_now_ms())
                updated = lot
            lots.append(lot)
        if key in self._lots:
            self._lots[key] = lots
        return updated

    async def delete_lot(self, phase_id: str, block_id: str, lot_id: str) -> None:
        await self._delay()
        key = (phase_id, block_id)
        if key in self._lots:
            self._lots[key] = [lot for lot in self._lots[key] if lot.id != lot_id]

    def all_lots(self) -> List[Lot]:
        """Every stored lot across scopes, for building guard contexts."""
        return [lot for lots in self._lots.values() for lot in lots]
