# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Persistence interfaces.

The engine works on data already fetched; these interfaces describe what a
backing store must offer for the controller to fetch and mutate one
(phase, block) scope at a time. Lots returned for a scope must carry that
scope's phase_id and block_id.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..registry import Lot, Phase, Resident


class LotRepository(ABC):
    """Hierarchy and lot persistence."""

    @abstractmethod
    async def get_phases_with_blocks(self) -> List[Phase]:
        """All phases with their blocks."""

    @abstractmethod
    async def add_phase(self, name: str) -> Optional[str]:
        """Create a phase; returns its id, or None if the name is blank."""

    @abstractmethod
    async def delete_phase(self, phase_id: str) -> None:
        """Delete a phase, its blocks, and all their lots."""

    @abstractmethod
    async def add_block(self, phase_id: str, name: str) -> Optional[str]:
        """Create a block; returns its id, or None if the name is blank or the phase is unknown."""

    @abstractmethod
    async def delete_block(self, phase_id: str, block_id: str) -> None:
        """Delete a block and all of its lots."""

    @abstractmethod
    async def get_lots(self, phase_id: str, block_id: str) -> List[Lot]:
        """Lots in a scope, ordered by lot number."""

    @abstractmethod
    async def add_lot(self, phase_id: str, block_id: str, lot_no: int) -> List[Lot]:
        """Create one lot unless its number exists; returns the lots created."""

    @abstractmethod
    async def add_lot_range(
        self, phase_id: str, block_id: str, start: int, end: int
    ) -> List[Lot]:
        """Create the missing lots of an inclusive range; returns the lots created."""

    @abstractmethod
    async def set_lot_assignment(
        self,
        phase_id: str,
        block_id: str,
        lot_id: str,
        resident_id: Optional[str],
    ) -> Optional[Lot]:
        """Set or clear a lot's resident; returns the updated lot, or None if unknown."""

    @abstractmethod
    async def delete_lot(self, phase_id: str, block_id: str, lot_id: str) -> None:
        """Delete one lot."""


class ResidentRepository(ABC):
    """Resident persistence (read-only from this library's point of view)."""

    @abstractmethod
    async def get_residents(self) -> List[Resident]:
        """All registered residents."""
