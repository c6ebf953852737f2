# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Lotwise testing.

Factories build residents, lots, and hierarchies with sensible defaults so
tests only spell out the fields they care about.
"""

from __future__ import annotations

from typing import List, Optional

import pytest

from lotwise.core.primitives import lot_label, make_lot_id
from lotwise.registry import Block, Lot, Phase, Resident
from lotwise.store import InMemoryRepository


def make_resident(
    resident_id: str,
    lot: str = "Lot 1",
    first_name: str = "Test",
    last_name: Optional[str] = None,
    phase: Optional[str] = "Phase 1",
    block: Optional[str] = "Block 1",
    **kwargs,
) -> Resident:
    """
    Create a resident for testing.

    Example:
        >>> make_resident("r1", lot="Lot 2").legacy_lot_number
        2
    """
    return Resident(
        id=resident_id,
        first_name=first_name,
        last_name=last_name or resident_id.upper(),
        lot=lot,
        phase=phase,
        block=block,
        **kwargs,
    )


def make_lot(
    lot_no: int,
    assigned_resident_id: Optional[str] = None,
    phase_id: str = "phase-1",
    block_id: str = "block-1",
    lot_id: Optional[str] = None,
    **kwargs,
) -> Lot:
    """Create a lot in a scope, with the store's id convention by default."""
    return Lot(
        id=lot_id or make_lot_id(phase_id, block_id, lot_no),
        phase_id=phase_id,
        block_id=block_id,
        lot_no=lot_no,
        assigned_resident_id=assigned_resident_id,
        **kwargs,
    )


def sample_hierarchy() -> List[Phase]:
    """Two phases: Phase 1 with Blocks 1-2, Phase 2 with Block 1."""
    return [
        Phase(
            id="phase-1",
            name="Phase 1",
            blocks=[Block(id="block-1", name="Block 1"), Block(id="block-2", name="Block 2")],
        ),
        Phase(id="phase-2", name="Phase 2", blocks=[Block(id="block-1", name="Block 1")]),
    ]


def sample_lots() -> List[Lot]:
    """
    Seed lots mirroring a typical subdivision.

    Phase 1 / Block 1 has lots 1-5 assigned to r1..r5 except lot 3; r5 does
    not exist, so lot 5 is a ghost assignment. Phase 1 / Block 2 has two
    vacant lots. Phase 2 / Block 1 has lots 1, 2, 4 with lot 4 assigned to r4.
    """
    lots = [
        make_lot(n, None if n == 3 else f"r{n}", status="Vacant" if n == 3 else "Occupied")
        for n in range(1, 6)
    ]
    lots += [make_lot(n, block_id="block-2", status="Vacant") for n in (1, 2)]
    lots += [
        make_lot(
            n,
            "r4" if n == 4 else None,
            phase_id="phase-2",
            status="Occupied" if n == 4 else "Vacant",
        )
        for n in (1, 2, 4)
    ]
    return lots


def sample_residents() -> List[Resident]:
    """Residents r1-r4 in Phase 1 / Block 1 with matching legacy lot labels."""
    return [make_resident(f"r{n}", lot=lot_label(n)) for n in range(1, 5)]


@pytest.fixture
def resident_factory():
    return make_resident


@pytest.fixture
def lot_factory():
    return make_lot


@pytest.fixture
def hierarchy() -> List[Phase]:
    return sample_hierarchy()


@pytest.fixture
def residents() -> List[Resident]:
    return sample_residents()


@pytest.fixture
def repository() -> InMemoryRepository:
    return InMemoryRepository(
        phases=sample_hierarchy(), lots=sample_lots(), residents=sample_residents()
    )
