# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from lotwise.core.primitives import LotStatusEnum
from lotwise.store import InMemoryRepository


@pytest.mark.asyncio
async def test_get_lots_sorted_and_scoped(repository):
    lots = await repository.get_lots("phase-2", "block-1")
    assert [lot.lot_no for lot in lots] == [1, 2, 4]
    assert all(lot.scope == ("phase-2", "block-1") for lot in lots)
    assert await repository.get_lots("phase-9", "block-1") == []


@pytest.mark.asyncio
async def test_add_phase_normalizes_and_suffixes_ids(repository):
    assert await repository.add_phase("   ") is None
    assert await repository.add_phase("Phase 1!") == "phase-1-2"
    assert await repository.add_phase("North  Wing") == "north-wing"

    phases = await repository.get_phases_with_blocks()
    assert [p.name for p in phases][-2:] == ["Phase 1", "North Wing"]


@pytest.mark.asyncio
async def test_add_block_to_unknown_phase(repository):
    assert await repository.add_block("phase-9", "Block 1") is None
    assert await repository.add_block("phase-1", "Block 1") == "block-1-2"


@pytest.mark.asyncio
async def test_add_lot_never_overwrites(repository):
    created = await repository.add_lot("phase-1", "block-1", 1)
    assert created == []

    lots = await repository.get_lots("phase-1", "block-1")
    assert lots[0].assigned_resident_id == "r1"

    created = await repository.add_lot("phase-1", "block-1", 6)
    assert [lot.id for lot in created] == ["phase-1:block-1:lot-6"]
    assert created[0].status == LotStatusEnum.VACANT


@pytest.mark.asyncio
async def test_add_lot_range_creates_only_missing(repository):
    created = await repository.add_lot_range("phase-2", "block-1", 5, 1)
    assert [lot.lot_no for lot in created] == [3, 5]

    lots = await repository.get_lots("phase-2", "block-1")
    assert [lot.lot_no for lot in lots] == [1, 2, 3, 4, 5]
    assert lots[3].assigned_resident_id == "r4"


@pytest.mark.asyncio
async def test_set_and_clear_assignment(repository):
    lot_id = "phase-1:block-2:lot-1"
    updated = await repository.set_lot_assignment("phase-1", "block-2", lot_id, "r3")
    assert updated.assigned_resident_id == "r3"
    assert updated.status == LotStatusEnum.OCCUPIED

    cleared = await repository.set_lot_assignment("phase-1", "block-2", lot_id, None)
    assert cleared.assigned_resident_id is None
    assert cleared.status == LotStatusEnum.OCCUPIED

    assert await repository.set_lot_assignment("phase-1", "block-2", "nope", "r1") is None


@pytest.mark.asyncio
async def test_delete_lot(repository):
    await repository.delete_lot("phase-1", "block-1", "phase-1:block-1:lot-3")
    lots = await repository.get_lots("phase-1", "block-1")
    assert [lot.lot_no for lot in lots] == [1, 2, 4, 5]


@pytest.mark.asyncio
async def test_delete_block_cascades(repository):
    await repository.delete_block("phase-1", "block-2")

    phases = await repository.get_phases_with_blocks()
    assert [b.id for b in phases[0].blocks] == ["block-1"]
    assert await repository.get_lots("phase-1", "block-2") == []
    assert len(await repository.get_lots("phase-1", "block-1")) == 5


@pytest.mark.asyncio
async def test_delete_phase_cascades(repository):
    await repository.delete_phase("phase-1")

    phases = await repository.get_phases_with_blocks()
    assert [p.id for p in phases] == ["phase-2"]
    assert await repository.get_lots("phase-1", "block-1") == []
    assert await repository.get_lots("phase-1", "block-2") == []
    assert len(await repository.get_lots("phase-2", "block-1")) == 3


@pytest.mark.asyncio
async def test_reads_are_copies(repository):
    phases = await repository.get_phases_with_blocks()
    phases.clear()
    assert len(await repository.get_phases_with_blocks()) == 2


@pytest.mark.asyncio
async def test_removed_resident_leaves_ghost_reference(repository):
    repository.remove_resident("r1")
    residents = await repository.get_residents()
    assert "r1" not in {r.id for r in residents}

    lots = await repository.get_lots("phase-1", "block-1")
    assert lots[0].assigned_resident_id == "r1"


@pytest.mark.asyncio
async def test_put_resident_inserts_and_replaces(repository, resident_factory):
    repository.put_resident(resident_factory("r5", lot="Lot 5"))
    repository.put_resident(resident_factory("r1", lot="Lot 9"))

    by_id = {r.id: r for r in await repository.get_residents()}
    assert len(by_id) == 5
    assert by_id["r5"].lot == "Lot 5"
    assert by_id["r1"].lot == "Lot 9"


@pytest.mark.asyncio
async def test_latency_is_simulated():
    repository = InMemoryRepository(latency=0.01)
    assert await repository.get_residents() == []
