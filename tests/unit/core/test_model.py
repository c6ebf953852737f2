# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from lotwise.registry import Block, Phase


def test_models_are_frozen():
    block = Block(id="block-1", name="Block 1")
    with pytest.raises(ValidationError):
        block.name = "Block 2"


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        Block(id="block-1", name="Block 1", colour="red")


def test_copy_with_replaces_fields(lot_factory):
    lot = lot_factory(4, status="Vacant")
    moved = lot.copy_with(block_id="block-2")

    assert moved.scope == ("phase-1", "block-2")
    assert moved.label == lot.label
    assert lot.block_id == "block-1"


def test_copy_with_validates(lot_factory):
    with pytest.raises(ValidationError):
        lot_factory(4).copy_with(lot_no=0)


def test_copy_with_keeps_nested_models():
    phase = Phase(id="phase-1", name="Phase 1", blocks=[Block(id="block-1", name="Block 1")])
    grown = phase.copy_with(blocks=[*phase.blocks, Block(id="block-2", name="Block 2")])

    assert [b.id for b in grown.blocks] == ["block-1", "block-2"]
    assert len(phase.blocks) == 1
