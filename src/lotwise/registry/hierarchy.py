# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import List, Optional, Sequence

from pydantic import Field

from ..core.primitives import Model, NonEmptyStr


class Block(Model):
    """A block within a phase."""

    id: NonEmptyStr
    name: str


class Phase(Model):
    """A phase of the subdivision and the blocks it contains."""

    id: NonEmptyStr
    name: str
    blocks: List[Block] = Field(default_factory=list)

    def find_block(self, block_id: str) -> Optional[Block]:
        return next((b for b in self.blocks if b.id == block_id), None)

    def block_by_name(self, block_name: str) -> Optional[Block]:
        return next((b for b in self.blocks if b.name == block_name), None)


def find_phase(nodes: Sequence[Phase], phase_id: str) -> Optional[Phase]:
    return next((p for p in nodes if p.id == phase_id), None)


def phase_by_name(nodes: Sequence[Phase], phase_name: str) -> Optional[Phase]:
    return next((p for p in nodes if p.name == phase_name), None)


def phase_names(nodes: Sequence[Phase]) -> List[str]:
    """Sorted phase names."""
    return sorted(p.name for p in nodes)


def blocks_for_phase_name(nodes: Sequence[Phase], phase_name: str) -> List[str]:
    """Sorted block names for the named phase; empty if the phase is unknown."""
    phase = phase_by_name(nodes, phase_name)
    if phase is None:
        return []
    return sorted(b.name for b in phase.blocks)


def phase_id_by_name(nodes: Sequence[Phase], phase_name: str) -> Optional[str]:
    phase = phase_by_name(nodes, phase_name)
    return phase.id if phase else None


def block_id_by_name(
    nodes: Sequence[Phase], phase_name: str, block_name: str
) -> Optional[str]:
    phase = phase_by_name(nodes, phase_name)
    if phase is None:
        return None
    block = phase.block_by_name(block_name)
    return block.id if block else None
