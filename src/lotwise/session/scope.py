# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ..core.primitives import Model, PreferenceSettings
from ..registry import Phase, block_id_by_name, blocks_for_phase_name, phase_id_by_name


class ViewScope(Model):
    """
    The (phase, block) selection an admin is looking at, by display name.

    Passed into and out of the controller explicitly; remembering it across
    navigation is the preference store's job.
    """

    phase_name: str
    block_name: str

    def resolve_ids(self, nodes: Sequence[Phase]) -> Optional[Tuple[str, str]]:
        """(phase_id, block_id) for this scope, or None if either is unknown."""
        phase_id = phase_id_by_name(nodes, self.phase_name)
        block_id = block_id_by_name(nodes, self.phase_name, self.block_name)
        if not phase_id or not block_id:
            return None
        return (phase_id, block_id)


def pick_valid_selection(
    nodes: Sequence[Phase],
    desired_phase: str,
    desired_block: str,
    settings: Optional[PreferenceSettings] = None,
) -> ViewScope:
    """
    Keep the desired phase/block when they exist, otherwise fall back.

    The phase falls back to the first phase in node order, the block to the
    first block name in sorted order, and either to the configured default
    name when the hierarchy is empty.
    """
    defaults = settings or PreferenceSettings()

    if any(p.name == desired_phase for p in nodes):
        phase_name = desired_phase
    else:
        phase_name = nodes[0].name if nodes else defaults.default_phase

    block_options = blocks_for_phase_name(nodes, phase_name)
    if desired_block in block_options:
        block_name = desired_block
    else:
        block_name = block_options[0] if block_options else defaults.default_block

    return ViewScope(phase_name=phase_name, block_name=block_name)
