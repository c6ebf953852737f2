# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Registry models: residents, lots, and the Phase -> Block -> Lot hierarchy.
"""

from .hierarchy import (
    Block,
    Phase,
    block_id_by_name,
    blocks_for_phase_name,
    find_phase,
    phase_by_name,
    phase_id_by_name,
    phase_names,
)
from .lot import Lot
from .resident import Resident
from .search import filter_residents

__all__ = [
    "Block",
    "Lot",
    "Phase",
    "Resident",
    "block_id_by_name",
    "blocks_for_phase_name",
    "filter_residents",
    "find_phase",
    "phase_by_name",
    "phase_id_by_name",
    "phase_names",
]
