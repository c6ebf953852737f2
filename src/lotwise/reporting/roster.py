# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lot roster and occupancy summary tables.
"""

from __future__ import annotations

from typing import Dict, List

import pandas as pd

from ..core.primitives import LotStateEnum
from .base import BaseReport

ROSTER_COLUMNS: List[str] = [
    "phase_id",
    "block_id",
    "lot_no",
    "label",
    "lot_id",
    "state",
    "resident_id",
    "resident_name",
    "assigned_resident_id",
    "ghost_assigned",
    "fallback_candidates",
]


class RosterReport(BaseReport):
    """One row per lot, in lot number order, with its resolved occupant."""

    def generate(self, include_vacant: bool = True) -> pd.DataFrame:
        """
        Build the roster table.

        Args:
            include_vacant: Keep genuinely vacant lots (ghost and ambiguous
                lots are always kept, since they need attention)

        Returns:
            DataFrame with ROSTER_COLUMNS
        """
        records = []
        for view in self._result.views:
            if not include_vacant and view.state == LotStateEnum.VACANT:
                continue
            records.append(
                {
                    "phase_id": view.lot.phase_id,
                    "block_id": view.lot.block_id,
                    "lot_no": view.lot_no,
                    "label": view.lot.label,
                    "lot_id": view.lot.id,
                    "state": view.state.value,
                    "resident_id": view.resident.id if view.resident else None,
                    "resident_name": view.resident.full_name if view.resident else None,
                    "assigned_resident_id": view.assigned_resident_id,
                    "ghost_assigned": view.ghost_assigned,
                    "fallback_candidates": ", ".join(view.fallback_candidates),
                }
            )
        return pd.DataFrame.from_records(records, columns=ROSTER_COLUMNS)


class OccupancySummaryReport(BaseReport):
    """Lot counts by reconciled state, plus totals."""

    def generate(self) -> pd.Series:
        counts: Dict[str, int] = {state.value: 0 for state in LotStateEnum}
        for view in self._result.views:
            counts[view.state.value] += 1
        summary = pd.Series(counts, name="lots", dtype="int64")
        summary["Total"] = self._result.total_lots
        summary["Duplicate Lot Numbers"] = sum(
            len(numbers) for numbers in self._result.duplicate_lot_numbers.values()
        )
        return summary

    def occupancy_rate(self) -> float:
        return self._result.occupancy_rate
