# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the roster and occupancy summary reports.

Validates that reports present a reconciliation result as pandas tables
without re-resolving occupants.
"""

import pandas as pd
import pytest

from lotwise.core.primitives import LotStateEnum
from lotwise.reconciliation import reconcile_detailed
from lotwise.reporting import ROSTER_COLUMNS, OccupancySummaryReport, RosterReport

from ...conftest import make_lot, sample_lots, sample_residents


class TestRosterReport:
    """Test suite for RosterReport class."""

    @pytest.fixture
    def block_result(self):
        """Phase 1 / Block 1 plus two vacant lots appended to the same block."""
        lots = [lot for lot in sample_lots() if lot.scope == ("phase-1", "block-1")]
        lots += [make_lot(6), make_lot(7)]
        return reconcile_detailed(
            lots, sample_residents(), phase="Phase 1", block="Block 1"
        )

    def test_requires_reconciliation_result(self):
        with pytest.raises(TypeError):
            RosterReport({"views": []})

    def test_roster_columns_and_order(self, block_result):
        roster = RosterReport(block_result).generate()

        assert isinstance(roster, pd.DataFrame)
        assert list(roster.columns) == ROSTER_COLUMNS
        assert roster["lot_no"].tolist() == [1, 2, 3, 4, 5, 6, 7]

    def test_roster_row_contents(self, block_result):
        roster = RosterReport(block_result).generate().set_index("lot_no")

        assert roster.loc[1, "state"] == LotStateEnum.ASSIGNED.value
        assert roster.loc[1, "resident_name"] == "Test R1"
        assert roster.loc[3, "state"] == LotStateEnum.LEGACY_MATCH.value
        assert roster.loc[3, "resident_id"] == "r3"
        assert roster.loc[3, "fallback_candidates"] == "r3"

        ghost = roster.loc[5]
        assert ghost["state"] == LotStateEnum.GHOST.value
        assert bool(ghost["ghost_assigned"]) is True
        assert ghost["assigned_resident_id"] == "r5"
        assert pd.isna(ghost["resident_id"])

    def test_exclude_vacant_keeps_ghosts(self, block_result):
        roster = RosterReport(block_result).generate(include_vacant=False)

        assert roster["lot_no"].tolist() == [1, 2, 3, 4, 5]
        assert LotStateEnum.VACANT.value not in set(roster["state"])

    def test_empty_result_has_columns(self):
        roster = RosterReport(reconcile_detailed([], [])).generate()
        assert roster.empty
        assert list(roster.columns) == ROSTER_COLUMNS


class TestOccupancySummaryReport:
    """Test suite for OccupancySummaryReport class."""

    def test_counts_by_state(self):
        lots = [lot for lot in sample_lots() if lot.scope == ("phase-1", "block-1")]
        lots.append(make_lot(6))
        result = reconcile_detailed(lots, sample_residents(), phase="Phase 1", block="Block 1")

        summary = OccupancySummaryReport(result).generate()

        assert summary[LotStateEnum.ASSIGNED.value] == 3
        assert summary[LotStateEnum.LEGACY_MATCH.value] == 1
        assert summary[LotStateEnum.GHOST.value] == 1
        assert summary[LotStateEnum.AMBIGUOUS.value] == 0
        assert summary[LotStateEnum.VACANT.value] == 1
        assert summary["Total"] == 6
        assert summary["Duplicate Lot Numbers"] == 0

    def test_duplicate_lot_numbers_counted(self):
        lots = [make_lot(1, lot_id="a"), make_lot(1, lot_id="b"), make_lot(2)]
        summary = OccupancySummaryReport(reconcile_detailed(lots, [])).generate()

        assert summary["Total"] == 3
        assert summary["Duplicate Lot Numbers"] == 1

    def test_occupancy_rate(self):
        lots = [lot for lot in sample_lots() if lot.scope == ("phase-1", "block-1")]
        result = reconcile_detailed(lots, sample_residents(), phase="Phase 1", block="Block 1")

        assert OccupancySummaryReport(result).occupancy_rate() == pytest.approx(0.8)
