# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Presentation-ready tables built from reconciliation results.
"""

from .base import BaseReport
from .roster import ROSTER_COLUMNS, OccupancySummaryReport, RosterReport

__all__ = [
    "BaseReport",
    "OccupancySummaryReport",
    "ROSTER_COLUMNS",
    "RosterReport",
]
