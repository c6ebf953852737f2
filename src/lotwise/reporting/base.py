# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base reporting classes.

Reports format a finished `ReconciliationResult` for display or export.
They never resolve occupants themselves.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..reconciliation import ReconciliationResult


class BaseReport(ABC):
    """Abstract base class for all report formatters."""

    def __init__(self, result: ReconciliationResult):
        """
        Initialize report with a reconciliation result.

        Args:
            result: Output of lotwise.reconciliation.reconcile_detailed()
        """
        if not isinstance(result, ReconciliationResult):
            raise TypeError("BaseReport requires a ReconciliationResult object")
        self._result = result

    @abstractmethod
    def generate(self, **kwargs) -> Any:
        """Transform the result into the report's output format."""
