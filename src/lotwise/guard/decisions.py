# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import FrozenSet, Iterable, List, Optional, Tuple

from pydantic import Field

from ..core.primitives import DecisionKindEnum, Model
from ..reconciliation import ReconciledLotView
from ..registry import Lot


class Decision(Model):
    """
    Outcome of a guard check.

    A denial or a confirmation request is a normal value the caller branches
    on, never an exception. `lot_numbers` lists the lots an add action may
    create; `skipped` lists requested numbers that already exist.
    """

    kind: DecisionKindEnum
    reason: Optional[str] = None
    lot_numbers: Tuple[int, ...] = ()
    skipped: Tuple[int, ...] = ()

    @classmethod
    def proceed(
        cls, lot_numbers: Iterable[int] = (), skipped: Iterable[int] = ()
    ) -> "Decision":
        return cls(
            kind=DecisionKindEnum.PROCEED,
            lot_numbers=tuple(lot_numbers),
            skipped=tuple(skipped),
        )

    @classmethod
    def confirm(cls, reason: str) -> "Decision":
        return cls(kind=DecisionKindEnum.CONFIRM, reason=reason)

    @classmethod
    def reject(cls, reason: str, skipped: Iterable[int] = ()) -> "Decision":
        return cls(kind=DecisionKindEnum.REJECT, reason=reason, skipped=tuple(skipped))

    @property
    def requires_confirmation(self) -> bool:
        return self.kind == DecisionKindEnum.CONFIRM

    @property
    def is_rejected(self) -> bool:
        return self.kind == DecisionKindEnum.REJECT


class GuardContext(Model):
    """
    Snapshot the guard decides against.

    Attributes:
        lots: Known lots across any number of (phase, block) scopes
        resident_ids: Ids of residents that currently exist
    """

    lots: List[Lot] = Field(default_factory=list)
    resident_ids: FrozenSet[str] = Field(default_factory=frozenset)

    @classmethod
    def from_views(cls, views: Iterable[ReconciledLotView]) -> "GuardContext":
        """Build a context from reconciled views of the lots in question."""
        views = list(views)
        return cls(
            lots=[view.lot for view in views],
            resident_ids=frozenset(
                view.assigned_resident_id
                for view in views
                if view.has_valid_assignment
            ),
        )

    def find_lot(self, lot_id: str) -> Optional[Lot]:
        return next((lot for lot in self.lots if lot.id == lot_id), None)

    def lots_in_block(self, phase_id: str, block_id: str) -> List[Lot]:
        return [lot for lot in self.lots if lot.scope == (phase_id, block_id)]

    def lots_in_phase(self, phase_id: str) -> List[Lot]:
        return [lot for lot in self.lots if lot.phase_id == phase_id]

    def has_valid_assignment(self, lot: Lot) -> bool:
        return (
            lot.assigned_resident_id is not None
            and lot.assigned_resident_id in self.resident_ids
        )
