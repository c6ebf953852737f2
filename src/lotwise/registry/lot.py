# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import Field, ValidationInfo, field_validator

from ..core.primitives import LotNumber, LotStatusEnum, Model, NonEmptyStr, lot_label


class Lot(Model):
    """
    A physical lot placed in the Phase -> Block -> Lot hierarchy.

    `assigned_resident_id` is the authoritative occupancy link. It is a weak
    reference: the resident may have been deleted out-of-band, leaving a
    dangling id that reconciliation reports as a ghost assignment.
    `status` is a display hint and is never trusted for occupancy.
    """

    id: NonEmptyStr
    phase_id: NonEmptyStr = Field(alias="phaseId")
    block_id: NonEmptyStr = Field(alias="blockId")
    lot_no: LotNumber = Field(alias="lotNo")
    label: str = Field(default="", validate_default=True)
    status: Optional[LotStatusEnum] = None
    assigned_resident_id: Optional[str] = Field(
        default=None, alias="assignedResidentId"
    )
    created_at: Optional[int] = Field(
        default=None, alias="createdAt", description="Epoch milliseconds"
    )
    updated_at: Optional[int] = Field(
        default=None, alias="updatedAt", description="Epoch milliseconds"
    )

    @field_validator("label")
    @classmethod
    def _derive_label(cls, value: str, info: ValidationInfo) -> str:
        # lot_no is declared first, so it arrives here already coerced
        if not value and "lot_no" in info.data:
            return lot_label(info.data["lot_no"])
        return value

    @field_validator("assigned_resident_id", mode="before")
    @classmethod
    def _blank_assignment_is_none(cls, value: Any) -> Any:
        # Document stores hand back "" for cleared references
        return value or None

    @property
    def scope(self) -> Tuple[str, str]:
        """The (phase_id, block_id) pair this lot belongs to."""
        return (self.phase_id, self.block_id)

    def with_assignment(
        self, resident_id: Optional[str], updated_at: Optional[int] = None
    ) -> "Lot":
        """
        Return a copy with the assignment set or cleared.

        Assigning marks the lot Occupied; clearing keeps the prior status
        (Vacant when none was recorded).
        """
        status = (
            LotStatusEnum.OCCUPIED
            if resident_id
            else (self.status or LotStatusEnum.VACANT)
        )
        return self.copy_with(
            assigned_resident_id=resident_id or None,
            status=status,
            updated_at=updated_at if updated_at is not None else self.updated_at,
        )

    def __repr__(self) -> str:
        return f"<Lot {self.id}: {self.label}>"
