# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..core.primitives import (
    Model,
    NonEmptyStr,
    OccupancyTypeEnum,
    ResidencyTypeEnum,
    lot_number_from_label,
)


class Resident(Model):
    """
    A registered resident of the association.

    Residents are created by the registration flow and are read-only here.
    The `lot`, `phase`, and `block` labels are legacy free text captured at
    sign-up; they are only consulted when a lot carries no authoritative
    assignment.
    """

    id: NonEmptyStr
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    middle_name: Optional[str] = Field(default=None, alias="middleName")
    lot: str = Field(default="", description='Legacy lot label, e.g. "Lot 2"')
    phase: Optional[str] = Field(default=None, description="Legacy phase name")
    block: Optional[str] = Field(default=None, description="Legacy block name")
    residency_type: Optional[ResidencyTypeEnum] = Field(
        default=None, alias="residencyType"
    )
    occupancy_type: Optional[OccupancyTypeEnum] = Field(
        default=None, alias="occupancyType"
    )
    contact_number: Optional[str] = Field(default=None, alias="contactNumber")
    email: Optional[str] = None
    avatar_url: Optional[str] = Field(default=None, alias="avatarUrl")

    @property
    def full_name(self) -> str:
        """First, middle, and last name with blank parts skipped."""
        parts = (self.first_name, self.middle_name or "", self.last_name)
        return " ".join(part.strip() for part in parts if part and part.strip())

    @property
    def legacy_lot_number(self) -> Optional[int]:
        """Lot number parsed from the legacy label, or None if unparseable."""
        return lot_number_from_label(self.lot)

    def __repr__(self) -> str:
        return f"<Resident {self.id}: {self.full_name}>"
