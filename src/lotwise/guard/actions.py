# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Structural mutations an administrator can request.

Each action is an immutable model tagged by `kind`, so a request arriving
as a plain dict validates into the right type through `MutationAction`.
Lot numbers are validated on construction: a negative lot number or range
bound is a hard input error, not a policy denial.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field, TypeAdapter

from ..core.primitives import LotBound, LotNumber, Model, NonEmptyStr


class DeleteLot(Model):
    """Delete a single lot."""

    kind: Literal["delete_lot"] = "delete_lot"
    lot_id: NonEmptyStr


class ClearAssignment(Model):
    """Clear a lot's resident assignment; the repair action for ghost lots."""

    kind: Literal["clear_assignment"] = "clear_assignment"
    lot_id: NonEmptyStr


class DeleteBlock(Model):
    """Delete a block and, by cascade, all of its lots."""

    kind: Literal["delete_block"] = "delete_block"
    phase_id: NonEmptyStr
    block_id: NonEmptyStr


class DeletePhase(Model):
    """Delete a phase and, by cascade, its blocks and lots."""

    kind: Literal["delete_phase"] = "delete_phase"
    phase_id: NonEmptyStr


class AddLot(Model):
    """Create one lot in a (phase, block) scope."""

    kind: Literal["add_lot"] = "add_lot"
    phase_id: NonEmptyStr
    block_id: NonEmptyStr
    lot_no: LotNumber


class AddLotRange(Model):
    """
    Create every missing lot number in an inclusive range.

    Bounds may be given in either order and are clamped to the configured
    lot number limits before use.
    """

    kind: Literal["add_lot_range"] = "add_lot_range"
    phase_id: NonEmptyStr
    block_id: NonEmptyStr
    start: LotBound
    end: LotBound


MutationAction = Annotated[
    Union[DeleteLot, ClearAssignment, DeleteBlock, DeletePhase, AddLot, AddLotRange],
    Field(discriminator="kind"),
]

_action_adapter: TypeAdapter = TypeAdapter(MutationAction)


def parse_action(data: dict) -> MutationAction:
    """Validate a raw request payload into its action model."""
    return _action_adapter.validate_python(data)


__all__ = [
    "AddLot",
    "AddLotRange",
    "ClearAssignment",
    "DeleteBlock",
    "DeleteLot",
    "DeletePhase",
    "MutationAction",
    "parse_action",
]
