# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Iterable, List, Optional

from .resident import Resident


def _in_scope(resident: Resident, phase: Optional[str], block: Optional[str]) -> bool:
    if phase is not None and resident.phase != phase:
        return False
    if block is not None and resident.block != block:
        return False
    return True


def _haystack(resident: Resident) -> str:
    return " ".join(
        [
            resident.first_name,
            resident.middle_name or "",
            resident.last_name,
            resident.email or "",
            resident.contact_number or "",
            resident.lot,
        ]
    ).lower()


def filter_residents(
    residents: Iterable[Resident],
    *,
    phase: Optional[str] = None,
    block: Optional[str] = None,
    query: str = "",
) -> List[Resident]:
    """
    Residents registered to a phase/block whose details contain `query`.

    Matching is a case-insensitive substring search over the name parts,
    email, contact number, and lot label. A blank query matches everyone in
    scope; a None phase or block does not restrict that axis.
    """
    needle = query.strip().lower()
    return [
        r
        for r in residents
        if _in_scope(r, phase, block) and (not needle or needle in _haystack(r))
    ]
