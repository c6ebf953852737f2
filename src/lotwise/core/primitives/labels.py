# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Label and identifier helpers.

Phase, block, and lot names are typed by administrators and residents, so
they arrive with stray whitespace and punctuation. These helpers normalize
them into display labels and stable identifiers.
"""

from __future__ import annotations

import re
from typing import Container, Optional

from .settings import LotNumberSettings

_TRAILING_NUMBER = re.compile(r"(\d+)\s*$")
_WHITESPACE = re.compile(r"\s+")
_DISALLOWED = re.compile(r"[^\w\s-]")


def lot_number_from_label(label: Optional[str]) -> Optional[int]:
    """
    Extract the lot number from a legacy label.

    Args:
        label: Free-text label such as "Lot 2"

    Returns:
        The trailing integer (e.g. 2), or None when the label has no
        numeric suffix.

    Example:
        >>> lot_number_from_label("Lot 12")
        12
        >>> lot_number_from_label("Lot A") is None
        True
    """
    if not label:
        return None
    match = _TRAILING_NUMBER.search(label)
    if match is None:
        return None
    return int(match.group(1))


def lot_label(lot_no: int) -> str:
    """Display label for a lot number."""
    return f"Lot {lot_no}"


def normalize_label(text: str) -> str:
    """Trim, collapse whitespace, and drop punctuation other than '-'."""
    collapsed = _WHITESPACE.sub(" ", text.strip())
    return _DISALLOWED.sub("", collapsed)


def make_id(label: str) -> str:
    """Stable identifier derived from a label ("Phase 1" -> "phase-1")."""
    return _WHITESPACE.sub("-", normalize_label(label).lower())


def unique_id(base: str, taken: Container[str]) -> str:
    """Return base, or base-2, base-3, ... whichever is not already taken."""
    candidate = base
    suffix = 2
    while candidate in taken:
        candidate = f"{base}-{suffix}"
        suffix += 1
    return candidate


def make_lot_id(phase_id: str, block_id: str, lot_no: int) -> str:
    return f"{phase_id}:{block_id}:lot-{lot_no}"


def clamp_lot_number(
    lot_no: int, settings: Optional[LotNumberSettings] = None
) -> int:
    """Clamp a lot number into the configured creation bounds."""
    bounds = settings or LotNumberSettings()
    return max(bounds.min_lot_number, min(bounds.max_lot_number, int(lot_no)))
