# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Tuple

from ..registry import Lot

ScopeKey = Tuple[str, str]


def order_lots(lots: Iterable[Lot]) -> List[Lot]:
    """
    Lots sorted ascending by lot number.

    The sort is stable: lots sharing a number keep their input order and are
    passed through untouched for the caller to flag.
    """
    if lots is None:
        raise TypeError("order_lots requires a lot collection, got None")
    return sorted(lots, key=lambda lot: lot.lot_no)


def find_duplicate_lot_numbers(lots: Iterable[Lot]) -> Dict[ScopeKey, List[int]]:
    """
    Lot numbers that appear more than once within the same (phase, block).

    Returns:
        Mapping of (phase_id, block_id) to the sorted repeated lot numbers.
        Scopes without duplicates are omitted.
    """
    counts: Dict[ScopeKey, Counter] = defaultdict(Counter)
    for lot in lots:
        counts[lot.scope][lot.lot_no] += 1

    duplicates: Dict[ScopeKey, List[int]] = {}
    for scope, counter in counts.items():
        repeated = sorted(n for n, count in counter.items() if count > 1)
        if repeated:
            duplicates[scope] = repeated
    return duplicates
