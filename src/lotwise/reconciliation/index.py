# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from pydantic import Field

from ..core.primitives import Model
from ..registry import Resident

logger = logging.getLogger(__name__)


class IdentityIndex(Model):
    """
    Lookup table from resident id to resident.

    Built once per reconciliation pass from the full resident collection.
    Duplicate ids are a data-integrity problem upstream: the last record
    wins and the id is listed in `duplicate_ids`.
    """

    by_id: Dict[str, Resident] = Field(default_factory=dict)
    ids: FrozenSet[str] = Field(default_factory=frozenset)
    duplicate_ids: Tuple[str, ...] = ()

    def get(self, resident_id: Optional[str]) -> Optional[Resident]:
        if resident_id is None:
            return None
        return self.by_id.get(resident_id)

    def __contains__(self, resident_id: object) -> bool:
        return resident_id in self.ids

    def __len__(self) -> int:
        return len(self.by_id)


def build_identity_index(residents: Iterable[Resident]) -> IdentityIndex:
    """
    Index residents by id.

    Args:
        residents: Resident collection in fetch order

    Returns:
        IdentityIndex with the id map, the id set, and any duplicated ids

    Raises:
        TypeError: If residents is None
    """
    if residents is None:
        raise TypeError("build_identity_index requires a resident collection, got None")

    by_id: Dict[str, Resident] = {}
    duplicates: Dict[str, None] = {}
    for resident in residents:
        if resident.id in by_id and resident.id not in duplicates:
            duplicates[resident.id] = None
            logger.warning(
                f"Duplicate resident id '{resident.id}'; keeping the last record"
            )
        by_id[resident.id] = resident

    return IdentityIndex(
        by_id=by_id,
        ids=frozenset(by_id),
        duplicate_ids=tuple(duplicates),
    )
