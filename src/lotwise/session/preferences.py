# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Remembered view selections.

The admin screen remembers the selected phase and block, and which lot row
was expanded per (phase, block), across navigation. Storage is any
key-value store; values that cannot be read fall back to defaults.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..core.primitives import PreferenceSettings
from .scope import ViewScope

logger = logging.getLogger(__name__)

KEY_PHASE = "adminResidents:phase"
KEY_BLOCK = "adminResidents:block"
KEY_EXPANDED_LOT = "adminResidents:expandedLot"


class PreferenceStore(ABC):
    """Minimal string key-value store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass


class InMemoryPreferenceStore(PreferenceStore):
    """Dict-backed store, scoped to the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._values


class ScopePreferences:
    """Typed access to the remembered phase, block, and expanded lot."""

    def __init__(
        self,
        store: PreferenceStore,
        settings: Optional[PreferenceSettings] = None,
    ):
        self.store = store
        self.settings = settings or PreferenceSettings()

    def _key(self, key: str) -> str:
        if self.settings.namespace:
            return f"{self.settings.namespace}:{key}"
        return key

    def expanded_key(self, phase_name: str, block_name: str) -> str:
        return self._key(f"{KEY_EXPANDED_LOT}:{phase_name}:{block_name}")

    def read_scope(self) -> ViewScope:
        """Remembered selection, or the configured defaults."""
        return ViewScope(
            phase_name=self.store.get(self._key(KEY_PHASE)) or self.settings.default_phase,
            block_name=self.store.get(self._key(KEY_BLOCK)) or self.settings.default_block,
        )

    def write_scope(self, scope: ViewScope) -> None:
        self.store.set(self._key(KEY_PHASE), scope.phase_name)
        self.store.set(self._key(KEY_BLOCK), scope.block_name)

    def read_expanded_lot(self, scope: ViewScope) -> Optional[int]:
        """Expanded lot number for a scope; None if unset or unreadable."""
        raw = self.store.get(self.expanded_key(scope.phase_name, scope.block_name))
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            logger.debug(f"Ignoring unreadable expanded lot value {raw!r}")
            return None

    def write_expanded_lot(self, scope: ViewScope, lot_no: Optional[int]) -> None:
        key = self.expanded_key(scope.phase_name, scope.block_name)
        if lot_no is None:
            self.store.remove(key)
        else:
            self.store.set(key, str(lot_no))
