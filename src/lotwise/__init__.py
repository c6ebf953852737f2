# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lotwise - Lot and Resident Reconciliation for Homeowners' Associations

Resolves which resident occupies each lot of a Phase -> Block -> Lot
hierarchy, flags data-integrity problems (ghost assignments, ambiguous
legacy matches, duplicate lot numbers), and decides which structural
changes are safe.

Key Entry Points:
- lotwise.reconciliation.reconcile() - Per-lot occupant resolution
- lotwise.guard.guard_mutation() - Proceed / confirm / reject decisions
- lotwise.session.ResidentListController - Async controller over a repository
- lotwise.reporting.RosterReport - Tabular roster of reconciled lots

Example Usage:
    ```python
    from lotwise.reconciliation import reconcile
    from lotwise.registry import Lot, Resident

    residents = [Resident(id="r1", first_name="Ana", last_name="Cruz", lot="Lot 1")]
    lots = [Lot(id="L1", phase_id="phase-1", block_id="block-1", lot_no=1)]

    for view in reconcile(lots, residents):
        print(view.lot.label, view.state.value, view.resident)
    ```
"""

import importlib
import logging

# Add a NullHandler to the package logger so applications that don't
# configure logging see no "No handlers could be found" warnings.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "guard",
    "reconciliation",
    "registry",
    "reporting",
    "session",
    "store",
]


_LAZY_MODULES = {
    "core": "lotwise.core",
    "guard": "lotwise.guard",
    "reconciliation": "lotwise.reconciliation",
    "registry": "lotwise.registry",
    "reporting": "lotwise.reporting",
    "session": "lotwise.session",
    "store": "lotwise.store",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'lotwise' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
