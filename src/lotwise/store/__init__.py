# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Repository interfaces and an in-memory implementation.
"""

from .memory import InMemoryRepository
from .repository import LotRepository, ResidentRepository

__all__ = [
    "InMemoryRepository",
    "LotRepository",
    "ResidentRepository",
]
