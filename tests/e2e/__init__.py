# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
End-to-end tests for Lotwise.

Scenarios span the store, the controller, reconciliation, and reporting.
"""
