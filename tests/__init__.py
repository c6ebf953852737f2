# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lotwise test suite.

Unit tests mirror the source subpackages; end-to-end scenarios live in
tests/e2e.
"""
