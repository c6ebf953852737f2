# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations


class RequestGeneration:
    """
    Monotonic request counter used to discard stale results.

    Every fetch takes a token from `issue()` before awaiting; on completion
    it may only commit if `is_current(token)` still holds. Issuing a newer
    token is what cancels older requests: they still finish, but their
    results are dropped.

    Example:
        >>> generation = RequestGeneration()
        >>> first = generation.issue()
        >>> second = generation.issue()
        >>> generation.is_current(first), generation.is_current(second)
        (False, True)
    """

    def __init__(self) -> None:
        self._current = 0

    @property
    def current(self) -> int:
        return self._current

    def issue(self) -> int:
        self._current += 1
        return self._current

    def is_current(self, token: int) -> bool:
        return token == self._current

    def invalidate(self) -> None:
        """Make every outstanding token stale without starting a request."""
        self._current += 1
