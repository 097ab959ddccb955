# src/engine/cancellation.py — v1
"""Cancellation token passed explicitly into a cascade run.

The engine polls the token at level boundaries. Setting it is safe from any
thread or coroutine; cancellation is reported as a status, never raised.
"""

from __future__ import annotations

import threading


class CancellationToken:
    """One-shot cancellation flag shared between a caller and one run."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request that the run stop at the next level boundary."""
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancelled})"
