# src/engine/session.py — v1
"""Hashing session — at most one active cascade, with start/stop and status.

A session plays the caller's role around the engine: it refuses a second
start while a run is active, owns the cancellation token of the active run,
and translates engine events into the status lines a front end displays.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Union

from multihasher.core.models import (
    STATUS_STARTING,
    CascadeOutcome,
    FinalResult,
    HashRequest,
    ProgressEvent,
)
from multihasher.engine.cancellation import CancellationToken
from multihasher.engine.cascade import CascadeEngine, ProgressCallback, notify

logger = logging.getLogger(__name__)

StatusCallback = Callable[[str], Union[None, Awaitable[None]]]
CompleteCallback = Callable[[FinalResult], Union[None, Awaitable[None]]]


class SessionBusyError(RuntimeError):
    """Raised when starting a cascade while another one is active."""


class HashingSession:
    """Serializes cascade runs for one user-facing session.

    Args:
        engine: Engine to run cascades on. A new CascadeEngine if None.
    """

    def __init__(self, engine: CascadeEngine | None = None) -> None:
        self._engine = engine or CascadeEngine()
        self._task: asyncio.Task[CascadeOutcome] | None = None
        self._token: CancellationToken | None = None

    @property
    def is_active(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(
        self,
        request: HashRequest,
        on_progress: ProgressCallback | None = None,
        on_status: StatusCallback | None = None,
        on_complete: CompleteCallback | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> asyncio.Task[CascadeOutcome]:
        """Schedule a cascade run on the running event loop.

        Must be called from inside a coroutine.

        Raises:
            SessionBusyError: If a run is already active.
        """
        if self.is_active:
            raise SessionBusyError("A hashing run is already active")

        self._token = cancel_token or CancellationToken()
        self._task = asyncio.get_running_loop().create_task(
            self._run(request, self._token, on_progress, on_status, on_complete)
        )
        return self._task

    def stop(self) -> bool:
        """Request cancellation of the active run.

        Returns:
            True if a run was active and has been asked to stop.
        """
        if not self.is_active or self._token is None:
            return False
        self._token.cancel()
        logger.info("Stop requested")
        return True

    async def wait(self) -> CascadeOutcome | None:
        """Wait for the most recent run and return its outcome."""
        if self._task is None:
            return None
        return await self._task

    async def _run(
        self,
        request: HashRequest,
        token: CancellationToken,
        on_progress: ProgressCallback | None,
        on_status: StatusCallback | None,
        on_complete: CompleteCallback | None,
    ) -> CascadeOutcome:
        await notify(on_status, STATUS_STARTING)

        async def _forward(event: ProgressEvent) -> None:
            await notify(on_progress, event)
            await notify(on_status, event.status_message)

        outcome = await self._engine.run(request, _forward, token)

        if outcome.completed:
            await notify(on_complete, outcome.result)
        await notify(on_status, outcome.status_message)
        return outcome
