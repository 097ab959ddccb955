# src/engine/cascade.py — v2
"""Hash cascade engine — amplify, re-hash and report, level by level.

Each level takes the current hash (the original text on level 1) and:
  1. repeats it ``repetitions`` times joined by newlines and hashes the block
     with digest512 to get an intermediate hash;
  2. builds ``"<text>: "`` followed by ``repetitions`` lines of
     ``"<text>: <intermediate>\\n"`` and hashes that block; the result is the
     new current hash.

The level's CPU work runs on a worker thread so the event loop stays free
between levels. Cancellation is polled at every level boundary, so a stop
request takes effect after at most one level.

Output is bit-for-bit reproducible for a fixed (text, levels, repetitions).
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
import uuid
from typing import Any, Awaitable, Callable, Union

from multihasher.core.digests import digest512, encode_hash, ensure_algorithms
from multihasher.core.models import (
    CascadeOutcome,
    FinalResult,
    HashRequest,
    ProgressEvent,
)
from multihasher.engine.cancellation import CancellationToken
from multihasher.logging.context import (
    clear_context,
    set_level_context,
    set_run_context,
)

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ProgressEvent], Union[None, Awaitable[None]]]

LINE_SEPARATOR = "\n"
INTENTION_SEPARATOR = ": "


def amplify_hash(value: str, repetitions: int) -> str:
    """Repeat value ``repetitions`` times, newline-separated, no trailing newline."""
    return LINE_SEPARATOR.join([value] * repetitions)


def amplify_with_intention(
    original_text: str, intermediate: str, repetitions: int
) -> str:
    """Prefix the intention, then repeat ``"<text>: <hash>\\n"`` lines."""
    line = f"{original_text}{INTENTION_SEPARATOR}{intermediate}{LINE_SEPARATOR}"
    return f"{original_text}{INTENTION_SEPARATOR}" + line * repetitions


def run_level(original_text: str, current: str, repetitions: int) -> str:
    """Compute one cascade level and return the new 512-bit hash."""
    intermediate = digest512(amplify_hash(current, repetitions))
    return digest512(amplify_with_intention(original_text, intermediate, repetitions))


async def notify(callback: Callable[[Any], Any] | None, payload: Any) -> None:
    """Invoke a sync or async callback, awaiting it when needed."""
    if callback is None:
        return
    outcome = callback(payload)
    if inspect.isawaitable(outcome):
        await outcome


class CascadeEngine:
    """Run hash cascades described by HashRequest.

    Construction checks that the digest algorithms are available and raises
    DigestUnavailableError otherwise. Each call to run() owns its own
    working state, so one engine may serve several sequential or concurrent
    runs.
    """

    def __init__(self) -> None:
        ensure_algorithms()

    async def run(
        self,
        request: HashRequest,
        on_progress: ProgressCallback | None = None,
        cancel_token: CancellationToken | None = None,
        run_id: str | None = None,
    ) -> CascadeOutcome:
        """Execute the cascade.

        Args:
            request: Normalized run parameters.
            on_progress: Called with a ProgressEvent after every level.
            cancel_token: Polled before each level and after the last one.
            run_id: Identifier attached to log records. Generated if None.

        Returns:
            CascadeOutcome with status "completed" and a FinalResult, or
            status "stopped" and no result. Log context is cleared on exit.
        """
        run_id = run_id or uuid.uuid4().hex[:12]
        set_run_context(run_id)
        try:
            return await self._execute(request, on_progress, cancel_token)
        finally:
            clear_context()

    async def _execute(
        self,
        request: HashRequest,
        on_progress: ProgressCallback | None,
        cancel_token: CancellationToken | None,
    ) -> CascadeOutcome:
        start_ns = time.monotonic_ns()

        logger.info(
            "Cascade started: levels=%d, repetitions=%d, encoding=%s",
            request.levels,
            request.repetitions,
            request.encoding,
        )

        current = request.original_text
        completed = 0

        for level in range(1, request.levels + 1):
            if _cancelled(cancel_token):
                return self._stopped(completed, request.levels, start_ns)

            set_level_context(level)
            current = await asyncio.to_thread(
                run_level, request.original_text, current, request.repetitions
            )
            completed = level
            logger.debug("Level %d/%d complete", level, request.levels)

            await notify(
                on_progress,
                ProgressEvent(
                    level_completed=level,
                    total_levels=request.levels,
                    current_encoded_hash=encode_hash(current, request.encoding),
                ),
            )

        set_level_context(None)
        if _cancelled(cancel_token):
            return self._stopped(completed, request.levels, start_ns)

        duration_ms = (time.monotonic_ns() - start_ns) // 1_000_000
        result = FinalResult(
            encoded_hash=encode_hash(current, request.encoding),
            encoding=request.encoding,
            raw_hash=current,
            levels=request.levels,
            repetitions=request.repetitions,
            duration_ms=duration_ms,
        )
        logger.info("Cascade completed: %d levels, %dms", completed, duration_ms)
        return CascadeOutcome(
            status="completed",
            result=result,
            levels_completed=completed,
            duration_ms=duration_ms,
        )

    @staticmethod
    def _stopped(completed: int, total: int, start_ns: int) -> CascadeOutcome:
        set_level_context(None)
        duration_ms = (time.monotonic_ns() - start_ns) // 1_000_000
        logger.info("Cascade stopped after %d/%d levels", completed, total)
        return CascadeOutcome(
            status="stopped",
            levels_completed=completed,
            duration_ms=duration_ms,
        )


def _cancelled(token: CancellationToken | None) -> bool:
    return token is not None and token.is_cancelled
