# src/api/facade.py — v2
"""Public API facade — single entry point for a hashing run.

Usage:
    from multihasher.api.facade import start_hashing
    outcome = await start_hashing("intention", "10", "1K", "512-Bit",
                                  on_progress=print, on_status=print)
"""

from __future__ import annotations

import logging

from multihasher.config.settings import Settings
from multihasher.core.models import CascadeOutcome, HashRequest, resolve_encoding
from multihasher.core.normalizer import normalize
from multihasher.engine.cancellation import CancellationToken
from multihasher.engine.cascade import CascadeEngine, ProgressCallback
from multihasher.engine.session import (
    CompleteCallback,
    HashingSession,
    StatusCallback,
)

logger = logging.getLogger(__name__)


def build_request(
    text: str,
    levels_raw: str,
    repetitions_raw: str,
    encoding: str,
    settings: Settings | None = None,
) -> HashRequest:
    """Normalize raw user input into a HashRequest.

    Counts go through normalize() with the configured maxima and are then
    raised to at least 1, so the request is always in range.
    """
    settings = settings or Settings()
    levels = max(1, normalize(levels_raw, settings.max_levels))
    repetitions = max(1, normalize(repetitions_raw, settings.max_repetitions))
    return HashRequest(
        original_text=text,
        levels=levels,
        repetitions=repetitions,
        encoding=resolve_encoding(encoding),
    )


async def start_hashing(
    text: str,
    levels_raw: str,
    repetitions_raw: str,
    encoding: str,
    on_progress: ProgressCallback | None = None,
    on_status: StatusCallback | None = None,
    on_complete: CompleteCallback | None = None,
    cancel_token: CancellationToken | None = None,
    settings: Settings | None = None,
    engine: CascadeEngine | None = None,
) -> CascadeOutcome:
    """Normalize input, run the cascade and report through the callbacks.

    Args:
        text: Intention text. Emptiness is the caller's concern.
        levels_raw: Raw level count, e.g. "10".
        repetitions_raw: Raw repetition count, e.g. "1.5K".
        encoding: Output encoding name ("64-Bit", "256", "512-Bit", ...).
        on_progress: Receives a ProgressEvent per completed level.
        on_status: Receives status lines (start, per level, completed/stopped).
        on_complete: Receives the FinalResult once, only on completion.
        cancel_token: Set it to stop the run at the next level boundary.
        settings: Bounds for normalization. Loaded from .env if None.
        engine: Engine to run on. A new CascadeEngine if None.

    Returns:
        CascadeOutcome; status "stopped" when cancelled.
    """
    request = build_request(text, levels_raw, repetitions_raw, encoding, settings)
    logger.debug(
        "Request built: levels=%d (%r), repetitions=%d (%r)",
        request.levels, levels_raw, request.repetitions, repetitions_raw,
    )

    session = HashingSession(engine=engine)
    return await session.start(
        request,
        on_progress=on_progress,
        on_status=on_status,
        on_complete=on_complete,
        cancel_token=cancel_token,
    )
