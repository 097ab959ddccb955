# tests/conftest.py — v2
"""Shared test fixtures for all unit and integration tests.

Provides sample requests, a default engine and recording callbacks.
No external dependencies; no test touches the network or a real .env.
"""

from __future__ import annotations

import pytest

from multihasher.config.settings import Settings
from multihasher.core.models import FinalResult, HashRequest, ProgressEvent
from multihasher.engine.cascade import CascadeEngine
from multihasher.logging.context import clear_context


class Recorder:
    """Collects everything a cascade reports through its callbacks."""

    def __init__(self) -> None:
        self.events: list[ProgressEvent] = []
        self.statuses: list[str] = []
        self.results: list[FinalResult] = []

    def on_progress(self, event: ProgressEvent) -> None:
        self.events.append(event)

    def on_status(self, message: str) -> None:
        self.statuses.append(message)

    def on_complete(self, result: FinalResult) -> None:
        self.results.append(result)


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any local .env."""
    return Settings(_env_file=None)


@pytest.fixture
def engine() -> CascadeEngine:
    return CascadeEngine()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def sample_request() -> HashRequest:
    """Small multi-level request that runs in milliseconds."""
    return HashRequest(
        original_text="I am calm and focused.",
        levels=5,
        repetitions=3,
        encoding="512-Bit",
    )
