# src/core/models.py — v2
"""Core domain models: HashRequest, ProgressEvent, FinalResult, CascadeOutcome.

Models are immutable snapshots passed between the facade, the cascade engine
and the caller's notification sinks. The engine's working value (current hash
plus original text) lives only inside a single run and is never modelled here.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

HARD_MAX_LEVELS = 1000
HARD_MAX_REPETITIONS = 100_000

Encoding = Literal["64-Bit", "256-Bit", "512-Bit", "chunked"]
CascadeStatus = Literal["completed", "stopped"]

STATUS_STARTING = "Calculating First Hash..."
STATUS_COMPLETED = "Hashing completed."
STATUS_STOPPED = "Hashing stopped."

_ENCODING_ALIASES: dict[str, Encoding] = {
    "64": "64-Bit",
    "64-BIT": "64-Bit",
    "64BIT": "64-Bit",
    "BIT64": "64-Bit",
    "256": "256-Bit",
    "256-BIT": "256-Bit",
    "256BIT": "256-Bit",
    "BIT256": "256-Bit",
    "512": "512-Bit",
    "512-BIT": "512-Bit",
    "512BIT": "512-Bit",
    "BIT512": "512-Bit",
}


def resolve_encoding(raw: str) -> Encoding:
    """Map a user-facing encoding name onto an Encoding.

    Unrecognised names fall back to "chunked".
    """
    return _ENCODING_ALIASES.get(raw.strip().upper(), "chunked")


def level_status_message(level_completed: int, total_levels: int) -> str:
    """Status line shown after each completed cascade level."""
    return f"{level_completed} / {total_levels} Hash Levels Converted."


class HashRequest(BaseModel):
    """One cascade run's parameters, already normalized and clamped."""

    model_config = ConfigDict(frozen=True)

    original_text: str
    levels: int = Field(ge=1, le=HARD_MAX_LEVELS)
    repetitions: int = Field(ge=1, le=HARD_MAX_REPETITIONS)
    encoding: Encoding = "512-Bit"


class ProgressEvent(BaseModel):
    """Emitted once per completed level, in increasing level order."""

    model_config = ConfigDict(frozen=True)

    level_completed: int
    total_levels: int
    current_encoded_hash: str

    @property
    def status_message(self) -> str:
        return level_status_message(self.level_completed, self.total_levels)


class FinalResult(BaseModel):
    """Encoded hash of the last level, produced once per completed run."""

    model_config = ConfigDict(frozen=True)

    encoded_hash: str
    encoding: Encoding
    raw_hash: str
    levels: int
    repetitions: int
    duration_ms: int = 0


class CascadeOutcome(BaseModel):
    """Terminal state of a cascade run.

    ``result`` is set only when ``status`` is "completed".
    """

    status: CascadeStatus
    result: FinalResult | None = None
    levels_completed: int = 0
    duration_ms: int = 0

    @property
    def completed(self) -> bool:
        return self.status == "completed"

    @property
    def status_message(self) -> str:
        return STATUS_COMPLETED if self.completed else STATUS_STOPPED
