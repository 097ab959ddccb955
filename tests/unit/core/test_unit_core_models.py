# tests/unit/core/test_unit_core_models.py — v1
"""Tests for core/models.py — request bounds, events and outcomes."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from multihasher.core.models import (
    STATUS_COMPLETED,
    STATUS_STOPPED,
    CascadeOutcome,
    FinalResult,
    HashRequest,
    ProgressEvent,
    level_status_message,
    resolve_encoding,
)


class TestHashRequest:
    def test_valid(self):
        req = HashRequest(original_text="x", levels=1, repetitions=1)
        assert req.encoding == "512-Bit"

    def test_upper_bounds_accepted(self):
        req = HashRequest(original_text="x", levels=1000, repetitions=100_000)
        assert req.levels == 1000

    @pytest.mark.parametrize("levels,repetitions", [
        (0, 1), (1001, 1), (1, 0), (1, 100_001),
    ])
    def test_out_of_range_rejected(self, levels: int, repetitions: int):
        with pytest.raises(ValidationError):
            HashRequest(original_text="x", levels=levels, repetitions=repetitions)

    def test_empty_text_allowed(self):
        assert HashRequest(original_text="", levels=1, repetitions=1).original_text == ""

    def test_frozen(self):
        req = HashRequest(original_text="x", levels=1, repetitions=1)
        with pytest.raises(ValidationError):
            req.levels = 2  # type: ignore[misc]

    def test_unknown_encoding_rejected(self):
        with pytest.raises(ValidationError):
            HashRequest(original_text="x", levels=1, repetitions=1, encoding="128-Bit")


class TestResolveEncoding:
    @pytest.mark.parametrize("raw,expected", [
        ("64-Bit", "64-Bit"),
        ("64", "64-Bit"),
        ("bit64", "64-Bit"),
        ("256-bit", "256-Bit"),
        (" 256 ", "256-Bit"),
        ("512-Bit", "512-Bit"),
        ("512", "512-Bit"),
        ("other", "chunked"),
        ("", "chunked"),
    ])
    def test_aliases(self, raw: str, expected: str):
        assert resolve_encoding(raw) == expected


class TestStatusMessages:
    def test_level_message(self):
        assert level_status_message(3, 10) == "3 / 10 Hash Levels Converted."

    def test_progress_event_message(self):
        event = ProgressEvent(level_completed=1, total_levels=2, current_encoded_hash="AB")
        assert event.status_message == "1 / 2 Hash Levels Converted."

    def test_outcome_completed(self):
        result = FinalResult(
            encoded_hash="AB", encoding="512-Bit", raw_hash="AB", levels=1, repetitions=1,
        )
        outcome = CascadeOutcome(status="completed", result=result, levels_completed=1)
        assert outcome.completed is True
        assert outcome.status_message == STATUS_COMPLETED

    def test_outcome_stopped(self):
        outcome = CascadeOutcome(status="stopped", levels_completed=2)
        assert outcome.completed is False
        assert outcome.result is None
        assert outcome.status_message == STATUS_STOPPED
