# tests/unit/logging/test_unit_context.py — v2
"""Tests for logging/context.py — run and level context variables."""

from __future__ import annotations

import asyncio

from multihasher.logging.context import (
    LogContext,
    clear_context,
    get_context,
    set_level_context,
    set_run_context,
)


class TestLogContext:
    def test_empty_by_default(self):
        assert get_context().as_dict() == {}

    def test_run_context(self):
        set_run_context("r1")
        assert get_context() == LogContext(run_id="r1", level=None)

    def test_new_run_resets_level(self):
        set_run_context("r1")
        set_level_context(4)
        set_run_context("r2")
        assert get_context().level is None

    def test_clear(self):
        set_run_context("r1")
        set_level_context(1)
        clear_context()
        assert get_context().as_dict() == {}

    def test_level_zero_kept(self):
        set_level_context(0)
        assert get_context().as_dict() == {"level": 0}

    def test_isolated_per_task(self):
        async def worker(run_id: str) -> str | None:
            set_run_context(run_id)
            await asyncio.sleep(0)
            return get_context().run_id

        async def both() -> list[str | None]:
            return list(await asyncio.gather(worker("a"), worker("b")))

        assert asyncio.run(both()) == ["a", "b"]
