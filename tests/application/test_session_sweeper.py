"""Tests for SessionSweeper."""

import asyncio

import pytest

from brickstone.application import SessionSweeper


class TestSessionSweeper:
    """Tests for periodic session pruning."""

    def test_sweep_removes_idle_sessions(self, session_store, fake_clock):
        """Test one sweep drops every expired session."""
        for _ in range(5):
            session_store.create()
        fake_clock.advance(3600)
        fresh = session_store.create()

        removed = SessionSweeper(session_store).sweep()

        assert removed == 5
        assert session_store.count() == 1
        assert session_store.get(fresh.id) is fresh

    def test_loop_prunes_while_running(self, session_store, fake_clock):
        """Test the background loop keeps the store bounded."""
        sweeper = SessionSweeper(session_store, interval_seconds=0.01)
        for _ in range(50):
            session_store.create()
        fake_clock.advance(36000)

        async def run():
            await sweeper.start()
            assert sweeper.running is True
            await asyncio.sleep(0.05)
            await sweeper.stop()

        asyncio.run(run())

        assert session_store.count() == 0
        assert sweeper.running is False

    def test_stop_without_start(self, session_store):
        """Test stopping an idle sweeper is harmless."""
        sweeper = SessionSweeper(session_store)

        asyncio.run(sweeper.stop())

        assert sweeper.running is False

    def test_start_twice_keeps_one_task(self, session_store):
        """Test a second start does not spawn another loop."""
        sweeper = SessionSweeper(session_store, interval_seconds=10)

        async def run():
            await sweeper.start()
            first = sweeper._task
            await sweeper.start()
            assert sweeper._task is first
            await sweeper.stop()

        asyncio.run(run())

    def test_invalid_interval_raises(self, session_store):
        """Test a non-positive interval is rejected."""
        with pytest.raises(ValueError, match="interval must be positive"):
            SessionSweeper(session_store, interval_seconds=0)
