"""Background removal of idle visitor sessions."""

import asyncio
import logging

from brickstone.domain import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_SWEEP_INTERVAL = 60.0


class SessionSweeper:
    """Prunes expired sessions on a fixed interval while the app runs."""

    def __init__(
        self,
        store: SessionStore,
        interval_seconds: float = DEFAULT_SWEEP_INTERVAL,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("Sweep interval must be positive")
        self._store = store
        self._interval = interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def sweep(self) -> int:
        """Prune once. Returns number of sessions removed."""
        removed = self._store.prune()
        if removed:
            logger.info(
                "Swept idle sessions removed=%d remaining=%d", removed, self._store.count()
            )
        return removed

    async def start(self) -> None:
        """Start the sweep loop on the running event loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._sweep_loop())
        logger.debug("Session sweeper started interval=%.1fs", self._interval)

    async def stop(self) -> None:
        """Cancel the sweep loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.debug("Session sweeper stopped")

    async def _sweep_loop(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self.sweep()
