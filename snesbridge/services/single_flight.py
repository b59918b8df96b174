"""Single-flight gate for request/response exchanges."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class SingleFlightGuard:
    """Sequentialises round trips so replies are never interleaved.

    Not re-entrant: holding the gate and asking for it again from the same
    task deadlocks.
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._condition = asyncio.Condition()
        self._current: str | None = None
        self._logger = logger or logging.getLogger("snesbridge.service.single_flight")

    @property
    def current(self) -> str | None:
        return self._current

    @property
    def busy(self) -> bool:
        return self._current is not None

    def _is_idle(self) -> bool:
        return self._current is None

    @asynccontextmanager
    async def hold(self, label: str) -> AsyncIterator[None]:
        async with self._condition:
            if self._current is not None:
                self._logger.debug("%s waiting for %s to finish", label, self._current)
            await self._condition.wait_for(self._is_idle)
            self._current = label

        try:
            yield
        finally:
            # Cleared before any await so a cancelled release cannot leave the gate held.
            self._current = None
            await asyncio.shield(self._notify_idle())

    async def _notify_idle(self) -> None:
        async with self._condition:
            self._condition.notify_all()
