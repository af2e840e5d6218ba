"""Async rate throttling utilities."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

logger = logging.getLogger("oecd_sdmx_client")


class AsyncMinIntervalThrottler:
    """Ensures minimum interval between outbound requests (async).

    Admissions are granted one at a time in the order ``admit()`` was called.
    The lock is held across the whole read-sleep-write sequence, so concurrent
    callers queue behind each other instead of racing on the timestamp.
    """

    def __init__(
        self,
        min_interval_seconds: float,
        *,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self._min_interval_seconds = max(0.0, float(min_interval_seconds))
        self._clock = clock or time.monotonic
        self._sleep = sleeper or asyncio.sleep
        self._last_request_at: float | None = None
        self._gate = asyncio.Lock()

    @property
    def min_interval_seconds(self) -> float:
        return self._min_interval_seconds

    async def admit(self) -> float:
        """Wait for this caller's turn and return its admission timestamp."""

        async with self._gate:
            now = self._clock()
            if self._last_request_at is not None:
                elapsed = now - self._last_request_at
                remaining = self._min_interval_seconds - elapsed
                if remaining > 0:
                    logger.debug("rate limiting: waiting %.3fs before next request", remaining)
                    await self._sleep(remaining)
                    now = self._clock()
            self._last_request_at = now
            return now

    def reset(self) -> None:
        self._last_request_at = None


__all__ = [
    "AsyncMinIntervalThrottler",
]
