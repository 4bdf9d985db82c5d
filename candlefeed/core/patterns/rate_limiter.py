"""Rate-limited task queue for outbound provider calls.

Tasks are zero-argument callables returning an awaitable. The queue starts
at most ``requests_per_minute`` tasks inside any sliding window and runs at
most ``concurrent_requests`` tasks at a time. A task's result or exception
is handed back to the submitter unchanged; nothing is retried.
"""

from __future__ import annotations

import asyncio
import time
from collections import deque
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

from candlefeed.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TaskQueue(Protocol):
    """Submission point for deferred provider calls."""

    async def submit(self, task: Callable[[], Awaitable[T]]) -> T: ...


@dataclass
class RateLimitConfig:
    """Configuration for queue pacing."""

    requests_per_minute: int = 60
    concurrent_requests: int = 1
    window_seconds: float = 60.0

    def __post_init__(self) -> None:
        """Validate rate limit configuration."""
        if self.requests_per_minute <= 0:
            raise ValueError("requests_per_minute must be positive")
        if self.concurrent_requests <= 0:
            raise ValueError("concurrent_requests must be positive")
        if self.window_seconds <= 0:
            raise ValueError("window_seconds must be positive")


class RateLimitedQueue:
    """Sliding-window rate limiter with a concurrency cap."""

    def __init__(
        self,
        config: RateLimitConfig | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        self.config = config or RateLimitConfig()
        self._clock = clock
        self._sleep = sleep
        self._history: deque[float] = deque()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._semaphore = asyncio.Semaphore(self.config.concurrent_requests)
        self._window_lock = asyncio.Lock()
        self._pending = 0

    def _bind_loop(self) -> None:
        """Recreate the asyncio primitives when called from a new event loop."""
        loop = asyncio.get_running_loop()
        if loop is not self._loop:
            self._loop = loop
            self._semaphore = asyncio.Semaphore(self.config.concurrent_requests)
            self._window_lock = asyncio.Lock()

    @property
    def pending(self) -> int:
        """Number of submitted tasks that are waiting or running."""
        return self._pending

    def _evict(self, now: float) -> None:
        cutoff = now - self.config.window_seconds
        while self._history and self._history[0] <= cutoff:
            self._history.popleft()

    async def _acquire_slot(self) -> None:
        async with self._window_lock:
            while True:
                now = self._clock()
                self._evict(now)
                if len(self._history) < self.config.requests_per_minute:
                    self._history.append(now)
                    return
                delay = self._history[0] + self.config.window_seconds - now
                logger.debug(f"Rate limit reached, waiting {delay:.2f} seconds")
                await self._sleep(delay)

    async def submit(self, task: Callable[[], Awaitable[T]]) -> T:
        """Run ``task`` once pacing allows and return its outcome."""

        self._bind_loop()
        self._pending += 1
        try:
            async with self._semaphore:
                await self._acquire_slot()
                return await task()
        finally:
            self._pending -= 1


__all__ = ["RateLimitConfig", "RateLimitedQueue", "TaskQueue"]
