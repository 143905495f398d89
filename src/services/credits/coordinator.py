"""Single-flight memoization of the upstream credits fetch.

The coordinator moves through three states:

    EMPTY --first caller--> FETCHING --success--> CACHED (terminal)
                                |
                                +--failure--> EMPTY

Every caller arriving while FETCHING awaits the same in-flight task,
so overlapping upstream fetches never happen. A failed fetch is not
cached: all waiters receive the error and the next call retries.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import Generic, TypeVar

from src.etl.utils.logger import setup_logger
from src.monitoring.metrics import UPSTREAM_FETCH_DURATION, UPSTREAM_FETCHES_TOTAL

logger = setup_logger("services.credits")

T = TypeVar("T")


class FetchState(StrEnum):
    """Lifecycle of a coordinated fetch."""

    EMPTY = "empty"
    FETCHING = "fetching"
    CACHED = "cached"


class FetchCoordinator(Generic[T]):
    """Memoizes one async acquisition and shares it between callers.

    No timeout, no invalidation: once cached, the value is returned
    for the coordinator's lifetime.

    Attributes:
        name: Label used in logs and metrics.
    """

    def __init__(self, fetch: Callable[[], Awaitable[T]], name: str = "credits") -> None:
        """Initialize coordinator.

        Args:
            fetch: Zero-argument coroutine function performing the acquisition.
            name: Label used in logs and metrics.
        """
        self.name = name
        self._fetch = fetch
        self._state = FetchState.EMPTY
        self._task: asyncio.Task[T] | None = None
        self._value: T | None = None
        self._fetch_count = 0

    @property
    def state(self) -> FetchState:
        """Current lifecycle state."""
        return self._state

    @property
    def fetch_count(self) -> int:
        """Number of upstream fetches started so far."""
        return self._fetch_count

    async def get(self) -> T:
        """Return the cached value, fetching it once if needed.

        Returns:
            The fetched value, identical for every caller.

        Raises:
            Exception: Whatever the fetch raised, for every waiting caller.
        """
        if self._state is FetchState.CACHED:
            return self._value  # type: ignore[return-value]

        if self._task is None:
            self._state = FetchState.FETCHING
            self._task = asyncio.create_task(self._run())
            self._task.add_done_callback(_consume_exception)

        # One cancelled waiter must not cancel the fetch for the others
        return await asyncio.shield(self._task)

    async def _run(self) -> T:
        """Perform the fetch and settle the state."""
        self._fetch_count += 1
        logger.info(f"Fetching {self.name} (attempt {self._fetch_count})")
        start = time.perf_counter()

        try:
            value = await self._fetch()
        except (Exception, asyncio.CancelledError) as e:
            self._reset()
            UPSTREAM_FETCHES_TOTAL.labels(source=self.name, outcome="failure").inc()
            logger.error(f"Fetching {self.name} failed: {e!r}")
            raise

        duration = time.perf_counter() - start
        self._value = value
        self._state = FetchState.CACHED
        self._task = None

        UPSTREAM_FETCHES_TOTAL.labels(source=self.name, outcome="success").inc()
        UPSTREAM_FETCH_DURATION.labels(source=self.name).observe(duration)
        logger.info(f"Cached {self.name} in {duration:.2f}s")
        return value

    def _reset(self) -> None:
        """Return to EMPTY so a later call may retry."""
        self._state = FetchState.EMPTY
        self._task = None
        self._value = None


def _consume_exception(task: asyncio.Task) -> None:
    """Mark a failed fetch as retrieved even if every waiter was cancelled."""
    if not task.cancelled():
        task.exception()
