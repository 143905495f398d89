"""Unit tests for the single-flight fetch coordinator."""

import asyncio
import gc

import pytest
from prometheus_client import REGISTRY

from src.services.credits.coordinator import FetchCoordinator, FetchState


class _GatedFetch:
    """Fetch function blocked until ``release`` is set."""

    def __init__(self, value: object = None, error: Exception | None = None) -> None:
        self.value = value if value is not None else {"snapshot": 1}
        self.error = error
        self.calls = 0
        self.release = asyncio.Event()

    async def __call__(self) -> object:
        self.calls += 1
        await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.value


class TestStates:
    @staticmethod
    def test_starts_empty() -> None:
        coordinator = FetchCoordinator(_GatedFetch())
        assert coordinator.state is FetchState.EMPTY
        assert coordinator.fetch_count == 0

    @staticmethod
    async def test_fetching_then_cached() -> None:
        fetch = _GatedFetch()
        coordinator = FetchCoordinator(fetch)

        waiter = asyncio.create_task(coordinator.get())
        await asyncio.sleep(0)
        assert coordinator.state is FetchState.FETCHING

        fetch.release.set()
        assert await waiter is fetch.value
        assert coordinator.state is FetchState.CACHED

    @staticmethod
    async def test_cached_value_reused() -> None:
        fetch = _GatedFetch()
        fetch.release.set()
        coordinator = FetchCoordinator(fetch)

        first = await coordinator.get()
        second = await coordinator.get()

        assert first is second
        assert fetch.calls == 1
        assert coordinator.fetch_count == 1


class TestSingleFlight:
    @staticmethod
    async def test_concurrent_callers_share_one_fetch() -> None:
        fetch = _GatedFetch()
        coordinator = FetchCoordinator(fetch)

        waiters = [asyncio.create_task(coordinator.get()) for _ in range(10)]
        await asyncio.sleep(0)
        fetch.release.set()
        results = await asyncio.gather(*waiters)

        assert fetch.calls == 1
        assert all(result is fetch.value for result in results)

    @staticmethod
    async def test_cancelled_waiter_does_not_cancel_fetch() -> None:
        fetch = _GatedFetch()
        coordinator = FetchCoordinator(fetch)

        cancelled = asyncio.create_task(coordinator.get())
        survivor = asyncio.create_task(coordinator.get())
        await asyncio.sleep(0)

        cancelled.cancel()
        with pytest.raises(asyncio.CancelledError):
            await cancelled

        fetch.release.set()
        assert await survivor is fetch.value
        assert fetch.calls == 1
        assert coordinator.state is FetchState.CACHED


class TestFailure:
    @staticmethod
    async def test_failure_resets_to_empty() -> None:
        fetch = _GatedFetch(error=RuntimeError("upstream down"))
        fetch.release.set()
        coordinator = FetchCoordinator(fetch)

        with pytest.raises(RuntimeError, match="upstream down"):
            await coordinator.get()

        assert coordinator.state is FetchState.EMPTY

    @staticmethod
    async def test_retry_after_failure() -> None:
        fetch = _GatedFetch(error=RuntimeError("upstream down"))
        fetch.release.set()
        coordinator = FetchCoordinator(fetch)

        with pytest.raises(RuntimeError):
            await coordinator.get()

        fetch.error = None
        assert await coordinator.get() is fetch.value
        assert coordinator.fetch_count == 2
        assert coordinator.state is FetchState.CACHED

    @staticmethod
    async def test_waiters_receive_same_error() -> None:
        error = RuntimeError("upstream down")
        fetch = _GatedFetch(error=error)
        coordinator = FetchCoordinator(fetch)

        waiters = [asyncio.create_task(coordinator.get()) for _ in range(5)]
        await asyncio.sleep(0)
        fetch.release.set()
        results = await asyncio.gather(*waiters, return_exceptions=True)

        assert fetch.calls == 1
        assert all(result is error for result in results)

    @staticmethod
    async def test_failure_with_no_waiters_left_is_not_reported() -> None:
        loop = asyncio.get_running_loop()
        reports: list[dict] = []
        previous_handler = loop.get_exception_handler()
        loop.set_exception_handler(lambda _loop, context: reports.append(context))

        try:
            fetch = _GatedFetch(error=RuntimeError("upstream down"))
            coordinator = FetchCoordinator(fetch)

            waiters = [asyncio.create_task(coordinator.get()) for _ in range(3)]
            await asyncio.sleep(0)
            for waiter in waiters:
                waiter.cancel()
            await asyncio.gather(*waiters, return_exceptions=True)

            fetch.release.set()
            for _ in range(5):
                await asyncio.sleep(0)
            gc.collect()

            assert coordinator.state is FetchState.EMPTY
            assert not [r for r in reports if "never retrieved" in r.get("message", "")]
        finally:
            loop.set_exception_handler(previous_handler)


class TestMetrics:
    @staticmethod
    async def test_outcomes_counted() -> None:
        fetch = _GatedFetch(error=RuntimeError("boom"))
        fetch.release.set()
        coordinator = FetchCoordinator(fetch, name="coordinator_metrics_test")

        with pytest.raises(RuntimeError):
            await coordinator.get()
        fetch.error = None
        await coordinator.get()

        def sample(outcome: str) -> float | None:
            return REGISTRY.get_sample_value(
                "castgraph_upstream_fetches_total",
                {"source": "coordinator_metrics_test", "outcome": outcome},
            )

        assert sample("failure") == 1.0
        assert sample("success") == 1.0
