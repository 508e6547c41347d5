"""Unit tests for the in-flight request guard."""

import asyncio

import pytest

from planner.errors import RequestInFlightError
from planner.guard import RequestGuard


@pytest.mark.asyncio
async def test_hold_marks_operation_busy():
    guard = RequestGuard()
    async with guard.hold("create_trip"):
        assert guard.is_busy("create_trip")
    assert not guard.is_busy("create_trip")


@pytest.mark.asyncio
async def test_second_hold_rejected_while_in_flight():
    guard = RequestGuard()
    async with guard.hold("create_trip"):
        with pytest.raises(RequestInFlightError) as exc_info:
            async with guard.hold("create_trip"):
                pass
    assert exc_info.value.operation == "create_trip"


@pytest.mark.asyncio
async def test_operations_are_independent():
    guard = RequestGuard()
    async with guard.hold("create_trip"):
        async with guard.hold("confirm_participant"):
            assert guard.is_busy("create_trip")
            assert guard.is_busy("confirm_participant")


@pytest.mark.asyncio
async def test_released_after_exception():
    guard = RequestGuard()
    with pytest.raises(RuntimeError):
        async with guard.hold("update_trip"):
            raise RuntimeError("remote down")
    assert not guard.is_busy("update_trip")


@pytest.mark.asyncio
async def test_concurrent_tasks_only_one_runs():
    guard = RequestGuard()
    release = asyncio.Event()
    calls = []

    async def work():
        async with guard.hold("create_trip"):
            calls.append(1)
            await release.wait()

    first = asyncio.create_task(work())
    await asyncio.sleep(0)
    with pytest.raises(RequestInFlightError):
        await work()
    release.set()
    await first

    assert calls == [1]
