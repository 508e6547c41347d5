"""Unit tests for resuming the bound trip at startup."""

from datetime import date

import pytest

from planner.errors import RemoteError, TripNotFoundError
from planner.models import Trip
from planner.services.session import resume_trip

ROME = Trip(id="trip-1", destination="Rome", starts_at=date(2025, 3, 10), ends_at=date(2025, 3, 15))


@pytest.mark.asyncio
async def test_no_binding_falls_back_to_creation(binding, trip_client):
    assert await resume_trip(binding, trip_client) is None
    trip_client.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_resumes_bound_trip(binding, trip_client):
    binding.save("trip-1")
    trip_client.get_by_id.return_value = ROME

    assert await resume_trip(binding, trip_client) == ROME
    trip_client.get_by_id.assert_awaited_once_with("trip-1")


@pytest.mark.asyncio
async def test_deleted_trip_keeps_binding(binding, trip_client):
    binding.save("trip-gone")
    trip_client.get_by_id.side_effect = TripNotFoundError("trip-gone")

    assert await resume_trip(binding, trip_client) is None
    assert binding.get() == "trip-gone"


@pytest.mark.asyncio
async def test_network_failure_falls_back(binding, trip_client):
    binding.save("trip-1")
    trip_client.get_by_id.side_effect = RemoteError("connection refused")

    assert await resume_trip(binding, trip_client) is None
    assert binding.get() == "trip-1"
