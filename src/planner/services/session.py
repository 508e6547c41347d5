"""Startup: decide whether to resume the bound trip or start creation."""

import logging

from planner.errors import RemoteError
from planner.models import Trip
from planner.remote import TripClient
from planner.services.binding import DeviceTripBinding

logger = logging.getLogger(__name__)


async def resume_trip(binding: DeviceTripBinding, trip_client: TripClient) -> Trip | None:
    """Return the bound trip, or None to fall back to the creation flow.

    A bound trip that no longer resolves keeps its binding; removal is an
    explicit user action.
    """
    trip_id = binding.load()
    if not trip_id:
        return None

    try:
        return await trip_client.get_by_id(trip_id)
    except RemoteError:
        logger.exception("Could not resume bound trip %s", trip_id)
        return None
