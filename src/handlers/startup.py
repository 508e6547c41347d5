"""App start: resume the bound trip or open the creation flow."""

import asyncio
import logging
from typing import Any

from planner.remote import HttpTripClient, get_planner_api
from planner.services.binding import DeviceTripBinding
from planner.services.session import resume_trip
from planner.storage import get_binding_store

logger = logging.getLogger(__name__)


async def _resume(binding: DeviceTripBinding) -> dict[str, Any]:
    async with get_planner_api() as api:
        trip = await resume_trip(binding, HttpTripClient(api))

    if trip is None:
        return {"statusCode": 200, "route": "/", "trip": None}
    return {
        "statusCode": 200,
        "route": f"/trip/{trip.id}",
        "trip": trip.model_dump(mode="json"),
        "summary": trip.summary(),
    }


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    binding = DeviceTripBinding(get_binding_store())
    result = asyncio.run(_resume(binding))
    logger.info("Startup route: %s", result["route"])
    return result
