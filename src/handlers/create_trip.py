"""One-shot trip creation: runs a filled-in form through the state machine."""

import asyncio
import logging
from datetime import date
from typing import Any

from planner.errors import ErrorCode, ValidationError
from planner.models import Failure
from planner.remote import HttpTripClient, get_planner_api
from planner.services.binding import DeviceTripBinding
from planner.services.trip_form import (
    AddEmail,
    ConfirmSubmit,
    Continue,
    Rejected,
    RequestSubmit,
    SelectDay,
    SetDestination,
    SubmissionFailed,
    TripCreated,
    TripCreationFlow,
)
from planner.storage import get_binding_store

from handlers.responses import failure_response

logger = logging.getLogger(__name__)


def _first_failure(effects: list[Any]) -> Failure | None:
    for effect in effects:
        if isinstance(effect, (Rejected, SubmissionFailed)):
            return effect.failure
    return None


async def _create(event: dict[str, Any], binding: DeviceTripBinding) -> dict[str, Any]:
    async with get_planner_api() as api:
        flow = TripCreationFlow(HttpTripClient(api))

        flow.dispatch(SetDestination(destination=event.get("destination", "")))
        for key in ("startsAt", "endsAt"):
            if not event.get(key):
                continue
            try:
                day = date.fromisoformat(event[key])
            except ValueError:
                error = ValidationError(f"Invalid {key}", code=ErrorCode.MISSING_TRIP_DETAILS, field="dates")
                return failure_response(Failure.from_error(error))
            flow.dispatch(SelectDay(day=day))

        steps: list[Any] = [Continue()]
        steps += [AddEmail(candidate=email) for email in event.get("emails", [])]
        steps += [RequestSubmit(), ConfirmSubmit()]

        for step in steps:
            effects = await flow.handle(step)
            failure = _first_failure(effects)
            if failure is not None:
                return failure_response(failure)
            for effect in effects:
                if isinstance(effect, TripCreated):
                    binding.save(effect.trip_id)
                    return {"statusCode": 201, "tripId": effect.trip_id, "route": f"/trip/{effect.trip_id}"}

    logger.error("Trip form finished without creating a trip")
    return {"statusCode": 500, "body": {"error": "INTERNAL_ERROR"}}


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    binding = DeviceTripBinding(get_binding_store())
    return asyncio.run(_create(event, binding))
