"""Guest confirms attendance from the deep-link confirmation screen."""

import asyncio
from typing import Any

from planner.errors import ErrorCode, ValidationError
from planner.models import Failure
from planner.remote import HttpParticipantClient, get_planner_api
from planner.services.binding import DeviceTripBinding
from planner.services.invite_confirmation import InviteConfirmationFlow
from planner.storage import get_binding_store

from handlers.responses import failure_response


def _required(event: dict[str, Any], key: str) -> str:
    value = event.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{key} is required", code=ErrorCode.INVALID_DEEP_LINK, field=key)
    return value


async def _confirm(
    trip_id: str, participant_id: str, event: dict[str, Any], binding: DeviceTripBinding
) -> dict[str, Any]:
    async with get_planner_api() as api:
        flow = InviteConfirmationFlow(trip_id, HttpParticipantClient(api), binding)
        result = await flow.confirm(participant_id, event.get("name", ""), event.get("email", ""))

    if not result.ok:
        return failure_response(result)
    return {"statusCode": 200, "route": f"/trip/{trip_id}"}


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        trip_id = _required(event, "tripId")
        participant_id = _required(event, "participantId")
    except ValidationError as e:
        return failure_response(Failure.from_error(e))

    binding = DeviceTripBinding(get_binding_store())
    return asyncio.run(_confirm(trip_id, participant_id, event, binding))
