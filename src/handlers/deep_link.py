"""Inbound deep link: decide between confirmation and owner mode."""

from typing import Any

from planner.config import get_config
from planner.deep_link import parse_deep_link
from planner.errors import ValidationError
from planner.models import Failure

from handlers.responses import failure_response


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        link = parse_deep_link(event.get("url") or "", scheme=get_config().deep_link_scheme)
    except ValidationError as e:
        return failure_response(Failure.from_error(e))

    return {
        "statusCode": 200,
        "route": f"/trip/{link.trip_id}",
        "mode": link.mode,
        "tripId": link.trip_id,
        "participantId": link.participant_id,
    }
