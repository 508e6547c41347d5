"""Inbound trip links: ``<scheme>://trip/<tripId>?participant=<participantId>``."""

from typing import Literal
from urllib.parse import parse_qs, quote, unquote, urlencode, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from planner.errors import ErrorCode, ValidationError

# Older app builds sent the participant id as "guest".
_PARTICIPANT_PARAMS = ("participant", "guest")


class DeepLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    trip_id: str = Field(..., min_length=1)
    participant_id: str | None = None

    @property
    def mode(self) -> Literal["confirm", "owner"]:
        return "confirm" if self.participant_id else "owner"


def parse_deep_link(url: str, scheme: str = "planner") -> DeepLink:
    parts = urlsplit(url.strip())
    if parts.scheme.lower() != scheme.lower():
        raise ValidationError(f"Unexpected link scheme {parts.scheme!r}", code=ErrorCode.INVALID_DEEP_LINK)

    segments = [s for s in f"{parts.netloc}/{parts.path}".split("/") if s]
    if len(segments) != 2 or segments[0] != "trip":
        raise ValidationError(f"Not a trip link: {url!r}", code=ErrorCode.INVALID_DEEP_LINK)

    query = parse_qs(parts.query)
    participant_id = None
    for name in _PARTICIPANT_PARAMS:
        values = [v.strip() for v in query.get(name, []) if v.strip()]
        if values:
            participant_id = values[0]
            break

    return DeepLink(trip_id=unquote(segments[1]), participant_id=participant_id)


def build_confirmation_link(trip_id: str, participant_id: str, scheme: str = "planner") -> str:
    """Link embedded in invite emails; opens the app in confirmation mode."""
    return f"{scheme}://trip/{quote(trip_id, safe='')}?{urlencode({'participant': participant_id})}"
