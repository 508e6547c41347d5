"""Important links and guest list for a trip."""

import logging

from planner.errors import ErrorCode, RemoteError, RequestInFlightError, ValidationError
from planner.guard import RequestGuard
from planner.models import CreatedLink, Failure, Link, LinkCreateRequest, Participant, Success
from planner.remote import LinkClient, ParticipantClient
from planner.validation import is_url

logger = logging.getLogger(__name__)

CREATE_LINK_OPERATION = "create_link"


class TripDetails:
    def __init__(
        self,
        trip_id: str,
        link_client: LinkClient,
        participant_client: ParticipantClient,
        guard: RequestGuard | None = None,
    ):
        self.trip_id = trip_id
        self._link_client = link_client
        self._participant_client = participant_client
        self._guard = guard or RequestGuard()

    async def create_link(self, title: str, url: str) -> Success[CreatedLink] | Failure:
        title = title.strip()
        url = url.strip()
        if not title:
            error = ValidationError("Link title is required", code=ErrorCode.MISSING_LINK_TITLE, field="title")
            return Failure.from_error(error)
        if not is_url(url):
            error = ValidationError("Invalid link URL", code=ErrorCode.INVALID_LINK_URL, field="url")
            return Failure.from_error(error)

        try:
            async with self._guard.hold(CREATE_LINK_OPERATION):
                created = await self._link_client.create(LinkCreateRequest(trip_id=self.trip_id, title=title, url=url))
        except (RemoteError, RequestInFlightError) as e:
            logger.exception("Failed to create link for trip %s", self.trip_id)
            return Failure.from_error(e)

        logger.info("Created link %s for trip %s", created.link_id, self.trip_id)
        return Success(value=created)

    async def list_links(self) -> Success[list[Link]] | Failure:
        try:
            return Success(value=await self._link_client.list_by_trip(self.trip_id))
        except RemoteError as e:
            logger.exception("Failed to list links for trip %s", self.trip_id)
            return Failure.from_error(e)

    async def list_guests(self) -> Success[list[Participant]] | Failure:
        try:
            return Success(value=await self._participant_client.list_by_trip(self.trip_id))
        except RemoteError as e:
            logger.exception("Failed to list guests for trip %s", self.trip_id)
            return Failure.from_error(e)
