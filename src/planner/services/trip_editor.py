"""Owner-mode editing of the bound trip."""

import logging
from datetime import date

from planner.errors import ErrorCode, RemoteError, RequestInFlightError, ValidationError
from planner.guard import RequestGuard
from planner.models import DateRange, Failure, Success, Trip, TripUpdateRequest
from planner.remote import TripClient
from planner.services.binding import DeviceTripBinding
from planner.services.date_range import select

logger = logging.getLogger(__name__)

UPDATE_OPERATION = "update_trip"


class TripEditor:
    def __init__(self, trip_client: TripClient, binding: DeviceTripBinding, guard: RequestGuard | None = None):
        self._trip_client = trip_client
        self._binding = binding
        self._guard = guard or RequestGuard()
        self.dates = DateRange()

    @property
    def is_updating(self) -> bool:
        return self._guard.is_busy(UPDATE_OPERATION)

    async def load(self, trip_id: str) -> Success[Trip] | Failure:
        try:
            trip = await self._trip_client.get_by_id(trip_id)
        except RemoteError as e:
            logger.exception("Failed to load trip %s", trip_id)
            return Failure.from_error(e)
        return Success(value=trip)

    def select_day(self, day: date) -> DateRange:
        self.dates = select(self.dates, day)
        return self.dates

    async def update(self, trip_id: str, destination: str) -> Success[None] | Failure:
        destination = destination.strip()
        starts_at, ends_at = self.dates.starts_at, self.dates.ends_at
        if not destination or starts_at is None or ends_at is None:
            error = ValidationError(
                "Destination and both trip dates are required",
                code=ErrorCode.MISSING_TRIP_DETAILS,
                field="destination" if not destination else "dates",
            )
            logger.warning("Rejected update of trip %s: %s", trip_id, error.message)
            return Failure.from_error(error)

        request = TripUpdateRequest(id=trip_id, destination=destination, starts_at=starts_at, ends_at=ends_at)
        try:
            async with self._guard.hold(UPDATE_OPERATION):
                await self._trip_client.update(request)
        except (RemoteError, RequestInFlightError) as e:
            logger.exception("Failed to update trip %s", trip_id)
            return Failure.from_error(e)

        logger.info("Updated trip %s", trip_id)
        self.dates = DateRange()
        return Success(value=None)

    def remove_trip(self) -> None:
        """Forget the bound trip on this device. The remote trip is untouched."""
        self._binding.remove()
