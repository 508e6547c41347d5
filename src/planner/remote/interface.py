from abc import ABC, abstractmethod

from planner.models import (
    CreatedLink,
    CreatedTrip,
    Link,
    LinkCreateRequest,
    Participant,
    ParticipantConfirmation,
    Trip,
    TripCreateRequest,
    TripUpdateRequest,
)


class TripClient(ABC):
    @abstractmethod
    async def create(self, request: TripCreateRequest) -> CreatedTrip: ...

    @abstractmethod
    async def get_by_id(self, trip_id: str) -> Trip:
        """Raises TripNotFoundError when the trip does not exist."""

    @abstractmethod
    async def update(self, request: TripUpdateRequest) -> None: ...


class ParticipantClient(ABC):
    @abstractmethod
    async def confirm(self, confirmation: ParticipantConfirmation) -> None:
        """Idempotent per participant id: re-confirming succeeds."""

    @abstractmethod
    async def list_by_trip(self, trip_id: str) -> list[Participant]: ...


class LinkClient(ABC):
    @abstractmethod
    async def create(self, request: LinkCreateRequest) -> CreatedLink: ...

    @abstractmethod
    async def list_by_trip(self, trip_id: str) -> list[Link]: ...
