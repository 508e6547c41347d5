"""httpx implementations of the remote clients for the planner REST API."""

import logging
from typing import Any, TypeVar

import httpx
import pydantic

from planner.errors import ErrorCode, RemoteError, TripNotFoundError
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

from .interface import LinkClient, ParticipantClient, TripClient

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=pydantic.BaseModel)


class PlannerApi:
    """Shared transport. Every failure leaves here as a RemoteError."""

    def __init__(self, base_url: str, timeout: float | None = None, client: httpx.AsyncClient | None = None):
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def request(self, method: str, path: str, payload: dict[str, Any] | None = None) -> httpx.Response:
        try:
            response = await self._client.request(method, path, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError:
            raise
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            raise RemoteError(f"Planner API request failed: {e}") from e
        return response

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "PlannerApi":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()


def _status_error(e: httpx.HTTPStatusError) -> RemoteError:
    detail = e.response.text if e.response is not None else str(e)
    return RemoteError(f"Planner API error {e.response.status_code}: {detail}")


def _validate(model: type[T], data: Any) -> T:
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise RemoteError(f"Planner API returned an invalid {model.__name__}: {e}") from e


def _json(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError as e:
        raise RemoteError(f"Planner API returned invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise RemoteError("Planner API returned an unexpected payload")
    return data


class HttpTripClient(TripClient):
    def __init__(self, api: PlannerApi):
        self._api = api

    async def create(self, request: TripCreateRequest) -> CreatedTrip:
        try:
            response = await self._api.request("POST", "/trips", request.model_dump(mode="json"))
        except httpx.HTTPStatusError as e:
            raise _status_error(e) from e
        return _validate(CreatedTrip, _json(response))

    async def get_by_id(self, trip_id: str) -> Trip:
        try:
            response = await self._api.request("GET", f"/trips/{trip_id}")
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise TripNotFoundError(trip_id) from e
            raise _status_error(e) from e
        return _validate(Trip, _json(response).get("trip"))

    async def update(self, request: TripUpdateRequest) -> None:
        payload = request.model_dump(mode="json", exclude={"id"})
        try:
            await self._api.request("PUT", f"/trips/{request.id}", payload)
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise TripNotFoundError(request.id) from e
            raise _status_error(e) from e


class HttpParticipantClient(ParticipantClient):
    def __init__(self, api: PlannerApi):
        self._api = api

    async def confirm(self, confirmation: ParticipantConfirmation) -> None:
        payload = {"name": confirmation.name, "email": confirmation.email}
        try:
            await self._api.request("PATCH", f"/participants/{confirmation.participant_id}/confirm", payload)
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise RemoteError(
                    f"Participant {confirmation.participant_id} not found",
                    code=ErrorCode.PARTICIPANT_NOT_FOUND,
                ) from e
            raise _status_error(e) from e

    async def list_by_trip(self, trip_id: str) -> list[Participant]:
        try:
            response = await self._api.request("GET", f"/trips/{trip_id}/participants")
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise TripNotFoundError(trip_id) from e
            raise _status_error(e) from e
        return [_validate(Participant, {"trip_id": trip_id, **p}) for p in _json(response).get("participants", [])]


class HttpLinkClient(LinkClient):
    def __init__(self, api: PlannerApi):
        self._api = api

    async def create(self, request: LinkCreateRequest) -> CreatedLink:
        payload = {"title": request.title, "url": request.url}
        try:
            response = await self._api.request("POST", f"/trips/{request.trip_id}/links", payload)
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise TripNotFoundError(request.trip_id) from e
            raise _status_error(e) from e
        return _validate(CreatedLink, _json(response))

    async def list_by_trip(self, trip_id: str) -> list[Link]:
        try:
            response = await self._api.request("GET", f"/trips/{trip_id}/links")
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise TripNotFoundError(trip_id) from e
            raise _status_error(e) from e
        return [_validate(Link, link) for link in _json(response).get("links", [])]


def get_planner_api() -> PlannerApi:
    from planner.config import get_config

    config = get_config()
    logger.debug("Using planner API at %s", config.api_url)
    return PlannerApi(config.api_url, timeout=config.api_timeout)
