"""Remote planner API abstraction layer."""

from planner.remote.http import HttpLinkClient, HttpParticipantClient, HttpTripClient, PlannerApi, get_planner_api
from planner.remote.interface import LinkClient, ParticipantClient, TripClient

__all__ = [
    "HttpLinkClient",
    "HttpParticipantClient",
    "HttpTripClient",
    "LinkClient",
    "ParticipantClient",
    "PlannerApi",
    "TripClient",
    "get_planner_api",
]
