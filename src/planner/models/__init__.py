"""
Pydantic models for the trip planner.
"""

from planner.models.dates import DateRange, DayMark
from planner.models.link import CreatedLink, Link, LinkCreateRequest
from planner.models.participant import Participant, ParticipantConfirmation
from planner.models.result import Failure, FailureKind, Success
from planner.models.trip import CreatedTrip, Trip, TripCreateRequest, TripUpdateRequest

__all__ = [
    "CreatedLink",
    "CreatedTrip",
    "DateRange",
    "DayMark",
    "Failure",
    "FailureKind",
    "Link",
    "LinkCreateRequest",
    "Participant",
    "ParticipantConfirmation",
    "Success",
    "Trip",
    "TripCreateRequest",
    "TripUpdateRequest",
]
