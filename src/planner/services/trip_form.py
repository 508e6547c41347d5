"""
Multi-step trip creation form.

The form is a finite state machine: ``transition(form, event)`` is pure and
returns the next form plus a list of declared effects. ``TripCreationFlow``
is the thin async runner that executes the ``CreateTrip`` effect against the
remote trip client and feeds the outcome back into the machine.

Steps:
    DETAILS --Continue--> INVITE --RequestSubmit/ConfirmSubmit--> SUBMITTED
    INVITE --Back--> DETAILS (guest emails are kept)

Binding the device to the created trip is left to the caller.
"""

import logging
from datetime import date
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict

from planner.errors import (
    ErrorCode,
    InvariantViolation,
    RemoteError,
    RequestInFlightError,
    ValidationError,
)
from planner.guard import RequestGuard
from planner.models import DateRange, Failure, TripCreateRequest
from planner.remote import TripClient
from planner.services.date_range import select
from planner.validation import is_email

logger = logging.getLogger(__name__)

MIN_DESTINATION_LENGTH = 4
CREATE_TRIP_OPERATION = "create_trip"


class FormStep(str, Enum):
    DETAILS = "details"
    INVITE = "invite"
    SUBMITTED = "submitted"


class TripForm(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: FormStep = FormStep.DETAILS
    destination: str = ""
    dates: DateRange = DateRange()
    emails: tuple[str, ...] = ()
    awaiting_confirmation: bool = False
    submitting: bool = False
    trip_id: str | None = None


# --- Events ---


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True)


class SetDestination(_Event):
    destination: str


class SelectDay(_Event):
    day: date


class Continue(_Event):
    pass


class Back(_Event):
    pass


class AddEmail(_Event):
    candidate: str


class RemoveEmail(_Event):
    email: str


class RequestSubmit(_Event):
    pass


class ConfirmSubmit(_Event):
    pass


class CancelSubmit(_Event):
    pass


class CreationSucceeded(_Event):
    trip_id: str


class CreationFailed(_Event):
    failure: Failure


FormEvent = Union[
    SetDestination,
    SelectDay,
    Continue,
    Back,
    AddEmail,
    RemoveEmail,
    RequestSubmit,
    ConfirmSubmit,
    CancelSubmit,
    CreationSucceeded,
    CreationFailed,
]


# --- Effects ---


class _Effect(BaseModel):
    model_config = ConfigDict(frozen=True)


class Rejected(_Effect):
    """The event was refused; the form is unchanged."""

    failure: Failure


class ConfirmationRequested(_Effect):
    title: str = "New Trip"
    message: str = "Confirm Trip?"


class CreateTrip(_Effect):
    request: TripCreateRequest


class TripCreated(_Effect):
    trip_id: str


class SubmissionFailed(_Effect):
    failure: Failure


FormEffect = Union[Rejected, ConfirmationRequested, CreateTrip, TripCreated, SubmissionFailed]

Transition = tuple[TripForm, list[FormEffect]]


def check_details(form: TripForm) -> ValidationError | None:
    """Gate for leaving DETAILS and for submitting."""
    destination = form.destination.strip()
    if not destination:
        return ValidationError("Destination is required", code=ErrorCode.MISSING_TRIP_DETAILS, field="destination")
    if not form.dates.is_complete:
        return ValidationError("Both trip dates are required", code=ErrorCode.MISSING_TRIP_DETAILS, field="dates")
    if len(destination) < MIN_DESTINATION_LENGTH:
        return ValidationError(
            f"Destination must have at least {MIN_DESTINATION_LENGTH} characters",
            code=ErrorCode.DESTINATION_TOO_SHORT,
            field="destination",
        )
    return None


def _reject(form: TripForm, error: ValidationError | RequestInFlightError) -> Transition:
    return form, [Rejected(failure=Failure.from_error(error))]


def _unexpected(form: TripForm, event: _Event) -> InvariantViolation:
    return InvariantViolation(f"{type(event).__name__} is not accepted in step {form.step.value}")


def _on_details(form: TripForm, event: _Event) -> Transition:
    if isinstance(event, SetDestination):
        return form.model_copy(update={"destination": event.destination}), []

    if isinstance(event, SelectDay):
        return form.model_copy(update={"dates": select(form.dates, event.day)}), []

    if isinstance(event, Continue):
        error = check_details(form)
        if error is not None:
            return _reject(form, error)
        return form.model_copy(update={"step": FormStep.INVITE}), []

    raise _unexpected(form, event)


def _on_invite(form: TripForm, event: _Event) -> Transition:
    if isinstance(event, Back):
        if form.submitting:
            return _reject(form, RequestInFlightError(CREATE_TRIP_OPERATION))
        return form.model_copy(update={"step": FormStep.DETAILS, "awaiting_confirmation": False}), []

    if isinstance(event, AddEmail):
        candidate = event.candidate.strip().lower()
        if not is_email(candidate):
            return _reject(form, ValidationError("Incorrect email", code=ErrorCode.INVALID_EMAIL, field="email"))
        if candidate in form.emails:
            return _reject(form, ValidationError("Email already exists", code=ErrorCode.DUPLICATE_EMAIL, field="email"))
        return form.model_copy(update={"emails": form.emails + (candidate,)}), []

    if isinstance(event, RemoveEmail):
        target = event.email.strip().lower()
        return form.model_copy(update={"emails": tuple(e for e in form.emails if e != target)}), []

    if isinstance(event, RequestSubmit):
        if form.submitting:
            return _reject(form, RequestInFlightError(CREATE_TRIP_OPERATION))
        error = check_details(form)
        if error is not None:
            return _reject(form, error)
        return form.model_copy(update={"awaiting_confirmation": True}), [ConfirmationRequested()]

    if isinstance(event, CancelSubmit):
        return form.model_copy(update={"awaiting_confirmation": False}), []

    if isinstance(event, ConfirmSubmit):
        if form.submitting:
            return _reject(form, RequestInFlightError(CREATE_TRIP_OPERATION))
        if not form.awaiting_confirmation:
            raise InvariantViolation("ConfirmSubmit without a pending confirmation")
        starts_at, ends_at = form.dates.starts_at, form.dates.ends_at
        if starts_at is None or ends_at is None:
            raise InvariantViolation("Confirmed a submission with an incomplete date range")
        request = TripCreateRequest(
            destination=form.destination.strip(),
            starts_at=starts_at,
            ends_at=ends_at,
            emails_to_invite=list(form.emails),
        )
        next_form = form.model_copy(update={"awaiting_confirmation": False, "submitting": True})
        return next_form, [CreateTrip(request=request)]

    if isinstance(event, CreationSucceeded):
        if not form.submitting:
            raise InvariantViolation("CreationSucceeded without a submission in flight")
        next_form = form.model_copy(
            update={"step": FormStep.SUBMITTED, "submitting": False, "trip_id": event.trip_id}
        )
        return next_form, [TripCreated(trip_id=event.trip_id)]

    if isinstance(event, CreationFailed):
        return form.model_copy(update={"submitting": False}), [SubmissionFailed(failure=event.failure)]

    raise _unexpected(form, event)


def transition(form: TripForm, event: _Event) -> Transition:
    if form.step == FormStep.DETAILS:
        return _on_details(form, event)
    if form.step == FormStep.INVITE:
        return _on_invite(form, event)
    raise _unexpected(form, event)


class TripCreationFlow:
    """Drives a TripForm and executes its CreateTrip effects."""

    def __init__(self, trip_client: TripClient, guard: RequestGuard | None = None, form: TripForm | None = None):
        self._trip_client = trip_client
        self._guard = guard or RequestGuard()
        self._form = form or TripForm()

    @property
    def form(self) -> TripForm:
        return self._form

    def dispatch(self, event: _Event) -> list[FormEffect]:
        """Apply an event without executing any effect."""
        self._form, effects = transition(self._form, event)
        return effects

    async def handle(self, event: _Event) -> list[FormEffect]:
        """Apply an event and run the remote call it declares, if any."""
        results: list[FormEffect] = []
        for effect in self.dispatch(event):
            if isinstance(effect, CreateTrip):
                results.extend(await self._create(effect.request))
            else:
                results.append(effect)
        return results

    async def _create(self, request: TripCreateRequest) -> list[FormEffect]:
        try:
            async with self._guard.hold(CREATE_TRIP_OPERATION):
                created = await self._trip_client.create(request)
        except (RemoteError, RequestInFlightError) as e:
            logger.exception("Trip creation for %s failed", request.destination)
            return self.dispatch(CreationFailed(failure=Failure.from_error(e)))

        logger.info("Created trip %s to %s", created.trip_id, request.destination)
        return self.dispatch(CreationSucceeded(trip_id=created.trip_id))
