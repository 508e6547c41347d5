"""Attendance confirmation for an invited participant."""

import logging

from planner.deep_link import DeepLink
from planner.errors import ErrorCode, InvariantViolation, RemoteError, RequestInFlightError, ValidationError
from planner.guard import RequestGuard
from planner.models import Failure, ParticipantConfirmation, Success
from planner.remote import ParticipantClient
from planner.services.binding import DeviceTripBinding
from planner.validation import is_email

logger = logging.getLogger(__name__)

CONFIRM_OPERATION = "confirm_participant"


def validate_confirmation(participant_id: str, name: str, email: str) -> ParticipantConfirmation:
    if not participant_id:
        raise InvariantViolation("Confirmation requires a participant id")
    name = name.strip()
    email = email.strip()
    if not name:
        raise ValidationError("Name is required", code=ErrorCode.MISSING_NAME, field="name")
    if not email:
        raise ValidationError("Email is required", code=ErrorCode.MISSING_EMAIL, field="email")
    if not is_email(email):
        raise ValidationError("Invalid email", code=ErrorCode.INVALID_EMAIL, field="email")
    return ParticipantConfirmation(participant_id=participant_id, name=name, email=email)


class InviteConfirmationFlow:
    """Confirms a participant of ``trip_id`` and binds the device to that trip.

    Prior confirmation state is never inspected: the remote call is
    idempotent, so confirming twice succeeds twice.
    """

    def __init__(
        self,
        trip_id: str,
        participant_client: ParticipantClient,
        binding: DeviceTripBinding,
        guard: RequestGuard | None = None,
    ):
        if not trip_id:
            raise InvariantViolation("Confirmation flow requires a trip id")
        self.trip_id = trip_id
        self._participant_client = participant_client
        self._binding = binding
        self._guard = guard or RequestGuard()

    @classmethod
    def from_deep_link(
        cls,
        link: DeepLink,
        participant_client: ParticipantClient,
        binding: DeviceTripBinding,
        guard: RequestGuard | None = None,
    ) -> "InviteConfirmationFlow":
        if link.participant_id is None:
            raise InvariantViolation(f"Link for trip {link.trip_id} carries no participant")
        return cls(link.trip_id, participant_client, binding, guard)

    @property
    def is_confirming(self) -> bool:
        return self._guard.is_busy(CONFIRM_OPERATION)

    async def confirm(self, participant_id: str, name: str, email: str) -> Success[None] | Failure:
        try:
            confirmation = validate_confirmation(participant_id, name, email)
        except ValidationError as e:
            logger.warning("Rejected confirmation for participant %s: %s", participant_id, e.message)
            return Failure.from_error(e)

        try:
            async with self._guard.hold(CONFIRM_OPERATION):
                await self._participant_client.confirm(confirmation)
        except (RemoteError, RequestInFlightError) as e:
            logger.exception("Confirmation for participant %s failed", participant_id)
            return Failure.from_error(e)

        logger.info("Participant %s confirmed trip %s", participant_id, self.trip_id)
        self._binding.save(self.trip_id)
        return Success(value=None)
