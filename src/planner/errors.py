"""
Custom exceptions and error handling for the trip planner.

Defines application-specific exceptions with error codes so flows can convert
failures into typed results and the presentation layer can show a safe,
user-facing message.

Usage:
    from planner.errors import ValidationError, ErrorCode

    raise ValidationError("Destination too short", code=ErrorCode.DESTINATION_TOO_SHORT, field="destination")
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Trip form errors
    MISSING_TRIP_DETAILS = "MISSING_TRIP_DETAILS"
    DESTINATION_TOO_SHORT = "DESTINATION_TOO_SHORT"
    INVALID_EMAIL = "INVALID_EMAIL"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"

    # Confirmation errors
    MISSING_NAME = "MISSING_NAME"
    MISSING_EMAIL = "MISSING_EMAIL"

    # Link errors
    MISSING_LINK_TITLE = "MISSING_LINK_TITLE"
    INVALID_LINK_URL = "INVALID_LINK_URL"
    INVALID_DEEP_LINK = "INVALID_DEEP_LINK"

    # Remote errors
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    PARTICIPANT_NOT_FOUND = "PARTICIPANT_NOT_FOUND"
    REMOTE_FAILED = "REMOTE_FAILED"

    # Concurrency errors
    REQUEST_IN_FLIGHT = "REQUEST_IN_FLIGHT"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.MISSING_TRIP_DETAILS: "Fill in all travel information.",
    ErrorCode.DESTINATION_TOO_SHORT: "Destination must have at least 4 characters.",
    ErrorCode.INVALID_EMAIL: "Incorrect email!",
    ErrorCode.DUPLICATE_EMAIL: "Email already exists!",
    ErrorCode.MISSING_NAME: "Fill in your name and email to confirm the trip!",
    ErrorCode.MISSING_EMAIL: "Fill in your name and email to confirm the trip!",
    ErrorCode.MISSING_LINK_TITLE: "Enter the title of the link.",
    ErrorCode.INVALID_LINK_URL: "Invalid link!",
    ErrorCode.INVALID_DEEP_LINK: "This link is not a valid trip link.",
    ErrorCode.TRIP_NOT_FOUND: "This trip could not be found.",
    ErrorCode.PARTICIPANT_NOT_FOUND: "This invitation could not be found.",
    ErrorCode.REMOTE_FAILED: "Unable to reach the planner service. Please try again.",
    ErrorCode.REQUEST_IN_FLIGHT: "Please wait, your previous request is still in progress.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class PlannerError(Exception):
    """Base exception for all trip planner errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class ValidationError(PlannerError):
    """User-correctable input problem."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.MISSING_TRIP_DETAILS,
        field: str | None = None,
    ):
        super().__init__(message, code=code)
        self.field = field


class RemoteError(PlannerError):
    """Remote collaborator failed: not found, network failure, rejected request."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.REMOTE_FAILED):
        super().__init__(message, code=code)


class TripNotFoundError(RemoteError):
    """The remote service has no trip with the requested id."""

    def __init__(self, trip_id: str):
        super().__init__(f"Trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)
        self.trip_id = trip_id


class RequestInFlightError(PlannerError):
    """A call for the same operation is already running."""

    def __init__(self, operation: str):
        super().__init__(f"Operation {operation!r} is already in flight", code=ErrorCode.REQUEST_IN_FLIGHT)
        self.operation = operation


class InvariantViolation(PlannerError):
    """Programming error. Never converted into a user-facing result."""

    pass
