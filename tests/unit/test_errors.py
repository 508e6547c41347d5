from planner.errors import (
    USER_MESSAGES,
    ErrorCode,
    InvariantViolation,
    PlannerError,
    RemoteError,
    RequestInFlightError,
    TripNotFoundError,
    ValidationError,
)


def test_all_error_codes_have_user_message():
    for code in ErrorCode:
        assert code in USER_MESSAGES


def test_user_message_lookup():
    err = PlannerError("connect timeout to 10.0.0.1", code=ErrorCode.REMOTE_FAILED)
    assert err.user_message == "Unable to reach the planner service. Please try again."


def test_subclasses_inherit_user_message():
    assert ValidationError("bad", code=ErrorCode.DUPLICATE_EMAIL).user_message == USER_MESSAGES[ErrorCode.DUPLICATE_EMAIL]
    assert RemoteError("down").user_message == USER_MESSAGES[ErrorCode.REMOTE_FAILED]
    assert TripNotFoundError("trip-1").user_message == USER_MESSAGES[ErrorCode.TRIP_NOT_FOUND]
    assert RequestInFlightError("create_trip").user_message == USER_MESSAGES[ErrorCode.REQUEST_IN_FLIGHT]


def test_validation_error_carries_field():
    err = ValidationError("Name is required", code=ErrorCode.MISSING_NAME, field="name")
    assert err.field == "name"
    assert err.code == ErrorCode.MISSING_NAME


def test_trip_not_found_is_remote_error():
    err = TripNotFoundError("trip-9")
    assert isinstance(err, RemoteError)
    assert err.trip_id == "trip-9"


def test_invariant_violation_defaults_to_internal_error():
    assert InvariantViolation("empty trip id").code == ErrorCode.INTERNAL_ERROR


def test_user_message_never_exposes_internal_message():
    internal = "PATCH /participants/abc/confirm returned 500: stack trace"
    err = RemoteError(internal)
    assert internal not in err.user_message
