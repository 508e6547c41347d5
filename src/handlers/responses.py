"""Status-coded responses shared by the entry points."""

from typing import Any

from planner.errors import ErrorCode
from planner.models import Failure, FailureKind

_NOT_FOUND_CODES = {ErrorCode.TRIP_NOT_FOUND, ErrorCode.PARTICIPANT_NOT_FOUND}


def status_for(failure: Failure) -> int:
    if failure.kind == FailureKind.VALIDATION:
        return 400
    if failure.kind == FailureKind.IN_FLIGHT:
        return 409
    if failure.code in _NOT_FOUND_CODES:
        return 404
    return 502


def failure_response(failure: Failure) -> dict[str, Any]:
    """Never exposes the internal message, only the user-facing one."""
    body: dict[str, Any] = {"error": failure.code.value, "message": failure.user_message}
    if failure.field:
        body["field"] = failure.field
    return {"statusCode": status_for(failure), "body": body}
