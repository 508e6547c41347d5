"""Typed operation results returned across flow boundaries."""

from enum import Enum
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

from planner.errors import (
    USER_MESSAGES,
    ErrorCode,
    PlannerError,
    RemoteError,
    RequestInFlightError,
    ValidationError,
)

T = TypeVar("T")


class FailureKind(str, Enum):
    VALIDATION = "validation"
    REMOTE = "remote"
    IN_FLIGHT = "in_flight"


class Failure(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    kind: FailureKind
    code: ErrorCode
    message: str
    field: str | None = None

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])

    @classmethod
    def from_error(cls, error: PlannerError) -> "Failure":
        """Convert a user-facing error. Anything else is re-raised untouched."""
        if isinstance(error, ValidationError):
            return cls(kind=FailureKind.VALIDATION, code=error.code, message=error.message, field=error.field)
        if isinstance(error, RemoteError):
            return cls(kind=FailureKind.REMOTE, code=error.code, message=error.message)
        if isinstance(error, RequestInFlightError):
            return cls(kind=FailureKind.IN_FLIGHT, code=error.code, message=error.message)
        raise error


class Success(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    value: T
