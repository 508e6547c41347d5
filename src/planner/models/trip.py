from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MAX_SUMMARY_DESTINATION = 14


def _date_part(value: object) -> object:
    """The API serializes dates as ISO datetimes; keep only the calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return value.split("T", 1)[0]
    return value


class Trip(BaseModel):
    id: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    starts_at: date
    ends_at: date
    created_at: datetime | None = None
    is_confirmed: bool | None = None

    @field_validator("starts_at", "ends_at", mode="before")
    @classmethod
    def date_part(cls, value: object) -> object:
        return _date_part(value)

    @model_validator(mode="after")
    def ends_not_before_starts(self) -> "Trip":
        if self.ends_at < self.starts_at:
            raise ValueError("ends_at must not be before starts_at")
        return self

    def summary(self) -> str:
        """Header line for a bound trip, e.g. "Rome from the 10 to 15 of Mar."."""
        destination = self.destination
        if len(destination) > MAX_SUMMARY_DESTINATION:
            destination = destination[:MAX_SUMMARY_DESTINATION] + "..."
        return (
            f"{destination} from the {self.starts_at:%d} to {self.ends_at:%d} "
            f"of {self.starts_at:%b}."
        )


class TripCreateRequest(BaseModel):
    destination: str = Field(..., min_length=4)
    starts_at: date
    ends_at: date
    emails_to_invite: list[str] = []

    @model_validator(mode="after")
    def ends_not_before_starts(self) -> "TripCreateRequest":
        if self.ends_at < self.starts_at:
            raise ValueError("ends_at must not be before starts_at")
        return self


class TripUpdateRequest(BaseModel):
    id: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    starts_at: date
    ends_at: date


class CreatedTrip(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    trip_id: str = Field(..., min_length=1, alias="tripId")
