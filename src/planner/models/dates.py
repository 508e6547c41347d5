"""Pydantic model for a calendar date-range selection."""

from datetime import date

from pydantic import BaseModel, ConfigDict, model_validator


class DayMark(BaseModel):
    model_config = ConfigDict(frozen=True)

    selected: bool = True
    starting_day: bool = False
    ending_day: bool = False


class DateRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    starts_at: date | None = None
    ends_at: date | None = None
    marked_dates: tuple[date, ...] = ()

    @model_validator(mode="after")
    def ends_not_before_starts(self) -> "DateRange":
        if self.ends_at is not None:
            if self.starts_at is None:
                raise ValueError("ends_at requires starts_at")
            if self.ends_at < self.starts_at:
                raise ValueError("ends_at must not be before starts_at")
        return self

    @property
    def is_empty(self) -> bool:
        return self.starts_at is None

    @property
    def is_complete(self) -> bool:
        return self.starts_at is not None and self.ends_at is not None

    @property
    def label(self) -> str:
        """Human-readable range, e.g. "10 to 15 of March". Empty until complete."""
        if self.starts_at is None or self.ends_at is None:
            return ""
        return f"{self.starts_at.day} to {self.ends_at.day} of {self.starts_at.strftime('%B')}"

    def calendar_marks(self) -> dict[date, DayMark]:
        return {
            day: DayMark(starting_day=day == self.starts_at, ending_day=day == self.ends_at)
            for day in self.marked_dates
        }
