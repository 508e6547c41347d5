"""Calendar date-range selection."""

from datetime import date, timedelta

from planner.models import DateRange


def _days_between(start: date, end: date) -> tuple[date, ...]:
    return tuple(start + timedelta(days=offset) for offset in range((end - start).days + 1))


def select(current: DateRange, tapped_day: date) -> DateRange:
    """Apply one calendar tap to the current range.

    An empty range, a complete range, or a tap before the current start all
    reset the selection to the tapped day. Otherwise the tap closes the range,
    including a tap on the start day itself (a single-day range).
    """
    if current.starts_at is None or current.ends_at is not None or tapped_day < current.starts_at:
        return DateRange(starts_at=tapped_day, marked_dates=(tapped_day,))

    return DateRange(
        starts_at=current.starts_at,
        ends_at=tapped_day,
        marked_dates=_days_between(current.starts_at, tapped_day),
    )
