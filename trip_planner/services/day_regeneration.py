"""
Day Regeneration - derive a trip's day list from its date range.
"""
import logging
from datetime import date, timedelta
from typing import Optional

from ..config import settings
from ..models.trip import Trip, TripDay

logger = logging.getLogger(__name__)


def day_count(start: date, end: date) -> int:
    """Inclusive number of calendar days from start to end."""
    return (end - start).days + 1


def regenerate_days(
    existing: list[TripDay],
    start: date,
    end: date,
) -> Optional[list[TripDay]]:
    """
    Build one day per calendar date in [start, end].

    A day already sitting on a date keeps its id, weather and all four
    collections; dates without one get a fresh empty day. Days whose
    date falls outside the range are dropped with their contents.
    Labels and order are renumbered from the start of the range.

    Returns None for an inverted range so callers keep their current days.
    """
    total_days = day_count(start, end)
    if total_days <= 0:
        logger.warning(f"Refusing to regenerate days for inverted range {start} - {end}")
        return None

    by_date = {}
    for day in existing:
        # First day on a date wins
        by_date.setdefault(day.date, day)

    new_days = []
    for offset in range(total_days):
        current = start + timedelta(days=offset)
        previous = by_date.get(current)

        if previous is not None:
            new_days.append(previous.model_copy(update={
                "date": current,
                "order": offset + 1,
                "label": f"Day {offset + 1}",
            }))
        else:
            new_days.append(TripDay(
                date=current,
                order=offset + 1,
                label=f"Day {offset + 1}",
                weather_icon=settings.default_weather_icon,
                temperature_f=settings.default_temperature_f,
            ))

    return new_days


def apply_date_range(trip: Trip, start: date, end: date) -> bool:
    """
    Move a trip to a new date range and rebuild its days.

    Returns False (and leaves the trip untouched) for an inverted range.
    """
    new_days = regenerate_days(trip.days, start, end)
    if new_days is None:
        return False

    dropped = len({d.id for d in trip.days} - {d.id for d in new_days})
    if dropped:
        logger.info(f"Trip {trip.id}: dropped {dropped} day(s) outside {start} - {end}")

    trip.start_date = start
    trip.end_date = end
    trip.days = new_days
    return True


def ensure_days(trip: Trip) -> None:
    """Generate days for a trip that has none yet."""
    if not trip.days:
        apply_date_range(trip, trip.start_date, trip.end_date)
