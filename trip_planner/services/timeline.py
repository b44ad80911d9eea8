"""
Timeline Ordering - one time-ordered sequence of flights and activities per day.
"""
from dataclasses import dataclass
from typing import Union

from ..models.trip import EventItem, FlightItem, ItemKind, TripDay


@dataclass(frozen=True)
class TimelineEntry:
    """A flight or activity positioned on the day's timeline."""
    key: str
    minutes: int
    kind: ItemKind
    item: Union[FlightItem, EventItem]

    @property
    def sort_key(self) -> tuple:
        # Flights before activities at the same minute, then by key
        return (self.minutes, 0 if self.kind == ItemKind.FLIGHT else 1, self.key)


def build_timeline(day: TripDay) -> list[TimelineEntry]:
    """
    Merge a day's flights and activities by start time.

    Reminders and checklists are not part of the timeline; they keep
    their own list order.
    """
    entries = [
        TimelineEntry(
            key=f"flight-{flight.id}",
            minutes=flight.start_time_minutes,
            kind=ItemKind.FLIGHT,
            item=flight,
        )
        for flight in day.flights
    ]
    entries.extend(
        TimelineEntry(
            key=f"activity-{event.id}",
            minutes=event.start_time_minutes,
            kind=ItemKind.ACTIVITY,
            item=event,
        )
        for event in day.events
    )
    return sorted(entries, key=lambda entry: entry.sort_key)


def sort_parked_ideas(ideas: list[EventItem]) -> list[EventItem]:
    """Parked ideas display by start time; the stored order is unchanged."""
    return sorted(ideas, key=lambda idea: idea.start_time_minutes)
