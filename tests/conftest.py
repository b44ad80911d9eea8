"""Shared fixtures for trip planner tests."""
from datetime import date, datetime, time

import pytest

from trip_planner.models.trip import (
    ChecklistEntry,
    ChecklistItem,
    EventItem,
    FlightItem,
    ReminderItem,
    Trip,
)
from trip_planner.services.day_regeneration import ensure_days


@pytest.fixture
def trip():
    """A three-day trip (Jan 1-3 2026) with generated, empty days."""
    trip = Trip(
        name="Lisbon",
        destination="Lisbon, Portugal",
        start_date=date(2026, 1, 1),
        end_date=date(2026, 1, 3),
    )
    ensure_days(trip)
    return trip


@pytest.fixture
def parking_trip(trip):
    trip.show_parked_ideas = True
    return trip


@pytest.fixture
def activity():
    return EventItem(title="Castle Walk", start_time=time(11, 15), location="Castelo")


@pytest.fixture
def flight():
    return FlightItem(
        flight_number="tp 1234",
        origin={"name": "Lisbon Airport", "code": "lis", "city": "Lisbon", "terminal": "1", "gate": "A12"},
        destination={"name": "JFK", "code": "JFK", "city": "New York"},
        start_time=datetime(2026, 1, 2, 9, 0),
        end_time=datetime(2026, 1, 2, 17, 30),
        notes="Window seat",
    )


@pytest.fixture
def reminder():
    return ReminderItem(text="Buy metro card")


@pytest.fixture
def checklist():
    return ChecklistItem(
        title="Packing",
        entries=[
            ChecklistEntry(text="Passport", is_done=True),
            ChecklistEntry(text="Charger"),
        ],
    )
