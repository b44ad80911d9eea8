"""Data models for the trip planner."""
from .accent import EventAccent
from .trip import (
    Airport,
    ChecklistEntry,
    ChecklistItem,
    EventItem,
    FlightItem,
    ItemKind,
    ReminderItem,
    Trip,
    TripDay,
    TripStatus,
    decode_trips,
    encode_trips,
)
from .tracker import TrackerItem, TrackerType, TrackerVisitedState

__all__ = [
    "EventAccent",
    "Airport",
    "ChecklistEntry",
    "ChecklistItem",
    "EventItem",
    "FlightItem",
    "ItemKind",
    "ReminderItem",
    "Trip",
    "TripDay",
    "TripStatus",
    "decode_trips",
    "encode_trips",
    "TrackerItem",
    "TrackerType",
    "TrackerVisitedState",
]
