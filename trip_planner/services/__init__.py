"""Services for the trip planner."""
from .placement import PlacementResult
from .trip_store import TripStore, get_trip_store
from .tracker_store import TrackerStore, get_tracker_store
from .location_search import LocationSearchService, get_location_search

__all__ = [
    "PlacementResult",
    "TripStore",
    "get_trip_store",
    "TrackerStore",
    "get_tracker_store",
    "LocationSearchService",
    "get_location_search",
]
