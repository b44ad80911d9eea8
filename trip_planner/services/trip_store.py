"""
Trip Store - canonical in-memory trip list with background persistence.
"""
import logging
from datetime import date
from pathlib import Path
from typing import Any, Optional
from uuid import UUID

from pydantic import ValidationError

from ..config import get_trips_path, settings
from ..models.samples import sample_trips
from ..models.trip import ChecklistEntry, ItemKind, Trip, decode_trips, encode_trips
from . import placement
from .day_regeneration import apply_date_range, ensure_days
from .persistence import JsonFileWriter, read_json_file
from .placement import PlannedItem, PlacementResult

logger = logging.getLogger(__name__)


EDITABLE_TRIP_FIELDS = {
    "name",
    "destination",
    "notes",
    "image_name",
    "latitude",
    "longitude",
    "map_span",
    "cover_image_data",
    "show_parked_ideas",
}


class TripStore:
    """
    Owns the trip list.

    Mutations are synchronous and meant for a single thread. Every applied
    mutation enqueues a full snapshot on the store's writer.
    """

    def __init__(self, path: Optional[Path] = None, seed_sample_data: bool = False):
        self.path = Path(path) if path is not None else get_trips_path()
        self.seed_sample_data = seed_sample_data
        self.trips: list[Trip] = []
        self._writer = JsonFileWriter(self.path, name="trips")

    # Loading and saving

    def load(self) -> None:
        """Read the trip list; malformed files reset to an empty list."""
        data = read_json_file(self.path)
        if data is None:
            self.trips = sample_trips() if self.seed_sample_data else []
            for trip in self.trips:
                ensure_days(trip)
            logger.info(f"No saved trips at {self.path}; starting with {len(self.trips)}")
            return

        try:
            self.trips = decode_trips(data)
        except ValidationError as e:
            logger.error(f"Failed to load trips from {self.path}: {e.error_count()} error(s): {e}")
            self.trips = []
            return

        logger.info(f"Loaded {len(self.trips)} trip(s) from {self.path}")

    def save(self) -> None:
        """Snapshot now, write in the background."""
        try:
            data = encode_trips(self.trips)
        except ValueError as e:
            logger.error(f"Failed to encode trips: {e}")
            return
        self._writer.submit(data)

    def flush(self) -> None:
        self._writer.flush()

    def close(self) -> None:
        self._writer.close()

    # Trips

    def list_trips(self) -> list[Trip]:
        return list(self.trips)

    def get_trip(self, trip_id: UUID) -> Optional[Trip]:
        for trip in self.trips:
            if trip.id == trip_id:
                return trip
        return None

    def add_trip(self, trip: Trip) -> Trip:
        ensure_days(trip)
        self.trips.append(trip)
        self.save()
        return trip

    def update_trip(self, trip: Trip) -> bool:
        """Replace a stored trip by id."""
        for index, existing in enumerate(self.trips):
            if existing.id == trip.id:
                self.trips[index] = trip
                self.save()
                return True
        return False

    def update_trip_details(
        self,
        trip_id: UUID,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        **changes: Any,
    ) -> Optional[Trip]:
        """
        Edit trip settings.

        Changing either date rebuilds the day list; an inverted range
        or an invalid field value raises ValueError and leaves the trip
        unchanged.
        """
        trip = self.get_trip(trip_id)
        if trip is None:
            return None

        unknown = set(changes) - EDITABLE_TRIP_FIELDS
        if unknown:
            raise ValueError(f"Unknown trip fields: {', '.join(sorted(unknown))}")

        new_start = start_date or trip.start_date
        new_end = end_date or trip.end_date
        if new_end < new_start:
            raise ValueError("end_date must not be before start_date")

        # Validate against a copy so a bad value never reaches the stored trip
        current = trip.model_dump(exclude={"days", "parked_ideas"})
        validated = Trip.model_validate({**current, **changes})
        for key in changes:
            setattr(trip, key, getattr(validated, key))

        if (new_start, new_end) != (trip.start_date, trip.end_date) or not trip.days:
            apply_date_range(trip, new_start, new_end)

        self.save()
        return trip

    def delete_trip(self, trip_id: UUID) -> bool:
        before = len(self.trips)
        self.trips = [trip for trip in self.trips if trip.id != trip_id]
        if len(self.trips) == before:
            return False
        self.save()
        return True

    # Itinerary items

    def _apply(self, trip: Trip, result: PlacementResult, action: str) -> PlacementResult:
        if result.applied:
            self.save()
        else:
            logger.info(f"Trip {trip.id}: {action} not applied ({result.value})")
        return result

    def add_item(self, trip: Trip, item: PlannedItem, day_id: Optional[UUID]) -> PlacementResult:
        return self._apply(trip, placement.add_item(trip, item, day_id), "add")

    def edit_item(self, trip: Trip, item: PlannedItem, day_id: Optional[UUID]) -> PlacementResult:
        return self._apply(trip, placement.edit_item(trip, item, day_id), "edit")

    def delete_item(self, trip: Trip, kind: ItemKind, item_id: UUID) -> PlacementResult:
        return self._apply(trip, placement.delete_item(trip, kind, item_id), "delete")

    def move_left(self, trip: Trip, kind: ItemKind, item_id: UUID, from_day_id: UUID) -> PlacementResult:
        return self._apply(trip, placement.move_left(trip, kind, item_id, from_day_id), "move left")

    def move_right(self, trip: Trip, kind: ItemKind, item_id: UUID, from_day_id: UUID) -> PlacementResult:
        return self._apply(trip, placement.move_right(trip, kind, item_id, from_day_id), "move right")

    def move_to_parked(self, trip: Trip, kind: ItemKind, item_id: UUID, from_day_id: UUID) -> PlacementResult:
        return self._apply(trip, placement.move_to_parked(trip, kind, item_id, from_day_id), "park")

    def move_parked_to_last_day(self, trip: Trip, item_id: UUID) -> PlacementResult:
        return self._apply(trip, placement.move_parked_to_last_day(trip, item_id), "unpark")

    def find_item(self, trip: Trip, kind: ItemKind, item_id: UUID) -> Optional[PlannedItem]:
        return placement.find_item(trip, kind, item_id)

    def set_checklist_entry_done(
        self,
        trip: Trip,
        checklist_id: UUID,
        entry_id: UUID,
        done: Optional[bool] = None,
    ) -> Optional[ChecklistEntry]:
        """Set (or toggle, when done is None) one checklist entry."""
        checklist = placement.find_item(trip, ItemKind.CHECKLIST, checklist_id)
        if checklist is None or not hasattr(checklist, "entries"):
            return None

        for entry in checklist.entries:
            if entry.id == entry_id:
                entry.is_done = (not entry.is_done) if done is None else done
                self.save()
                return entry
        return None


# Global store instance
trip_store: Optional[TripStore] = None


def get_trip_store() -> TripStore:
    """Get or create the global trip store."""
    global trip_store
    if trip_store is None:
        trip_store = TripStore(seed_sample_data=settings.seed_sample_data)
        trip_store.load()
    return trip_store
