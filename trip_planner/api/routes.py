"""
API Routes for the Trip Planner.
"""
from datetime import date
from enum import Enum
from typing import Any, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from ..models.trip import ItemKind, Trip
from ..models.tracker import TrackerType
from ..models.tracker_data import tracker_items, valid_ids
from ..services.location_search import (
    LocationSearchService,
    PlaceSuggestion,
    ResolvedPlace,
    get_location_search,
)
from ..services.map_region import MapRegion, search_bias_region, trip_map_region
from ..services.placement import PlacementResult
from ..services.timeline import build_timeline, sort_parked_ideas
from ..services.tracker_store import TrackerStore, get_tracker_store
from ..services.trip_store import TripStore, get_trip_store


router = APIRouter(prefix="/api", tags=["trip-planner"])


# Request/Response Models
class CreateTripRequest(BaseModel):
    name: str
    destination: str = ""
    start_date: date
    end_date: date
    notes: str = ""
    image_name: str = "airplane"
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    map_span: Optional[float] = None
    show_parked_ideas: bool = False

    @model_validator(mode="after")
    def _check_range(self) -> "CreateTripRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class UpdateTripRequest(BaseModel):
    name: Optional[str] = None
    destination: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    notes: Optional[str] = None
    image_name: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    map_span: Optional[float] = None
    show_parked_ideas: Optional[bool] = None

    @field_validator(
        "name", "destination", "start_date", "end_date", "notes", "image_name", "show_parked_ideas"
    )
    @classmethod
    def _not_null(cls, value):
        # Omit a field to leave it alone; only coordinates can be cleared
        if value is None:
            raise ValueError("may not be null")
        return value


class TripSummary(BaseModel):
    id: UUID
    name: str
    display_name: str
    date_range: str
    duration_days: int
    countdown: str
    is_urgent: bool
    status: str
    image_name: str


class ItemRequest(BaseModel):
    item: dict[str, Any]
    day_id: Optional[UUID] = None
    parked: bool = False

    @model_validator(mode="after")
    def _check_target(self) -> "ItemRequest":
        if self.day_id is None and not self.parked:
            raise ValueError("Either day_id or parked=true is required")
        if self.day_id is not None and self.parked:
            raise ValueError("day_id and parked=true are mutually exclusive")
        return self


class MoveDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    PARKED = "parked"


class MoveRequest(BaseModel):
    direction: MoveDirection
    from_day_id: UUID


class ChecklistToggleRequest(BaseModel):
    done: Optional[bool] = None


# Helpers

def _require_trip(store: TripStore, trip_id: UUID) -> Trip:
    trip = store.get_trip(trip_id)
    if trip is None:
        raise HTTPException(status_code=404, detail="Trip not found")
    return trip


def _check_result(result: PlacementResult) -> None:
    if result.applied:
        return
    if result in (PlacementResult.DAY_NOT_FOUND, PlacementResult.ITEM_NOT_FOUND):
        raise HTTPException(status_code=404, detail=result.value)
    raise HTTPException(status_code=409, detail=result.value)


def _build_item(kind: ItemKind, data: dict[str, Any]):
    try:
        return kind.model.model_validate(data)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False, include_input=False),
        )


def _summary(trip: Trip) -> TripSummary:
    return TripSummary(
        id=trip.id,
        name=trip.name,
        display_name=trip.display_name,
        date_range=trip.formatted_date_range,
        duration_days=trip.trip_duration,
        countdown=trip.countdown_text(),
        is_urgent=trip.is_urgent(),
        status=trip.status().value,
        image_name=trip.image_name,
    )


def _dump(model: BaseModel) -> dict:
    return model.model_dump(mode="json", by_alias=True)


# Trips

@router.get("/trips", response_model=list[TripSummary])
async def list_trips(store: TripStore = Depends(get_trip_store)):
    """List trips as cards."""
    return [_summary(trip) for trip in store.list_trips()]


@router.post("/trips", response_model=Trip, status_code=201)
async def create_trip(request: CreateTripRequest, store: TripStore = Depends(get_trip_store)):
    """Create a trip and generate its days."""
    trip = Trip(**request.model_dump())
    return store.add_trip(trip)


@router.get("/trips/{trip_id}", response_model=Trip)
async def get_trip(trip_id: UUID, store: TripStore = Depends(get_trip_store)):
    """Get a full trip."""
    return _require_trip(store, trip_id)


@router.patch("/trips/{trip_id}", response_model=Trip)
async def update_trip(
    trip_id: UUID,
    request: UpdateTripRequest,
    store: TripStore = Depends(get_trip_store),
):
    """Edit trip settings; date changes rebuild the day list."""
    _require_trip(store, trip_id)
    changes = request.model_dump(exclude_unset=True)
    start_date = changes.pop("start_date", None)
    end_date = changes.pop("end_date", None)

    try:
        return store.update_trip_details(trip_id, start_date=start_date, end_date=end_date, **changes)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.delete("/trips/{trip_id}")
async def delete_trip(trip_id: UUID, store: TripStore = Depends(get_trip_store)):
    """Delete a trip."""
    if not store.delete_trip(trip_id):
        raise HTTPException(status_code=404, detail="Trip not found")
    return {"success": True}


# Items

@router.post("/trips/{trip_id}/items/{kind}", response_model=Trip, status_code=201)
async def add_item(
    trip_id: UUID,
    kind: ItemKind,
    request: ItemRequest,
    store: TripStore = Depends(get_trip_store),
):
    """Add an item to a day, or to the parked ideas."""
    trip = _require_trip(store, trip_id)
    item = _build_item(kind, request.item)
    _check_result(store.add_item(trip, item, request.day_id))
    return trip


@router.put("/trips/{trip_id}/items/{kind}/{item_id}", response_model=Trip)
async def edit_item(
    trip_id: UUID,
    kind: ItemKind,
    item_id: UUID,
    request: ItemRequest,
    store: TripStore = Depends(get_trip_store),
):
    """Replace an item and reassign its day."""
    trip = _require_trip(store, trip_id)
    item = _build_item(kind, {**request.item, "id": str(item_id)})
    _check_result(store.edit_item(trip, item, request.day_id))
    return trip


@router.delete("/trips/{trip_id}/items/{kind}/{item_id}", response_model=Trip)
async def delete_item(
    trip_id: UUID,
    kind: ItemKind,
    item_id: UUID,
    store: TripStore = Depends(get_trip_store),
):
    """Delete an item wherever it lives."""
    trip = _require_trip(store, trip_id)
    _check_result(store.delete_item(trip, kind, item_id))
    return trip


@router.post("/trips/{trip_id}/items/{kind}/{item_id}/move", response_model=Trip)
async def move_item(
    trip_id: UUID,
    kind: ItemKind,
    item_id: UUID,
    request: MoveRequest,
    store: TripStore = Depends(get_trip_store),
):
    """Move an item one day left or right, or park it."""
    trip = _require_trip(store, trip_id)

    if request.direction == MoveDirection.LEFT:
        result = store.move_left(trip, kind, item_id, request.from_day_id)
    elif request.direction == MoveDirection.RIGHT:
        result = store.move_right(trip, kind, item_id, request.from_day_id)
    else:
        result = store.move_to_parked(trip, kind, item_id, request.from_day_id)

    _check_result(result)
    return trip


@router.post("/trips/{trip_id}/parked/{item_id}/to-last-day", response_model=Trip)
async def move_parked_to_last_day(
    trip_id: UUID,
    item_id: UUID,
    store: TripStore = Depends(get_trip_store),
):
    """Schedule a parked idea at the end of the last day."""
    trip = _require_trip(store, trip_id)
    _check_result(store.move_parked_to_last_day(trip, item_id))
    return trip


@router.post("/trips/{trip_id}/checklists/{item_id}/entries/{entry_id}/toggle")
async def toggle_checklist_entry(
    trip_id: UUID,
    item_id: UUID,
    entry_id: UUID,
    request: Optional[ChecklistToggleRequest] = None,
    store: TripStore = Depends(get_trip_store),
):
    """Tick or untick one checklist entry."""
    trip = _require_trip(store, trip_id)
    done = request.done if request is not None else None

    entry = store.set_checklist_entry_done(trip, item_id, entry_id, done)
    if entry is None:
        raise HTTPException(status_code=404, detail="Checklist entry not found")
    return _dump(entry)


# Day views

@router.get("/trips/{trip_id}/days/{day_id}/timeline")
async def get_day_timeline(
    trip_id: UUID,
    day_id: UUID,
    store: TripStore = Depends(get_trip_store),
):
    """Reminders, checklists and the merged flight/activity timeline for a day."""
    trip = _require_trip(store, trip_id)
    day = trip.day_by_id(day_id)
    if day is None:
        raise HTTPException(status_code=404, detail="Day not found")

    return {
        "day": {
            "id": str(day.id),
            "date": day.date.isoformat(),
            "title": day.display_title,
            "badge": day.day_badge,
            "label": day.label,
            "weather_icon": day.weather_icon,
            "temperature_f": day.temperature_f,
        },
        "reminders": [_dump(reminder) for reminder in day.reminders],
        "checklists": [
            {**_dump(checklist), "doneCount": checklist.done_count}
            for checklist in day.checklists
        ],
        "timeline": [
            {
                "key": entry.key,
                "kind": entry.kind.value,
                "minutes": entry.minutes,
                "item": _dump(entry.item),
            }
            for entry in build_timeline(day)
        ],
    }


@router.get("/trips/{trip_id}/parked")
async def get_parked_ideas(trip_id: UUID, store: TripStore = Depends(get_trip_store)):
    """Parked ideas ordered by start time."""
    trip = _require_trip(store, trip_id)
    return {
        "enabled": trip.show_parked_ideas,
        "ideas": [_dump(idea) for idea in sort_parked_ideas(trip.parked_ideas)],
    }


@router.get("/trips/{trip_id}/map-region", response_model=MapRegion)
async def get_map_region(trip_id: UUID, store: TripStore = Depends(get_trip_store)):
    """Region that frames the trip on a map."""
    return trip_map_region(_require_trip(store, trip_id))


# Trackers

@router.get("/trackers")
async def list_trackers(store: TrackerStore = Depends(get_tracker_store)):
    """Progress for every tracker."""
    return {"trackers": store.summaries()}


@router.get("/trackers/{tracker}")
async def get_tracker(tracker: TrackerType, store: TrackerStore = Depends(get_tracker_store)):
    """Items of one tracker with their visited flags."""
    return {
        "tracker": tracker.value,
        "title": tracker.title,
        "visited_count": store.visited_count(tracker),
        "total_count": store.total_count(tracker),
        "items": [
            {
                "id": item.id,
                "name": item.name,
                "subtitle": item.subtitle,
                "visited": store.is_visited(item.id, tracker),
            }
            for item in tracker_items(tracker)
        ],
    }


@router.post("/trackers/{tracker}/{item_id}/toggle")
async def toggle_tracker_item(
    tracker: TrackerType,
    item_id: str,
    store: TrackerStore = Depends(get_tracker_store),
):
    """Flip the visited flag of one tracker item."""
    if item_id not in valid_ids(tracker):
        raise HTTPException(status_code=404, detail="Tracker item not found")

    visited = store.toggle_visited(item_id, tracker)
    return {
        "tracker": tracker.value,
        "id": item_id,
        "visited": visited,
        "visited_count": store.visited_count(tracker),
    }


# Location search

@router.get("/locations/search", response_model=list[PlaceSuggestion])
async def search_locations(
    q: str,
    airports: bool = False,
    trip_id: Optional[UUID] = None,
    service: LocationSearchService = Depends(get_location_search),
    store: TripStore = Depends(get_trip_store),
):
    """Place suggestions, optionally biased toward a trip's location."""
    region = None
    if trip_id is not None:
        region = search_bias_region(_require_trip(store, trip_id))
    return await service.search(q, region=region, airports_only=airports)


@router.post("/locations/resolve", response_model=ResolvedPlace)
async def resolve_location(
    suggestion: PlaceSuggestion,
    service: LocationSearchService = Depends(get_location_search),
):
    """Coordinate and zoom span for a chosen suggestion."""
    place = await service.resolve(suggestion)
    if place is None:
        raise HTTPException(status_code=404, detail="Location not found")
    return place
