"""
Item Placement & Movement.

Every planned item lives in exactly one place: the matching collection of
one day, or the trip's parked ideas pool. The functions here move items
between those places. They never raise for a bad target; they return a
PlacementResult and leave the trip untouched unless it is APPLIED.
"""
import logging
from enum import Enum
from typing import Optional, Tuple, Union
from uuid import UUID

from ..models.trip import (
    ChecklistItem,
    EventItem,
    FlightItem,
    ItemKind,
    ReminderItem,
    Trip,
    clock_label,
)

logger = logging.getLogger(__name__)

PlannedItem = Union[EventItem, FlightItem, ReminderItem, ChecklistItem]


class PlacementResult(str, Enum):
    """Outcome of a placement or movement operation."""
    APPLIED = "applied"
    DAY_NOT_FOUND = "day_not_found"
    ITEM_NOT_FOUND = "item_not_found"
    OUT_OF_RANGE = "out_of_range"
    PARKING_DISABLED = "parking_disabled"
    EMPTY_TRIP = "empty_trip"
    DUPLICATE_ID = "duplicate_id"

    @property
    def applied(self) -> bool:
        return self == PlacementResult.APPLIED


def _insert(collection: list, item: PlannedItem, kind: ItemKind) -> None:
    if kind.prepends:
        collection.insert(0, item)
    else:
        collection.append(item)


def _index_of(collection: list, item_id: UUID) -> Optional[int]:
    for index, item in enumerate(collection):
        if item.id == item_id:
            return index
    return None


def locate(trip: Trip, kind: ItemKind, item_id: UUID) -> Optional[Tuple[list, int]]:
    """
    Find the list currently holding an item.

    Searches each day's collection for the kind, then the parked pool.
    Ids are unique across the trip, so the first match is the only one.
    """
    for day in trip.days:
        collection = getattr(day, kind.collection)
        index = _index_of(collection, item_id)
        if index is not None:
            return collection, index

    index = _index_of(trip.parked_ideas, item_id)
    if index is not None:
        return trip.parked_ideas, index
    return None


def _id_in_use(trip: Trip, item_id: UUID) -> bool:
    if _index_of(trip.parked_ideas, item_id) is not None:
        return True
    return any(
        _index_of(getattr(day, kind.collection), item_id) is not None
        for day in trip.days
        for kind in ItemKind
    )


def find_item(trip: Trip, kind: ItemKind, item_id: UUID) -> Optional[PlannedItem]:
    found = locate(trip, kind, item_id)
    if found is None:
        return None
    collection, index = found
    return collection[index]


def flatten_to_idea(item: PlannedItem) -> EventItem:
    """
    Summarize any planned item as an activity for the parked pool.

    One-way: flight legs, checklist entries and reminder timestamps are
    folded into display strings and cannot be recovered.
    """
    if isinstance(item, EventItem):
        return item

    if isinstance(item, FlightItem):
        title = f"Flight {item.flight_number.strip().upper()}" if item.flight_number.strip() else "Flight"
        lines = [item.route_label]
        departure = item.origin
        gate_bits = []
        if departure.terminal:
            gate_bits.append(f"Terminal {departure.terminal}")
        if departure.gate:
            gate_bits.append(f"Gate {departure.gate}")
        if gate_bits:
            lines.append(" · ".join(gate_bits))
        if item.has_end_time:
            lines.append(f"{clock_label(item.start_time)} – {clock_label(item.end_time)}")
        if item.notes.strip():
            lines.append(item.notes.strip())

        return EventItem(
            id=item.id,
            title=title,
            description="\n".join(lines),
            start_time=item.start_time.time(),
            end_time=item.end_time.time() if item.has_end_time else None,
            location=departure.name or departure.city,
            latitude=departure.latitude,
            longitude=departure.longitude,
            icon="airplane",
            accent=item.accent,
        )

    if isinstance(item, ReminderItem):
        return EventItem(
            id=item.id,
            title=item.text,
            icon="bell.fill",
        )

    if isinstance(item, ChecklistItem):
        lines = [f"{'☑' if entry.is_done else '☐'} {entry.text}" for entry in item.entries]
        return EventItem(
            id=item.id,
            title=item.title,
            description="\n".join(lines),
            icon="checklist",
        )

    raise TypeError(f"Not a plannable item: {type(item).__name__}")


def add_item(trip: Trip, item: PlannedItem, day_id: Optional[UUID]) -> PlacementResult:
    """
    Place a new item on a day, or in the parked pool when day_id is None.

    Activities are appended; flights, reminders and checklists go first.
    Anything other than an activity is flattened on its way into the pool.
    An id already used anywhere in the trip is refused.
    """
    kind = ItemKind.of(item)
    if _id_in_use(trip, item.id):
        return PlacementResult.DUPLICATE_ID

    if day_id is None:
        if not trip.show_parked_ideas:
            return PlacementResult.PARKING_DISABLED
        _insert(trip.parked_ideas, flatten_to_idea(item), kind)
        return PlacementResult.APPLIED

    day = trip.day_by_id(day_id)
    if day is None:
        return PlacementResult.DAY_NOT_FOUND

    _insert(getattr(day, kind.collection), item, kind)
    return PlacementResult.APPLIED


def edit_item(trip: Trip, item: PlannedItem, day_id: Optional[UUID]) -> PlacementResult:
    """
    Replace an item and (re)assign its day in one step.

    The target is checked before anything is removed, so a failed edit
    leaves the old item where it was.
    """
    kind = ItemKind.of(item)

    if day_id is None:
        if not trip.show_parked_ideas:
            return PlacementResult.PARKING_DISABLED
    elif trip.day_by_id(day_id) is None:
        return PlacementResult.DAY_NOT_FOUND

    found = locate(trip, kind, item.id)
    if found is None:
        return PlacementResult.ITEM_NOT_FOUND

    collection, index = found
    del collection[index]
    return add_item(trip, item, day_id)


def delete_item(trip: Trip, kind: ItemKind, item_id: UUID) -> PlacementResult:
    """Remove an item from whichever list holds it."""
    found = locate(trip, kind, item_id)
    if found is None:
        return PlacementResult.ITEM_NOT_FOUND

    collection, index = found
    del collection[index]
    return PlacementResult.APPLIED


def _move_adjacent(trip: Trip, kind: ItemKind, item_id: UUID, from_day_id: UUID, step: int) -> PlacementResult:
    source_index = trip.day_index(from_day_id)
    if source_index is None:
        return PlacementResult.DAY_NOT_FOUND

    target_index = source_index + step
    if target_index < 0 or target_index >= len(trip.days):
        return PlacementResult.OUT_OF_RANGE

    source = getattr(trip.days[source_index], kind.collection)
    index = _index_of(source, item_id)
    if index is None:
        return PlacementResult.ITEM_NOT_FOUND

    item = source.pop(index)
    _insert(getattr(trip.days[target_index], kind.collection), item, kind)
    return PlacementResult.APPLIED


def move_left(trip: Trip, kind: ItemKind, item_id: UUID, from_day_id: UUID) -> PlacementResult:
    """Move an item to the previous day."""
    return _move_adjacent(trip, kind, item_id, from_day_id, -1)


def move_right(trip: Trip, kind: ItemKind, item_id: UUID, from_day_id: UUID) -> PlacementResult:
    """Move an item to the next day."""
    return _move_adjacent(trip, kind, item_id, from_day_id, 1)


def move_to_parked(trip: Trip, kind: ItemKind, item_id: UUID, from_day_id: UUID) -> PlacementResult:
    """Take an item off its day and park it, flattening non-activities."""
    if not trip.show_parked_ideas:
        return PlacementResult.PARKING_DISABLED

    day = trip.day_by_id(from_day_id)
    if day is None:
        return PlacementResult.DAY_NOT_FOUND

    source = getattr(day, kind.collection)
    index = _index_of(source, item_id)
    if index is None:
        return PlacementResult.ITEM_NOT_FOUND

    item = source.pop(index)
    if kind != ItemKind.ACTIVITY:
        logger.debug(f"Flattening {kind.value} {item_id} into a parked idea")
    _insert(trip.parked_ideas, flatten_to_idea(item), kind)
    return PlacementResult.APPLIED


def move_parked_to_last_day(trip: Trip, item_id: UUID) -> PlacementResult:
    """Send a parked idea to the end of the last day's activities."""
    if not trip.days:
        return PlacementResult.EMPTY_TRIP

    index = _index_of(trip.parked_ideas, item_id)
    if index is None:
        return PlacementResult.ITEM_NOT_FOUND

    idea = trip.parked_ideas.pop(index)
    trip.days[-1].events.append(idea)
    return PlacementResult.APPLIED
