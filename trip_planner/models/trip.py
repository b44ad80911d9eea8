"""
Trip models - trips, their days, and everything planned on a day.

All records serialize with camelCase keys and decode leniently: optional
fields default when missing, required ones (ids, titles, dates) fail.
"""
import base64
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Annotated, Any, Optional
from uuid import UUID, uuid4

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    TypeAdapter,
    ValidationInfo,
    computed_field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from .accent import EventAccent
from .time_labels import format_clock, format_time_range, minutes_since_midnight, parse_time_label


def _decode_blob(value: Any) -> Any:
    if isinstance(value, str):
        return base64.b64decode(value)
    return value


# Image payloads travel as base64 in JSON
Blob = Annotated[
    bytes,
    BeforeValidator(_decode_blob),
    PlainSerializer(
        lambda v: base64.b64encode(v).decode("ascii"),
        return_type=str,
        when_used="json-unless-none",
    ),
]


def _calendar_date(value: Any) -> Any:
    """Older files stored full timestamps; keep only the calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return value


class TripModel(BaseModel):
    """Base for persisted records: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _require_id_when_decoding(cls, data: Any, info: ValidationInfo) -> Any:
        # Constructors may omit ids; persisted records must carry them.
        if (
            info.context
            and info.context.get("require_ids")
            and "id" in cls.model_fields
            and isinstance(data, dict)
            and "id" not in data
        ):
            raise PydanticCustomError("missing", "Field required: id")
        return data


class EventItem(TripModel):
    """An activity on a day or in the parked ideas pool."""
    id: UUID = Field(default_factory=uuid4)
    title: str
    description: str = ""
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    location: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    icon: str = "mappin.and.ellipse"
    accent: EventAccent = EventAccent.SKY
    photo_data: Optional[Blob] = None

    @model_validator(mode="before")
    @classmethod
    def _upgrade_time_label(cls, data: Any) -> Any:
        """Turn a legacy free-text `time` label into structured times."""
        if not isinstance(data, dict) or "time" not in data:
            return data

        data = dict(data)
        label = data.pop("time")
        structured = ("startTime", "start_time", "endTime", "end_time")
        if isinstance(label, str) and not any(key in data for key in structured):
            start, end = parse_time_label(label)
            data["start_time"] = start
            data["end_time"] = end
        return data

    @field_validator("accent", mode="before")
    @classmethod
    def _resolve_accent(cls, v):
        return EventAccent.from_value(v)

    @computed_field(alias="time")
    @property
    def time_label(self) -> str:
        return format_time_range(self.start_time, self.end_time)

    @property
    def start_time_minutes(self) -> int:
        return minutes_since_midnight(self.start_time)

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class Airport(TripModel):
    """One end of a flight."""
    name: str = ""
    code: str = ""
    city: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    terminal: str = ""
    gate: str = ""

    @field_validator("code", mode="before")
    @classmethod
    def _normalize_code(cls, v):
        if v is None:
            return ""
        return str(v).strip().upper()

    @property
    def display_code(self) -> str:
        return self.code or "—"


class FlightItem(TripModel):
    """A flight leg scheduled on a day."""
    id: UUID = Field(default_factory=uuid4)
    origin: Airport = Field(default_factory=Airport)
    destination: Airport = Field(default_factory=Airport)
    flight_number: str = ""
    notes: str = ""
    accent: EventAccent = EventAccent.SKY
    start_time: datetime
    end_time: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def _nest_flat_airports(cls, data: Any) -> Any:
        """Accept the flat fromCode/toCity layout written by older builds."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        for prefix, key in (("from", "origin"), ("to", "destination")):
            if key in data:
                continue
            airport = {}
            for part in ("Name", "Code", "City", "Latitude", "Longitude", "Terminal", "Gate"):
                flat_key = f"{prefix}{part}"
                if flat_key in data:
                    airport[part.lower()] = data.pop(flat_key)
            if airport:
                data[key] = airport
        return data

    @field_validator("accent", mode="before")
    @classmethod
    def _resolve_accent(cls, v):
        return EventAccent.from_value(v)

    @model_validator(mode="after")
    def _default_end_time(self) -> "FlightItem":
        if self.end_time is None:
            self.end_time = self.start_time
        return self

    @property
    def has_end_time(self) -> bool:
        return self.end_time is not None and self.end_time > self.start_time

    @property
    def route_label(self) -> str:
        return f"{self.origin.display_code} → {self.destination.display_code}"

    @property
    def start_time_minutes(self) -> int:
        return self.start_time.hour * 60 + self.start_time.minute


class ReminderItem(TripModel):
    """A short note pinned to a day."""
    id: UUID = Field(default_factory=uuid4)
    text: str
    created_at: datetime = Field(default_factory=datetime.now)


class ChecklistEntry(TripModel):
    """One line of a checklist."""
    id: UUID = Field(default_factory=uuid4)
    text: str
    is_done: bool = False


class ChecklistItem(TripModel):
    """A titled checklist pinned to a day."""
    id: UUID = Field(default_factory=uuid4)
    title: str
    entries: list[ChecklistEntry] = Field(
        default_factory=list,
        validation_alias=AliasChoices("entries", "items"),
    )
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def done_count(self) -> int:
        return sum(1 for entry in self.entries if entry.is_done)

    @property
    def is_complete(self) -> bool:
        return bool(self.entries) and self.done_count == len(self.entries)


class TripDay(TripModel):
    """One calendar day of a trip and the items planned on it."""
    id: UUID = Field(default_factory=uuid4)
    date: date
    order: int = Field(default=1, ge=1)
    label: str = ""
    weather_icon: str = "cloud.sun.fill"
    temperature_f: int = 72
    events: list[EventItem] = Field(default_factory=list)
    reminders: list[ReminderItem] = Field(default_factory=list)
    checklists: list[ChecklistItem] = Field(default_factory=list)
    flights: list[FlightItem] = Field(default_factory=list)

    @field_validator("date", mode="before")
    @classmethod
    def _strip_time_of_day(cls, v):
        return _calendar_date(v)

    @property
    def display_title(self) -> str:
        """e.g. 'Sat, Jan 3'"""
        return f"{self.date:%a}, {self.date:%b} {self.date.day}"

    @property
    def day_badge(self) -> str:
        return f"Day {self.order}"

    @property
    def is_empty(self) -> bool:
        return not (self.events or self.reminders or self.checklists or self.flights)


class TripStatus(str, Enum):
    """Where a trip sits relative to today."""
    UPCOMING = "upcoming"
    IN_PROGRESS = "in_progress"
    ENDED = "ended"


class Trip(TripModel):
    """A trip with its date range, days and parked ideas."""
    id: UUID = Field(default_factory=uuid4)
    name: str
    destination: str
    start_date: date
    end_date: date
    notes: str = ""
    image_name: str = "airplane"
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    map_span: Optional[float] = None
    days: list[TripDay] = Field(default_factory=list)
    cover_image_data: Optional[Blob] = None
    show_parked_ideas: bool = False
    parked_ideas: list[EventItem] = Field(default_factory=list)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _strip_time_of_day(cls, v):
        return _calendar_date(v)

    @model_validator(mode="after")
    def _check_date_range(self) -> "Trip":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    @property
    def display_name(self) -> str:
        return self.destination.strip() or self.name

    @property
    def formatted_date_range(self) -> str:
        return f"{_medium_date(self.start_date)} - {_medium_date(self.end_date)}"

    @property
    def trip_duration(self) -> int:
        """Inclusive number of days."""
        return (self.end_date - self.start_date).days + 1

    def days_until_trip(self, today: Optional[date] = None) -> int:
        today = today or date.today()
        return (self.start_date - today).days

    def status(self, today: Optional[date] = None) -> TripStatus:
        today = today or date.today()
        if today < self.start_date:
            return TripStatus.UPCOMING
        if today > self.end_date:
            return TripStatus.ENDED
        return TripStatus.IN_PROGRESS

    def countdown_text(self, today: Optional[date] = None) -> str:
        status = self.status(today)
        if status == TripStatus.IN_PROGRESS:
            return "In progress"
        if status == TripStatus.ENDED:
            return "Ended"

        remaining = self.days_until_trip(today)
        if remaining == 0:
            return "Today!"
        if remaining == 1:
            return "Tomorrow"
        return f"{max(remaining, 0)} days away"

    def is_urgent(self, today: Optional[date] = None) -> bool:
        """Upcoming and starting within five days."""
        if self.status(today) != TripStatus.UPCOMING:
            return False
        return 0 <= self.days_until_trip(today) < 5

    def day_by_id(self, day_id: UUID) -> Optional[TripDay]:
        for day in self.days:
            if day.id == day_id:
                return day
        return None

    def day_index(self, day_id: UUID) -> Optional[int]:
        for index, day in enumerate(self.days):
            if day.id == day_id:
                return index
        return None

    def date_for_offset(self, offset: int) -> date:
        return self.start_date + timedelta(days=offset)


def _medium_date(value: date) -> str:
    return f"{value:%b} {value.day}, {value.year}"


class ItemKind(str, Enum):
    """The four kinds of things that can be planned on a day."""
    ACTIVITY = "activity"
    FLIGHT = "flight"
    REMINDER = "reminder"
    CHECKLIST = "checklist"

    @property
    def collection(self) -> str:
        """Name of the TripDay list holding this kind."""
        return _COLLECTIONS[self]

    @property
    def model(self) -> type:
        return _MODELS[self]

    @property
    def prepends(self) -> bool:
        """Activities are appended; everything else goes to the top."""
        return self != ItemKind.ACTIVITY

    @classmethod
    def of(cls, item: BaseModel) -> "ItemKind":
        for kind, model in _MODELS.items():
            if isinstance(item, model):
                return kind
        raise TypeError(f"Not a plannable item: {type(item).__name__}")


_COLLECTIONS = {
    ItemKind.ACTIVITY: "events",
    ItemKind.FLIGHT: "flights",
    ItemKind.REMINDER: "reminders",
    ItemKind.CHECKLIST: "checklists",
}

_MODELS = {
    ItemKind.ACTIVITY: EventItem,
    ItemKind.FLIGHT: FlightItem,
    ItemKind.REMINDER: ReminderItem,
    ItemKind.CHECKLIST: ChecklistItem,
}


TripList = TypeAdapter(list[Trip])


def decode_trips(data: bytes | str) -> list[Trip]:
    """Decode a persisted trip list. Raises pydantic.ValidationError."""
    return TripList.validate_json(data, context={"require_ids": True})


def encode_trips(trips: list[Trip]) -> bytes:
    return TripList.dump_json(trips, by_alias=True, indent=2)


def clock_label(value: datetime) -> str:
    """Short clock label for a flight time."""
    return format_clock(value.time())
