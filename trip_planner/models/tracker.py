"""
Tracker models - visited/not-visited progress over curated lists.
"""
import json
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TrackerType(str, Enum):
    """The curated lists a traveler can tick off."""
    COUNTRIES = "countries"
    STATES = "states"
    CONTINENTS = "continents"
    SUBWAY_SYSTEMS = "subwaySystems"
    NATIONAL_PARKS = "nationalParks"

    @property
    def title(self) -> str:
        return TRACKER_TITLES[self]

    @property
    def subtitle(self) -> str:
        return TRACKER_SUBTITLES[self]

    @property
    def icon(self) -> str:
        return TRACKER_ICONS[self]


TRACKER_TITLES = {
    TrackerType.COUNTRIES: "Countries",
    TrackerType.STATES: "States",
    TrackerType.CONTINENTS: "Continents",
    TrackerType.SUBWAY_SYSTEMS: "Subway Systems",
    TrackerType.NATIONAL_PARKS: "U.S. National Parks",
}

TRACKER_SUBTITLES = {
    TrackerType.COUNTRIES: "All countries",
    TrackerType.STATES: "U.S. states",
    TrackerType.CONTINENTS: "7 continents",
    TrackerType.SUBWAY_SYSTEMS: "Major systems",
    TrackerType.NATIONAL_PARKS: "US NPS",
}

TRACKER_ICONS = {
    TrackerType.COUNTRIES: "globe.americas.fill",
    TrackerType.STATES: "map.fill",
    TrackerType.CONTINENTS: "globe.europe.africa.fill",
    TrackerType.SUBWAY_SYSTEMS: "tram.fill",
    TrackerType.NATIONAL_PARKS: "mountain.2.fill",
}


class TrackerItem(BaseModel):
    """One entry of a curated list."""
    id: str
    name: str
    subtitle: Optional[str] = None


class TrackerVisitedState(BaseModel):
    """Visited item ids per tracker."""
    visited: dict[TrackerType, set[str]] = Field(default_factory=dict)

    def ids_for(self, tracker: TrackerType) -> set[str]:
        return self.visited.get(tracker, set())

    def to_json(self) -> bytes:
        """Serialize as {tracker: sorted ids}, keys sorted."""
        payload = {
            tracker.value: sorted(ids)
            for tracker, ids in self.visited.items()
        }
        return json.dumps(payload, indent=2, sort_keys=True).encode("utf-8")

    @classmethod
    def from_json(cls, data: bytes | str) -> "TrackerVisitedState":
        """Decode a persisted state. Raises ValueError on malformed input."""
        raw = json.loads(data)
        if not isinstance(raw, dict):
            raise ValueError("Tracker state must be a JSON object")

        # Older files wrapped the mapping
        if "visitedIDsByTracker" in raw:
            raw = raw["visitedIDsByTracker"]
            if not isinstance(raw, dict):
                raise ValueError("visitedIDsByTracker must be a JSON object")

        known = {tracker.value for tracker in TrackerType}
        raw = {key: ids for key, ids in raw.items() if key in known}
        return cls.model_validate({"visited": raw})
