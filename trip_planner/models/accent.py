"""
Event accents - the fixed palette attached to activities and flights.
"""
from enum import Enum
from typing import Any


class EventAccent(str, Enum):
    """Accent color tags for activities and flights."""
    LAVENDER = "lavender"
    BURNT_ORANGE = "burntOrange"
    GOLD = "gold"
    SAND = "sand"
    SKY = "sky"
    DEEP_NAVY = "deepNavy"
    MINT = "mint"
    FOREST = "forest"

    @property
    def hex_color(self) -> str:
        return ACCENT_HEX[self]

    @classmethod
    def default(cls) -> "EventAccent":
        return cls.SKY

    @classmethod
    def from_value(cls, value: Any) -> "EventAccent":
        """
        Resolve a stored accent name to the current palette.

        Current names resolve to themselves, names from the older
        fifteen-color palette go through LEGACY_ACCENTS, and anything
        else falls back to the default accent.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.default()

        name = value.strip()
        for accent in cls:
            if accent.value == name:
                return accent

        return LEGACY_ACCENTS.get(name.lower(), cls.default())


ACCENT_HEX = {
    EventAccent.LAVENDER: "#B4A7D6",
    EventAccent.BURNT_ORANGE: "#CC5500",
    EventAccent.GOLD: "#D4A017",
    EventAccent.SAND: "#D8C3A5",
    EventAccent.SKY: "#6CA6CD",
    EventAccent.DEEP_NAVY: "#1F2A44",
    EventAccent.MINT: "#98D7C2",
    EventAccent.FOREST: "#2E6B3F",
}


# Older files used the system color names.
LEGACY_ACCENTS = {
    "red": EventAccent.BURNT_ORANGE,
    "coral": EventAccent.BURNT_ORANGE,
    "orange": EventAccent.BURNT_ORANGE,
    "burntorange": EventAccent.BURNT_ORANGE,
    "amber": EventAccent.GOLD,
    "yellow": EventAccent.GOLD,
    "lime": EventAccent.FOREST,
    "green": EventAccent.FOREST,
    "mint": EventAccent.MINT,
    "teal": EventAccent.MINT,
    "cyan": EventAccent.SKY,
    "blue": EventAccent.SKY,
    "indigo": EventAccent.DEEP_NAVY,
    "deepnavy": EventAccent.DEEP_NAVY,
    "navy": EventAccent.DEEP_NAVY,
    "purple": EventAccent.LAVENDER,
    "violet": EventAccent.LAVENDER,
    "pink": EventAccent.LAVENDER,
    "beige": EventAccent.SAND,
    "tan": EventAccent.SAND,
}
