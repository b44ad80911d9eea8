"""
Map regions for trips and search bias.
"""
from typing import Optional

from pydantic import BaseModel

from ..models.trip import Trip


DEFAULT_CITY_SPAN = 0.1
MIN_EVENT_SPAN = 0.05
EVENT_PADDING = 1.3


class MapRegion(BaseModel):
    """A center coordinate and a square span in degrees."""
    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float

    @classmethod
    def world(cls) -> "MapRegion":
        return cls(latitude=20, longitude=0, latitude_delta=120, longitude_delta=120)

    def viewbox(self) -> str:
        """Nominatim viewbox: left,top,right,bottom."""
        half_lat = self.latitude_delta / 2
        half_lon = self.longitude_delta / 2
        return ",".join(str(round(v, 6)) for v in (
            self.longitude - half_lon,
            self.latitude + half_lat,
            self.longitude + half_lon,
            self.latitude - half_lat,
        ))


def trip_map_region(trip: Trip) -> MapRegion:
    """
    Region to show for a trip.

    The trip's own coordinate with its stored span wins; otherwise frame
    every located activity; otherwise fall back to the world view.
    """
    if trip.latitude is not None and trip.longitude is not None:
        span = trip.map_span or DEFAULT_CITY_SPAN
        return MapRegion(
            latitude=trip.latitude,
            longitude=trip.longitude,
            latitude_delta=span,
            longitude_delta=span,
        )

    points = [
        (event.latitude, event.longitude)
        for day in trip.days
        for event in day.events
        if event.has_location
    ]
    if not points:
        return MapRegion.world()

    lats = [lat for lat, _ in points]
    lons = [lon for _, lon in points]
    return MapRegion(
        latitude=(min(lats) + max(lats)) / 2,
        longitude=(min(lons) + max(lons)) / 2,
        latitude_delta=max((max(lats) - min(lats)) * EVENT_PADDING, MIN_EVENT_SPAN),
        longitude_delta=max((max(lons) - min(lons)) * EVENT_PADDING, MIN_EVENT_SPAN),
    )


def search_bias_region(trip: Trip) -> Optional[MapRegion]:
    """Half-degree box around the trip's location, used to bias activity search."""
    if trip.latitude is None or trip.longitude is None:
        return None
    return MapRegion(
        latitude=trip.latitude,
        longitude=trip.longitude,
        latitude_delta=0.5,
        longitude_delta=0.5,
    )
