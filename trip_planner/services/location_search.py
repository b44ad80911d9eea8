"""
Location Search Service.
Place suggestions and airport lookups via OpenStreetMap (Nominatim).
"""
import logging
import re
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel

from ..config import settings
from .map_region import MapRegion

logger = logging.getLogger(__name__)


_PAREN_CODE = re.compile(r"\(([A-Z]{3})\)")
_PREFIX_CODE = re.compile(r"^([A-Z]{3})\s*[-–]\s*")
_IATA_MARKER = re.compile(r"\bIATA[:\s]+([A-Z]{3})\b")
_AIRPORT_WORDS = ("AIRPORT", "AEROPORT", "AEROPUERTO", "INTL")


def airport_code_candidate(text: str) -> str:
    """
    Best-effort IATA code from free text.

    Tries a parenthesized code, then a three-letter prefix before a dash,
    then an 'IATA:' marker. Returns '' when nothing matches.
    """
    combined = (text or "").upper()

    match = _PAREN_CODE.search(combined)
    if match:
        return match.group(1)

    match = _PREFIX_CODE.search(combined)
    if match:
        return match.group(1)

    match = _IATA_MARKER.search(combined)
    if match:
        return match.group(1)

    return ""


def strip_leading_code(title: str) -> str:
    """'LIS - Lisbon Airport' -> 'Lisbon Airport'"""
    trimmed = (title or "").strip()
    match = _PREFIX_CODE.match(trimmed)
    if match:
        return trimmed[match.end():].strip()
    return trimmed


def is_airport_result(title: str, subtitle: str) -> bool:
    if airport_code_candidate(f"{title} {subtitle}"):
        return True
    combined = f"{title} {subtitle}".upper()
    return any(word in combined for word in _AIRPORT_WORDS)


class PlaceSuggestion(BaseModel):
    """A selectable search result."""
    title: str
    subtitle: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    span: Optional[float] = None
    city: str = ""
    airport_code: str = ""


class ResolvedPlace(BaseModel):
    """A chosen place: where it is and how far to zoom."""
    title: str
    subtitle: str = ""
    latitude: float
    longitude: float
    span: float
    city: str = ""
    airport_code: str = ""


def _span_from_bounding_box(box: Optional[List[Any]]) -> Optional[float]:
    # Nominatim: [south, north, west, east]
    if not box or len(box) != 4:
        return None
    try:
        south, north, west, east = (float(v) for v in box)
    except (TypeError, ValueError):
        return None
    return max(abs(north - south), abs(east - west))


def _coordinate(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _parse_result(result: Dict[str, Any]) -> PlaceSuggestion:
    display_name = result.get("display_name", "")
    name = result.get("name") or display_name.split(",")[0].strip()
    subtitle = display_name
    if display_name.startswith(name):
        subtitle = display_name[len(name):].lstrip(", ").strip()

    address = result.get("address") or {}
    city = (
        address.get("city")
        or address.get("town")
        or address.get("village")
        or address.get("state")
        or ""
    )

    extratags = result.get("extratags") or {}
    code = (extratags.get("iata") or "").strip().upper()
    if not code:
        code = airport_code_candidate(f"{name} {subtitle}")

    return PlaceSuggestion(
        title=strip_leading_code(name),
        subtitle=subtitle,
        latitude=_coordinate(result.get("lat")),
        longitude=_coordinate(result.get("lon")),
        span=_span_from_bounding_box(result.get("boundingbox")),
        city=city,
        airport_code=code,
    )


class LocationSearchService:
    """Service to look up places and airports."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.geocoder_base_url
        self.headers = {
            "User-Agent": settings.geocoder_user_agent,
            "Accept": "application/json",
        }
        self.timeout = settings.geocoder_timeout
        self.limit = settings.geocoder_result_limit
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=self.headers,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _query(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        async with self._client() as client:
            try:
                response = await client.get(self.base_url, params=params)
                response.raise_for_status()
                data = response.json()
            except (httpx.HTTPError, ValueError) as e:
                logger.error(f"Location search error: {e}")
                return []
        return data if isinstance(data, list) else []

    async def search(
        self,
        query: str,
        region: Optional[MapRegion] = None,
        airports_only: bool = False,
    ) -> List[PlaceSuggestion]:
        """
        Ranked suggestions for a free-text query.

        A region biases results toward it without excluding others.
        """
        if not query or not query.strip():
            return []

        params: Dict[str, Any] = {
            "q": query.strip(),
            "format": "jsonv2",
            "limit": self.limit,
            "addressdetails": 1,
            "extratags": 1,
        }
        if region is not None:
            params["viewbox"] = region.viewbox()
            params["bounded"] = 0

        results = await self._query(params)

        suggestions = []
        for result in results:
            suggestion = _parse_result(result)
            if airports_only:
                is_aerodrome = result.get("type") == "aerodrome"
                if not is_aerodrome and not is_airport_result(suggestion.title, suggestion.subtitle):
                    continue
            suggestions.append(suggestion)
        return suggestions

    async def resolve(self, suggestion: PlaceSuggestion) -> Optional[ResolvedPlace]:
        """Coordinate and zoom span for a selected suggestion."""
        place = suggestion
        if place.latitude is None or place.longitude is None:
            query = ", ".join(part for part in (suggestion.title, suggestion.subtitle) if part)
            matches = await self.search(query)
            if not matches or matches[0].latitude is None or matches[0].longitude is None:
                logger.info(f"Could not resolve location '{query}'")
                return None
            place = matches[0]

        return ResolvedPlace(
            title=suggestion.title,
            subtitle=suggestion.subtitle,
            latitude=place.latitude,
            longitude=place.longitude,
            span=place.span or 0.1,
            city=place.city or suggestion.subtitle,
            airport_code=suggestion.airport_code or place.airport_code,
        )


# Global service instance
location_search: Optional[LocationSearchService] = None


def get_location_search() -> LocationSearchService:
    """Get or create the global location search service."""
    global location_search
    if location_search is None:
        location_search = LocationSearchService()
    return location_search
