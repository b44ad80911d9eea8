"""Tests for location search and the airport-code heuristics."""
import httpx
import pytest

from trip_planner.services.location_search import (
    LocationSearchService,
    PlaceSuggestion,
    airport_code_candidate,
    is_airport_result,
    strip_leading_code,
)
from trip_planner.services.map_region import MapRegion


AIRPORT_RESULT = {
    "lat": "38.7742",
    "lon": "-9.1342",
    "name": "Humberto Delgado Airport",
    "display_name": "Humberto Delgado Airport, Lisbon, Portugal",
    "type": "aerodrome",
    "boundingbox": ["38.76", "38.80", "-9.15", "-9.11"],
    "address": {"city": "Lisbon", "country": "Portugal"},
    "extratags": {"iata": "LIS"},
}

CASTLE_RESULT = {
    "lat": "38.7139",
    "lon": "-9.1334",
    "name": "Castelo de São Jorge",
    "display_name": "Castelo de São Jorge, Lisbon, Portugal",
    "type": "castle",
    "address": {"town": "Lisbon"},
}


def _service(handler):
    return LocationSearchService(transport=httpx.MockTransport(handler))


class TestAirportHeuristics:
    """Test airport code extraction from free text."""

    def test_parenthesized_code(self):
        """Test a code in parentheses."""
        assert airport_code_candidate("Lisbon Airport (LIS)") == "LIS"

    def test_prefix_code(self):
        """Test a code before a dash."""
        assert airport_code_candidate("JFK - John F. Kennedy International") == "JFK"

    def test_iata_marker(self):
        """Test an IATA marker."""
        assert airport_code_candidate("Heathrow, IATA: LHR") == "LHR"

    def test_no_code(self):
        """Test text without a code."""
        assert airport_code_candidate("Central Park") == ""
        assert airport_code_candidate("") == ""

    def test_strip_leading_code(self):
        """Test removing a leading code from a title."""
        assert strip_leading_code("LIS - Lisbon Airport") == "Lisbon Airport"
        assert strip_leading_code("Lisbon Airport") == "Lisbon Airport"

    def test_is_airport_result(self):
        """Test recognising airport results."""
        assert is_airport_result("Aeropuerto de Madrid", "Spain")
        assert is_airport_result("Lisbon (LIS)", "")
        assert not is_airport_result("Castelo de São Jorge", "Lisbon, Portugal")


class TestLocationSearch:
    """Test the geocoding client."""

    @pytest.mark.asyncio
    async def test_search_parses_results(self):
        """Test parsing Nominatim results into suggestions."""
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json=[AIRPORT_RESULT, CASTLE_RESULT])

        results = await _service(handler).search("lisbon")

        assert seen["q"] == "lisbon"
        assert seen["format"] == "jsonv2"
        assert len(results) == 2

        airport = results[0]
        assert airport.title == "Humberto Delgado Airport"
        assert airport.subtitle == "Lisbon, Portugal"
        assert airport.airport_code == "LIS"
        assert airport.city == "Lisbon"
        assert airport.latitude == pytest.approx(38.7742)
        assert airport.span == pytest.approx(0.04)

        assert results[1].airport_code == ""
        assert results[1].span is None

    @pytest.mark.asyncio
    async def test_unparseable_coordinates_are_dropped(self):
        """Test that a non-numeric lat or lon leaves the coordinate empty."""
        def handler(request):
            return httpx.Response(200, json=[{**CASTLE_RESULT, "lat": "abc", "lon": None}])

        results = await _service(handler).search("castle")

        assert len(results) == 1
        assert results[0].latitude is None
        assert results[0].longitude is None
        assert results[0].title == "Castelo de São Jorge"

    @pytest.mark.asyncio
    async def test_airports_only(self):
        """Test filtering results down to airports."""
        def handler(request):
            return httpx.Response(200, json=[AIRPORT_RESULT, CASTLE_RESULT])

        results = await _service(handler).search("lisbon", airports_only=True)

        assert [r.airport_code for r in results] == ["LIS"]

    @pytest.mark.asyncio
    async def test_region_biases_without_bounding(self):
        """Test that a region becomes a non-bounding viewbox."""
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json=[])

        region = MapRegion(latitude=38.72, longitude=-9.14, latitude_delta=0.5, longitude_delta=0.5)
        await _service(handler).search("castle", region=region)

        left, top, right, bottom = (float(v) for v in seen["viewbox"].split(","))
        assert left == pytest.approx(-9.39)
        assert top == pytest.approx(38.97)
        assert right == pytest.approx(-8.89)
        assert bottom == pytest.approx(38.47)
        assert seen["bounded"] == "0"

    @pytest.mark.asyncio
    async def test_blank_query_skips_request(self):
        """Test that a blank query makes no request."""
        def handler(request):
            raise AssertionError("no request expected")

        assert await _service(handler).search("   ") == []

    @pytest.mark.asyncio
    async def test_http_error_returns_nothing(self):
        """Test that a server error yields no suggestions."""
        def handler(request):
            return httpx.Response(500, text="boom")

        assert await _service(handler).search("lisbon") == []

    @pytest.mark.asyncio
    async def test_resolve_uses_known_coordinates(self):
        """Test resolving a suggestion that already has coordinates."""
        def handler(request):
            raise AssertionError("no request expected")

        suggestion = PlaceSuggestion(title="Castle", subtitle="Lisbon", latitude=38.71, longitude=-9.13)
        place = await _service(handler).resolve(suggestion)

        assert place.latitude == pytest.approx(38.71)
        assert place.span == pytest.approx(0.1)
        assert place.city == "Lisbon"

    @pytest.mark.asyncio
    async def test_resolve_searches_when_coordinates_missing(self):
        """Test resolving a suggestion without coordinates."""
        def handler(request):
            return httpx.Response(200, json=[AIRPORT_RESULT])

        place = await _service(handler).resolve(PlaceSuggestion(title="LIS", subtitle="Lisbon"))

        assert place.longitude == pytest.approx(-9.1342)
        assert place.airport_code == "LIS"
        assert place.span == pytest.approx(0.04)

    @pytest.mark.asyncio
    async def test_resolve_not_found(self):
        """Test resolving a place the geocoder does not know."""
        def handler(request):
            return httpx.Response(200, json=[])

        assert await _service(handler).resolve(PlaceSuggestion(title="Nowhere")) is None
