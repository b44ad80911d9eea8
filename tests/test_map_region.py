"""Tests for trip map regions."""
import pytest

from trip_planner.models.trip import EventItem
from trip_planner.services.map_region import MapRegion, search_bias_region, trip_map_region


class TestTripMapRegion:
    """Test choosing the region that frames a trip."""

    def test_trip_coordinate_wins(self, trip):
        """Test that the trip's own coordinate is preferred."""
        trip.latitude = 38.72
        trip.longitude = -9.14
        trip.days[0].events.append(EventItem(title="Far away", latitude=0.0, longitude=0.0))

        region = trip_map_region(trip)

        assert (region.latitude, region.longitude) == (38.72, -9.14)
        assert region.latitude_delta == pytest.approx(0.1)

    def test_stored_span(self, trip):
        """Test that a stored span is used."""
        trip.latitude, trip.longitude, trip.map_span = 40.0, -74.0, 0.8
        assert trip_map_region(trip).longitude_delta == pytest.approx(0.8)

    def test_frames_located_activities(self, trip):
        """Test framing every located activity."""
        trip.days[0].events.append(EventItem(title="A", latitude=38.70, longitude=-9.20))
        trip.days[2].events.append(EventItem(title="B", latitude=38.80, longitude=-9.10))
        trip.days[1].events.append(EventItem(title="No location"))

        region = trip_map_region(trip)

        assert region.latitude == pytest.approx(38.75)
        assert region.longitude == pytest.approx(-9.15)
        assert region.latitude_delta == pytest.approx(0.13)

    def test_single_activity_uses_minimum_span(self, trip):
        """Test the minimum span around a single activity."""
        trip.days[0].events.append(EventItem(title="A", latitude=38.70, longitude=-9.20))

        region = trip_map_region(trip)

        assert region.latitude_delta == pytest.approx(0.05)

    def test_world_fallback(self, trip):
        """Test the world view when nothing is located."""
        assert trip_map_region(trip) == MapRegion.world()

    def test_search_bias(self, trip):
        """Test the search bias box around a trip."""
        assert search_bias_region(trip) is None
        trip.latitude, trip.longitude = 38.72, -9.14
        assert search_bias_region(trip).latitude_delta == 0.5
