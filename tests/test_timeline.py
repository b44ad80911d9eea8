"""Tests for day timeline ordering."""
from datetime import datetime, time
from uuid import UUID

from trip_planner.models.trip import EventItem, FlightItem, ItemKind, ReminderItem
from trip_planner.services.timeline import build_timeline, sort_parked_ideas


class TestBuildTimeline:
    """Test merging flights and activities."""

    def test_sorted_by_start_time(self, trip):
        """Test merging flights and activities by start time."""
        day = trip.days[0]
        late = EventItem(title="Dinner", start_time=time(19, 0))
        early = EventItem(title="Brunch", start_time=time(9, 30))
        day.events.extend([late, early])
        day.flights.append(FlightItem(start_time=datetime(2026, 1, 1, 12, 15)))

        titles = [entry.item.title if entry.kind == ItemKind.ACTIVITY else "flight" for entry in build_timeline(day)]

        assert titles == ["Brunch", "flight", "Dinner"]

    def test_flight_before_activity_at_same_minute(self, trip):
        """Test that a flight sorts first at the same minute."""
        day = trip.days[0]
        event = EventItem(title="Coffee", start_time=time(9, 0))
        flight = FlightItem(start_time=datetime(2026, 1, 1, 9, 0))
        day.events.append(event)
        day.flights.append(flight)

        timeline = build_timeline(day)

        assert [entry.kind for entry in timeline] == [ItemKind.FLIGHT, ItemKind.ACTIVITY]
        assert timeline[0].key == f"flight-{flight.id}"

    def test_same_minute_activities_break_ties_by_key(self, trip):
        """Test that ties break on the item key."""
        day = trip.days[0]
        b = EventItem(id=UUID("bbbbbbbb-0000-0000-0000-000000000000"), title="B", start_time=time(10, 0))
        a = EventItem(id=UUID("aaaaaaaa-0000-0000-0000-000000000000"), title="A", start_time=time(10, 0))
        day.events.extend([b, a])

        assert [entry.item.title for entry in build_timeline(day)] == ["A", "B"]

    def test_untimed_activities_sort_first(self, trip):
        """Test that untimed activities sort at minute 0."""
        day = trip.days[0]
        day.events.extend([EventItem(title="Timed", start_time=time(8, 0)), EventItem(title="Anytime")])

        timeline = build_timeline(day)

        assert timeline[0].item.title == "Anytime"
        assert timeline[0].minutes == 0

    def test_reminders_are_not_on_the_timeline(self, trip):
        """Test that reminders stay off the timeline."""
        day = trip.days[0]
        day.reminders.append(ReminderItem(text="Call hotel"))

        assert build_timeline(day) == []


class TestParkedIdeas:
    """Test parked idea ordering."""

    def test_sorted_copy(self):
        """Test that sorting leaves the stored order alone."""
        ideas = [EventItem(title="Late", start_time=time(20, 0)), EventItem(title="Early", start_time=time(7, 0))]

        ordered = sort_parked_ideas(ideas)

        assert [idea.title for idea in ordered] == ["Early", "Late"]
        assert [idea.title for idea in ideas] == ["Late", "Early"]
