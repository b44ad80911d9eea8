"""Tests for persistence and the trip/tracker stores."""
import json
from datetime import date
from uuid import uuid4

import pytest

from trip_planner.models.trip import ChecklistEntry, ChecklistItem, EventItem, ItemKind, Trip
from trip_planner.models.tracker import TrackerType
from trip_planner.services.persistence import JsonFileWriter, read_json_file
from trip_planner.services.placement import PlacementResult
from trip_planner.services.tracker_store import TrackerStore
from trip_planner.services.trip_store import TripStore


def _new_trip(**overrides):
    values = {
        "name": "Lisbon",
        "destination": "Lisbon, Portugal",
        "start_date": date(2026, 1, 1),
        "end_date": date(2026, 1, 3),
    }
    values.update(overrides)
    return Trip(**values)


class TestJsonFileWriter:
    """Test the background writer."""

    def test_last_write_wins(self, tmp_path):
        """Test that queued snapshots are written in order."""
        path = tmp_path / "data.json"
        writer = JsonFileWriter(path)

        for n in range(5):
            writer.submit(json.dumps({"n": n}).encode())
        writer.flush()

        assert json.loads(path.read_bytes()) == {"n": 4}
        writer.close()

    def test_creates_parent_directory(self, tmp_path):
        """Test that missing directories are created."""
        path = tmp_path / "nested" / "dir" / "data.json"
        writer = JsonFileWriter(path)

        writer.submit(b"[]")
        writer.close()

        assert path.read_bytes() == b"[]"

    def test_failed_write_is_logged_and_dropped(self, tmp_path):
        """Test that a failed write is counted and dropped."""
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("file")
        writer = JsonFileWriter(blocker / "data.json")

        writer.submit(b"[]")
        writer.flush()

        assert writer.failed_writes == 1
        writer.close()

    def test_flush_without_writes(self, tmp_path):
        """Test flushing a writer that never started."""
        writer = JsonFileWriter(tmp_path / "data.json")
        writer.flush()
        writer.close()
        assert read_json_file(tmp_path / "data.json") is None


class TestTripStore:
    """Test the trip store."""

    def test_add_and_reload(self, tmp_path):
        """Test that an added trip survives a reload."""
        path = tmp_path / "SavedTrips.json"
        store = TripStore(path)
        store.load()
        trip = store.add_trip(_new_trip())
        store.flush()

        reloaded = TripStore(path)
        reloaded.load()

        assert [t.id for t in reloaded.list_trips()] == [trip.id]
        assert len(reloaded.trips[0].days) == 3
        store.close()

    def test_missing_file_starts_empty(self, tmp_path):
        """Test loading without a saved file."""
        store = TripStore(tmp_path / "SavedTrips.json")
        store.load()
        assert store.trips == []

    def test_missing_file_seeds_samples(self, tmp_path):
        """Test seeding the demo trips into an empty store."""
        store = TripStore(tmp_path / "SavedTrips.json", seed_sample_data=True)
        store.load()

        assert len(store.trips) == 3
        assert all(trip.days for trip in store.trips)

    def test_malformed_file_resets(self, tmp_path):
        """Test that an invalid trip file resets the store."""
        path = tmp_path / "SavedTrips.json"
        path.write_text('[{"name": "no id or dates"}]')

        store = TripStore(path)
        store.load()

        assert store.trips == []

    def test_update_dates_regenerates_days(self, tmp_path):
        """Test that a new end date rebuilds the days."""
        store = TripStore(tmp_path / "SavedTrips.json")
        trip = store.add_trip(_new_trip())
        event = EventItem(title="Tile museum")
        store.add_item(trip, event, trip.days[1].id)

        updated = store.update_trip_details(trip.id, end_date=date(2026, 1, 5), name="Lisbon & Sintra")

        assert updated.name == "Lisbon & Sintra"
        assert len(updated.days) == 5
        assert updated.days[1].events == [event]
        store.close()

    def test_update_rejects_inverted_range(self, tmp_path):
        """Test that an inverted range is refused."""
        store = TripStore(tmp_path / "SavedTrips.json")
        trip = store.add_trip(_new_trip())

        with pytest.raises(ValueError):
            store.update_trip_details(trip.id, end_date=date(2025, 12, 1))
        assert trip.end_date == date(2026, 1, 3)
        store.close()

    def test_update_rejects_unknown_fields(self, tmp_path):
        """Test that only editable fields can change."""
        store = TripStore(tmp_path / "SavedTrips.json")
        trip = store.add_trip(_new_trip())

        with pytest.raises(ValueError):
            store.update_trip_details(trip.id, days=[])
        store.close()

    def test_update_rejects_null_fields(self, tmp_path):
        """Test that a null name is refused and the trip keeps its values."""
        store = TripStore(tmp_path / "SavedTrips.json")
        trip = store.add_trip(_new_trip())

        with pytest.raises(ValueError):
            store.update_trip_details(trip.id, name=None)
        with pytest.raises(ValueError):
            store.update_trip_details(trip.id, show_parked_ideas=None)

        assert trip.name == "Lisbon"
        assert trip.show_parked_ideas is False
        store.close()

    def test_update_missing_trip(self, tmp_path):
        """Test updating an unknown trip."""
        store = TripStore(tmp_path / "SavedTrips.json")
        assert store.update_trip_details(uuid4(), name="x") is None

    def test_delete_trip(self, tmp_path):
        """Test deleting a trip twice."""
        store = TripStore(tmp_path / "SavedTrips.json")
        trip = store.add_trip(_new_trip())

        assert store.delete_trip(trip.id) is True
        assert store.delete_trip(trip.id) is False
        store.close()

    def test_moves_are_persisted(self, tmp_path):
        """Test that an applied move is written to disk."""
        path = tmp_path / "SavedTrips.json"
        store = TripStore(path)
        trip = store.add_trip(_new_trip())
        event = EventItem(title="Castle")
        store.add_item(trip, event, trip.days[0].id)

        result = store.move_right(trip, ItemKind.ACTIVITY, event.id, trip.days[0].id)
        store.flush()

        assert result == PlacementResult.APPLIED
        saved = json.loads(path.read_bytes())
        assert saved[0]["days"][1]["events"][0]["id"] == str(event.id)
        store.close()

    def test_toggle_checklist_entry(self, tmp_path):
        """Test toggling and setting a checklist entry."""
        store = TripStore(tmp_path / "SavedTrips.json")
        trip = store.add_trip(_new_trip())
        entry = ChecklistEntry(text="Passport")
        checklist = ChecklistItem(title="Packing", entries=[entry])
        store.add_item(trip, checklist, trip.days[0].id)

        assert store.set_checklist_entry_done(trip, checklist.id, entry.id).is_done is True
        assert store.set_checklist_entry_done(trip, checklist.id, entry.id).is_done is False
        assert store.set_checklist_entry_done(trip, checklist.id, entry.id, done=True).is_done is True
        assert store.set_checklist_entry_done(trip, checklist.id, uuid4()) is None
        store.close()


class TestTrackerStore:
    """Test the tracker store."""

    def test_toggle_and_reload(self, tmp_path):
        """Test that toggles survive a reload."""
        path = tmp_path / "SavedTrackers.json"
        store = TrackerStore(path)
        store.load()

        assert store.toggle_visited("PT", TrackerType.COUNTRIES) is True
        assert store.toggle_visited("US", TrackerType.COUNTRIES) is True
        assert store.toggle_visited("US", TrackerType.COUNTRIES) is False
        store.flush()

        reloaded = TrackerStore(path)
        reloaded.load()

        assert reloaded.is_visited("PT", TrackerType.COUNTRIES)
        assert not reloaded.is_visited("US", TrackerType.COUNTRIES)
        assert json.loads(path.read_bytes()) == {"countries": ["PT"]}
        store.close()

    def test_unknown_ids_are_pruned(self, tmp_path):
        """Test that ids outside the reference lists are dropped."""
        path = tmp_path / "SavedTrackers.json"
        path.write_text(json.dumps({"countries": ["PT", "XX"], "states": ["NY"]}))

        store = TrackerStore(path)
        store.load()

        assert store.state.ids_for(TrackerType.COUNTRIES) == {"PT"}
        assert store.visited_count(TrackerType.STATES) == 1

    def test_malformed_file_resets(self, tmp_path):
        """Test that an unreadable tracker file resets the state."""
        path = tmp_path / "SavedTrackers.json"
        path.write_text("{not json")

        store = TrackerStore(path)
        store.load()

        assert store.visited_count(TrackerType.COUNTRIES) == 0

    def test_legacy_wrapper_without_a_mapping_resets(self, tmp_path):
        """Test that an older wrapper holding a list resets the state."""
        path = tmp_path / "SavedTrackers.json"
        path.write_text(json.dumps({"visitedIDsByTracker": ["PT"]}))

        store = TrackerStore(path)
        store.load()

        assert store.visited_count(TrackerType.COUNTRIES) == 0

    def test_progress_and_summaries(self, tmp_path):
        """Test progress values and tracker cards."""
        store = TrackerStore(tmp_path / "SavedTrackers.json")
        store.toggle_visited("EU", TrackerType.CONTINENTS)

        assert store.total_count(TrackerType.CONTINENTS) == 7
        assert store.progress(TrackerType.CONTINENTS) == pytest.approx(1 / 7)

        summaries = {s["tracker"]: s for s in store.summaries()}
        assert set(summaries) == {t.value for t in TrackerType}
        assert summaries["continents"]["visited_count"] == 1
        assert summaries["states"]["total_count"] == 50
        store.close()
