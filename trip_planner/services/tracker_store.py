"""
Tracker Store - visited state for the curated trackers.
"""
import logging
from pathlib import Path
from typing import Optional

from ..config import get_trackers_path
from ..models.tracker import TrackerType, TrackerVisitedState
from ..models.tracker_data import tracker_items, valid_ids
from .persistence import JsonFileWriter, read_json_file

logger = logging.getLogger(__name__)


class TrackerStore:
    """Owns the visited ids per tracker and persists every toggle."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else get_trackers_path()
        self.state = TrackerVisitedState()
        self._writer = JsonFileWriter(self.path, name="trackers")

    def load(self) -> None:
        """Read the visited state, dropping ids the reference lists no longer have."""
        data = read_json_file(self.path)
        if data is None:
            self.state = TrackerVisitedState()
            return

        try:
            self.state = TrackerVisitedState.from_json(data)
        except ValueError as e:
            logger.error(f"Failed to load trackers from {self.path}: {e}")
            self.state = TrackerVisitedState()
            return

        self._prune_invalid_ids()

    def _prune_invalid_ids(self) -> None:
        for tracker in TrackerType:
            current = self.state.ids_for(tracker)
            kept = current & valid_ids(tracker)
            if len(kept) != len(current):
                logger.info(f"Pruned {len(current) - len(kept)} unknown id(s) from {tracker.value}")
            self.state.visited[tracker] = set(kept)

    def save(self) -> None:
        self._writer.submit(self.state.to_json())

    def flush(self) -> None:
        self._writer.flush()

    def close(self) -> None:
        self._writer.close()

    def is_visited(self, item_id: str, tracker: TrackerType) -> bool:
        return item_id in self.state.ids_for(tracker)

    def toggle_visited(self, item_id: str, tracker: TrackerType) -> bool:
        """Flip an item's visited flag and return the new value."""
        visited = set(self.state.ids_for(tracker))
        if item_id in visited:
            visited.remove(item_id)
            now_visited = False
        else:
            visited.add(item_id)
            now_visited = True

        self.state.visited[tracker] = visited
        self.save()
        return now_visited

    def visited_count(self, tracker: TrackerType) -> int:
        return len(self.state.ids_for(tracker) & valid_ids(tracker))

    def total_count(self, tracker: TrackerType) -> int:
        return len(tracker_items(tracker))

    def progress(self, tracker: TrackerType) -> float:
        total = self.total_count(tracker)
        if total == 0:
            return 0.0
        return self.visited_count(tracker) / total

    def summaries(self) -> list[dict]:
        """Card data for every tracker."""
        return [
            {
                "tracker": tracker.value,
                "title": tracker.title,
                "subtitle": tracker.subtitle,
                "icon": tracker.icon,
                "visited_count": self.visited_count(tracker),
                "total_count": self.total_count(tracker),
                "progress": round(self.progress(tracker), 4),
            }
            for tracker in TrackerType
        ]


# Global store instance
tracker_store: Optional[TrackerStore] = None


def get_tracker_store() -> TrackerStore:
    """Get or create the global tracker store."""
    global tracker_store
    if tracker_store is None:
        tracker_store = TrackerStore()
        tracker_store.load()
    return tracker_store
