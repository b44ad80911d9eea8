"""Local-first trip planner: trips, day-by-day itineraries and visited-places trackers."""
