"""
Configuration management for the trip planner.
Settings come from environment variables or a local .env file.
"""
from pydantic_settings import BaseSettings
from pathlib import Path


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Storage
    data_dir: Path = Path.home() / ".trip_planner"
    trips_filename: str = "SavedTrips.json"
    trackers_filename: str = "SavedTrackers.json"
    seed_sample_data: bool = False
    
    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = True
    log_level: str = "INFO"
    
    # New day placeholders
    default_weather_icon: str = "cloud.sun.fill"
    default_temperature_f: int = 72
    
    # Location search (OpenStreetMap Nominatim)
    geocoder_base_url: str = "https://nominatim.openstreetmap.org/search"
    geocoder_user_agent: str = "TripPlanner/1.0"
    geocoder_timeout: float = 10.0
    geocoder_result_limit: int = 8
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "TRIP_PLANNER_"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_trips_path() -> Path:
    """Path of the persisted trip list."""
    return Path(settings.data_dir) / settings.trips_filename


def get_trackers_path() -> Path:
    """Path of the persisted tracker visited-state."""
    return Path(settings.data_dir) / settings.trackers_filename
