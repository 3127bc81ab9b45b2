# museum_map/config/settings.py
import os
from dataclasses import dataclass
from dotenv import load_dotenv

# Load the .env file
load_dotenv()

DEFAULT_OSRM_BASE_URL = "https://routing.openstreetmap.de/routed-foot"


@dataclass(frozen=True)
class Settings:
    osrm_base_url: str = DEFAULT_OSRM_BASE_URL
    osrm_profile: str = "foot"
    directions_timeout: float = 10.0
    resolver_max_workers: int = 4
    # San Francisco, the default region the map opens on
    map_center_lat: float = 37.7749
    map_center_lon: float = -122.4194
    geocoder_user_agent: str = "museum_map_walking_tour"


def _read_number(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {raw!r}. Check your .env file.")


def get_settings() -> Settings:
    """Helper to read the current settings from the environment"""
    max_workers = _read_number("RESOLVER_MAX_WORKERS", Settings.resolver_max_workers, int)
    if max_workers < 1:
        raise ValueError("RESOLVER_MAX_WORKERS must be at least 1.")

    return Settings(
        osrm_base_url=os.environ.get("OSRM_BASE_URL", DEFAULT_OSRM_BASE_URL).rstrip("/"),
        osrm_profile=os.environ.get("OSRM_PROFILE", Settings.osrm_profile),
        directions_timeout=_read_number("DIRECTIONS_TIMEOUT", Settings.directions_timeout, float),
        resolver_max_workers=max_workers,
        map_center_lat=_read_number("MAP_CENTER_LAT", Settings.map_center_lat, float),
        map_center_lon=_read_number("MAP_CENTER_LON", Settings.map_center_lon, float),
        geocoder_user_agent=os.environ.get("GEOCODER_USER_AGENT", Settings.geocoder_user_agent),
    )
