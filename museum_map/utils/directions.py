# museum_map/utils/directions.py
# Adapter classes for talking to external walking-directions services.

import requests
from abc import ABC, abstractmethod
from typing import Optional

from museum_map.config.settings import Settings, get_settings
from museum_map.models import Point, WalkingPath


class DirectionsProvider(ABC):
    """
    Abstract Base Class for every directions service.
    The tour only ever needs one thing from it: a walking path between two points.
    """
    @abstractmethod
    def get_walking_path(self, origin: Point, destination: Point) -> Optional[WalkingPath]:
        """Returns the walking path, or None when no route could be found."""
        pass


class OsrmWalkingProvider(DirectionsProvider):
    """The adapter for an OSRM server running a walking profile."""
    ROUTE_URL = "{base_url}/route/v1/{profile}/{coords}"

    def __init__(self, settings: Settings = None):
        self.settings = settings or get_settings()

    def get_walking_path(self, origin: Point, destination: Point) -> Optional[WalkingPath]:
        # OSRM requires coordinates in Longitude,Latitude format
        coords = f"{origin.lon},{origin.lat};{destination.lon},{destination.lat}"
        url = self.ROUTE_URL.format(
            base_url=self.settings.osrm_base_url,
            profile=self.settings.osrm_profile,
            coords=coords,
        )
        params = {"overview": "full", "geometries": "geojson"}

        try:
            response = requests.get(url, params=params, timeout=self.settings.directions_timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            print(f"❌ Request to OSRM failed for '{origin.label}' ➔ '{destination.label}': {e}")
            return None
        except ValueError:
            print(f"❌ OSRM returned a non-JSON response for '{origin.label}' ➔ '{destination.label}'.")
            return None

        if data.get("code") != "Ok" or not data.get("routes"):
            print(f"⚠️ OSRM API Error: {data.get('message', data.get('code'))}")
            return None

        try:
            route = data["routes"][0]
            # GeoJSON geometry is [lon, lat]; the rest of the app uses (lat, lon)
            coordinates = [(lat, lon) for lon, lat in route["geometry"]["coordinates"]]
            return WalkingPath(
                coordinates=coordinates,
                distance_m=float(route.get("distance", 0.0)),
                duration_s=float(route.get("duration", 0.0)),
            )
        except (KeyError, IndexError, TypeError, ValueError):
            print(f"❌ Could not parse the OSRM route for '{origin.label}' ➔ '{destination.label}'.")
            return None
