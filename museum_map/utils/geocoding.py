# museum_map/utils/geocoding.py
import uuid
from typing import Optional
from geopy.exc import GeopyError
from geopy.geocoders import Nominatim, Photon

from museum_map.config.settings import get_settings
from museum_map.models import Point


def locate_exhibit(name: str, venue: str) -> Optional[Point]:
    """
    Converts an exhibit or landmark name into a map Point.
    Tries Nominatim first, then Photon's fuzzier search.
    """
    user_agent = get_settings().geocoder_user_agent

    # Engine 1: Strict & Precise
    geo_nom = Nominatim(user_agent=user_agent)
    # Engine 2: Fuzzy
    geo_pho = Photon(user_agent=user_agent)

    query = f"{name}, {venue}" if venue else name
    print(f"🌍 Looking up '{query}'...")

    location = None
    try:
        location = geo_nom.geocode(query, timeout=10)

        if not location:
            print(f"   ↳ Strict search failed. Trying fuzzy search for '{name}'...")
            location = geo_pho.geocode(query, timeout=10)
    except GeopyError as e:
        print(f"❌ Geocoding error for {name}: {e}")
        return None

    if not location:
        print(f"⚠️ Warning: Could not find coordinates for '{name}'.")
        return None

    return Point(
        point_id=uuid.uuid4().hex,
        label=name,
        lat=location.latitude,
        lon=location.longitude,
    )
