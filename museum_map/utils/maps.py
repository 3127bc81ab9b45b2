# museum_map/utils/maps.py
import urllib.parse
from typing import List

from museum_map.models import Point


def _as_location(point: Point) -> str:
    return f"{point.lat},{point.lon}"


def generate_walking_directions_url(order: List[Point]) -> str:
    """
    Takes a visiting order and generates a free Google Maps walking
    directions URL, so the visitor can carry the tour on their phone.
    """
    if len(order) < 2:
        return ""

    # 1. Encode the start and end points
    origin = urllib.parse.quote_plus(_as_location(order[0]))
    destination = urllib.parse.quote_plus(_as_location(order[-1]))

    # 2. Encode the points in between as waypoints (separated by '|')
    if len(order) > 2:
        waypoints_str = "|".join(_as_location(p) for p in order[1:-1])
        waypoints = urllib.parse.quote_plus(waypoints_str)
    else:
        waypoints = ""

    # 3. Construct the final URL
    base_url = "https://www.google.com/maps/dir/?api=1"
    full_url = f"{base_url}&origin={origin}&destination={destination}&travelmode=walking"

    if waypoints:
        full_url += f"&waypoints={waypoints}"

    return full_url
