# museum_map/utils/routing.py
import math
from typing import Callable, List, Sequence
from geopy.distance import great_circle

from museum_map.models import Point

DistanceFn = Callable[[Point, Point], float]

# Candidates whose distances are within TIE_REL_TOL of each other (or TIE_EPSILON
# apart, for distances near zero) count as a tie
TIE_REL_TOL = 1e-9
TIE_EPSILON = 1e-9


def great_circle_distance(a: Point, b: Point) -> float:
    """Great-circle distance between two points, in meters."""
    if a.coordinate == b.coordinate:
        return 0.0
    return great_circle(a.coordinate, b.coordinate).meters


def euclidean_distance(a: Point, b: Point) -> float:
    """
    Straight-line distance in raw coordinate units.
    Used for indoor floor plans where lat/lon are really x/y.
    """
    return math.hypot(a.lat - b.lat, a.lon - b.lon)


def is_tie(first: float, second: float) -> bool:
    return math.isclose(first, second, rel_tol=TIE_REL_TOL, abs_tol=TIE_EPSILON)


def solve_nearest_neighbor(places: Sequence[Point], distance: DistanceFn = great_circle_distance) -> List[Point]:
    """
    The Greedy Nearest-Neighbor Algorithm.
    Starts at the first place and walks to whichever unvisited point is closest,
    so the visitor doesn't zigzag across the building.
    """
    if len(places) < 2:
        return list(places)

    n = len(places)
    visited = [False] * n
    optimized_route = []

    current_index = 0
    visited[current_index] = True
    optimized_route.append(places[current_index])

    # Find the nearest unvisited neighbor until all are visited
    for _ in range(n - 1):
        nearest_dist = float('inf')
        nearest_index = -1

        for j in range(n):
            if visited[j]:
                continue
            dist = distance(places[current_index], places[j])

            # Strictly closer only: tied distances keep the earlier candidate
            if nearest_index == -1 or (dist < nearest_dist and not is_tie(dist, nearest_dist)):
                nearest_dist = dist
                nearest_index = j

        visited[nearest_index] = True
        optimized_route.append(places[nearest_index])
        current_index = nearest_index # Move to the new place

    return optimized_route


def route_length(order: Sequence[Point], distance: DistanceFn = great_circle_distance) -> float:
    """Total straight-line length of a visiting order."""
    return sum(distance(order[i], order[i + 1]) for i in range(len(order) - 1))
