# museum_map/tour/builder.py
from typing import Dict, List, Optional, Tuple

from museum_map.models import Point, TourState
from museum_map.utils.routing import DistanceFn, great_circle_distance, solve_nearest_neighbor

RouteRequest = Tuple[Point, Point]


class TourBuilder:
    """
    Owns the set of selected points and turns it into a visiting order.

    The selected-set keeps insertion order: the first point added is the
    tour's starting point, and ties between equally distant candidates go to
    whichever was added first.
    """

    def __init__(self, distance: DistanceFn = great_circle_distance):
        self.distance = distance
        self._selected: Dict[str, Point] = {}
        self._order: Optional[List[Point]] = None

    # --- Selection ---

    def add_point(self, point: Point) -> None:
        if point.point_id in self._selected:
            return
        point.selected = True
        self._selected[point.point_id] = point
        self._order = None

    def remove_point(self, point: Point) -> None:
        removed = self._selected.pop(point.point_id, None)
        if removed is None:
            return
        removed.selected = False
        point.selected = False
        self._order = None

    def toggle_point(self, point: Point) -> bool:
        """Flips the point's selection and returns the new flag."""
        if point.point_id in self._selected:
            self.remove_point(point)
        else:
            self.add_point(point)
        return point.selected

    @property
    def selected_points(self) -> List[Point]:
        return list(self._selected.values())

    @property
    def state(self) -> TourState:
        count = len(self._selected)
        if count == 0:
            return TourState.EMPTY
        if count == 1:
            return TourState.PARTIAL
        return TourState.READY

    # --- Ordering ---

    def compute_order(self) -> List[Point]:
        if self._order is None:
            self._order = solve_nearest_neighbor(self.selected_points, self.distance)
        return list(self._order)

    @staticmethod
    def build_route_requests(order: List[Point]) -> List[RouteRequest]:
        return [(order[i], order[i + 1]) for i in range(len(order) - 1)]
