# museum_map/tour/planner.py
from dataclasses import dataclass, field
from typing import List, Tuple

from museum_map.models import Point, TourState
from museum_map.tour.builder import RouteRequest, TourBuilder
from museum_map.tour.resolver import RouteResolver
from museum_map.utils.routing import route_length
from museum_map.utils.transport import estimate_walk


@dataclass
class WalkingTour:
    order: List[Point]
    requests: List[RouteRequest] = field(default_factory=list)
    generation: int = 0
    legs: List[Tuple[str, str, str]] = field(default_factory=list)
    straight_line_m: float = 0.0

    @property
    def has_path(self) -> bool:
        return bool(self.requests)


def plan_walking_tour(builder: TourBuilder, resolver: RouteResolver) -> WalkingTour:
    """
    MASTER FUNCTION: The only function the map page needs to call.
    Orders the selected points and sends every leg off to be resolved.
    """
    order = builder.compute_order()

    if builder.state is not TourState.READY:
        # Nothing to connect; drop any legs left from a previous selection
        print("⏭️ Fewer than 2 points selected. Showing markers only.")
        resolver.clear()
        return WalkingTour(order=order, generation=resolver.generation)

    print(f"🗺️ Planning a walking tour through {len(order)} points...")
    requests = builder.build_route_requests(order)
    generation = resolver.submit(requests)

    legs = []
    for origin, destination in requests:
        # Straight-line estimate until the provider reports the real walking distance
        instruction = estimate_walk(builder.distance(origin, destination))
        legs.append((origin.label, destination.label, instruction))

    print(f"✅ Tour Ordered: {' ➔ '.join(p.label for p in order)}")
    return WalkingTour(
        order=order,
        requests=requests,
        generation=generation,
        legs=legs,
        straight_line_m=route_length(order, builder.distance),
    )
