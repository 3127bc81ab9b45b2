# museum_map/models.py
# Defines the standardized, internal data structures for the walking tour.

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

Coordinate = Tuple[float, float]


@dataclass
class Point:
    """A pinned exhibit or section on the museum map."""
    point_id: str
    label: str = field(default="", compare=False)
    lat: float = field(default=0.0, compare=False)
    lon: float = field(default=0.0, compare=False)
    selected: bool = field(default=False, compare=False)

    def __hash__(self):
        return hash(self.point_id)

    @property
    def coordinate(self) -> Coordinate:
        return (self.lat, self.lon)


class TourState(Enum):
    EMPTY = "empty"
    PARTIAL = "partial"
    READY = "ready"


class SegmentStatus(Enum):
    PENDING = "pending"
    RESOLVED = "resolved"
    FAILED = "failed"


@dataclass
class WalkingPath:
    """A standardized representation of a provider's walking route."""
    coordinates: List[Coordinate]
    distance_m: float = 0.0
    duration_s: float = 0.0


@dataclass
class PathSegment:
    """One leg of the tour: the request pair and, once resolved, its polyline."""
    origin: Point
    destination: Point
    status: SegmentStatus = SegmentStatus.PENDING
    polyline: List[Coordinate] = field(default_factory=list)
    distance_m: float = 0.0
    duration_s: float = 0.0
    error: Optional[Exception] = None


@dataclass
class SegmentResult:
    """Completion event for a single segment lookup."""
    generation: int
    index: int
    path: Optional[WalkingPath] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.path is not None and self.error is None
