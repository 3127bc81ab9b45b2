# museum_map/tour/resolver.py
"""
Resolves tour legs into walking paths concurrently.

Every leg is looked up on its own worker thread. Workers never touch the
segment collection: they push a SegmentResult onto a queue, and the owner
applies those results when it calls collect() or wait(). Each submit() starts
a new generation, so results that arrive for a previous selection are dropped.
"""

import queue
import time
from concurrent.futures import Future, ThreadPoolExecutor
from functools import partial
from typing import List, Optional, Sequence, Tuple

from museum_map.errors import SegmentResolutionFailure
from museum_map.models import Coordinate, PathSegment, Point, SegmentResult, SegmentStatus
from museum_map.utils.directions import DirectionsProvider


class RouteResolver:
    def __init__(self, provider: DirectionsProvider, max_workers: int = 4):
        self.provider = provider
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="route-segment")
        self._completed: "queue.Queue[SegmentResult]" = queue.Queue()
        self.generation = 0
        self.segments: List[PathSegment] = []

    # --- Owner side ---

    def submit(self, requests: Sequence[Tuple[Point, Point]]) -> int:
        """Replaces the current segments with pending ones and starts every lookup."""
        self.generation += 1
        generation = self.generation
        self.segments = [PathSegment(origin=o, destination=d) for o, d in requests]

        for index, (origin, destination) in enumerate(requests):
            future = self._executor.submit(self.provider.get_walking_path, origin, destination)
            future.add_done_callback(partial(self._on_done, generation, index, origin.label, destination.label))

        if requests:
            print(f"🗺️ Requested {len(requests)} walking segment(s) (generation {generation}).")
        return generation

    def collect(self) -> List[SegmentResult]:
        """Applies every result that has arrived so far. Returns the ones applied."""
        applied = []
        while True:
            try:
                result = self._completed.get_nowait()
            except queue.Empty:
                break
            if self._apply(result):
                applied.append(result)
        return applied

    def wait(self, timeout: Optional[float] = None) -> List[SegmentResult]:
        """Collects until no segment is pending or the timeout expires."""
        deadline = None if timeout is None else time.monotonic() + timeout
        applied = self.collect()

        while self.pending:
            remaining = None if deadline is None else deadline - time.monotonic()
            if remaining is not None and remaining <= 0:
                break
            try:
                result = self._completed.get(timeout=remaining)
            except queue.Empty:
                break
            if self._apply(result):
                applied.append(result)
        return applied

    @property
    def pending(self) -> int:
        return sum(1 for s in self.segments if s.status is SegmentStatus.PENDING)

    def rendered_polylines(self) -> List[List[Coordinate]]:
        """Polylines of the resolved segments, in tour order. Unresolved legs are skipped."""
        return [s.polyline for s in self.segments if s.status is SegmentStatus.RESOLVED]

    def failures(self) -> List[PathSegment]:
        return [s for s in self.segments if s.status is SegmentStatus.FAILED]

    def clear(self) -> None:
        """Drops the current segments; anything still in flight becomes stale."""
        self.generation += 1
        self.segments = []

    def shutdown(self, wait: bool = False) -> None:
        """Stops accepting lookups. In-flight ones are left to finish, not cancelled."""
        self._executor.shutdown(wait=wait)

    def _apply(self, result: SegmentResult) -> bool:
        if result.generation != self.generation:
            return False
        segment = self.segments[result.index]

        if result.ok:
            segment.status = SegmentStatus.RESOLVED
            segment.polyline = result.path.coordinates
            segment.distance_m = result.path.distance_m
            segment.duration_s = result.path.duration_s
        else:
            segment.status = SegmentStatus.FAILED
            segment.error = result.error
            print(f"⚠️ Segment {result.index + 1} unresolved: {result.error}")
        return True

    # --- Worker side ---

    def _on_done(self, generation: int, index: int, origin: str, destination: str, future: Future) -> None:
        try:
            path = future.result()
        except Exception as e:
            failure = SegmentResolutionFailure(origin, destination, str(e))
            self._completed.put(SegmentResult(generation, index, error=failure))
            return

        if path is None or not path.coordinates:
            failure = SegmentResolutionFailure(origin, destination)
            self._completed.put(SegmentResult(generation, index, error=failure))
        else:
            self._completed.put(SegmentResult(generation, index, path=path))
