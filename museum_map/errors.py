# museum_map/errors.py


class SegmentResolutionFailure(Exception):
    """A single tour leg could not be resolved into a walking path."""

    def __init__(self, origin_label: str, destination_label: str, reason: str = "No walking route found"):
        self.origin_label = origin_label
        self.destination_label = destination_label
        self.reason = reason
        super().__init__(f"{origin_label} ➔ {destination_label}: {reason}")
