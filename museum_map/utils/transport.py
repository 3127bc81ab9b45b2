# museum_map/utils/transport.py

# Avg walking speed: 12 mins per km
WALK_MINUTES_PER_KM = 12


def estimate_walk(distance_meters: float) -> str:
    """
    Turns a leg's distance into a short walking instruction.
    distance_meters: The distance from the directions provider, or straight-line.
    """
    if distance_meters <= 0:
        return ""

    km = distance_meters / 1000.0
    mins = max(1, round(km * WALK_MINUTES_PER_KM))
    return f"🚶 Walk ({km:.1f} km, ~{mins} mins)"
