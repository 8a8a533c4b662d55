"""Distance calculations on WGS84 locations."""

import math

from .entities import Location

EARTH_RADIUS_M = 6371000


def haversine_distance(a: Location, b: Location) -> float:
    """Calculate great-circle distance between two locations in meters"""
    phi1 = math.radians(a.latitude)
    phi2 = math.radians(b.latitude)
    delta_phi = math.radians(b.latitude - a.latitude)
    delta_lambda = math.radians(b.longitude - a.longitude)

    h = math.sin(delta_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_M * c


def polyline_length(locations: list[Location]) -> float:
    """Sum of segment lengths along a polyline in meters"""
    return sum(
        haversine_distance(locations[i], locations[i + 1])
        for i in range(len(locations) - 1)
    )
