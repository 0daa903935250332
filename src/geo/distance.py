from __future__ import annotations

import math

from telegram.models import Location

# spherical approximation; accuracy is fine at city scale
EARTH_RADIUS_METERS = 6_378_100.0


def _haversin(theta: float) -> float:
    return math.sin(theta / 2) ** 2


def distance_meters(a: Location, b: Location) -> float:
    """Great-circle distance in meters between two points given in degrees."""
    lat1 = math.radians(a.latitude)
    lon1 = math.radians(a.longitude)
    lat2 = math.radians(b.latitude)
    lon2 = math.radians(b.longitude)

    h = _haversin(lat2 - lat1) + math.cos(lat1) * math.cos(lat2) * _haversin(lon2 - lon1)
    return 2 * EARTH_RADIUS_METERS * math.asin(math.sqrt(min(h, 1.0)))


def within_radius(a: Location, b: Location, radius_meters: float) -> bool:
    return distance_meters(a, b) < radius_meters
