"""Great-circle distance between coordinates (Haversine)."""

import math

from trip_planner.config import EARTH_RADIUS_KM
from trip_planner.models import Coordinate, Destination


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Distance in km between two lat/lng points given in degrees.

    Non-numeric input is not trapped: NaN coordinates yield NaN.
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = math.radians(b.latitude - a.latitude)
    d_lng = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    # Rounding can push h a hair past 1 for antipodal points
    h = min(h, 1.0)
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def distance_between(a: Destination, b: Destination) -> float:
    return haversine_km(a.coordinates, b.coordinates)
