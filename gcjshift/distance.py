"""
Distance helpers for gauging offsets in meters
"""

__all__ = ['haversine_distance', 'offset_meters']

import math

from gcjshift._const import EARTH_RADIUS_METERS
from gcjshift.coordinates import GeoPoint
from gcjshift.transform import forward


def haversine_distance(point1: GeoPoint, point2: GeoPoint) -> float:
    """Calculate distance in meters using the Haversine formula (spherical earth)."""
    lon1, lat1 = math.radians(point1.longitude), math.radians(point1.latitude)
    lon2, lat2 = math.radians(point2.longitude), math.radians(point2.latitude)

    dlon = lon2 - lon1
    dlat = lat2 - lat1

    a = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_METERS * c


def offset_meters(point: GeoPoint) -> float:
    """How far GCJ-02 displaces a WGS-84 point, in meters. Zero outside China."""
    return haversine_distance(point, forward(point))
