"""
Decides whether a point lies in the region the GCJ-02 offset model applies to
"""

__all__ = ['is_inside_region', 'is_outside_region']

from gcjshift._const import CHINA_MAX_LAT, CHINA_MAX_LNG, CHINA_MIN_LAT, CHINA_MIN_LNG
from gcjshift.coordinates import GeoPoint


def is_outside_region(point: GeoPoint) -> bool:
    """Whether the point falls outside the mainland China bounding box. Edges are inside."""
    if point.longitude < CHINA_MIN_LNG or point.longitude > CHINA_MAX_LNG:
        return True

    return point.latitude < CHINA_MIN_LAT or point.latitude > CHINA_MAX_LAT


def is_inside_region(point: GeoPoint) -> bool:
    return not is_outside_region(point)
