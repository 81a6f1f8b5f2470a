"""
Array versions of the WGS-84 <-> GCJ-02 conversions, for converting whole
tracks or point clouds at once.
"""

__all__ = ['forward_array', 'inverse_array', 'outside_region_mask']

from typing import Tuple

import numpy as np

from gcjshift._const import (
    CHINA_MAX_LAT, CHINA_MAX_LNG, CHINA_MIN_LAT, CHINA_MIN_LNG,
    GCJ_A, GCJ_EE, INVERSE_MAX_ITERATIONS, INVERSE_THRESHOLD,
    MODEL_ORIGIN_LAT, MODEL_ORIGIN_LNG,
)
from gcjshift.utils.logging import LOGGER, warn_once


def _as_arrays(latitudes, longitudes) -> Tuple[np.ndarray, np.ndarray]:
    lat = np.asarray(latitudes, dtype=np.float64)
    lng = np.asarray(longitudes, dtype=np.float64)
    if lat.shape != lng.shape:
        raise ValueError(
            f'Latitude and longitude arrays must share a shape; got {lat.shape} and {lng.shape}'
        )

    return lat, lng


def outside_region_mask(latitudes, longitudes) -> np.ndarray:
    """Element-wise gcjshift.boundary.is_outside_region"""
    lat, lng = _as_arrays(latitudes, longitudes)
    return (
        (lng < CHINA_MIN_LNG) | (lng > CHINA_MAX_LNG) |
        (lat < CHINA_MIN_LAT) | (lat > CHINA_MAX_LAT)
    )


def _offset_degrees(lat: np.ndarray, lng: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    x = lng - MODEL_ORIGIN_LNG
    y = lat - MODEL_ORIGIN_LAT
    pi = np.pi

    shared = (20.0 * np.sin(6.0 * x * pi) + 20.0 * np.sin(2.0 * x * pi)) * 2.0 / 3.0

    d_lat = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * np.sqrt(np.abs(x))
    d_lat += shared
    d_lat += (20.0 * np.sin(y * pi) + 40.0 * np.sin(y / 3.0 * pi)) * 2.0 / 3.0
    d_lat += (160.0 * np.sin(y / 12.0 * pi) + 320 * np.sin(y * pi / 30.0)) * 2.0 / 3.0

    d_lng = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * np.sqrt(np.abs(x))
    d_lng += shared
    d_lng += (20.0 * np.sin(x * pi) + 40.0 * np.sin(x / 3.0 * pi)) * 2.0 / 3.0
    d_lng += (150.0 * np.sin(x / 12.0 * pi) + 300.0 * np.sin(x / 30.0 * pi)) * 2.0 / 3.0

    rad_lat = lat / 180.0 * pi
    magic = 1 - GCJ_EE * np.sin(rad_lat) ** 2
    sqrt_magic = np.sqrt(magic)

    d_lat = (d_lat * 180.0) / ((GCJ_A * (1 - GCJ_EE)) / (magic * sqrt_magic) * pi)
    d_lng = (d_lng * 180.0) / (GCJ_A / sqrt_magic * np.cos(rad_lat) * pi)
    return d_lat, d_lng


def forward_array(latitudes, longitudes) -> Tuple[np.ndarray, np.ndarray]:
    """
    Converts arrays of WGS-84 latitudes and longitudes to GCJ-02.

    Elements outside mainland China are returned unchanged.

    Args:
        latitudes:
            Array-like of WGS-84 latitudes

        longitudes:
            Array-like of WGS-84 longitudes, of the same shape

    Returns:
        Tuple of (latitudes, longitudes) as new float64 arrays
    """
    lat, lng = _as_arrays(latitudes, longitudes)
    inside = ~outside_region_mask(lat, lng)

    out_lat, out_lng = lat.copy(), lng.copy()
    if inside.any():
        d_lat, d_lng = _offset_degrees(lat[inside], lng[inside])
        out_lat[inside] += d_lat
        out_lng[inside] += d_lng

    return out_lat, out_lng


def _phase(target_lat, target_lng, cur_lat, cur_lng, active, sign):
    """
    Runs one fixed-point phase in place over the active elements, returning
    the mask of elements still unconverged. sign=-1 is the subtractive
    correction, sign=1 the additive one.
    """
    for _ in range(INVERSE_MAX_ITERATIONS):
        if not active.any():
            break

        fwd_lat, fwd_lng = forward_array(cur_lat[active], cur_lng[active])
        if sign < 0:
            nxt_lat = cur_lat[active] - (fwd_lat - target_lat[active])
            nxt_lng = cur_lng[active] - (fwd_lng - target_lng[active])
        else:
            nxt_lat = cur_lat[active] + (target_lat[active] - fwd_lat)
            nxt_lng = cur_lng[active] + (target_lng[active] - fwd_lng)

        step = np.maximum(np.abs(nxt_lat - cur_lat[active]), np.abs(nxt_lng - cur_lng[active]))
        cur_lat[active] = nxt_lat
        cur_lng[active] = nxt_lng

        idx = np.flatnonzero(active)
        active[idx[step < INVERSE_THRESHOLD]] = False

    return active


def inverse_array(latitudes, longitudes) -> Tuple[np.ndarray, np.ndarray]:
    """
    Converts arrays of GCJ-02 latitudes and longitudes to WGS-84.

    Each element follows the same two-phase search as gcjshift.transform.inverse;
    elements stop moving once they converge.

    Args:
        latitudes:
            Array-like of GCJ-02 latitudes

        longitudes:
            Array-like of GCJ-02 longitudes, of the same shape

    Returns:
        Tuple of (latitudes, longitudes) as new float64 arrays
    """
    lat, lng = _as_arrays(latitudes, longitudes)
    shape = lat.shape
    lat, lng = lat.ravel(), lng.ravel()

    cur_lat, cur_lng = lat.copy(), lng.copy()
    active = np.ones(lat.shape, dtype=bool)

    active = _phase(lat, lng, cur_lat, cur_lng, active, sign=-1)
    if active.any():
        active = _phase(lat, lng, cur_lat, cur_lng, active, sign=1)

    if active.any():
        LOGGER.debug('%d of %d points did not converge', int(active.sum()), active.size)
        warn_once(
            'GCJ-02 -> WGS-84 conversion did not converge for at least one point; '
            'best-effort results returned (this warning will not repeat)'
        )

    return cur_lat.reshape(shape), cur_lng.reshape(shape)
