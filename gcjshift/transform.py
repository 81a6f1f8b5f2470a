"""
WGS-84 <-> GCJ-02 conversion.

The forward direction is the empirical offset model circulated since the GCJ-02
obfuscation first leaked; there is no official algorithm. The model has no
closed-form inverse, so GCJ-02 -> WGS-84 is found by fixed-point iteration
against the forward model, which converges quickly because the offset is a
small, slowly varying perturbation of the identity.
"""

__all__ = [
    'InverseResult', 'forward', 'inverse', 'inverse_with_status',
    'transform_lat', 'transform_lng',
]

import math
from typing import NamedTuple, Tuple

from gcjshift._const import (
    GCJ_A, GCJ_EE, INVERSE_MAX_ITERATIONS, INVERSE_THRESHOLD,
    MODEL_ORIGIN_LAT, MODEL_ORIGIN_LNG,
)
from gcjshift.boundary import is_outside_region
from gcjshift.coordinates import GeoPoint
from gcjshift.utils.logging import LOGGER, warn_once


class InverseResult(NamedTuple):
    """Outcome of a single GCJ-02 -> WGS-84 computation"""
    point: GeoPoint
    converged: bool
    iterations: int


def transform_lat(x: float, y: float) -> float:
    """
    Raw latitude offset of the model, in meters of arc.

    Args:
        x: longitude - 105
        y: latitude - 35
    """
    ret = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * math.pi) + 20.0 * math.sin(2.0 * x * math.pi)) * 2.0 / 3.0
    ret += (20.0 * math.sin(y * math.pi) + 40.0 * math.sin(y / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (160.0 * math.sin(y / 12.0 * math.pi) + 320 * math.sin(y * math.pi / 30.0)) * 2.0 / 3.0
    return ret


def transform_lng(x: float, y: float) -> float:
    """
    Raw longitude offset of the model, in meters of arc.

    Args:
        x: longitude - 105
        y: latitude - 35
    """
    ret = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * math.pi) + 20.0 * math.sin(2.0 * x * math.pi)) * 2.0 / 3.0
    ret += (20.0 * math.sin(x * math.pi) + 40.0 * math.sin(x / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (150.0 * math.sin(x / 12.0 * math.pi) + 300.0 * math.sin(x / 30.0 * math.pi)) * 2.0 / 3.0
    return ret


def _offset_degrees(latitude: float, longitude: float) -> Tuple[float, float]:
    """Model offset at a point, rescaled from meters to degrees"""
    d_lat = transform_lat(longitude - MODEL_ORIGIN_LNG, latitude - MODEL_ORIGIN_LAT)
    d_lng = transform_lng(longitude - MODEL_ORIGIN_LNG, latitude - MODEL_ORIGIN_LAT)

    rad_lat = latitude / 180.0 * math.pi
    magic = math.sin(rad_lat)
    magic = 1 - GCJ_EE * magic * magic
    sqrt_magic = math.sqrt(magic)

    # Meridional and prime vertical radii of curvature of the Krasovsky ellipsoid
    d_lat = (d_lat * 180.0) / ((GCJ_A * (1 - GCJ_EE)) / (magic * sqrt_magic) * math.pi)
    d_lng = (d_lng * 180.0) / (GCJ_A / sqrt_magic * math.cos(rad_lat) * math.pi)
    return d_lat, d_lng


def forward(point: GeoPoint) -> GeoPoint:
    """
    Converts a WGS-84 point to GCJ-02.

    Points outside mainland China are returned unchanged. No validation is
    performed; geographically meaningless input produces a meaningless (but
    deterministic) result.

    Args:
        point:
            A WGS-84 GeoPoint

    Returns:
        GeoPoint in GCJ-02
    """
    if is_outside_region(point):
        return point

    d_lat, d_lng = _offset_degrees(point.latitude, point.longitude)
    return GeoPoint(point.latitude + d_lat, point.longitude + d_lng)


def _subtractive_phase(target: GeoPoint, current: GeoPoint) -> Tuple[GeoPoint, bool, int]:
    for iteration in range(1, INVERSE_MAX_ITERATIONS + 1):
        delta = forward(current) - target
        nxt = current - delta
        if nxt.max_abs_diff(current) < INVERSE_THRESHOLD:
            return nxt, True, iteration

        current = nxt

    return current, False, INVERSE_MAX_ITERATIONS


def _additive_phase(target: GeoPoint, current: GeoPoint) -> Tuple[GeoPoint, bool, int]:
    for iteration in range(1, INVERSE_MAX_ITERATIONS + 1):
        nxt = current + (target - forward(current))
        if nxt.max_abs_diff(current) < INVERSE_THRESHOLD:
            return nxt, True, iteration

        current = nxt

    # Best effort: the last estimate stands even though it never settled
    return current, False, INVERSE_MAX_ITERATIONS


def inverse_with_status(point: GeoPoint) -> InverseResult:
    """
    Converts a GCJ-02 point to WGS-84, reporting how the search went.

    The GCJ-02 input doubles as the initial WGS-84 guess. A subtractive
    correction is tried first; if it has not settled within its iteration
    budget, an additive correction resumes from wherever it stopped. The
    second phase accepts its final estimate regardless.

    No region check is made on the input: callers should not pass points
    already known to lie outside China.

    Args:
        point:
            A GCJ-02 GeoPoint

    Returns:
        InverseResult of (WGS-84 GeoPoint, whether the 1e-6 degree threshold
        was met, total forward evaluations used)
    """
    estimate, converged, used = _subtractive_phase(point, point)
    if converged:
        return InverseResult(estimate, True, used)

    LOGGER.debug('Subtractive phase did not converge for %r; trying additive phase', point)
    estimate, converged, extra = _additive_phase(point, estimate)
    if not converged:
        LOGGER.debug('GCJ-02 -> WGS-84 did not converge for %r; returning %r', point, estimate)
        warn_once(
            'GCJ-02 -> WGS-84 conversion did not converge for at least one point; '
            'best-effort results returned (this warning will not repeat)'
        )

    return InverseResult(estimate, converged, used + extra)


def inverse(point: GeoPoint) -> GeoPoint:
    """
    Converts a GCJ-02 point to WGS-84, to within ~1e-6 degrees (1-2m).

    Never fails; see inverse_with_status() for convergence details.

    Args:
        point:
            A GCJ-02 GeoPoint

    Returns:
        GeoPoint in WGS-84
    """
    return inverse_with_status(point).point
