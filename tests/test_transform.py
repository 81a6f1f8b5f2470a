import logging

import pytest

from gcjshift import GeoPoint, forward, inverse, inverse_with_status
from gcjshift import transform
from gcjshift.distance import haversine_distance
from gcjshift.transform import transform_lat, transform_lng
import gcjshift.utils.logging

from tests.functions import CITIES, assert_points_equal


def test_transform_series_at_origin():
    # At the model origin only the constant terms remain
    assert transform_lat(0., 0.) == -100.
    assert transform_lng(0., 0.) == 300.


def test_forward_reference_values():
    # Published WGS-84 -> GCJ-02 test vectors
    assert_points_equal(
        forward(GeoPoint(31.1774276, 121.5272106)),
        GeoPoint(31.17530398364597, 121.531541859215),
        abs_tol=1e-8
    )
    assert_points_equal(
        forward(GeoPoint(22.543847, 113.912316)),
        GeoPoint(22.540796131694766, 113.9171764808363),
        abs_tol=1e-8
    )


def test_forward_tiananmen():
    gcj = forward(GeoPoint(39.90923, 116.39742))
    assert_points_equal(gcj, GeoPoint(39.9106335046, 116.4036636244), abs_tol=1e-7)
    assert haversine_distance(gcj, GeoPoint(39.91063, 116.40366)) < 2.


def test_forward_outside_region_is_identity():
    for point in (
        GeoPoint(35.6762, 139.6503),
        GeoPoint(51.5074, -0.1278),
        GeoPoint(-33.8688, 151.2093),
        GeoPoint(30., 72.0039),
        GeoPoint(55.8272, 100.),
        GeoPoint(200., 500.),
    ):
        assert forward(point) is point


def test_forward_on_region_edges():
    for point in (
        GeoPoint(30., 72.004),
        GeoPoint(30., 137.8347),
        GeoPoint(0.8293, 100.),
        GeoPoint(55.8271, 100.),
    ):
        assert forward(point) != point


def test_forward_deterministic():
    for _, point in CITIES:
        assert forward(point) == forward(point)
        assert inverse(point) == inverse(point)


def test_forward_does_not_validate():
    # Nonsense in, defined nonsense out
    result = forward(GeoPoint(0.9, 200.))
    assert result == GeoPoint(0.9, 200.)

    result = forward(GeoPoint(1.0, 72.5))
    assert isinstance(result.latitude, float)


def test_inverse_round_trip_cities():
    for _, point in CITIES:
        assert_points_equal(inverse(forward(point)), point, abs_tol=1e-6)


def test_inverse_round_trip_grid():
    lat = 1.5
    while lat <= 55.5:
        lng = 72.5
        while lng <= 137.5:
            point = GeoPoint(lat, lng)
            assert_points_equal(inverse(forward(point)), point, abs_tol=1e-6)
            lng += 2.3
        lat += 1.7


def test_inverse_converges_in_first_phase():
    for _, point in CITIES:
        result = inverse_with_status(forward(point))
        assert result.converged
        assert 1 <= result.iterations <= 30
        assert result.point == inverse(forward(point))


def test_inverse_falls_back_to_additive_phase(monkeypatch):
    # Shanghai needs three steps; two are not enough for the first phase alone
    monkeypatch.setattr(transform, 'INVERSE_MAX_ITERATIONS', 2)
    wgs = GeoPoint(31.1774276, 121.5272106)

    result = inverse_with_status(forward(wgs))
    assert result.converged
    assert result.iterations == 3
    assert_points_equal(result.point, wgs, abs_tol=1e-6)


def test_inverse_best_effort(monkeypatch, caplog):
    monkeypatch.setattr(transform, 'INVERSE_MAX_ITERATIONS', 1)
    monkeypatch.setattr(gcjshift.utils.logging, '_WARNINGS', set())
    gcj = forward(GeoPoint(31.1774276, 121.5272106))

    result = inverse_with_status(gcj)
    assert not result.converged
    assert result.iterations == 2
    assert 'did not converge' in caplog.text

    # Still a usable estimate, and still no exception
    assert_points_equal(result.point, GeoPoint(31.1774276, 121.5272106), abs_tol=1e-4)
    assert inverse(gcj) == result.point
    assert caplog.text.count('did not converge') == 1


def test_inverse_zero_budget(monkeypatch):
    monkeypatch.setattr(transform, 'INVERSE_MAX_ITERATIONS', 0)
    point = GeoPoint(31.175, 121.53)
    assert inverse_with_status(point) == (point, False, 0)


def test_inverse_debug_logging(monkeypatch, caplog):
    monkeypatch.setattr(transform, 'INVERSE_MAX_ITERATIONS', 2)
    caplog.set_level(logging.DEBUG, logger='gcjshift')

    inverse(forward(GeoPoint(31.1774276, 121.5272106)))
    assert 'trying additive phase' in caplog.text


def test_inverse_outside_region():
    # Forward is the identity here, so the first step already settles
    point = GeoPoint(51.5074, -0.1278)
    assert inverse_with_status(point) == (point, True, 1)


@pytest.mark.parametrize('name,point', CITIES)
def test_offset_magnitude(name, point):
    # GCJ-02 shifts points by a few hundred meters across China
    assert 50. < haversine_distance(point, forward(point)) < 1000.
