from gcjshift import GeoPoint
from gcjshift.distance import haversine_distance, offset_meters


def test_haversine_distance():
    # Sourced from haversine package
    actual_dist_meters = 157.25359
    calc_dist = haversine_distance(GeoPoint(0.0, 0.0), GeoPoint(0.001, 0.001))
    assert round(actual_dist_meters) == round(calc_dist)

    actual_dist_meters = 157_249.59847
    calc_dist = haversine_distance(GeoPoint(0.0, 0.0), GeoPoint(1.0, 1.0))
    assert abs(round(actual_dist_meters) - round(calc_dist)) < 2

    # Antimeridian test
    actual_dist_meters = 222390
    calc_dist = haversine_distance(GeoPoint(0., 179.), GeoPoint(0., -179.))
    assert round(calc_dist) == actual_dist_meters


def test_offset_meters():
    # Tiananmen shifts by roughly half a kilometer
    assert 500. < offset_meters(GeoPoint(39.90923, 116.39742)) < 600.

    # London is untouched
    assert offset_meters(GeoPoint(51.5074, -0.1278)) == 0.
