import math

import pytest

from trip_planner.models import Coordinate
from trip_planner.routing.distance import distance_between, haversine_km


def test_distance_is_symmetric(catalogue):
    taj = catalogue.get("dest_001")
    jaipur = catalogue.get("dest_002")
    assert distance_between(taj, jaipur) == pytest.approx(distance_between(jaipur, taj))


def test_distance_to_self_is_zero(catalogue):
    for dest in catalogue:
        assert distance_between(dest, dest) == 0


def test_one_degree_along_equator():
    assert haversine_km(Coordinate(0, 0), Coordinate(0, 1)) == pytest.approx(111.195, abs=0.001)


def test_known_pair_agra_jaipur(catalogue):
    km = distance_between(catalogue.get("dest_001"), catalogue.get("dest_002"))
    assert km == pytest.approx(221, abs=2)


def test_antipodal_points_are_half_circumference():
    km = haversine_km(Coordinate(0, 0), Coordinate(0, 180))
    assert km == pytest.approx(math.pi * 6371, rel=1e-9)


def test_nan_propagates():
    assert math.isnan(haversine_km(Coordinate(float("nan"), 0), Coordinate(0, 0)))
