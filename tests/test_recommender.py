import pytest

from trip_planner.models import TransportMode
from trip_planner.planning.recommender import alternative_for, choose_transport, recommend_transport
from trip_planner.routing.matrix import build_distance_matrix


@pytest.mark.parametrize("km,days,expected", [
    (1200, 5, TransportMode.FLIGHT),
    (400, 5, TransportMode.TRAIN),
    (150, 9, TransportMode.CAR),
    (150, 5, TransportMode.BUS),
    # distance rules win over trip length
    (1200, 30, TransportMode.FLIGHT),
    (400, 30, TransportMode.TRAIN),
])
def test_decision_table(km, days, expected):
    assert choose_transport(km, days) == expected


@pytest.mark.parametrize("km,days,expected", [
    (1000, 5, TransportMode.TRAIN),
    (1000.01, 5, TransportMode.FLIGHT),
    (300, 5, TransportMode.BUS),
    (300, 9, TransportMode.CAR),
    (300.01, 5, TransportMode.TRAIN),
    (150, 7, TransportMode.BUS),
    (150, 8, TransportMode.CAR),
])
def test_boundaries_are_strict(km, days, expected):
    assert choose_transport(km, days) == expected


def test_alternatives():
    assert alternative_for(TransportMode.FLIGHT) == TransportMode.TRAIN
    assert alternative_for(TransportMode.TRAIN) == TransportMode.CAR
    assert alternative_for(TransportMode.BUS) == TransportMode.CAR
    assert alternative_for(TransportMode.CAR) == TransportMode.CAR


def test_long_route_recommends_flight(make_route):
    cat, ids = make_route(0, 1200)
    rec = recommend_transport(build_distance_matrix(ids, cat), 5)

    assert rec.recommended_type == TransportMode.FLIGHT
    assert rec.alternative_type == TransportMode.TRAIN
    assert rec.total_distance_km == pytest.approx(1200)
    assert rec.total_travel_time_hours == pytest.approx(1200 / 500 * 1.5)
    assert rec.time_for_sightseeing == pytest.approx(5 * 8 - 3.6)
    assert rec.is_realistic
    assert rec.premium_advantages is None
    assert "1200 km" in rec.reasoning


def test_premium_gets_advantages(make_route):
    cat, ids = make_route(0, 150)
    rec = recommend_transport(build_distance_matrix(ids, cat), 5, is_premium=True)

    assert rec.recommended_type == TransportMode.BUS
    assert rec.premium_advantages
    assert all(isinstance(a, str) for a in rec.premium_advantages)


def test_premium_flag_does_not_change_choice(make_route):
    cat, ids = make_route(0, 150)
    matrix = build_distance_matrix(ids, cat)
    assert recommend_transport(matrix, 9).recommended_type == recommend_transport(matrix, 9, True).recommended_type


def test_unrealistic_when_travel_eats_all_time(make_route):
    cat, ids = make_route(0, 999)
    rec = recommend_transport(build_distance_matrix(ids, cat), 1)

    assert rec.recommended_type == TransportMode.TRAIN
    assert rec.total_travel_time_hours == pytest.approx(999 / 80 * 1.1)
    assert rec.time_for_sightseeing < 0
    assert not rec.is_realistic


def test_single_destination_goes_by_bus(make_route):
    cat, ids = make_route(0)
    rec = recommend_transport(build_distance_matrix(ids, cat), 3)

    assert rec.recommended_type == TransportMode.BUS
    assert rec.total_travel_time_hours == 0
    assert rec.time_for_sightseeing == 24
