import pytest

from trip_planner.models import TransportMode
from trip_planner.routing.matrix import build_distance_matrix, travel_hours, unique_segments


def test_one_segment_per_consecutive_pair(make_route):
    cat, ids = make_route(0, 500, 650, 660)
    matrix = build_distance_matrix(ids, cat)

    assert len(matrix.segments) == 3
    assert [(s.from_id, s.to_id) for s in matrix.segments] == [("s0", "s1"), ("s1", "s2"), ("s2", "s3")]
    assert [round(s.distance_km, 6) for s in matrix.segments] == [500, 150, 10]
    assert matrix.total_distance_km == pytest.approx(660)


@pytest.mark.parametrize("offsets", [(), (0,)])
def test_fewer_than_two_destinations_gives_no_segments(make_route, offsets):
    cat, ids = make_route(*offsets)
    matrix = build_distance_matrix(ids, cat)
    assert matrix.segments == []
    assert matrix.total_distance_km == 0
    assert matrix.total_travel_hours(TransportMode.CAR) == 0


def test_travel_time_formula_per_mode(make_route):
    cat, ids = make_route(0, 500)
    seg = build_distance_matrix(ids, cat).segments[0]

    assert seg.travel_hours(TransportMode.BUS) == pytest.approx(500 / 50 * 1.2)
    assert seg.travel_hours(TransportMode.TRAIN) == pytest.approx(500 / 80 * 1.1)
    assert seg.travel_hours(TransportMode.FLIGHT) == pytest.approx(500 / 500 * 1.5)
    assert seg.travel_hours(TransportMode.CAR) == pytest.approx(500 / 60 * 1.3)
    assert set(seg.travel_times) == set(TransportMode)


def test_flight_fastest_bus_slowest():
    for km in (1, 42, 300, 2500):
        flight = travel_hours(km, TransportMode.FLIGHT)
        train = travel_hours(km, TransportMode.TRAIN)
        bus = travel_hours(km, TransportMode.BUS)
        assert flight <= train <= bus


def test_travel_hours_accepts_mode_strings():
    assert travel_hours(120, "car") == pytest.approx(2.6)


def test_unknown_ids_are_skipped_and_reported(make_route):
    cat, _ = make_route(0, 500)
    matrix = build_distance_matrix(["s0", "nowhere", "s1", "ghost"], cat)

    assert [d.id for d in matrix.destinations] == ["s0", "s1"]
    assert [(s.from_id, s.to_id) for s in matrix.segments] == [("s0", "s1")]
    assert matrix.skipped_ids == ["nowhere", "ghost"]


def test_unique_segments_drops_return_legs(make_route):
    cat, _ = make_route(0, 500, 650)
    matrix = build_distance_matrix(["s0", "s1", "s0", "s2"], cat)

    assert len(matrix.segments) == 3
    assert [(s.from_id, s.to_id) for s in unique_segments(matrix.segments)] == [("s0", "s1"), ("s0", "s2")]
