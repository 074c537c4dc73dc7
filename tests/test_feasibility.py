import pytest

from trip_planner.models import TransportMode
from trip_planner.planning.feasibility import check_feasibility, estimate_required_days
from trip_planner.routing.matrix import build_distance_matrix


def test_two_stops_500km_by_car_need_four_days(make_route):
    cat, ids = make_route(0, 500)
    matrix = build_distance_matrix(ids, cat)

    result = check_feasibility(matrix, TransportMode.CAR, 4)

    # 500 / 60 * 1.3 = 10.83 h -> 2 travel days, plus one day per destination
    assert result.total_travel_hours == pytest.approx(10.8333, abs=1e-3)
    assert result.days_needed == 4
    assert result.feasible
    assert result.days_short is None
    assert result.transport == TransportMode.CAR


def test_short_trip_reports_shortfall(make_route):
    cat, ids = make_route(0, 500)
    result = check_feasibility(build_distance_matrix(ids, cat), "car", 3)

    assert not result.feasible
    assert result.days_needed == 4
    assert result.days_short == 1
    assert result.requested_days == 3


def test_faster_mode_needs_fewer_days(make_route):
    cat, ids = make_route(0, 500)
    result = check_feasibility(build_distance_matrix(ids, cat), TransportMode.FLIGHT, 3)

    assert result.days_needed == 3  # 1.5 h -> 1 travel day + 2
    assert result.feasible


def test_exact_multiple_of_travel_day_is_not_rounded_up(make_route):
    # two legs of 333.33 km by bus = 16 h -> exactly 2 travel days
    cat, ids = make_route(0, 1000 / 3, 2000 / 3)
    result = check_feasibility(build_distance_matrix(ids, cat), TransportMode.BUS, 10)

    assert result.total_travel_hours == pytest.approx(16)
    assert result.days_needed == 2 + 3


def test_breakdown_lists_each_leg(make_route):
    cat, ids = make_route(0, 500, 650)
    result = check_feasibility(build_distance_matrix(ids, cat), TransportMode.TRAIN, 10)

    assert [(b.from_id, b.to_id) for b in result.breakdown] == [("s0", "s1"), ("s1", "s2")]
    assert result.breakdown[1].from_name == "Stop s1"
    assert result.breakdown[1].distance_km == pytest.approx(150)
    assert result.breakdown[1].travel_hours == pytest.approx(150 / 80 * 1.1)
    assert result.total_distance_km == pytest.approx(650)


@pytest.mark.parametrize("offsets,expected", [((), 0), ((0,), 1)])
def test_degenerate_routes(make_route, offsets, expected):
    cat, ids = make_route(*offsets)
    result = check_feasibility(build_distance_matrix(ids, cat), TransportMode.BUS, 1)

    assert result.days_needed == expected
    assert result.total_travel_hours == 0
    assert result.breakdown == []
    assert result.feasible


def test_unresolved_ids_do_not_count_as_destinations(make_route):
    cat, _ = make_route(0)
    result = check_feasibility(build_distance_matrix(["s0", "missing"], cat), TransportMode.BUS, 1)
    assert result.days_needed == 1


def test_required_days_rounds_each_leg(make_route):
    cat, ids = make_route(0, 500)
    estimate = estimate_required_days(build_distance_matrix(ids, cat), TransportMode.CAR)

    assert estimate.min_days_required == 4
    first, last = estimate.breakdown
    assert first.destination_id == "s0"
    assert first.days_needed == 1
    assert first.travel_days_to_next == 2
    assert first.travel_hours_to_next == pytest.approx(10.8333, abs=1e-3)
    assert last.travel_hours_to_next == 0
    assert last.travel_days_to_next == 0


def test_required_days_with_longer_sightseeing(make_route):
    cat, ids = make_route(0, 500, 650)
    estimate = estimate_required_days(
        build_distance_matrix(ids, cat), TransportMode.FLIGHT,
        tourism_hours_per_destination=12, max_travel_hours_per_day=6,
    )
    # 2 days sightseeing each, 1 travel day per leg
    assert estimate.min_days_required == 3 * 2 + 2


def test_required_days_never_below_pooled_check(make_route):
    cat, ids = make_route(0, 200, 400, 600)
    matrix = build_distance_matrix(ids, cat)
    for mode in TransportMode:
        assert estimate_required_days(matrix, mode).min_days_required >= check_feasibility(matrix, mode, 1).days_needed


@pytest.mark.parametrize("offsets,expected", [((), 0), ((0,), 1)])
def test_required_days_degenerate(make_route, offsets, expected):
    cat, ids = make_route(*offsets)
    assert estimate_required_days(build_distance_matrix(ids, cat), "bus").min_days_required == expected


@pytest.mark.parametrize("tourism_hours,tourism_days", [(0, 0), (4, 1), (9, 2)])
def test_required_days_follow_tourism_hours(make_route, tourism_hours, tourism_days):
    cat, ids = make_route(0, 500)
    estimate = estimate_required_days(
        build_distance_matrix(ids, cat), TransportMode.CAR,
        tourism_hours_per_destination=tourism_hours,
    )

    assert [b.days_needed for b in estimate.breakdown] == [tourism_days, tourism_days]
    # 10.83 h by car -> 2 travel days on the single leg
    assert estimate.min_days_required == 2 * tourism_days + 2
