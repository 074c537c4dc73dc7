"""Check whether a requested trip length covers travel plus sightseeing."""

import math

from trip_planner.config import SIGHTSEEING_HOURS_PER_DAY, TRAVEL_HOURS_PER_DAY
from trip_planner.models import (
    DestinationBreakdown,
    DistanceMatrix,
    FeasibilityResult,
    RequiredDaysEstimate,
    SegmentBreakdown,
    TransportMode,
)


def _ceil_days(hours: float, hours_per_day: float) -> int:
    # Round first so 16.0000000001 h still counts as exactly two days
    return math.ceil(round(hours / hours_per_day, 9))


def check_feasibility(
    matrix: DistanceMatrix,
    mode: TransportMode,
    requested_days: int,
) -> FeasibilityResult:
    """Compare requested days against travel days plus one day per destination.

    days_needed = ceil(total travel hours / 8) + number of destinations
    """
    mode = TransportMode(mode)
    total_hours = matrix.total_travel_hours(mode)
    days_needed = _ceil_days(total_hours, TRAVEL_HOURS_PER_DAY) + len(matrix.destinations)
    feasible = requested_days >= days_needed

    breakdown = [
        SegmentBreakdown(
            from_id=seg.from_id,
            to_id=seg.to_id,
            from_name=seg.from_name,
            to_name=seg.to_name,
            distance_km=seg.distance_km,
            travel_hours=seg.travel_hours(mode),
        )
        for seg in matrix.segments
    ]

    return FeasibilityResult(
        feasible=feasible,
        days_needed=days_needed,
        requested_days=requested_days,
        transport=mode,
        days_short=None if feasible else days_needed - requested_days,
        total_distance_km=matrix.total_distance_km,
        total_travel_hours=total_hours,
        breakdown=breakdown,
    )


def estimate_required_days(
    matrix: DistanceMatrix,
    mode: TransportMode,
    tourism_hours_per_destination: float = SIGHTSEEING_HOURS_PER_DAY,
    max_travel_hours_per_day: float = TRAVEL_HOURS_PER_DAY,
) -> RequiredDaysEstimate:
    """Per-destination estimate: sightseeing days plus travel days to the next stop.

    Travel days are rounded up per leg, so this is never lower than the
    pooled figure from check_feasibility for the same inputs.
    """
    mode = TransportMode(mode)
    destinations = matrix.destinations
    if not destinations:
        return RequiredDaysEstimate(min_days_required=0)

    tourism_days = _ceil_days(tourism_hours_per_destination, SIGHTSEEING_HOURS_PER_DAY)

    breakdown = []
    for i, dest in enumerate(destinations):
        hours = 0.0
        days = 0
        if i < len(matrix.segments):
            hours = matrix.segments[i].travel_hours(mode)
            days = _ceil_days(hours, max_travel_hours_per_day)
        breakdown.append(DestinationBreakdown(
            destination_id=dest.id,
            days_needed=tourism_days,
            travel_hours_to_next=hours,
            travel_days_to_next=days,
        ))

    return RequiredDaysEstimate(
        min_days_required=sum(b.days_needed + b.travel_days_to_next for b in breakdown),
        total_distance_km=matrix.total_distance_km,
        total_travel_hours=matrix.total_travel_hours(mode),
        breakdown=breakdown,
    )
