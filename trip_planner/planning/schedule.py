"""Decide up front how many days each destination and each transit leg gets."""

from typing import List

from trip_planner.config import SAME_DAY_TRAVEL_LIMIT_HOURS
from trip_planner.models import DistanceMatrix, ScheduleBlock, TransportMode


def needs_transit_day(travel_hours: float) -> bool:
    return travel_hours > SAME_DAY_TRAVEL_LIMIT_HOURS


def allot_stay_days(stay_days: int, destination_count: int) -> List[int]:
    """Spread sightseeing days evenly; the earliest stops take the remainder."""
    base, extra = divmod(stay_days, destination_count)
    return [base + (1 if i < extra else 0) for i in range(destination_count)]


def build_schedule(
    matrix: DistanceMatrix,
    mode: TransportMode,
    total_days: int,
) -> List[ScheduleBlock]:
    """Lay the trip out as stay and transit blocks whose day counts sum to total_days.

    Legs longer than the same-day limit get a one-day transit block. When
    the remaining days cannot give every destination at least one day, the
    route is followed in order until the days run out and later stops are
    dropped. A stop repeated back to back is one continuous stay.
    """
    destinations = matrix.destinations
    if not destinations or total_days <= 0:
        return []

    mode = TransportMode(mode)
    legs = matrix.segments
    transit = [needs_transit_day(seg.travel_hours(mode)) for seg in legs]
    stay_days = total_days - sum(transit)

    if stay_days >= len(destinations):
        allotment = allot_stay_days(stay_days, len(destinations))
    else:
        allotment = [1] * len(destinations)

    blocks: List[ScheduleBlock] = []
    remaining = total_days

    for i, dest in enumerate(destinations):
        arrival = legs[i - 1] if i > 0 else None

        if arrival is not None and transit[i - 1]:
            if remaining == 0:
                break
            blocks.append(ScheduleBlock(
                destination_id=dest.id,
                destination_name=dest.name,
                day_count=1,
                is_transit=True,
                from_id=arrival.from_id,
                from_name=arrival.from_name,
                distance_km=arrival.distance_km,
                travel_hours=arrival.travel_hours(mode),
            ))
            remaining -= 1
            arrival = None  # already travelled, the stay starts fresh

        if remaining == 0:
            break

        days = min(allotment[i], remaining)
        if (arrival is not None and arrival.from_id == dest.id
                and blocks and not blocks[-1].is_transit and blocks[-1].destination_id == dest.id):
            # repeated stop: extend the current stay
            blocks[-1].day_count += days
            remaining -= days
            continue

        block = ScheduleBlock(destination_id=dest.id, destination_name=dest.name, day_count=days)
        if arrival is not None:
            block.from_id = arrival.from_id
            block.from_name = arrival.from_name
            block.distance_km = arrival.distance_km
            block.travel_hours = arrival.travel_hours(mode)
        blocks.append(block)
        remaining -= days

    return blocks
