"""Expand a trip schedule into dated day-by-day itinerary records."""

import random
from datetime import date, datetime, timedelta
from typing import List, Optional

from trip_planner.catalogue.crowd import crowd_level_for
from trip_planner.config import RANDOM_SEED, TRANSIT_DEPARTURE_HOUR
from trip_planner.models import (
    Destination,
    DistanceMatrix,
    ItineraryDay,
    ScheduleBlock,
    TransportMode,
)
from trip_planner.planning.schedule import build_schedule

REST_STOPS = ["Refreshment halt midway", "Stretch break before arrival"]


def _travel_line(from_name: str, to_name: str, km: float, hours: float, mode: TransportMode) -> str:
    return f"Travel from {from_name} to {to_name} ({round(km)} km, ~{round(hours)} hours by {mode.value})"


def _clock(start_hour: int, hours: float) -> str:
    """HH:MM after ``hours`` from ``start_hour``:00, with a (+N) day marker past midnight."""
    minutes = start_hour * 60 + round(hours * 60)
    days_later, minutes = divmod(minutes, 24 * 60)
    stamp = f"{minutes // 60:02d}:{minutes % 60:02d}"
    return f"{stamp} (+{days_later})" if days_later else stamp


def daily_schedule(dest: Destination, day_index: int) -> List[str]:
    """Five fixed slots: breakfast, morning activity, lunch, afternoon activity, dinner.

    ``day_index`` counts days spent at this destination so consecutive days
    walk through its attractions.
    """
    place = dest.city or dest.name
    attractions = dest.attractions
    if len(attractions) >= 2:
        morning = f"Visit {attractions[(2 * day_index) % len(attractions)]}"
        afternoon = f"Explore {attractions[(2 * day_index + 1) % len(attractions)]}"
    elif attractions:
        morning = f"Visit {attractions[0]}"
        afternoon = f"Leisure time around {dest.name}"
    else:
        morning = f"Explore {dest.name}"
        afternoon = f"Leisure time around {dest.name}"

    return [
        "08:00 Breakfast at the hotel",
        f"09:30 {morning}",
        f"13:00 Lunch at a local restaurant in {place}",
        f"14:30 {afternoon}",
        f"19:30 Dinner in {place}",
    ]


def premium_insights(rng: random.Random) -> List[str]:
    """Best-time and crowd hints. Values are drawn from ``rng``."""
    hour = rng.randint(6, 10)
    crowd = rng.randint(5, 40)
    level = crowd_level_for(crowd).value.capitalize()
    return [
        f"Best time: {hour}-{hour + 1} AM",
        f"Expected crowd: {crowd}% ({level})",
    ]


def _transit_day(block: ScheduleBlock, day_number: int, dt: date, mode: TransportMode) -> ItineraryDay:
    return ItineraryDay(
        day_number=day_number,
        date=dt,
        destination_id=block.destination_id,
        destination_name=block.destination_name,
        is_transit_day=True,
        activities=[_travel_line(block.from_name, block.destination_name,
                                 block.distance_km, block.travel_hours, mode)],
        departure_time=_clock(TRANSIT_DEPARTURE_HOUR, 0),
        arrival_time=_clock(TRANSIT_DEPARTURE_HOUR, block.travel_hours),
        rest_stops=list(REST_STOPS),
        from_destination_id=block.from_id,
    )


def generate_itinerary(
    matrix: DistanceMatrix,
    mode: TransportMode,
    total_days: int,
    start_date: date,
    is_premium: bool = False,
    rng: Optional[random.Random] = None,
) -> List[ItineraryDay]:
    """Return exactly ``total_days`` dated days (or [] when there is nothing to plan).

    Pass a seeded ``rng`` to make premium insights reproducible; otherwise
    TRIP_PLANNER_SEED is used when set.
    """
    mode = TransportMode(mode)
    if isinstance(start_date, datetime):
        start_date = start_date.date()
    rng = rng or random.Random(RANDOM_SEED)

    by_id = {d.id: d for d in matrix.destinations}
    itinerary: List[ItineraryDay] = []
    day_number = 1

    for block in build_schedule(matrix, mode, total_days):
        if block.is_transit:
            dt = start_date + timedelta(days=day_number - 1)
            itinerary.append(_transit_day(block, day_number, dt, mode))
            day_number += 1
            continue

        dest = by_id[block.destination_id]
        for k in range(block.day_count):
            activities = daily_schedule(dest, k)
            if k == 0 and block.from_id:
                activities.insert(0, _travel_line(block.from_name, dest.name,
                                                  block.distance_km, block.travel_hours, mode))
            itinerary.append(ItineraryDay(
                day_number=day_number,
                date=start_date + timedelta(days=day_number - 1),
                destination_id=dest.id,
                destination_name=dest.name,
                activities=activities,
                from_destination_id=(block.from_id or None) if k == 0 else None,
                insights=premium_insights(rng) if is_premium else [],
            ))
            day_number += 1

    return itinerary
