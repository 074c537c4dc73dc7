"""Pick a default transport mode from route length and trip duration."""

from trip_planner.config import (
    CAR_MIN_DAYS,
    FLIGHT_MIN_DISTANCE_KM,
    SIGHTSEEING_HOURS_PER_DAY,
    TRAIN_MIN_DISTANCE_KM,
)
from trip_planner.models import DistanceMatrix, TransportMode, TransportRecommendation

PREMIUM_ADVANTAGES = {
    TransportMode.FLIGHT: [
        "Priority boarding and extra baggage allowance",
        "Access to premium airport lounges",
        "Optimised connections to save up to 15% travel time",
    ],
    TransportMode.TRAIN: [
        "Guaranteed upper-class seat reservations",
        "Lounge access at major stations",
        "Real-time delay and platform alerts",
    ],
    TransportMode.CAR: [
        "Chauffeur-driven premium vehicle",
        "Route optimised around traffic and crowds",
        "Flexible stops at scenic viewpoints",
    ],
    TransportMode.BUS: [
        "Reserved recliner seats on luxury coaches",
        "Real-time traffic avoidance suggestions",
        "Complimentary snacks and charging points",
    ],
}


def choose_transport(total_distance_km: float, number_of_days: int) -> TransportMode:
    """First matching rule wins: long routes fly, mid-range take the train,
    long trips drive, everything else goes by bus."""
    if total_distance_km > FLIGHT_MIN_DISTANCE_KM:
        return TransportMode.FLIGHT
    if total_distance_km > TRAIN_MIN_DISTANCE_KM:
        return TransportMode.TRAIN
    if number_of_days > CAR_MIN_DAYS:
        return TransportMode.CAR
    return TransportMode.BUS


def alternative_for(mode: TransportMode) -> TransportMode:
    return TransportMode.TRAIN if mode == TransportMode.FLIGHT else TransportMode.CAR


def _reasoning(mode: TransportMode, total_km: float, days: int) -> str:
    if mode == TransportMode.FLIGHT:
        return f"Flying is the fastest way to cover {total_km:.0f} km between your destinations."
    if mode == TransportMode.TRAIN:
        return f"Trains balance speed and comfort for a {total_km:.0f} km route."
    if mode == TransportMode.CAR:
        return f"A car gives you flexibility over a {days}-day trip with short distances."
    return "Buses are the most economical choice for short distances."


def recommend_transport(
    matrix: DistanceMatrix,
    number_of_days: int,
    is_premium: bool = False,
) -> TransportRecommendation:
    total_km = matrix.total_distance_km
    mode = choose_transport(total_km, number_of_days)
    travel_hours = matrix.total_travel_hours(mode)
    sightseeing = number_of_days * SIGHTSEEING_HOURS_PER_DAY - travel_hours

    return TransportRecommendation(
        recommended_type=mode,
        alternative_type=alternative_for(mode),
        reasoning=_reasoning(mode, total_km, number_of_days),
        total_distance_km=total_km,
        total_travel_time_hours=travel_hours,
        time_for_sightseeing=sightseeing,
        is_realistic=sightseeing > 0,
        premium_advantages=list(PREMIUM_ADVANTAGES[mode]) if is_premium else None,
    )
