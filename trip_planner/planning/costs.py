"""Rough trip cost: hotel nights by tier plus per-destination transport fares."""

from trip_planner.config import HOTEL_RATES_PER_PERSON, TRANSPORT_FARES_PER_PERSON
from trip_planner.models import DistanceMatrix, HotelTier, TransportMode, TripCost


def estimate_trip_cost(
    matrix: DistanceMatrix,
    mode: TransportMode,
    hotel_tier: HotelTier = HotelTier.STANDARD,
    number_of_days: int = 1,
    number_of_people: int = 1,
) -> TripCost:
    """Estimate in INR.

    hotels    = tier rate x people x days, for every destination
    transport = fare x people x destinations
    """
    mode = TransportMode(mode)
    hotel_tier = HotelTier(hotel_tier)
    stops = len(matrix.destinations)

    hotels = HOTEL_RATES_PER_PERSON[hotel_tier.value] * number_of_people * number_of_days * stops
    transport = TRANSPORT_FARES_PER_PERSON[mode.value] * number_of_people * stops

    return TripCost(
        hotel_tier=hotel_tier,
        transport=mode,
        number_of_days=number_of_days,
        number_of_people=number_of_people,
        hotels_cost=hotels,
        transport_cost=transport,
    )


def format_price(amount: int) -> str:
    """Indian digit grouping, e.g. 1234567 -> "₹12,34,567"."""
    sign = "-" if amount < 0 else ""
    digits = str(abs(int(round(amount))))
    if len(digits) <= 3:
        return f"{sign}₹{digits}"
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return f"{sign}₹{','.join(groups)},{tail}"
