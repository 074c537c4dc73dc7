"""Orchestrates the full planning run: resolve → matrix → recommend → check → itinerary → cost."""

import random
import sys
from datetime import date
from typing import Iterable, Optional

from trip_planner.catalogue.destinations import Catalogue, load_catalogue
from trip_planner.config import TRAVEL_HOURS_PER_DAY
from trip_planner.models import HotelTier, TransportMode, TripPlan
from trip_planner.normalize.destination_resolver import resolve_destination
from trip_planner.planning.costs import estimate_trip_cost
from trip_planner.planning.feasibility import check_feasibility
from trip_planner.planning.itinerary import generate_itinerary
from trip_planner.planning.recommender import recommend_transport
from trip_planner.routing.matrix import build_distance_matrix


def plan_trip(
    destinations: Iterable[str],
    number_of_days: int,
    start_date: date,
    transport: Optional[TransportMode] = None,
    is_premium: bool = False,
    hotel_tier: HotelTier = HotelTier.STANDARD,
    number_of_people: int = 1,
    catalogue: Optional[Catalogue] = None,
    rng: Optional[random.Random] = None,
    verbose: bool = False,
) -> TripPlan:
    """Run the planning pipeline end to end.

    Args:
        destinations: Ordered destination ids or names. Names are resolved
            through the catalogue; anything unresolvable is skipped.
        number_of_days: Requested trip length.
        start_date: Date of day 1.
        transport: Mode to plan with. Defaults to the recommended mode.
        is_premium: Attach premium advantages and best-time insights.
        hotel_tier: Hotel class for the cost estimate.
        number_of_people: Travellers for the cost estimate.
        catalogue: Destination lookup. Defaults to load_catalogue().
        rng: Random source for premium insights.
        verbose: Print progress to stderr.

    Returns:
        TripPlan with matrix, recommendation, feasibility, itinerary and cost.
    """
    if catalogue is None:
        catalogue = load_catalogue()

    def log(msg):
        if verbose:
            print(msg, file=sys.stderr)

    # Step 1: Resolve names to ids (unknown text passes through to be skipped)
    raw = list(destinations)
    ids = [resolve_destination(r, catalogue) or r for r in raw]
    log(f"Planning {number_of_days} days from {start_date.isoformat()} over {len(ids)} destinations")

    # Step 2: Distance matrix
    matrix = build_distance_matrix(ids, catalogue)
    if matrix.skipped_ids:
        log(f"  WARNING: skipped unknown destinations: {', '.join(matrix.skipped_ids)}")
    log(f"  {len(matrix.segments)} legs, {matrix.total_distance_km:.0f} km total")

    # Step 3: Transport
    recommendation = recommend_transport(matrix, number_of_days, is_premium=is_premium)
    mode = TransportMode(transport) if transport else recommendation.recommended_type
    if transport:
        log(f"  Transport: {mode.value} (recommended: {recommendation.recommended_type.value})")
    else:
        log(f"  Transport: {mode.value} (recommended)")

    # Step 4: Feasibility
    feasibility = check_feasibility(matrix, mode, number_of_days)
    if feasibility.feasible:
        log(f"  Feasible: needs {feasibility.days_needed} days")
    else:
        log(f"  Not feasible: needs {feasibility.days_needed} days, {feasibility.days_short} short "
            f"({feasibility.total_travel_hours:.1f} h travel at {TRAVEL_HOURS_PER_DAY} h/day)")

    # Step 5: Itinerary
    itinerary = generate_itinerary(matrix, mode, number_of_days, start_date, is_premium=is_premium, rng=rng)
    transit = sum(1 for d in itinerary if d.is_transit_day)
    log(f"  Itinerary: {len(itinerary)} days ({transit} transit)")

    # Step 6: Cost
    cost = estimate_trip_cost(matrix, mode, hotel_tier, number_of_days, number_of_people)
    log(f"  Estimated cost: {cost.total_cost} INR")

    return TripPlan(
        matrix=matrix,
        recommendation=recommendation,
        feasibility=feasibility,
        itinerary=itinerary,
        cost=cost,
        start_date=start_date,
        is_premium=is_premium,
    )
