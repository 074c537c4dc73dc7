"""Output formatters: CSV, JSON, and human-readable trip plan."""

import csv
import json
from datetime import date
from pathlib import Path
from typing import List

from trip_planner.models import (
    DistanceSegment,
    FeasibilityResult,
    ItineraryDay,
    TransportMode,
    TransportRecommendation,
    TripCost,
    TripPlan,
)
from trip_planner.planning.costs import format_price
from trip_planner.routing.matrix import unique_segments


def _date_str(d) -> str:
    if d is None:
        return "?"
    if isinstance(d, date):
        return d.isoformat()
    return str(d)


def format_time(hours: float) -> str:
    """1.75 -> "1h 45m", 0.5 -> "30m", 3.0 -> "3h"."""
    if hours < 0:
        return f"-{format_time(-hours)}"
    full_hours = int(hours)
    minutes = round((hours - full_hours) * 60)
    if minutes == 60:
        full_hours, minutes = full_hours + 1, 0
    if full_hours == 0:
        return f"{minutes}m"
    if minutes == 0:
        return f"{full_hours}h"
    return f"{full_hours}h {minutes}m"


# ---------------------------------------------------------------------------
# Human-readable plan
# ---------------------------------------------------------------------------

def format_distances(segments: List[DistanceSegment], mode: TransportMode = None) -> List[str]:
    lines = []
    for seg in unique_segments(segments):
        if mode is not None:
            times = format_time(seg.travel_hours(mode))
        else:
            times = "  ".join(f"{m.value}: {format_time(seg.travel_hours(m))}" for m in TransportMode)
        lines.append(f"  {seg.from_name} → {seg.to_name}  |  {round(seg.distance_km)} km  |  {times}")
    return lines


def format_feasibility(result: FeasibilityResult) -> List[str]:
    if result.feasible:
        return [
            "  Trip plan is feasible!",
            f"  Needs {result.days_needed} days, you have {result.requested_days}.",
        ]
    short = result.days_short or 0
    return [
        "  Trip needs more days",
        f"  Requires at least {result.days_needed} days "
        f"({short} more {'day' if short == 1 else 'days'} needed).",
    ]


def format_recommendation(rec: TransportRecommendation) -> List[str]:
    lines = [
        f"  Recommended: {rec.recommended_type.value}   Alternative: {rec.alternative_type.value}",
        f"  {rec.reasoning}",
        f"  Total distance: {round(rec.total_distance_km)} km   "
        f"Travel time: {format_time(rec.total_travel_time_hours)}   "
        f"Sightseeing: {format_time(rec.time_for_sightseeing)}",
    ]
    if not rec.is_realistic:
        lines.append("  ⚠ Trip may be too ambitious: consider more days or fewer destinations")
    for adv in rec.premium_advantages or []:
        lines.append(f"  ✨ {adv}")
    return lines


def format_cost(cost: TripCost) -> List[str]:
    return [
        f"  Hotels ({cost.hotel_tier.value}): {format_price(cost.hotels_cost)}",
        f"  Transport ({cost.transport.value}): {format_price(cost.transport_cost)}",
        f"  Total for {cost.number_of_people} traveller(s): {format_price(cost.total_cost)}",
    ]


def format_day(day: ItineraryDay) -> List[str]:
    when = day.date.strftime("%a, %b %d, %Y")
    if day.is_transit_day:
        lines = [f"\n  Day {day.day_number}  {when}  |  ✈ Transit to {day.destination_name}"]
        lines.append(f"    Depart {day.departure_time}  →  Arrive {day.arrival_time}")
        for act in day.activities:
            lines.append(f"    {act}")
        for stop in day.rest_stops:
            lines.append(f"    · {stop}")
        return lines

    lines = [f"\n  Day {day.day_number}  {when}  |  {day.destination_name}"]
    for act in day.activities:
        lines.append(f"    {act}")
    for hint in day.insights:
        lines.append(f"    ★ {hint}")
    return lines


def format_plan(plan: TripPlan) -> str:
    """Produce a human-readable day-by-day trip plan."""
    lines = []
    lines.append("=" * 72)
    lines.append("  TRIP PLAN — Day-by-Day Itinerary")
    lines.append("=" * 72)

    mode = plan.feasibility.transport

    if plan.matrix.segments:
        lines.append(f"\n--- Distances {'─' * 58}")
        lines.extend(format_distances(plan.matrix.segments, mode))

    lines.append(f"\n--- Transport {'─' * 58}")
    lines.extend(format_recommendation(plan.recommendation))

    lines.append(f"\n--- Feasibility ({mode.value}) {'─' * 46}")
    lines.extend(format_feasibility(plan.feasibility))

    if plan.matrix.skipped_ids:
        lines.append(f"  ⚠ Unknown destinations skipped: {', '.join(plan.matrix.skipped_ids)}")

    lines.append(f"\n--- Itinerary {'─' * 58}")
    for day in plan.itinerary:
        lines.extend(format_day(day))
    if not plan.itinerary:
        lines.append("  Select destinations and dates to generate an itinerary.")

    lines.append(f"\n--- Estimated cost {'─' * 53}")
    lines.extend(format_cost(plan.cost))

    transit = sum(1 for d in plan.itinerary if d.is_transit_day)
    lines.append(f"\n{'=' * 72}")
    lines.append(f"  Total: {len(plan.itinerary)} days, {transit} transit days, "
                 f"{len(plan.matrix.destinations)} destinations")
    lines.append("=" * 72)

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# CSV output
# ---------------------------------------------------------------------------

def itinerary_to_csv(itinerary: List[ItineraryDay], path: Path):
    """Write itinerary days to CSV."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow([
            "day", "date", "destination_id", "destination", "transit",
            "departure", "arrival", "activities", "insights",
        ])
        for d in itinerary:
            writer.writerow([
                d.day_number, _date_str(d.date), d.destination_id, d.destination_name,
                "yes" if d.is_transit_day else "no",
                d.departure_time or "", d.arrival_time or "",
                "; ".join(d.activities), "; ".join(d.insights),
            ])


def segments_to_csv(segments: List[DistanceSegment], path: Path):
    """Write the distance matrix to CSV, one row per leg."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["from_id", "to_id", "from", "to", "distance_km"]
                        + [f"{m.value}_hours" for m in TransportMode])
        for s in segments:
            writer.writerow(
                [s.from_id, s.to_id, s.from_name, s.to_name, f"{s.distance_km:.1f}"]
                + [f"{s.travel_hours(m):.2f}" for m in TransportMode]
            )


# ---------------------------------------------------------------------------
# JSON output
# ---------------------------------------------------------------------------

def _segment_to_dict(s: DistanceSegment) -> dict:
    return {
        "from_id": s.from_id,
        "to_id": s.to_id,
        "from_name": s.from_name,
        "to_name": s.to_name,
        "distance_km": round(s.distance_km, 2),
        "travel_times": {m.value: round(h, 2) for m, h in s.travel_times.items()},
    }


def _day_to_dict(d: ItineraryDay) -> dict:
    data = {
        "day": d.day_number,
        "date": _date_str(d.date),
        "destination_id": d.destination_id,
        "destination_name": d.destination_name,
        "is_transit_day": d.is_transit_day,
        "activities": d.activities,
    }
    if d.is_transit_day:
        data["departure_time"] = d.departure_time
        data["arrival_time"] = d.arrival_time
        data["rest_stops"] = d.rest_stops
    if d.from_destination_id:
        data["from_destination_id"] = d.from_destination_id
    if d.insights:
        data["insights"] = d.insights
    return data


def plan_to_dict(plan: TripPlan) -> dict:
    feas = plan.feasibility
    rec = plan.recommendation
    return {
        "start_date": _date_str(plan.start_date),
        "premium": plan.is_premium,
        "destinations": [d.id for d in plan.matrix.destinations],
        "skipped_ids": plan.matrix.skipped_ids,
        "segments": [_segment_to_dict(s) for s in plan.matrix.segments],
        "recommendation": {
            "recommended_type": rec.recommended_type.value,
            "alternative_type": rec.alternative_type.value,
            "reasoning": rec.reasoning,
            "total_distance_km": round(rec.total_distance_km, 2),
            "total_travel_time_hours": round(rec.total_travel_time_hours, 2),
            "time_for_sightseeing": round(rec.time_for_sightseeing, 2),
            "is_realistic": rec.is_realistic,
            "premium_advantages": rec.premium_advantages,
        },
        "feasibility": {
            "transport": feas.transport.value,
            "feasible": feas.feasible,
            "days_needed": feas.days_needed,
            "requested_days": feas.requested_days,
            "days_short": feas.days_short,
            "total_distance_km": round(feas.total_distance_km, 2),
            "total_travel_hours": round(feas.total_travel_hours, 2),
        },
        "itinerary": [_day_to_dict(d) for d in plan.itinerary],
        "cost": {
            "hotel_tier": plan.cost.hotel_tier.value,
            "transport": plan.cost.transport.value,
            "hotels_cost": plan.cost.hotels_cost,
            "transport_cost": plan.cost.transport_cost,
            "total_cost": plan.cost.total_cost,
        },
    }


def to_json(plan: TripPlan, path: Path):
    """Write the full trip plan as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(plan_to_dict(plan), indent=2, ensure_ascii=False), encoding="utf-8")
