#!/usr/bin/env python3
"""CLI entry point for the trip planner.

Usage:
    python plan_trip.py --destinations "Taj Mahal,Jaipur" --days 5 --start 2026-11-02

Options:
    --destinations LIST  Comma-separated destination ids or names, in visiting order
    --days N             Trip length in days
    --start DATE         Start date (YYYY-MM-DD, DD/MM/YYYY, "tomorrow", ...)
    --transport MODE     bus, train, flight or car (default: recommended)
    --premium            Include premium advantages and best-time insights
    --format FMT         Output format: text, csv, json, all (default: text)
    --output-dir DIR     Directory for csv/json files (default: output/)
    --list               List the destinations catalogue and exit
    --dry-run            Show the summary without writing files
"""

import argparse
import random
import sys
from pathlib import Path

from trip_planner.catalogue.crowd import average_crowd_level, best_time_to_visit
from trip_planner.catalogue.destinations import load_catalogue
from trip_planner.config import OUTPUT_DIR, RANDOM_SEED
from trip_planner.models import HotelTier, TransportMode
from trip_planner.normalize.date_parser import parse_date
from trip_planner.normalize.destination_resolver import resolve_destinations
from trip_planner.output import format_plan, itinerary_to_csv, segments_to_csv, to_json
from trip_planner.pipeline import plan_trip


def _list_catalogue(catalogue):
    for dest in catalogue:
        level = average_crowd_level(dest.crowd_data)
        print(
            f"{dest.id}  {dest.name:<28} {dest.state:<20} "
            f"crowd: {level.value if level else '?':<6} best: {best_time_to_visit(dest.crowd_data)}"
        )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Plan a multi-destination trip: distances, feasibility and a day-by-day itinerary.",
    )
    parser.add_argument(
        "--destinations",
        help="Comma-separated destination ids or names, in visiting order",
    )
    parser.add_argument("--days", type=int, help="Trip length in days")
    parser.add_argument("--start", default="tomorrow", help="Start date (default: tomorrow)")
    parser.add_argument(
        "--transport",
        choices=[m.value for m in TransportMode],
        help="Transport mode (default: recommended)",
    )
    parser.add_argument("--premium", action="store_true", help="Premium insights and advantages")
    parser.add_argument(
        "--hotel-tier",
        choices=[t.value for t in HotelTier],
        default=HotelTier.STANDARD.value,
        help="Hotel class for the cost estimate",
    )
    parser.add_argument("--people", type=int, default=1, help="Number of travellers")
    parser.add_argument("--catalogue", help="JSON destinations file (default: built-in)")
    parser.add_argument("--seed", type=int, default=RANDOM_SEED, help="Seed for premium insights")
    parser.add_argument(
        "--format",
        choices=["text", "csv", "json", "all"],
        default="text",
        help="Output format (text, csv, json, all)",
    )
    parser.add_argument("--output-dir", default=str(OUTPUT_DIR), help="Output directory")
    parser.add_argument("--list", action="store_true", help="List destinations and exit")
    parser.add_argument("--dry-run", action="store_true", help="Show summary only, don't write files")
    args = parser.parse_args(argv)

    try:
        catalogue = load_catalogue(args.catalogue)
    except (OSError, ValueError) as e:
        parser.error(f"could not load catalogue: {e}")

    if args.list:
        _list_catalogue(catalogue)
        return 0

    if not args.destinations or args.days is None:
        parser.error("--destinations and --days are required")
    if args.days < 1:
        parser.error("--days must be at least 1")
    if args.people < 1:
        parser.error("--people must be at least 1")

    start = parse_date(args.start)
    if start is None:
        parser.error(f"could not parse start date: {args.start!r}")

    names = [n.strip() for n in args.destinations.split(",") if n.strip()]
    ids, unresolved = resolve_destinations(names, catalogue)
    if not ids:
        parser.error(f"no known destinations in: {args.destinations!r}")
    if unresolved:
        print(f"Skipping unknown destinations: {', '.join(unresolved)}", file=sys.stderr)

    plan = plan_trip(
        ids,
        args.days,
        start,
        transport=args.transport,
        is_premium=args.premium,
        hotel_tier=HotelTier(args.hotel_tier),
        number_of_people=args.people,
        catalogue=catalogue,
        rng=random.Random(args.seed),
        verbose=True,
    )

    if args.dry_run:
        print(f"\nDry run complete. {len(plan.itinerary)} days, "
              f"feasible: {'yes' if plan.feasibility.feasible else 'no'}.")
        return 0

    output_dir = Path(args.output_dir)

    if args.format in ("text", "all"):
        print(format_plan(plan))

    if args.format in ("csv", "all"):
        days_path = output_dir / "itinerary.csv"
        legs_path = output_dir / "distances.csv"
        itinerary_to_csv(plan.itinerary, days_path)
        segments_to_csv(plan.matrix.segments, legs_path)
        print(f"CSV written to: {days_path}, {legs_path}")

    if args.format in ("json", "all"):
        json_path = output_dir / "trip_plan.json"
        to_json(plan, json_path)
        print(f"JSON written to: {json_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
