import csv
import json
import random
from datetime import date

import pytest

from trip_planner.output import (
    format_plan,
    format_time,
    itinerary_to_csv,
    plan_to_dict,
    segments_to_csv,
    to_json,
)
from trip_planner.pipeline import plan_trip


@pytest.fixture
def plan(catalogue):
    return plan_trip(["Taj Mahal", "Jaipur", "Atlantis"], 5, date(2026, 11, 2), is_premium=True,
                     catalogue=catalogue, rng=random.Random(9))


@pytest.mark.parametrize("hours,expected", [
    (0, "0m"),
    (0.5, "30m"),
    (3.0, "3h"),
    (1.75, "1h 45m"),
    (2.9999, "3h"),
    (-1.5, "-1h 30m"),
])
def test_format_time(hours, expected):
    assert format_time(hours) == expected


def test_text_plan(plan):
    text = format_plan(plan)

    assert "TRIP PLAN" in text
    assert "Taj Mahal → Jaipur City Palace" in text
    assert "Transit to Jaipur City Palace" in text
    assert "Trip plan is feasible!" in text
    assert "Unknown destinations skipped: Atlantis" in text
    assert "★ Best time:" in text
    assert "₹" in text
    assert "Total: 5 days, 1 transit days, 2 destinations" in text


def test_json_output(plan, tmp_path):
    path = tmp_path / "out" / "plan.json"
    to_json(plan, path)
    data = json.loads(path.read_text(encoding="utf-8"))

    assert data == json.loads(json.dumps(plan_to_dict(plan)))
    assert data["destinations"] == ["dest_001", "dest_002"]
    assert data["skipped_ids"] == ["Atlantis"]
    assert len(data["itinerary"]) == 5
    assert data["itinerary"][0]["date"] == "2026-11-02"
    transit = [d for d in data["itinerary"] if d["is_transit_day"]]
    assert transit[0]["departure_time"] == "08:00"
    assert len(transit[0]["rest_stops"]) == 2
    assert set(data["segments"][0]["travel_times"]) == {"bus", "train", "flight", "car"}
    assert data["feasibility"]["days_short"] is None


def test_csv_output(plan, tmp_path):
    days_path = tmp_path / "itinerary.csv"
    legs_path = tmp_path / "distances.csv"
    itinerary_to_csv(plan.itinerary, days_path)
    segments_to_csv(plan.matrix.segments, legs_path)

    with open(days_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [int(r["day"]) for r in rows] == [1, 2, 3, 4, 5]
    assert sum(r["transit"] == "yes" for r in rows) == 1

    with open(legs_path, newline="", encoding="utf-8") as f:
        legs = list(csv.DictReader(f))
    assert len(legs) == 1
    assert legs[0]["from_id"] == "dest_001"
    assert float(legs[0]["flight_hours"]) < float(legs[0]["bus_hours"])
