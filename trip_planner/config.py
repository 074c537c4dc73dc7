"""Configuration: .env loading, paths, constants."""

import os
from pathlib import Path
from dotenv import load_dotenv

# Project root = parent of trip_planner/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# --- Paths ---
CATALOGUE_PATH = os.getenv("TRIP_CATALOGUE_PATH", "")  # empty = built-in catalogue
OUTPUT_DIR = Path(os.getenv("TRIP_OUTPUT_DIR", str(PROJECT_ROOT / "output")))

# --- Randomness ---
# Seed for premium "best time" hints; unset = true randomness
_seed = os.getenv("TRIP_PLANNER_SEED", "")
RANDOM_SEED = int(_seed) if _seed.strip() else None

# --- Geography ---
EARTH_RADIUS_KM = 6371.0

# --- Transport: mode -> (average speed km/h, buffer factor) ---
TRANSPORT_PROFILES = {
    "bus": (50.0, 1.2),
    "train": (80.0, 1.1),
    "flight": (500.0, 1.5),
    "car": (60.0, 1.3),
}

# --- Feasibility ---
TRAVEL_HOURS_PER_DAY = 8  # one travel day budget
SIGHTSEEING_HOURS_PER_DAY = 8
SAME_DAY_TRAVEL_LIMIT_HOURS = 4  # longer legs get their own transit day

# --- Recommender ---
FLIGHT_MIN_DISTANCE_KM = 1000  # strictly above -> flight
TRAIN_MIN_DISTANCE_KM = 300  # strictly above -> train
CAR_MIN_DAYS = 7  # strictly above -> car

# --- Itinerary ---
TRANSIT_DEPARTURE_HOUR = 8

# --- Costs (INR) ---
HOTEL_RATES_PER_PERSON = {
    "budget": 500,
    "standard": 1000,
    "luxury": 1500,
}
TRANSPORT_FARES_PER_PERSON = {
    "bus": 300,
    "train": 400,
    "flight": 2500,
    "car": 700,
}
