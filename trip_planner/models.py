"""Data models for the trip planning engine."""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class TransportMode(str, Enum):
    BUS = "bus"
    TRAIN = "train"
    FLIGHT = "flight"
    CAR = "car"


class HotelTier(str, Enum):
    BUDGET = "budget"
    STANDARD = "standard"
    LUXURY = "luxury"


class CrowdLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass
class Destination:
    id: str
    name: str
    coordinates: Coordinate
    attractions: list[str] = field(default_factory=list)
    city: str = ""
    state: str = ""
    description: str = ""
    entry_fee: int = 0  # adult ticket, INR
    rating: float = 0.0
    crowd_data: dict[str, int] = field(default_factory=dict)  # "HH:MM" -> crowd %
    tags: list[str] = field(default_factory=list)
    best_time_to_visit: str = ""


@dataclass
class DistanceSegment:
    """Leg between two consecutive destinations."""
    from_id: str
    to_id: str
    from_name: str
    to_name: str
    distance_km: float
    travel_times: dict[TransportMode, float] = field(default_factory=dict)

    def travel_hours(self, mode: TransportMode) -> float:
        return self.travel_times[TransportMode(mode)]


@dataclass
class DistanceMatrix:
    destinations: list[Destination] = field(default_factory=list)
    segments: list[DistanceSegment] = field(default_factory=list)
    skipped_ids: list[str] = field(default_factory=list)  # ids the catalogue could not resolve

    @property
    def total_distance_km(self) -> float:
        return sum(s.distance_km for s in self.segments)

    def total_travel_hours(self, mode: TransportMode) -> float:
        return sum(s.travel_hours(mode) for s in self.segments)


@dataclass
class SegmentBreakdown:
    from_id: str
    to_id: str
    from_name: str
    to_name: str
    distance_km: float
    travel_hours: float


@dataclass
class FeasibilityResult:
    feasible: bool
    days_needed: int
    requested_days: int
    transport: TransportMode
    days_short: Optional[int] = None
    total_distance_km: float = 0.0
    total_travel_hours: float = 0.0
    breakdown: list[SegmentBreakdown] = field(default_factory=list)


@dataclass
class DestinationBreakdown:
    destination_id: str
    days_needed: int
    travel_hours_to_next: float = 0.0
    travel_days_to_next: int = 0


@dataclass
class RequiredDaysEstimate:
    min_days_required: int
    total_distance_km: float = 0.0
    total_travel_hours: float = 0.0
    breakdown: list[DestinationBreakdown] = field(default_factory=list)


@dataclass
class TransportRecommendation:
    recommended_type: TransportMode
    alternative_type: TransportMode
    reasoning: str
    total_distance_km: float
    total_travel_time_hours: float
    time_for_sightseeing: float
    is_realistic: bool
    premium_advantages: Optional[list[str]] = None


@dataclass
class ScheduleBlock:
    """A run of consecutive days at one destination, or a single transit day."""
    destination_id: str
    destination_name: str
    day_count: int
    is_transit: bool = False
    from_id: str = ""
    from_name: str = ""
    distance_km: float = 0.0
    travel_hours: float = 0.0  # leg arriving at this destination, 0 for the first stop


@dataclass
class ItineraryDay:
    day_number: int  # 1-based
    date: date
    destination_id: str
    destination_name: str
    is_transit_day: bool = False
    activities: list[str] = field(default_factory=list)
    departure_time: Optional[str] = None
    arrival_time: Optional[str] = None
    rest_stops: list[str] = field(default_factory=list)
    from_destination_id: Optional[str] = None
    insights: list[str] = field(default_factory=list)  # premium hints, randomised


@dataclass
class TripCost:
    hotel_tier: HotelTier
    transport: TransportMode
    number_of_days: int
    number_of_people: int
    hotels_cost: int = 0
    transport_cost: int = 0

    @property
    def total_cost(self) -> int:
        return self.hotels_cost + self.transport_cost


@dataclass
class TripPlan:
    matrix: DistanceMatrix
    recommendation: TransportRecommendation
    feasibility: FeasibilityResult
    itinerary: list[ItineraryDay]
    cost: TripCost
    start_date: date
    is_premium: bool = False
