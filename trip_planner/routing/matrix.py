"""Distance matrix: consecutive legs with per-mode travel-time estimates."""

from typing import Iterable, List

from trip_planner.config import TRANSPORT_PROFILES
from trip_planner.models import DistanceMatrix, DistanceSegment, TransportMode
from trip_planner.routing.distance import distance_between


def travel_hours(distance_km: float, mode: TransportMode) -> float:
    """hours = distance / average speed * buffer factor."""
    speed, buffer = TRANSPORT_PROFILES[TransportMode(mode).value]
    return distance_km / speed * buffer


def build_distance_matrix(destination_ids: Iterable[str], catalogue) -> DistanceMatrix:
    """Build one segment per consecutive pair of resolvable destinations.

    Ids the catalogue does not know are left out of the route and listed in
    ``skipped_ids`` so the caller can warn about them.
    """
    destinations, skipped = catalogue.resolve(destination_ids)

    segments: List[DistanceSegment] = []
    for origin, dest in zip(destinations, destinations[1:]):
        km = distance_between(origin, dest)
        segments.append(DistanceSegment(
            from_id=origin.id,
            to_id=dest.id,
            from_name=origin.name,
            to_name=dest.name,
            distance_km=km,
            travel_times={mode: travel_hours(km, mode) for mode in TransportMode},
        ))

    return DistanceMatrix(destinations=destinations, segments=segments, skipped_ids=skipped)


def unique_segments(segments: List[DistanceSegment]) -> List[DistanceSegment]:
    """Drop legs already listed in either direction (A->B hides a later B->A)."""
    seen = set()
    unique = []
    for seg in segments:
        key = frozenset((seg.from_id, seg.to_id))
        if key in seen:
            continue
        seen.add(key)
        unique.append(seg)
    return unique
