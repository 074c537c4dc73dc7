import math

import pytest

from trip_planner.catalogue.destinations import Catalogue, builtin_catalogue
from trip_planner.config import EARTH_RADIUS_KM
from trip_planner.models import Coordinate, Destination


def _on_equator(dest_id: str, km: float) -> Destination:
    """A stop ``km`` east of (0, 0) along the equator, so leg lengths are exact."""
    return Destination(
        id=dest_id,
        name=f"Stop {dest_id}",
        coordinates=Coordinate(latitude=0.0, longitude=math.degrees(km / EARTH_RADIUS_KM)),
        attractions=[f"{dest_id} fort", f"{dest_id} museum", f"{dest_id} market"],
        city=f"Town {dest_id}",
    )


@pytest.fixture
def make_route():
    """make_route(0, 500, 650) -> (catalogue, ["s0", "s1", "s2"]) with stops at those km offsets."""
    def _make(*offsets_km):
        dests = [_on_equator(f"s{i}", km) for i, km in enumerate(offsets_km)]
        return Catalogue(dests), [d.id for d in dests]
    return _make


@pytest.fixture
def catalogue():
    return builtin_catalogue()
