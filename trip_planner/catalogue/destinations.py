"""Destinations catalogue: built-in reference data, JSON loading, lookup and search."""

import json
import random
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from trip_planner.catalogue.crowd import average_crowd_level, current_crowd_level, generate_crowd_data
from trip_planner.config import CATALOGUE_PATH
from trip_planner.models import Coordinate, CrowdLevel, Destination

# id, name, city, state, (lat, lng), entry fee, rating, best time, tags, attractions, crowd data
# Destinations without crowd data get a simulated curve seeded by their id.
_BUILTIN = [
    {
        "id": "dest_001", "name": "Taj Mahal", "city": "Agra", "state": "Uttar Pradesh",
        "coordinates": (27.1751, 78.0421), "entry_fee": 1100, "rating": 4.8,
        "best_time_to_visit": "Early Morning", "tags": ["UNESCO", "Historical", "Architecture"],
        "attractions": ["Main mausoleum", "Mughal gardens", "Taj Mahal mosque", "Mehtab Bagh sunset view"],
        "crowd_data": {"00:00": 5, "04:00": 10, "08:00": 65, "10:00": 90, "12:00": 95,
                       "14:00": 85, "16:00": 70, "18:00": 50, "20:00": 20, "22:00": 10},
        "description": "Ivory-white marble mausoleum built by Shah Jahan in memory of Mumtaz Mahal.",
    },
    {
        "id": "dest_002", "name": "Jaipur City Palace", "city": "Jaipur", "state": "Rajasthan",
        "coordinates": (26.9258, 75.8237), "entry_fee": 700, "rating": 4.5,
        "best_time_to_visit": "Morning", "tags": ["Historical", "Museum", "Architecture"],
        "attractions": ["Palace complex", "Mubarak Mahal museum", "Jantar Mantar", "Hawa Mahal"],
        "crowd_data": {"00:00": 0, "04:00": 5, "08:00": 30, "10:00": 75, "12:00": 80,
                       "14:00": 85, "16:00": 60, "18:00": 40, "20:00": 15, "22:00": 5},
        "description": "Royal residence blending Rajasthani and Mughal architecture.",
    },
    {
        "id": "dest_003", "name": "Goa Beaches", "city": "Panaji", "state": "Goa",
        "coordinates": (15.2993, 74.1240), "entry_fee": 200, "rating": 4.7,
        "best_time_to_visit": "Early Morning", "tags": ["Beach", "Nightlife", "Water Sports"],
        "attractions": ["Baga beach", "Fort Aguada", "Old Goa churches", "Anjuna flea market"],
        "crowd_data": {"00:00": 30, "04:00": 5, "08:00": 25, "10:00": 50, "12:00": 70,
                       "14:00": 75, "16:00": 80, "18:00": 60, "20:00": 65, "22:00": 50},
        "description": "Golden beaches, Portuguese heritage and nightlife.",
    },
    {
        "id": "dest_004", "name": "Varanasi Ghats", "city": "Varanasi", "state": "Uttar Pradesh",
        "coordinates": (25.3176, 83.0100), "entry_fee": 0, "rating": 4.6,
        "best_time_to_visit": "Early Morning", "tags": ["Spiritual", "Cultural", "River"],
        "attractions": ["Dashashwamedh Ghat", "Sunrise boat ride", "Kashi Vishwanath temple", "Evening aarti"],
        "crowd_data": {"00:00": 15, "04:00": 60, "08:00": 40, "10:00": 35, "12:00": 30,
                       "14:00": 25, "16:00": 35, "18:00": 85, "20:00": 90, "22:00": 50},
        "description": "Riverfront steps on the Ganges, centre of Hindu pilgrimage.",
    },
    {
        "id": "dest_005", "name": "Darjeeling Hills", "city": "Darjeeling", "state": "West Bengal",
        "coordinates": (27.0360, 88.2627), "entry_fee": 300, "rating": 4.5,
        "best_time_to_visit": "Early Morning", "tags": ["Hill Station", "Tea", "Scenic"],
        "attractions": ["Tiger Hill sunrise", "Tea garden tour", "Toy train ride", "Batasia Loop"],
        "crowd_data": {"00:00": 5, "04:00": 15, "08:00": 40, "10:00": 65, "12:00": 75,
                       "14:00": 70, "16:00": 60, "18:00": 45, "20:00": 30, "22:00": 15},
        "description": "Hill station known for tea estates and Himalayan views.",
    },
    {
        "id": "dest_006", "name": "Kerala Backwaters", "city": "Alleppey", "state": "Kerala",
        "coordinates": (9.4981, 76.3388), "entry_fee": 1200, "rating": 4.9,
        "best_time_to_visit": "Morning", "tags": ["Backwaters", "Houseboat", "Nature"],
        "attractions": ["Houseboat cruise", "Vembanad lake", "Village canoe tour", "Alleppey beach"],
        "crowd_data": {"00:00": 10, "04:00": 15, "08:00": 35, "10:00": 60, "12:00": 70,
                       "14:00": 65, "16:00": 75, "18:00": 50, "20:00": 30, "22:00": 20},
        "description": "Network of lagoons and canals best explored by houseboat.",
    },
    {
        "id": "dest_007", "name": "Mysore Palace", "city": "Mysore", "state": "Karnataka",
        "coordinates": (12.3052, 76.6552), "entry_fee": 200, "rating": 4.7,
        "best_time_to_visit": "Morning", "tags": ["Palace", "Historical", "Architecture"],
        "attractions": ["Palace tour", "Devaraja market", "Chamundi Hill", "Palace light show"],
        "crowd_data": {"00:00": 0, "04:00": 0, "08:00": 35, "10:00": 70, "12:00": 85,
                       "14:00": 80, "16:00": 75, "18:00": 90, "20:00": 95, "22:00": 40},
        "description": "Indo-Saracenic palace of the Wadiyar dynasty.",
    },
    {
        "id": "dest_008", "name": "Amritsar Golden Temple", "city": "Amritsar", "state": "Punjab",
        "coordinates": (31.6200, 74.8765), "entry_fee": 0, "rating": 4.9,
        "best_time_to_visit": "Early Morning", "tags": ["Temple", "Spiritual", "Free"],
        "attractions": ["Harmandir Sahib", "Community kitchen", "Jallianwala Bagh", "Wagah border ceremony"],
        "crowd_data": {"00:00": 40, "04:00": 30, "08:00": 60, "10:00": 80, "12:00": 85,
                       "14:00": 75, "16:00": 70, "18:00": 80, "20:00": 90, "22:00": 65},
        "description": "Holiest gurdwara of Sikhism, gilded and surrounded by a sacred pool.",
    },
    {
        "id": "dest_009", "name": "Rann of Kutch", "city": "Kutch", "state": "Gujarat",
        "coordinates": (23.7337, 69.8597), "entry_fee": 500, "rating": 4.5,
        "best_time_to_visit": "Evening", "tags": ["Desert", "Cultural", "Festival"],
        "attractions": ["White salt desert", "Kalo Dungar", "Craft villages", "Rann Utsav cultural show"],
        "crowd_data": {"00:00": 5, "04:00": 10, "08:00": 20, "10:00": 30, "12:00": 15,
                       "14:00": 10, "16:00": 25, "18:00": 60, "20:00": 40, "22:00": 15},
        "description": "Seasonal salt marsh turning into a white desert after the monsoon.",
    },
    {
        "id": "dest_010", "name": "Ladakh Lakes", "city": "Leh", "state": "Ladakh",
        "coordinates": (34.1526, 77.5771), "entry_fee": 300, "rating": 4.8,
        "best_time_to_visit": "Morning", "tags": ["Lakes", "Mountains", "Adventure"],
        "attractions": ["Pangong Tso", "Thiksey monastery", "Khardung La", "Leh palace"],
        "crowd_data": {"00:00": 5, "04:00": 10, "08:00": 30, "10:00": 60, "12:00": 65,
                       "14:00": 60, "16:00": 55, "18:00": 40, "20:00": 20, "22:00": 10},
        "description": "High-altitude lakes and monasteries of the trans-Himalaya.",
    },
    {
        "id": "dest_011", "name": "Khajuraho Temples", "city": "Khajuraho", "state": "Madhya Pradesh",
        "coordinates": (24.8318, 79.9199), "entry_fee": 500, "rating": 4.6,
        "best_time_to_visit": "Morning", "tags": ["UNESCO", "Temple", "Historical"],
        "attractions": ["Western group of temples", "Kandariya Mahadeva", "Archaeological museum"],
        "description": "Chandela-era temples famed for their sculpture.",
    },
    {
        "id": "dest_012", "name": "Sundarbans National Park", "city": "South 24 Parganas",
        "state": "West Bengal", "coordinates": (21.9497, 89.1833), "entry_fee": 1500, "rating": 4.7,
        "best_time_to_visit": "Morning", "tags": ["Wildlife", "Tiger", "Mangrove"],
        "attractions": ["Boat safari", "Sajnekhali watchtower", "Mangrove interpretation centre"],
        "description": "Largest mangrove forest, home of the Bengal tiger.",
    },
    {
        "id": "dest_013", "name": "Valley of Flowers", "city": "Chamoli", "state": "Uttarakhand",
        "coordinates": (30.7283, 79.6050), "entry_fee": 600, "rating": 4.8,
        "best_time_to_visit": "Morning", "tags": ["Flowers", "Trekking", "Nature"],
        "attractions": ["Valley trek", "Hemkund Sahib", "Ghangaria village"],
        "description": "Alpine meadows carpeted with endemic flowers.",
    },
    {
        "id": "dest_014", "name": "Hampi Ruins", "city": "Hampi", "state": "Karnataka",
        "coordinates": (15.3350, 76.4600), "entry_fee": 500, "rating": 4.7,
        "best_time_to_visit": "Morning", "tags": ["UNESCO", "Ruins", "Historical"],
        "attractions": ["Virupaksha temple", "Vittala stone chariot", "Lotus Mahal", "Matanga Hill sunset"],
        "description": "Ruins of the Vijayanagara capital among boulder hills.",
    },
    {
        "id": "dest_015", "name": "Andaman Islands", "city": "Port Blair", "state": "Andaman & Nicobar",
        "coordinates": (11.7401, 92.6586), "entry_fee": 500, "rating": 4.9,
        "best_time_to_visit": "Morning", "tags": ["Beach", "Island", "Water Sports"],
        "attractions": ["Radhanagar beach", "Cellular Jail", "Snorkelling at Elephant beach"],
        "description": "Tropical islands with coral reefs and white-sand beaches.",
    },
    {
        "id": "dest_016", "name": "Kaziranga National Park", "city": "Golaghat", "state": "Assam",
        "coordinates": (26.5775, 93.1700), "entry_fee": 1200, "rating": 4.8,
        "best_time_to_visit": "Morning", "tags": ["Wildlife", "Rhino", "UNESCO"],
        "attractions": ["Jeep safari", "Elephant safari", "Orchid park"],
        "description": "Home to the largest population of one-horned rhinoceroses.",
    },
    {
        "id": "dest_017", "name": "Ajanta and Ellora Caves", "city": "Aurangabad", "state": "Maharashtra",
        "coordinates": (20.5518, 75.7448), "entry_fee": 600, "rating": 4.7,
        "best_time_to_visit": "Morning", "tags": ["UNESCO", "Caves", "Historical"],
        "attractions": ["Ajanta cave paintings", "Kailasa temple", "Bibi Ka Maqbara"],
        "description": "Rock-cut Buddhist, Hindu and Jain cave monuments.",
    },
    {
        "id": "dest_018", "name": "Coorg Hill Station", "city": "Madikeri", "state": "Karnataka",
        "coordinates": (12.4244, 75.7382), "entry_fee": 300, "rating": 4.6,
        "best_time_to_visit": "Morning", "tags": ["Hill Station", "Coffee", "Nature"],
        "attractions": ["Coffee plantation tour", "Abbey Falls", "Raja's Seat", "Dubare elephant camp"],
        "description": "Misty coffee country in the Western Ghats.",
    },
    {
        "id": "dest_019", "name": "Munnar Tea Gardens", "city": "Munnar", "state": "Kerala",
        "coordinates": (10.0889, 77.0595), "entry_fee": 400, "rating": 4.7,
        "best_time_to_visit": "Morning", "tags": ["Tea", "Plantation", "Hill Station"],
        "attractions": ["Tea museum", "Eravikulam National Park", "Mattupetty dam"],
        "description": "Rolling tea estates in the hills of Kerala.",
    },
    {
        "id": "dest_020", "name": "Qutub Minar", "city": "Delhi", "state": "Delhi",
        "coordinates": (28.5245, 77.1855), "entry_fee": 350, "rating": 4.5,
        "best_time_to_visit": "Morning", "tags": ["UNESCO", "Monument", "Historical"],
        "attractions": ["Minar complex", "Iron pillar", "Alai Darwaza", "Mehrauli archaeological park"],
        "description": "73-metre victory tower of red sandstone and marble.",
    },
]


def destination_from_dict(raw: Dict[str, Any]) -> Destination:
    """Build a Destination from a plain dict (built-in entry or JSON record)."""
    try:
        coords = raw["coordinates"]
        if isinstance(coords, dict):
            lat, lng = coords["lat"], coords["lng"]
        else:
            lat, lng = coords
        dest_id = str(raw["id"])
        name = str(raw["name"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Malformed destination record {raw.get('id', '?')!r}: {e}") from e

    crowd_data = raw.get("crowd_data") or generate_crowd_data(random.Random(dest_id))

    return Destination(
        id=dest_id,
        name=name,
        coordinates=Coordinate(latitude=float(lat), longitude=float(lng)),
        attractions=list(raw.get("attractions") or []),
        city=raw.get("city") or "",
        state=raw.get("state") or "",
        description=raw.get("description") or "",
        entry_fee=int(raw.get("entry_fee") or 0),
        rating=float(raw.get("rating") or 0.0),
        crowd_data=dict(crowd_data),
        tags=list(raw.get("tags") or []),
        best_time_to_visit=raw.get("best_time_to_visit") or "",
    )


class Catalogue:
    """Read-only destination lookup keyed by id, in insertion order."""

    def __init__(self, destinations: Iterable[Destination]):
        self._data: Dict[str, Destination] = {}
        for dest in destinations:
            self._data[dest.id] = dest

    @classmethod
    def from_json(cls, path: Path) -> "Catalogue":
        """Load a catalogue from a JSON list of destination records."""
        records = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(records, list):
            raise ValueError(f"{path}: expected a JSON list of destinations")
        return cls(destination_from_dict(r) for r in records)

    def get(self, destination_id: str) -> Optional[Destination]:
        return self._data.get(destination_id)

    def resolve(self, destination_ids: Iterable[str]) -> Tuple[List[Destination], List[str]]:
        """Look up ids in order. Returns (found, skipped_ids)."""
        found, skipped = [], []
        for dest_id in destination_ids:
            dest = self._data.get(dest_id)
            if dest is None:
                skipped.append(dest_id)
            else:
                found.append(dest)
        return found, skipped

    def states(self) -> List[str]:
        return sorted({d.state for d in self._data.values() if d.state})

    def search(
        self,
        query: str = "",
        state: Optional[str] = None,
        crowd_level: Optional[CrowdLevel] = None,
        min_fee: Optional[int] = None,
        max_fee: Optional[int] = None,
        hour: Optional[int] = None,
    ) -> List[Destination]:
        """Filter destinations by free text, state, crowd level and entry fee.

        The crowd filter uses the level at ``hour`` when given, otherwise the
        daily average.
        """
        results = list(self._data.values())

        q = query.strip().lower()
        if q:
            results = [
                d for d in results
                if q in d.name.lower() or q in d.city.lower() or q in d.state.lower()
                or any(q in t.lower() for t in d.tags)
            ]

        if crowd_level is not None:
            level = CrowdLevel(crowd_level)
            if hour is None:
                results = [d for d in results if average_crowd_level(d.crowd_data) == level]
            else:
                results = [d for d in results if current_crowd_level(d.crowd_data, hour) == level]

        if min_fee is not None:
            results = [d for d in results if d.entry_fee >= min_fee]
        if max_fee is not None:
            results = [d for d in results if d.entry_fee <= max_fee]

        if state:
            results = [d for d in results if d.state.lower() == state.lower()]

        return results

    def __iter__(self) -> Iterator[Destination]:
        return iter(self._data.values())

    def __len__(self):
        return len(self._data)

    def __contains__(self, key: str) -> bool:
        return key in self._data


def builtin_catalogue() -> Catalogue:
    return Catalogue(destination_from_dict(r) for r in _BUILTIN)


def load_catalogue(path: Optional[str] = None) -> Catalogue:
    """Load the catalogue from ``path`` (or TRIP_CATALOGUE_PATH), else the built-in one."""
    path = path or CATALOGUE_PATH
    if path:
        return Catalogue.from_json(Path(path))
    return builtin_catalogue()
