"""Resolve free-text destination names to catalogue ids."""

import re
import unicodedata
from typing import Iterable, List, Optional, Tuple

# Maps raw variations → catalogue id
_ALIASES = {
    "taj": "dest_001",
    "taj mahal": "dest_001",
    "agra": "dest_001",
    "city palace": "dest_002",
    "jaipur": "dest_002",
    "pink city": "dest_002",
    "goa": "dest_003",
    "panjim": "dest_003",
    "benares": "dest_004",
    "banaras": "dest_004",
    "kashi": "dest_004",
    "varanasi": "dest_004",
    "darjeeling": "dest_005",
    "alappuzha": "dest_006",
    "alleppey": "dest_006",
    "backwaters": "dest_006",
    "mysuru": "dest_007",
    "mysore": "dest_007",
    "golden temple": "dest_008",
    "harmandir sahib": "dest_008",
    "amritsar": "dest_008",
    "kutch": "dest_009",
    "rann": "dest_009",
    "white desert": "dest_009",
    "leh": "dest_010",
    "ladakh": "dest_010",
    "pangong": "dest_010",
    "khajuraho": "dest_011",
    "sundarbans": "dest_012",
    "sunderbans": "dest_012",
    "valley of flowers": "dest_013",
    "hampi": "dest_014",
    "andaman": "dest_015",
    "andamans": "dest_015",
    "port blair": "dest_015",
    "kaziranga": "dest_016",
    "ajanta": "dest_017",
    "ellora": "dest_017",
    "aurangabad": "dest_017",
    "coorg": "dest_018",
    "kodagu": "dest_018",
    "madikeri": "dest_018",
    "munnar": "dest_019",
    "qutub": "dest_020",
    "qutb minar": "dest_020",
    "qutub minar": "dest_020",
    "delhi": "dest_020",
    "new delhi": "dest_020",
}


def _fold(text: str) -> str:
    """Lowercase, strip accents and collapse punctuation/whitespace."""
    text = unicodedata.normalize("NFKD", text)
    text = "".join(c for c in text if not unicodedata.combining(c))
    text = re.sub(r"[^\w\s]", " ", text.lower())
    return re.sub(r"\s+", " ", text).strip()


def resolve_destination(raw: str, catalogue) -> Optional[str]:
    """Return the catalogue id for ``raw``, or None.

    Tries in order:
    1. Exact id
    2. Destination name (case/accent-insensitive)
    3. Known alias
    4. City name
    5. Unique destination whose name contains the text
    """
    if not raw or not raw.strip():
        return None

    cleaned = raw.strip()
    if cleaned in catalogue:
        return cleaned

    folded = _fold(cleaned)
    if not folded:
        return None

    for dest in catalogue:
        if _fold(dest.name) == folded:
            return dest.id

    alias = _ALIASES.get(folded)
    if alias and alias in catalogue:
        return alias

    for dest in catalogue:
        if dest.city and _fold(dest.city) == folded:
            return dest.id

    partial = [d.id for d in catalogue if folded in _fold(d.name)]
    if len(partial) == 1:
        return partial[0]

    return None


def resolve_destinations(raw_names: Iterable[str], catalogue) -> Tuple[List[str], List[str]]:
    """Resolve many names. Returns (ids, unresolved_names) preserving order."""
    ids, unresolved = [], []
    for raw in raw_names:
        dest_id = resolve_destination(raw, catalogue)
        if dest_id is None:
            unresolved.append(raw)
        else:
            ids.append(dest_id)
    return ids, unresolved
