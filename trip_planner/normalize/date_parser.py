"""Multi-format parsing for trip start dates."""

import re
from datetime import date, datetime, timedelta
from typing import List, Optional

from dateutil import parser as dateutil_parser


def parse_date(raw: str, today: Optional[date] = None) -> Optional[date]:
    """Parse a start date in many formats, returning a date or None.

    Handles:
      - YYYY-MM-DD
      - DD/MM/YYYY (day first, as written in India)
      - DDMONYYYY (e.g. 20JAN26, 09MAR2026)
      - "today" / "tomorrow"
      - "26 March 2026", "Mar 26, 2026" and friends via dateutil
    """
    if not raw or raw.strip().lower() in ("null", "none", "unknown", ""):
        return None

    raw = raw.strip()
    today = today or date.today()

    lowered = raw.lower()
    if lowered == "today":
        return today
    if lowered == "tomorrow":
        return today + timedelta(days=1)

    # 1. DDMONYY / DDMONYYYY
    m = re.match(r'^(\d{2})([A-Z]{3})(\d{2,4})$', raw, re.I)
    if m:
        day, mon, year = m.groups()
        year = year if len(year) == 4 else f"20{year}"
        try:
            return datetime.strptime(f"{day}{mon.upper()}{year}", "%d%b%Y").date()
        except ValueError:
            pass

    # 2. YYYY-MM-DD
    m = re.match(r'^(\d{4})-(\d{2})-(\d{2})$', raw)
    if m:
        try:
            return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
        except ValueError:
            return None

    # 3. DD/MM/YYYY
    m = re.match(r'^(\d{1,2})/(\d{1,2})/(\d{4})$', raw)
    if m:
        try:
            return date(int(m.group(3)), int(m.group(2)), int(m.group(1)))
        except ValueError:
            return None

    # 4. dateutil as general fallback; missing parts default to today
    try:
        dt = dateutil_parser.parse(raw, default=datetime(today.year, today.month, today.day), dayfirst=True)
        return dt.date()
    except (ValueError, OverflowError):
        pass

    return None


def trip_dates(start: date, number_of_days: int) -> List[date]:
    """Contiguous calendar dates for a trip, first day = ``start``."""
    return [start + timedelta(days=i) for i in range(max(number_of_days, 0))]
