# src/gedcom_lineage/dates/normalizer.py

from __future__ import annotations

import re
from typing import Optional


# ---------------------------------------------------------------------------
# Month table
# ---------------------------------------------------------------------------

MONTHS = {
    "JAN": "01",
    "FEB": "02",
    "MAR": "03",
    "APR": "04",
    "MAY": "05",
    "JUN": "06",
    "JUL": "07",
    "AUG": "08",
    "SEP": "09",
    "OCT": "10",
    "NOV": "11",
    "DEC": "12",
}

_FULL_DATE = re.compile(r"^(\d{1,2})\s+([A-Z]{3})\s+(\d{4})$")
_MONTH_YEAR = re.compile(r"^([A-Z]{3})\s+(\d{4})$")
_YEAR = re.compile(r"\d{4}")


def format_gedcom_date(raw: Optional[str]) -> Optional[str]:
    """
    Normalize a GEDCOM DATE value for display.

        "1 JAN 1990"  -> "01/01/1990"
        "JAN 1990"    -> "01/1990"
        "1990"        -> "1990"
        "ABT 1990"    -> "ABT 1990"   (unrecognized, passed through)

    Returns None for an empty value.
    """
    if raw is None:
        return None
    trimmed = raw.strip()
    if not trimmed:
        return None

    m = _FULL_DATE.match(trimmed)
    if m and m.group(2) in MONTHS:
        day, month, year = m.groups()
        return f"{day.zfill(2)}/{MONTHS[month]}/{year}"

    m = _MONTH_YEAR.match(trimmed)
    if m and m.group(1) in MONTHS:
        month, year = m.groups()
        return f"{MONTHS[month]}/{year}"

    return trimmed


def extract_year(date: Optional[str]) -> Optional[int]:
    """First four-digit run of a date string, or None."""
    if not date:
        return None
    m = _YEAR.search(date)
    return int(m.group(0)) if m else None
