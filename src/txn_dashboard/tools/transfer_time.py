"""txn_dashboard.tools.transfer_time

Normalise the `transfer_time` text the banks send us.

What this module does
- Parses the day-first "DD/MM/YYYY HH:MM:SS" format (time optional).
- Falls back to pandas' general datetime parser (day first) for anything that is not
  three "/"-separated date parts (ISO strings and the like).
- Never raises: anything it cannot read becomes UNPARSEABLE.

The display helpers at the bottom mirror what the dashboard table shows.
"""

from __future__ import annotations

from datetime import datetime
import re
from typing import Optional, Union
import warnings

import pandas as pd

from txn_dashboard.domain.models import CanonicalDate, UNPARSEABLE, Unparseable

NormalizedDate = Union[CanonicalDate, Unparseable]

# Leading integer, the way a lenient int parse reads "05", "+5" or "5abc"
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def _leading_int(text: str) -> Optional[int]:
    m = _LEADING_INT_RE.match(text)
    return int(m.group(1)) if m else None


def _parse_time(token: str) -> tuple[int, int, int]:
    parts = token.split(":")
    if len(parts) < 2:
        return 0, 0, 0
    # Malformed or missing components default to 0
    values = [_leading_int(p) or 0 for p in parts[:3]]
    while len(values) < 3:
        values.append(0)
    return values[0], values[1], values[2]


def _fallback_parse(raw: str) -> NormalizedDate:
    """Generic parse for strings that are not in the day-first format."""
    # pandas reads "now", "today" and friends as the current clock time
    if not any(ch.isdigit() for ch in raw):
        return UNPARSEABLE
    try:
        with warnings.catch_warnings():
            # dayfirst inference warnings would repeat for every row on every rerun
            warnings.simplefilter("ignore", UserWarning)
            ts = pd.to_datetime(raw, errors="coerce", dayfirst=True)
    except (TypeError, ValueError, OverflowError):
        return UNPARSEABLE
    if ts is None or pd.isna(ts):
        return UNPARSEABLE
    # Keep the wall-clock fields; a time zone in the text is dropped
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return CanonicalDate.from_datetime(ts.to_pydatetime())


def normalize(raw: Optional[str]) -> NormalizedDate:
    """
    Parse a raw transfer time into a CanonicalDate, or UNPARSEABLE.

    "05/03/2024" is 5 March 2024 (day first). Impossible dates such as
    "31/02/2024" are UNPARSEABLE, not rolled over into March.
    """
    if raw is None:
        return UNPARSEABLE
    text = str(raw).strip()
    if not text:
        return UNPARSEABLE

    tokens = text.split()
    date_parts = tokens[0].split("/")
    if len(date_parts) != 3:
        return _fallback_parse(text)

    day, month, year = (_leading_int(p) for p in date_parts)
    if day is None or month is None or year is None:
        return UNPARSEABLE

    hour = minute = second = 0
    # Time only counts when it is the single token after the date
    if len(tokens) == 2:
        hour, minute, second = _parse_time(tokens[1])

    try:
        moment = datetime(year, month, day, hour, minute, second)
    except (ValueError, OverflowError):
        return UNPARSEABLE
    return CanonicalDate.from_datetime(moment)


# --- Display helpers ----------------------------------------------------------
def format_date(raw: Optional[str]) -> str:
    """vi-VN style date, "DD/MM/YYYY"; "N/A" when the value can't be read."""
    parsed = normalize(raw)
    if not isinstance(parsed, CanonicalDate):
        return "N/A"
    return f"{parsed.day:02d}/{parsed.month:02d}/{parsed.year:04d}"


def format_time(raw: Optional[str]) -> str:
    parsed = normalize(raw)
    if not isinstance(parsed, CanonicalDate):
        return ""
    return f"{parsed.hour:02d}:{parsed.minute:02d}:{parsed.second:02d}"
