"""Common utilities, text helpers and exception classes."""

import re
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

REFERENCE_TZ = ZoneInfo("America/New_York")

_WS_PATTERN = re.compile(r"\s+")

# English month names as printed on the source pages. Both full names and
# the usual abbreviations map to the month number.
_MONTHS = {
    "january": 1, "february": 2, "march": 3, "april": 4,
    "may": 5, "june": 6, "july": 7, "august": 8,
    "september": 9, "october": 10, "november": 11, "december": 12,
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "jun": 6, "jul": 7,
    "aug": 8, "sep": 9, "sept": 9, "oct": 10, "nov": 11, "dec": 12,
}


class TennisdataError(Exception):
    """Base exception for tennisdata."""


class FetchError(TennisdataError):
    """HTTP fetch failure after retries."""


class NetworkError(FetchError):
    """Transient network failure (unreachable host, reset, timeout)."""


class ParseError(TennisdataError):
    """HTML structure did not match the expected layout."""


def clean_text(text: str) -> str:
    """Collapse whitespace (including non-breaking spaces) and strip."""
    return _WS_PATTERN.sub(" ", text.replace("\xa0", " ")).strip()


def today_in_reference_tz() -> date:
    return datetime.now(REFERENCE_TZ).date()


def yesterday_stamp(today: date) -> str:
    """YYYYMMDD for the day before ``today``."""
    return (today - timedelta(days=1)).strftime("%Y%m%d")


def parse_month_day(text: str) -> tuple[int, int] | None:
    """Parse a leading ``"October 19"`` / ``"Oct. 19"`` into (month, day).

    Returns None when the text does not start with a month and a day.
    """
    parts = clean_text(text).split(" ")
    if len(parts) < 2:
        return None
    month = _MONTHS.get(parts[0].rstrip(".,").lower())
    day_text = parts[1].rstrip(",")
    if month is None or not day_text.isdigit():
        return None
    day = int(day_text)
    if not 1 <= day <= 31:
        return None
    return month, day
