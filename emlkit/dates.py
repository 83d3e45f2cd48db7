"""RFC 5322 ``Date`` header parsing and formatting."""

from __future__ import annotations

import email.utils
import re
from datetime import datetime, timezone

from .errors import InvalidDateError

_DAY_NAMES = frozenset({"mon", "tue", "wed", "thu", "fri", "sat", "sun"})
_MONTH_NAMES = frozenset(
    {"jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"}
)

# [day-of-week ","] day month year hour ":" minute [":" second] zone [comment]
_DATE_RE = re.compile(
    r"""
    ^\s*
    (?:(?P<dow>[A-Za-z]+)\s*,\s*)?
    (?P<day>\d{1,2})\s+
    (?P<month>[A-Za-z]+)\s+
    (?P<year>\d{2,4})\s+
    \d{1,2}:\d{2}(?::\d{2})?\s*
    (?P<zone>[+-]\d{4}|[A-Za-z]{1,5})
    (?:\s*\([^)]*\))?
    \s*$
    """,
    re.VERBOSE,
)


def parse_date(value: str) -> datetime:
    """Parse a ``Date`` header value into an aware datetime.

    Accepts the RFC 5322 grammar including obsolete alphabetic zones
    (``GMT``, ``EST``...).  A ``-0000`` zone is read as UTC.

    Raises
    ------
    InvalidDateError
        If the value does not match the grammar, names an unknown day or
        month, holds out-of-range fields (e.g. hour 99) or a three- or
        four-digit year below 1000.
    """
    match = _DATE_RE.match(value)
    if match is None:
        raise InvalidDateError(value)
    dow = match.group("dow")
    if dow is not None and dow[:3].lower() not in _DAY_NAMES:
        raise InvalidDateError(value)
    if match.group("month")[:3].lower() not in _MONTH_NAMES:
        raise InvalidDateError(value)
    # parsedate widens every year below 100; only two-digit years may be widened.
    year = match.group("year")
    if len(year) > 2 and int(year) < 1000:
        raise InvalidDateError(value)

    try:
        parsed = email.utils.parsedate_to_datetime(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidDateError(value, exc) from exc

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_date(dt: datetime) -> str:
    """Format *dt* as ``Mon, 02 Jan 2006 15:04:05 -0700``.

    Naive datetimes are taken to be local time.
    """
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return email.utils.format_datetime(dt)


def now() -> datetime:
    """Current local wall-clock time, timezone-aware."""
    return datetime.now().astimezone()


def now_header_value() -> str:
    """The current time formatted for a ``Date`` header."""
    return format_date(now())
