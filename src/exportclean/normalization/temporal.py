"""
Date normalization for export values.

Recognises a fixed list of two-digit-year date layouts and renders
matches as a canonical ``YYYY-MM-DD HH:MM:SS`` timestamp. Anything that
does not match is passed through untouched.
"""

import re
from dataclasses import dataclass
from datetime import datetime

CANONICAL_DATE_FORMAT = "%Y-%m-%d"
CANONICAL_TIME_FORMAT = "%H:%M:%S"

# Two-digit years at or above the pivot belong to the 1900s
YEAR_PIVOT = 69

_MONTH_FIXED = r"(?P<month>[0-9]{2})"
_MONTH_LOOSE = r"(?P<month>[0-9]{1,2})"
_DAY = r"(?P<day>[0-9]{2})"
_YEAR = r"(?P<year>[0-9]{2})"
_HOUR_MINUTE = r" (?P<hour>[0-9]{1,2}):(?P<minute>[0-9]{2})"
_SECOND = r":(?P<second>[0-9]{2})(?:[.,][0-9]+)?"


@dataclass(frozen=True)
class CandidateFormat:
    """A date layout tried during normalization."""

    layout: str
    pattern: re.Pattern[str]


def _candidate(layout: str, date_part: str, time_part: str = "") -> CandidateFormat:
    return CandidateFormat(layout=layout, pattern=re.compile(date_part + time_part))


_DASHED = f"{_MONTH_FIXED}-{_DAY}-{_YEAR}"
_SLASHED_LOOSE = f"{_MONTH_LOOSE}/{_DAY}/{_YEAR}"
_SLASHED = f"{_MONTH_FIXED}/{_DAY}/{_YEAR}"

# Order is significant: the first layout that parses wins.
CANDIDATE_FORMATS: tuple[CandidateFormat, ...] = (
    _candidate("01-02-06", _DASHED),
    _candidate("01-02-06 15:04", _DASHED, _HOUR_MINUTE),
    _candidate("01-02-06 15:04:05", _DASHED, _HOUR_MINUTE + _SECOND),
    _candidate("1/02/06", _SLASHED_LOOSE),
    _candidate("1/02/06 15:04", _SLASHED_LOOSE, _HOUR_MINUTE),
    _candidate("1/02/06 15:04:05", _SLASHED_LOOSE, _HOUR_MINUTE + _SECOND),
    _candidate("01/02/06", _SLASHED),
    _candidate("01/02/06 15:04", _SLASHED, _HOUR_MINUTE),
    _candidate("01/02/06 15:04:05", _SLASHED, _HOUR_MINUTE + _SECOND),
)


def _expand_year(two_digit: int) -> int:
    return two_digit + (1900 if two_digit >= YEAR_PIVOT else 2000)


def _parse_with(value: str, candidate: CandidateFormat) -> datetime | None:
    """Parse value with a single layout, or None if it does not fit."""
    match = candidate.pattern.fullmatch(value)
    if match is None:
        return None

    parts = match.groupdict()
    try:
        return datetime(
            _expand_year(int(parts["year"])),
            int(parts["month"]),
            int(parts["day"]),
            int(parts.get("hour") or 0),
            int(parts.get("minute") or 0),
            int(parts.get("second") or 0),
        )
    except ValueError:
        # Out-of-range field (month 13, Feb 30, hour 24, ...)
        return None


def parse_date(value: str) -> datetime | None:
    """
    Parse a value against the candidate layouts in order.

    Args:
        value: Raw cell value.

    Returns:
        Parsed datetime from the first matching layout, or None.
    """
    for candidate in CANDIDATE_FORMATS:
        parsed = _parse_with(value, candidate)
        if parsed is not None:
            return parsed
    return None


def format_timestamp(moment: datetime, separator: str = " ") -> str:
    """Render a datetime in canonical timestamp layout."""
    return moment.strftime(f"{CANONICAL_DATE_FORMAT}{separator}{CANONICAL_TIME_FORMAT}")


def normalize_date(value: str, separator: str = " ") -> str:
    """
    Convert a recognised date string to a canonical timestamp.

    Layouts are tried in the fixed order of CANDIDATE_FORMATS and the
    first match wins. Values matching no layout are returned unchanged.
    The canonical layout is not itself a candidate, so normalizing an
    already normalized value leaves it as it is rather than re-parsing it.

    Example:
        >>> normalize_date("12-25-20 12:34:56")
        '2020-12-25 12:34:56'
        >>> normalize_date("invalid date")
        'invalid date'

    Args:
        value: Raw cell value.
        separator: Separator between date and time (" " or "T").

    Returns:
        Canonical timestamp or the original value.
    """
    parsed = parse_date(value)
    if parsed is None:
        return value
    return format_timestamp(parsed, separator)
