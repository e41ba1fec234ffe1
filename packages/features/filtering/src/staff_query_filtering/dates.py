"""
Date-range parameters.

A date-range parameter is a JSON object string::

    entryDate={"begin": "2024-01-01", "end": "20240201"}

Both bounds are normalised to ``YYYY-MM-DD HH:mm:ss``. A blank ``begin``
falls back to the epoch, a blank ``end`` to the current time.
"""

from __future__ import annotations

import datetime
import json
import logging
from typing import Any, NamedTuple

from dateutil import parser as date_parser

from .values import is_blank

logger = logging.getLogger(__name__)

DB_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

FAR_PAST = datetime.datetime(1970, 1, 1)

# Compact numeric forms detected by length.
_COMPACT_FORMATS: dict[int, str] = {
    6: "%Y%m",
    8: "%Y%m%d",
}


class DateRange(NamedTuple):
    begin: str
    end: str


def _to_local_naive(value: datetime.datetime) -> datetime.datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_date(value: Any, now: datetime.datetime) -> datetime.datetime | None:
    """
    Parse one bound; ``None`` when the value is not a recognisable date.

    Numbers are epoch milliseconds. Six- and eight-digit strings are
    ``YYYYMM`` / ``YYYYMMDD``; anything else goes through
    :func:`dateutil.parser.parse`, with missing components taken from the
    start of the current year.
    """
    if isinstance(value, datetime.datetime):
        return _to_local_naive(value)
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time())
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        try:
            return datetime.datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None

    text = value.strip()
    compact = _COMPACT_FORMATS.get(len(text))
    if compact and text.isdigit():
        try:
            return datetime.datetime.strptime(text, compact)
        except ValueError:
            return None

    default = datetime.datetime(now.year, 1, 1)
    try:
        return _to_local_naive(date_parser.parse(text, default=default))
    except (ValueError, OverflowError):
        return None


def normalize_date(
    value: Any,
    default: datetime.datetime,
    now: datetime.datetime | None = None,
) -> str | None:
    """Format a bound for the database, substituting *default* when blank."""
    if is_blank(value):
        return default.strftime(DB_DATETIME_FORMAT)
    parsed = parse_date(value, now or datetime.datetime.now())
    if parsed is None:
        return None
    return parsed.strftime(DB_DATETIME_FORMAT)


def decode_date_range(raw: Any, now: datetime.datetime) -> DateRange | None:
    """
    Decode a date-range parameter.

    Returns ``None`` unless *raw* is a JSON object string with both ``begin``
    and ``end`` keys whose values normalise to dates.
    """
    if not isinstance(raw, str) or not raw.lstrip().startswith("{"):
        return None
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict) or "begin" not in data or "end" not in data:
        return None

    begin = normalize_date(data["begin"], FAR_PAST, now)
    end = normalize_date(data["end"], now, now)
    if begin is None or end is None:
        logger.warning(
            "Ignoring date range with unparseable bound: begin=%r end=%r",
            data["begin"],
            data["end"],
        )
        return None
    return DateRange(begin=begin, end=end)
