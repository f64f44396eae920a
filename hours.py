"""Hours credited by a single work entry."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from models import Duration, Status, TimeRange, WorkEntry
from utils import parse_time

WORKED_STATUS_HOURS = Decimal("8")

_ZERO = Decimal("0")
_MINUTES_PER_DAY = 24 * 60


def to_decimal(val) -> Decimal | None:
    """Coerce a numeric value (or numeric string) to Decimal, else None."""
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, Decimal):
        return val if val.is_finite() else None
    if not isinstance(val, (int, float, str)):
        return None
    try:
        result = Decimal(str(val).strip())
    except InvalidOperation:
        return None
    return result if result.is_finite() else None


def time_range_hours(start, end, break_minutes=None) -> Decimal:
    """Hours between two "HH:mm" times, less the break.

    An end earlier than the start is taken to be on the following day.
    """
    start_time = parse_time(start)
    end_time = parse_time(end)
    if start_time is None or end_time is None:
        return _ZERO

    start_minutes = start_time.hour * 60 + start_time.minute
    end_minutes = end_time.hour * 60 + end_time.minute
    if end_minutes < start_minutes:
        end_minutes += _MINUTES_PER_DAY

    break_mins = to_decimal(break_minutes) or _ZERO
    worked = max(_ZERO, Decimal(end_minutes - start_minutes) - break_mins)
    return worked / 60


def hours_for(entry) -> Decimal:
    """Hours worked for an entry (or a bare entry detail).

    Never raises: missing or malformed data counts as zero hours.
    """
    detail = entry.detail if isinstance(entry, WorkEntry) else entry

    if isinstance(detail, TimeRange):
        return time_range_hours(detail.start_time, detail.end_time, detail.break_minutes)
    if isinstance(detail, Duration):
        # Negative durations pass through unchanged
        hours = to_decimal(detail.duration_hours)
        return hours if hours is not None else _ZERO
    if isinstance(detail, Status):
        if isinstance(detail.status, str) and detail.status.lower() == "worked":
            return WORKED_STATUS_HOURS
        return _ZERO
    return _ZERO
