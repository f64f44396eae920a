"""Utility functions for work-log date and period calculations."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from calendar import monthrange

from logger import get_logger
from models import Currency, Period

logger = get_logger(__name__)


def parse_time(val) -> time | None:
    """Parse an "HH:mm" string. Returns None for anything unparseable."""
    if isinstance(val, time):
        return val
    if not isinstance(val, str) or not val:
        return None
    parts = val.strip().split(":")
    if len(parts) < 2:
        return None
    try:
        return time(int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def format_time(t: time | None) -> str | None:
    if not t:
        return None
    return t.strftime("%H:%M")


def parse_iso_date(val) -> date | None:
    """Parse a "YYYY-MM-DD" string. Returns None for anything unparseable."""
    if isinstance(val, datetime):
        return val.date()
    if isinstance(val, date):
        return val
    if not isinstance(val, str):
        return None
    try:
        return date.fromisoformat(val.strip()[:10])
    except ValueError:
        return None


def sunday_weekday(d: date) -> int:
    """Weekday index with Sunday = 0 and Saturday = 6."""
    return (d.weekday() + 1) % 7


def get_week_start(d: date) -> date:
    """Get the Sunday that starts the week containing date d."""
    return d - timedelta(days=sunday_weekday(d))


def get_days_in_month(year: int, month: int) -> list[date]:
    return [date(year, month, day) for day in range(1, monthrange(year, month)[1] + 1)]


def get_month_grid(year: int, month: int) -> list[list[date]]:
    """Sunday-first calendar rows covering the month.

    Each row holds seven dates; the first and last rows are padded with
    days from the neighbouring months.
    """
    days = get_days_in_month(year, month)
    day = get_week_start(days[0])
    rows = []
    while day <= days[-1]:
        rows.append([day + timedelta(days=i) for i in range(7)])
        day += timedelta(days=7)
    return rows


def bounds_for(period: Period | str, reference: date) -> tuple[date, date]:
    """Inclusive (start, end) dates of the period containing reference.

    Weeks always run Sunday to Saturday. An unrecognised period is treated
    as a year.
    """
    if isinstance(period, str):
        period = period.strip().lower()
    try:
        period = Period(period)
    except ValueError:
        logger.warning("Unknown period %r, using year", period)
        period = Period.YEAR

    if period is Period.DAY:
        return reference, reference
    if period is Period.WEEK:
        start = get_week_start(reference)
        return start, start + timedelta(days=6)
    if period is Period.MONTH:
        last = monthrange(reference.year, reference.month)[1]
        return date(reference.year, reference.month, 1), date(reference.year, reference.month, last)
    return date(reference.year, 1, 1), date(reference.year, 12, 31)


STATUS_TYPES = [
    ("worked", "Worked"),
    ("off", "Day off"),
    ("holiday", "Holiday"),
    ("sick", "Sick"),
]


CURRENCY_SYMBOLS = {
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.GBP: "£",
    Currency.JPY: "¥",
    Currency.CNY: "¥",
    Currency.KRW: "₩",
    Currency.INR: "₹",
    Currency.RUB: "₽",
    Currency.TRY: "₺",
    Currency.BRL: "R$",
    Currency.CAD: "C$",
    Currency.AUD: "A$",
    Currency.CHF: "Fr",
    Currency.SEK: "kr",
    Currency.NOK: "kr",
    Currency.DKK: "kr",
    Currency.PLN: "zł",
    Currency.MXN: "$",
    Currency.IDR: "Rp",
    Currency.THB: "฿",
    Currency.VND: "₫",
    Currency.MYR: "RM",
    Currency.PHP: "₱",
    Currency.SGD: "S$",
    Currency.HKD: "HK$",
    Currency.NZD: "NZ$",
    Currency.ZAR: "R",
    Currency.SAR: "﷼",
    Currency.AED: "د.إ",
    Currency.ARS: "$",
    Currency.CLP: "$",
    Currency.COP: "$",
    Currency.EGP: "E£",
    Currency.ILS: "₪",
    Currency.TWD: "NT$",
}
