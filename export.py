"""Monthly work-log export to Excel."""

from __future__ import annotations

from calendar import monthrange
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from hours import hours_for
from logger import get_logger
from models import ALL_JOBS, TimeRange, WorkEntry
from store import EntryStore
from utils import format_time

logger = get_logger(__name__)

EXPORT_COLUMNS = ("date", "job", "time", "duration", "earnings", "notes")

SHEET_TITLE = "Work Log"
HEADER_FILL = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
HEADER_FONT = Font(bold=True, color="FFFFFF")

_CENTS = Decimal("0.01")


def default_filename(year: int, month: int) -> str:
    return f"work-log-{year}-{month}.xlsx"


def _time_text(entry: WorkEntry) -> str:
    detail = entry.detail
    if not isinstance(detail, TimeRange):
        return ""
    return f"{format_time(detail.start_time) or ''} - {format_time(detail.end_time) or ''}"


def export_rows(
    store: EntryStore,
    year: int,
    month: int,
    job_filter: str = ALL_JOBS,
    columns=EXPORT_COLUMNS,
) -> list[dict]:
    """Rows for every entry in a calendar month, keyed by column heading.

    Entries are ordered by date, keeping insertion order within a day.
    """
    start = date(year, month, 1)
    end = date(year, month, monthrange(year, month)[1])
    selected = set(columns)

    entries = [
        e for e in store.entries_in_range(start, end)
        if job_filter == ALL_JOBS or e.job_id == job_filter
    ]
    entries.sort(key=lambda e: e.date)

    rows = []
    for entry in entries:
        job = store.job_by_id(entry.job_id)
        hours = hours_for(entry)
        row: dict = {}

        if "date" in selected:
            row["Date"] = entry.date.isoformat()
        if "job" in selected:
            row["Job"] = job.name if job else "Unknown Job"
        if "time" in selected:
            row["Time"] = _time_text(entry)
        if "duration" in selected:
            row["Duration (h)"] = float(hours.quantize(_CENTS, rounding=ROUND_HALF_UP))
        if "earnings" in selected:
            rate = job.hourly_rate if job else Decimal("0")
            row["Earnings"] = float((hours * rate).quantize(_CENTS, rounding=ROUND_HALF_UP))
            row["Currency"] = job.currency.value if job else ""
        if "notes" in selected:
            row["Notes"] = ""

        rows.append(row)

    return rows


def write_workbook(rows: list[dict], path: Path) -> Path:
    """Write rows to a single-sheet workbook. Raises ValueError if rows is empty."""
    if not rows:
        raise ValueError("No entries found for the selected period.")

    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    headers = list(rows[0].keys())
    ws.append(headers)
    for cell in ws[1]:
        cell.fill = HEADER_FILL
        cell.font = HEADER_FONT

    for row in rows:
        ws.append([row.get(h) for h in headers])

    for col_idx, header in enumerate(headers, start=1):
        width = max(len(str(header)), *(len(str(row.get(header, ""))) for row in rows))
        ws.column_dimensions[get_column_letter(col_idx)].width = width + 2

    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    logger.info("Exported %d rows to %s", len(rows), path)
    return path


def export_month(
    store: EntryStore,
    year: int,
    month: int,
    output_dir: Path,
    job_filter: str = ALL_JOBS,
    columns=EXPORT_COLUMNS,
) -> Path:
    rows = export_rows(store, year, month, job_filter, columns)
    return write_workbook(rows, output_dir / default_filename(year, month))
