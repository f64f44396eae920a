"""Load and save work-log data as JSON job and entry records.

Records use camelCase field names, one list of jobs and one of entries
(``work_jobs`` / ``work_entries``). Malformed records are skipped.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from hours import to_decimal
from logger import get_logger
from models import Config, Currency, Duration, EntryType, Job, Status, TimeRange, WorkEntry
from store import EntryStore
from utils import format_time, parse_iso_date, parse_time

logger = get_logger(__name__)


DEFAULT_JOBS = [
    Job(id="job-1", name="Job 1", hourly_rate=Decimal("25"), currency=Currency.USD,
        schedule=frozenset({1, 3, 5})),
    Job(id="job-2", name="Job 2", hourly_rate=Decimal("30"), currency=Currency.USD,
        schedule=frozenset({2, 3, 4, 5})),
]


def parse_currency(val, default: Currency = Currency.USD) -> Currency:
    if not val:
        return default
    try:
        return Currency(str(val).upper())
    except ValueError:
        logger.warning("Unknown currency %r, using %s", val, default.value)
        return default


def parse_schedule(val) -> frozenset[int]:
    """Weekday indices 0-6 from a list; anything else is dropped."""
    if not isinstance(val, (list, tuple, set, frozenset)):
        return frozenset()
    return frozenset(
        day for day in val
        if isinstance(day, int) and not isinstance(day, bool) and 0 <= day <= 6
    )


def job_from_record(record: dict, default_currency: Currency = Currency.USD) -> Job | None:
    """Build a Job from a JSON record, or None if it has no id."""
    if not isinstance(record, dict) or not record.get("id"):
        logger.warning("Skipping job record without id: %r", record)
        return None

    rate = to_decimal(record.get("hourlyRate"))
    return Job(
        id=str(record["id"]),
        name=str(record.get("name") or ""),
        hourly_rate=rate if rate is not None else Decimal("0"),
        currency=parse_currency(record.get("currency"), default_currency),
        schedule=parse_schedule(record.get("schedule")),
    )


def detail_from_record(record: dict) -> TimeRange | Duration | Status | None:
    """Read only the fields belonging to the record's entryType."""
    try:
        entry_type = EntryType(record.get("entryType"))
    except ValueError:
        return None

    if entry_type is EntryType.TIME_RANGE:
        break_minutes = to_decimal(record.get("breakMinutes"))
        return TimeRange(
            start_time=parse_time(record.get("startTime")),
            end_time=parse_time(record.get("endTime")),
            break_minutes=break_minutes,
        )
    if entry_type is EntryType.DURATION:
        return Duration(duration_hours=to_decimal(record.get("durationHours")))
    status = record.get("status")
    return Status(status=status if isinstance(status, str) else "")


def entry_from_record(record: dict) -> WorkEntry | None:
    """Build a WorkEntry from a JSON record, or None if it is unusable."""
    if not isinstance(record, dict):
        logger.warning("Skipping entry record that is not an object: %r", record)
        return None
    if not record.get("id") or not record.get("jobId"):
        logger.warning("Skipping entry record without id or jobId: %r", record)
        return None

    entry_date = parse_iso_date(record.get("date"))
    if entry_date is None:
        logger.warning("Skipping entry %s with bad date %r", record["id"], record.get("date"))
        return None

    detail = detail_from_record(record)
    if detail is None:
        logger.warning("Skipping entry %s with unknown entryType %r",
                       record["id"], record.get("entryType"))
        return None

    return WorkEntry(
        id=str(record["id"]),
        job_id=str(record["jobId"]),
        date=entry_date,
        detail=detail,
    )


def json_number(val):
    """Decimal to int or float for JSON output."""
    if val is None:
        return None
    d = Decimal(str(val))
    return int(d) if d == d.to_integral_value() else float(d)


def job_to_record(job: Job) -> dict:
    return {
        "id": job.id,
        "name": job.name,
        "hourlyRate": json_number(job.hourly_rate),
        "currency": job.currency.value,
        "schedule": sorted(job.schedule),
    }


def entry_to_record(entry: WorkEntry) -> dict:
    record = {
        "id": entry.id,
        "jobId": entry.job_id,
        "date": entry.date.isoformat(),
        "entryType": entry.entry_type.value,
    }
    detail = entry.detail
    if isinstance(detail, TimeRange):
        record["startTime"] = format_time(detail.start_time)
        record["endTime"] = format_time(detail.end_time)
        if detail.break_minutes is not None:
            record["breakMinutes"] = json_number(detail.break_minutes)
    elif isinstance(detail, Duration):
        record["durationHours"] = json_number(detail.duration_hours)
    else:
        record["status"] = detail.status
    return record


def _record_list(data: dict, key: str) -> list:
    records = data.get(key)
    if records is None:
        return []
    if not isinstance(records, list):
        logger.warning("Ignoring %s: expected a list, got %s", key, type(records).__name__)
        return []
    return records


def store_from_data(data: dict, config: Config | None = None) -> EntryStore:
    """Build an EntryStore from a {"jobs": [...], "entries": [...]} mapping."""
    if not isinstance(data, dict):
        raise ValueError("Work-log data must be a JSON object with jobs and entries")

    config = config or Config()
    jobs = [job_from_record(r, config.default_currency) for r in _record_list(data, "jobs")]
    entries = [entry_from_record(r) for r in _record_list(data, "entries")]
    return EntryStore(
        jobs=[j for j in jobs if j is not None],
        entries=[e for e in entries if e is not None],
        default_currency=config.default_currency,
    )


def load_store(path: Path, config: Config | None = None) -> EntryStore:
    """Load jobs and entries from a JSON file. A missing file gives the demo jobs."""
    if not path.exists():
        logger.info("No data file at %s, starting with default jobs", path)
        return EntryStore(jobs=DEFAULT_JOBS, default_currency=(config or Config()).default_currency)

    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    store = store_from_data(data, config)
    logger.info("Loaded %d jobs and %d entries from %s", len(store.jobs), len(store.entries), path)
    return store


def dump_store(store: EntryStore, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "jobs": [job_to_record(job) for job in store.jobs],
        "entries": [entry_to_record(entry) for entry in store.entries],
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def autosave(store: EntryStore, path: Path):
    """Write the store back to path after every mutation. Returns the unsubscribe function."""
    return store.subscribe(lambda event: dump_store(store, path))
