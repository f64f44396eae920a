"""In-memory store of jobs and work entries."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from typing import Callable, Iterable

from hours import to_decimal
from logger import get_logger
from models import ALL_JOBS, CalculatedTotals, Currency, Job, Period, WorkEntry
from totals import calculate_totals

logger = get_logger(__name__)


@dataclass(frozen=True)
class StoreEvent:
    """Notification sent to listeners after a successful mutation."""
    action: str  # "add", "update" or "delete"
    kind: str  # "job" or "entry"
    item_id: str
    removed_entry_ids: tuple[str, ...] = ()


Listener = Callable[[StoreEvent], None]


def new_id() -> str:
    return str(uuid.uuid4())


def normalize_job(job: Job, default_currency: Currency = Currency.USD) -> Job:
    """Fill in currency and schedule defaults on a job."""
    try:
        currency = Currency(job.currency) if job.currency else default_currency
    except ValueError:
        logger.warning("Job %s has unknown currency %r, using %s",
                       job.id, job.currency, default_currency.value)
        currency = default_currency
    return replace(
        job,
        currency=currency,
        schedule=frozenset(job.schedule or ()),
        hourly_rate=to_decimal(job.hourly_rate) or Decimal("0"),
    )


class EntryStore:
    """Jobs and entries held in memory.

    Mutations are visible immediately and notify subscribed listeners;
    nothing is persisted here. Not safe for concurrent mutation.
    """

    def __init__(
        self,
        jobs: Iterable[Job] = (),
        entries: Iterable[WorkEntry] = (),
        default_currency: Currency = Currency.USD,
    ):
        self.default_currency = default_currency
        self._jobs: list[Job] = [normalize_job(job, default_currency) for job in jobs]
        self._entries: list[WorkEntry] = list(entries)
        self._listeners: list[Listener] = []

    @property
    def jobs(self) -> tuple[Job, ...]:
        return tuple(self._jobs)

    @property
    def entries(self) -> tuple[WorkEntry, ...]:
        return tuple(self._entries)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: StoreEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    # --- Jobs ---

    def add_job(self, job: Job) -> Job:
        """Store a copy of job under a fresh id and return it."""
        new_job = normalize_job(replace(job, id=new_id()), self.default_currency)
        self._jobs.append(new_job)
        logger.debug("Added job %s (%s)", new_job.id, new_job.name)
        self._notify(StoreEvent("add", "job", new_job.id))
        return new_job

    def update_job(self, job: Job) -> bool:
        """Replace the job with the same id. Unknown ids are ignored."""
        for i, existing in enumerate(self._jobs):
            if existing.id == job.id:
                self._jobs[i] = normalize_job(job, self.default_currency)
                self._notify(StoreEvent("update", "job", job.id))
                return True
        logger.debug("update_job: no job with id %s", job.id)
        return False

    def delete_job(self, job_id: str) -> bool:
        """Delete a job and every entry that references it."""
        if self.job_by_id(job_id) is None:
            logger.debug("delete_job: no job with id %s", job_id)
            return False
        removed = tuple(e.id for e in self._entries if e.job_id == job_id)
        self._jobs = [job for job in self._jobs if job.id != job_id]
        self._entries = [e for e in self._entries if e.job_id != job_id]
        logger.debug("Deleted job %s and %d entries", job_id, len(removed))
        self._notify(StoreEvent("delete", "job", job_id, removed))
        return True

    def job_by_id(self, job_id: str) -> Job | None:
        for job in self._jobs:
            if job.id == job_id:
                return job
        return None

    # --- Entries ---

    def add_entry(self, entry: WorkEntry) -> WorkEntry:
        """Store a copy of entry under a fresh id and return it."""
        new_entry = replace(entry, id=new_id())
        self._entries.append(new_entry)
        self._notify(StoreEvent("add", "entry", new_entry.id))
        return new_entry

    def update_entry(self, entry: WorkEntry) -> bool:
        """Replace the entry with the same id. Unknown ids are ignored."""
        for i, existing in enumerate(self._entries):
            if existing.id == entry.id:
                self._entries[i] = entry
                self._notify(StoreEvent("update", "entry", entry.id))
                return True
        logger.debug("update_entry: no entry with id %s", entry.id)
        return False

    def delete_entry(self, entry_id: str) -> bool:
        remaining = [e for e in self._entries if e.id != entry_id]
        if len(remaining) == len(self._entries):
            logger.debug("delete_entry: no entry with id %s", entry_id)
            return False
        self._entries = remaining
        self._notify(StoreEvent("delete", "entry", entry_id))
        return True

    def entry_by_id(self, entry_id: str) -> WorkEntry | None:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def entries_on_date(self, d: date) -> list[WorkEntry]:
        """Entries for a date, in the order they were added."""
        return [e for e in self._entries if e.date == d]

    def entries_for_job(self, job_id: str) -> list[WorkEntry]:
        return [e for e in self._entries if e.job_id == job_id]

    def entries_in_range(self, start: date, end: date) -> list[WorkEntry]:
        """Get entries between two dates (inclusive), in insertion order."""
        return [e for e in self._entries if start <= e.date <= end]

    def calculate_totals(
        self,
        period: Period | str,
        reference: date,
        job_filter: str = ALL_JOBS,
    ) -> CalculatedTotals:
        return calculate_totals(self.jobs, self.entries, period, reference, job_filter)
