"""Period totals of hours, worked days and earnings."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable

from hours import hours_for
from logger import get_logger
from models import ALL_JOBS, CalculatedTotals, Job, Period, WorkEntry
from utils import bounds_for

logger = get_logger(__name__)


def calculate_totals(
    jobs: Iterable[Job],
    entries: Iterable[WorkEntry],
    period: Period | str,
    reference: date,
    job_filter: str = ALL_JOBS,
) -> CalculatedTotals:
    """Aggregate the entries falling in the period around reference.

    job_filter is ALL_JOBS or a single job id. Earnings are kept per
    currency and never converted. An unknown job id gives empty totals.
    """
    start, end = bounds_for(period, reference)
    all_jobs = job_filter == ALL_JOBS

    totals = CalculatedTotals()
    worked_days: set[date] = set()

    for entry in entries:
        if not start <= entry.date <= end:
            continue
        if not all_jobs and entry.job_id != job_filter:
            continue

        hours = hours_for(entry)
        if hours > 0:
            worked_days.add(entry.date)
        totals.total_hours += hours
        totals.hours_by_job[entry.job_id] = totals.hours_by_job.get(entry.job_id, Decimal("0")) + hours

    totals.total_days = len(worked_days)

    for job in jobs:
        if not all_jobs and job.id != job_filter:
            continue
        hours = totals.hours_by_job.get(job.id, Decimal("0"))
        if hours <= 0:
            continue
        earnings = hours * job.hourly_rate
        totals.earnings_by_job[job.id] = earnings
        totals.earnings_by_currency[job.currency] = (
            totals.earnings_by_currency.get(job.currency, Decimal("0")) + earnings
        )

    logger.debug(
        "Totals %s..%s (%s): %s hours over %d days",
        start, end, job_filter, totals.total_hours, totals.total_days,
    )
    return totals
