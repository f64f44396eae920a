"""Shared fixtures for tests."""

from __future__ import annotations

from datetime import date, time
from decimal import Decimal

import pytest

from models import Currency, Duration, Job, Status, TimeRange, WorkEntry


@pytest.fixture
def job_a():
    """USD job paying 25/hour."""
    return Job(
        id="job-a",
        name="Cafe",
        hourly_rate=Decimal("25"),
        currency=Currency.USD,
        schedule=frozenset({1, 3, 5}),
    )


@pytest.fixture
def job_b():
    """EUR job paying 30/hour."""
    return Job(
        id="job-b",
        name="Tutoring",
        hourly_rate=Decimal("30"),
        currency=Currency.EUR,
    )


@pytest.fixture
def scenario_entries():
    """Entries for the first week of March 2024 (Sunday 2024-03-03 start)."""
    return [
        WorkEntry(
            id="e1",
            job_id="job-a",
            date=date(2024, 3, 4),
            detail=TimeRange(start_time=time(9, 0), end_time=time(17, 0), break_minutes=0),
        ),
        WorkEntry(
            id="e2",
            job_id="job-b",
            date=date(2024, 3, 4),
            detail=Duration(duration_hours=Decimal("4")),
        ),
        WorkEntry(
            id="e3",
            job_id="job-a",
            date=date(2024, 3, 5),
            detail=Status(status="off"),
        ),
    ]


@pytest.fixture
def store(job_a, job_b, scenario_entries):
    """An EntryStore holding both jobs and the scenario entries."""
    from store import EntryStore

    return EntryStore(jobs=[job_a, job_b], entries=scenario_entries)


@pytest.fixture
def sample_data():
    """Work-log data in its JSON record form."""
    return {
        "jobs": [
            {"id": "job-a", "name": "Cafe", "hourlyRate": 25, "currency": "USD", "schedule": [1, 3, 5]},
            {"id": "job-b", "name": "Tutoring", "hourlyRate": 30, "currency": "EUR", "schedule": []},
        ],
        "entries": [
            {"id": "e1", "jobId": "job-a", "date": "2024-03-04", "entryType": "time_range",
             "startTime": "09:00", "endTime": "17:00", "breakMinutes": 0},
            {"id": "e2", "jobId": "job-b", "date": "2024-03-04", "entryType": "duration",
             "durationHours": 4},
            {"id": "e3", "jobId": "job-a", "date": "2024-03-05", "entryType": "status",
             "status": "off"},
        ],
    }
