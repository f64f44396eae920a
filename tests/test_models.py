"""Tests for models.py - Job, entry variants and totals dataclasses."""

from datetime import date
from decimal import Decimal

import pytest

from models import (
    CalculatedTotals,
    Config,
    Currency,
    Duration,
    EntryType,
    Job,
    Period,
    Status,
    TimeRange,
    WorkEntry,
)


class TestEntryVariants:
    """Tests for the entry detail variants."""

    def test_entry_type_tags(self):
        """Each variant carries its wire tag."""
        assert TimeRange().entry_type is EntryType.TIME_RANGE
        assert Duration().entry_type is EntryType.DURATION
        assert Status().entry_type is EntryType.STATUS

    def test_entry_type_values(self):
        """Tags use the stored string values."""
        assert EntryType.TIME_RANGE.value == "time_range"
        assert EntryType.DURATION.value == "duration"
        assert EntryType.STATUS.value == "status"

    def test_variants_are_frozen(self):
        """Entry details cannot be mutated in place."""
        detail = Duration(duration_hours=Decimal("2"))
        with pytest.raises(AttributeError):
            detail.duration_hours = Decimal("3")  # type: ignore[misc]

    def test_work_entry_exposes_type(self):
        """WorkEntry reports the tag of its detail."""
        entry = WorkEntry(id="e", job_id="j", date=date(2024, 3, 4), detail=Status("worked"))
        assert entry.entry_type is EntryType.STATUS


class TestJob:
    """Tests for Job dataclass."""

    def test_default_values(self):
        """Test default job values."""
        job = Job(id="j", name="Shop")
        assert job.hourly_rate == Decimal("0")
        assert job.currency is Currency.USD
        assert job.schedule == frozenset()


class TestEnums:
    """Tests for Currency and Period."""

    def test_currency_from_code(self):
        assert Currency("VND") is Currency.VND

    def test_currency_set_is_closed(self):
        with pytest.raises(ValueError):
            Currency("XYZ")

    def test_currency_count(self):
        assert len(Currency) == 35

    def test_period_values(self):
        assert [p.value for p in Period] == ["day", "week", "month", "year"]


class TestCalculatedTotals:
    """Tests for CalculatedTotals defaults."""

    def test_defaults_are_empty(self):
        totals = CalculatedTotals()
        assert totals.total_hours == Decimal("0")
        assert totals.total_days == 0
        assert totals.hours_by_job == {}
        assert totals.earnings_by_job == {}
        assert totals.earnings_by_currency == {}

    def test_defaults_not_shared(self):
        first = CalculatedTotals()
        first.hours_by_job["x"] = Decimal("1")
        assert CalculatedTotals().hours_by_job == {}


class TestConfig:
    """Tests for Config dataclass."""

    def test_default_values(self):
        config = Config()
        assert config.default_currency is Currency.USD
        assert config.export_dir == ""
        assert config.log_file == ""
