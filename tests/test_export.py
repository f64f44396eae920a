"""Tests for export.py - monthly Excel export."""

from datetime import date, time
from decimal import Decimal

import pytest
from openpyxl import load_workbook

from export import EXPORT_COLUMNS, SHEET_TITLE, default_filename, export_month, export_rows, write_workbook
from models import Status, TimeRange, WorkEntry


class TestExportRows:
    """Tests for export_rows."""

    def test_all_columns(self, store):
        rows = export_rows(store, 2024, 3)
        assert rows[0] == {
            "Date": "2024-03-04",
            "Job": "Cafe",
            "Time": "09:00 - 17:00",
            "Duration (h)": 8.0,
            "Earnings": 200.0,
            "Currency": "USD",
            "Notes": "",
        }
        assert rows[1]["Time"] == ""
        assert rows[1]["Earnings"] == 120.0
        assert rows[1]["Currency"] == "EUR"
        assert rows[2]["Duration (h)"] == 0.0

    def test_job_filter(self, store):
        rows = export_rows(store, 2024, 3, job_filter="job-b")
        assert [r["Job"] for r in rows] == ["Tutoring"]

    def test_selected_columns_only(self, store):
        rows = export_rows(store, 2024, 3, columns=("date", "duration"))
        assert rows[0] == {"Date": "2024-03-04", "Duration (h)": 8.0}

    def test_other_months_excluded(self, store):
        assert export_rows(store, 2024, 4) == []

    def test_sorted_by_date(self, store):
        store.add_entry(WorkEntry(id="", job_id="job-a", date=date(2024, 3, 1), detail=Status("worked")))
        rows = export_rows(store, 2024, 3)
        assert [r["Date"] for r in rows] == ["2024-03-01", "2024-03-04", "2024-03-04", "2024-03-05"]
        assert rows[0]["Duration (h)"] == 8.0

    def test_rounds_to_cents(self, store):
        store.add_entry(WorkEntry(
            id="",
            job_id="job-a",
            date=date(2024, 3, 20),
            detail=TimeRange(start_time=time(9, 0), end_time=time(9, 20)),
        ))
        row = export_rows(store, 2024, 3)[-1]
        assert row["Duration (h)"] == 0.33
        assert row["Earnings"] == 8.33

    def test_unknown_job(self, store):
        store.add_entry(WorkEntry(id="", job_id="gone", date=date(2024, 3, 21), detail=Status("worked")))
        row = export_rows(store, 2024, 3)[-1]
        assert row["Job"] == "Unknown Job"
        assert row["Earnings"] == 0.0
        assert row["Currency"] == ""


class TestWriteWorkbook:
    """Tests for write_workbook and export_month."""

    def test_default_filename(self):
        assert default_filename(2024, 3) == "work-log-2024-3.xlsx"

    def test_writes_sheet(self, store, tmp_path):
        path = export_month(store, 2024, 3, tmp_path)
        assert path == tmp_path / "work-log-2024-3.xlsx"

        wb = load_workbook(path)
        ws = wb[SHEET_TITLE]
        header = [cell.value for cell in ws[1]]
        assert header == ["Date", "Job", "Time", "Duration (h)", "Earnings", "Currency", "Notes"]
        assert ws.max_row == 4
        assert ws["B2"].value == "Cafe"
        assert ws["E3"].value == 120

    def test_empty_rows_raise(self, tmp_path):
        with pytest.raises(ValueError):
            write_workbook([], tmp_path / "empty.xlsx")
        assert not (tmp_path / "empty.xlsx").exists()

    def test_export_columns_constant(self):
        assert EXPORT_COLUMNS == ("date", "job", "time", "duration", "earnings", "notes")


def test_decimal_hours_not_mutated(store):
    """Exporting leaves stored entries untouched."""
    before = store.entries
    export_rows(store, 2024, 3)
    assert store.entries == before
    assert store.entry_by_id("e2").detail.duration_hours == Decimal("4")
