#!/usr/bin/env python3
"""Work-log command line: period totals, month calendar and Excel export."""

from __future__ import annotations

import argparse
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

from rich.console import Console
from rich.table import Table

import settings
from export import EXPORT_COLUMNS, export_month
from hours import hours_for
from import_data import load_store
from logger import add_file_handler, get_logger
from models import ALL_JOBS, CalculatedTotals, Period
from store import EntryStore
from utils import CURRENCY_SYMBOLS, bounds_for, get_month_grid, parse_iso_date

logger = get_logger("app")


def format_hours(hours: Decimal) -> str:
    return f"{hours:.2f}h"


def format_money(amount: Decimal, currency) -> str:
    return f"{CURRENCY_SYMBOLS.get(currency, '')}{amount:,.2f} {currency.value}"


def build_totals_table(store: EntryStore, totals: CalculatedTotals, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Job")
    table.add_column("Hours", justify="right")
    table.add_column("Earnings", justify="right")

    for job_id, hours in totals.hours_by_job.items():
        job = store.job_by_id(job_id)
        name = job.name if job else f"Unknown ({job_id})"
        earnings = totals.earnings_by_job.get(job_id)
        table.add_row(
            name,
            format_hours(hours),
            format_money(earnings, job.currency) if job and earnings is not None else "-",
        )

    table.add_section()
    table.add_row("Total", format_hours(totals.total_hours), f"{totals.total_days} days", style="bold")
    for currency, amount in totals.earnings_by_currency.items():
        table.add_row("", "", format_money(amount, currency), style="bold")
    return table


def build_calendar_table(store: EntryStore, year: int, month: int, job_id: str = ALL_JOBS) -> Table:
    """Month grid with the hours logged on each day."""
    table = Table(title=date(year, month, 1).strftime("%B %Y"))
    for name in ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"):
        table.add_column(name, justify="right")

    for row in get_month_grid(year, month):
        cells = []
        for day in row:
            if day.month != month:
                cells.append("")
                continue
            entries = store.entries_on_date(day)
            if job_id != ALL_JOBS:
                entries = [e for e in entries if e.job_id == job_id]
            hours = sum((hours_for(e) for e in entries), Decimal("0"))
            cells.append(f"{day.day}\n{format_hours(hours)}" if entries else str(day.day))
        table.add_row(*cells)
    return table


def cmd_totals(args, config, console: Console) -> int:
    store = load_store(args.data, config)
    reference = parse_iso_date(args.date) if args.date else date.today()
    if reference is None:
        console.print(f"[red]Invalid date: {args.date}[/red]")
        return 1

    totals = store.calculate_totals(args.period, reference, args.job)
    start, end = bounds_for(args.period, reference)
    title = f"{args.period.capitalize()} {start.isoformat()} to {end.isoformat()}"
    console.print(build_totals_table(store, totals, title))
    return 0


def cmd_calendar(args, config, console: Console) -> int:
    store = load_store(args.data, config)
    today = date.today()
    console.print(build_calendar_table(store, args.year or today.year, args.month or today.month, args.job))
    return 0


def cmd_export(args, config, console: Console) -> int:
    store = load_store(args.data, config)
    today = date.today()
    year = args.year or today.year
    month = args.month or today.month
    output_dir = Path(args.output or config.export_dir or ".")
    columns = args.columns.split(",") if args.columns else EXPORT_COLUMNS

    try:
        path = export_month(store, year, month, output_dir, args.job, columns)
    except ValueError as e:
        console.print(f"[yellow]{e}[/yellow]")
        return 1
    console.print(f"Exported to {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Work hours log")
    parser.add_argument("--config", type=Path, help="Config file (default: $WORKLOG_CONFIG)")
    sub = parser.add_subparsers(dest="command", required=True)

    totals = sub.add_parser("totals", help="Show hours and earnings for a period")
    totals.add_argument("data", type=Path, help="JSON file with jobs and entries")
    totals.add_argument("--period", choices=[p.value for p in Period], default=Period.WEEK.value)
    totals.add_argument("--date", help="Reference date YYYY-MM-DD (default: today)")
    totals.add_argument("--job", default=ALL_JOBS, help="Job id or 'all'")
    totals.set_defaults(func=cmd_totals)

    calendar = sub.add_parser("calendar", help="Show a month calendar of daily hours")
    calendar.add_argument("data", type=Path, help="JSON file with jobs and entries")
    calendar.add_argument("--year", type=int)
    calendar.add_argument("--month", type=int, choices=range(1, 13))
    calendar.add_argument("--job", default=ALL_JOBS, help="Job id or 'all'")
    calendar.set_defaults(func=cmd_calendar)

    export = sub.add_parser("export", help="Export a month to Excel")
    export.add_argument("data", type=Path, help="JSON file with jobs and entries")
    export.add_argument("--year", type=int)
    export.add_argument("--month", type=int, choices=range(1, 13))
    export.add_argument("--job", default=ALL_JOBS, help="Job id or 'all'")
    export.add_argument("--columns", help="Comma separated: " + ",".join(EXPORT_COLUMNS))
    export.add_argument("--output", help="Output directory")
    export.set_defaults(func=cmd_export)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = settings.load_config(args.config)
    if config.log_file:
        add_file_handler(config.log_file)

    try:
        return args.func(args, config, Console())
    except ValueError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
