from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from decimal import Decimal
from enum import Enum
from typing import Union

ALL_JOBS = "all"


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CNY = "CNY"
    KRW = "KRW"
    INR = "INR"
    RUB = "RUB"
    TRY = "TRY"
    BRL = "BRL"
    CAD = "CAD"
    AUD = "AUD"
    CHF = "CHF"
    SEK = "SEK"
    NOK = "NOK"
    DKK = "DKK"
    PLN = "PLN"
    MXN = "MXN"
    IDR = "IDR"
    THB = "THB"
    VND = "VND"
    MYR = "MYR"
    PHP = "PHP"
    SGD = "SGD"
    HKD = "HKD"
    NZD = "NZD"
    ZAR = "ZAR"
    SAR = "SAR"
    AED = "AED"
    ARS = "ARS"
    CLP = "CLP"
    COP = "COP"
    EGP = "EGP"
    ILS = "ILS"
    TWD = "TWD"


class EntryType(str, Enum):
    TIME_RANGE = "time_range"
    DURATION = "duration"
    STATUS = "status"


class Period(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


@dataclass
class Job:
    id: str
    name: str
    hourly_rate: Decimal = Decimal("0")
    currency: Currency = Currency.USD
    # Weekday indices, 0=Sunday..6=Saturday. Planning only.
    schedule: frozenset[int] = field(default_factory=frozenset)


@dataclass(frozen=True)
class TimeRange:
    start_time: time | None = None
    end_time: time | None = None
    break_minutes: Decimal | int | None = None

    entry_type = EntryType.TIME_RANGE


@dataclass(frozen=True)
class Duration:
    duration_hours: Decimal | None = None

    entry_type = EntryType.DURATION


@dataclass(frozen=True)
class Status:
    status: str = ""

    entry_type = EntryType.STATUS


EntryDetail = Union[TimeRange, Duration, Status]


@dataclass
class WorkEntry:
    id: str
    job_id: str
    date: date
    detail: EntryDetail

    @property
    def entry_type(self) -> EntryType:
        return self.detail.entry_type


@dataclass
class CalculatedTotals:
    total_hours: Decimal = Decimal("0")
    total_days: int = 0
    hours_by_job: dict[str, Decimal] = field(default_factory=dict)
    earnings_by_job: dict[str, Decimal] = field(default_factory=dict)
    earnings_by_currency: dict[Currency, Decimal] = field(default_factory=dict)


@dataclass
class Config:
    default_currency: Currency = Currency.USD
    export_dir: str = ""
    log_file: str = ""
