"""Booking quote domain logic - monthly hostel pricing.

Pure functions: no DB, no clock, no environment. The caller supplies the
room catalog and the dates, and re-runs the calculator on every change.

Pricing rule: partial months are billed as full months (no pro-rating),
minimum 1 month, plus a security deposit of exactly one month's rent.
"""

from __future__ import annotations

import calendar
import math
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Any, Iterable


class PricingStrategy(str, Enum):
    CALENDAR_MONTHS = "calendar_months"
    FLAT_TWO_MONTHS = "flat_two_months"


@dataclass(frozen=True)
class RoomType:
    """Bookable room category from a hostel catalog."""

    type: str
    price_per_month: int
    display_name: str | None = None

    def __post_init__(self) -> None:
        if self.price_per_month < 0:
            raise ValueError("price_per_month must be >= 0")

    @property
    def label(self) -> str:
        return self.display_name or self.type

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "RoomType":
        """Build from a catalog record shaped {"type": ..., "pricePerMonth": ...}."""
        return cls(
            type=record["type"],
            price_per_month=int(record["pricePerMonth"]),
            display_name=record.get("displayName"),
        )


@dataclass(frozen=True)
class DateRange:
    check_in: date
    check_out: date


@dataclass(frozen=True)
class BookingQuote:
    """Pricing breakdown for a candidate booking.

    total_amount is always derived, never stored.
    """

    room_type: str
    monthly_rent: int
    security_deposit: int
    number_of_months: int

    @property
    def total_rent(self) -> int:
        return self.monthly_rent * self.number_of_months

    @property
    def total_amount(self) -> int:
        return self.total_rent + self.security_deposit

    def to_dict(self) -> dict:
        return {
            "roomType": self.room_type,
            "monthlyRent": self.monthly_rent,
            "securityDeposit": self.security_deposit,
            "numberOfMonths": self.number_of_months,
            "totalRent": self.total_rent,
            "totalAmount": self.total_amount,
        }


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_calendar_month(day: date) -> date:
    """Return the same day-of-month one calendar month later.

    Days past the end of the target month roll over into the next one:
    2024-01-31 -> 2024-03-02, 2023-01-31 -> 2023-03-03.
    """
    year = day.year + day.month // 12
    month = day.month % 12 + 1
    last_day = days_in_month(year, month)
    if day.day <= last_day:
        return day.replace(year=year, month=month)
    return date(year, month, last_day) + timedelta(days=day.day - last_day)


def compute_duration(check_in: date, check_out: date) -> int:
    """Billable months between check-in and check-out.

    Leftover days count as a fraction of the check-out month and any
    fraction is rounded up. A negative day difference contributes nothing.
    Never returns less than 1.
    """
    whole_months = (check_out.year - check_in.year) * 12 + (
        check_out.month - check_in.month
    )
    month_days = days_in_month(check_out.year, check_out.month)
    remaining_days = check_out.day - check_in.day

    total_months = whole_months + (
        remaining_days / month_days if remaining_days > 0 else 0
    )
    return max(1, math.ceil(total_months))


def compute_quote(room_type: RoomType | None, number_of_months: int) -> BookingQuote | None:
    """Build the quote for a room and a billed duration.

    Returns None when no room is selected.
    """
    if room_type is None:
        return None

    monthly_rent = room_type.price_per_month
    return BookingQuote(
        room_type=room_type.type,
        monthly_rent=monthly_rent,
        security_deposit=monthly_rent,
        number_of_months=number_of_months,
    )


def find_room_type(catalog: Iterable[RoomType], room_selection: str | None) -> RoomType | None:
    """First catalog entry whose identifier equals room_selection."""
    if not room_selection:
        return None
    for room in catalog:
        if room.type == room_selection:
            return room
    return None


def billed_months(
    check_in: date,
    check_out: date,
    strategy: PricingStrategy | str = PricingStrategy.CALENDAR_MONTHS,
) -> int:
    """Months to bill under a pricing strategy.

    FLAT_TWO_MONTHS bills one month of rent regardless of dates; with the
    deposit that makes a flat two-month charge.
    """
    if isinstance(strategy, str):
        strategy = PricingStrategy(strategy)

    if strategy == PricingStrategy.CALENDAR_MONTHS:
        return compute_duration(check_in, check_out)

    if strategy == PricingStrategy.FLAT_TWO_MONTHS:
        return 1

    raise ValueError(f"Unknown pricing strategy: {strategy}")


def quote_booking(
    catalog: Iterable[RoomType],
    room_selection: str | None,
    check_in: date,
    check_out: date,
    strategy: PricingStrategy | str = PricingStrategy.CALENDAR_MONTHS,
) -> BookingQuote | None:
    """Resolve the selected room and quote it for the given dates.

    Returns None when the selection is empty or not in the catalog.
    Date ordering is not checked here; see validate_booking.
    """
    room = find_room_type(catalog, room_selection)
    if room is None:
        return None
    return compute_quote(room, billed_months(check_in, check_out, strategy))
