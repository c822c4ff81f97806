"""Booking form validation.

Fail-fast: checks run in a fixed order and the first failure wins.
Never raises for bad input; the reason is returned to the caller, which
shows it to the guest verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Iterable

from traveltribe.domain.booking_quote import (
    DateRange,
    RoomType,
    add_calendar_month,
    find_room_type,
)

_EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
_PHONE_PATTERN = re.compile(r"[0-9]{10}")
_ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class Gender(str, Enum):
    FEMALE = "female"
    MALE = "male"
    OTHER = "other"


_GENDERS = tuple(g.value for g in Gender)


class ValidationFailure(str, Enum):
    MISSING_NAME = "Missing Name"
    INVALID_EMAIL = "Invalid Email"
    INVALID_PHONE = "Invalid Phone Number"
    SELECT_GENDER = "Select Gender"
    SELECT_ROOM = "Select a Room"
    INVALID_ROOM = "Invalid Room Selection"
    MISSING_DATES = "Missing Check-in or Check-out Date"
    INVALID_CHECK_IN = "Invalid Check-in Date"
    INVALID_CHECK_OUT = "Invalid Check-out Date"
    MINIMUM_STAY = "Minimum Stay Required"


_DESCRIPTIONS: dict[ValidationFailure, str] = {
    ValidationFailure.MISSING_NAME: "Please enter your full name.",
    ValidationFailure.INVALID_EMAIL: "Please enter a valid email address.",
    ValidationFailure.INVALID_PHONE: "Please enter a valid 10-digit phone number",
    ValidationFailure.SELECT_GENDER: "Please select your gender.",
    ValidationFailure.SELECT_ROOM: "Please select a room type.",
    ValidationFailure.INVALID_ROOM: "Please select a valid room type.",
    ValidationFailure.MISSING_DATES: "Please select both check-in and check-out dates.",
    ValidationFailure.INVALID_CHECK_IN: "Check-in date cannot be in the past",
    ValidationFailure.INVALID_CHECK_OUT: "Check-out date must be after check-in date",
    ValidationFailure.MINIMUM_STAY: "Booking must be for at least 1 month",
}


@dataclass(frozen=True)
class ContactDetails:
    name: str | None
    email: str | None
    phone: str | None
    gender: str | None
    occupation: str | None = None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate_booking: valid, or the first failing check."""

    failure: ValidationFailure | None = None

    @property
    def is_valid(self) -> bool:
        return self.failure is None

    @property
    def reason(self) -> str | None:
        return self.failure.value if self.failure else None

    @property
    def description(self) -> str | None:
        return _DESCRIPTIONS[self.failure] if self.failure else None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def fail(cls, failure: ValidationFailure) -> "ValidationResult":
        return cls(failure=failure)


def parse_form_date(value: date | str | None) -> date | None:
    """Accept a date or a strict YYYY-MM-DD string; anything else is None."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not _ISO_DATE_PATTERN.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def validate_dates(
    check_in: date | str | None,
    check_out: date | str | None,
    *,
    today: date,
) -> ValidationResult:
    """Date rules: present, not in the past, ordered, at least one month."""
    check_in = parse_form_date(check_in)
    check_out = parse_form_date(check_out)

    if check_in is None or check_out is None:
        return ValidationResult.fail(ValidationFailure.MISSING_DATES)

    if check_in < today:
        return ValidationResult.fail(ValidationFailure.INVALID_CHECK_IN)

    if check_out <= check_in:
        return ValidationResult.fail(ValidationFailure.INVALID_CHECK_OUT)

    if check_out < add_calendar_month(check_in):
        return ValidationResult.fail(ValidationFailure.MINIMUM_STAY)

    return ValidationResult.ok()


def validate_contact(contact: ContactDetails) -> ValidationResult:
    if not (contact.name or "").strip():
        return ValidationResult.fail(ValidationFailure.MISSING_NAME)

    email = contact.email or ""
    if not email.strip() or not _EMAIL_PATTERN.search(email):
        return ValidationResult.fail(ValidationFailure.INVALID_EMAIL)

    if not _PHONE_PATTERN.fullmatch(contact.phone or ""):
        return ValidationResult.fail(ValidationFailure.INVALID_PHONE)

    if contact.gender not in _GENDERS:
        return ValidationResult.fail(ValidationFailure.SELECT_GENDER)

    return ValidationResult.ok()


def validate_booking(
    date_range: DateRange | tuple[date | str | None, date | str | None],
    contact: ContactDetails,
    room_selection: str | None,
    catalog: Iterable[RoomType],
    *,
    today: date,
) -> ValidationResult:
    """Validate a booking form before payment.

    Args:
        date_range: DateRange, or a raw (check_in, check_out) pair as typed
            into the form (ISO strings, dates or None).
        contact: Guest contact details.
        room_selection: Identifier of the chosen room type.
        catalog: Room types offered by the hostel.
        today: Calendar date used as the check-in floor.

    Returns:
        ValidationResult carrying the first failing reason, if any.
    """
    result = validate_contact(contact)
    if not result.is_valid:
        return result

    if not room_selection:
        return ValidationResult.fail(ValidationFailure.SELECT_ROOM)

    if find_room_type(catalog, room_selection) is None:
        return ValidationResult.fail(ValidationFailure.INVALID_ROOM)

    if isinstance(date_range, DateRange):
        check_in, check_out = date_range.check_in, date_range.check_out
    else:
        check_in, check_out = date_range

    return validate_dates(check_in, check_out, today=today)
