"""Profile page helpers: minimal PATCH payload and booking history filter.

Pure functions. The caller fetches the stored profile and bookings and
sends the resulting payload to the user API.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

PASSWORD_PLACEHOLDER = "*******"
_FLAG_FIELD = "isPasswordChanged"


class NoProfileChanges(Exception):
    """Raised when the edited profile matches the stored one."""

    def __init__(self) -> None:
        super().__init__("No changes to update")


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


ALL_STATUSES = "all"


def password_changed_after_edit(field: str, value: str) -> bool:
    """Whether editing *field* to *value* counts as a password change."""
    return field == "password" and value != PASSWORD_PLACEHOLDER


def build_profile_patch(
    form: dict[str, Any],
    stored: dict[str, Any],
    *,
    password_changed: bool,
) -> dict[str, Any]:
    """Diff the edited form against the stored profile.

    Keeps fields that are not "", not the password placeholder and
    different from the stored value. The password is sent only when the
    user actually edited it.

    Raises:
        NoProfileChanges: If nothing is left to send.
    """
    changes = {
        key: value
        for key, value in form.items()
        if key != _FLAG_FIELD
        and value != ""
        and value != PASSWORD_PLACEHOLDER
        and value != stored.get(key)
    }

    if not password_changed:
        changes.pop("password", None)

    if not changes:
        raise NoProfileChanges()

    return changes


def filter_bookings(bookings: Iterable[dict], status_filter: str = ALL_STATUSES) -> list[dict]:
    """Bookings matching a status, or all of them for "all"."""
    if status_filter == ALL_STATUSES:
        return list(bookings)

    status = BookingStatus(status_filter)
    return [b for b in bookings if b.get("status") == status.value]
