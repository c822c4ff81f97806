"""Redaction helpers for safe logging. Guest data must pass through these."""

import re
from typing import Any

# Guest phone numbers are 10 digits, optionally with a country code
_PHONE_PATTERN = re.compile(r"\+?\d[\d\s\-()]{8,}\d")
_EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

_REDACTED = "[REDACTED]"

# Field names whose values are never logged, whatever they look like
SENSITIVE_FIELDS = frozenset({"name", "email", "phone", "password", "occupation"})


def redact_string(value: str) -> str:
    result = _PHONE_PATTERN.sub(_REDACTED, value)
    return _EMAIL_PATTERN.sub(_REDACTED, result)


def redact_value(value: Any) -> str:
    """Redact any value for safe logging. Returns string representation."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return redact_string(value)
    if isinstance(value, dict):
        # Structure only, never values
        return f"dict(keys={sorted(value.keys())})"
    if isinstance(value, (list, tuple, set, frozenset)):
        return f"list(len={len(value)})"
    return f"<{type(value).__name__}>"


def safe_log_context(**kwargs: Any) -> dict[str, str]:
    """Build a context dict safe for logging.

    Values of SENSITIVE_FIELDS are replaced wholesale; the rest go through
    redact_value.
    """
    return {
        k: _REDACTED if k in SENSITIVE_FIELDS and v else redact_value(v)
        for k, v in kwargs.items()
    }
