#!/usr/bin/env python3
"""Source gate: PII-safe logging and a pure booking domain.

Fails if:
- print( found in runtime code (src/**)
- a logger call mentions guest contact fields without redaction
- src/traveltribe/domain/** reads the clock, the environment or logs

Usage:
    python scripts/gate_source_rules.py
"""

import re
import sys
from pathlib import Path

# Guest fields that must not reach a logger call unredacted
SENSITIVE_KEYWORDS = (
    "email",
    "phone",
    "password",
    "contact",
    "body.name",
)

PRINT_PATTERN = re.compile(r"\bprint\s*\(")

LOGGER_CALL_PATTERN = re.compile(
    r"logger\.(debug|info|warning|error|critical|exception|log)\s*\("
)

REDACTION_PATTERNS = (
    "safe_log_context",
    "redact_value",
    "redact_string",
)

# Ambient access the domain package must not use
DOMAIN_FORBIDDEN = (
    (re.compile(r"^\s*import os\b|^\s*from os\b"), "environment access"),
    (re.compile(r"\bdate\.today\s*\(|\bdatetime\.now\s*\(|\butc_now\s*\("), "clock access"),
    (re.compile(r"^\s*import logging\b|\bget_logger\s*\("), "logging"),
)


def _code_part(line: str) -> str:
    return line.split("#")[0] if "#" in line else line


def check_file(filepath: Path, *, domain: bool = False) -> list[str]:
    """Check a single file for violations. Returns list of error messages."""
    errors = []
    try:
        content = filepath.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        return []

    for lineno, line in enumerate(content.splitlines(), start=1):
        if line.lstrip().startswith("#"):
            continue
        code = _code_part(line)

        if PRINT_PATTERN.search(code):
            errors.append(f"{filepath}:{lineno}: print() not allowed in runtime code")

        if LOGGER_CALL_PATTERN.search(code):
            code_lower = code.lower()
            for keyword in SENSITIVE_KEYWORDS:
                if keyword in code_lower and not any(rp in code for rp in REDACTION_PATTERNS):
                    errors.append(
                        f"{filepath}:{lineno}: logger call with '{keyword}' "
                        "must use redaction (log_event/safe_log_context)"
                    )

        if domain:
            for pattern, what in DOMAIN_FORBIDDEN:
                if pattern.search(code):
                    errors.append(f"{filepath}:{lineno}: {what} not allowed in domain code")

    return errors


def check_tree(src_dir: Path) -> list[str]:
    all_errors: list[str] = []
    domain_dir = src_dir / "traveltribe" / "domain"
    for pyfile in sorted(src_dir.rglob("*.py")):
        all_errors.extend(check_file(pyfile, domain=domain_dir in pyfile.parents))
    return all_errors


def main() -> int:
    src_dir = Path("src")

    if not src_dir.exists():
        src_dir = Path(__file__).parent.parent / "src"

    if not src_dir.exists():
        sys.stderr.write("Error: src directory not found\n")
        return 1

    all_errors = check_tree(src_dir)

    if all_errors:
        sys.stderr.write("Source gate FAILED:\n")
        for err in all_errors:
            sys.stderr.write(f"  {err}\n")
        return 1

    sys.stdout.write("Source gate PASSED\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
