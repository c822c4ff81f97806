"""Shared FastAPI dependencies."""

from datetime import date

from fastapi import Request

from traveltribe.infra.settings import Settings
from traveltribe.infra.time import today_in


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_today(request: Request) -> date:
    """Calendar date in the hostel timezone; override in tests."""
    return today_in(get_settings(request).hostel_timezone)
