"""Shared pytest fixtures for TravelTribe booking tests."""
import sys
sys.dont_write_bytecode = True

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from traveltribe.api.deps import get_today  # noqa: E402
from traveltribe.api.factory import create_app  # noqa: E402
from traveltribe.domain.booking_quote import RoomType  # noqa: E402
from traveltribe.infra.settings import Settings  # noqa: E402

FIXED_TODAY = date(2024, 1, 10)


@pytest.fixture
def fixed_today() -> date:
    return FIXED_TODAY


@pytest.fixture
def catalog() -> list[RoomType]:
    return [
        RoomType(type="Single", price_per_month=7000),
        RoomType(type="Double Sharing", price_per_month=5000),
        RoomType(type="Dorm", price_per_month=3500),
    ]


@pytest.fixture
def client():
    """Test client with a pinned "today" and default settings."""
    app = create_app(settings=Settings())
    app.dependency_overrides[get_today] = lambda: FIXED_TODAY
    with TestClient(app) as c:
        yield c
