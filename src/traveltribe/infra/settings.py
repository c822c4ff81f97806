"""Runtime settings read from the environment.

Only the API layer calls load_settings(); the domain receives every value
as an explicit argument.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo

from traveltribe.domain.booking_quote import PricingStrategy

DEFAULT_TIMEZONE = "Asia/Kolkata"


@dataclass(frozen=True)
class Settings:
    """Booking API settings.

    Attributes:
        hostel_timezone: IANA zone whose calendar date is "today" for
                         check-in validation.
        pricing_strategy: Strategy used when a request does not name one.
    """

    hostel_timezone: str = DEFAULT_TIMEZONE
    pricing_strategy: PricingStrategy = PricingStrategy.CALENDAR_MONTHS


def load_settings() -> Settings:
    """Build Settings from HOSTEL_TIMEZONE and PRICING_STRATEGY.

    Raises:
        ValueError: If PRICING_STRATEGY is unknown.
        zoneinfo.ZoneInfoNotFoundError: If HOSTEL_TIMEZONE is unknown.
    """
    tz_name = os.environ.get("HOSTEL_TIMEZONE", DEFAULT_TIMEZONE)
    ZoneInfo(tz_name)

    strategy = os.environ.get("PRICING_STRATEGY", PricingStrategy.CALENDAR_MONTHS.value)

    return Settings(
        hostel_timezone=tz_name,
        pricing_strategy=PricingStrategy(strategy),
    )
