"""Booking quote and validation endpoints for the booking form.

POST /bookings/quote     → live booking summary for dates + room
POST /bookings/validate  → fail-fast form validation before payment

The room catalog travels in the request body; this service does not own
hostel data.
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from traveltribe.api.deps import get_settings, get_today
from traveltribe.domain.booking_quote import PricingStrategy, RoomType, quote_booking
from traveltribe.domain.booking_validation import (
    ContactDetails,
    parse_form_date,
    validate_booking,
)
from traveltribe.infra.settings import Settings
from traveltribe.observability.logging import get_logger, log_event

logger = get_logger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


# ── Schemas ───────────────────────────────────────────────────────────────────


class RoomTypeIn(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    type: str
    price_per_month: int = Field(alias="pricePerMonth", ge=0)
    display_name: str | None = Field(default=None, alias="displayName")

    def to_domain(self) -> RoomType:
        return RoomType(
            type=self.type,
            price_per_month=self.price_per_month,
            display_name=self.display_name,
        )


class QuoteRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    check_in: date = Field(alias="checkIn")
    check_out: date = Field(alias="checkOut")
    room_selection: str | None = Field(default=None, alias="roomSelection")
    room_types: list[RoomTypeIn] = Field(default_factory=list, alias="roomTypes")
    pricing_strategy: PricingStrategy | None = Field(default=None, alias="pricingStrategy")


class ValidateBookingRequest(BaseModel):
    """Raw form state; dates stay strings so bad input maps to a reason."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    check_in: str | None = Field(default=None, alias="checkIn")
    check_out: str | None = Field(default=None, alias="checkOut")
    room_selection: str | None = Field(default=None, alias="roomSelection")
    room_types: list[RoomTypeIn] = Field(default_factory=list, alias="roomTypes")
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    gender: str | None = None
    occupation: str | None = None
    pricing_strategy: PricingStrategy | None = Field(default=None, alias="pricingStrategy")


# ── POST /bookings/quote ──────────────────────────────────────────────────────


@router.post("/quote")
def quote(
    body: QuoteRequest,
    settings: Settings = Depends(get_settings),
) -> dict:
    """Compute the booking summary shown next to the form.

    Returns {"quote": null} when no room (or an unknown room) is selected.
    """
    strategy = body.pricing_strategy or settings.pricing_strategy
    catalog = [r.to_domain() for r in body.room_types]

    result = quote_booking(
        catalog, body.room_selection, body.check_in, body.check_out, strategy
    )

    log_event(
        logger,
        "booking quote computed",
        room_type=body.room_selection,
        strategy=strategy.value,
        number_of_months=result.number_of_months if result else None,
    )
    return {"quote": result.to_dict() if result else None}


# ── POST /bookings/validate ───────────────────────────────────────────────────


@router.post("/validate")
def validate(
    body: ValidateBookingRequest,
    settings: Settings = Depends(get_settings),
    today: date = Depends(get_today),
) -> dict:
    """Validate the booking form; on success include the final quote.

    Always 200: an invalid booking is a normal outcome carrying the
    user-facing reason.
    """
    catalog = [r.to_domain() for r in body.room_types]
    contact = ContactDetails(
        name=body.name,
        email=body.email,
        phone=body.phone,
        gender=body.gender,
        occupation=body.occupation,
    )

    result = validate_booking(
        (body.check_in, body.check_out),
        contact,
        body.room_selection,
        catalog,
        today=today,
    )

    if not result.is_valid:
        log_event(
            logger,
            "booking rejected",
            reason=result.reason,
            email=body.email,
            phone=body.phone,
        )
        return {
            "valid": False,
            "reason": result.reason,
            "description": result.description,
        }

    strategy = body.pricing_strategy or settings.pricing_strategy
    booking_quote = quote_booking(
        catalog,
        body.room_selection,
        parse_form_date(body.check_in),
        parse_form_date(body.check_out),
        strategy,
    )

    log_event(
        logger,
        "booking validated",
        room_type=body.room_selection,
        total_amount=booking_quote.total_amount,
    )
    return {"valid": True, "quote": booking_quote.to_dict()}
