"""Tests for booking duration and quote calculation."""

from datetime import date, timedelta

import pytest

from traveltribe.domain.booking_quote import (
    BookingQuote,
    PricingStrategy,
    RoomType,
    add_calendar_month,
    billed_months,
    compute_duration,
    compute_quote,
    find_room_type,
    quote_booking,
)


class TestComputeDuration:
    def test_exactly_one_month_same_day(self):
        assert compute_duration(date(2024, 1, 15), date(2024, 2, 15)) == 1

    @pytest.mark.parametrize("day", [1, 10, 28])
    def test_exactly_one_month_any_month(self, day):
        for month in range(1, 13):
            check_in = date(2025, month, day)
            assert compute_duration(check_in, add_calendar_month(check_in)) == 1

    def test_negative_remaining_days_contribute_nothing(self):
        """Jan 15 -> Mar 1: 2 whole months, -14 days ignored."""
        assert compute_duration(date(2024, 1, 15), date(2024, 3, 1)) == 2

    def test_partial_month_rounds_up(self):
        """Jan 10 -> Feb 20: 1 + 10/29 months rounds up to 2."""
        assert compute_duration(date(2024, 1, 10), date(2024, 2, 20)) == 2

    def test_single_extra_day_rounds_up(self):
        assert compute_duration(date(2024, 1, 15), date(2024, 2, 16)) == 2

    def test_minimum_one_month(self):
        assert compute_duration(date(2024, 1, 15), date(2024, 1, 20)) == 1
        assert compute_duration(date(2024, 1, 15), date(2024, 1, 15)) == 1

    def test_reversed_dates_floor_at_one(self):
        assert compute_duration(date(2024, 5, 1), date(2024, 1, 1)) == 1

    def test_across_year_boundary(self):
        assert compute_duration(date(2024, 11, 5), date(2025, 2, 5)) == 3

    def test_monotonic_in_checkout(self):
        check_in = date(2024, 1, 31)
        previous = 0
        for offset in range(0, 400):
            months = compute_duration(check_in, check_in + timedelta(days=offset))
            assert months >= previous
            previous = months


class TestAddCalendarMonth:
    def test_same_day_next_month(self):
        assert add_calendar_month(date(2024, 1, 15)) == date(2024, 2, 15)

    def test_december_rolls_year(self):
        assert add_calendar_month(date(2024, 12, 20)) == date(2025, 1, 20)

    def test_overflow_leap_year(self):
        assert add_calendar_month(date(2024, 1, 31)) == date(2024, 3, 2)

    def test_overflow_common_year(self):
        assert add_calendar_month(date(2023, 1, 31)) == date(2023, 3, 3)

    def test_overflow_thirty_day_month(self):
        assert add_calendar_month(date(2024, 3, 31)) == date(2024, 5, 1)


class TestComputeQuote:
    def test_deposit_equals_one_month_rent(self):
        quote = compute_quote(RoomType(type="Single", price_per_month=7000), 2)
        assert quote.monthly_rent == 7000
        assert quote.security_deposit == 7000
        assert quote.total_amount == 7000 * 2 + 7000

    def test_total_is_derived(self):
        room = RoomType(type="Dorm", price_per_month=3500)
        for months in range(1, 13):
            quote = compute_quote(room, months)
            assert quote.total_amount == quote.monthly_rent * months + quote.security_deposit
            assert quote.total_rent == quote.monthly_rent * months

    def test_no_room_is_no_quote(self):
        assert compute_quote(None, 3) is None

    def test_pure(self):
        room = RoomType(type="Single", price_per_month=7000)
        assert compute_quote(room, 4) == compute_quote(room, 4)

    def test_to_dict_summary(self):
        quote = BookingQuote(
            room_type="Single", monthly_rent=7000, security_deposit=7000, number_of_months=2
        )
        assert quote.to_dict() == {
            "roomType": "Single",
            "monthlyRent": 7000,
            "securityDeposit": 7000,
            "numberOfMonths": 2,
            "totalRent": 14000,
            "totalAmount": 21000,
        }


class TestRoomType:
    def test_from_record(self):
        room = RoomType.from_record({"type": "Single", "pricePerMonth": 7000})
        assert room.type == "Single"
        assert room.price_per_month == 7000
        assert room.label == "Single"

    def test_display_name_label(self):
        room = RoomType.from_record(
            {"type": "dbl", "pricePerMonth": 5000, "displayName": "Double Sharing"}
        )
        assert room.label == "Double Sharing"

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError):
            RoomType(type="Single", price_per_month=-1)


class TestQuoteBooking:
    def test_scenario_march_checkout(self, catalog):
        quote = quote_booking(catalog, "Single", date(2024, 1, 15), date(2024, 3, 1))
        assert quote.number_of_months == 2
        assert quote.total_amount == 21000

    def test_scenario_leap_february(self, catalog):
        quote = quote_booking(catalog, "Double Sharing", date(2024, 1, 10), date(2024, 2, 20))
        assert quote.number_of_months == 2
        assert quote.total_amount == 15000

    def test_unknown_room(self, catalog):
        assert quote_booking(catalog, "Penthouse", date(2024, 1, 10), date(2024, 3, 10)) is None

    def test_empty_selection(self, catalog):
        assert quote_booking(catalog, "", date(2024, 1, 10), date(2024, 3, 10)) is None

    def test_flat_two_months_ignores_dates(self, catalog):
        quote = quote_booking(
            catalog,
            "Single",
            date(2024, 1, 10),
            date(2024, 9, 25),
            PricingStrategy.FLAT_TWO_MONTHS,
        )
        assert quote.number_of_months == 1
        assert quote.total_amount == 7000 * 2

    def test_find_room_type(self, catalog):
        assert find_room_type(catalog, "Dorm").price_per_month == 3500
        assert find_room_type(catalog, None) is None


class TestBilledMonths:
    def test_accepts_strategy_string(self):
        assert billed_months(date(2024, 1, 10), date(2024, 4, 10), "calendar_months") == 3

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            billed_months(date(2024, 1, 10), date(2024, 4, 10), "weekly")
