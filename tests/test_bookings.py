"""Tests for the quote request store."""

from datetime import datetime, timezone

from pizzahouse.schemas.booking_schema import BookingStatus
from pizzahouse.tools.bookings import (
    add_booking,
    count_by_status,
    create_booking,
    delete_booking,
    get_booking,
    group_by_month,
    list_bookings,
    update_booking,
    update_status,
)
from tests.conftest import make_booking


def _submit(**overrides):
    data = {
        "name": "Maria da Silva",
        "tax_id": "123.456.789-00",
        "phone": "(43) 99999-0000",
        "address": "Rua das Flores, 100",
        "event_address": "Chácara Recanto Verde",
        "event_date": "2025-12-24",
        "start_time": "19:00",
        "adults": 10,
        "children": 2,
    }
    data.update(overrides)
    return create_booking(**data)


class TestCreateBooking:
    def test_new_request_is_pending(self):
        result = _submit()
        assert result["success"]
        booking = get_booking(result["booking_id"])
        assert booking.status == BookingStatus.PENDING
        assert booking.created_at is not None

    def test_missing_fields_rejected(self):
        result = _submit(name="", event_address="  ")
        assert not result["success"]
        assert "name" in result["message"]
        assert "event_address" in result["message"]

    def test_cpf_and_phone_masked(self):
        result = _submit(tax_id="12345678900", phone="43999990000")
        booking = get_booking(result["booking_id"])
        assert booking.tax_id == "123.456.789-00"
        assert booking.phone == "(43) 99999-0000"

    def test_landline_masked(self):
        booking = _submit(phone=" 43 3333-4444 ")["details"]
        assert booking.phone == "(43) 3333-4444"

    def test_needs_at_least_one_adult(self):
        result = _submit(adults=0)
        assert not result["success"]
        assert list_bookings() == []


class TestListBookings:
    def test_ordered_by_event_date(self):
        late = _submit(event_date="2026-02-01")["booking_id"]
        early = _submit(event_date="2025-11-15")["booking_id"]
        assert [b.id for b in list_bookings()] == [early, late]

    def test_filter_by_status(self):
        confirmed = _submit()["booking_id"]
        _submit()
        update_status(confirmed, BookingStatus.CONFIRMED)
        assert [b.id for b in list_bookings(BookingStatus.CONFIRMED)] == [confirmed]


class TestUpdates:
    def test_update_status(self):
        booking_id = _submit()["booking_id"]
        result = update_status(booking_id, BookingStatus.CANCELLED)
        assert result["success"]
        assert get_booking(booking_id).status == BookingStatus.CANCELLED

    def test_update_status_unknown(self):
        assert not update_status("nope", BookingStatus.CONFIRMED)["success"]

    def test_update_booking_fields(self):
        booking_id = _submit()["booking_id"]
        result = update_booking(booking_id, adults=20, start_time="20:00")
        assert result["success"]
        booking = get_booking(booking_id)
        assert booking.adults == 20
        assert booking.start_time == "20:00"

    def test_update_booking_masks_cpf(self):
        booking_id = _submit()["booking_id"]
        update_booking(booking_id, tax_id="98765432100")
        assert get_booking(booking_id).tax_id == "987.654.321-00"

    def test_update_booking_rejects_unknown_field(self):
        booking_id = _submit()["booking_id"]
        result = update_booking(booking_id, status="confirmado")
        assert not result["success"]
        assert "status" in result["message"]

    def test_delete(self):
        booking_id = _submit()["booking_id"]
        assert delete_booking(booking_id)["success"]
        assert get_booking(booking_id) is None
        assert not delete_booking(booking_id)["success"]


class TestSummaries:
    def test_count_by_status_includes_every_status(self):
        add_booking(make_booking(id="a", status="confirmado"))
        add_booking(make_booking(id="b", status="confirmado"))
        add_booking(make_booking(id="c", status="pendente"))
        counts = count_by_status(list_bookings())
        assert counts[BookingStatus.CONFIRMED] == 2
        assert counts[BookingStatus.PENDING] == 1
        assert counts[BookingStatus.CANCELLED] == 0
        assert counts[BookingStatus.COMPLETED] == 0

    def test_group_by_month_newest_first(self):
        add_booking(make_booking(id="a", created_at=datetime(2025, 9, 3, tzinfo=timezone.utc)))
        add_booking(make_booking(id="b", created_at=datetime(2025, 10, 20, tzinfo=timezone.utc)))
        add_booking(make_booking(id="c", created_at=datetime(2025, 10, 1, tzinfo=timezone.utc)))
        groups = group_by_month(list_bookings())
        assert list(groups) == ["2025-10", "2025-09"]
        assert [b.id for b in groups["2025-10"]] == ["b", "c"]
