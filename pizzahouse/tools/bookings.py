"""
Mock quote request store.

In production, this is the ``formularios_contato`` table on the hosted
backend. The contact form inserts rows; the admin dashboard lists,
confirms, cancels, edits and deletes them.
"""

import logging
import uuid
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Optional, TypedDict

from pizzahouse.schemas.booking_schema import BookingRequest, BookingStatus
from pizzahouse.utils import format_cpf, format_phone

logger = logging.getLogger(__name__)


class BookingResult(TypedDict, total=False):
    """Result from create_booking, update_status, update_booking or delete_booking."""

    success: bool
    message: str
    booking_id: str
    details: BookingRequest


_bookings: dict[str, BookingRequest] = {}

EDITABLE_FIELDS = {
    "full_name", "tax_id", "phone", "address", "event_address",
    "event_date", "start_time", "adults", "children", "notes",
}


def create_booking(
    name: str,
    tax_id: str,
    phone: str,
    address: str,
    event_address: str,
    event_date: str,
    start_time: str,
    adults: int,
    children: int = 0,
    notes: Optional[str] = None,
) -> BookingResult:
    """Store a new quote request submitted through the contact form."""
    missing = [
        field_name
        for field_name, value in [
            ("name", name),
            ("tax_id", tax_id),
            ("phone", phone),
            ("address", address),
            ("event_address", event_address),
            ("event_date", event_date),
            ("start_time", start_time),
        ]
        if not value or not value.strip()
    ]
    if missing:
        return {
            "success": False,
            "message": f"Cannot create booking - missing required fields: {', '.join(missing)}.",
        }
    if adults < 1 or children < 0:
        return {"success": False, "message": "Cannot create booking - invalid guest count."}

    booking = BookingRequest(
        id=uuid.uuid4().hex,
        full_name=name.strip(),
        tax_id=format_cpf(tax_id),
        phone=format_phone(phone),
        address=address.strip(),
        event_address=event_address.strip(),
        event_date=event_date.strip(),
        start_time=start_time.strip(),
        adults=adults,
        children=children,
        notes=notes or None,
        status=BookingStatus.PENDING,
        created_at=datetime.now(timezone.utc),
    )
    _bookings[booking.id] = booking
    logger.info("Booking created: %s for %s on %s", booking.id, booking.full_name, event_date)

    return {
        "success": True,
        "booking_id": booking.id,
        "message": f"Quote request received for {event_date} at {start_time}.",
        "details": booking,
    }


def get_booking(booking_id: str) -> Optional[BookingRequest]:
    """Retrieve a booking by id."""
    return _bookings.get(booking_id)


def list_bookings(status: Optional[BookingStatus] = None) -> list[BookingRequest]:
    """Return bookings ordered by event date, optionally filtered by status."""
    rows = [b for b in _bookings.values() if status is None or b.status == status]
    return sorted(rows, key=lambda b: (b.event_date, b.start_time))


def update_status(booking_id: str, status: BookingStatus) -> BookingResult:
    """Move a booking to a new lifecycle status."""
    booking = _bookings.get(booking_id)
    if booking is None:
        return {"success": False, "message": f"Booking {booking_id} not found."}
    _bookings[booking_id] = booking.model_copy(update={"status": status})
    logger.info("Booking %s status: %s -> %s", booking_id, booking.status.value, status.value)
    return {
        "success": True,
        "booking_id": booking_id,
        "message": f"Booking {booking_id} is now {status.value}.",
        "details": _bookings[booking_id],
    }


def update_booking(booking_id: str, **changes: Any) -> BookingResult:
    """Edit the client or event fields of a booking."""
    booking = _bookings.get(booking_id)
    if booking is None:
        return {"success": False, "message": f"Booking {booking_id} not found."}
    unknown = sorted(set(changes) - EDITABLE_FIELDS)
    if unknown:
        return {"success": False, "message": f"Unknown field(s): {', '.join(unknown)}."}
    if "tax_id" in changes:
        changes["tax_id"] = format_cpf(changes["tax_id"])
    if "phone" in changes:
        changes["phone"] = format_phone(changes["phone"])

    # Re-validate so edits go through the same coercion as new records
    updated = BookingRequest.model_validate({**booking.model_dump(), **changes})
    _bookings[booking_id] = updated
    logger.info("Booking %s updated: %s", booking_id, ", ".join(sorted(changes)))
    return {"success": True, "booking_id": booking_id, "message": "Booking updated.", "details": updated}


def delete_booking(booking_id: str) -> BookingResult:
    if _bookings.pop(booking_id, None) is None:
        return {"success": False, "message": f"Booking {booking_id} not found."}
    logger.info("Booking deleted: %s", booking_id)
    return {"success": True, "booking_id": booking_id, "message": f"Booking {booking_id} deleted."}


def count_by_status(bookings: list[BookingRequest]) -> dict[BookingStatus, int]:
    """Tally bookings per status; every status is present in the result."""
    counts = Counter(b.status for b in bookings)
    return {status: counts.get(status, 0) for status in BookingStatus}


def group_by_month(bookings: list[BookingRequest]) -> dict[str, list[BookingRequest]]:
    """Group bookings by creation month ('YYYY-MM'), newest month first."""
    groups: dict[str, list[BookingRequest]] = {}
    for booking in sorted(
        bookings,
        key=lambda b: b.created_at or datetime.min.replace(tzinfo=timezone.utc),
        reverse=True,
    ):
        key = booking.created_at.strftime("%Y-%m") if booking.created_at else "sem-data"
        groups.setdefault(key, []).append(booking)
    return groups


def add_booking(booking: BookingRequest) -> None:
    """Insert an already-built record, e.g. one fetched from the backend."""
    _bookings[booking.id] = booking


def reset() -> None:
    """Clear all bookings. Used by test fixtures for isolation."""
    _bookings.clear()
