"""
Admin contracts screen as a service.

Lists confirmed bookings and renders their contract or receipt using the
active pricing settings at the moment of generation.

Usage:
    desk = DocumentDesk(AuthContext(email="admin@juliospizza.com.br"))
    for booking in desk.confirmed_bookings():
        doc = desk.generate(booking.id, DocumentKind.CONTRACT)
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from pizzahouse.auth import AuthContext
from pizzahouse.documents import DocumentKind, GeneratedDocument, render_document
from pizzahouse.errors import AdminRequiredError, BookingNotFoundError
from pizzahouse.logging_context import request_scope
from pizzahouse.schemas.booking_schema import BookingRequest, BookingStatus
from pizzahouse.schemas.pricing_schema import PricingConfig
from pizzahouse.tools import bookings, settings_store
from pizzahouse.tools.pricing import calculate_price

logger = logging.getLogger(__name__)


class DocumentDesk:
    """Contract and receipt generation for logged-in admins."""

    def __init__(self, auth: AuthContext) -> None:
        if not auth.is_authenticated:
            raise AdminRequiredError()
        self._auth = auth

    def pricing(self) -> PricingConfig:
        """Snapshot of the active pricing settings."""
        return PricingConfig.from_settings(settings_store.get_active_settings())

    def confirmed_bookings(self) -> list[BookingRequest]:
        return bookings.list_bookings(BookingStatus.CONFIRMED)

    def quote_total(self, booking: BookingRequest) -> Decimal:
        return calculate_price(booking.adults, booking.children, self.pricing()).total

    def generate(
        self,
        booking_id: str,
        kind: DocumentKind,
        issued_on: Optional[date] = None,
    ) -> GeneratedDocument:
        """Render a document for a stored booking.

        Raises:
            BookingNotFoundError: If no booking has this id.
        """
        booking = bookings.get_booking(booking_id)
        if booking is None:
            raise BookingNotFoundError(booking_id)

        with request_scope(booking.receipt_number or booking_id):
            if booking.status != BookingStatus.CONFIRMED:
                logger.warning(
                    "Generating %s for booking %s in status %s",
                    kind.value, booking_id, booking.status.value,
                )
            document = render_document(kind, booking, self.pricing(), issued_on)
            logger.info("%s issued by %s", document.filename, self._auth.email)
        return document
