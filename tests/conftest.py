"""Shared test fixtures and helpers."""

from datetime import date
from typing import Any

import pytest

from pizzahouse.schemas.booking_schema import BookingRequest
from pizzahouse.tools import bookings, menu, settings_store

ISSUE_DATE = date(2025, 11, 1)


@pytest.fixture(autouse=True)
def _reset_stores():
    bookings.reset()
    settings_store.reset()
    menu.reset()
    yield
    bookings.reset()


@pytest.fixture
def issue_date() -> date:
    return ISSUE_DATE


def make_booking(**overrides: Any) -> BookingRequest:
    """Helper to create a confirmed BookingRequest with sensible defaults."""
    data: dict[str, Any] = {
        "id": "abcdef1234567890",
        "full_name": "Maria da Silva",
        "tax_id": "123.456.789-00",
        "phone": "(43) 99999-0000",
        "address": "Rua das Flores, 100",
        "event_address": "Chácara Recanto Verde",
        "event_date": "2025-12-24",
        "start_time": "19:00",
        "adults": 10,
        "children": 2,
        "status": "confirmado",
    }
    data.update(overrides)
    return BookingRequest(**data)


@pytest.fixture
def booking() -> BookingRequest:
    return make_booking()
