"""Tests for import chains and module integrity.

Ensures all public modules can be imported without errors and
that re-exports from __init__.py files work correctly.
"""


class TestSchemaImports:
    def test_import_booking_schema(self):
        from pizzahouse.schemas.booking_schema import BookingRequest, BookingStatus
        assert BookingStatus.CONFIRMED == "confirmado"
        assert BookingRequest().children == 0

    def test_import_pricing_schema(self):
        from pizzahouse.schemas.pricing_schema import ComputedPrice, PricingConfig
        assert PricingConfig() is not None
        assert ComputedPrice is not None

    def test_import_menu_schema(self):
        from pizzahouse.schemas.menu_schema import Pizza, PizzaKind
        assert PizzaKind.SAVORY == "salgada"
        assert Pizza is not None


class TestDocumentImports:
    def test_package_reexports(self):
        from pizzahouse.documents import (
            DocumentKind,
            GeneratedDocument,
            generate_contract,
            generate_receipt,
            render_document,
        )
        assert DocumentKind.CONTRACT == "contrato"
        assert callable(generate_contract)
        assert callable(generate_receipt)
        assert callable(render_document)
        assert GeneratedDocument is not None


class TestToolImports:
    def test_import_tools(self):
        from pizzahouse.tools.bookings import create_booking, list_bookings
        from pizzahouse.tools.currency_words import amount_to_words
        from pizzahouse.tools.menu import list_pizzas
        from pizzahouse.tools.pricing import calculate_price
        from pizzahouse.tools.settings_store import get_active_settings
        assert callable(create_booking)
        assert callable(list_bookings)
        assert callable(amount_to_words)
        assert callable(list_pizzas)
        assert callable(calculate_price)
        assert get_active_settings()["percentual_entrada"] == "40"


class TestDeskImports:
    def test_import_desk(self):
        from pizzahouse.auth import AuthContext
        from pizzahouse.desk import DocumentDesk
        from pizzahouse.errors import DeskError
        assert AuthContext().is_authenticated is False
        assert DocumentDesk is not None
        assert issubclass(DeskError, Exception)
