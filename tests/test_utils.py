"""Tests for shared formatting helpers."""

from datetime import date
from decimal import Decimal

import pytest

from pizzahouse.utils import (
    add_hours,
    format_brl,
    format_cpf,
    format_date_br,
    format_percentage,
    format_phone,
    format_time,
    normalize_digits,
    slugify_name,
    to_decimal,
)


class TestFormatBrl:
    def test_comma_decimals(self):
        assert format_brl(Decimal("241.6")) == "241,60"

    def test_thousands_dot(self):
        assert format_brl(Decimal("1234567.89")) == "1.234.567,89"

    def test_integer(self):
        assert format_brl(55) == "55,00"

    def test_float_rounding(self):
        assert format_brl(0.125) == "0,13"


class TestFormatPercentage:
    def test_whole_number(self):
        assert format_percentage(Decimal("40")) == "40"
        assert format_percentage(Decimal("40.00")) == "40"

    def test_fraction(self):
        assert format_percentage(Decimal("12.50")) == "12,5"


class TestFormatDate:
    def test_iso_date(self):
        assert format_date_br("2025-12-24") == "24/12/2025"

    def test_iso_timestamp(self):
        assert format_date_br("2025-12-24T00:00:00+00:00") == "24/12/2025"

    def test_date_object(self):
        assert format_date_br(date(2025, 1, 5)) == "05/01/2025"

    def test_missing(self):
        assert format_date_br(None) == ""
        assert format_date_br("") == ""

    def test_unparseable_passthrough(self):
        assert format_date_br("natal") == "natal"


class TestTimes:
    def test_trims_seconds(self):
        assert format_time("19:00:00") == "19:00"

    def test_pads_hour(self):
        assert format_time("9:15") == "09:15"

    def test_missing_time(self):
        assert format_time(None) == ""
        assert add_hours("", 3) == ""

    def test_add_hours_same_day(self):
        assert add_hours("19:00", 3) == "22:00"

    def test_add_hours_wraps_midnight(self):
        assert add_hours("22:30", 3) == "01:30"
        assert add_hours("21:00", 3) == "00:00"

    def test_add_hours_keeps_minutes(self):
        assert add_hours("18:45:00", 3) == "21:45"

    def test_add_hours_invalid(self):
        assert add_hours("noite", 3) == ""
        assert add_hours("25:00", 3) == ""

    def test_invalid_time_renders_empty(self):
        assert format_time("25:00") == ""
        assert format_time("19:60") == ""
        assert format_time("noite") == ""


class TestSlugifyName:
    def test_spaces_to_underscores(self):
        assert slugify_name("Maria  da Silva") == "Maria_da_Silva"

    def test_strips_edges(self):
        assert slugify_name("  Ana ") == "Ana"


class TestToDecimal:
    def test_comma_separator(self):
        assert to_decimal("12,50") == Decimal("12.50")
        assert to_decimal("1.234,50") == Decimal("1234.50")

    def test_dot_separator(self):
        assert to_decimal("1234.50") == Decimal("1234.50")

    def test_garbage_raises_value_error(self):
        with pytest.raises(ValueError):
            to_decimal("abc")


class TestDocumentMasks:
    def test_normalize_digits(self):
        assert normalize_digits("(43) 99999-0000") == "43999990000"
        assert normalize_digits(None) == ""

    def test_cpf_from_digits(self):
        assert format_cpf("12345678900") == "123.456.789-00"

    def test_cpf_already_masked(self):
        assert format_cpf("123.456.789-00") == "123.456.789-00"

    def test_cpf_wrong_length_kept(self):
        assert format_cpf(" 1234 ") == "1234"
        assert format_cpf(None) == ""

    def test_landline(self):
        assert format_phone("4333334444") == "(43) 3333-4444"

    def test_mobile(self):
        assert format_phone("43 99999 0000") == "(43) 99999-0000"

    def test_phone_wrong_length_kept(self):
        assert format_phone("+55 43 99999-0000") == "+55 43 99999-0000"
