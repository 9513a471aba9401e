"""Tests for configuration loading and validation."""

from dataclasses import replace
from decimal import Decimal

import pytest

from pizzahouse.config import AppConfig, BusinessConfig, _validate_config


def _with_business(**changes) -> AppConfig:
    return replace(AppConfig(), business=replace(BusinessConfig(), **changes))


class TestConfigValidation:
    def test_default_config_passes_validation(self):
        config = AppConfig()
        _validate_config(config)  # should not raise

    def test_empty_business_name(self):
        with pytest.raises(ValueError, match="BUSINESS_NAME"):
            _validate_config(_with_business(name="  "))

    def test_zero_overtime_fee(self):
        with pytest.raises(ValueError, match="OVERTIME_FEE"):
            _validate_config(_with_business(overtime_fee=Decimal("0")))

    def test_event_duration_too_long(self):
        with pytest.raises(ValueError, match="EVENT_DURATION_HOURS"):
            _validate_config(_with_business(event_duration_hours=24))

    def test_event_duration_zero(self):
        with pytest.raises(ValueError, match="EVENT_DURATION_HOURS"):
            _validate_config(_with_business(event_duration_hours=0))

    def test_safe_int_parsing(self):
        from pizzahouse.config import _safe_int

        assert _safe_int("NONEXISTENT_VAR_12345", "42") == 42

    def test_safe_int_rejects_garbage(self, monkeypatch):
        from pizzahouse.config import _safe_int

        monkeypatch.setenv("PIZZAHOUSE_TEST_INT", "três")
        with pytest.raises(ValueError, match="PIZZAHOUSE_TEST_INT"):
            _safe_int("PIZZAHOUSE_TEST_INT", "3")

    def test_safe_decimal_parsing(self):
        from pizzahouse.config import _safe_decimal

        assert _safe_decimal("NONEXISTENT_VAR_12345", "300.00") == Decimal("300.00")

    def test_safe_decimal_rejects_garbage(self, monkeypatch):
        from pizzahouse.config import _safe_decimal

        monkeypatch.setenv("PIZZAHOUSE_TEST_DECIMAL", "trezentos")
        with pytest.raises(ValueError, match="PIZZAHOUSE_TEST_DECIMAL"):
            _safe_decimal("PIZZAHOUSE_TEST_DECIMAL", "300")
