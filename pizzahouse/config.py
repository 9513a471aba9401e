"""
Centralized configuration with environment variable overrides.

Company identity, bank details and contract terms printed on every
generated document live here. Per-person prices and the deposit
percentage are NOT configured here: they come from the settings table
at generation time (see ``pizzahouse.schemas.pricing_schema``).
"""

import logging
import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from dotenv import load_dotenv

from pizzahouse.logging_context import build_handler

load_dotenv()

logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_decimal(env_var: str, default: str) -> Decimal:
    """Parse a decimal amount from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return Decimal(raw)
    except (InvalidOperation, TypeError):
        raise ValueError(
            f"Invalid decimal for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class BusinessConfig:
    """Company identity and contract terms loaded from environment or defaults."""

    name: str = os.getenv("BUSINESS_NAME", "JULIO'S PIZZA HOUSE")
    representative: str = os.getenv("BUSINESS_REPRESENTATIVE", "Júlio Cesar Fermino")
    representative_cpf: str = os.getenv("BUSINESS_CPF", "034.988.389-03")
    street: str = os.getenv("BUSINESS_STREET", "Rua Alzira Postali Gewrher, nº 119")
    district: str = os.getenv("BUSINESS_DISTRICT", "Jardim Catuai")
    postal_code: str = os.getenv("BUSINESS_CEP", "86086-230")
    city: str = os.getenv("BUSINESS_CITY", "Londrina")
    state: str = os.getenv("BUSINESS_STATE", "Paraná")
    bank_name: str = os.getenv("DEPOSIT_BANK", "Caixa Econômica")
    bank_agency: str = os.getenv("DEPOSIT_AGENCY", "1479")
    bank_account: str = os.getenv("DEPOSIT_ACCOUNT", "00028090-5")
    overtime_fee: Decimal = _safe_decimal("OVERTIME_FEE", "300.00")
    event_duration_hours: int = _safe_int("EVENT_DURATION_HOURS", "3")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    business: BusinessConfig = field(default_factory=BusinessConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    app_name: str = os.getenv("APP_NAME", "pizzahouse-docs")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if not config.business.name.strip():
        raise ValueError("BUSINESS_NAME must not be empty")
    if config.business.overtime_fee <= 0:
        raise ValueError(
            f"OVERTIME_FEE must be > 0, got {config.business.overtime_fee}"
        )
    if not 1 <= config.business.event_duration_hours <= 12:
        raise ValueError(
            "EVENT_DURATION_HOURS must be between 1 and 12, "
            f"got {config.business.event_duration_hours}"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    # No-op when the host application already configured the root logger
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        handlers=[build_handler()],
    )
    logger.info("Configuration loaded for '%s'", config.business.name)
    return config


# Singleton instance
settings = load_config()
