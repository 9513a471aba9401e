"""Pricing settings and computed price models."""

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# Settings table keys
ADULT_PRICE_KEY = "valor_adulto"
CHILD_PRICE_KEY = "valor_crianca"
DEPOSIT_PERCENTAGE_KEY = "percentual_entrada"

DEFAULT_ADULT_PRICE = Decimal("55.00")
DEFAULT_CHILD_PRICE = Decimal("27.00")
DEFAULT_DEPOSIT_PERCENTAGE = Decimal("40")

MAX_PERCENTAGE = Decimal("100")


def _parse_setting(
    settings: Mapping[str, str],
    key: str,
    default: Decimal,
    upper: Optional[Decimal] = None,
) -> Decimal:
    """Read one numeric setting, falling back to ``default`` on anything odd.

    Accepts both ``55.00`` and ``55,00``.
    """
    raw = settings.get(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = Decimal(str(raw).strip().replace(",", "."))
    except InvalidOperation:
        logger.warning("Unparsable setting %s=%r, using default %s", key, raw, default)
        return default
    if not value.is_finite() or value < 0 or (upper is not None and value > upper):
        logger.warning("Out of range setting %s=%r, using default %s", key, raw, default)
        return default
    return value


@dataclass(frozen=True)
class PricingConfig:
    """Per-person prices and deposit percentage for one generation call."""

    adult_price: Decimal = DEFAULT_ADULT_PRICE
    child_price: Decimal = DEFAULT_CHILD_PRICE
    deposit_percentage: Decimal = DEFAULT_DEPOSIT_PERCENTAGE

    @classmethod
    def from_settings(cls, settings: Optional[Mapping[str, str]]) -> "PricingConfig":
        """Build from the key-value settings table.

        Missing or malformed values fall back to the defaults silently
        (a warning is logged); this never raises.
        """
        settings = settings or {}
        return cls(
            adult_price=_parse_setting(settings, ADULT_PRICE_KEY, DEFAULT_ADULT_PRICE),
            child_price=_parse_setting(settings, CHILD_PRICE_KEY, DEFAULT_CHILD_PRICE),
            deposit_percentage=_parse_setting(
                settings, DEPOSIT_PERCENTAGE_KEY, DEFAULT_DEPOSIT_PERCENTAGE, MAX_PERCENTAGE
            ),
        )


@dataclass(frozen=True)
class ComputedPrice:
    """Quote amounts in reais, each at centavo precision.

    ``deposit + balance == total`` always holds exactly.
    """

    total: Decimal
    deposit: Decimal
    balance: Decimal
