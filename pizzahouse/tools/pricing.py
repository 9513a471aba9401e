"""Quote pricing: total, deposit and balance from head-counts."""

import logging
from decimal import Decimal
from typing import Mapping, Optional, Union

from pizzahouse.schemas.pricing_schema import ComputedPrice, PricingConfig
from pizzahouse.utils import quantize_cents

logger = logging.getLogger(__name__)

ConfigLike = Union[PricingConfig, Mapping[str, str], None]


def resolve_pricing(config: ConfigLike) -> PricingConfig:
    """Accept either a ready PricingConfig or a raw settings mapping."""
    if isinstance(config, PricingConfig):
        return config
    return PricingConfig.from_settings(config)


def _head_count(value: Optional[int]) -> int:
    if not value or value < 0:
        return 0
    return int(value)


def calculate_price(
    adults: Optional[int],
    children: Optional[int],
    config: ConfigLike = None,
) -> ComputedPrice:
    """Compute the quote for a party.

    Total and deposit are rounded half-up to centavos; the balance is the
    exact difference so the three amounts always reconcile.
    """
    pricing = resolve_pricing(config)
    adults = _head_count(adults)
    children = _head_count(children)

    total = quantize_cents(adults * pricing.adult_price + children * pricing.child_price)
    deposit = quantize_cents(total * pricing.deposit_percentage / Decimal(100))
    balance = total - deposit

    logger.debug(
        "Priced %d adults + %d children: total=%s deposit=%s balance=%s",
        adults, children, total, deposit, balance,
    )
    return ComputedPrice(total=total, deposit=deposit, balance=balance)
