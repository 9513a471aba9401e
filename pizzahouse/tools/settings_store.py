"""
Mock key-value settings store.

In production, this is the ``configuracoes`` table: rows of
``chave``/``valor`` with an ``ativo`` flag. Only active rows are handed
to document generation.
"""

import logging
from typing import TypedDict

from pizzahouse.schemas.pricing_schema import (
    ADULT_PRICE_KEY,
    CHILD_PRICE_KEY,
    DEPOSIT_PERCENTAGE_KEY,
)

logger = logging.getLogger(__name__)


class SettingRow(TypedDict):
    chave: str
    valor: str
    ativo: bool


_DEFAULT_ROWS: list[SettingRow] = [
    {"chave": ADULT_PRICE_KEY, "valor": "55.00", "ativo": True},
    {"chave": CHILD_PRICE_KEY, "valor": "27.00", "ativo": True},
    {"chave": DEPOSIT_PERCENTAGE_KEY, "valor": "40", "ativo": True},
]

_settings: dict[str, SettingRow] = {}


def get_active_settings() -> dict[str, str]:
    """Return the active settings as a key -> raw string value mapping."""
    return {row["chave"]: row["valor"] for row in _settings.values() if row["ativo"]}


def set_setting(key: str, value: str) -> SettingRow:
    """Create or overwrite a setting and mark it active."""
    row: SettingRow = {"chave": key, "valor": str(value), "ativo": True}
    _settings[key] = row
    logger.info("Setting %s = %r", key, row["valor"])
    return row


def deactivate_setting(key: str) -> bool:
    """Hide a setting from generation without deleting it."""
    row = _settings.get(key)
    if row is None:
        return False
    row["ativo"] = False
    logger.info("Setting deactivated: %s", key)
    return True


def reset() -> None:
    """Restore the seeded settings. Used by test fixtures for isolation."""
    _settings.clear()
    for row in _DEFAULT_ROWS:
        _settings[row["chave"]] = dict(row)  # type: ignore[assignment]


reset()
