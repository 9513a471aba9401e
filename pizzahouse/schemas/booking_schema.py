"""Quote request ("orçamento") data models."""

import logging
from datetime import date, datetime, time
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class BookingStatus(str, Enum):
    """Lifecycle status as stored by the backend."""

    PENDING = "pendente"
    CONFIRMED = "confirmado"
    CANCELLED = "cancelado"
    COMPLETED = "concluido"


# English names accepted on input
STATUS_ALIASES: dict[str, BookingStatus] = {
    "pending": BookingStatus.PENDING,
    "confirmed": BookingStatus.CONFIRMED,
    "cancelled": BookingStatus.CANCELLED,
    "canceled": BookingStatus.CANCELLED,
    "completed": BookingStatus.COMPLETED,
    "concluído": BookingStatus.COMPLETED,
}


class BookingRequest(BaseModel):
    """A customer-submitted catering request.

    Accepts the backend's Portuguese column names as aliases as well as
    the field names. Every field has a default: document generation is
    best-effort and must render whatever subset of data is present.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    full_name: str = Field("", alias="nome_completo")
    tax_id: str = Field("", alias="cpf")
    phone: str = Field("", alias="telefone")
    address: str = Field("", alias="endereco")
    event_address: str = Field("", alias="endereco_evento")
    event_date: str = Field("", alias="data_evento")
    start_time: str = Field("", alias="horario")
    adults: int = Field(0, alias="quantidade_adultos")
    children: int = Field(0, alias="quantidade_criancas")
    status: BookingStatus = BookingStatus.PENDING
    notes: Optional[str] = Field(None, alias="observacoes")
    created_at: Optional[datetime] = None

    @field_validator(
        "id", "full_name", "tax_id", "phone", "address",
        "event_address", "event_date", "start_time",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value):
        if value is None:
            return ""
        if isinstance(value, (date, time)):
            return value.isoformat()
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("status", mode="before")
    @classmethod
    def _status_alias(cls, value):
        if value is None or value == "":
            return BookingStatus.PENDING
        if isinstance(value, BookingStatus):
            return value
        normalized = str(value).strip().lower()
        if normalized in STATUS_ALIASES:
            return STATUS_ALIASES[normalized]
        try:
            return BookingStatus(normalized)
        except ValueError:
            logger.warning("Unknown booking status %r, treating as pending", value)
            return BookingStatus.PENDING

    @field_validator("adults", "children", mode="before")
    @classmethod
    def _none_as_zero(cls, value):
        if value is None or value == "":
            return 0
        return value

    @field_validator("adults", "children")
    @classmethod
    def _not_negative(cls, value: int) -> int:
        return max(value, 0)

    @property
    def total_guests(self) -> int:
        return self.adults + self.children

    @property
    def receipt_number(self) -> str:
        """First 8 characters of the id, upper-cased."""
        return self.id[:8].upper()
