"""
Contract and receipt generation for confirmed bookings.

Both documents are pure functions of the booking, the pricing settings,
the company configuration and the issue date. Missing booking fields
render as empty text or zero; generation never fails on incomplete data.

Usage:
    body = generate_contract(booking, {"valor_adulto": "60.00"})
    doc = render_document(DocumentKind.RECEIPT, booking, pricing)
"""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pizzahouse.config import BusinessConfig, settings
from pizzahouse.documents import templates
from pizzahouse.schemas.booking_schema import BookingRequest
from pizzahouse.tools.currency_words import amount_to_words
from pizzahouse.tools.pricing import ConfigLike, calculate_price, resolve_pricing
from pizzahouse.utils import (
    add_hours,
    format_brl,
    format_date_br,
    format_percentage,
    format_time,
    slugify_name,
)

logger = logging.getLogger(__name__)

BookingLike = Union[BookingRequest, Mapping[str, Any]]


class DocumentKind(str, Enum):
    CONTRACT = "contrato"
    RECEIPT = "recibo"


@dataclass(frozen=True)
class GeneratedDocument:
    """A rendered document ready for display, print or download."""

    kind: DocumentKind
    body: str
    filename: str


def _as_booking(booking: BookingLike) -> BookingRequest:
    if isinstance(booking, BookingRequest):
        return booking
    return BookingRequest.model_validate(dict(booking))


def _brl(value) -> str:
    return f"R$ {format_brl(value)}"


def generate_contract(
    booking: BookingLike,
    config: ConfigLike = None,
    issued_on: Optional[date] = None,
    business: Optional[BusinessConfig] = None,
) -> str:
    """Render the full service contract as plain text."""
    booking = _as_booking(booking)
    pricing = resolve_pricing(config)
    business = business or settings.business
    issued_on = issued_on or date.today()
    price = calculate_price(booking.adults, booking.children, pricing)

    start = format_time(booking.start_time)
    end = add_hours(booking.start_time, business.event_duration_hours)

    sections = [
        templates.banner(business, templates.CONTRACT_TITLE),
        "\n".join([
            f"CONTRATANTE: {booking.full_name.upper()}",
            f"CPF: {booking.tax_id}",
            f"Endereço: {booking.address.upper()}",
        ]),
        templates.company_block(business),
        templates.SINGLE_RULE,
        "\n".join([
            "OBJETO DO CONTRATO",
            "",
            "O presente contrato tem por objeto a prestação de serviços",
            "de rodízio de pizza para evento que se realizará em:",
            "",
            f"Data: {format_date_br(booking.event_date)}",
            f"Horário: {start} às {end}",
            f"Local: {booking.event_address.upper()}",
        ]),
        templates.SINGLE_RULE,
        "\n".join([
            "DETALHES DO EVENTO",
            "",
            "Número de pessoas confirmadas:",
            f"• Adultos: {booking.adults} pessoas",
            f"• Crianças (5-9 anos): {booking.children} pessoas",
            f"• Total: {booking.total_guests} pessoas",
        ]),
        templates.SINGLE_RULE,
        templates.CLIENT_OBLIGATIONS,
        templates.SINGLE_RULE,
        "\n".join([
            templates.PROVIDER_OBLIGATIONS,
            "",
            "OBSERVAÇÃO: Excedente de horário será cobrado",
            f"{_brl(business.overtime_fee)} a cada meia hora ultrapassada.",
        ]),
        templates.SINGLE_RULE,
        "\n".join([
            "VALORES E FORMA DE PAGAMENTO",
            "",
            "Valor por pessoa:",
            f"• Adultos: {_brl(pricing.adult_price)} cada",
            f"• Crianças: {_brl(pricing.child_price)} cada",
            "",
            f"VALOR TOTAL DO SERVIÇO: {_brl(price.total)}",
            "",
            "Forma de pagamento:",
            f"• Entrada ({format_percentage(pricing.deposit_percentage)}%): {_brl(price.deposit)}",
            f"  (Depositar na {business.bank_name} - Ag: {business.bank_agency}"
            f" - Conta: {business.bank_account})",
            f"• Restante: {_brl(price.balance)}",
            "  (A ser pago no dia do evento em dinheiro)",
        ]),
        templates.SINGLE_RULE,
        templates.CANCELLATION_POLICY,
        templates.SINGLE_RULE,
        f"{business.city.upper()}, {format_date_br(issued_on)}",
        "\n" + templates.two_column_signatures(
            ["CONTRATANTE", booking.full_name, f"CPF: {booking.tax_id}"],
            ["CONTRATADA", business.representative, f"CPF: {business.representative_cpf}"],
        ),
        templates.DOUBLE_RULE,
    ]

    logger.info("Contract generated for booking %s (total %s)", booking.id, price.total)
    return "\n\n".join(sections) + "\n"


def generate_receipt(
    booking: BookingLike,
    config: ConfigLike = None,
    issued_on: Optional[date] = None,
    business: Optional[BusinessConfig] = None,
) -> str:
    """Render the deposit receipt as plain text."""
    booking = _as_booking(booking)
    pricing = resolve_pricing(config)
    business = business or settings.business
    issued_on = issued_on or date.today()
    price = calculate_price(booking.adults, booking.children, pricing)

    people = f"{booking.adults} adultos"
    if booking.children > 0:
        people += f" e {booking.children} crianças"
    percentage = format_percentage(pricing.deposit_percentage)

    sections = [
        templates.banner(business, templates.RECEIPT_TITLE),
        f"RECIBO Nº: {booking.receipt_number}",
        "\n".join([
            f"Recebemos de: {booking.full_name}",
            f"CPF: {booking.tax_id}",
            f"Endereço: {booking.address}",
        ]),
        "\n".join([
            f"A importância de: {_brl(price.deposit)}",
            f"({amount_to_words(price.deposit)})",
        ]),
        templates.SINGLE_RULE,
        "\n".join([
            "REFERENTE A:",
            "Entrada para contratação de serviço de rodízio de pizza",
        ]),
        "\n".join([
            "DETALHES DO EVENTO:",
            f"• Data: {format_date_br(booking.event_date)}",
            f"• Horário: {format_time(booking.start_time)}",
            f"• Local: {booking.event_address}",
            f"• Pessoas: {people}",
        ]),
        templates.SINGLE_RULE,
        "\n".join([
            "RESUMO FINANCEIRO:",
            f"• Valor total do serviço: {_brl(price.total)}",
            f"• Entrada ({percentage}%): {_brl(price.deposit)}",
            f"• Saldo restante: {_brl(price.balance)}",
            "  (a ser pago no dia do evento)",
        ]),
        templates.SINGLE_RULE,
        f"Data de emissão: {format_date_br(issued_on)}",
        "\n".join([
            templates.SIGNATURE_LINE,
            business.representative,
            f"CPF: {business.representative_cpf}",
            business.name,
        ]),
        templates.DOUBLE_RULE,
    ]

    logger.info("Receipt %s generated (deposit %s)", booking.receipt_number, price.deposit)
    return "\n\n".join(sections) + "\n"


def document_filename(kind: DocumentKind, booking: BookingLike) -> str:
    """Download name, e.g. 'contrato_Maria_da_Silva.txt'."""
    booking = _as_booking(booking)
    name = slugify_name(booking.full_name) or booking.receipt_number or "documento"
    return f"{kind.value}_{name}.txt"


def render_document(
    kind: DocumentKind,
    booking: BookingLike,
    config: ConfigLike = None,
    issued_on: Optional[date] = None,
    business: Optional[BusinessConfig] = None,
) -> GeneratedDocument:
    """Generate a contract or receipt and wrap it with its download name."""
    booking = _as_booking(booking)
    pricing = resolve_pricing(config)
    if kind == DocumentKind.CONTRACT:
        body = generate_contract(booking, pricing, issued_on, business)
    else:
        body = generate_receipt(booking, pricing, issued_on, business)
    return GeneratedDocument(kind=kind, body=body, filename=document_filename(kind, booking))
