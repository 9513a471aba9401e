"""
Command-line front end for the admin document desk.

Seeds a few demo quote requests, then lists confirmed events or renders
their contract / receipt as plain text.

Usage:
    List confirmed:  python main.py list
    Contract:        python main.py contract <booking-id> --output contrato.txt
    Receipt:         python main.py receipt <booking-id>
    Menu:            python main.py menu
"""

import argparse
import logging
import sys
from pathlib import Path

from pizzahouse.auth import AuthContext
from pizzahouse.config import settings
from pizzahouse.desk import DocumentDesk
from pizzahouse.documents import DocumentKind
from pizzahouse.errors import DeskError
from pizzahouse.schemas.booking_schema import BookingRequest
from pizzahouse.tools import bookings, menu
from pizzahouse.utils import format_brl, format_date_br, format_time

logger = logging.getLogger(__name__)

DEMO_ADMIN = '{"email": "admin@juliospizza.com.br"}'


def _seed_demo_bookings() -> None:
    """Insert two confirmed and one pending request with stable ids."""
    demo = [
        ("3f9a1c7e", "Maria Aparecida da Silva", "123.456.789-00", "2025-12-24", "19:00", 10, 2, "confirmado"),
        ("b71e04d2", "João Pedro Santos", "987.654.321-00", "2025-12-31", "22:30", 25, 5, "confirmado"),
        ("c5d8e913", "Ana Clara Souza", "111.222.333-44", "2026-01-10", "20:00", 15, 0, "pendente"),
    ]
    for prefix, name, cpf, event_date, start, adults, children, status in demo:
        bookings.add_booking(BookingRequest.model_validate({
            "id": f"{prefix}-0000-4000-8000-000000000000",
            "nome_completo": name,
            "cpf": cpf,
            "telefone": "(43) 99999-0000",
            "endereco": "Rua das Flores, 100, Londrina - PR",
            "endereco_evento": "Chácara Recanto Verde, Londrina - PR",
            "data_evento": event_date,
            "horario": start,
            "quantidade_adultos": adults,
            "quantidade_criancas": children,
            "status": status,
        }))


def _print_confirmed(desk: DocumentDesk) -> None:
    for booking in desk.confirmed_bookings():
        sys.stdout.write(
            f"{booking.id}  {format_date_br(booking.event_date)} {format_time(booking.start_time)}"
            f"  {booking.full_name}  ({booking.adults} adultos, {booking.children} crianças)"
            f"  R$ {format_brl(desk.quote_total(booking))}\n"
        )


def _print_menu() -> None:
    for pizza in menu.list_pizzas(active_only=True):
        sys.stdout.write(f"[{pizza.kind.value}] {pizza.name}: {pizza.ingredients}\n")


def main() -> None:
    parser = argparse.ArgumentParser(
        description=f"Generate contracts and receipts for {settings.business.name}."
    )
    parser.add_argument(
        "command",
        choices=["list", "contract", "receipt", "menu"],
        help="What to do.",
    )
    parser.add_argument(
        "booking_id",
        nargs="?",
        help="Booking id (or unique prefix) for contract/receipt.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path to write the document (default: stdout).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging output.",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    _seed_demo_bookings()

    if args.command == "menu":
        _print_menu()
        return

    try:
        desk = DocumentDesk(AuthContext.from_stored_user(DEMO_ADMIN))
    except DeskError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    if args.command == "list":
        _print_confirmed(desk)
        return

    if not args.booking_id:
        parser.error(f"{args.command} requires a booking id")

    matches = [b.id for b in desk.confirmed_bookings() if b.id.startswith(args.booking_id)]
    booking_id = matches[0] if len(matches) == 1 else args.booking_id
    kind = DocumentKind.CONTRACT if args.command == "contract" else DocumentKind.RECEIPT

    try:
        document = desk.generate(booking_id, kind)
    except DeskError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(document.body, encoding="utf-8")
        logger.info("%s written to %s", document.filename, output_path)
    else:
        sys.stdout.write(document.body)


if __name__ == "__main__":
    main()
