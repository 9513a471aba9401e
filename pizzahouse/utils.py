"""Shared formatting helpers for Brazilian documents."""

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

CENTS = Decimal("0.01")


def to_decimal(value: Union[int, float, str, Decimal]) -> Decimal:
    """Convert a number to Decimal without binary float noise.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")``. Strings
    may use the Brazilian comma separator: ``"1.234,50"`` is 1234.50.

    Raises:
        ValueError: If a string is not a number.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, str):
        text = value.strip()
        if "," in text:
            text = text.replace(".", "").replace(",", ".")
        try:
            return Decimal(text)
        except InvalidOperation:
            raise ValueError(f"Not a number: {value!r}") from None
    return Decimal(value)


def quantize_cents(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_brl(value: Union[int, float, str, Decimal]) -> str:
    """Format an amount the Brazilian way, without the currency symbol.

    Examples:
        >>> format_brl(Decimal("1234.5"))
        '1.234,50'
        >>> format_brl(55)
        '55,00'
    """
    amount = quantize_cents(to_decimal(value))
    return f"{amount:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")


def format_percentage(value: Decimal) -> str:
    """Render a percentage without trailing zeros: 40 -> '40', 12.5 -> '12,5'."""
    normalized = value.normalize()
    if normalized == normalized.to_integral_value():
        return str(int(normalized))
    return format(normalized, "f").replace(".", ",")


def format_date_br(value: Optional[Union[str, date]]) -> str:
    """Format an ISO date (or ``date``) as DD/MM/YYYY.

    Unparseable input is returned unchanged; ``None`` renders as "".
    """
    if value is None or value == "":
        return ""
    if isinstance(value, date):
        return value.strftime("%d/%m/%Y")
    try:
        parsed = datetime.strptime(value.strip()[:10], "%Y-%m-%d")
    except ValueError:
        return value
    return parsed.strftime("%d/%m/%Y")


def _parse_time(value: str) -> Optional[tuple[int, int]]:
    match = re.match(r"^\s*(\d{1,2}):(\d{2})", value)
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours, minutes


def format_time(value: Optional[str]) -> str:
    """Trim a time like '19:00:00' to 'HH:MM'.

    Missing or invalid input (e.g. '25:00') renders as "", like ``add_hours``.
    """
    if not value:
        return ""
    parsed = _parse_time(value)
    if parsed is None:
        return ""
    return f"{parsed[0]:02d}:{parsed[1]:02d}"


def add_hours(value: Optional[str], hours: int) -> str:
    """Add whole hours to an 'HH:MM' time, wrapping past midnight.

    Examples:
        >>> add_hours("19:00", 3)
        '22:00'
        >>> add_hours("22:30", 3)
        '01:30'
    """
    if not value:
        return ""
    parsed = _parse_time(value)
    if parsed is None:
        return ""
    start, minutes = parsed
    return f"{(start + hours) % 24:02d}:{minutes:02d}"


def normalize_digits(value: Optional[str]) -> str:
    """Strip everything except digits."""
    return re.sub(r"[^\d]", "", value or "")


def format_cpf(value: Optional[str]) -> str:
    """Mask an 11-digit CPF as 000.000.000-00.

    Anything that is not 11 digits is returned trimmed, unchanged.

    Examples:
        >>> format_cpf("12345678900")
        '123.456.789-00'
        >>> format_cpf(" 123.456.789-00 ")
        '123.456.789-00'
    """
    digits = normalize_digits(value)
    if len(digits) != 11:
        return (value or "").strip()
    return re.sub(r"(\d{3})(\d{3})(\d{3})(\d{2})", r"\1.\2.\3-\4", digits)


def format_phone(value: Optional[str]) -> str:
    """Mask a Brazilian phone number with area code.

    Ten digits is a landline, eleven a mobile. Other lengths are returned
    trimmed, unchanged.

    Examples:
        >>> format_phone("4333334444")
        '(43) 3333-4444'
        >>> format_phone("43 99999-0000")
        '(43) 99999-0000'
    """
    digits = normalize_digits(value)
    if len(digits) == 10:
        return re.sub(r"(\d{2})(\d{4})(\d{4})", r"(\1) \2-\3", digits)
    if len(digits) == 11:
        return re.sub(r"(\d{2})(\d{5})(\d{4})", r"(\1) \2-\3", digits)
    return (value or "").strip()


def slugify_name(name: str) -> str:
    """Collapse whitespace runs to underscores for download filenames."""
    return re.sub(r"\s+", "_", name.strip())
