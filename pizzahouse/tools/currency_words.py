"""
Spell out amounts in reais for legal documents.

    >>> amount_to_words(125.10)
    'cento e vinte e cinco reais e dez centavos'
"""

from decimal import Decimal
from typing import Union

from pizzahouse.utils import quantize_cents, to_decimal

UNITS = ["", "um", "dois", "três", "quatro", "cinco", "seis", "sete", "oito", "nove"]
TEENS = [
    "dez", "onze", "doze", "treze", "quatorze",
    "quinze", "dezesseis", "dezessete", "dezoito", "dezenove",
]
TENS = ["", "", "vinte", "trinta", "quarenta", "cinquenta", "sessenta", "setenta", "oitenta", "noventa"]
HUNDREDS = [
    "", "cento", "duzentos", "trezentos", "quatrocentos",
    "quinhentos", "seiscentos", "setecentos", "oitocentos", "novecentos",
]


def _below_thousand(number: int) -> str:
    if number == 100:
        return "cem"

    parts: list[str] = []
    hundreds, rest = divmod(number, 100)
    if hundreds:
        parts.append(HUNDREDS[hundreds])

    tens, units = divmod(rest, 10)
    if tens == 1:
        parts.append(TEENS[units])
    else:
        if tens:
            parts.append(TENS[tens])
        if units:
            parts.append(UNITS[units])

    return " e ".join(parts)


def integer_to_words(number: int) -> str:
    """Spell out a non-negative integer in Portuguese (masculine forms)."""
    if number < 0:
        raise ValueError(f"Cannot spell a negative number: {number}")
    if number == 0:
        return "zero"

    if number >= 1_000_000:
        millions, rest = divmod(number, 1_000_000)
        words = "um milhão" if millions == 1 else f"{integer_to_words(millions)} milhões"
        if rest:
            words += " e " + integer_to_words(rest)
        return words

    if number >= 1000:
        thousands, rest = divmod(number, 1000)
        words = "mil" if thousands == 1 else f"{integer_to_words(thousands)} mil"
        if rest:
            words += " e " + _below_thousand(rest)
        return words

    return _below_thousand(number)


def amount_to_words(amount: Union[int, float, str, Decimal]) -> str:
    """Spell out a monetary amount, e.g. 100 -> 'cem reais'.

    The amount is rounded half-up to centavos first. Zero centavos are
    omitted; a zero amount renders as 'zero reais'.

    Strings may use a comma as decimal separator ("12,50").

    Raises:
        ValueError: If the amount is negative or not a finite number.
    """
    value = to_decimal(amount)
    if not value.is_finite():
        raise ValueError(f"Cannot spell a non-finite amount: {amount}")
    value = quantize_cents(value)
    if value < 0:
        raise ValueError(f"Cannot spell a negative amount: {amount}")

    reais = int(value)
    centavos = int((value - reais) * 100)

    if reais == 0 and centavos == 0:
        return "zero reais"

    parts: list[str] = []
    if reais == 1:
        parts.append("um real")
    elif reais:
        # "um milhão de reais", but "um milhão e dez reais"
        suffix = " de reais" if reais % 1_000_000 == 0 else " reais"
        parts.append(integer_to_words(reais) + suffix)
    if centavos:
        parts.append(integer_to_words(centavos) + (" centavo" if centavos == 1 else " centavos"))
    return " e ".join(parts)
