"""
Crockford Base32 encode/decode.

Encoded strings are most-significant digit first with no padding. The
optional checksum is one trailing symbol worth ``value % 37``, drawn from the
32 encoding symbols plus ``*~$=U``.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from fractions import Fraction
from typing import Any

from .errors import (
    ChecksumMismatch,
    EmptyInput,
    InvalidCharacters,
    InvalidChecksumLength,
    InvalidInput,
)
from .normalize import ModeLike, normalize
from .rules import BASE, CHECK_MODULUS, SYMBOL_VALUES, VALID_CHECKSUM, VALID_ENCODED, VALUE_SYMBOLS

logger = logging.getLogger(__name__)


def _as_non_negative_int(number: Any) -> int:
    # bool is an int subclass but never a sensible number to encode
    if isinstance(number, bool):
        raise InvalidInput(f'"{number}" isn\'t a number')

    if isinstance(number, int):
        value = number
    elif isinstance(number, (float, Decimal, Fraction)):
        try:
            integral = number == int(number)
        except (OverflowError, ValueError) as exc:
            raise InvalidInput(f'"{number}" isn\'t a number') from exc
        if not integral:
            raise InvalidInput(f'"{number}" isn\'t an integer')
        value = int(number)
    elif isinstance(number, str):
        text = number.strip()
        digits = text[1:] if text[:1] in ("+", "-") else text
        # plain ASCII digits only: no "1_000", no non-Latin numerals
        if not (digits.isascii() and digits.isdigit()):
            raise InvalidInput(f'"{number}" isn\'t a number')
        value = int(text, 10)
    else:
        raise InvalidInput(f'"{number!r}" isn\'t a number')

    if value < 0:
        raise InvalidInput(f'"{number}" is negative')
    return value


def symbol_value(symbol: str) -> int:
    """Numeric value of one symbol: digits parse as themselves, the rest go through the table."""
    if symbol.isascii() and symbol.isdigit():
        return int(symbol)
    try:
        return SYMBOL_VALUES[symbol]
    except KeyError:
        raise InvalidCharacters(symbol) from None


def base32_encode(number: Any) -> str:
    """
    Encode a non-negative integer, e.g. ``base32_encode(1234) == "16J"``.

    Keep dividing by 32: each remainder is the next digit from the right,
    the quotient goes round again. Zero encodes as ``"0"``.
    """
    value = _as_non_negative_int(number)

    digits: list[str] = []
    while True:
        value, remainder = divmod(value, BASE)
        digits.append(VALUE_SYMBOLS[remainder])
        if value == 0:
            break

    return "".join(reversed(digits))


def base32_encode_with_checksum(number: Any) -> str:
    value = _as_non_negative_int(number)
    return base32_encode(value) + VALUE_SYMBOLS[value % CHECK_MODULUS]


def base32_decode(string: str, mode: ModeLike = None, is_checksum: bool = False) -> int:
    """
    Decode an encoded string (or a lone checksum symbol) into an integer.

    The input is normalized first, see ``app.normalize.normalize``.
    """
    if string is None:
        raise InvalidInput("string is undefined")
    if not isinstance(string, str):
        raise InvalidInput(f'"{string!r}" isn\'t a string')
    if string == "":
        raise EmptyInput()

    string = normalize(string, mode)

    if is_checksum:
        if len(string) > 1:
            raise InvalidChecksumLength(string)
        valid = VALID_CHECKSUM
    else:
        valid = VALID_ENCODED

    if not valid.match(string):
        raise InvalidCharacters(string)

    # Digit B at position P from the right is worth B * 32**P; offset tracks 32**P.
    total = 0
    offset = 1
    for symbol in reversed(string):
        total += symbol_value(symbol) * offset
        offset *= BASE

    return total


def base32_decode_with_checksum(string: str, mode: ModeLike = None) -> int:
    """
    Decode a string whose last symbol is a checksum and verify it.

    The checksum symbol is validated on its own alphabet with default
    normalization; ``mode`` only applies to the body.
    """
    if string is None:
        raise InvalidInput("string is undefined")
    if not isinstance(string, str):
        raise InvalidInput(f'"{string!r}" isn\'t a string')

    body, checksum = string[:-1], string[-1:]

    value = base32_decode(body, mode=mode)
    checksum_value = base32_decode(checksum, is_checksum=True)

    if checksum_value != value % CHECK_MODULUS:
        logger.debug("checksum mismatch: body=%r checksum=%r", body, checksum)
        raise ChecksumMismatch(checksum, body)

    return value
