"""
Crockford Base32 symbol rules.

Static, read-only tables shared by the encoder and decoder.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

BASE = 32
CHECK_MODULUS = 37

# Regular digits skip I, L, O and U.
ENCODING_SYMBOLS = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
# Checksum-only symbols, values 32..36
CHECKSUM_SYMBOLS = "*~$=U"

SYMBOL_VALUES: Mapping[str, int] = MappingProxyType(
    {symbol: value for value, symbol in enumerate(ENCODING_SYMBOLS + CHECKSUM_SYMBOLS)}
)
VALUE_SYMBOLS: Mapping[int, str] = MappingProxyType(
    {value: symbol for symbol, value in SYMBOL_VALUES.items()}
)

# 'U' is only valid as a checksum symbol.
VALID_ENCODED = re.compile(r"^[A-TV-Z0-9]+$")
VALID_CHECKSUM = re.compile(r"^[A-Z0-9*~$=U]$")

# Transcription fixes; '-' is a chunking separator and is dropped.
TRANSCRIPTION_FIXES = str.maketrans({"I": "1", "i": "1", "L": "1", "l": "1", "O": "0", "o": "0", "-": None})
