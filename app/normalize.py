"""
Input normalization for transcribed Base32 strings.

Rules (applied in order):
- uppercase everything
- read I/L as 1 and O as 0
- strip '-' chunking separators

What happens when a rule fires depends on the mode:
- None: correct silently
- "warn": correct, log a warning and emit a NormalizationWarning
- "strict": raise NormalizationRequired instead of correcting
"""

from __future__ import annotations

import logging
import warnings
from enum import Enum
from typing import Optional, Union

from .errors import NormalizationRequired, NormalizationWarning
from .rules import TRANSCRIPTION_FIXES

logger = logging.getLogger(__name__)


class NormalizationMode(str, Enum):
    WARN = "warn"
    STRICT = "strict"


ModeLike = Optional[Union[NormalizationMode, str]]


def _warn_correction(old_string: str, new_string: str) -> None:
    message = f'String "{old_string}" corrected to "{new_string}"'
    # the warnings registry drops repeats from the same call site; the log line always fires
    logger.warning(message)
    warnings.warn(message, NormalizationWarning, stacklevel=3)


def normalize(string: str, mode: ModeLike = None) -> str:
    """
    Canonicalize a user-transcribed string before decoding.

    Case folding and the character fixes are checked separately, so warn
    mode can report twice for the same input.
    """
    original = string

    string = string.upper()
    fixed = string.translate(TRANSCRIPTION_FIXES)

    # strict mode names the fully corrected form, not the first step
    if fixed != original and mode == NormalizationMode.STRICT:
        raise NormalizationRequired(original, fixed)

    if mode == NormalizationMode.WARN:
        if string != original:
            _warn_correction(original, string)
        if fixed != string:
            _warn_correction(original, fixed)

    return fixed
