"""
Key Validation
===============

Pure syntax checks for cipher keys. Every function here is total over
``str | None``: it never raises and always gives the same answer for the
same input.

Range and length limits (Caesar shift in [-25, 25], Vigenere keyword of
at most 20 letters) are session policy and live in
:mod:`cipherforge.core.session`, not here.
"""

from __future__ import annotations

import re
from typing import Optional

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_ASCII_LETTERS = re.compile(r"[A-Za-z]+")


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parse *text* as a base-10 signed integer after trimming.

    Returns ``None`` when the text is missing or not an integer. Only
    ASCII digits with an optional sign are accepted, so forms such as
    ``"1_000"`` or ``"3.0"`` are rejected. Digit strings past the
    interpreter's int conversion limit also count as "not an integer".
    """
    if text is None:
        return None
    candidate = text.strip()
    if not _SIGNED_INT.fullmatch(candidate):
        return None
    try:
        return int(candidate)
    except ValueError:
        return None


def parse_shift(key: Optional[str]) -> Optional[int]:
    """Caesar shift encoded by *key*, or ``None`` if it is not an integer."""
    return parse_int(key)


def is_valid_caesar_key(key: Optional[str]) -> bool:
    """True iff *key* parses as a signed integer. No range check."""
    return parse_shift(key) is not None


def is_valid_vigenere_key(key: Optional[str]) -> bool:
    """True iff *key* is non-empty and made only of ASCII letters.

    Surrounding whitespace counts as a non-letter, so ``" KEY "`` is
    rejected; callers trim input before validating.
    """
    if key is None or not key.strip():
        return False
    return _ASCII_LETTERS.fullmatch(key) is not None
