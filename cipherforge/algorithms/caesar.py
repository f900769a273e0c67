"""
Caesar Cipher
==============

Monoalphabetic shift cipher: every letter moves the same number of
places along the alphabet, wrapping at ``Z``.

The shift is taken from the key as a signed integer. Any integer is
accepted here; values outside [-25, 25] simply wrap. Restricting the
range is left to the interactive session.
"""

from __future__ import annotations

import itertools
from typing import Optional

from cipherforge.algorithms.base import CipherAlgorithm
from cipherforge.core.models import CipherFamily, CipherResult
from cipherforge.core.validation import is_valid_caesar_key, parse_shift


class CaesarCipher(CipherAlgorithm):
    """Shift every letter by a fixed amount.

    Usage::

        cipher = CaesarCipher()
        cipher.encrypt("HELLO", "3").ciphertext   # 'KHOOR'
    """

    name = "Caesar Cipher"
    family = CipherFamily.CAESAR
    description = "Shifts each letter by a fixed number of positions"
    key_hint = "Enter shift value (integer between -25 and 25): "
    details = (
        ("Type", "Substitution cipher"),
        ("Method", "Shifts each letter by a fixed number"),
        ("Key", "Integer (-25 to 25)"),
        ("Security", "Low (easily breakable)"),
        ("Use case", "Educational purposes"),
    )

    def encrypt(self, plaintext: str, key: Optional[str]) -> CipherResult:
        shift = parse_shift(key)
        if shift is None:
            return self._failure(key)
        return self._success(self._apply(plaintext, itertools.repeat(shift)), key)

    def decrypt(self, ciphertext: str, key: Optional[str]) -> CipherResult:
        shift = parse_shift(key)
        if shift is None:
            return self._failure(key)
        return self._success(self._apply(ciphertext, itertools.repeat(-shift)), key)

    def is_valid_key(self, key: Optional[str]) -> bool:
        return is_valid_caesar_key(key)
