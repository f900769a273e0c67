"""
Vigenere Cipher
================

Polyalphabetic substitution: the n-th letter of the text is shifted by
the n-th letter of the keyword (``A`` = 0 ... ``Z`` = 25), the keyword
repeating as often as needed.

Key positions advance with the letters of the text, not with raw
character positions. Spaces, punctuation and digits are copied through
without consuming a keyword letter, so ``"HELLO WORLD"`` and
``"HELLOWORLD"`` use the keyword identically.

Reference:
    - Kahn, D. (1996). The Codebreakers. Scribner. Chapter 4.
"""

from __future__ import annotations

import itertools
from typing import Iterator, Optional

from cipherforge.algorithms.base import CipherAlgorithm
from cipherforge.core.models import CipherFamily, CipherResult
from cipherforge.core.validation import is_valid_vigenere_key


class VigenereCipher(CipherAlgorithm):
    """Shift letters by a repeating keyword.

    Usage::

        cipher = VigenereCipher()
        cipher.encrypt("HELLO", "KEY").ciphertext   # 'RIJVS'
    """

    name = "Vigenere Cipher"
    family = CipherFamily.VIGENERE
    description = "Uses a keyword to shift letters variably"
    key_hint = "Enter keyword (letters only, 1-20 characters): "
    details = (
        ("Type", "Polyalphabetic substitution cipher"),
        ("Method", "Uses keyword for variable shifts"),
        ("Key", "Alphabetic string (1-20 characters)"),
        ("Security", "Medium (stronger than Caesar)"),
        ("Use case", "Historical cryptography"),
    )

    def encrypt(self, plaintext: str, key: Optional[str]) -> CipherResult:
        if not is_valid_vigenere_key(key):
            return self._failure(key)
        return self._success(self._apply(plaintext, self._key_shifts(key)), key)

    def decrypt(self, ciphertext: str, key: Optional[str]) -> CipherResult:
        if not is_valid_vigenere_key(key):
            return self._failure(key)
        inverse = (-shift for shift in self._key_shifts(key))
        return self._success(self._apply(ciphertext, inverse), key)

    def is_valid_key(self, key: Optional[str]) -> bool:
        return is_valid_vigenere_key(key)

    @staticmethod
    def _key_shifts(key: str) -> Iterator[int]:
        """Endless stream of shifts, one per keyword letter, repeating."""
        return itertools.cycle([ord(ch) - ord("A") for ch in key.upper()])
