"""
Cipher Registry
================

Maps the short tokens a user types at the cipher-selection prompt to
algorithm instances. The mapping is filled once at construction and is
read-only afterwards; because algorithms are stateless the registry can
hand out the same instance to every caller.
"""

from __future__ import annotations

from typing import Iterator, Optional

from cipherforge.algorithms import CaesarCipher, CipherAlgorithm, VigenereCipher


class CipherRegistry:
    """Ordered token -> algorithm lookup.

    Usage::

        registry = CipherRegistry()
        registry.get_cipher("1").name      # 'Caesar Cipher'
        registry.is_valid_choice("9")      # False
        registry.enumerate()               # [('1', 'Caesar Cipher'), ('2', 'Vigenere Cipher')]
    """

    def __init__(self) -> None:
        self._ciphers: dict[str, CipherAlgorithm] = {}
        self._register("1", CaesarCipher())
        self._register("2", VigenereCipher())

    def _register(self, token: str, algorithm: CipherAlgorithm) -> None:
        if token in self._ciphers:
            raise ValueError(f"Selection token already registered: {token!r}")
        self._ciphers[token] = algorithm

    # ------------------------------------------------------------------ #
    #  Lookup
    # ------------------------------------------------------------------ #

    def get_cipher(self, token: str) -> Optional[CipherAlgorithm]:
        """Return the algorithm registered under *token*, or ``None``."""
        return self._ciphers.get(token)

    def is_valid_choice(self, token: str) -> bool:
        """True if *token* selects a registered algorithm."""
        return token in self._ciphers

    def enumerate(self) -> list[tuple[str, str]]:
        """``(token, name)`` pairs in registration order."""
        return [(token, cipher.name) for token, cipher in self._ciphers.items()]

    @property
    def tokens(self) -> list[str]:
        """Registered selection tokens in registration order."""
        return list(self._ciphers)

    def entries(self) -> list[tuple[str, CipherAlgorithm]]:
        """``(token, algorithm)`` pairs in registration order."""
        return list(self._ciphers.items())

    # ------------------------------------------------------------------ #
    #  Container protocol
    # ------------------------------------------------------------------ #

    def __contains__(self, token: object) -> bool:
        return token in self._ciphers

    def __iter__(self) -> Iterator[str]:
        return iter(self._ciphers)

    def __len__(self) -> int:
        return len(self._ciphers)
