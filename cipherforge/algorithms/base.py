"""
Cipher Algorithm Abstraction
=============================

Every algorithm is a stateless object with a display name, a family tag
and a pair of operations that turn text plus a key into a
:class:`~cipherforge.core.models.CipherResult`.

A key the algorithm cannot use is reported as a failed result, never
raised: an unusable key is ordinary control flow for the caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Iterable, Optional

from cipherforge.core.models import CipherFamily, CipherResult

ALPHABET_SIZE = 26


def shift_letter(ch: str, shift: int) -> str:
    """Shift an ASCII letter by *shift* positions, keeping its case.

    Any other character is returned unchanged. Works for any integer
    shift, positive or negative.
    """
    if "A" <= ch <= "Z":
        base = ord("A")
    elif "a" <= ch <= "z":
        base = ord("a")
    else:
        return ch
    return chr(base + (ord(ch) - base + shift) % ALPHABET_SIZE)


def is_letter(ch: str) -> bool:
    """True for ``A``-``Z`` and ``a``-``z`` only."""
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


class CipherAlgorithm(ABC):
    """Base class for the substitution ciphers offered by the forge.

    Subclasses set the class attributes and implement :meth:`encrypt`,
    :meth:`decrypt` and :meth:`is_valid_key`.

    Attributes:
        name: Stable display name, e.g. ``"Caesar Cipher"``.
        family: Tag used to select the session's key policy.
        description: One-line summary for listings.
        key_hint: Short description of an acceptable key.
        details: Label/value pairs for the algorithm information screen.
    """

    name: ClassVar[str]
    family: ClassVar[CipherFamily]
    description: ClassVar[str] = ""
    key_hint: ClassVar[str] = "Enter key: "
    details: ClassVar[tuple[tuple[str, str], ...]] = ()

    @abstractmethod
    def encrypt(self, plaintext: str, key: Optional[str]) -> CipherResult:
        """Encrypt *plaintext* with *key*."""

    @abstractmethod
    def decrypt(self, ciphertext: str, key: Optional[str]) -> CipherResult:
        """Invert :meth:`encrypt` for the same key."""

    @abstractmethod
    def is_valid_key(self, key: Optional[str]) -> bool:
        """Syntax check for *key*; no policy limits."""

    # ------------------------------------------------------------------ #
    #  Helpers for subclasses
    # ------------------------------------------------------------------ #

    def _success(self, text: str, key: Optional[str]) -> CipherResult:
        return CipherResult.succeeded(text, self.name, key or "")

    def _failure(self, key: Optional[str]) -> CipherResult:
        return CipherResult.failed(self.name, key)

    @staticmethod
    def _apply(text: str, shifts: Iterable[int]) -> str:
        """Shift each letter of *text* by the next value from *shifts*.

        Non-letters are copied through and do not consume a shift.
        """
        stream = iter(shifts)
        return "".join(
            shift_letter(ch, next(stream)) if is_letter(ch) else ch
            for ch in text
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
