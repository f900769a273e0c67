"""
Cipher Forge Core Data Models
==============================

Pydantic models and enumerations for the Cipher Forge session engine.

:class:`CipherResult` is the only record that crosses from an algorithm
to the presentation layer. It keeps the key exactly as the user typed it;
masking is applied on read through :attr:`CipherResult.masked_key` so the
raw value is always available to consumers.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class CipherFamily(str, enum.Enum):
    """Tag identifying which key policy applies to an algorithm."""

    CAESAR = "caesar"
    VIGENERE = "vigenere"


class MenuOption(int, enum.Enum):
    """Entries of the main menu, keyed by the number the user types."""

    ENCRYPT_MESSAGE = 1
    VIEW_ALGORITHMS = 2
    HELP = 3
    EXIT = 4

    @property
    def description(self) -> str:
        """Menu label shown next to the option number."""
        _map = {
            1: "Encrypt a message",
            2: "View available algorithms",
            3: "Show help information",
            4: "Exit application",
        }
        return _map[self.value]

    @classmethod
    def from_value(cls, value: int) -> Optional[MenuOption]:
        """Return the option numbered *value*, or ``None`` if there is none."""
        for option in cls:
            if option.value == value:
                return option
        return None


# ===================================================================== #
#  Key masking
# ===================================================================== #


def mask_key(key: Optional[str]) -> Optional[str]:
    """Obscure a key for display.

    Keys of three characters or fewer are shown verbatim. Longer keys
    keep their first and last characters; every character in between
    becomes ``*``.

    >>> mask_key("SECRET")
    'S****T'
    >>> mask_key("-3")
    '-3'
    """
    if key is None or len(key) <= 3:
        return key
    return key[0] + "*" * (len(key) - 2) + key[-1]


# ===================================================================== #
#  Result Model
# ===================================================================== #


class CipherResult(BaseModel):
    """Outcome of one encrypt or decrypt call.

    Attributes:
        ciphertext: Transformed text; always empty when ``success`` is false.
        algorithm_name: Display name of the algorithm that produced it.
        key: The key exactly as supplied, never normalised or masked.
        success: Whether the transformation ran.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ciphertext: str = Field(default="", description="Transformed text")
    algorithm_name: str = Field(..., min_length=1, description="Algorithm display name")
    key: str = Field(default="", description="Raw key as supplied")
    success: bool = Field(..., description="Whether the transformation ran")

    @model_validator(mode="after")
    def _failed_results_carry_no_text(self) -> CipherResult:
        if not self.success and self.ciphertext:
            raise ValueError("a failed CipherResult must have empty ciphertext")
        return self

    # ------------------------------------------------------------------ #
    #  Factories
    # ------------------------------------------------------------------ #

    @classmethod
    def succeeded(cls, ciphertext: str, algorithm_name: str, key: str) -> CipherResult:
        """Build a successful result."""
        return cls(
            ciphertext=ciphertext,
            algorithm_name=algorithm_name,
            key=key,
            success=True,
        )

    @classmethod
    def failed(cls, algorithm_name: str, key: Optional[str]) -> CipherResult:
        """Build a failed result echoing *key* for display."""
        return cls(
            ciphertext="",
            algorithm_name=algorithm_name,
            key=key or "",
            success=False,
        )

    # ------------------------------------------------------------------ #
    #  Derived properties
    # ------------------------------------------------------------------ #

    @property
    def masked_key(self) -> str:
        """The key with interior characters hidden (see :func:`mask_key`)."""
        return mask_key(self.key) or ""

    @property
    def status(self) -> str:
        """``"SUCCESS"`` or ``"FAILED"``."""
        return "SUCCESS" if self.success else "FAILED"

    @property
    def length(self) -> int:
        """Number of characters in the ciphertext."""
        return len(self.ciphertext)
