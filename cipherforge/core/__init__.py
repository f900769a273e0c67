"""
Cipher Forge Core Module
=========================

Result model, menu and family enumerations, key validators and the error
taxonomy. The registry and the interactive session live in
:mod:`cipherforge.core.registry` and :mod:`cipherforge.core.session`.
"""

from cipherforge.core.errors import ForgeError, RetryExhausted, ValidationFailure
from cipherforge.core.models import CipherFamily, CipherResult, MenuOption, mask_key
from cipherforge.core.validation import (
    is_valid_caesar_key,
    is_valid_vigenere_key,
    parse_shift,
)

__all__ = [
    "CipherFamily",
    "CipherResult",
    "ForgeError",
    "MenuOption",
    "RetryExhausted",
    "ValidationFailure",
    "is_valid_caesar_key",
    "is_valid_vigenere_key",
    "mask_key",
    "parse_shift",
]
