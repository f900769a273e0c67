"""
Cipher Forge Algorithms
========================

Classical substitution ciphers. Each algorithm is stateless and reports
an unusable key as a failed result rather than raising.
"""

from cipherforge.algorithms.base import CipherAlgorithm
from cipherforge.algorithms.caesar import CaesarCipher
from cipherforge.algorithms.vigenere import VigenereCipher

__all__ = [
    "CipherAlgorithm",
    "CaesarCipher",
    "VigenereCipher",
]
