"""
Caesar and Vigenere cipher behaviour.
Run with:  python -m pytest tests/ -v
"""

import pytest

from cipherforge.algorithms import CaesarCipher, VigenereCipher
from cipherforge.algorithms.base import shift_letter
from cipherforge.core.models import CipherFamily

TEXTS = [
    "HELLO",
    "Hello, World!",
    "The quick brown fox jumps over 13 lazy dogs.",
    "Zebra-zone: ÄÖé 123 !?",
    "",
]


# ── Letter shifting ───────────────────────────────────────────────────────────
def test_shift_letter_wraps_both_directions():
    assert shift_letter("Z", 1) == "A"
    assert shift_letter("a", -1) == "z"
    assert shift_letter("m", 26 * 4 + 2) == "o"


def test_shift_letter_ignores_non_latin():
    for ch in "é5 ,Ω":
        assert shift_letter(ch, 7) == ch


# ── Caesar ────────────────────────────────────────────────────────────────────
def test_caesar_scenario_hello():
    result = CaesarCipher().encrypt("HELLO", "3")
    assert result.success
    assert result.ciphertext == "KHOOR"
    assert result.algorithm_name == "Caesar Cipher"
    assert result.key == "3"


def test_caesar_scenario_negative_shift():
    result = CaesarCipher().encrypt("xyz", "-2")
    assert result.success
    assert result.ciphertext == "vwx"


def test_caesar_non_integer_key_fails():
    result = CaesarCipher().encrypt("HELLO", "abc")
    assert not result.success
    assert result.ciphertext == ""
    assert result.key == "abc"


def test_caesar_missing_key_fails():
    result = CaesarCipher().encrypt("HELLO", None)
    assert not result.success
    assert result.key == ""


def test_caesar_overlong_numeric_key_fails_without_raising():
    digits = "9" * 5000
    encrypted = CaesarCipher().encrypt("abc", digits)
    assert not encrypted.success
    assert encrypted.ciphertext == ""
    assert not CaesarCipher().decrypt("abc", digits).success


def test_caesar_accepts_out_of_range_shift():
    # range limits are session policy; the algorithm wraps any integer
    assert CaesarCipher().encrypt("abc", "27").ciphertext == "bcd"
    assert CaesarCipher().encrypt("abc", "-53").ciphertext == "zab"


def test_caesar_keeps_raw_key():
    result = CaesarCipher().encrypt("abc", " 3 ")
    assert result.ciphertext == "def"
    assert result.key == " 3 "


@pytest.mark.parametrize("shift", [0, 1, 3, 13, 25, -7, 52, -100])
@pytest.mark.parametrize("text", TEXTS)
def test_caesar_roundtrip(text, shift):
    cipher = CaesarCipher()
    encrypted = cipher.encrypt(text, str(shift)).ciphertext
    assert cipher.decrypt(encrypted, str(shift)).ciphertext == text
    assert cipher.encrypt(encrypted, str(-shift)).ciphertext == text


def test_caesar_preserves_case_and_non_letters():
    text = "Mixed CASE, digits 42 & symbols ü!"
    out = CaesarCipher().encrypt(text, "5").ciphertext
    for before, after in zip(text, out):
        if before.isascii() and before.isalpha():
            assert before.isupper() == after.isupper()
        else:
            assert before == after


# ── Vigenere ──────────────────────────────────────────────────────────────────
def test_vigenere_scenario_hello():
    result = VigenereCipher().encrypt("HELLO", "KEY")
    assert result.success
    assert result.ciphertext == "RIJVS"
    assert result.algorithm_name == "Vigenere Cipher"


def test_vigenere_scenario_punctuation_does_not_advance_key():
    result = VigenereCipher().encrypt("Hello, World!", "key")
    assert result.success
    assert result.ciphertext == "Rijvs, Uyvjn!"
    assert result.key == "key"


def test_vigenere_key_index_follows_letters_only():
    cipher = VigenereCipher()
    assert cipher.encrypt("AA", "AB").ciphertext == "AB"
    assert cipher.encrypt("A A", "AB").ciphertext == "A B"
    assert cipher.encrypt("A-1-A", "AB").ciphertext == "A-1-B"


def test_vigenere_invalid_key_fails():
    result = VigenereCipher().encrypt("HELLO", "abc123")
    assert not result.success
    assert result.ciphertext == ""
    assert result.key == "abc123"


@pytest.mark.parametrize("key", ["", "   ", "KE Y", None, "clé"])
def test_vigenere_rejects_bad_keys(key):
    assert not VigenereCipher().encrypt("HELLO", key).success


def test_vigenere_key_case_does_not_matter():
    cipher = VigenereCipher()
    assert cipher.encrypt("Attack at dawn", "LEMON").ciphertext == "Lxfopv ef rnhr"
    assert cipher.encrypt("Attack at dawn", "lemon").ciphertext == "Lxfopv ef rnhr"


@pytest.mark.parametrize("key", ["A", "KEY", "lemon", "ZzZz", "CHRISTMAN"])
@pytest.mark.parametrize("text", TEXTS)
def test_vigenere_roundtrip(text, key):
    cipher = VigenereCipher()
    encrypted = cipher.encrypt(text, key).ciphertext
    assert cipher.decrypt(encrypted, key).ciphertext == text


def test_vigenere_preserves_case():
    out = VigenereCipher().encrypt("aBcDeF", "XYZ").ciphertext
    assert [c.isupper() for c in out] == [False, True, False, True, False, True]


# ── Algorithm metadata ────────────────────────────────────────────────────────
def test_families_and_key_checks():
    assert CaesarCipher.family is CipherFamily.CAESAR
    assert VigenereCipher.family is CipherFamily.VIGENERE
    assert CaesarCipher().is_valid_key("-4")
    assert not CaesarCipher().is_valid_key("four")
    assert VigenereCipher().is_valid_key("four")
    assert not VigenereCipher().is_valid_key("-4")


def test_algorithms_are_stateless():
    cipher = VigenereCipher()
    first = cipher.encrypt("HELLO", "KEY")
    cipher.encrypt("something else entirely", "ZZ")
    assert cipher.encrypt("HELLO", "KEY") == first
