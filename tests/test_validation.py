"""
Key syntax validators.
"""

import pytest

from cipherforge.core.validation import (
    is_valid_caesar_key,
    is_valid_vigenere_key,
    parse_int,
    parse_shift,
)


# ── Caesar ────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("key", ["3", "-2", "+7", " 12 ", "0", "-25", "999999999999"])
def test_caesar_valid(key):
    assert is_valid_caesar_key(key)


@pytest.mark.parametrize("key", ["abc", "", "   ", "3.0", "1_000", "- 3", "٣", "0x1A", None])
def test_caesar_invalid(key):
    assert not is_valid_caesar_key(key)


def test_parse_shift_trims_and_signs():
    assert parse_shift(" -4 ") == -4
    assert parse_shift("+4") == 4
    assert parse_shift("four") is None
    assert parse_int("12") == 12


def test_overlong_digit_string_is_not_an_integer():
    digits = "9" * 5000
    assert parse_int(digits) is None
    assert parse_shift("-" + digits) is None
    assert is_valid_caesar_key(digits) is False


# ── Vigenere ──────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("key", ["KEY", "key", "LeMoN", "a", "Z" * 50])
def test_vigenere_valid(key):
    assert is_valid_vigenere_key(key)


@pytest.mark.parametrize("key", ["abc123", "", "   ", " KEY", "KE-Y", "clé", "ΑΒΓ", None])
def test_vigenere_invalid(key):
    assert not is_valid_vigenere_key(key)


# ── Purity ────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("key", ["3", "abc", "", None, "KEY", "abc123"])
def test_validators_are_repeatable(key):
    caesar = [is_valid_caesar_key(key) for _ in range(5)]
    vigenere = [is_valid_vigenere_key(key) for _ in range(5)]
    assert len(set(caesar)) == 1
    assert len(set(vigenere)) == 1
