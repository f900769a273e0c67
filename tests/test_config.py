"""
TOML configuration loading.
"""

import pytest

from shared.config import ForgeConfig, SessionConfig, get_config


def test_defaults():
    config = ForgeConfig()
    assert config.session == SessionConfig()
    assert config.session.max_attempts == 3
    assert config.session.caesar_min_shift == -25
    assert config.global_settings.log_level == "ERROR"


def test_shipped_config_matches_defaults():
    assert ForgeConfig.load() == ForgeConfig()


def test_partial_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "forge.toml"
    path.write_text(
        "[session]\n"
        "max_attempts = 5\n"
        "unknown_key = 'ignored'\n"
        "[global]\n"
        "log_json = true\n"
        "[extra_section]\n"
        "x = 1\n",
        encoding="utf-8",
    )
    config = ForgeConfig.load(path)
    assert config.session.max_attempts == 5
    assert config.session.max_plaintext_length == 1000
    assert config.global_settings.log_json is True


def test_explicit_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ForgeConfig.load(tmp_path / "missing.toml")


def test_to_dict():
    data = ForgeConfig().to_dict()
    assert data["session"]["vigenere_max_key_length"] == 20
    assert data["global_settings"]["version"] == "1.0.0"


def test_get_config_caches_and_reloads(tmp_path):
    path = tmp_path / "forge.toml"
    path.write_text("[session]\nmax_attempts = 7\n", encoding="utf-8")
    first = get_config(path)
    assert first.session.max_attempts == 7
    assert get_config() is first
