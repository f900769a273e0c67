"""
Cipher Forge Configuration Management
======================================

Centralized configuration for the Cipher Forge session engine using
Python dataclasses and TOML-based persistence.

Every limit the interactive session enforces (retry budget, text length,
Caesar shift range, Vigenere keyword length) lives here so that the
policy can be tuned without touching the algorithms.

References:
    - PEP 681 -- Data Class Transforms (2022).
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Session Policy =================================


@dataclass(frozen=False, slots=True)
class SessionConfig:
    """Limits enforced by the interactive session.

    These are input policies layered on top of the pure key validators:
    the algorithms themselves accept any integer shift and any keyword
    length.
    """

    max_attempts: int = 3
    max_plaintext_length: int = 1000
    caesar_min_shift: int = -25
    caesar_max_shift: int = 25
    vigenere_max_key_length: int = 20
    display_truncate: int = 100


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Logging and general operational settings."""

    log_level: str = "ERROR"
    log_file: str = ""
    log_json: bool = False
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class ForgeConfig:
    """Master configuration aggregating session policy and global settings.

    Usage:
        >>> config = ForgeConfig.load()                  # from default path
        >>> config = ForgeConfig.load("custom.toml")     # from custom path
        >>> print(config.session.max_attempts)
        3
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    session: SessionConfig = field(default_factory=SessionConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> ForgeConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys gracefully fall back to dataclass
        defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`ForgeConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            session=cls._build_section(SessionConfig, raw.get("session", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored so that newer config
        files still load.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> ForgeConfig:
    """Module-level convenience wrapper around :meth:`ForgeConfig.load`.

    Caches the result so that repeated calls share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = ForgeConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
