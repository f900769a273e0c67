"""
Cipher Forge CLI
=================

Click-based entry point. The command takes no options: everything
happens in the interactive menu.

Usage::

    cipherforge
    python -m cipherforge

Settings (retry budget, key limits, logging) are read from
``config.toml`` in the project root when present.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import sys

import click

from shared.config import ForgeConfig
from shared.console import ForgeConsole
from shared.logger import ForgeLogger

from cipherforge.core.registry import CipherRegistry
from cipherforge.core.session import Session
from cipherforge.output.console import ForgeConsoleOutput
from cipherforge.parsers.line_source import LineSource


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
def cli() -> None:
    """The Cipher Forge -- Terminal Cryptography Simulator.

    Encrypt messages with the Caesar or Vigenere cipher through an
    interactive menu.
    """
    console = ForgeConsole()

    try:
        config = ForgeConfig.load()
    except Exception as exc:
        console.warning(f"Could not read config.toml ({exc}); using defaults.")
        config = ForgeConfig()

    logger = ForgeLogger.from_config("session", config.global_settings)

    session = Session(
        source=LineSource(sys.stdin),
        display=ForgeConsoleOutput(console),
        registry=CipherRegistry(),
        config=config,
        logger=logger,
    )

    try:
        session.run()
    except KeyboardInterrupt:
        console.blank()
        console.warning("Interrupted by user.")
        sys.exit(130)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Cipher Forge CLI."""
    cli()


if __name__ == "__main__":
    main()
