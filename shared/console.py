"""
Cipher Forge Console Interface
===============================

Rich-powered console abstraction providing a unified presentation layer
for the Cipher Forge.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, severity-coloured messages, inline prompts
and tables, all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import IO, Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all Cipher Forge output
# ---------------------------------------------------------------------------
_FORGE_THEME = Theme(
    {
        "forge.banner": "bold bright_cyan",
        "forge.section": "bold bright_magenta",
        "forge.success": "bold green",
        "forge.warning": "bold yellow",
        "forge.error": "bold red",
        "forge.info": "bold bright_blue",
        "forge.prompt": "bold bright_white",
        "forge.dim": "dim white",
        "forge.highlight": "bold bright_white",
    }
)

# ---------------------------------------------------------------------------
# ASCII banner art
# ---------------------------------------------------------------------------
_BANNER_ART = r"""[bright_cyan]
   ___ _      _             ___
  / __(_)_ __| |_  ___ _ _ | __|__ _ _ __ _ ___
 | (__| | '_ \ ' \/ -_) '_|| _/ _ \ '_/ _` / -_)
  \___|_| .__/_||_\___|_|  |_|\___/_| \__, \___|
        |_|                           |___/
[/bright_cyan]"""

_TITLE = "Welcome to The Cipher Forge"
_TAGLINE = "Terminal Cryptography Simulator"


class ForgeConsole:
    """Unified console interface for the Cipher Forge.

    Usage::

        con = ForgeConsole()
        con.banner()
        con.section("Encryption Result")
        con.success("Done")
    """

    def __init__(
        self,
        *,
        quiet: bool = False,
        file: IO[str] | None = None,
        width: int | None = None,
    ) -> None:
        """Initialise the console.

        Args:
            quiet: Suppress all output.
            file:  Write to this stream instead of stdout. Output sent to
                   an explicit stream is always plain text.
            width: Fixed render width; auto-detected when ``None``.
        """
        self._console = Console(
            theme=_FORGE_THEME,
            quiet=quiet,
            file=file,
            width=width,
            color_system="auto" if file is None else None,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the Cipher Forge banner.

        Args:
            version: Version string shown beneath the logo.
        """
        subtitle = (
            f"[forge.highlight]{_TITLE}[/forge.highlight]\n"
            f"[forge.info]{_TAGLINE}[/forge.info]\n"
            f"[forge.dim]Version: {version}[/forge.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    # ------------------------------------------------------------------ #
    #  Section header
    # ------------------------------------------------------------------ #

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.print()
        self._console.rule(
            f"  {title}  ",
            style="forge.section",
            characters="=",
        )

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            Text.assemble(("[✔] ", "forge.success"), message)
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(
            Text.assemble(("[⚠] WARNING: ", "forge.warning"), message)
        )

    def error(self, message: str) -> None:
        """Print an error message.

        The message is rendered literally; it may echo user input.
        """
        self._console.print(
            Text.assemble(("[✘] ERROR: ", "forge.error"), message)
        )

    def prompt(self, message: str) -> None:
        """Print *message* without a trailing newline, ready for input."""
        self._console.print(Text(message, style="forge.prompt"), end="")

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(Text(str(cell)) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def blank(self, count: int = 1) -> None:
        """Print *count* blank lines."""
        for _ in range(count):
            self._console.print()

    def divider(self, style: str = "dim") -> None:
        """Print a thin horizontal rule."""
        self._console.rule(style=style, characters="-")
