"""
Cipher Forge Console Output
============================

Rich-based display sink for the interactive session: menus, the cipher
list, prompts, errors, encryption results, the algorithm information
screen and help text.

Anything the user typed (plaintext, keys, ciphertext) is wrapped in
:class:`rich.text.Text` so that square brackets in user input are never
interpreted as Rich markup.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import ForgeConsole
from cipherforge.algorithms import CipherAlgorithm
from cipherforge.core.models import CipherResult, MenuOption


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_STATUS_COLOURS: dict[str, str] = {
    "SUCCESS": "bold green",
    "FAILED": "bold red",
}


def truncate_for_display(text: str, limit: int = 100) -> str:
    """Shorten *text* to *limit* characters, ending in ``...`` when cut."""
    if len(text) <= limit:
        return text
    return text[: max(limit - 3, 0)] + "..."


class ForgeConsoleOutput:
    """Presentation layer for the Cipher Forge session.

    Usage::

        output = ForgeConsoleOutput(ForgeConsole())
        output.show_menu(list(MenuOption))
        output.show_result(result, plaintext="HELLO")
    """

    def __init__(self, console: Optional[ForgeConsole] = None) -> None:
        """Initialise the display sink.

        Args:
            console: ForgeConsole instance. Creates one if not provided.
        """
        self.console = console or ForgeConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Session framing
    # ------------------------------------------------------------------ #

    def welcome(self, version: str = "1.0.0") -> None:
        self.console.banner(version=version)

    def goodbye(self) -> None:
        self.console.blank()
        self.console.success("Thank you for using The Cipher Forge!")

    def show_section(self, title: str) -> None:
        self.console.section(title)

    def prompt(self, message: str) -> None:
        self.console.prompt(message)

    def show_processing(self) -> None:
        self.console.blank()
        self.console.divider()
        self._rich.print("Processing encryption...")
        self.console.divider()

    # ------------------------------------------------------------------ #
    #  Menus
    # ------------------------------------------------------------------ #

    def show_menu(self, options: Sequence[MenuOption]) -> None:
        """Print the main menu followed by the selection prompt."""
        self.console.blank()
        self._rich.print("[bold bright_magenta]Main Menu[/bold bright_magenta]")
        for option in options:
            self._rich.print(f"{option.value}. {option.description}")
        self.console.blank()
        self.prompt(f"Select an option (1-{len(options)}): ")

    def show_cipher_list(self, entries: Sequence[tuple[str, str]]) -> None:
        """Print the cipher-selection screen followed by its prompt."""
        self.show_section("CIPHER SELECTION")
        self._rich.print("Available Cipher Algorithms:")
        for token, name in entries:
            self._rich.print(Text(f"{token}. {name}"))
        tokens = [token for token, _ in entries]
        span = f"{tokens[0]}-{tokens[-1]}" if tokens else ""
        self.console.blank()
        self.prompt(f"Select cipher ({span}): ")

    # ------------------------------------------------------------------ #
    #  Errors
    # ------------------------------------------------------------------ #

    def show_error(self, message: str) -> None:
        self.console.error(message)

    def show_attempts_remaining(self, remaining: int) -> None:
        self._rich.print(
            Text(f"Attempts remaining: {remaining}", style="forge.warning")
        )

    def show_unexpected_error(self, message: str) -> None:
        self.console.blank()
        self.console.error(f"Unexpected Error: {message}")
        self._rich.print("Please report this issue if it persists.")

    # ------------------------------------------------------------------ #
    #  Result display
    # ------------------------------------------------------------------ #

    def show_result(
        self,
        result: CipherResult,
        plaintext: str = "",
        *,
        truncate: int = 100,
    ) -> None:
        """Render an encryption outcome.

        The key is always shown masked. On success the original text is
        truncated to *truncate* characters; the encrypted text is shown
        in full.
        """
        status_style = _STATUS_COLOURS.get(result.status, "")

        body = Text()
        body.append("Algorithm: ", style="bold")
        body.append(f"{result.algorithm_name}\n")
        body.append("Key: ", style="bold")
        body.append(f"{result.masked_key}\n")
        body.append("Status: ", style="bold")
        body.append(result.status, style=status_style)

        if result.success:
            body.append("\n\nOriginal Text: ", style="bold")
            body.append(truncate_for_display(plaintext, truncate))
            body.append("\nEncrypted Text: ", style="bold")
            body.append(result.ciphertext)
            body.append("\n\nCharacter Count: ", style="bold")
            body.append(str(result.length))
        else:
            body.append("\n\nEncryption failed!", style="bold red")
            body.append("\nReason: Invalid key format for selected cipher")
            body.append("\nPlease check your key and try again.")

        self.show_section("ENCRYPTION RESULT")
        self._rich.print(body)
        self.console.divider()

    # ------------------------------------------------------------------ #
    #  Information screens
    # ------------------------------------------------------------------ #

    def show_algorithms(
        self,
        entries: Iterable[tuple[str, CipherAlgorithm]],
    ) -> None:
        """Show the registry listing followed by per-algorithm details."""
        entries = list(entries)
        self.show_section("AVAILABLE CIPHER ALGORITHMS")

        self.console.table(
            "Registered Ciphers",
            ["#", "Name", "Description"],
            [(token, cipher.name, cipher.description) for token, cipher in entries],
            styles=["dim", "bold", ""],
        )

        self._rich.print("\nDetailed Information:\n")
        for token, cipher in entries:
            tbl = Table(show_header=False, box=None, padding=(0, 1))
            tbl.add_column("Field", style="bold")
            tbl.add_column("Value")
            for label, value in cipher.details:
                tbl.add_row(f"{label}:", value)
            self._rich.print(
                Panel(tbl, title=f"{token}. {cipher.name}", border_style="cyan")
            )

    def show_help(
        self,
        *,
        min_shift: int = -25,
        max_shift: int = 25,
        max_key_length: int = 20,
        max_text_length: int = 1000,
    ) -> None:
        self.show_section("HELP INFORMATION")
        self._rich.print("The Cipher Forge - Terminal Cryptography Simulator\n")
        self._rich.print("[bold]Available Ciphers:[/bold]")
        self._rich.print(
            "Caesar Cipher: Shifts each letter by a fixed number of positions"
        )
        self._rich.print(f"  Key: Integer between {min_shift} and {max_shift}")
        self._rich.print("  Example: HELLO with key 3 becomes KHOOR\n")
        self._rich.print("Vigenere Cipher: Uses a keyword to shift letters variably")
        self._rich.print(f"  Key: Letters only, 1-{max_key_length} characters")
        self._rich.print("  Example: HELLO with key KEY becomes RIJVS\n")
        self._rich.print("[bold]Features:[/bold]")
        self._rich.print("Preserves non-alphabetic characters")
        self._rich.print("Maintains original case")
        self._rich.print("Input validation and error handling")
        self._rich.print(f"Maximum text length: {max_text_length} characters")

    def pause(self) -> None:
        """Print the 'press Enter' prompt; the caller reads the line."""
        self.console.blank()
        self.prompt("Press Enter to continue...")
