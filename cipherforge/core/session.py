"""
Cipher Forge Session Engine
============================

Drives the interactive menu loop:

    SelectMenuOption -> SelectCipher -> ReadPlaintext -> ReadKey
        -> Execute -> DisplayResult -> (repeat | back to menu)

Every step that reads free-form input runs under a bounded retry
policy. A step validator returns either the accepted value or a
:class:`~cipherforge.core.errors.ValidationFailure`; each failure is
shown together with the number of attempts left, and running out of
attempts raises :class:`~cipherforge.core.errors.RetryExhausted`, which
unwinds to the menu loop.

Nothing short of the user choosing *Exit*, declining a "continue?"
prompt, or closing the input stream ends the session. Unexpected faults
are logged with their traceback and turned into a continue/stop
question.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, TypeVar, Union

from shared.config import ForgeConfig, SessionConfig
from shared.logger import ForgeLogger

from cipherforge.algorithms import CipherAlgorithm
from cipherforge.core.errors import RetryExhausted, ValidationFailure
from cipherforge.core.models import CipherFamily, CipherResult, MenuOption
from cipherforge.core.registry import CipherRegistry
from cipherforge.core.validation import (
    is_valid_caesar_key,
    is_valid_vigenere_key,
    parse_shift,
)
from cipherforge.output.console import ForgeConsoleOutput
from cipherforge.parsers.line_source import LineSource

T = TypeVar("T")
Validated = Union[T, ValidationFailure]

# Step names, used in retry messages and as the logger's step field.
STEP_MENU = "menu_selection"
STEP_CIPHER = "cipher_selection"
STEP_PLAINTEXT = "text_input"
STEP_KEY = "key_input"


# ===================================================================== #
#  Retry Policy
# ===================================================================== #


@dataclass(slots=True)
class RetryPolicy:
    """Attempt counter for a single step. Create a fresh one per step."""

    max_attempts: int = 3
    attempts: int = 0

    def record_failure(self) -> None:
        self.attempts += 1

    @property
    def remaining(self) -> int:
        return max(self.max_attempts - self.attempts, 0)

    @property
    def exhausted(self) -> bool:
        return self.attempts >= self.max_attempts


# ===================================================================== #
#  Session
# ===================================================================== #


class Session:
    """Interactive encryption session.

    Usage::

        session = Session(source=LineSource(), display=ForgeConsoleOutput())
        session.run()

    Attributes:
        registry: Available algorithms.
        config: Session policy and logging settings.
        logger: Structured logger scoped to this session.
    """

    def __init__(
        self,
        source: Optional[LineSource] = None,
        display: Optional[ForgeConsoleOutput] = None,
        *,
        registry: Optional[CipherRegistry] = None,
        config: Optional[ForgeConfig] = None,
        logger: Optional[ForgeLogger] = None,
    ) -> None:
        self.config = config or ForgeConfig()
        self.registry = registry or CipherRegistry()
        self.logger = logger or ForgeLogger.from_config(
            "session", self.config.global_settings, console_output=False
        )
        self._source = source or LineSource()
        self._display = display or ForgeConsoleOutput()

        self._key_policies: dict[
            CipherFamily, Callable[[str], Optional[str]]
        ] = {
            CipherFamily.CAESAR: self._caesar_key_problem,
            CipherFamily.VIGENERE: self._vigenere_key_problem,
        }

    @property
    def policy(self) -> SessionConfig:
        return self.config.session

    # ------------------------------------------------------------------ #
    #  Top-level loop
    # ------------------------------------------------------------------ #

    def run(self) -> int:
        """Run the menu loop until the user leaves.

        Returns:
            Number of menu actions that completed without escalating.
        """
        self._display.welcome(version=self.config.global_settings.version)
        self.logger.info("Session started")

        completed = 0
        running = True
        while running:
            try:
                option = self.select_menu_option()
                running = self.handle_menu_choice(option)
                completed += 1
            except RetryExhausted as exc:
                self._report_retry_exhausted(exc)
                running = self.confirm("Would you like to try again?")
            except EOFError:
                self.logger.info("Input closed; ending session")
                running = False
            except Exception as exc:
                self._report_unexpected(exc)
                running = self.confirm(
                    "An unexpected error occurred. Would you like to continue?"
                )

        self._display.goodbye()
        self.logger.info("Session finished", completed=completed)
        return completed

    def handle_menu_choice(self, option: MenuOption) -> bool:
        """Perform *option*. Returns ``False`` when the session should end."""
        try:
            if option is MenuOption.ENCRYPT_MESSAGE:
                return self.encryption_loop()
            if option is MenuOption.VIEW_ALGORITHMS:
                self._display.show_algorithms(self.registry.entries())
                self._wait_for_enter()
                return True
            if option is MenuOption.HELP:
                self._display.show_help(
                    min_shift=self.policy.caesar_min_shift,
                    max_shift=self.policy.caesar_max_shift,
                    max_key_length=self.policy.vigenere_max_key_length,
                    max_text_length=self.policy.max_plaintext_length,
                )
                self._wait_for_enter()
                return True
            return False

        except RetryExhausted as exc:
            self._report_retry_exhausted(exc)
            return self.confirm("Would you like to return to the main menu?")
        except EOFError:
            raise
        except Exception as exc:
            self._report_unexpected(exc)
            return self.confirm("An error occurred. Would you like to continue?")

    def encryption_loop(self) -> bool:
        """Encrypt messages until the user declines another round."""
        while True:
            self.encrypt_once()
            if not self.confirm("Would you like to encrypt another message?"):
                return True

    def encrypt_once(self) -> CipherResult:
        """One full round: choose cipher, read text and key, encrypt, show."""
        algorithm = self.select_cipher()
        plaintext = self.read_plaintext()
        key = self.read_key(algorithm)

        self._display.show_processing()
        with self.logger.timed(algorithm.name):
            result = algorithm.encrypt(plaintext, key)

        self.logger.info(
            "Encryption finished",
            algorithm=result.algorithm_name,
            success=result.success,
            length=result.length,
        )
        self._display.show_result(
            result, plaintext, truncate=self.policy.display_truncate
        )
        return result

    # ------------------------------------------------------------------ #
    #  Steps
    # ------------------------------------------------------------------ #

    def select_menu_option(self) -> MenuOption:
        options = list(MenuOption)

        def attempt() -> Validated[MenuOption]:
            self._display.show_menu(options)
            choice = self._source.next_int()
            if choice is None:
                return ValidationFailure(STEP_MENU, "Please enter a valid number.")
            option = MenuOption.from_value(choice)
            if option is None:
                return ValidationFailure(
                    STEP_MENU, f"Invalid option. Please select 1-{len(options)}"
                )
            return option

        return self._with_retry(STEP_MENU, attempt)

    def select_cipher(self) -> CipherAlgorithm:
        tokens = self.registry.tokens
        listed = " or ".join(tokens)

        def attempt() -> Validated[CipherAlgorithm]:
            self._display.show_cipher_list(self.registry.enumerate())
            choice = self._source.next_int()
            if choice is None:
                return ValidationFailure(
                    STEP_CIPHER, f"Please enter a valid number ({listed})."
                )
            cipher = self.registry.get_cipher(str(choice))
            if cipher is None:
                return ValidationFailure(
                    STEP_CIPHER, f"Invalid cipher selection. Please choose {listed}."
                )
            return cipher

        return self._with_retry(STEP_CIPHER, attempt)

    def read_plaintext(self) -> str:
        def attempt() -> Validated[str]:
            self._display.show_section("TEXT INPUT")
            self._display.prompt("Enter text to encrypt: ")
            return self.validate_plaintext(self._source.next_line())

        return self._with_retry(STEP_PLAINTEXT, attempt)

    def read_key(self, algorithm: CipherAlgorithm) -> str:
        def attempt() -> Validated[str]:
            self._display.show_section("KEY INPUT")
            self._display.prompt(algorithm.key_hint)
            return self.validate_key(algorithm, self._source.next_line())

        return self._with_retry(STEP_KEY, attempt)

    # ------------------------------------------------------------------ #
    #  Step validators
    # ------------------------------------------------------------------ #

    def validate_plaintext(self, text: str) -> Validated[str]:
        text = text.strip()
        if not text:
            return ValidationFailure(
                STEP_PLAINTEXT,
                "Text cannot be empty. Please enter some text to encrypt.",
            )
        limit = self.policy.max_plaintext_length
        if len(text) > limit:
            return ValidationFailure(
                STEP_PLAINTEXT,
                f"Text is too long. Maximum length is {limit} characters.",
            )
        return text

    def validate_key(self, algorithm: CipherAlgorithm, key: str) -> Validated[str]:
        """Check *key* against the algorithm's syntax and the session policy."""
        key = key.strip()
        if not key:
            return ValidationFailure(STEP_KEY, "Key cannot be empty.")

        check = self._key_policies.get(algorithm.family)
        if check is not None:
            problem = check(key)
        elif not algorithm.is_valid_key(key):
            problem = f"Invalid key for {algorithm.name}."
        else:
            problem = None

        if problem is not None:
            return ValidationFailure(STEP_KEY, problem)
        return key

    def _caesar_key_problem(self, key: str) -> Optional[str]:
        low, high = self.policy.caesar_min_shift, self.policy.caesar_max_shift
        if not is_valid_caesar_key(key):
            return f"Invalid Caesar key. Please enter an integer between {low} and {high}."
        shift = parse_shift(key)
        if shift is None or not low <= shift <= high:
            return f"Shift value must be between {low} and {high}."
        return None

    def _vigenere_key_problem(self, key: str) -> Optional[str]:
        if not is_valid_vigenere_key(key):
            return "Invalid Vigenere key. Please use only letters (a-z, A-Z)."
        limit = self.policy.vigenere_max_key_length
        if len(key) > limit:
            return f"Vigenere key is too long. Maximum length is {limit} characters."
        return None

    # ------------------------------------------------------------------ #
    #  Retry engine
    # ------------------------------------------------------------------ #

    def _with_retry(self, step: str, attempt: Callable[[], Validated[T]]) -> T:
        """Call *attempt* until it yields a value or the budget runs out.

        Raises:
            RetryExhausted: After ``max_attempts`` consecutive failures.
        """
        retry = RetryPolicy(max_attempts=self.policy.max_attempts)
        with self.logger.step(step):
            while True:
                outcome = attempt()
                if not isinstance(outcome, ValidationFailure):
                    return outcome

                retry.record_failure()
                self._display.show_error(outcome.reason)
                self.logger.warning(
                    "Input rejected: %s",
                    outcome.reason,
                    attempt=retry.attempts,
                    remaining=retry.remaining,
                )
                if retry.exhausted:
                    raise RetryExhausted(step, retry.attempts, outcome.reason)
                self._display.show_attempts_remaining(retry.remaining)

    # ------------------------------------------------------------------ #
    #  Confirmation and reporting
    # ------------------------------------------------------------------ #

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question. Only ``y``/``yes`` count as yes."""
        self._display.prompt(f"\n{message} (y/n): ")
        try:
            answer = self._source.next_line().lower()
        except EOFError:
            return False
        return answer in ("y", "yes")

    def _wait_for_enter(self) -> None:
        self._display.pause()
        self._source.next_line()

    def _report_retry_exhausted(self, exc: RetryExhausted) -> None:
        self._display.show_error(f"Input Error: {exc}")
        self.logger.warning(
            "Retry budget exhausted",
            step=exc.step,
            attempts=exc.attempts,
            last_reason=exc.last_reason,
        )

    def _report_unexpected(self, exc: Exception) -> None:
        self._display.show_unexpected_error(str(exc) or type(exc).__name__)
        self.logger.exception("Unexpected application error")
