"""
Cipher Forge Error Taxonomy
============================

Expected bad input is a value, not an exception: step validators return
a :class:`ValidationFailure` and the session's retry loop decides what to
do with it. Exceptions are reserved for conditions that must unwind the
current step.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    """A rejected input together with the reason shown to the user.

    Attributes:
        step: Name of the session step that rejected the input.
        reason: Human-readable explanation.
    """

    step: str
    reason: str

    def __str__(self) -> str:
        return self.reason


class ForgeError(Exception):
    """Base class for Cipher Forge exceptions."""

    pass


class RetryExhausted(ForgeError):
    """Raised when a session step has used up its attempt budget.

    Unwinds to the menu loop, which reports it and asks whether to carry
    on.
    """

    def __init__(self, step: str, attempts: int, last_reason: str = "") -> None:
        self.step = step
        self.attempts = attempts
        self.last_reason = last_reason
        label = step.replace("_", " ")
        super().__init__(f"Maximum retry attempts exceeded for {label}.")
