"""
Cipher Forge Structured Logger
===============================

Provides :class:`ForgeLogger`, a :class:`logging.LoggerAdapter` that tags
every record with the session *step* being processed (``menu_selection``,
``cipher_selection``, ``text_input``, ``key_input``) and with whatever
keyword fields the caller passes, e.g.::

    log.warning("Input rejected: %s", reason, attempt=2, remaining=1)

Records go to a Rich handler on stderr and, optionally, to a rotating
log file as plain text or one JSON object per line. In JSON output the
keyword fields sit next to ``step`` at the top level, so a rejected key
reads ``{"step": "key_input", "attempt": 2, "remaining": 1, ...}``.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Generator, MutableMapping

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from shared.config import GlobalConfig

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)

# Keyword arguments that belong to logging itself rather than to the record.
_LOGGING_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})

# Top-level keys of a JSON line; caller fields never overwrite these.
_RESERVED_KEYS = ("timestamp", "level", "logger", "message", "component", "step")

_PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(step)s | %(message)s"


class _JsonLineFormatter(logging.Formatter):
    """One JSON object per record, session fields flattened in."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "component": getattr(record, "component", None),
        }
        step = getattr(record, "step", None)
        if step is not None:
            entry["step"] = step

        for key, value in getattr(record, "fields", {}).items():
            if key not in _RESERVED_KEYS:
                entry[key] = value

        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


def _console_handler(level: int) -> RichHandler:
    # stderr keeps log lines out of the prompts on stdout
    return RichHandler(
        level=level,
        console=Console(theme=_LOG_THEME, stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )


def _file_handler(
    path: Path, level: int, *, json_logs: bool, max_bytes: int, backup_count: int
) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(path),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    if json_logs:
        handler.setFormatter(_JsonLineFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                _PLAIN_FORMAT,
                datefmt="%Y-%m-%dT%H:%M:%S%z",
                defaults={"step": "-"},
            )
        )
    return handler


class ForgeLogger(logging.LoggerAdapter):
    """Session-aware logger for one Cipher Forge component.

    Usage::

        log = ForgeLogger("session", log_file="forge.jsonl", json_logs=True)
        with log.step("key_input"):
            log.warning("Input rejected: %s", "too long", attempt=1)
        with log.timed("Caesar Cipher"):
            ...

    Args:
        component:       Short name; the stdlib logger is ``cipherforge.<component>``.
        log_level:       Minimum severity name.
        log_file:        Rotating log file; ``None`` or ``""`` disables it.
        json_logs:       Write JSON lines instead of plain text to the file.
        max_bytes:       File size that triggers rotation.
        backup_count:    Rotated files to keep.
        console_output:  Attach the Rich stderr handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        level = getattr(logging, log_level.upper(), logging.INFO)
        logger = logging.getLogger(f"cipherforge.{component}")
        logger.setLevel(level)
        logger.propagate = False
        # a second instance for the same component replaces the handlers
        logger.handlers.clear()

        if console_output:
            logger.addHandler(_console_handler(level))
        if log_file:
            logger.addHandler(
                _file_handler(
                    Path(log_file),
                    level,
                    json_logs=json_logs,
                    max_bytes=max_bytes,
                    backup_count=backup_count,
                )
            )

        super().__init__(logger, {"component": component})
        self._step: str | None = None

    @classmethod
    def from_config(
        cls,
        component: str,
        settings: GlobalConfig,
        *,
        console_output: bool = True,
    ) -> ForgeLogger:
        """Build a logger from the ``[global]`` section; ``debug`` forces DEBUG."""
        return cls(
            component,
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
            console_output=console_output,
        )

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        fields = {
            key: kwargs.pop(key) for key in list(kwargs) if key not in _LOGGING_KWARGS
        }
        extra = dict(kwargs.get("extra") or {})
        extra.update(self.extra)
        step = fields.pop("step", self._step)
        if step is not None:
            extra["step"] = step
        extra["fields"] = fields
        kwargs["extra"] = extra
        return msg, kwargs

    @contextmanager
    def step(self, name: str) -> Generator[ForgeLogger, None, None]:
        """Tag records logged inside the block with ``step=<name>``."""
        previous, self._step = self._step, name
        try:
            yield self
        finally:
            self._step = previous

    @contextmanager
    def timed(self, label: str) -> Generator[None, None, None]:
        """Log how long the block took, at DEBUG level."""
        started = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - started
            self.debug("%s took %.6f sec", label, elapsed, elapsed=elapsed)
