"""
Line Source
============

Pulls raw answers from a text stream for the interactive session. Two
kinds of read are offered: a numeric token (menu and cipher selections)
and a full line (text, keys and yes/no confirmations).

Reading a number consumes the whole line, so a stray ``"2 abc"`` never
leaks ``"abc"`` into the next prompt.
"""

from __future__ import annotations

import sys
from typing import IO, Optional

from cipherforge.core.validation import parse_int


class LineSource:
    """Line-oriented reader over a text stream.

    Usage::

        source = LineSource(io.StringIO("1\\nHELLO\\n3\\n"))
        source.next_int()     # 1
        source.next_line()    # 'HELLO'

    Args:
        stream: Stream to read from. Defaults to ``sys.stdin`` resolved at
                read time.
    """

    def __init__(self, stream: Optional[IO[str]] = None) -> None:
        self._stream = stream
        self._lines_read = 0

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdin

    @property
    def lines_read(self) -> int:
        """Number of lines consumed so far."""
        return self._lines_read

    def _read_raw(self) -> str:
        raw = self.stream.readline()
        if raw == "":
            raise EOFError("input stream closed")
        self._lines_read += 1
        return raw.rstrip("\r\n")

    def next_line(self, strip: bool = True) -> str:
        """Return the next line, trimmed unless *strip* is false.

        Raises:
            EOFError: The stream is exhausted.
        """
        line = self._read_raw()
        return line.strip() if strip else line

    def next_int(self) -> Optional[int]:
        """Return the first token of the next line as an integer.

        Returns ``None`` when the line is blank or its first token is not
        a base-10 integer. The remainder of the line is discarded.

        Raises:
            EOFError: The stream is exhausted.
        """
        tokens = self._read_raw().split()
        if not tokens:
            return None
        return parse_int(tokens[0])
