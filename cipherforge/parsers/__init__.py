"""
Cipher Forge Parsers
=====================

Input reading utilities for the interactive session.
"""

from cipherforge.parsers.line_source import LineSource

__all__ = ["LineSource"]
