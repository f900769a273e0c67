"""
Cipher Forge Output Module
===========================

Console display for the interactive session.
"""

from cipherforge.output.console import ForgeConsoleOutput, truncate_for_display

__all__ = [
    "ForgeConsoleOutput",
    "truncate_for_display",
]
