"""
Cipher Forge Shared Module
==========================

Configuration, structured logging and Rich console primitives shared by
every part of the Cipher Forge.
"""

from shared.config import ForgeConfig, get_config

__all__ = ["ForgeConfig", "get_config"]
