"""
peekelf Shared Module
=====================

Configuration, logging and console utilities used by the peekelf
engine and command-line interface.
"""

from shared.config import PeekConfig, get_config

__all__ = ["PeekConfig", "get_config"]
