"""
Command registry for building commands by name.
"""

from .command_registry import CommandRegistry

__all__ = ["CommandRegistry"]
