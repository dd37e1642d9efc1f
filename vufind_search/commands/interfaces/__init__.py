"""
Command pattern interfaces for the search layer.
"""

from .command import CommandInterface
from .command_context import CommandContext, ContextValue

__all__ = ["CommandInterface", "CommandContext", "ContextValue"]
