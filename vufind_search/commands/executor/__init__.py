"""
Command dispatcher resolving backends and executing commands on them,
with logging, listeners and metrics collection.
"""

from .command_dispatcher import CommandDispatcher, EVENT_ERROR, EVENT_POST, EVENT_PRE

__all__ = ["CommandDispatcher", "EVENT_ERROR", "EVENT_POST", "EVENT_PRE"]
