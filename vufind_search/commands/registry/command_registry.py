from typing import Any, Dict, List, Type
import logging
from vufind_search.commands.abstract_base import AbstractBase
from vufind_search.commands.interfaces.command_context import CommandContext


logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Registry mapping command names to command classes.

    The registry acts as a factory so callers such as the HTTP layer can
    build commands from a name and keyword arguments without importing
    every command class.

    Usage:
        registry = CommandRegistry()
        command = registry.create_command("search", backend_id="Local", query="x")
        dispatcher.invoke(command)
    """

    def __init__(self) -> None:
        logger.info("Initializing CommandRegistry")

        # Registry of command classes keyed by command name
        self._command_classes: Dict[str, Type[AbstractBase]] = {}

        self._setup_commands()

    def _setup_commands(self) -> None:
        """Register all built-in command classes"""
        logger.info("Setting up command classes")

        from vufind_search.commands.impl import (
            LookupDoiCommand,
            LookupIssnsCommand,
            RetrieveBatchCommand,
            RetrieveCommand,
            SearchCommand,
            SimilarCommand,
        )

        self.register(CommandContext.SEARCH, SearchCommand)
        self.register(CommandContext.RETRIEVE, RetrieveCommand)
        self.register(CommandContext.RETRIEVE_BATCH, RetrieveBatchCommand)
        self.register(CommandContext.SIMILAR, SimilarCommand)
        self.register(CommandContext.LOOKUP_DOI, LookupDoiCommand)
        self.register(CommandContext.LOOKUP_ISSNS, LookupIssnsCommand)

        logger.info(
            f"Registered {len(self._command_classes)} command classes: "
            f"{list(self._command_classes.keys())}"
        )

    def register(self, name: str, command_class: Type[AbstractBase]) -> None:
        """Register a command class under name, overriding any previous one"""
        name = str(name)
        if name in self._command_classes:
            logger.warning(f"Command '{name}' already registered, overriding")

        self._command_classes[name] = command_class
        logger.debug(f"Registered command class: {name}")

    def create_command(self, command_name: str, **kwargs: Any) -> AbstractBase:
        """
        Create a command instance.

        Args:
            command_name: Name of the command to create
            **kwargs: Constructor arguments of the command class

        Returns:
            New, not yet executed command

        Raises:
            ValueError: If command_name is not registered
            TypeError: If kwargs do not match the command constructor
        """
        command_name = str(command_name)
        if command_name not in self._command_classes:
            available_commands = list(self._command_classes.keys())
            raise ValueError(
                f"Command '{command_name}' not found. Available commands: {available_commands}"
            )

        command = self._command_classes[command_name](**kwargs)
        logger.debug(f"Created command instance: {command!r}")
        return command

    def get_available_commands(self) -> List[str]:
        return list(self._command_classes.keys())

    def get_command_info(self, command_name: str) -> Dict[str, Any]:
        """
        Get information about a specific command.

        Raises:
            ValueError: If command_name is not registered
        """
        if command_name not in self._command_classes:
            raise ValueError(f"Command '{command_name}' not found")

        command_class = self._command_classes[command_name]
        doc = (command_class.__doc__ or "").strip().splitlines()
        return {
            "name": command_name,
            "class": command_class.__name__,
            "description": doc[0] if doc else "",
        }

    def remove_command_class(self, command_name: str) -> bool:
        """Remove a command class; returns False if it was not registered"""
        if command_name not in self._command_classes:
            return False

        del self._command_classes[command_name]
        logger.info(f"Removed command class: {command_name}")
        return True
