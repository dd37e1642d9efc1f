from abc import ABC, abstractmethod
from typing import Any
from vufind_search.backends.interface import BackendInterface
from vufind_search.core.param_bag import ParamBag
from .command_context import ContextValue


class CommandInterface(ABC):
    """
    Base interface for all search commands.

    A command is a single request against a single named backend. Building
    it, executing it and reading its outcome are separate steps, so commands
    can be passed through dispatch and logging layers without those layers
    knowing the backend type.

    All commands must implement:
    - execute(): Run the operation against a backend
    - get_target_identifier(): Identifier of the backend the command expects
    - is_executed() / get_result(): Execution state and outcome
    """

    @abstractmethod
    def execute(self, backend: BackendInterface) -> "CommandInterface":
        """
        Execute the command against the given backend.

        Args:
            backend: Backend instance matching get_target_identifier()

        Returns:
            The command itself, so callers can chain get_result()

        Raises:
            BackendMismatchError: When the backend identifier differs
            UnsupportedBackendError: When the backend lacks the capability
        """
        pass

    @abstractmethod
    def get_target_identifier(self) -> str:
        """
        Return the identifier of the backend this command was built for.

        Returns:
            Backend identifier string
        """
        pass

    @abstractmethod
    def is_executed(self) -> bool:
        pass

    @abstractmethod
    def get_result(self) -> Any:
        """
        Return the outcome of the executed operation.

        Raises:
            CommandNotExecutedError: When called before execute()
        """
        pass

    @abstractmethod
    def get_search_parameters(self) -> ParamBag:
        pass

    @abstractmethod
    def get_context(self) -> ContextValue:
        pass
