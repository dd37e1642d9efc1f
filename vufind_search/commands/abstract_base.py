import logging
from typing import Any, Optional

from vufind_search.backends.interface import BackendInterface
from vufind_search.commands.interfaces.command import CommandInterface
from vufind_search.commands.interfaces.command_context import (
    CommandContext,
    ContextValue,
)
from vufind_search.core.exceptions import (
    BackendMismatchError,
    CommandAlreadyExecutedError,
    CommandNotExecutedError,
)
from vufind_search.core.param_bag import ParamBag


class AbstractBase(CommandInterface):
    """
    Shared execution-state bookkeeping for commands.

    Concrete commands implement execute() by calling validate_backend()
    first and returning finalize_execution(result) last.
    """

    def __init__(
        self,
        backend_id: str,
        context: ContextValue,
        params: Optional[ParamBag] = None,
    ):
        """
        Initialize command

        Args:
            backend_id: Identifier of the target backend
            context: Purpose of the invocation
            params: Backend parameters (a new empty bag when omitted)
        """
        if not backend_id:
            raise ValueError("backend_id is required")

        self._backend_id = backend_id
        self._context = CommandContext.coerce(context)
        self._params = params if params is not None else ParamBag()
        self._executed = False
        self._result: Any = None
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def get_command_name(self) -> str:
        return self.__class__.__name__

    def get_target_identifier(self) -> str:
        return self._backend_id

    def validate_backend(self, backend: BackendInterface) -> None:
        """
        Check that backend is the one this command was built for.

        Args:
            backend: Backend handed to execute()

        Raises:
            CommandAlreadyExecutedError: If the command already ran
            BackendMismatchError: If the backend identifier differs
        """
        if self._executed:
            raise CommandAlreadyExecutedError(self.get_command_name())

        actual = backend.get_identifier()
        if actual != self._backend_id:
            self.logger.error(
                f"Command '{self.get_command_name()}' expected backend "
                f"'{self._backend_id}' but got '{actual}'"
            )
            raise BackendMismatchError(self._backend_id, actual)

    def finalize_execution(self, result: Any) -> "AbstractBase":
        """Store result, flag the command as executed and return it"""
        self._result = result
        self._executed = True
        return self

    def is_executed(self) -> bool:
        return self._executed

    def get_result(self) -> Any:
        if not self._executed:
            raise CommandNotExecutedError()
        return self._result

    def get_search_parameters(self) -> ParamBag:
        return self._params

    def get_context(self) -> ContextValue:
        return self._context

    def __str__(self) -> str:
        return f"{self.get_command_name()}(backend='{self._backend_id}')"

    def __repr__(self) -> str:
        return (
            f"{self.get_command_name()}("
            f"backend='{self._backend_id}', "
            f"context='{self._context}', "
            f"params={self._params!r}, "
            f"executed={self._executed}"
            f")"
        )
