from typing import Any, List, Optional, Type

from vufind_search.backends.interface import BackendInterface
from vufind_search.commands.abstract_base import AbstractBase
from vufind_search.commands.interfaces.command_context import (
    CommandContext,
    ContextValue,
)
from vufind_search.core.exceptions import UnsupportedBackendError
from vufind_search.core.param_bag import ParamBag


class CallMethodCommand(AbstractBase):
    """
    Command that calls one method of a backend capability interface.

    Subclasses pick the capability and method, and supply the positional
    arguments through get_arguments().
    """

    def __init__(
        self,
        backend_id: str,
        interface: Type[BackendInterface],
        method: str,
        context: ContextValue = CommandContext.CALL_METHOD,
        params: Optional[ParamBag] = None,
    ):
        super().__init__(backend_id, context, params)
        self._interface = interface
        self._method = method

    def get_method(self) -> str:
        return self._method

    def get_arguments(self) -> List[Any]:
        """Return positional arguments for the backend method"""
        return [self.get_search_parameters()]

    def get_call_target(self, backend: BackendInterface) -> Any:
        """Return the object whose method is called (the backend by default)"""
        return backend

    def unsupported_message(self, backend: BackendInterface) -> str:
        return f"{self.get_target_identifier()} does not support {self._method}()"

    def execute(self, backend: BackendInterface) -> "CallMethodCommand":
        self.validate_backend(backend)
        if not isinstance(backend, self._interface):
            raise UnsupportedBackendError(self.unsupported_message(backend))

        target = self.get_call_target(backend)
        self.logger.debug(
            f"Calling {type(target).__name__}.{self._method}() "
            f"on backend '{self.get_target_identifier()}'"
        )
        result = getattr(target, self._method)(*self.get_arguments())
        return self.finalize_execution(result)
