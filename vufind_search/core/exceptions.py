"""
Error hierarchy for the search command layer.

Runtime errors describe conditions found while dispatching (wrong backend,
missing capability, upstream failure). Logic errors describe caller ordering
bugs and are never expected in a correct program.
"""

from typing import List, Optional


class SearchError(Exception):
    """Base class for all search layer errors"""


class SearchRuntimeError(SearchError, RuntimeError):
    """Error raised for conditions only detectable at runtime"""


class SearchLogicError(SearchError):
    """Error raised when a caller uses the API in the wrong order"""


class BackendMismatchError(SearchRuntimeError):
    """Exception raised when a command is executed against the wrong backend"""

    def __init__(self, expected: str, actual: Optional[str]):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected backend instance {expected} instead of {actual}")


class UnsupportedBackendError(SearchRuntimeError):
    """Exception raised when a backend lacks the capability a command needs"""


class BackendNotFoundError(SearchRuntimeError):
    """Exception raised when no backend is registered under an identifier"""

    def __init__(self, backend_id: str, available: Optional[List[str]] = None):
        self.backend_id = backend_id
        self.available = available or []
        super().__init__(
            f"Backend '{backend_id}' not found. Available backends: {self.available}"
        )


class BackendRequestError(SearchRuntimeError):
    """Exception raised when a remote backend call fails"""

    def __init__(
        self,
        backend_id: str,
        message: str,
        status_code: Optional[int] = None,
    ):
        self.backend_id = backend_id
        self.status_code = status_code
        super().__init__(f"Backend '{backend_id}' request failed: {message}")


class CommandNotExecutedError(SearchLogicError):
    """Exception raised when reading the result of a command that never ran"""

    def __init__(self) -> None:
        super().__init__("Command was not yet executed")


class CommandAlreadyExecutedError(SearchLogicError):
    """Exception raised when executing a command a second time"""

    def __init__(self, command_name: str):
        self.command_name = command_name
        super().__init__(f"Command '{command_name}' was already executed")
