from enum import Enum
from typing import Union


class CommandContext(str, Enum):
    """
    Known purposes a command can be invoked for.

    Callers may use any other non-empty string as a custom context; it is
    kept verbatim and treated as opaque by the command layer.
    """

    SEARCH = "search"
    RETRIEVE = "retrieve"
    RETRIEVE_BATCH = "retrieveBatch"
    SIMILAR = "similar"
    LOOKUP_DOI = "lookupDoi"
    LOOKUP_ISSNS = "lookupIssns"
    CALL_METHOD = "callMethod"

    @classmethod
    def coerce(cls, value: Union["CommandContext", str]) -> "ContextValue":
        """Map known context strings onto members, keep custom ones as-is"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(
                f"context must be a CommandContext or string, got {type(value).__name__}"
            )
        if not value:
            raise ValueError("context must not be empty")
        try:
            return cls(value)
        except ValueError:
            return value

    def __str__(self) -> str:
        return self.value


ContextValue = Union[CommandContext, str]
