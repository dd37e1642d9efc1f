from typing import Any, List

from vufind_search.backends.browzine.backend import BrowZineBackend
from vufind_search.backends.browzine.connector import Connector
from vufind_search.backends.interface import BackendInterface
from vufind_search.commands.impl.call_method_command import CallMethodCommand
from vufind_search.commands.interfaces.command_context import CommandContext


class LookupIssnsCommand(CallMethodCommand):
    """Look up BrowZine journal information for one or more ISSNs"""

    def __init__(self, backend_id: str, issns: List[str]):
        if not issns:
            raise ValueError("at least one ISSN is required")
        super().__init__(
            backend_id,
            BrowZineBackend,
            "lookup_issns",
            CommandContext.LOOKUP_ISSNS,
        )
        self._issns = list(issns)

    def get_arguments(self) -> List[Any]:
        return [list(self._issns)]

    def get_call_target(self, backend: BackendInterface) -> Connector:
        return backend.get_connector()

    def unsupported_message(self, backend: BackendInterface) -> str:
        return f"Unexpected backend: {type(backend).__name__}"
