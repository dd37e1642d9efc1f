from typing import Any, List

from vufind_search.backends.browzine.backend import BrowZineBackend
from vufind_search.backends.browzine.connector import Connector
from vufind_search.backends.interface import BackendInterface
from vufind_search.commands.impl.call_method_command import CallMethodCommand
from vufind_search.commands.interfaces.command_context import CommandContext


class LookupDoiCommand(CallMethodCommand):
    """Look up BrowZine article information for a DOI"""

    def __init__(self, backend_id: str, doi: str, include_journal: bool = False):
        super().__init__(
            backend_id,
            BrowZineBackend,
            "lookup_doi",
            CommandContext.LOOKUP_DOI,
        )
        self._doi = doi
        self._include_journal = include_journal

    def get_arguments(self) -> List[Any]:
        return [self._doi, self._include_journal]

    def get_call_target(self, backend: BackendInterface) -> Connector:
        return backend.get_connector()

    def unsupported_message(self, backend: BackendInterface) -> str:
        return f"Unexpected backend: {type(backend).__name__}"
