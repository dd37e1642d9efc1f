from typing import Any, List, Optional

from vufind_search.backends.interface import SearchBackendInterface
from vufind_search.commands.impl.call_method_command import CallMethodCommand
from vufind_search.commands.interfaces.command_context import CommandContext
from vufind_search.config.constants import DEFAULT_SEARCH_LIMIT
from vufind_search.core.param_bag import ParamBag


class SearchCommand(CallMethodCommand):
    """Free-text search against a backend"""

    def __init__(
        self,
        backend_id: str,
        query: str,
        offset: int = 0,
        limit: int = DEFAULT_SEARCH_LIMIT,
        params: Optional[ParamBag] = None,
    ):
        if offset < 0:
            raise ValueError("offset must not be negative")
        if limit < 0:
            raise ValueError("limit must not be negative")

        super().__init__(
            backend_id,
            SearchBackendInterface,
            "search",
            CommandContext.SEARCH,
            params,
        )
        self._query = query
        self._offset = offset
        self._limit = limit

    def get_query(self) -> str:
        return self._query

    def get_arguments(self) -> List[Any]:
        return [self._query, self._offset, self._limit, self.get_search_parameters()]
