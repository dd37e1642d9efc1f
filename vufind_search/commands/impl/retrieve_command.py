from typing import Any, List, Optional

from vufind_search.backends.interface import (
    RetrieveBackendInterface,
    RetrieveBatchBackendInterface,
)
from vufind_search.commands.impl.call_method_command import CallMethodCommand
from vufind_search.commands.interfaces.command_context import CommandContext
from vufind_search.core.param_bag import ParamBag


class RetrieveCommand(CallMethodCommand):
    """Fetch a single record by identifier"""

    def __init__(
        self,
        backend_id: str,
        record_id: str,
        params: Optional[ParamBag] = None,
    ):
        if not record_id:
            raise ValueError("record_id is required")
        super().__init__(
            backend_id,
            RetrieveBackendInterface,
            "retrieve",
            CommandContext.RETRIEVE,
            params,
        )
        self._record_id = record_id

    def get_record_id(self) -> str:
        return self._record_id

    def get_arguments(self) -> List[Any]:
        return [self._record_id, self.get_search_parameters()]


class RetrieveBatchCommand(CallMethodCommand):
    """Fetch several records by identifier in one backend call"""

    def __init__(
        self,
        backend_id: str,
        ids: List[str],
        params: Optional[ParamBag] = None,
    ):
        super().__init__(
            backend_id,
            RetrieveBatchBackendInterface,
            "retrieve_batch",
            CommandContext.RETRIEVE_BATCH,
            params,
        )
        self._ids = list(ids)

    def get_record_ids(self) -> List[str]:
        return list(self._ids)

    def get_arguments(self) -> List[Any]:
        return [list(self._ids), self.get_search_parameters()]
