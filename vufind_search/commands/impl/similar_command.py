from typing import Any, List, Optional

from vufind_search.backends.interface import SimilarBackendInterface
from vufind_search.commands.impl.call_method_command import CallMethodCommand
from vufind_search.commands.interfaces.command_context import CommandContext
from vufind_search.core.param_bag import ParamBag


class SimilarCommand(CallMethodCommand):
    """Find records similar to a given record"""

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
            SimilarBackendInterface,
            "similar",
            CommandContext.SIMILAR,
            params,
        )
        self._record_id = record_id

    def get_arguments(self) -> List[Any]:
        return [self._record_id, self.get_search_parameters()]
