from typing import Optional

from vufind_search.backends.browzine.connector import Connector
from vufind_search.backends.interface import BackendInterface
from vufind_search.config.constants import BROWZINE_BACKEND_ID


class BrowZineBackend(BackendInterface):
    """Backend wrapping the BrowZine API connector"""

    def __init__(self, connector: Connector, identifier: Optional[str] = None):
        super().__init__(identifier or BROWZINE_BACKEND_ID)
        self._connector = connector

    def get_connector(self) -> Connector:
        return self._connector

    def close(self) -> None:
        self._connector.close()
