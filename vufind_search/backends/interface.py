from abc import ABC, abstractmethod
from typing import List, Optional

from vufind_search.core.param_bag import ParamBag
from vufind_search.models.records import RecordCollection


class BackendInterface(ABC):
    """Abstract interface shared by all search backends"""

    def __init__(self, identifier: Optional[str] = None):
        self._identifier = identifier

    def get_identifier(self) -> Optional[str]:
        """
        Return the identifier the backend is registered under

        Returns:
            Backend identifier (e.g. "Solr", "BrowZine")
        """
        return self._identifier

    def set_identifier(self, identifier: str) -> None:
        self._identifier = identifier

    def close(self) -> None:
        """Release resources held by the backend; no-op by default"""
        pass


class SearchBackendInterface(BackendInterface):
    """Capability: free-text search"""

    @abstractmethod
    def search(
        self,
        query: str,
        offset: int,
        limit: int,
        params: Optional[ParamBag] = None,
    ) -> RecordCollection:
        """
        Perform a search and return a slice of the matching records

        Args:
            query: Query string
            offset: Index of the first record to return
            limit: Maximum number of records to return
            params: Backend specific parameters

        Returns:
            RecordCollection with the requested slice
        """
        pass


class RetrieveBackendInterface(BackendInterface):
    """Capability: fetch one record by identifier"""

    @abstractmethod
    def retrieve(
        self, record_id: str, params: Optional[ParamBag] = None
    ) -> RecordCollection:
        """
        Retrieve a single record

        Args:
            record_id: Record identifier
            params: Backend specific parameters

        Returns:
            RecordCollection holding zero or one record
        """
        pass


class RetrieveBatchBackendInterface(BackendInterface):
    """Capability: fetch several records at once"""

    @abstractmethod
    def retrieve_batch(
        self, ids: List[str], params: Optional[ParamBag] = None
    ) -> RecordCollection:
        pass


class SimilarBackendInterface(BackendInterface):
    """Capability: find records similar to a given record"""

    @abstractmethod
    def similar(
        self, record_id: str, params: Optional[ParamBag] = None
    ) -> RecordCollection:
        pass
