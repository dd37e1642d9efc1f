import logging
from typing import Any, Dict, Iterable, List, Optional

from vufind_search.backends.interface import (
    RetrieveBackendInterface,
    RetrieveBatchBackendInterface,
    SearchBackendInterface,
    SimilarBackendInterface,
)
from vufind_search.config.constants import MATCH_ALL_QUERIES
from vufind_search.core.param_bag import ParamBag
from vufind_search.models.records import RecordCollection

logger = logging.getLogger(__name__)


class MemoryBackend(
    SearchBackendInterface,
    RetrieveBackendInterface,
    RetrieveBatchBackendInterface,
    SimilarBackendInterface,
):
    """
    In-memory record store implementing every search capability.

    Used for local collections and for environments where no search server
    is available. Records are plain mappings and must carry an "id" key.
    """

    def __init__(
        self,
        identifier: str,
        records: Optional[Iterable[Dict[str, Any]]] = None,
    ):
        """
        Initialize in-memory backend

        Args:
            identifier: Backend identifier used for dispatch
            records: Initial records, each with an "id" key
        """
        super().__init__(identifier)
        self._records: Dict[str, Dict[str, Any]] = {}
        for record in records or []:
            self.add_record(record)

    def add_record(self, record: Dict[str, Any]) -> None:
        if "id" not in record:
            raise ValueError("record is missing required 'id' field")
        self._records[str(record["id"])] = dict(record)

    def count(self) -> int:
        return len(self._records)

    def _collection(
        self, records: List[Dict[str, Any]], total: int, offset: int = 0
    ) -> RecordCollection:
        return RecordCollection(
            source_identifier=self.get_identifier() or "",
            total=total,
            offset=offset,
            records=records,
        )

    @staticmethod
    def _field_values(record: Dict[str, Any], field: str) -> List[str]:
        value = record.get(field)
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [str(v) for v in value]
        return [str(value)]

    def _text(self, record: Dict[str, Any]) -> str:
        parts = []
        for field in record:
            parts.extend(self._field_values(record, field))
        return " ".join(parts).lower()

    def _matches_filters(self, record: Dict[str, Any], filters: List[str]) -> bool:
        for fq in filters:
            field, sep, value = str(fq).partition(":")
            if not sep:
                raise ValueError(f"Invalid filter '{fq}', expected field:value")
            if value.strip('"') not in self._field_values(record, field):
                return False
        return True

    @staticmethod
    def _sort(
        records: List[Dict[str, Any]], field: str, descending: bool
    ) -> List[Dict[str, Any]]:
        """Sort by the raw field value; records without the field go last"""

        def sort_value(record: Dict[str, Any]) -> Any:
            value = record.get(field)
            if isinstance(value, (list, tuple)):
                return value[0] if value else None
            return value

        present = [r for r in records if sort_value(r) is not None]
        missing = [r for r in records if sort_value(r) is None]
        present.sort(key=sort_value, reverse=descending)
        return present + missing

    def search(
        self,
        query: str,
        offset: int,
        limit: int,
        params: Optional[ParamBag] = None,
    ) -> RecordCollection:
        if offset < 0 or limit < 0:
            raise ValueError("offset and limit must not be negative")

        params = params or ParamBag()
        terms = [] if query.strip() in MATCH_ALL_QUERIES else query.lower().split()
        filters = params.get("fq") or []

        hits = [
            record
            for record in self._records.values()
            if all(term in self._text(record) for term in terms)
            and self._matches_filters(record, filters)
        ]

        sort = params.get("sort")
        if sort:
            field, _, direction = str(sort[0]).partition(" ")
            hits = self._sort(hits, field, direction.strip().lower() == "desc")

        logger.debug(
            f"Memory backend '{self.get_identifier()}' matched {len(hits)} "
            f"records for query '{query}'"
        )
        return self._collection(hits[offset : offset + limit], len(hits), offset)

    def retrieve(
        self, record_id: str, params: Optional[ParamBag] = None
    ) -> RecordCollection:
        record = self._records.get(str(record_id))
        records = [record] if record is not None else []
        return self._collection(records, len(records))

    def retrieve_batch(
        self, ids: List[str], params: Optional[ParamBag] = None
    ) -> RecordCollection:
        records = [
            self._records[str(record_id)]
            for record_id in ids
            if str(record_id) in self._records
        ]
        return self._collection(records, len(records))

    def similar(
        self, record_id: str, params: Optional[ParamBag] = None
    ) -> RecordCollection:
        """Return records sharing at least one title word with record_id"""
        source = self._records.get(str(record_id))
        if source is None:
            return self._collection([], 0)

        words = {
            word
            for title in self._field_values(source, "title")
            for word in title.lower().split()
        }
        records = [
            record
            for rid, record in self._records.items()
            if rid != str(record_id)
            and words
            & {
                word
                for title in self._field_values(record, "title")
                for word in title.lower().split()
            }
        ]
        return self._collection(records, len(records))
