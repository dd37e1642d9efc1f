from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class RecordCollection(BaseModel):
    """Records returned by a search-like backend operation"""

    source_identifier: str = Field(
        ..., description="Identifier of the backend that produced the records"
    )
    total: int = Field(0, description="Total number of matching records")
    offset: int = Field(0, description="Offset of the first returned record")
    records: List[Dict[str, Any]] = Field(default_factory=list)

    def get_total(self) -> int:
        return self.total

    def first(self) -> Optional[Dict[str, Any]]:
        """Return the first record or None for an empty collection"""
        return self.records[0] if self.records else None

    def get_record_ids(self) -> List[str]:
        return [str(record.get("id")) for record in self.records]

    def __len__(self) -> int:
        return len(self.records)
