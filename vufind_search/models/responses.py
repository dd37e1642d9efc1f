from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from vufind_search.models.records import RecordCollection


class BaseResponse(BaseModel):
    backend_id: str = Field(..., description="Identifier of the backend that ran the command")
    context: str = Field(..., description="Context the command was invoked with")
    status: str


class RecordCollectionResponse(BaseResponse):
    result: RecordCollection


class LookupResponse(BaseResponse):
    """Response for BrowZine lookups; result is None when nothing matched"""

    result: Optional[Dict[str, Any]] = None


class BackendListResponse(BaseModel):
    backends: List[str]
    commands: List[str]


class HealthCheckResponse(BaseModel):
    """Response model for health check endpoint"""

    status: str
    timestamp: float
    backends: List[str]
    metrics: Dict[str, Any]
