from typing import Dict, List
from pydantic import BaseModel, Field

from vufind_search.config.constants import DEFAULT_SEARCH_LIMIT, MAX_SEARCH_LIMIT
from vufind_search.core.param_bag import ParamBag


class BackendParamsRequest(BaseModel):
    params: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Backend parameters, each name mapping to a list of values (e.g. {'fq': ['format:Book']})",
    )

    def to_param_bag(self) -> ParamBag:
        return ParamBag(self.params)


class SearchRequest(BackendParamsRequest):
    query: str = Field("", description="Query string; empty or '*:*' matches everything")
    offset: int = Field(0, ge=0, description="Index of the first record to return")
    limit: int = Field(
        DEFAULT_SEARCH_LIMIT,
        ge=0,
        le=MAX_SEARCH_LIMIT,
        description="Maximum number of records to return",
    )


class RetrieveBatchRequest(BackendParamsRequest):
    ids: List[str] = Field(..., min_length=1, description="Record identifiers to fetch")
