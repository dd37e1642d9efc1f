import json
import logging
import os
from functools import lru_cache
from typing import Any, Dict, List

from vufind_search.backends.factory import get_backend
from vufind_search.backends.registry import BackendRegistry
from vufind_search.config.constants import (
    BROWZINE_BACKEND_ID,
    BROWZINE_BASE_URL,
    BROWZINE_TIMEOUT_SECONDS,
    LOCAL_BACKEND_ID,
    LOCAL_BACKEND_TYPE,
)

logger = logging.getLogger(__name__)


def load_local_records(path: str) -> List[Dict[str, Any]]:
    """Load records for the local backend from a JSON array file"""
    with open(path, encoding="utf-8") as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise ValueError(f"{path} must contain a JSON array of records")
    return records


def build_backend_registry() -> BackendRegistry:
    """
    Build a backend registry from environment variables.

    The local backend is always registered, seeded from LOCAL_RECORDS_PATH
    when set. BrowZine is registered only when BROWZINE_LIBRARY_ID and
    BROWZINE_ACCESS_TOKEN are both set.
    """
    registry = BackendRegistry()

    records_path = os.environ.get("LOCAL_RECORDS_PATH")
    records = load_local_records(records_path) if records_path else []
    registry.register(
        get_backend(LOCAL_BACKEND_TYPE, identifier=LOCAL_BACKEND_ID, records=records)
    )

    library_id = os.environ.get("BROWZINE_LIBRARY_ID")
    access_token = os.environ.get("BROWZINE_ACCESS_TOKEN")
    if library_id and access_token:
        registry.register(
            get_backend(
                "browzine",
                identifier=BROWZINE_BACKEND_ID,
                library_id=library_id,
                access_token=access_token,
                base_url=os.environ.get("BROWZINE_BASE_URL", BROWZINE_BASE_URL),
                timeout_seconds=float(
                    os.environ.get("BROWZINE_TIMEOUT", BROWZINE_TIMEOUT_SECONDS)
                ),
            )
        )
    else:
        logger.info(
            "BROWZINE_LIBRARY_ID or BROWZINE_ACCESS_TOKEN not set, BrowZine backend disabled"
        )

    return registry


@lru_cache(maxsize=1)
def get_default_backend_registry() -> BackendRegistry:
    """Get the process-wide backend registry"""
    return build_backend_registry()


def close_default_backend_registry() -> None:
    """Close the process-wide registry's backends and drop it from the cache"""
    if get_default_backend_registry.cache_info().currsize:
        get_default_backend_registry().close()
    get_default_backend_registry.cache_clear()
