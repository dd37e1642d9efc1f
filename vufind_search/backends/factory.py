from typing import Any
from vufind_search.backends.interface import BackendInterface
from vufind_search.backends.browzine.backend import BrowZineBackend
from vufind_search.backends.browzine.connector import Connector
from vufind_search.backends.memory import MemoryBackend
from vufind_search.config.constants import (
    BROWZINE_BACKEND_ID,
    BROWZINE_BASE_URL,
    BROWZINE_TIMEOUT_SECONDS,
)


def get_backend(backend_type: str = "memory", **kwargs: Any) -> BackendInterface:
    """
    Factory function to get the appropriate backend implementation

    Args:
        backend_type: Type of backend ('memory', or 'browzine')
        **kwargs: Additional arguments for the backend implementation

    Returns:
        BackendInterface implementation
    """
    if backend_type.lower() == "memory":
        identifier = kwargs.get("identifier")
        if not identifier:
            raise ValueError("identifier is required for memory backend")

        return MemoryBackend(identifier=identifier, records=kwargs.get("records"))

    elif backend_type.lower() == "browzine":
        connector = Connector(
            library_id=kwargs.get("library_id", ""),
            access_token=kwargs.get("access_token", ""),
            base_url=kwargs.get("base_url") or BROWZINE_BASE_URL,
            timeout_seconds=kwargs.get("timeout_seconds", BROWZINE_TIMEOUT_SECONDS),
            client=kwargs.get("client"),
        )
        return BrowZineBackend(
            connector, identifier=kwargs.get("identifier", BROWZINE_BACKEND_ID)
        )

    else:
        raise ValueError(f"Unknown backend type: {backend_type}")
