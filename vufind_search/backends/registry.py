from typing import Dict, List
import logging
from vufind_search.backends.interface import BackendInterface
from vufind_search.core.exceptions import BackendNotFoundError

logger = logging.getLogger(__name__)


class BackendRegistry:
    """Registry resolving search backends by identifier"""

    def __init__(self) -> None:
        logger.info("Initializing BackendRegistry")
        self._backends: Dict[str, BackendInterface] = {}

    def register(self, backend: BackendInterface) -> None:
        """Register a backend under its own identifier

        Args:
            backend: Backend instance with an identifier set

        Raises:
            ValueError: If the backend has no identifier
        """
        identifier = backend.get_identifier()
        if not identifier:
            raise ValueError("backend must have an identifier to be registered")

        if identifier in self._backends:
            logger.warning(f"Backend '{identifier}' already registered, overriding")

        self._backends[identifier] = backend
        logger.debug(f"Registered backend: {identifier} ({type(backend).__name__})")

    def get(self, identifier: str) -> BackendInterface:
        """Get backend by identifier

        Args:
            identifier: Backend identifier (e.g., 'Solr', 'BrowZine')

        Returns:
            The registered backend

        Raises:
            BackendNotFoundError: If no backend uses the identifier
        """
        backend = self._backends.get(identifier)
        if backend is None:
            logger.warning(
                f"Backend '{identifier}' not found. Available: {self.get_available_backends()}"
            )
            raise BackendNotFoundError(identifier, self.get_available_backends())
        return backend

    def has(self, identifier: str) -> bool:
        return identifier in self._backends

    def remove(self, identifier: str) -> bool:
        """Remove a backend; returns False if it was not registered"""
        if identifier not in self._backends:
            return False
        del self._backends[identifier]
        logger.info(f"Removed backend: {identifier}")
        return True

    def get_available_backends(self) -> List[str]:
        return list(self._backends.keys())

    def close(self) -> None:
        """Close every registered backend"""
        for identifier, backend in self._backends.items():
            logger.debug(f"Closing backend: {identifier}")
            backend.close()
