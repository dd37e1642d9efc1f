import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from vufind_search.backends.browzine.backend import BrowZineBackend
from vufind_search.backends.browzine.connector import Connector
from vufind_search.backends.memory import MemoryBackend
from vufind_search.backends.registry import BackendRegistry
from vufind_search.commands.executor.command_dispatcher import CommandDispatcher

BROWZINE_TEST_BASE_URL = "https://browzine.test/public/v1/"
BROWZINE_TEST_LIBRARY = "222"
BROWZINE_TEST_TOKEN = "secret-token"

# Canned BrowZine payloads keyed by request path suffix
BROWZINE_ARTICLE = {
    "data": {
        "id": 12345,
        "type": "articles",
        "title": "Lichen communities after wildfire",
        "doi": "10.1000/xyz123",
        "browzineWebLink": "https://browzine.com/libraries/222/articles/12345",
    }
}
BROWZINE_JOURNALS = {
    "data": [
        {
            "id": 10292,
            "type": "journals",
            "title": "Journal of Test Ecology",
            "issn": "00280836",
        }
    ]
}


@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    """Small mixed collection used by backend, command and API tests"""
    return [
        {"id": "1", "title": "Python for Librarians", "format": "Book", "year": 2019},
        {"id": "2", "title": "Advanced Python Patterns", "format": "Book", "year": 2021},
        {"id": "3", "title": "Cataloging Rules", "format": "Journal", "year": 2015},
        {
            "id": "4",
            "title": "Digital Archives",
            "format": ["Book", "eBook"],
            "year": 2020,
        },
    ]


@pytest.fixture
def memory_backend(sample_records: List[Dict[str, Any]]) -> MemoryBackend:
    """Fixture for memory backend"""
    return MemoryBackend("Local", sample_records)


@pytest.fixture
def browzine_requests() -> List[httpx.Request]:
    """Requests seen by the mock BrowZine transport"""
    return []


@pytest.fixture
def browzine_handler(
    browzine_requests: List[httpx.Request],
) -> Callable[[httpx.Request], httpx.Response]:
    """Mock BrowZine API: known DOI and ISSN answer, everything else is a 404"""

    def handler(request: httpx.Request) -> httpx.Response:
        browzine_requests.append(request)
        path = request.url.path
        if path.endswith("/articles/doi/10.1000/xyz123"):
            return httpx.Response(200, content=json.dumps(BROWZINE_ARTICLE))
        if path.endswith("/search") and request.url.params.get("issns") == "0028-0836":
            return httpx.Response(200, json=BROWZINE_JOURNALS)
        if path.endswith("/articles/doi/10.1000/broken"):
            return httpx.Response(500, text="upstream exploded")
        return httpx.Response(404, json={"errors": [{"status": "404"}]})

    return handler


@pytest.fixture
def browzine_connector(
    browzine_handler: Callable[[httpx.Request], httpx.Response],
) -> Connector:
    """Fixture for BrowZine connector backed by a mock transport"""
    client = httpx.Client(transport=httpx.MockTransport(browzine_handler))
    return Connector(
        library_id=BROWZINE_TEST_LIBRARY,
        access_token=BROWZINE_TEST_TOKEN,
        base_url=BROWZINE_TEST_BASE_URL,
        client=client,
    )


@pytest.fixture
def browzine_backend(browzine_connector: Connector) -> BrowZineBackend:
    return BrowZineBackend(browzine_connector)


@pytest.fixture
def backend_registry(
    memory_backend: MemoryBackend, browzine_backend: BrowZineBackend
) -> BackendRegistry:
    """Registry holding the local memory backend and the mocked BrowZine backend"""
    registry = BackendRegistry()
    registry.register(memory_backend)
    registry.register(browzine_backend)
    return registry


@pytest.fixture
def dispatcher(backend_registry: BackendRegistry) -> CommandDispatcher:
    return CommandDispatcher(backend_registry)
