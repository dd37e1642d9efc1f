from unittest.mock import Mock

import pytest

from vufind_search.backends.browzine.backend import BrowZineBackend
from vufind_search.backends.interface import SearchBackendInterface
from vufind_search.backends.memory import MemoryBackend
from vufind_search.commands.impl.call_method_command import CallMethodCommand
from vufind_search.commands.impl.retrieve_command import (
    RetrieveBatchCommand,
    RetrieveCommand,
)
from vufind_search.commands.impl.search_command import SearchCommand
from vufind_search.commands.impl.similar_command import SimilarCommand
from vufind_search.commands.interfaces.command_context import CommandContext
from vufind_search.core.exceptions import UnsupportedBackendError
from vufind_search.core.param_bag import ParamBag
from vufind_search.models.records import RecordCollection


class TestSearchCommand:
    def test_search_memory_backend(self, memory_backend: MemoryBackend) -> None:
        command = SearchCommand("Local", "python", limit=1)

        result = command.execute(memory_backend).get_result()

        assert isinstance(result, RecordCollection)
        assert result.total == 2
        assert result.get_record_ids() == ["1"]
        assert command.get_context() is CommandContext.SEARCH
        assert command.get_query() == "python"

    def test_params_reach_backend(self) -> None:
        backend = Mock(spec=SearchBackendInterface)
        backend.get_identifier.return_value = "Solr"
        backend.search.return_value = RecordCollection(source_identifier="Solr")
        params = ParamBag({"fq": ["format:Book"]})

        SearchCommand("Solr", "history", 10, 5, params).execute(backend)

        backend.search.assert_called_once_with("history", 10, 5, params)

    def test_backend_without_search_capability(
        self, browzine_backend: BrowZineBackend
    ) -> None:
        command = SearchCommand("BrowZine", "python")

        with pytest.raises(UnsupportedBackendError, match=r"BrowZine does not support search\(\)"):
            command.execute(browzine_backend)

        assert not command.is_executed()

    def test_negative_paging_rejected(self) -> None:
        with pytest.raises(ValueError):
            SearchCommand("Local", "python", offset=-1)
        with pytest.raises(ValueError):
            SearchCommand("Local", "python", limit=-5)


class TestRetrieveCommands:
    def test_retrieve(self, memory_backend: MemoryBackend) -> None:
        command = RetrieveCommand("Local", "2").execute(memory_backend)
        assert command.get_result().first()["title"] == "Advanced Python Patterns"
        assert command.get_context() is CommandContext.RETRIEVE

    def test_retrieve_requires_id(self) -> None:
        with pytest.raises(ValueError):
            RetrieveCommand("Local", "")

    def test_retrieve_batch(self, memory_backend: MemoryBackend) -> None:
        command = RetrieveBatchCommand("Local", ["3", "1"]).execute(memory_backend)
        assert command.get_result().get_record_ids() == ["3", "1"]
        assert command.get_record_ids() == ["3", "1"]

    def test_similar(self, memory_backend: MemoryBackend) -> None:
        command = SimilarCommand("Local", "2").execute(memory_backend)
        assert command.get_result().get_record_ids() == ["1"]


class TestCallMethodCommand:
    def test_default_arguments_are_params(self) -> None:
        backend = Mock(spec=SearchBackendInterface)
        backend.get_identifier.return_value = "Solr"
        backend.search.return_value = "raw"
        params = ParamBag({"q": ["*:*"]})

        command = CallMethodCommand(
            "Solr", SearchBackendInterface, "search", params=params
        ).execute(backend)

        backend.search.assert_called_once_with(params)
        assert command.get_result() == "raw"
        assert command.get_context() is CommandContext.CALL_METHOD
        assert command.get_method() == "search"
