from typing import Any
from unittest.mock import Mock

import pytest

from vufind_search.backends.interface import BackendInterface
from vufind_search.commands.abstract_base import AbstractBase
from vufind_search.commands.interfaces.command_context import CommandContext
from vufind_search.core.exceptions import (
    BackendMismatchError,
    CommandAlreadyExecutedError,
    CommandNotExecutedError,
    SearchLogicError,
)
from vufind_search.core.param_bag import ParamBag


class EchoCommand(AbstractBase):
    """Command returning a fixed payload, used to test shared bookkeeping"""

    def __init__(self, backend_id: str, payload: Any, params: Any = None):
        super().__init__(backend_id, "echo", params)
        self.payload = payload

    def execute(self, backend: BackendInterface) -> "EchoCommand":
        self.validate_backend(backend)
        return self.finalize_execution(self.payload)


class FailingCommand(AbstractBase):
    """Command whose backend call raises"""

    def execute(self, backend: BackendInterface) -> "FailingCommand":
        self.validate_backend(backend)
        raise ConnectionError("backend unavailable")


def make_backend(identifier: str) -> Mock:
    backend = Mock(spec=BackendInterface)
    backend.get_identifier.return_value = identifier
    return backend


class TestCommandState:
    """Test the Created -> Executed state machine"""

    def test_not_executed_after_construction(self) -> None:
        command = EchoCommand("Solr", "payload")
        assert command.is_executed() is False

    def test_get_result_before_execute(self) -> None:
        command = EchoCommand("Solr", "payload")
        with pytest.raises(CommandNotExecutedError, match="not yet executed"):
            command.get_result()

    def test_not_executed_is_logic_error(self) -> None:
        command = EchoCommand("Solr", "payload")
        with pytest.raises(SearchLogicError):
            command.get_result()

    def test_execute_matching_backend(self) -> None:
        command = EchoCommand("Solr", {"hits": 3})

        returned = command.execute(make_backend("Solr"))

        assert returned is command
        assert command.is_executed() is True
        assert command.get_result() == {"hits": 3}

    def test_none_is_a_valid_result(self) -> None:
        command = EchoCommand("Solr", None)
        command.execute(make_backend("Solr"))
        assert command.is_executed()
        assert command.get_result() is None

    def test_execute_mismatched_backend(self) -> None:
        command = EchoCommand("Solr", "payload")

        with pytest.raises(BackendMismatchError) as exc_info:
            command.execute(make_backend("Primo"))

        message = str(exc_info.value)
        assert "Solr" in message
        assert "Primo" in message
        assert isinstance(exc_info.value, RuntimeError)
        assert command.is_executed() is False

    def test_backend_error_leaves_command_unexecuted(self) -> None:
        command = FailingCommand("Solr", CommandContext.SEARCH)

        with pytest.raises(ConnectionError, match="backend unavailable"):
            command.execute(make_backend("Solr"))

        assert command.is_executed() is False
        with pytest.raises(CommandNotExecutedError):
            command.get_result()

    def test_re_execution_is_rejected(self) -> None:
        command = EchoCommand("Solr", "first")
        command.execute(make_backend("Solr"))

        with pytest.raises(CommandAlreadyExecutedError):
            command.execute(make_backend("Solr"))

        assert command.get_result() == "first"

    def test_target_identifier_is_stable(self) -> None:
        command = EchoCommand("Solr", "payload")
        assert command.get_target_identifier() == "Solr"

        with pytest.raises(BackendMismatchError):
            command.execute(make_backend("Primo"))
        assert command.get_target_identifier() == "Solr"

        command.execute(make_backend("Solr"))
        assert command.get_target_identifier() == "Solr"


class TestCommandAccessors:
    def test_default_params_are_fresh_bags(self) -> None:
        first = EchoCommand("Solr", "a")
        second = EchoCommand("Solr", "b")

        first.get_search_parameters().add("fq", "format:Book")

        assert first.get_search_parameters().get("fq") == ["format:Book"]
        assert second.get_search_parameters().get("fq") is None

    def test_given_params_are_kept(self) -> None:
        params = ParamBag({"rows": [5]})
        command = EchoCommand("Solr", "a", params)
        assert command.get_search_parameters() is params

    def test_custom_context_is_kept(self) -> None:
        command = EchoCommand("Solr", "a")
        assert command.get_context() == "echo"

    def test_known_context_is_coerced(self) -> None:
        command = FailingCommand("Solr", "search")
        assert command.get_context() is CommandContext.SEARCH

    def test_backend_id_is_required(self) -> None:
        with pytest.raises(ValueError, match="backend_id is required"):
            EchoCommand("", "a")

    def test_repr(self) -> None:
        command = EchoCommand("Solr", "a")
        assert str(command) == "EchoCommand(backend='Solr')"
        assert "executed=False" in repr(command)


class TestCommandContext:
    def test_coerce_known_values(self) -> None:
        assert CommandContext.coerce("retrieve") is CommandContext.RETRIEVE
        assert CommandContext.coerce(CommandContext.SIMILAR) is CommandContext.SIMILAR

    def test_coerce_custom_value(self) -> None:
        assert CommandContext.coerce("alphabrowse") == "alphabrowse"

    def test_coerce_rejects_empty_and_non_strings(self) -> None:
        with pytest.raises(ValueError):
            CommandContext.coerce("")
        with pytest.raises(TypeError):
            CommandContext.coerce(42)

    def test_str_is_value(self) -> None:
        assert str(CommandContext.LOOKUP_DOI) == "lookupDoi"
