import logging
import time
from functools import lru_cache
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query

from vufind_search.backends.registry import BackendRegistry
from vufind_search.commands.abstract_base import AbstractBase
from vufind_search.commands.executor.command_dispatcher import CommandDispatcher
from vufind_search.commands.interfaces.command_context import CommandContext
from vufind_search.commands.registry.command_registry import CommandRegistry
from vufind_search.config.backends import get_default_backend_registry
from vufind_search.core.exceptions import (
    BackendMismatchError,
    BackendNotFoundError,
    BackendRequestError,
    UnsupportedBackendError,
)
from vufind_search.models.requests import RetrieveBatchRequest, SearchRequest
from vufind_search.models.responses import (
    BackendListResponse,
    HealthCheckResponse,
    LookupResponse,
    RecordCollectionResponse,
)

logger = logging.getLogger(__name__)

# Initialize router
router = APIRouter(
    prefix="/search",
    tags=["Search"],
    responses={404: {"description": "Not found"}},
)


# Dependency functions
def get_backend_registry() -> BackendRegistry:
    """Get backend registry configured from the environment"""
    return get_default_backend_registry()


@lru_cache(maxsize=8)
def _dispatcher_for(backend_registry: BackendRegistry) -> CommandDispatcher:
    return CommandDispatcher(backend_registry)


def get_dispatcher(
    backend_registry: BackendRegistry = Depends(get_backend_registry),
) -> CommandDispatcher:
    """Get the dispatcher bound to the backend registry"""
    return _dispatcher_for(backend_registry)


@lru_cache(maxsize=1)
def get_command_registry() -> CommandRegistry:
    """Get command registry instance"""
    return CommandRegistry()


def _create(
    command_registry: CommandRegistry, command_name: str, **kwargs: Any
) -> AbstractBase:
    try:
        return command_registry.create_command(command_name, **kwargs)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _run(dispatcher: CommandDispatcher, command: AbstractBase) -> Any:
    """Dispatch a command and translate search errors into HTTP errors"""
    try:
        return dispatcher.invoke(command).get_result()
    except BackendNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (BackendMismatchError, UnsupportedBackendError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BackendRequestError as e:
        logger.error(f"Upstream failure for {command}: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/healthz", response_model=HealthCheckResponse, tags=["Health"])
def health_check(
    backend_registry: BackendRegistry = Depends(get_backend_registry),
    dispatcher: CommandDispatcher = Depends(get_dispatcher),
) -> HealthCheckResponse:
    backends = backend_registry.get_available_backends()
    return HealthCheckResponse(
        status="healthy" if backends else "unhealthy",
        timestamp=time.time(),
        backends=backends,
        metrics=dispatcher.get_execution_metrics(),
    )


@router.get("/backends", response_model=BackendListResponse)
def list_backends(
    backend_registry: BackendRegistry = Depends(get_backend_registry),
    command_registry: CommandRegistry = Depends(get_command_registry),
) -> BackendListResponse:
    return BackendListResponse(
        backends=backend_registry.get_available_backends(),
        commands=command_registry.get_available_commands(),
    )


@router.post("/{backend_id}/search", response_model=RecordCollectionResponse)
def search(
    backend_id: str,
    request: SearchRequest,
    dispatcher: CommandDispatcher = Depends(get_dispatcher),
    command_registry: CommandRegistry = Depends(get_command_registry),
) -> RecordCollectionResponse:
    command = _create(
        command_registry,
        CommandContext.SEARCH,
        backend_id=backend_id,
        query=request.query,
        offset=request.offset,
        limit=request.limit,
        params=request.to_param_bag(),
    )
    result = _run(dispatcher, command)
    return RecordCollectionResponse(
        backend_id=backend_id,
        context=str(command.get_context()),
        status="complete",
        result=result,
    )


@router.get("/{backend_id}/record/{record_id}", response_model=RecordCollectionResponse)
def retrieve(
    backend_id: str,
    record_id: str,
    dispatcher: CommandDispatcher = Depends(get_dispatcher),
    command_registry: CommandRegistry = Depends(get_command_registry),
) -> RecordCollectionResponse:
    command = _create(
        command_registry,
        CommandContext.RETRIEVE,
        backend_id=backend_id,
        record_id=record_id,
    )
    result = _run(dispatcher, command)
    if result.get_total() == 0:
        raise HTTPException(
            status_code=404,
            detail=f"Record '{record_id}' not found in backend '{backend_id}'",
        )
    return RecordCollectionResponse(
        backend_id=backend_id,
        context=str(command.get_context()),
        status="complete",
        result=result,
    )


@router.post("/{backend_id}/records", response_model=RecordCollectionResponse)
def retrieve_batch(
    backend_id: str,
    request: RetrieveBatchRequest,
    dispatcher: CommandDispatcher = Depends(get_dispatcher),
    command_registry: CommandRegistry = Depends(get_command_registry),
) -> RecordCollectionResponse:
    command = _create(
        command_registry,
        CommandContext.RETRIEVE_BATCH,
        backend_id=backend_id,
        ids=request.ids,
        params=request.to_param_bag(),
    )
    result = _run(dispatcher, command)
    return RecordCollectionResponse(
        backend_id=backend_id,
        context=str(command.get_context()),
        status="complete",
        result=result,
    )


@router.get("/{backend_id}/similar/{record_id}", response_model=RecordCollectionResponse)
def similar(
    backend_id: str,
    record_id: str,
    dispatcher: CommandDispatcher = Depends(get_dispatcher),
    command_registry: CommandRegistry = Depends(get_command_registry),
) -> RecordCollectionResponse:
    command = _create(
        command_registry,
        CommandContext.SIMILAR,
        backend_id=backend_id,
        record_id=record_id,
    )
    result = _run(dispatcher, command)
    return RecordCollectionResponse(
        backend_id=backend_id,
        context=str(command.get_context()),
        status="complete",
        result=result,
    )


@router.get("/{backend_id}/doi/{doi:path}", response_model=LookupResponse)
def lookup_doi(
    backend_id: str,
    doi: str,
    include_journal: bool = False,
    dispatcher: CommandDispatcher = Depends(get_dispatcher),
    command_registry: CommandRegistry = Depends(get_command_registry),
) -> LookupResponse:
    command = _create(
        command_registry,
        CommandContext.LOOKUP_DOI,
        backend_id=backend_id,
        doi=doi,
        include_journal=include_journal,
    )
    result: Dict[str, Any] = _run(dispatcher, command)
    return LookupResponse(
        backend_id=backend_id,
        context=str(command.get_context()),
        status="complete" if result is not None else "not_found",
        result=result,
    )


@router.get("/{backend_id}/issns", response_model=LookupResponse)
def lookup_issns(
    backend_id: str,
    issn: List[str] = Query(..., description="ISSN to look up, repeatable"),
    dispatcher: CommandDispatcher = Depends(get_dispatcher),
    command_registry: CommandRegistry = Depends(get_command_registry),
) -> LookupResponse:
    command = _create(
        command_registry,
        CommandContext.LOOKUP_ISSNS,
        backend_id=backend_id,
        issns=issn,
    )
    result: Dict[str, Any] = _run(dispatcher, command)
    return LookupResponse(
        backend_id=backend_id,
        context=str(command.get_context()),
        status="complete" if result is not None else "not_found",
        result=result,
    )
