import threading
import time
from typing import Any, Callable, Dict, List, Optional
import logging
from vufind_search.backends.registry import BackendRegistry
from vufind_search.commands.interfaces.command import CommandInterface


logger = logging.getLogger(__name__)

EVENT_PRE = "pre"
EVENT_POST = "post"
EVENT_ERROR = "error"

Listener = Callable[[str, CommandInterface, Optional[BaseException]], None]


class CommandDispatcher:
    """
    Resolves the backend a command targets and executes the command on it.

    Listeners can observe every invocation: "pre" before execution, "post"
    after a successful execution and "error" when execution raised. Errors
    are never retried or wrapped; they reach the caller unchanged.
    """

    def __init__(self, backend_registry: BackendRegistry):
        """
        Initialize command dispatcher.

        Args:
            backend_registry: Registry used to resolve backends by identifier
        """
        logger.info("Initializing CommandDispatcher")

        self._backend_registry = backend_registry
        self._listeners: Dict[str, List[Listener]] = {
            EVENT_PRE: [],
            EVENT_POST: [],
            EVENT_ERROR: [],
        }

        # Track execution metrics; requests share one dispatcher across threads
        self._metrics_lock = threading.Lock()
        self._execution_count = 0
        self._success_count = 0
        self._failure_count = 0
        self._total_execution_time = 0.0

    def attach(self, event: str, listener: Listener) -> None:
        """
        Attach a listener to one of the dispatch events.

        Raises:
            ValueError: If event is not 'pre', 'post' or 'error'
        """
        if event not in self._listeners:
            raise ValueError(
                f"Unknown event '{event}'. Available events: {list(self._listeners)}"
            )
        self._listeners[event].append(listener)

    def _trigger(
        self,
        event: str,
        command: CommandInterface,
        error: Optional[BaseException] = None,
    ) -> None:
        for listener in self._listeners[event]:
            listener(event, command, error)

    def invoke(self, command: CommandInterface) -> CommandInterface:
        """
        Execute a command against the backend it targets.

        Args:
            command: Command to execute

        Returns:
            The executed command

        Raises:
            BackendNotFoundError: When no backend matches the target identifier
            Exception: Whatever the command or backend raised, unchanged
        """
        backend_id = command.get_target_identifier()
        backend = self._backend_registry.get(backend_id)

        start_time = time.time()
        logger.info(f"Dispatching {command} to backend '{backend_id}'")

        try:
            self._trigger(EVENT_PRE, command)
            command.execute(backend)
        except Exception as e:
            execution_time = (time.time() - start_time) * 1000
            self._record_execution(execution_time, succeeded=False)

            logger.warning(
                f"{command} failed on backend '{backend_id}' "
                f"after {execution_time:.2f}ms: {e}"
            )
            self._trigger(EVENT_ERROR, command, e)
            raise

        execution_time = (time.time() - start_time) * 1000
        self._record_execution(execution_time, succeeded=True)

        logger.info(
            f"{command} completed on backend '{backend_id}' in {execution_time:.2f}ms"
        )
        self._trigger(EVENT_POST, command)
        return command

    def _record_execution(self, execution_time: float, succeeded: bool) -> None:
        with self._metrics_lock:
            self._execution_count += 1
            if succeeded:
                self._success_count += 1
            else:
                self._failure_count += 1
            self._total_execution_time += execution_time

    def get_execution_metrics(self) -> Dict[str, Any]:
        """
        Get execution metrics for monitoring and debugging.

        Returns:
            Dictionary containing execution statistics
        """
        with self._metrics_lock:
            execution_count = self._execution_count
            success_count = self._success_count
            failure_count = self._failure_count
            total_execution_time = self._total_execution_time

        avg_execution_time = (
            total_execution_time / execution_count if execution_count > 0 else 0
        )

        success_rate = (
            (success_count / execution_count) * 100 if execution_count > 0 else 0
        )

        return {
            "total_executions": execution_count,
            "successful_executions": success_count,
            "failed_executions": failure_count,
            "success_rate_percent": round(success_rate, 2),
            "average_execution_time_ms": round(avg_execution_time, 2),
            "total_execution_time_ms": round(total_execution_time, 2),
        }

    def reset_metrics(self) -> None:
        """Reset execution metrics (useful for testing)"""
        with self._metrics_lock:
            self._execution_count = 0
            self._success_count = 0
            self._failure_count = 0
            self._total_execution_time = 0.0
        logger.info("Execution metrics reset")
