# core/agents/executor.py
"""
Agent Tool Executor
Runs registered tools with a timeout and turns every failure into a ToolResult
"""

import asyncio
import functools
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..exceptions import ToolExecutionError
from .tool_registry import ToolRegistry, ToolRequest

logger = logging.getLogger(__name__)

DEFAULT_RESULT_MAX_CHARS = 4000


@dataclass
class ToolResult:
    """Result of tool execution"""

    success: bool
    tool_name: str = ""
    result: Any = None
    summary: str = ""
    success_note: str = ""
    error: Optional[str] = None
    execution_time_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API response"""
        return {
            "success": self.success,
            "tool_name": self.tool_name,
            "summary": self.summary,
            "error": self.error,
            "execution_time_ms": self.execution_time_ms,
        }


class ToolInvoker:
    """
    Executes validated tool requests against a registry

    Tool failures never propagate: timeouts, collaborator errors and
    unexpected exceptions all come back as ToolResult(success=False).
    """

    def __init__(
        self,
        registry: ToolRegistry,
        default_timeout: float = 30.0,
        result_max_chars: int = DEFAULT_RESULT_MAX_CHARS,
        max_workers: int = 3,
    ):
        self.registry = registry
        self.default_timeout = default_timeout
        self.result_max_chars = result_max_chars
        self.thread_pool = ThreadPoolExecutor(max_workers=max_workers)

    async def invoke(self, request: ToolRequest) -> ToolResult:
        """Execute one tool request and summarize its outcome"""
        start_time = time.time()
        tool_name = request.name

        metadata = self.registry.get_tool(tool_name)
        if metadata is None:
            return ToolResult(
                success=False, tool_name=tool_name, error=f"Tool '{tool_name}' not found"
            )

        timeout = metadata.timeout_seconds or self.default_timeout
        parameters = request.arguments()
        logger.info(f"Executing tool '{tool_name}' with parameters: {request.wire_input()}")

        try:
            if metadata.is_async:
                result = await asyncio.wait_for(
                    metadata.function(**parameters), timeout=timeout
                )
            else:
                result = await self._execute_sync_tool(metadata.function, parameters, timeout)
            summary = metadata.summarize_result(result, self.result_max_chars)

        except asyncio.TimeoutError:
            error_msg = f"Tool '{tool_name}' timed out after {timeout}s"
            logger.error(error_msg)
            return self._failure(tool_name, error_msg, start_time)

        except ToolExecutionError as e:
            logger.warning(f"Tool '{tool_name}' failed: {e.reason or e.message}")
            return self._failure(tool_name, e.reason or e.message, start_time)

        except Exception as e:
            logger.error(f"Tool '{tool_name}' raised {type(e).__name__}: {e}", exc_info=True)
            return self._failure(tool_name, str(e) or type(e).__name__, start_time)

        execution_time = (time.time() - start_time) * 1000
        logger.info(f"Tool '{tool_name}' completed in {execution_time:.2f}ms")

        return ToolResult(
            success=True,
            tool_name=tool_name,
            result=result,
            summary=summary,
            success_note=metadata.success_note,
            execution_time_ms=execution_time,
        )

    async def _execute_sync_tool(
        self, tool_function, parameters: Dict[str, Any], timeout: float
    ):
        """
        Execute sync tool function in thread pool

        The timeout counts from the moment a worker picks the job up, so
        calls queued behind other runs are not charged for the wait.
        """
        loop = asyncio.get_running_loop()
        started = asyncio.Event()
        func = functools.partial(tool_function, **parameters)

        def job():
            loop.call_soon_threadsafe(started.set)
            return func()

        future = loop.run_in_executor(self.thread_pool, job)
        try:
            await started.wait()
        except asyncio.CancelledError:
            future.cancel()
            raise
        return await asyncio.wait_for(future, timeout=timeout)

    @staticmethod
    def _failure(tool_name: str, error: str, start_time: float) -> ToolResult:
        return ToolResult(
            success=False,
            tool_name=tool_name,
            error=error,
            execution_time_ms=(time.time() - start_time) * 1000,
        )

    def cleanup(self):
        """Cleanup resources"""
        self.thread_pool.shutdown(wait=False)
