# core/agents/agent_loop.py
"""
Agent Loop
Step-bounded cycle: ask the model, run a tool or stop with the final answer
"""

import asyncio
import logging
import math
import uuid
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Optional

from ..exceptions import AgentError
from ..llm.base import BaseLLM
from ..utils.logging import PerformanceLogger, get_logger, preview_text
from .classifier import ReplyClassifier
from .conversation import Conversation
from .events import DisplayEvent, EventEmitter
from .executor import ToolInvoker
from .prompts import (
    FINAL_ANSWER_PROMPT,
    SYSTEM_PROMPT,
    THINKING_MESSAGE,
    TOOL_RECOVERY_MESSAGE,
    build_goal_message,
    build_tool_documentation,
    tool_error_message,
    using_tool_message,
)

logger = logging.getLogger(__name__)

MIN_STEPS = 1
MAX_STEPS = 20
DEFAULT_STEPS = 6


def clamp_steps(
    steps: Any,
    default: int = DEFAULT_STEPS,
    lower: int = MIN_STEPS,
    upper: int = MAX_STEPS,
) -> int:
    """
    Normalize a requested step count

    Numbers are clamped to [lower, upper]; fractions round up since a
    budget of 2.5 still allows a third iteration. Anything that is not a
    finite number (None, strings, booleans) falls back to ``default``.
    """
    if isinstance(steps, bool) or not isinstance(steps, (int, float)):
        return default
    if isinstance(steps, float):
        if not math.isfinite(steps):
            return default
        steps = math.ceil(steps)
    return max(lower, min(int(steps), upper))


@dataclass
class RunState:
    """State owned by one run; never shared between runs"""

    goal: str
    step_budget: int
    conversation: Conversation = field(default_factory=Conversation)
    run_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    step_index: int = 0
    model_calls: int = 0
    tool_calls: int = 0
    tool_failures: int = 0
    forced_summary: bool = False
    started: bool = False
    finished: bool = False
    final_answer: Optional[str] = None


class AgentLoop:
    """Drives one goal to a final answer through the model and the tool invoker"""

    def __init__(
        self,
        llm: BaseLLM,
        invoker: ToolInvoker,
        classifier: Optional[ReplyClassifier] = None,
        system_prompt: str = SYSTEM_PROMPT,
        max_steps: int = MAX_STEPS,
    ):
        self.llm = llm
        self.invoker = invoker
        self.classifier = classifier or ReplyClassifier(invoker.registry)
        self.system_prompt = system_prompt
        self.max_steps = max_steps
        self.perf = PerformanceLogger("agent.performance")

    def start(self, goal: str, step_budget: int) -> RunState:
        """Create the run state with the system instruction and goal message"""
        budget = max(MIN_STEPS, min(int(step_budget), self.max_steps))
        state = RunState(goal=goal, step_budget=budget)

        tool_docs = build_tool_documentation(self.invoker.registry.describe_tools())
        state.conversation.append("system", self.system_prompt)
        state.conversation.append("user", build_goal_message(goal, tool_docs))
        return state

    async def stream(self, state: RunState) -> AsyncIterator[DisplayEvent]:
        """
        Execute the run, yielding display events as they happen

        Model failures propagate and end the run; tool failures are folded
        into the conversation and the loop moves on to the next step.
        """
        if state.started:
            raise AgentError("agent_loop", f"run {state.run_id} was already started")
        state.started = True
        run_log = get_logger(__name__, {"run_id": state.run_id})

        self.perf.start_operation(
            state.run_id,
            "agent_run",
            goal=preview_text(state.goal, 80),
            step_budget=state.step_budget,
        )
        success = False
        try:
            yield DisplayEvent.append("assistant", THINKING_MESSAGE)

            for step in range(state.step_budget):
                state.step_index = step
                reply = await self._complete(state)
                request = self.classifier.classify(reply)

                if request is None:
                    state.final_answer = reply
                    yield DisplayEvent.replace_last("assistant", reply)
                    success = True
                    return

                yield DisplayEvent.replace_last("assistant", using_tool_message(request.name))
                yield DisplayEvent.append("tool", request.display())

                result = await self.invoker.invoke(request)
                state.tool_calls += 1
                state.conversation.append("assistant", reply)

                if result.success:
                    state.conversation.append("user", result.summary)
                    yield DisplayEvent.append("assistant", result.success_note)
                else:
                    state.tool_failures += 1
                    run_log.warning(
                        f"Run {state.run_id} step {step}: {request.name} failed: {result.error}"
                    )
                    state.conversation.append("user", tool_error_message(result.error or ""))
                    yield DisplayEvent.append("assistant", TOOL_RECOVERY_MESSAGE)

            run_log.info(f"Run {state.run_id} exhausted {state.step_budget} steps, forcing summary")
            state.forced_summary = True
            state.conversation.append("user", FINAL_ANSWER_PROMPT)
            final = await self._complete(state)
            state.final_answer = final
            yield DisplayEvent.replace_last("assistant", final)
            success = True

        finally:
            state.finished = True
            self.perf.end_operation(
                state.run_id,
                success=success,
                model_calls=state.model_calls,
                tool_calls=state.tool_calls,
                forced_summary=state.forced_summary,
            )

    async def run(self, goal: str, step_budget: int, emitter: EventEmitter) -> RunState:
        """Push-style entry point: drain the event stream into an emitter"""
        state = self.start(goal, step_budget)
        async for event in self.stream(state):
            emitter.emit(event)
        return state

    async def _complete(self, state: RunState) -> str:
        """One blocking completion call, off the event loop"""
        messages = state.conversation.to_list()
        loop = asyncio.get_running_loop()
        try:
            reply = await loop.run_in_executor(None, self.llm.complete, messages)
        except Exception as e:
            logger.error(f"Run {state.run_id}: model completion failed: {e}")
            raise
        state.model_calls += 1
        logger.debug(f"Run {state.run_id} reply: {preview_text(reply)}")
        return reply
