# api/routers/agent.py
"""
Agent Router
Streams agent runs as line-delimited JSON display events
"""

import logging
from typing import AsyncIterator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from core.agents.agent_loop import AgentLoop, RunState
from core.agents.tool_registry import ToolRegistry
from core.config import AppConfig
from core.utils.logging import preview_text
from schemas.agent import AgentRunRequest, AgentToolListResponse, ToolInfo

from ..dependencies import get_agent_loop, get_settings, get_tool_registry

logger = logging.getLogger(__name__)
router = APIRouter()

NDJSON_MEDIA_TYPE = "application/x-ndjson"


async def _ndjson_events(agent_loop: AgentLoop, state: RunState) -> AsyncIterator[str]:
    """One JSON object per line; a model failure ends the stream"""
    try:
        async for event in agent_loop.stream(state):
            yield event.to_ndjson()
    except Exception as e:
        logger.error(f"Agent run {state.run_id} aborted: {e}", exc_info=True)
        raise


@router.post("/agent")
async def run_agent(
    request: AgentRunRequest,
    agent_loop: AgentLoop = Depends(get_agent_loop),
    settings: AppConfig = Depends(get_settings),
):
    """Run the agent on a goal and stream display events"""
    step_budget = request.step_budget(
        default=settings.agent.default_steps, upper=settings.agent.max_steps
    )
    state = agent_loop.start(request.goal, step_budget)
    logger.info(
        f"Agent run {state.run_id} started: '{preview_text(request.goal, 80)}' "
        f"(steps: {step_budget})"
    )

    return StreamingResponse(
        _ndjson_events(agent_loop, state),
        media_type=NDJSON_MEDIA_TYPE,
        headers={"Cache-Control": "no-cache"},
    )


@router.get("/agent/tools", response_model=AgentToolListResponse)
async def list_tools(registry: ToolRegistry = Depends(get_tool_registry)):
    """List the tools the agent can call"""
    tools = [
        ToolInfo(
            name=info["name"],
            description=info["description"],
            usage=info["usage"],
            parameters=info["parameters"],
            timeout_seconds=info["timeout_seconds"] or 0.0,
        )
        for info in registry.get_all_tools_info().values()
    ]
    return AgentToolListResponse(tools=tools, total_count=len(tools))
