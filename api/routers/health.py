# api/routers/health.py
"""
Health Check Router
Provides system health and status information
"""
from __future__ import annotations

import platform
import sys
import time
from datetime import datetime
from typing import Any, Dict, List

import psutil
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from core.agents.tool_registry import ToolRegistry

from ..dependencies import get_settings, get_tool_registry

router = APIRouter(tags=["health"])  # no prefix; keep path clean via main.py


class HealthResponse(BaseModel):
    """Health check response model"""

    status: str
    timestamp: datetime
    uptime_seconds: float
    version: str
    system: Dict[str, Any]
    config: Dict[str, Any]
    tools: List[str]


# Store app start time
_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings=Depends(get_settings),
    registry: ToolRegistry = Depends(get_tool_registry),
):
    """
    Liveness plus host metrics, configuration summary and registered tools.
    The summary reports whether a model credential is configured, never its value.
    """
    uptime = time.time() - _start_time
    mem = psutil.virtual_memory()

    system_info = {
        "cpu_percent": psutil.cpu_percent(interval=None),
        "memory_percent": mem.percent,
        "memory_available_gb": round(mem.available / 1024**3, 2),
        "python_version": f"{sys.version_info.major}.{sys.version_info.minor}",
        "platform": platform.system(),
    }

    summary = settings.get_summary()
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        uptime_seconds=round(uptime, 2),
        version=summary.get("app", {}).get("version", "0.1.0"),
        system=system_info,
        config=summary,
        tools=registry.list_tools(),
    )
