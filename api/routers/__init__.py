# api/routers/__init__.py
"""
API Routers Module
Centralized router registration and imports
"""

from .agent import router as agent_router
from .health import router as health_router

__all__ = [
    "agent_router",
    "health_router",
]
