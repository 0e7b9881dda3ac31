# tests/conftest.py
"""
測試配置和共用 fixtures
"""

import os

import pytest
from fastapi.testclient import TestClient

# Mock environment variables before importing app
test_env = {
    "API_PREFIX": "/api/v1",
    "API_CORS_ORIGINS": "http://localhost:7860",
    "OPENAI_API_KEY": "",
    "AGENT_TOOL_TIMEOUT_SECONDS": "5",
}

for k, v in test_env.items():
    os.environ[k] = v

from api.dependencies import get_llm, get_tool_invoker
from api.main import app
from core.agents.agent_loop import AgentLoop
from core.agents.executor import ToolInvoker
from tests.mocks import FakeWebTools, build_fake_registry


@pytest.fixture(scope="session")
def client():
    """FastAPI test client"""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def fake_tools():
    return FakeWebTools()


@pytest.fixture
def fake_registry(fake_tools):
    return build_fake_registry(fake_tools)


@pytest.fixture
def invoker(fake_registry):
    tool_invoker = ToolInvoker(fake_registry, default_timeout=5)
    yield tool_invoker
    tool_invoker.cleanup()


@pytest.fixture
def make_loop(invoker):
    """Build an agent loop around a given model double"""

    def _make(llm):
        return AgentLoop(llm, invoker)

    return _make


@pytest.fixture
def override_agent(invoker):
    """Route the agent endpoint to a model double and the fake tools"""

    def _override(llm):
        app.dependency_overrides[get_llm] = lambda: llm
        app.dependency_overrides[get_tool_invoker] = lambda: invoker
        return llm

    yield _override
    app.dependency_overrides.clear()
