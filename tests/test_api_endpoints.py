# tests/test_api_endpoints.py
"""
API endpoint tests
"""

import json

import pytest

from api.routers.agent import _ndjson_events
from core.agents.agent_loop import AgentLoop
from core.exceptions import ModelError
from tests.mocks import SEARCH_CALL, FailingLLM, ScriptedLLM

AGENT_URL = "/api/v1/agent"


def ndjson(response):
    return [json.loads(line) for line in response.text.splitlines() if line.strip()]


class TestAgentEndpoint:
    """POST /agent streaming"""

    def test_streams_display_events(self, client, override_agent):
        llm = override_agent(ScriptedLLM([SEARCH_CALL, "Final answer"]))

        response = client.post(AGENT_URL, json={"goal": "latest python", "steps": 3})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/x-ndjson")
        assert ndjson(response) == [
            {"kind": "append", "role": "assistant", "content": "Thinking..."},
            {"kind": "replace_last", "role": "assistant", "content": "Using web.search..."},
            {"kind": "append", "role": "tool", "content": 'web.search {"query":"python release"}'},
            {"kind": "append", "role": "assistant", "content": "Processing results..."},
            {"kind": "replace_last", "role": "assistant", "content": "Final answer"},
        ]
        assert llm.call_count == 2

    @pytest.mark.parametrize(
        "steps, expected_calls",
        [(None, 7), (0, 2), (2.5, 4), (100, 21), ("lots", 7), (True, 7)],
    )
    def test_step_budget_normalization(self, client, override_agent, steps, expected_calls):
        llm = override_agent(ScriptedLLM([SEARCH_CALL]))
        body = {"goal": "never done"}
        if steps is not None:
            body["steps"] = steps

        response = client.post(AGENT_URL, json=body)

        assert response.status_code == 200
        assert llm.call_count == expected_calls

    @pytest.mark.parametrize(
        "body",
        [{}, {"goal": ""}, {"goal": "   "}, {"goal": 42}, {"goal": None}, {"steps": 3}],
    )
    def test_rejects_malformed_input(self, client, override_agent, body):
        llm = override_agent(ScriptedLLM(["unused"]))

        response = client.post(AGENT_URL, json=body)

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"
        assert llm.call_count == 0

    def test_validation_error_names_field(self, client, override_agent):
        override_agent(ScriptedLLM(["unused"]))

        response = client.post(AGENT_URL, json={"steps": 3})

        body = response.json()
        assert response.status_code == 400
        assert body["details"]["field"] == "goal"
        assert body["details"]["errors"][0]["loc"] == ["body", "goal"]
        assert body["message"].startswith("Validation error in field 'goal'")

    def test_rejects_invalid_json(self, client, override_agent):
        llm = override_agent(ScriptedLLM(["unused"]))

        response = client.post(
            AGENT_URL, content="{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert llm.call_count == 0

    def test_missing_credential(self, client):
        response = client.post(AGENT_URL, json={"goal": "anything"})

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "CONFIGURATION_ERROR"
        assert "OPENAI_API_KEY" in body["message"]


@pytest.mark.asyncio
class TestNdjsonStream:
    """Encoding of the run into response lines"""

    async def test_lines(self, invoker):
        loop = AgentLoop(ScriptedLLM(["Paris"]), invoker)
        state = loop.start("capital of France?", 6)

        lines = [line async for line in _ndjson_events(loop, state)]

        assert lines == [
            '{"kind":"append","role":"assistant","content":"Thinking..."}\n',
            '{"kind":"replace_last","role":"assistant","content":"Paris"}\n',
        ]

    async def test_model_failure_ends_stream(self, invoker):
        loop = AgentLoop(FailingLLM(fail_on=1), invoker)
        state = loop.start("goal", 6)

        lines = []
        with pytest.raises(ModelError):
            async for line in _ndjson_events(loop, state):
                lines.append(line)

        assert len(lines) == 1


class TestToolsEndpoint:
    def test_list_tools(self, client):
        response = client.get("/api/v1/agent/tools")

        assert response.status_code == 200
        data = response.json()
        assert data["total_count"] == 3
        names = [tool["name"] for tool in data["tools"]]
        assert names == ["web.search", "web.fetch", "web.extract"]
        search = data["tools"][0]
        assert search["usage"] == "input: { query: string, maxResults?: number }"
        assert "maxResults" in search["parameters"]["properties"]


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["config"]["llm"]["credential_configured"] is False
        assert data["tools"] == ["web.search", "web.fetch", "web.extract"]
        assert "memory_percent" in data["system"]

    def test_root(self, client):
        response = client.get("/")
        assert response.json()["agent"] == "/api/v1/agent"
