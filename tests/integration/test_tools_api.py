"""Integration tests for the tools API endpoints."""

import json

import pytest


async def _call_architect(async_client, arguments):
    return await async_client.post(
        "/api/v1/tools/architect/call",
        json={"arguments": arguments},
    )


@pytest.mark.asyncio
async def test_list_tools(async_client):
    """Discovery returns exactly one tool named architect."""
    response = await async_client.get("/api/v1/tools")

    assert response.status_code == 200
    tools = response.json()["tools"]
    assert len(tools) == 1
    assert tools[0]["name"] == "architect"
    assert "llm chat CLI" in tools[0]["description"]
    assert tools[0]["inputSchema"]["required"] == ["input"]
    assert "conversationId" in tools[0]["inputSchema"]["properties"]


@pytest.mark.asyncio
async def test_new_conversation(async_client):
    """A prompt without an id returns a new id and a response."""
    response = await _call_architect(async_client, {"input": "Design a cache"})

    assert response.status_code == 200
    data = response.json()
    assert data["isError"] is False
    assert data["content"][0]["type"] == "text"
    payload = json.loads(data["content"][0]["text"])
    assert payload["conversationId"]
    assert payload["response"]


@pytest.mark.asyncio
async def test_empty_input_rejected(async_client, mock_llm_runner):
    response = await _call_architect(async_client, {"input": ""})

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail.startswith("Tool execution failed:")
    assert "must not be empty" in detail
    assert mock_llm_runner.calls == []


@pytest.mark.asyncio
async def test_missing_input_rejected(async_client, mock_llm_runner):
    response = await _call_architect(async_client, {})

    assert response.status_code == 422
    assert "input is required" in response.json()["detail"]
    assert mock_llm_runner.calls == []


@pytest.mark.asyncio
async def test_missing_arguments_rejected(async_client):
    response = await async_client.post("/api/v1/tools/architect/call", json={})

    assert response.status_code == 422
    assert "input is required" in response.json()["detail"]


@pytest.mark.asyncio
async def test_follow_up_keeps_conversation_id(async_client, mock_llm_runner):
    """A returned id continues the same conversation."""
    first = await _call_architect(async_client, {"input": "Design a cache"})
    conversation_id = json.loads(first.json()["content"][0]["text"])["conversationId"]

    second = await _call_architect(
        async_client, {"input": "follow up", "conversationId": conversation_id}
    )

    assert second.status_code == 200
    payload = json.loads(second.json()["content"][0]["text"])
    assert payload["conversationId"] == conversation_id
    assert payload["response"] == "Response to: follow up"
    assert len(mock_llm_runner.conversations[conversation_id]) == 2


@pytest.mark.asyncio
async def test_invalid_conversation_id_fails(async_client):
    response = await _call_architect(
        async_client, {"input": "test message", "conversationId": "invalid-id"}
    )

    assert response.status_code == 502
    assert "No conversation found" in response.json()["detail"]


@pytest.mark.asyncio
async def test_unknown_tool(async_client):
    response = await async_client.post(
        "/api/v1/tools/nope/call", json={"arguments": {"input": "hi"}}
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Tool execution failed: Tool 'nope' not found"


@pytest.mark.asyncio
async def test_llm_not_installed(async_client, mock_llm_runner):
    mock_llm_runner.available = False

    response = await _call_architect(async_client, {"input": "hi"})

    assert response.status_code == 503
    assert "LLM command not found" in response.json()["detail"]


@pytest.mark.asyncio
async def test_unresolvable_conversation_id(async_client, mock_llm_runner):
    """A prompt that succeeds but leaves no id in the logs is still a failure."""
    mock_llm_runner.logs_output = "[]"

    response = await _call_architect(async_client, {"input": "hi"})

    assert response.status_code == 502
    assert "No valid conversation ID" in response.json()["detail"]
    assert len(mock_llm_runner.prompt_calls) == 1


@pytest.mark.asyncio
async def test_multiline_prompt_sent_as_single_line(async_client, mock_llm_runner):
    response = await _call_architect(async_client, {"input": "line one\nline two\n"})

    assert response.status_code == 200
    assert mock_llm_runner.prompt_calls[0][1] == "line one line two"
