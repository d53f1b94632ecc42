"""
Tests for the LiteLLM client wrapper.
"""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from sitegen.core.models.errors import LLMError
from sitegen.core.models.llm import LLMConfig
from sitegen.integrations.llm.litellm_client import LiteLLMClient


def completion(content):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content), finish_reason="stop")],
        usage=SimpleNamespace(prompt_tokens=10, completion_tokens=20, total_tokens=30)
    )


def test_generate_builds_request_and_response():
    client = LiteLLMClient(api_key="key-123", timeout=30)
    config = LLMConfig(
        model="gemini/gemini-2.5-flash",
        system_prompt="You are an expert SEO content writer.",
        user_prompt="Write about AI",
        response_format={"type": "json_object"}
    )

    with patch('sitegen.integrations.llm.litellm_client.acompletion',
               new=AsyncMock(return_value=completion('{"title": "AI"}'))) as acompletion:
        response = asyncio.run(client.generate(config))

    params = acompletion.call_args.kwargs
    assert params["model"] == "gemini/gemini-2.5-flash"
    assert params["api_key"] == "key-123"
    assert params["timeout"] == 30
    assert params["response_format"] == {"type": "json_object"}
    assert [m["role"] for m in params["messages"]] == ["system", "user"]

    assert response.content == '{"title": "AI"}'
    assert response.total_tokens == 30
    assert response.finish_reason == "stop"


def test_generate_wraps_failures_in_llm_error():
    client = LiteLLMClient(api_key="key-123")
    config = LLMConfig(model="gemini/gemini-2.5-flash", user_prompt="Write about AI")

    with patch('sitegen.integrations.llm.litellm_client.acompletion',
               new=AsyncMock(side_effect=ConnectionError("connection reset"))):
        with pytest.raises(LLMError) as exc_info:
            asyncio.run(client.generate(config))

    assert exc_info.value.provider == "gemini"
    assert "connection reset" in exc_info.value.message
