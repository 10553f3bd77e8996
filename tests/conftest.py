"""Shared test fixtures."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Callable
from unittest.mock import AsyncMock

import pytest

from uci.service import CodeIntelligence
from uci.shared.llm_client import LLMClient


def make_text_response(text: str | None) -> SimpleNamespace:
    """Create a mock OpenAI chat completion carrying ``text``."""
    message = SimpleNamespace(content=text, tool_calls=None)
    choice = SimpleNamespace(message=message)
    usage = SimpleNamespace(prompt_tokens=12, completion_tokens=34)
    return SimpleNamespace(choices=[choice], usage=usage)


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Return an LLMClient with a mocked OpenAI SDK underneath."""
    client = LLMClient.__new__(LLMClient)
    client._client = AsyncMock()
    client.model = "gpt-test"
    client.max_tokens = 1024
    return client


@pytest.fixture
def respond(mock_llm_client: LLMClient) -> Callable[[Any], AsyncMock]:
    """Make the mocked SDK answer with the given text (or raise the given exception)."""

    def _respond(reply: Any) -> AsyncMock:
        if isinstance(reply, BaseException):
            create = AsyncMock(side_effect=reply)
        else:
            create = AsyncMock(return_value=make_text_response(reply))
        mock_llm_client._client.chat.completions.create = create
        return create

    return _respond


@pytest.fixture
def service(mock_llm_client: LLMClient) -> CodeIntelligence:
    return CodeIntelligence(mock_llm_client)
