"""Async OpenAI API wrapper — one request per call, optional structured output.

The workbench never retries: a failed request surfaces to the caller as a
``TransportError`` and the mode decides whether that is fatal.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

import httpx
from openai import APIError, AsyncOpenAI

from uci.errors import TransportError
from uci.schemas.config import DEFAULT_MODEL, MAX_TOKENS

logger = logging.getLogger(__name__)

TokensCallback = Callable[[int, int], None]
"""Called with (input_tokens, output_tokens) when a completion finishes."""


def _json_schema_format(name: str, schema: dict[str, Any]) -> dict[str, Any]:
    """Build the ``response_format`` payload that pins the reply to ``schema``."""
    return {
        "type": "json_schema",
        "json_schema": {"name": name, "schema": schema, "strict": True},
    }


class LLMClient:
    """Thin async wrapper around the OpenAI SDK.

    ``simple_completion`` is the only entry point: a single request/response
    with no tools.  Pass ``response_schema`` to demand a JSON reply of a fixed
    shape; omit it for free text (SVG, simulated console output).
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        model: str = DEFAULT_MODEL,
        base_url: str | None = None,
        max_tokens: int = MAX_TOKENS,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url or None, http_client=http_client)
        self.model = model
        self.max_tokens = max_tokens

    async def simple_completion(
        self,
        *,
        system: str,
        user_message: str,
        schema_name: str = "result",
        response_schema: dict[str, Any] | None = None,
        on_tokens: TokensCallback | None = None,
    ) -> str:
        """Send one chat completion and return the reply text ("" if none).

        SDK failures are re-raised as ``TransportError`` with the original
        exception chained.
        """
        kwargs: dict[str, Any] = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user_message},
            ],
        }
        if response_schema is not None:
            kwargs["response_format"] = _json_schema_format(schema_name, response_schema)

        try:
            response = await self._client.chat.completions.create(**kwargs)
        except APIError as exc:
            raise TransportError(f"Model request failed: {exc}") from exc

        usage = getattr(response, "usage", None)
        if on_tokens and usage:
            on_tokens(getattr(usage, "prompt_tokens", 0), getattr(usage, "completion_tokens", 0))
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def aclose(self) -> None:
        """Release the underlying HTTP connection pool."""
        await self._client.close()


# ======================================================================
# Dry-run mock client (zero API calls)
# ======================================================================

_DRY_RUN_RESPONSES: dict[str, str] = {
    "generator": json.dumps({
        "code": "def add(a: int, b: int) -> int:\n    return a + b\n",
        "explanation": "A typed helper that returns the sum of its two arguments.",
    }),
    "inspector": json.dumps({
        "explanation": "Iterates over the input once and accumulates a running total.",
        "timeComplexity": "O(n)",
        "spaceComplexity": "O(1)",
        "securityIssues": [],
        "improvements": ["Add input validation", "Use the built-in sum()"],
        "qualityScore": {
            "readability": 8, "maintainability": 7, "security": 9,
            "performance": 8, "structure": 7,
        },
    }),
    "converter": json.dumps({
        "code": "function add(a, b) {\n  return a + b;\n}\n",
        "explanation": "Type hints were dropped; the def became a function declaration.",
    }),
    "diff": json.dumps({
        "summary": "The new version renames a variable and adds a guard clause.",
        "changes": ["Renamed total to result", "Added an early return for empty input"],
        "riskAssessment": "Low risk; behavior only changes for empty input.",
    }),
    "flowchart": (
        "```svg\n"
        '<svg xmlns="http://www.w3.org/2000/svg" width="160" height="120">'
        '<rect x="30" y="10" width="100" height="30" rx="6" fill="none" stroke="#e5e7eb"/>'
        '<text x="80" y="30" fill="#e5e7eb" text-anchor="middle" font-size="12">Start</text>'
        '<line x1="80" y1="40" x2="80" y2="80" stroke="#e5e7eb"/>'
        '<rect x="30" y="80" width="100" height="30" rx="6" fill="none" stroke="#e5e7eb"/>'
        '<text x="80" y="100" fill="#e5e7eb" text-anchor="middle" font-size="12">End</text>'
        "</svg>\n```"
    ),
    "runner": "3\n",
}


class DryRunClient:
    """Drop-in replacement for LLMClient that makes zero API calls.

    Returns a canned response for whichever mode issued the request.
    """

    async def simple_completion(
        self,
        *,
        system: str,
        user_message: str,
        schema_name: str = "result",
        response_schema: dict[str, Any] | None = None,
        on_tokens: TokensCallback | None = None,
    ) -> str:
        key = self._detect_mode(system)
        logger.info("[dry-run] %s request (%d chars)", key, len(user_message))
        if on_tokens:
            on_tokens(0, 0)
        return _DRY_RUN_RESPONSES[key]

    async def aclose(self) -> None:
        pass

    @staticmethod
    def _detect_mode(system: str) -> str:
        """Guess the requesting mode from its system prompt."""
        for key, marker in (
            ("generator", "Code Generator"),
            ("inspector", "Code Inspector"),
            ("converter", "Code Converter"),
            ("diff", "Diff Reviewer"),
            ("flowchart", "Flowchart Visualizer"),
        ):
            if marker in system:
                return key
        return "runner"
