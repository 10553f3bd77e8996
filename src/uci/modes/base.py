"""Base mode classes — the pattern every workbench mode follows."""

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from uci.errors import EmptyResponseError, MalformedResponseError
from uci.shared.llm_client import LLMClient

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)

_FENCE_RE = re.compile(r"```(?:xml|svg)?")


class BaseMode(ABC):
    """Abstract base class for all modes.

    Subclasses implement:
    - ``name`` — human-readable mode name used in log lines
    - ``get_system_prompt()`` — returns the system prompt string
    """

    def __init__(self, client: LLMClient) -> None:
        self.client = client

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for log lines."""

    @abstractmethod
    def get_system_prompt(self) -> str:
        """Return the system prompt for this mode."""

    def _log_usage(self, input_tokens: int, output_tokens: int) -> None:
        logger.debug("%s used %d input / %d output tokens", self.name, input_tokens, output_tokens)


class StructuredMode(BaseMode, Generic[ResultT]):
    """A mode whose reply must be a JSON object of a fixed shape.

    Every failure (transport, empty reply, bad JSON, wrong shape) is logged
    and re-raised to the caller; nothing partial is ever returned.
    """

    output_model: type[ResultT]
    schema_name: str

    @abstractmethod
    def get_response_schema(self) -> dict[str, Any]:
        """Return the JSON schema sent with the request."""

    def parse_output(self, raw_text: str) -> ResultT:
        """Decode and validate the model's reply."""
        if not raw_text.strip():
            raise EmptyResponseError(f"{self.name}: no response from model")
        try:
            data = extract_json(raw_text)
        except ValueError as exc:
            raise MalformedResponseError(f"{self.name}: {exc}") from exc
        try:
            return self.output_model.model_validate(data)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"{self.name}: response does not match the expected shape: {exc}"
            ) from exc

    async def _complete(self, user_message: str) -> ResultT:
        try:
            raw = await self.client.simple_completion(
                system=self.get_system_prompt(),
                user_message=user_message,
                schema_name=self.schema_name,
                response_schema=self.get_response_schema(),
                on_tokens=self._log_usage,
            )
            logger.debug("Mode %s raw output:\n%s", self.name, raw[:500])
            return self.parse_output(raw)
        except Exception as exc:
            logger.error("%s error: %s", self.name, exc)
            raise


class TextMode(BaseMode):
    """A mode whose reply is free text and whose failures never propagate.

    ``empty_fallback`` is returned when the model sends nothing and
    ``error_fallback`` when the request or post-processing fails.
    """

    empty_fallback: str = ""
    error_fallback: str = ""

    def postprocess(self, raw_text: str) -> str:
        """Hook for cleaning up the reply; identity by default."""
        return raw_text

    async def _complete(self, user_message: str) -> str:
        try:
            raw = await self.client.simple_completion(
                system=self.get_system_prompt(),
                user_message=user_message,
                on_tokens=self._log_usage,
            )
            logger.debug("Mode %s raw output:\n%s", self.name, raw[:500])
            if not raw:
                return self.empty_fallback
            return self.postprocess(raw)
        except Exception as exc:
            logger.warning("%s error: %s", self.name, exc)
            return self.error_fallback


def strip_code_fences(text: str) -> str:
    """Remove ```xml, ```svg and bare ``` delimiters, leaving everything else as-is."""
    return _FENCE_RE.sub("", text)


def extract_json(text: str) -> dict[str, Any]:
    """Extract a JSON object from text that may contain markdown fences."""
    text = text.strip()

    # 1. Try direct parse (clean JSON response)
    if text.startswith("{"):
        try:
            obj = json.loads(text)
        except json.JSONDecodeError:
            # Might have trailing text (try raw_decode)
            try:
                obj, _ = json.JSONDecoder().raw_decode(text)
            except json.JSONDecodeError:
                obj = None
        if isinstance(obj, dict):
            return obj

    # 2. Look for ```json ... ``` or ``` ... ``` fenced blocks
    match = re.search(r"```(?:json)?\s*\n?(.*?)\n?```", text, re.DOTALL)
    if match:
        try:
            obj = json.loads(match.group(1).strip())
        except json.JSONDecodeError:
            obj = None
        if isinstance(obj, dict):
            return obj

    # 3. Find the first { and try to parse a JSON object starting there
    try:
        start = text.index("{")
        obj, _ = json.JSONDecoder().raw_decode(text, idx=start)
        if isinstance(obj, dict):
            return obj
    except ValueError:
        pass

    raise ValueError(
        f"Could not extract JSON from model response (length={len(text)}). "
        f"First 300 chars: {text[:300]!r}"
    )
