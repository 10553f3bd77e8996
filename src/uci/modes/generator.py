"""Generator mode — natural-language prompt to code."""

from __future__ import annotations

from typing import Any

from uci.modes.base import StructuredMode
from uci.modes.prompts import GENERATOR_SYSTEM, GENERATOR_TASK
from uci.modes.response_schemas import GENERATED_CODE_SCHEMA
from uci.schemas.results import GeneratedCodeResult


class GeneratorMode(StructuredMode[GeneratedCodeResult]):
    """Writes ``language`` code for a task described in plain words."""

    output_model = GeneratedCodeResult
    schema_name = "generated_code"

    @property
    def name(self) -> str:
        return "Generate Code"

    def get_system_prompt(self) -> str:
        return GENERATOR_SYSTEM

    def get_response_schema(self) -> dict[str, Any]:
        return GENERATED_CODE_SCHEMA

    def build_user_message(self, prompt: str, language: str) -> str:
        return GENERATOR_TASK.format(language=language, prompt=prompt)

    async def run(self, prompt: str, language: str) -> GeneratedCodeResult:
        return await self._complete(self.build_user_message(prompt, language))
