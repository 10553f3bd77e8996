"""Converter mode — port code from one language to another."""

from __future__ import annotations

from typing import Any

from uci.modes.base import StructuredMode
from uci.modes.prompts import CODE_MESSAGE, CONVERTER_SYSTEM, CONVERTER_TASK
from uci.modes.response_schemas import CONVERTED_CODE_SCHEMA
from uci.schemas.results import GeneratedCodeResult


class ConverterMode(StructuredMode[GeneratedCodeResult]):
    """Converts code; the explanation lists the key changes made."""

    output_model = GeneratedCodeResult
    schema_name = "converted_code"

    @property
    def name(self) -> str:
        return "Convert Code"

    def get_system_prompt(self) -> str:
        return CONVERTER_SYSTEM

    def get_response_schema(self) -> dict[str, Any]:
        return CONVERTED_CODE_SCHEMA

    def build_user_message(self, code: str, from_language: str, to_language: str) -> str:
        task = CONVERTER_TASK.format(from_language=from_language, to_language=to_language)
        return CODE_MESSAGE.format(code=code, task=task)

    async def run(self, code: str, from_language: str, to_language: str) -> GeneratedCodeResult:
        return await self._complete(self.build_user_message(code, from_language, to_language))
