"""Inspector mode — explanation, complexity, security and quality scores."""

from __future__ import annotations

from typing import Any

from uci.modes.base import StructuredMode
from uci.modes.prompts import INSPECTOR_MESSAGE, INSPECTOR_SYSTEM, INSPECTOR_TASK
from uci.modes.response_schemas import CODE_ANALYSIS_SCHEMA
from uci.schemas.results import CodeAnalysisResult


class AnalyzerMode(StructuredMode[CodeAnalysisResult]):
    output_model = CodeAnalysisResult
    schema_name = "code_analysis"

    @property
    def name(self) -> str:
        return "Analyze Code"

    def get_system_prompt(self) -> str:
        return INSPECTOR_SYSTEM

    def get_response_schema(self) -> dict[str, Any]:
        return CODE_ANALYSIS_SCHEMA

    def build_user_message(self, code: str, language: str) -> str:
        return INSPECTOR_MESSAGE.format(code=code, task=INSPECTOR_TASK.format(language=language))

    async def run(self, code: str, language: str) -> CodeAnalysisResult:
        return await self._complete(self.build_user_message(code, language))
