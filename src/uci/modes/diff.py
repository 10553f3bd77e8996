"""Diff mode — compare two versions of the same code."""

from __future__ import annotations

from typing import Any

from uci.modes.base import StructuredMode
from uci.modes.prompts import DIFF_MESSAGE, DIFF_SYSTEM, DIFF_TASK
from uci.modes.response_schemas import DIFF_SCHEMA
from uci.schemas.results import DiffResult


class DiffMode(StructuredMode[DiffResult]):
    output_model = DiffResult
    schema_name = "version_diff"

    @property
    def name(self) -> str:
        return "Diff"

    def get_system_prompt(self) -> str:
        return DIFF_SYSTEM

    def get_response_schema(self) -> dict[str, Any]:
        return DIFF_SCHEMA

    def build_user_message(self, old_code: str, new_code: str) -> str:
        return DIFF_MESSAGE.format(old_code=old_code, new_code=new_code, task=DIFF_TASK)

    async def run(self, old_code: str, new_code: str) -> DiffResult:
        return await self._complete(self.build_user_message(old_code, new_code))
