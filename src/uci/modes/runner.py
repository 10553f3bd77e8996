"""Simulate mode — predict a program's console output without running it."""

from __future__ import annotations

from uci.modes.base import TextMode
from uci.modes.prompts import CODE_MESSAGE, RUNNER_SYSTEM, RUNNER_TASK

NO_OUTPUT = "No output generated."
SIMULATION_ERROR = "Error executing simulation."


class RunnerMode(TextMode):
    empty_fallback = NO_OUTPUT
    error_fallback = SIMULATION_ERROR

    @property
    def name(self) -> str:
        return "Simulate Runner"

    def get_system_prompt(self) -> str:
        return RUNNER_SYSTEM

    def build_user_message(self, code: str, language: str) -> str:
        return CODE_MESSAGE.format(code=code, task=RUNNER_TASK.format(language=language))

    async def run(self, code: str, language: str) -> str:
        return await self._complete(self.build_user_message(code, language))
