"""Visualizer mode — draw the control flow of code as SVG."""

from __future__ import annotations

from uci.modes.base import TextMode, strip_code_fences
from uci.modes.prompts import CODE_MESSAGE, FLOWCHART_SYSTEM, FLOWCHART_TASK


class FlowchartMode(TextMode):
    """Returns raw SVG markup, or "" when the model fails or sends nothing.

    Models often wrap the SVG in a markdown fence despite being told not to,
    so fence delimiters are stripped from the reply.
    """

    @property
    def name(self) -> str:
        return "Flowchart"

    def get_system_prompt(self) -> str:
        return FLOWCHART_SYSTEM

    def build_user_message(self, code: str) -> str:
        return CODE_MESSAGE.format(code=code, task=FLOWCHART_TASK)

    def postprocess(self, raw_text: str) -> str:
        return strip_code_fences(raw_text)

    async def run(self, code: str) -> str:
        return await self._complete(self.build_user_message(code))
