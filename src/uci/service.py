"""The API client layer — one async operation per workbench mode."""

from __future__ import annotations

from uci.modes import (
    AnalyzerMode,
    ConverterMode,
    DiffMode,
    FlowchartMode,
    GeneratorMode,
    RunnerMode,
)
from uci.schemas.results import CodeAnalysisResult, DiffResult, GeneratedCodeResult
from uci.shared.llm_client import LLMClient


class CodeIntelligence:
    """Facade over the six modes, all sharing one injected model client.

    ``generate``, ``analyze``, ``convert`` and ``compare_versions`` raise on
    failure (normally a ``UCIError``); ``generate_flowchart_svg`` and
    ``simulate_runner`` always return a string.
    """

    def __init__(self, client: LLMClient) -> None:
        self.client = client
        self._generator = GeneratorMode(client)
        self._analyzer = AnalyzerMode(client)
        self._converter = ConverterMode(client)
        self._diff = DiffMode(client)
        self._flowchart = FlowchartMode(client)
        self._runner = RunnerMode(client)

    async def generate(self, prompt: str, language: str) -> GeneratedCodeResult:
        return await self._generator.run(prompt, language)

    async def analyze(self, code: str, language: str) -> CodeAnalysisResult:
        return await self._analyzer.run(code, language)

    async def convert(self, code: str, from_language: str, to_language: str) -> GeneratedCodeResult:
        return await self._converter.run(code, from_language, to_language)

    async def compare_versions(self, old_code: str, new_code: str) -> DiffResult:
        return await self._diff.run(old_code, new_code)

    async def generate_flowchart_svg(self, code: str) -> str:
        return await self._flowchart.run(code)

    async def simulate_runner(self, code: str, language: str) -> str:
        return await self._runner.run(code, language)
