"""Tests for the Rich terminal views."""

from __future__ import annotations

from rich.console import Console

from uci.controller import WorkbenchState
from uci.output.terminal import print_state, render_state
from uci.schemas.modes import AppMode
from uci.schemas.results import CodeAnalysisResult, DiffResult, GeneratedCodeResult


def _text(state: WorkbenchState) -> str:
    console = Console(record=True, width=120, color_system=None)
    print_state(state, console)
    return console.export_text()


def _analysis(security_issues: list[str]) -> CodeAnalysisResult:
    return CodeAnalysisResult.model_validate({
        "explanation": "Walks the [list] once.",
        "timeComplexity": "O(n)",
        "spaceComplexity": "O(1)",
        "securityIssues": security_issues,
        "improvements": ["Use a generator"],
        "qualityScore": {"readability": 8, "maintainability": 7, "security": 6, "performance": 9, "structure": 7.5},
    })


class TestTerminalViews:
    def test_empty_state(self) -> None:
        assert "Ready to process code" in _text(WorkbenchState())

    def test_generated(self) -> None:
        state = WorkbenchState(generated=GeneratedCodeResult(code="fn main() {}", explanation="Entry point."))
        out = _text(state)
        assert "Generated Result" in out
        assert "fn main() {}" in out
        assert "Entry point." in out

    def test_analysis_with_issues(self) -> None:
        state = WorkbenchState(mode=AppMode.ANALYZER, analysis=_analysis(["SQL injection in query()"]))
        out = _text(state)
        assert "O(n)" in out
        assert "SQL injection in query()" in out
        assert "Readability" in out
        assert "7.5/10" in out
        # markup-looking text is printed literally
        assert "Walks the [list] once." in out

    def test_analysis_without_issues(self) -> None:
        state = WorkbenchState(mode=AppMode.ANALYZER, analysis=_analysis([]))
        assert "No critical issues found." in _text(state)

    def test_diff(self) -> None:
        state = WorkbenchState(
            mode=AppMode.DIFF,
            diff=DiffResult(summary="Refactor.", changes=["Split parse()"], riskAssessment="Low"),
        )
        out = _text(state)
        assert "Comparison Report" in out
        assert "Split parse()" in out
        assert "Risk Assessment" in out

    def test_flowchart_shows_markup(self) -> None:
        state = WorkbenchState(mode=AppMode.FLOWCHART, flowchart_svg="\n<svg><g/></svg>\n")
        out = _text(state)
        assert "<svg><g/></svg>" in out
        assert "--html" in out

    def test_runner(self) -> None:
        state = WorkbenchState(mode=AppMode.RUNNER, runner_output="Traceback (most recent call last)")
        assert "Console Output (Simulated)" in _text(state)

    def test_result_for_other_mode_is_not_shown(self) -> None:
        # Only the active mode's slot is rendered.
        state = WorkbenchState(mode=AppMode.RUNNER, generated=GeneratedCodeResult(code="x", explanation="y"))
        assert "Ready to process code" in _text(state)

    def test_render_state_returns_renderable(self) -> None:
        assert render_state(WorkbenchState()) is not None
