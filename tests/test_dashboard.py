"""Tests for the HTML export."""

from __future__ import annotations

from pathlib import Path

from uci.controller import WorkbenchState
from uci.output.dashboard import render_dashboard, write_dashboard
from uci.schemas.modes import AppMode
from uci.schemas.results import CodeAnalysisResult, DiffResult, GeneratedCodeResult


def _analysis() -> CodeAnalysisResult:
    return CodeAnalysisResult.model_validate({
        "explanation": "Builds a query string.",
        "timeComplexity": "O(n)",
        "spaceComplexity": "O(n)",
        "securityIssues": ["<script> injection via name"],
        "improvements": ["Use parameterized queries"],
        "qualityScore": {"readability": 6, "maintainability": 5, "security": 2, "performance": 8, "structure": 6},
    })


class TestRenderDashboard:
    def test_empty_state(self) -> None:
        html = render_dashboard(WorkbenchState(), generated_at="2026-01-01T00:00:00")
        assert "<!DOCTYPE html>" in html
        assert "Ready to process code" in html
        assert "2026-01-01T00:00:00" in html

    def test_generated_code_is_escaped(self) -> None:
        state = WorkbenchState(
            prompt="make a <div>",
            generated=GeneratedCodeResult(code="el.innerHTML = '<b>hi</b>';", explanation="Sets markup."),
        )
        html = render_dashboard(state)
        assert "&lt;b&gt;hi&lt;/b&gt;" in html
        assert "<b>hi</b>" not in html
        assert "make a &lt;div&gt;" in html

    def test_converter_header_shows_both_languages(self) -> None:
        state = WorkbenchState(
            mode=AppMode.CONVERTER,
            input_code="print(1)",
            language="Python",
            target_language="Go",
            generated=GeneratedCodeResult(code="fmt.Println(1)", explanation="Uses fmt."),
        )
        html = render_dashboard(state)
        assert "Python &rarr; Go" in html
        assert "Input Code / Source" in html

    def test_analysis(self) -> None:
        html = render_dashboard(WorkbenchState(mode=AppMode.ANALYZER, analysis=_analysis()))
        assert "Quality Scorecard" in html
        assert "width:20.0%" in html  # security 2/10
        assert "&lt;script&gt; injection via name" in html
        assert "Use parameterized queries" in html

    def test_diff_shows_both_versions(self) -> None:
        state = WorkbenchState(
            mode=AppMode.DIFF,
            input_code="a = 1",
            secondary_code="a = 2",
            diff=DiffResult(summary="Changed a constant.", changes=["1 -> 2"], riskAssessment="None"),
        )
        html = render_dashboard(state)
        assert "Original Version" in html
        assert "New / Modified Version" in html
        assert "1 -&gt; 2" in html

    def test_flowchart_svg_embedded_as_markup(self) -> None:
        svg = '<svg xmlns="http://www.w3.org/2000/svg"><rect width="5" height="5"/></svg>'
        html = render_dashboard(WorkbenchState(mode=AppMode.FLOWCHART, input_code="x", flowchart_svg=svg))
        assert svg in html

    def test_runner_output(self) -> None:
        html = render_dashboard(WorkbenchState(mode=AppMode.RUNNER, input_code="x", runner_output="42"))
        assert "Console Output (Simulated)" in html
        assert "42" in html


class TestWriteDashboard:
    def test_creates_parent_dirs(self, tmp_path: Path) -> None:
        out = write_dashboard(WorkbenchState(runner_output="hi", mode=AppMode.RUNNER), tmp_path / "a" / "b.html")
        assert out.exists()
        assert "hi" in out.read_text(encoding="utf-8")
