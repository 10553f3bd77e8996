"""Rich terminal views — one renderer per workbench mode."""

from __future__ import annotations

from rich.console import Console, Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from uci.controller import WorkbenchState
from uci.schemas.modes import AppMode
from uci.schemas.results import CodeAnalysisResult, DiffResult, GeneratedCodeResult, QualityMetrics

# Rich lexer names for the languages whose display name isn't one already.
_LEXERS = {"C++": "cpp", "HTML/CSS": "html", "C": "c"}


def _lexer(language: str) -> str:
    return _LEXERS.get(language, language.lower())


def render_generated(result: GeneratedCodeResult, language: str) -> RenderableType:
    code = Panel(
        Syntax(result.code, _lexer(language), theme="monokai", line_numbers=True),
        title="[bold magenta]Generated Result[/]",
        border_style="magenta",
    )
    explanation = Panel(escape(result.explanation), title="[yellow]Explanation[/]", border_style="bright_black")
    return Group(code, explanation)


def render_quality(metrics: QualityMetrics) -> RenderableType:
    table = Table(title="Quality Scorecard", show_header=False, box=None, padding=(0, 1))
    table.add_column("Metric", style="bright_black")
    table.add_column("Bar")
    table.add_column("Score", justify="right")
    for label, score in metrics.as_rows():
        filled = round(score * 2)
        bar = Text("█" * filled, style="magenta") + Text("░" * (20 - filled), style="bright_black")
        table.add_row(label, bar, f"{score:g}/10")
    return table


def render_analysis(result: CodeAnalysisResult) -> RenderableType:
    complexity = Table.grid(expand=True, padding=(0, 4))
    complexity.add_column()
    complexity.add_column()
    complexity.add_row(
        f"[bright_black]TIME COMPLEXITY[/]\n[bold blue]{escape(result.time_complexity)}[/]",
        f"[bright_black]SPACE COMPLEXITY[/]\n[bold magenta]{escape(result.space_complexity)}[/]",
    )

    if result.security_issues:
        security: RenderableType = Text("\n").join(
            Text.assemble(("⚠ ", "red"), issue) for issue in result.security_issues
        )
    else:
        security = Text("✓ No critical issues found.", style="green")

    improvements = Text("\n").join(
        Text.assemble(("• ", "blue"), imp) for imp in result.improvements
    )

    return Group(
        Panel(render_quality(result.quality_score), border_style="bright_black"),
        Panel(complexity, border_style="bright_black"),
        Panel(escape(result.explanation), title="Code Logic", border_style="bright_black"),
        Panel(security, title="[red]Security Vulnerabilities[/]", border_style="red"),
        Panel(improvements, title="[blue]Suggested Optimizations[/]", border_style="blue"),
    )


def render_diff(result: DiffResult) -> RenderableType:
    changes = Text("\n").join(Text.assemble(("→ ", "green"), c) for c in result.changes)
    return Panel(
        Group(
            Text(result.summary),
            Text(""),
            Panel(changes, title="[green]Key Changes[/]", border_style="green"),
            Panel(escape(result.risk_assessment), title="[dark_orange]Risk Assessment[/]", border_style="dark_orange"),
        ),
        title="[bold]Comparison Report[/]",
        border_style="blue",
    )


def render_flowchart(svg: str) -> RenderableType:
    # A terminal can't draw SVG; show the markup and point at --html.
    return Panel(
        Group(
            Syntax(svg.strip(), "xml", theme="monokai", word_wrap=True),
            Text("Use --html to view the rendered graph.", style="bright_black"),
        ),
        title="Visual Logic Graph",
        border_style="bright_black",
    )


def render_runner(output: str) -> RenderableType:
    return Panel(Text(output, style="green"), title="Console Output (Simulated)", border_style="bright_black")


def render_state(state: WorkbenchState) -> RenderableType:
    """Render whichever result slot is populated for the current mode."""
    if state.mode in (AppMode.GENERATOR, AppMode.CONVERTER) and state.generated:
        language = state.target_language if state.mode is AppMode.CONVERTER else state.language
        return render_generated(state.generated, language)
    if state.mode is AppMode.ANALYZER and state.analysis:
        return render_analysis(state.analysis)
    if state.mode is AppMode.DIFF and state.diff:
        return render_diff(state.diff)
    if state.mode is AppMode.FLOWCHART and state.flowchart_svg:
        return render_flowchart(state.flowchart_svg)
    if state.mode is AppMode.RUNNER and state.runner_output:
        return render_runner(state.runner_output)
    return Text("Ready to process code", style="bright_black")


def print_state(state: WorkbenchState, console: Console | None = None) -> None:
    (console or Console()).print(render_state(state))
