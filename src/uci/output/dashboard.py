"""Static HTML export — renders the workbench's current result to a self-contained page."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from uci.controller import WorkbenchState
from uci.schemas.modes import AppMode

_TEMPLATE_DIR = Path(__file__).parent / "templates"


def render_dashboard(state: WorkbenchState, *, generated_at: str | None = None) -> str:
    """Render the populated result slot of ``state`` into an HTML document.

    Everything is autoescaped except the flowchart, which is embedded as SVG
    markup so the browser draws it.
    """
    env = Environment(loader=FileSystemLoader(str(_TEMPLATE_DIR)), autoescape=True)
    template = env.get_template("result.html")

    is_converter = state.mode is AppMode.CONVERTER
    return template.render(
        mode=state.mode.value,
        mode_label=state.mode.label,
        generated_at=generated_at or datetime.now().isoformat(timespec="seconds"),
        language=state.language,
        target_language=state.target_language if is_converter else "",
        prompt=state.prompt if state.mode is AppMode.GENERATOR else "",
        input_code=state.input_code,
        secondary_code=state.secondary_code if state.mode is AppMode.DIFF else "",
        generated=state.generated.model_dump() if state.generated else None,
        analysis=state.analysis.model_dump() if state.analysis else None,
        quality_rows=state.analysis.quality_score.as_rows() if state.analysis else [],
        diff=state.diff.model_dump() if state.diff else None,
        flowchart_svg=Markup(state.flowchart_svg) if state.flowchart_svg else "",
        runner_output=state.runner_output,
    )


def write_dashboard(state: WorkbenchState, path: str | Path) -> Path:
    """Render and write the HTML export, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_dashboard(state), encoding="utf-8")
    return path
