"""Typer CLI — one command per workbench mode plus an interactive session."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.prompt import Prompt

from uci.config import get_api_key, load_settings
from uci.controller import Workbench, WorkbenchState
from uci.schemas.config import Settings
from uci.schemas.modes import LANGUAGES, AppMode, resolve_language

# Load .env file from project root (if it exists)
load_dotenv()

app = typer.Typer(
    name="uci",
    help="Code Intelligence — generate, inspect, convert, diff, visualize and simulate code with an LLM.",
    no_args_is_help=True,
)
console = Console()

_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to uci.yml")
_VERBOSE_OPTION = typer.Option(False, "--verbose", "-v")
_DRY_RUN_OPTION = typer.Option(False, "--dry-run", help="Use canned responses (no API calls).")
_HTML_OPTION = typer.Option(None, "--html", help="Also write the result as a self-contained HTML page.")
_LANGUAGE_HELP = "Source language (see `uci languages`)."


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )
    # httpx logs every HTTP request at INFO, which is noise for CLI users
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _language(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return resolve_language(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))


def _read_code(source: str) -> str:
    """Read code from a file path, or from stdin when ``source`` is ``-``."""
    if source == "-":
        return sys.stdin.read()
    try:
        return _read_text(Path(source))
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[red]Cannot read {source}:[/] {exc}")
        raise typer.Exit(code=1)


def _read_text(path: Path) -> str:
    if not path.is_file():
        raise FileNotFoundError(f"No such file: {path}")
    return path.read_text(encoding="utf-8")


def _load_settings(config: Path | None) -> Settings:
    try:
        return load_settings(config)
    except Exception as exc:
        console.print(f"[red]Config validation failed:[/] {exc}")
        raise typer.Exit(code=1)


def _build_workbench(settings: Settings, *, dry_run: bool, alerts: list[str]) -> Workbench:
    from uci.service import CodeIntelligence

    if dry_run:
        from uci.shared.llm_client import DryRunClient
        client = DryRunClient()
    else:
        api_key = get_api_key()
        if not api_key:
            console.print("[red]OPENAI_API_KEY is not set.[/] Export it or add it to a .env file.")
            raise typer.Exit(code=1)
        from uci.shared.llm_client import LLMClient
        client = LLMClient(
            api_key,
            model=settings.model,
            base_url=settings.base_url or None,
            max_tokens=settings.max_tokens,
        )

    state = WorkbenchState(language=settings.language, target_language=settings.target_language)
    return Workbench(CodeIntelligence(client), state=state, alert=alerts.append)


async def _run_with_progress(workbench: Workbench) -> bool:
    from uci.shared.progress import ActionProgress

    with ActionProgress(console) as progress:
        workbench.on_change = progress.on_change
        try:
            return await workbench.run_action()
        finally:
            workbench.on_change = None


async def _run_once(workbench: Workbench) -> bool:
    try:
        return await _run_with_progress(workbench)
    finally:
        await workbench.service.client.aclose()


def _execute(workbench: Workbench, alerts: list[str], html: Path | None) -> None:
    """Run the action, print the result view and optionally export it."""
    from uci.output.terminal import print_state

    if not workbench.can_run():
        console.print("[red]Nothing to do:[/] the required input is empty.")
        raise typer.Exit(code=1)

    asyncio.run(_run_once(workbench))

    if alerts:
        console.print(f"[red]{alerts[-1]}[/]")
        raise typer.Exit(code=1)

    state = workbench.state
    if not state.has_result:
        console.print("[yellow]The model returned nothing to show.[/]")
        return

    print_state(state, console)
    if html:
        from uci.output.dashboard import write_dashboard
        path = write_dashboard(state, html)
        console.print(f"[green]HTML written to:[/] {path}")


def _prepare(
    mode: AppMode, config: Path | None, verbose: bool, dry_run: bool,
) -> tuple[Workbench, list[str]]:
    _setup_logging(verbose)
    settings = _load_settings(config)
    if dry_run:
        console.print("[yellow]DRY-RUN mode — no API calls will be made.[/]\n")
    alerts: list[str] = []
    workbench = _build_workbench(settings, dry_run=dry_run, alerts=alerts)
    workbench.select_mode(mode)
    return workbench, alerts


@app.command()
def generate(
    prompt: str = typer.Argument(..., help="What the code should do."),
    language: str = typer.Option(None, "--language", "-l", help="Target language.", callback=_language),
    config: Path = _CONFIG_OPTION,
    verbose: bool = _VERBOSE_OPTION,
    dry_run: bool = _DRY_RUN_OPTION,
    html: Path = _HTML_OPTION,
) -> None:
    """Generate code from a natural-language prompt."""
    workbench, alerts = _prepare(AppMode.GENERATOR, config, verbose, dry_run)
    workbench.state.prompt = prompt
    if language:
        workbench.state.language = language
    _execute(workbench, alerts, html)


@app.command()
def analyze(
    source: str = typer.Argument(..., help="Source file, or - for stdin."),
    language: str = typer.Option(None, "--language", "-l", help=_LANGUAGE_HELP, callback=_language),
    config: Path = _CONFIG_OPTION,
    verbose: bool = _VERBOSE_OPTION,
    dry_run: bool = _DRY_RUN_OPTION,
    html: Path = _HTML_OPTION,
) -> None:
    """Explain code, estimate complexity, list security issues and score quality."""
    workbench, alerts = _prepare(AppMode.ANALYZER, config, verbose, dry_run)
    workbench.state.input_code = _read_code(source)
    if language:
        workbench.state.language = language
    _execute(workbench, alerts, html)


@app.command()
def convert(
    source: str = typer.Argument(..., help="Source file, or - for stdin."),
    language: str = typer.Option(None, "--from", "-f", help=_LANGUAGE_HELP, callback=_language),
    target: str = typer.Option(None, "--to", "-t", help="Target language.", callback=_language),
    config: Path = _CONFIG_OPTION,
    verbose: bool = _VERBOSE_OPTION,
    dry_run: bool = _DRY_RUN_OPTION,
    html: Path = _HTML_OPTION,
) -> None:
    """Convert code from one language to another.

    Example:

        uci convert app.py --from Python --to JavaScript
    """
    workbench, alerts = _prepare(AppMode.CONVERTER, config, verbose, dry_run)
    workbench.state.input_code = _read_code(source)
    if language:
        workbench.state.language = language
    if target:
        workbench.state.target_language = target
    _execute(workbench, alerts, html)


@app.command()
def diff(
    old: str = typer.Argument(..., help="Original version (file, or - for stdin)."),
    new: str = typer.Argument(..., help="New / modified version (file)."),
    config: Path = _CONFIG_OPTION,
    verbose: bool = _VERBOSE_OPTION,
    dry_run: bool = _DRY_RUN_OPTION,
    html: Path = _HTML_OPTION,
) -> None:
    """Compare two versions of the same code."""
    workbench, alerts = _prepare(AppMode.DIFF, config, verbose, dry_run)
    workbench.state.input_code = _read_code(old)
    workbench.state.secondary_code = _read_code(new)
    _execute(workbench, alerts, html)


@app.command()
def flowchart(
    source: str = typer.Argument(..., help="Source file, or - for stdin."),
    config: Path = _CONFIG_OPTION,
    verbose: bool = _VERBOSE_OPTION,
    dry_run: bool = _DRY_RUN_OPTION,
    html: Path = _HTML_OPTION,
) -> None:
    """Draw the control flow of code as an SVG flowchart."""
    workbench, alerts = _prepare(AppMode.FLOWCHART, config, verbose, dry_run)
    workbench.state.input_code = _read_code(source)
    _execute(workbench, alerts, html)


@app.command("run")
def run_simulation(
    source: str = typer.Argument(..., help="Source file, or - for stdin."),
    language: str = typer.Option(None, "--language", "-l", help=_LANGUAGE_HELP, callback=_language),
    config: Path = _CONFIG_OPTION,
    verbose: bool = _VERBOSE_OPTION,
    dry_run: bool = _DRY_RUN_OPTION,
    html: Path = _HTML_OPTION,
) -> None:
    """Simulate running code and show the predicted console output."""
    workbench, alerts = _prepare(AppMode.RUNNER, config, verbose, dry_run)
    workbench.state.input_code = _read_code(source)
    if language:
        workbench.state.language = language
    _execute(workbench, alerts, html)


@app.command()
def languages() -> None:
    """List the languages the workbench offers."""
    for lang in LANGUAGES:
        console.print(f"  {lang}")


@app.command()
def interactive(
    config: Path = _CONFIG_OPTION,
    verbose: bool = _VERBOSE_OPTION,
    dry_run: bool = _DRY_RUN_OPTION,
) -> None:
    """Pick modes and run them one after another in a single session."""
    workbench, alerts = _prepare(AppMode.GENERATOR, config, verbose, dry_run)
    try:
        asyncio.run(_session(workbench, alerts))
    except (EOFError, KeyboardInterrupt):
        console.print()


async def _session(workbench: Workbench, alerts: list[str]) -> None:
    """Menu loop. The whole session runs on one event loop so the model
    client's connection pool stays usable between requests."""
    from uci.output.terminal import print_state

    modes = list(AppMode)
    menu = "  ".join(f"[bold]{i}[/] {m.label}" for i, m in enumerate(modes, 1))

    try:
        while True:
            console.print(f"\n{menu}  [bold]q[/] Quit")
            choice = Prompt.ask("Mode", choices=[str(i) for i in range(1, len(modes) + 1)] + ["q"])
            if choice == "q":
                break

            # Keep the inputs when re-running the same mode, as the UI does.
            mode = modes[int(choice) - 1]
            if mode is not workbench.state.mode:
                workbench.select_mode(mode)
            else:
                workbench.state.clear_results()
            _ask_inputs(workbench.state)

            if not workbench.can_run():
                console.print("[yellow]Required input is empty, nothing to do.[/]")
                continue

            alerts.clear()
            await _run_with_progress(workbench)
            if alerts:
                console.print(f"[red]{alerts[-1]}[/]")
            else:
                print_state(workbench.state, console)
    finally:
        await workbench.service.client.aclose()


def _ask_inputs(state: WorkbenchState) -> None:
    """Prompt for the inputs the current mode needs."""
    mode = state.mode
    if mode is AppMode.GENERATOR:
        state.prompt = Prompt.ask("Prompt", default=state.prompt, show_default=bool(state.prompt))
    elif mode is AppMode.DIFF:
        state.input_code = _ask_file("Original version", state.input_code)
        state.secondary_code = _ask_file("New version", state.secondary_code)
    else:
        state.input_code = _ask_file("Source file", state.input_code)

    if mode in (AppMode.GENERATOR, AppMode.ANALYZER, AppMode.CONVERTER, AppMode.RUNNER):
        state.language = _ask_language("Language", state.language)
    if mode is AppMode.CONVERTER:
        state.target_language = _ask_language("Target language", state.target_language)


def _ask_file(label: str, current: str) -> str:
    hint = " (Enter keeps the current code)" if current else ""
    raw = Prompt.ask(f"{label}{hint}", default="", show_default=False)
    if not raw:
        return current
    try:
        return _read_text(Path(raw).expanduser())
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[red]Cannot read {raw}:[/] {exc}")
        return current


def _ask_language(label: str, current: str) -> str:
    while True:
        raw = Prompt.ask(label, default=current)
        try:
            return resolve_language(raw)
        except ValueError as exc:
            console.print(f"[red]{exc}[/]")
