"""Rich spinner that tracks the workbench's loading flag."""

from __future__ import annotations

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from uci.controller import WorkbenchState

console = Console()


class ActionProgress:
    """Shows a spinner for as long as a workbench request is in flight.

    Pass ``on_change`` as the workbench's change callback; the spinner starts
    when ``loading`` turns on and is marked done when it turns off.
    """

    def __init__(self, console_: Console | None = None) -> None:
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TimeElapsedColumn(),
            console=console_ or console,
            transient=True,
        )
        self._task_id: int | None = None

    def __enter__(self) -> "ActionProgress":
        self._progress.__enter__()
        return self

    def __exit__(self, *args: object) -> None:
        self._progress.__exit__(*args)

    def on_change(self, state: WorkbenchState) -> None:
        if state.loading and self._task_id is None:
            self._task_id = self._progress.add_task(
                f"[cyan]{state.mode.action_label}[/] — waiting for the model…", total=None,
            )
        elif not state.loading and self._task_id is not None:
            self._progress.update(self._task_id, completed=True, visible=False)
            self._task_id = None
