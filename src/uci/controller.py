"""Workbench controller — owns the UI state and dispatches the action button.

The controller is front-end agnostic: the CLI (and the interactive session)
drive it, and the renderers in ``uci.output`` read ``Workbench.state``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from uci.errors import UCIError
from uci.schemas.modes import AppMode
from uci.schemas.results import CodeAnalysisResult, DiffResult, GeneratedCodeResult
from uci.service import CodeIntelligence

logger = logging.getLogger(__name__)

ALERT_MESSAGE = "An error occurred. Please check your API Key and connection."

AlertCallback = Callable[[str], None]
ChangeCallback = Callable[["WorkbenchState"], None]


@dataclass
class WorkbenchState:
    """Single source of truth for the workbench.

    At most one result slot is populated at a time, always the one belonging
    to ``mode``.
    """

    mode: AppMode = AppMode.GENERATOR

    # Inputs
    prompt: str = ""
    input_code: str = ""
    secondary_code: str = ""  # new version, DIFF mode only
    language: str = "Python"
    target_language: str = "JavaScript"

    loading: bool = False

    # Result slots
    generated: GeneratedCodeResult | None = None
    analysis: CodeAnalysisResult | None = None
    diff: DiffResult | None = None
    flowchart_svg: str = ""
    runner_output: str = ""

    @property
    def has_result(self) -> bool:
        return bool(
            self.generated or self.analysis or self.diff or self.flowchart_svg or self.runner_output
        )

    def clear_results(self) -> None:
        self.generated = None
        self.analysis = None
        self.diff = None
        self.flowchart_svg = ""
        self.runner_output = ""


class Workbench:
    """Presentation controller: mode selection plus the single action button."""

    def __init__(
        self,
        service: CodeIntelligence,
        *,
        state: WorkbenchState | None = None,
        alert: AlertCallback | None = None,
        on_change: ChangeCallback | None = None,
    ) -> None:
        self.service = service
        self.state = state or WorkbenchState()
        self._alert = alert
        self.on_change = on_change
        # Bumped on every action and mode switch; replies carrying an older
        # value are discarded.
        self._generation = 0

    def select_mode(self, mode: AppMode) -> None:
        """Switch mode, clearing every result slot."""
        self._generation += 1
        self.state.mode = mode
        self.state.clear_results()
        if mode is AppMode.GENERATOR:
            self.state.input_code = ""
        self._notify()

    def can_run(self) -> bool:
        """False while a request is in flight or a required input is empty."""
        s = self.state
        if s.loading:
            return False
        if s.mode is AppMode.GENERATOR:
            return bool(s.prompt.strip())
        if s.mode is AppMode.DIFF:
            return bool(s.input_code.strip() and s.secondary_code.strip())
        return bool(s.input_code.strip())

    async def run_action(self) -> bool:
        """Run the current mode's operation.

        Returns True when a fresh result was stored, False when the action was
        a no-op, failed, or was superseded while in flight.
        """
        if not self.can_run():
            return False

        self._generation += 1
        generation = self._generation
        mode = self.state.mode

        self._set_loading(True)
        try:
            result = await self._dispatch(mode)
        except Exception as exc:
            if not isinstance(exc, UCIError):
                logger.exception("Unexpected failure in %s request", mode.value)
            if generation != self._generation:
                logger.info("Discarding failure from superseded %s request: %s", mode.value, exc)
                return False
            if self._alert:
                self._alert(ALERT_MESSAGE)
            return False
        finally:
            self._set_loading(False)

        if generation != self._generation:
            logger.info("Discarding stale %s response", mode.value)
            return False
        self._store(mode, result)
        self._notify()
        return True

    async def _dispatch(self, mode: AppMode) -> object:
        s = self.state
        if mode is AppMode.GENERATOR:
            return await self.service.generate(s.prompt, s.language)
        if mode is AppMode.ANALYZER:
            return await self.service.analyze(s.input_code, s.language)
        if mode is AppMode.CONVERTER:
            return await self.service.convert(s.input_code, s.language, s.target_language)
        if mode is AppMode.DIFF:
            return await self.service.compare_versions(s.input_code, s.secondary_code)
        if mode is AppMode.FLOWCHART:
            return await self.service.generate_flowchart_svg(s.input_code)
        return await self.service.simulate_runner(s.input_code, s.language)

    def _store(self, mode: AppMode, result: object) -> None:
        s = self.state
        s.clear_results()
        if mode in (AppMode.GENERATOR, AppMode.CONVERTER):
            s.generated = result  # type: ignore[assignment]
            if mode is AppMode.GENERATOR:
                # Keep the generated code around so it can be analyzed next.
                s.input_code = s.generated.code  # type: ignore[union-attr]
        elif mode is AppMode.ANALYZER:
            s.analysis = result  # type: ignore[assignment]
        elif mode is AppMode.DIFF:
            s.diff = result  # type: ignore[assignment]
        elif mode is AppMode.FLOWCHART:
            s.flowchart_svg = result  # type: ignore[assignment]
        else:
            s.runner_output = result  # type: ignore[assignment]

    def _set_loading(self, loading: bool) -> None:
        self.state.loading = loading
        self._notify()

    def _notify(self) -> None:
        if self.on_change:
            self.on_change(self.state)
