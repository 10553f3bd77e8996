"""One class per workbench mode, each a prompt template plus a response contract."""

from uci.modes.analyzer import AnalyzerMode
from uci.modes.converter import ConverterMode
from uci.modes.diff import DiffMode
from uci.modes.flowchart import FlowchartMode
from uci.modes.generator import GeneratorMode
from uci.modes.runner import RunnerMode

__all__ = [
    "AnalyzerMode",
    "ConverterMode",
    "DiffMode",
    "FlowchartMode",
    "GeneratorMode",
    "RunnerMode",
]
