"""Workbench modes and the languages offered for source/target selection."""

from enum import Enum


class AppMode(str, Enum):
    """The six mutually exclusive operation contexts."""

    GENERATOR = "GENERATOR"
    ANALYZER = "ANALYZER"
    CONVERTER = "CONVERTER"
    DIFF = "DIFF"
    FLOWCHART = "FLOWCHART"
    RUNNER = "RUNNER"

    @property
    def label(self) -> str:
        return _LABELS[self][0]

    @property
    def action_label(self) -> str:
        return _LABELS[self][1]


_LABELS: dict[AppMode, tuple[str, str]] = {
    AppMode.GENERATOR: ("Generator", "Generate"),
    AppMode.ANALYZER: ("Inspector", "Analyze"),
    AppMode.CONVERTER: ("Converter", "Convert"),
    AppMode.DIFF: ("Diff Viewer", "Compare"),
    AppMode.FLOWCHART: ("Visualizer", "Visualize"),
    AppMode.RUNNER: ("Simulate", "Run Simulation"),
}

LANGUAGES = [
    "Python", "JavaScript", "TypeScript", "Java", "C++", "C", "PHP", "Go", "Rust", "SQL", "HTML/CSS",
]


def resolve_language(name: str) -> str:
    """Return the canonical spelling of ``name`` from LANGUAGES (case-insensitive).

    Raises ``ValueError`` for languages the workbench does not offer.
    """
    wanted = name.strip().lower()
    for lang in LANGUAGES:
        if lang.lower() == wanted:
            return lang
    raise ValueError(f"Unsupported language {name!r}; choose one of: {', '.join(LANGUAGES)}")
