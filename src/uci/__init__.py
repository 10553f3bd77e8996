"""Code Intelligence workbench — LLM-backed code generation, analysis and visualization."""

__version__ = "0.1.0"
