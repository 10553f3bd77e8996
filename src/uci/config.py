"""Settings loader — reads uci.yml into Settings and applies environment overrides."""

import os
from pathlib import Path

import yaml

from uci.schemas.config import Settings

# Environment variables that take precedence over the YAML file.
_ENV_OVERRIDES = {
    "UCI_MODEL": "model",
    "OPENAI_BASE_URL": "base_url",
}


def load_settings(path: str | Path | None = None) -> Settings:
    """Load and validate settings.

    With no ``path`` the defaults are used.  Raises ``FileNotFoundError`` if
    the path doesn't exist and ``pydantic.ValidationError`` if the YAML content
    is invalid.
    """
    raw: dict = {}
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        loaded = yaml.safe_load(path.read_text())
        # An empty file loads as None; treat it as "all defaults".
        if loaded is not None:
            if not isinstance(loaded, dict):
                raise ValueError(f"Config file must be a YAML mapping, got {type(loaded).__name__}")
            raw = {k: v for k, v in loaded.items() if v is not None}

    for env_name, key in _ENV_OVERRIDES.items():
        if value := os.environ.get(env_name, "").strip():
            raw[key] = value

    return Settings(**raw)


def get_api_key() -> str | None:
    """Return the API credential from the process environment, if set."""
    return os.environ.get("OPENAI_API_KEY") or None
