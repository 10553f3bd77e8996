"""Settings schema — validates uci.yml."""

from pydantic import BaseModel, field_validator

from uci.schemas.modes import resolve_language

DEFAULT_MODEL = "gpt-4o"
MAX_TOKENS = 16_384


class Settings(BaseModel):
    """Client and workbench defaults loaded from uci.yml.

    The API key is deliberately not part of this model: it is only ever read
    from the process environment.
    """

    model: str = DEFAULT_MODEL
    base_url: str = ""
    max_tokens: int = MAX_TOKENS

    # Workbench defaults
    language: str = "Python"
    target_language: str = "JavaScript"

    @field_validator("language", "target_language")
    @classmethod
    def check_language(cls, v: str) -> str:
        return resolve_language(v)

    @field_validator("max_tokens")
    @classmethod
    def check_max_tokens(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_tokens must be positive")
        return v
