# namegen/settings.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError


class Settings(BaseSettings):
    # inference server
    OLLAMA_HOST: str = Field(min_length=1)
    LLM: str = Field(min_length=1)
    REQUEST_TIMEOUT: Optional[float] = Field(default=None, gt=0)
    CLIENT: Literal["ollama", "echo"] = "ollama"

    # run shape
    KIND: Literal["Dwarf", "Human", "Elf"] = "Dwarf"
    BATCH_SIZE: Optional[int] = Field(default=None, ge=0)
    PROFILE: Literal["minimal", "guided"] = "minimal"
    DECODING: str = Field(default="novelty", min_length=1)

    # output
    OUTPUT_DIR: str = "."
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        str_strip_whitespace=True,
    )

    @property
    def endpoint(self) -> str:
        return self.OLLAMA_HOST

    @property
    def model(self) -> str:
        return self.LLM


def load_settings(**overrides) -> Settings:
    """Resolve settings from the environment; non-None overrides win.

    Raises ConfigError naming every offending variable.
    """
    explicit = {k: v for k, v in overrides.items() if v is not None}
    try:
        return Settings(**explicit)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"invalid configuration ({problems})") from e
