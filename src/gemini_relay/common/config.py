"""Process configuration read from environment variables."""
from __future__ import annotations
import os
from dataclasses import dataclass, field
from functools import lru_cache

from gemini_relay.common.errors import ConfigError

DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"


@dataclass(frozen=True)
class Settings:
    api_key: str = field(repr=False)
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    timeout: float = 30.0
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    @property
    def generate_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/models/{self.model}:generateContent"

    @classmethod
    def from_env(cls) -> Settings:
        api_key = os.getenv("GEMINI_API_KEY", "").strip()
        if not api_key:
            raise ConfigError("GEMINI_API_KEY is not set")
        try:
            timeout = float(os.getenv("GEMINI_TIMEOUT", "30"))
            port = int(os.getenv("PORT", "3000"))
        except ValueError as e:
            raise ConfigError(f"Invalid numeric setting: {e}") from e
        if timeout <= 0:
            raise ConfigError("GEMINI_TIMEOUT must be positive")
        return cls(
            api_key=api_key,
            model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
            api_base=os.getenv("GEMINI_API_BASE", DEFAULT_API_BASE),
            timeout=timeout,
            host=os.getenv("HOST", "0.0.0.0"),
            port=port,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings for this process, read once."""
    return Settings.from_env()
