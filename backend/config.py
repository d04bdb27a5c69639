"""Runtime settings, read from environment variables."""

import os
from dataclasses import dataclass

DEFAULT_API_URL = "https://jservice.io/api"


def _env_bool(name, default):
    return os.environ.get(name, default).lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    api_timeout: float = 10.0
    max_offset: int = 100
    max_attempts: int = 10
    max_games: int = 100
    source: str = "remote"  # "remote" or "sample"
    background: bool = True
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls):
        source = os.environ.get("JEOPARDY_SOURCE", "remote").lower()
        if source not in ("remote", "sample"):
            raise ValueError(f"JEOPARDY_SOURCE must be 'remote' or 'sample', got {source!r}")
        return cls(
            api_url=os.environ.get("JEOPARDY_API_URL", DEFAULT_API_URL).rstrip("/"),
            api_timeout=float(os.environ.get("JEOPARDY_API_TIMEOUT", "10")),
            max_offset=int(os.environ.get("JEOPARDY_MAX_OFFSET", "100")),
            max_attempts=int(os.environ.get("JEOPARDY_MAX_ATTEMPTS", "10")),
            max_games=int(os.environ.get("JEOPARDY_MAX_GAMES", "100")),
            source=source,
            background=_env_bool("JEOPARDY_BACKGROUND", "true"),
            log_level=os.environ.get("JEOPARDY_LOG_LEVEL", "INFO").upper(),
            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", "8000")),
        )
