from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime config (client).

    - Loaded from environment variables
    - Also reads `.env` if present (via pydantic-settings + python-dotenv)
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="PLACE_", extra="ignore")

    # Place API
    api_base_url: str = "http://127.0.0.1:8000"
    request_timeout_s: float = 10.0

    # Wait between successful draws (ms). The server is authoritative; this is
    # what the client shows locally after a draw succeeds.
    cooldown_ms: int = 300_000

    # Local canvas mirror
    canvas_width: int = 1000
    canvas_height: int = 1000

    # Animation driver
    frame_rate_hz: float = 60.0

    # Debugging
    log_level: str = "INFO"
    debug_log_msgs: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
