from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict


class TapeCursorSettings(BaseSettings):
    """Logging switches, read from ``TAPECURSOR_*`` environment variables."""
    model_config = SettingsConfigDict(env_prefix="TAPECURSOR_")

    verbose: bool = False
    log_json: bool = False
