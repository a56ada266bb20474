"""Runtime settings, read from ``CHECKOUT_*`` environment variables or ``.env``.

get_settings() is cached; tests call ``get_settings.cache_clear()`` after
changing the environment.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from checkout.application.notification_messages import Locale

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="CHECKOUT_", env_file=".env", case_sensitive=False
    )

    # Persistence
    data_dir: Path = _PROJECT_ROOT / "data"

    # Notifications
    locale: Locale = Locale.EN

    # Simulated gateway: tokens listed here are declined
    declined_tokens: list[str] = ["0000-0000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "console"


@lru_cache
def get_settings() -> Settings:
    return Settings()
