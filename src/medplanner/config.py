"""
medplanner - Configuration and settings.

PlannerSettings holds what the CLI needs around the planner core:
where history lives, how long it is kept, which catalog to load, and the
default meal counts. The core itself takes everything as arguments.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlannerSettings(BaseSettings):
    """
    Planner application settings.

    Read from environment variables or a .env file, e.g.
    MEDPLANNER_HISTORY_PATH=~/.medplanner/history.json
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    medplanner_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    # History persistence
    medplanner_history_path: Path = Path(".medplanner/history.json")
    medplanner_history_retention_days: int = Field(default=30, ge=1)

    # Catalog (None = bundled starter catalog)
    medplanner_catalog_path: Path | None = None

    # Fixed seed for reproducible plans (None = random each run)
    medplanner_random_seed: int | None = None

    # Defaults for the plan command
    default_breakfasts: int = Field(default=2, ge=0)
    default_lunches: int = Field(default=3, ge=0)
    default_dinners: int = Field(default=5, ge=0)

    @property
    def is_development(self) -> bool:
        return self.medplanner_env == "development"

    @property
    def history_path(self) -> Path:
        return self.medplanner_history_path.expanduser()

    @property
    def catalog_path(self) -> Path | None:
        if self.medplanner_catalog_path is None:
            return None
        return self.medplanner_catalog_path.expanduser()


@lru_cache
def get_settings() -> PlannerSettings:
    """Get cached settings instance."""
    return PlannerSettings()


# Convenience singleton - lazy loaded
class _SettingsProxy:
    """Lazy proxy for settings to avoid loading .env at import time."""

    _instance: PlannerSettings | None = None

    def __getattr__(self, name: str):
        if self._instance is None:
            self._instance = get_settings()
        return getattr(self._instance, name)


settings = _SettingsProxy()
