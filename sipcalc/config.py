from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    app_env: str = "dev"
    log_level: str = "info"
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"

    # starting values shown by the calculator widget
    default_monthly_contribution: float = Field(default=5000.0, ge=0)
    default_years: int = Field(default=10, ge=0)
    default_annual_rate_percent: float = Field(default=12.0, ge=-1200)
    # longest horizon the API will build a series for
    max_years: int = Field(default=100, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="SIPCALC_",
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()
