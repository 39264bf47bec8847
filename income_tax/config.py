from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

from income_tax.germany import normalize_year_label

ENV_BOOL_TRUE = {"1", "true", "yes", "on"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ENV_BOOL_TRUE


class Settings(BaseModel):
    default_year: str = Field(default_factory=lambda: os.getenv("INCOME_TAX_DEFAULT_YEAR", "2024"))
    log_level: str = Field(default_factory=lambda: os.getenv("INCOME_TAX_LOG_LEVEL", "INFO"))
    log_to_file: bool = Field(default_factory=lambda: _env_bool("INCOME_TAX_LOG_FILE", False))
    log_dir: str = Field(default_factory=lambda: os.getenv("INCOME_TAX_LOG_DIR", "logs"))
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))
    build_sha: str = Field(default_factory=lambda: os.getenv("BUILD_SHA", "local"))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("default_year", mode="before")
    @classmethod
    def _validate_default_year(cls, value: str | int) -> str:
        return normalize_year_label(value)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        upper = (value or "INFO").upper()
        if upper not in LOG_LEVELS:
            raise ValueError(f"INCOME_TAX_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {upper}")
        return upper

    def logging_level(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


__all__ = ["LOG_FORMAT", "Settings", "get_settings"]
