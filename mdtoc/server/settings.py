from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from mdtoc.models.configs import TocSettings
from mdtoc.orchestration.config_loader import load_settings

load_dotenv(override=False)


DEFAULT_CORS_ORIGINS = ["http://localhost:5173"]


class Settings(BaseModel):
    """Runtime configuration for the FastAPI server."""

    environment: str = Field(default_factory=lambda: os.getenv("ENVIRONMENT", "dev"))
    cors_origins: List[str] = Field(default_factory=lambda: os.getenv("CORS_ORIGINS", ""))
    config_path: Path | None = Field(default_factory=lambda: os.getenv("MDTOC_CONFIG") or None)
    max_content_chars: int = Field(default_factory=lambda: int(os.getenv("MAX_CONTENT_CHARS", "1000000")))

    model_config = {
        "frozen": True,
        "validate_default": True,
    }

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> List[str]:
        if value is None:
            return list(DEFAULT_CORS_ORIGINS)
        if isinstance(value, str):
            if not value.strip():
                return list(DEFAULT_CORS_ORIGINS)
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return list(value)

    @field_validator("max_content_chars")
    @classmethod
    def _positive_limit(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("MAX_CONTENT_CHARS must be positive")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance for FastAPI dependency injection."""

    return Settings()


@lru_cache(maxsize=1)
def get_toc_settings() -> TocSettings:
    settings = get_settings()
    if settings.config_path is None:
        return TocSettings()
    return load_settings(settings.config_path)


__all__ = ["Settings", "get_settings", "get_toc_settings"]
