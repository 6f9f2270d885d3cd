"""
Configuration settings for subgrid.

Uses Pydantic Settings to load environment variables for logging, the
rows-per-page menu, and the default sort applied to a fresh table view.
"""
from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Table view defaults
    default_rows_per_page: int = Field(5, alias="SUBGRID_ROWS_PER_PAGE")
    rows_per_page_options: List[int] = Field([5, 10, 15], alias="SUBGRID_ROWS_PER_PAGE_OPTIONS")
    default_sort_column: str = Field("startDate", alias="SUBGRID_SORT_COLUMN")
    default_sort_direction: str = Field("desc", alias="SUBGRID_SORT_DIRECTION")
    page_link_count: int = Field(5, alias="SUBGRID_PAGE_LINKS")

    # Benchmark defaults
    bench_rows: int = Field(100_000, alias="SUBGRID_BENCH_ROWS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("rows_per_page_options")
    @classmethod
    def _options_positive(cls, value: List[int]) -> List[int]:
        if not value or any(v <= 0 for v in value):
            raise ValueError("rows_per_page_options must be a non-empty list of positive integers")
        return sorted(set(value))

    @field_validator("default_sort_direction")
    @classmethod
    def _direction_known(cls, value: str) -> str:
        value = value.lower()
        if value not in ("asc", "desc"):
            raise ValueError("default_sort_direction must be 'asc' or 'desc'")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
