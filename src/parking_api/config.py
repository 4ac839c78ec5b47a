"""Application configuration and settings management."""

from pathlib import Path
from typing import Any

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="PARKING_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Parking Occupancy API"
    api_prefix: str = "/api/v1"
    data_root: Path = Field(default=Path("data"), description="Root directory for persisted state.")
    parking_data_file: Path = Field(
        default=Path("data/statistics/parking_data.json"),
        description="Snapshot file backing the historical occupancy repository.",
    )
    stats_interval_minutes: int = Field(
        default=10,
        ge=1,
        description="Width of a time-of-day bucket in the weekly occupancy grid.",
    )
    pwr_api_url: str = Field(
        default="https://iparking.pwr.edu.pl/modules/iparking/scripts/ipk_operations.php",
        description="Endpoint returning the live parking status list.",
    )
    pwr_api_timeout_seconds: float = Field(default=10.0, gt=0.0)
    upstream_max_retries: int = Field(default=2, ge=0)
    upstream_backoff_seconds: float = Field(default=0.5, ge=0.0)
    nominatim_base_url: str = Field(
        default="https://nominatim.openstreetmap.org",
        description="Base URL of the Nominatim geocoding service.",
    )
    nominatim_user_agent: str = Field(default="parking-occupancy-api")
    nominatim_timeout_seconds: float = Field(default=10.0, gt=0.0)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=("http://localhost:5173", "http://127.0.0.1:5173"),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", "parking_data_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
