"""
Configuration for the flow platform client and CLI, using Pydantic Settings.

Values come from FORMFLOW_* environment variables or a .env file in the
working directory.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlatformSettings(BaseSettings):
    """Flow platform access and logging settings"""

    model_config = SettingsConfigDict(
        env_prefix="FORMFLOW_",
        env_file=".env",
        extra="ignore",
    )

    access_token: Optional[str] = Field(default=None, description="Bearer token for the platform API")
    business_account_id: Optional[str] = Field(default=None, description="Account that owns the flows")
    api_version: str = Field(default="v21.0", description="Graph API version segment")
    base_url: str = Field(default="https://graph.facebook.com", description="Platform API root")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON lines")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def api_root(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.api_version}/"


@lru_cache()
def get_settings() -> PlatformSettings:
    """Get cached settings instance"""
    return PlatformSettings()
