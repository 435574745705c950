from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import AnyHttpUrl, AnyUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from a .env file if present (local dev only)
load_dotenv()


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    # General
    app_env: Literal["development", "test", "production"] = "development"
    log_level: str = Field("INFO", description="Root logger level, e.g. DEBUG or INFO.")
    database_url: AnyUrl

    # S3-compatible object storage
    aws_endpoint_url: AnyHttpUrl
    aws_s3_bucket_name: str = Field(..., min_length=1)
    aws_default_region: str = Field(..., min_length=1)
    aws_access_key_id: str = Field(..., min_length=1)
    aws_secret_access_key: str = Field(..., min_length=1)

    # Image library
    images_prefix: str = Field("beers/", min_length=1, description="Key prefix reserved for this app's images.")
    signed_url_ttl_seconds: int = Field(3600, ge=1)
    upload_min_bytes: int = Field(1_000, ge=0)
    upload_max_bytes: int = Field(10_000_000, ge=1)

    # Shared secret for mutating endpoints
    upload_password: str = Field(..., min_length=1)

    # Completion services
    openrouter_api_key: str = Field(..., min_length=1)
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    pinference_api_key: str = Field(..., min_length=1)
    pinference_base_url: str = "https://api.pinference.ai/api/v1"
    pinference_team_id: Optional[str] = Field(default=None, description="Sent as X-Prime-Team-ID when set.")
    description_max_tokens: int = Field(8192, ge=1)
    guess_max_tokens: int = Field(10000, ge=1)


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
