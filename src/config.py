from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    api_host: str = Field(default="localhost", description="API host")
    api_port: int = Field(default=8000, description="API port")
    debug: bool = Field(default=False, description="Debug mode")

    allowed_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:3001",
            "*",
        ],
        description="Allowed CORS origins",
        validation_alias=AliasChoices("CORS_ALLOWED_ORIGINS", "ALLOWED_ORIGINS"),
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or text)")

    # News Provider Credentials
    finnhub_api_key: Optional[str] = Field(default=None, description="Finnhub API token (primary news provider)")
    news_api_key: Optional[str] = Field(default=None, description="NewsAPI key (secondary news provider)")

    # Upstream Endpoints
    finnhub_base_url: str = Field(default="https://finnhub.io/api/v1", description="Finnhub API base URL")
    news_api_base_url: str = Field(default="https://newsapi.org/v2", description="NewsAPI base URL")
    translation_api_url: str = Field(
        default="https://api.mymemory.translated.net/get",
        description="MyMemory translation endpoint"
    )
    quote_api_url: str = Field(
        default="https://query1.finance.yahoo.com/v8/finance/chart",
        description="Yahoo Finance chart endpoint"
    )

    http_timeout_seconds: float = Field(default=10.0, description="Timeout for upstream HTTP calls")
    upstream_cache_seconds: int = Field(
        default=3600,
        ge=0,
        description="How long successful news provider payloads are reused (0 disables)"
    )
    quote_cache_seconds: int = Field(
        default=0,
        ge=0,
        description="How long quote chart payloads are reused (0 disables, quotes stay live)"
    )

    # Translation Settings
    translation_ttl_seconds: int = Field(
        default=86400,
        ge=0,
        description="Time-to-live for cached translations in seconds"
    )
    translation_min_match: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Minimum MyMemory match score to accept a remote translation (0 accepts any)"
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def parse_allowed_origins(cls, value):
        if value is None:
            return value
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    class Config:
        env_file = [".env", ".env.local"]  # .env.local takes precedence over .env
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
