from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Hacker News Search"
    api_prefix: str = "/v1"
    log_level: str = "INFO"

    search_api_base_url: str = "http://hn.algolia.com/api/v1"
    default_query: str = "redux"
    hits_per_page: int = Field(default=100, ge=1, le=1000)

    request_timeout_seconds: int = 15
    transport_retries: int = 0

    redis_url: str | None = None
    page_cache_ttl_seconds: int = 180

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("redis_url", mode="before")
    @classmethod
    def _blank_redis_url(cls, value: str | None) -> str | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
