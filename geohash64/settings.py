from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEOHASH64_",
        case_sensitive=False,
    )

    # Characters used by Geohash() when no precision is given.
    default_precision: int = Field(default=5, ge=1, le=12)


@lru_cache
def get_settings() -> Settings:
    return Settings()
