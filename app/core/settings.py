from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="crockford-base32", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # Normalization mode used when a request does not name one
    default_mode: Optional[Literal["warn", "strict"]] = Field(default=None, alias="BASE32_DEFAULT_MODE")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
