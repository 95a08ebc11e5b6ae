from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="idscan", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    default_source: str = Field(default="pdf417", alias="DEFAULT_SOURCE")
    default_confidence: float = Field(default=0.98, alias="DEFAULT_CONFIDENCE")
    prefer_aamva_header: bool = Field(default=True, alias="PREFER_AAMVA_HEADER")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
