from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "jqlens"
    app_env: str = "development"
    app_host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    app_reload: bool = False

    upload_dir: str = str((Path(__file__).resolve().parents[2] / "uploads"))
    static_dir: str = str((Path(__file__).resolve().parents[2] / "public"))
    templates_dir: str = str((Path(__file__).resolve().parents[1] / "templates"))
    upload_field: str = "jsonFile"

    jq_binary: str = "jq"
    jq_timeout_seconds: float | None = None

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
