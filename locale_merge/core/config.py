from __future__ import annotations

from typing import Annotated, Any, List
from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Load .env from the working directory (the project being built)
ENV_FILE_NAME = ".env"
load_dotenv(Path.cwd() / ENV_FILE_NAME)

DEFAULT_LOCALES = ["en", "es", "fr", "de", "nl", "pt"]


class Settings(BaseSettings):
    SRC_DIR: Path = Path("src")
    MESSAGES_DIR: Path = Path("messages")
    SUPPORTED_LOCALES: Annotated[List[str], NoDecode] = DEFAULT_LOCALES
    DEBUG: bool = False
    LOG_FILE: bool = False

    @field_validator("SUPPORTED_LOCALES", mode="before")
    @classmethod
    def parse_locales(cls, v: Any) -> List[str]:
        if v in (None, ""):
            return list(DEFAULT_LOCALES)
        if isinstance(v, str):
            v = v.split(",")
        result: List[str] = []
        for item in v:
            code = str(item).strip().lower()
            if code and code not in result:
                result.append(code)
        if not result:
            raise ValueError("SUPPORTED_LOCALES must name at least one locale")
        return result

    @field_validator("SRC_DIR", "MESSAGES_DIR", mode="after")
    @classmethod
    def absolute_dir(cls, v: Path) -> Path:
        return v if v.is_absolute() else (Path.cwd() / v)

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )


def get_settings(**overrides: Any) -> Settings:
    """Build settings from env/.env, with explicit keyword overrides applied."""
    values = {k: v for k, v in overrides.items() if v is not None}
    return Settings(**values)

