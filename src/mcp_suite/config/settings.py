from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process settings loaded from .env file and environment variables.
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    # Credential read by the Dedalus client
    dedalus_api_key: Optional[str] = Field(default=None, alias="DEDALUS_API_KEY")

    # Suite file and logging
    config_path: str = Field(default="servers.json", alias="MCP_SUITE_CONFIG")
    log_level: str = Field(default="WARNING", alias="MCP_SUITE_LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # The SDK reads DEDALUS_API_KEY from os.environ, so export .env values too
    load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings()
