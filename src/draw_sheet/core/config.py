from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DESKTOP_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/92.0.4515.159 Safari/537.36"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Catalog
    tournaments_file: str = Field(
        default="one-off-tournaments.json",
        validation_alias="TOURNAMENTS_FILE",
    )

    # Upstream feeds
    http_timeout_s: float = 30.0
    user_agent: str = DESKTOP_USER_AGENT
    us_open_base_url: str = "https://www.usopen.org/en_US"

    log_level: str = "INFO"


settings = Settings()
