from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BRAWL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Brawl Stars API
    api_token: str | None = Field(default=None, repr=False)
    api_base_url: str = "https://api.brawlstars.com/v1"

    timeout_s: float = Field(default=30.0, gt=0)
    connect_timeout_s: float = Field(default=10.0, gt=0)

    # Accept "2PP" as shorthand for "#2PP".
    auto_hashtag: bool = True

    # -----------------------------
    # Required-key helpers
    # -----------------------------

    def require_api_token(self) -> str:
        if not self.api_token:
            raise RuntimeError(
                "BRAWL_API_TOKEN is not set. Set it in the environment or .env file."
            )
        return self.api_token


settings = Settings()
