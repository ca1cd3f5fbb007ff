from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nfl_lookup.core.errors import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # SportsData.io
    nfl_api_key: str | None = Field(default=None, repr=False, validation_alias="NFL_API_KEY")
    nfl_api_base_url: str = Field(
        default="https://api.sportsdata.io/v3/nfl",
        validation_alias="NFL_API_BASE_URL",
    )
    http_timeout_s: float = 30.0
    http_connect_timeout_s: float = 10.0

    # Cache
    cache_ttl_s: float = 300.0
    cache_sweep_interval_s: float = 600.0
    season_info_ttl_s: float = 3600.0

    # Accepted range for explicit season lookups. max_season=None means
    # "whatever season the clock currently points at".
    min_season: int = 2020
    max_season: int | None = None

    log_level: str = "INFO"

    # -----------------------------
    # Required-key helpers
    # -----------------------------

    def require_nfl_api_key(self) -> str:
        if not self.nfl_api_key:
            raise ConfigurationError(
                "NFL_API_KEY is not set. Set it in the environment or .env file."
            )
        return self.nfl_api_key


settings = Settings()
