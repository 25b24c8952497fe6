from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DARKSKY_", env_file=".env", extra="ignore")

    log_level: str = "INFO"

    # Provider
    api_key: Optional[str] = None
    base_url: str = "https://api.darksky.net/forecast"
    timeout_seconds: float = 5.0

    # Applied to every request made through the DarkSky facade
    default_units: Optional[str] = None
    default_language: Optional[str] = None


settings = Settings()
