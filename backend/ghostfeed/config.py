"""Configuration settings for the application."""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    app_name: str = "Ghostfeed Transactions API"
    debug: bool = False
    log_level: str = "INFO"

    # Where the four record collections come from: "mock", "file:<path>" or a base URL
    record_backend: str = "mock"
    request_timeout: float = 10.0
    api_token: Optional[str] = None

    default_currency_symbol: str = "$"


settings = Settings()
