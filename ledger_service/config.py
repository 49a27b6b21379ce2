"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="LEDGER_", extra="ignore"
    )

    # Service
    service_name: str = "ledger-service"
    log_level: str = "INFO"

    # API
    api_title: str = "Banking Transactions API"
    api_version: str = "1.0.0"

    # Ledger
    default_currency: str = "USD"  # Reported for accounts with no history


settings = Settings()
