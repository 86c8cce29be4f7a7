"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-pricing-gateway"
    log_level: str = "INFO"

    # Display
    currency_symbol: str = "$"

    # Representative example shown on the rate sheet
    representative_principal_cents: int = 100_000  # $1,000
    representative_term_weeks: int = 12


settings = Settings()
