"""Configuration management using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """NBU QR settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NBUQR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Link
    base_url: str = "https://bank.gov.ua/qr/"

    # Payload header
    service_label: str = "BCD"
    function_code: str = "UCT"  # Ukrainian Credit Transfer
    default_version: int = 1
    default_encoding: str = "1"

    # Account identifiers must belong to this jurisdiction
    account_country_code: str = "UA"

    # Rendering
    default_format: str = "svg"

    # Logging
    log_level: str = "INFO"


settings = Settings()
