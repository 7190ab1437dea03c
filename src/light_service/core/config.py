"""Configuration settings for Light Service"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    # Pydantic V2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Service Info
    service_name: str = "light-service-graphql"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 4000

    # Device Simulation
    failure_rate: float = 0.25  # ~25% of mutations report the light unavailable
    latency_light: float = 0.0  # seconds per device round-trip

    # CORS
    cors_origins: list[str] = ["*"]

    # Metrics
    metrics_enabled: bool = True


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get settings instance (singleton)"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
