"""
Common configuration for all microservices
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class CommonSettings(BaseSettings):
    """Base settings that all services inherit from"""

    # Application
    service_name: str = "autoscale-service"
    service_version: str = "1.0.0"
    environment: str = "dev"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # In-memory store
    seed_sample_data: bool = True

    # OpenTelemetry
    otel_enabled: bool = False
    otel_endpoint: str = "http://localhost:4317"
    otel_service_name: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
