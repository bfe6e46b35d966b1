"""Stock Service Configuration"""
from autoscale.common_config import CommonSettings


class Settings(CommonSettings):
    """Stock Service specific settings"""

    service_name: str = "stock-service"
    otel_service_name: str = "stock-service"
    port: int = 3001


settings = Settings()
