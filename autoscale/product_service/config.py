"""Product Service Configuration"""
from autoscale.common_config import CommonSettings


class Settings(CommonSettings):
    """Product Service specific settings"""

    service_name: str = "product-service"
    otel_service_name: str = "product-service"
    port: int = 3000

    # Later contract revision: every product carries an image
    require_image_url: bool = True


settings = Settings()
