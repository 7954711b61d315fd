"""
Settings for the chart backend.

Read from the environment or a .env file; display defaults match the
symbol configuration the native view expects.
"""

from functools import lru_cache
from typing import Union
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Server, display and mock-series settings."""

    # Application
    app_name: str = "KLineChart Backend"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS (native demo shell / web preview)
    allowed_origins: list[str] = ["http://localhost:8081"]

    # Display precision (symbol configuration)
    price_precision: int = 2
    volume_precision: int = 0
    time_pattern: str = "MM-DD HH:mm"

    # Mock series
    mock_bar_count: int = 200
    mock_start_price: float = 50000.0

    # Default increase / decrease palette (light theme)
    increase_color: Union[int, str] = "rgb(0, 199, 82)"
    decrease_color: Union[int, str] = "rgb(255, 69, 69)"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()


settings = get_settings()
