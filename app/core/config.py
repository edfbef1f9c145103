import os
from functools import lru_cache


class AppConfig:
    """Settings read from the environment (and ``.env`` for the Streamlit entry point)."""

    def __init__(self) -> None:
        # API
        self.app_name: str = os.getenv("APP_NAME", "Afforestation Impact Calculator API")
        self.version: str = os.getenv("APP_VERSION", "0.1.0")
        self.environment: str = os.getenv("APP_ENV", "development")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Streamlit front end
        self.calculator_backend: str = os.getenv("CALCULATOR_BACKEND", "local").strip().lower()
        self.calculator_api_url: str = os.getenv("CALCULATOR_API_URL", "http://localhost:8000")
        self.calculator_api_timeout_s: float = float(os.getenv("CALCULATOR_API_TIMEOUT", "10"))


@lru_cache
def get_app_config() -> AppConfig:
    return AppConfig()
