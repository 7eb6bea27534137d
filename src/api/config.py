"""
API configuration settings.
"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """API settings."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Decoding
    STRICT_DECODE: bool = False  # reject malformed champion payloads with 400

    class Config:
        env_file = ".env"


settings = Settings()
