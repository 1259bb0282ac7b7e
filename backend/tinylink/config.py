from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings

APP_VERSION = "1.0.0"


class Settings(BaseSettings):
    """Application settings"""

    # Database
    DATABASE_URL: str = "sqlite:///./tinylink.db"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Short codes
    CODE_LENGTH: int = Field(6, ge=6, le=8)
    CODE_MAX_ATTEMPTS: int = Field(5, ge=1)

    # Domain (display only, falls back to localhost)
    BASE_URL: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"

    @property
    def public_base_url(self) -> str:
        base = self.BASE_URL or f"http://localhost:{self.PORT}"
        return base.rstrip("/")


settings = Settings()
