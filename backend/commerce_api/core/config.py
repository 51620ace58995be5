"""
Application configuration
"""
import json
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    API_TITLE: str = "Commerce API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "CRUD API for products and customers"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    # Exposes exception messages in 500 responses
    API_DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./commerce.db"
    DATABASE_ECHO: bool = False
    SEED_DATA: bool = True

    LOG_LEVEL: str = "INFO"

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "*"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["*"]

        # Try JSON parse first (for array format)
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]


@lru_cache
def get_settings() -> Settings:
    """Settings loaded once from the environment / .env file"""
    return Settings()
