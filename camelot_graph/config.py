"""
Configuration management for camelot-graph
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Logging
    log_level: str = "INFO"
    log_file: str = ""  # Empty: log to stderr only

    # Path search
    path_count: int = 1

    class Config:
        env_prefix = "CAMELOT_"
        env_file = ".env"
        extra = "ignore"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
