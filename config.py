"""
config.py

Centralized configuration management using pydantic-settings.
All modules must import settings from this file.
Direct os.getenv() calls are prohibited elsewhere.
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings loaded from .env file."""

    # Mobility profile selection
    mobility_profile_base_profile: str = "default"

    # Mobility profile overrides (None means the preset value is kept)
    mobility_profile_slope: Optional[float] = None
    mobility_profile_threshold: Optional[float] = None
    mobility_profile_holdoff_millis: Optional[float] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()
