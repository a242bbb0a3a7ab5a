"""
Configuration loading utilities
"""

import logging
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .settings import Settings

logger = logging.getLogger(__name__)

# Cached settings, built on first use
_settings: Optional[Settings] = None


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build settings from the environment

    Args:
        env_file: .env file to read first; defaults to the nearest .env
            above the working directory.
            Variables already set in the environment are not overridden.
    """
    global _settings

    if _settings is None:
        if load_dotenv(env_file or find_dotenv(usecwd=True)):
            logger.debug(f"Loaded environment file: {env_file or '.env'}")
        elif env_file:
            logger.warning(f"Environment file not found or empty: {env_file}")

        try:
            _settings = Settings.from_env()
        except ValueError as e:
            logger.error(f"Invalid configuration: {e}")
            raise

    return _settings


def get_settings() -> Settings:
    """Get current settings instance"""
    if _settings is None:
        return load_settings()
    return _settings


def reload_settings(env_file: Optional[str] = None) -> Settings:
    """Drop cached settings and read the environment again"""
    global _settings
    _settings = None
    return load_settings(env_file)
