"""
Configuration package for the Spotify Web API client.
Centralized configuration management using environment variables.
"""
from .settings import (
    DEFAULT_API_BASE_URL,
    SpotifyConfig,
    AppConfig,
    get_config,
    reset_config
)

__all__ = [
    'DEFAULT_API_BASE_URL',
    'SpotifyConfig',
    'AppConfig',
    'get_config',
    'reset_config'
]
