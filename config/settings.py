"""
Centralized configuration from environment variables.
Loads the API base URL and an optional access token without hardcoding.
"""
import os
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse
from dotenv import load_dotenv

from utils.logger import set_log_level


DEFAULT_API_BASE_URL = "https://api.spotify.com/v1"


@dataclass
class SpotifyConfig:
    """Spotify Web API configuration."""
    api_base_url: str = DEFAULT_API_BASE_URL
    access_token: Optional[str] = None

    def __post_init__(self):
        self.api_base_url = self.api_base_url.rstrip('/')

    @classmethod
    def from_env(cls) -> 'SpotifyConfig':
        """Load from environment variables."""
        return cls(
            api_base_url=os.getenv('SPOTIFY_API_BASE_URL', DEFAULT_API_BASE_URL),
            access_token=os.getenv('SPOTIFY_ACCESS_TOKEN') or None
        )

    def validate(self) -> None:
        """Validate required fields are present."""
        parsed = urlparse(self.api_base_url)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise ValueError(
                f"SPOTIFY_API_BASE_URL must be an http(s) URL, got '{self.api_base_url}'"
            )


@dataclass
class AppConfig:
    """Application-wide configuration."""
    spotify: SpotifyConfig
    log_level: str = "INFO"

    @classmethod
    def load(cls, env_file: Optional[str] = None) -> 'AppConfig':
        """
        Load all configuration and apply LOG_LEVEL to the client loggers.

        Args:
            env_file: Path to .env file (optional, will search parent dirs)
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()  # Searches parent directories

        config = cls(
            spotify=SpotifyConfig.from_env(),
            log_level=os.getenv('LOG_LEVEL', 'INFO')
        )

        config.spotify.validate()
        set_log_level(config.log_level)

        return config


# Singleton instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get or create configuration singleton."""
    global _config
    if _config is None:
        _config = AppConfig.load()
    return _config


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    global _config
    _config = None
