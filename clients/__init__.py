"""
API clients package.
Handles communication with the Spotify Web API.
"""
from .spotify_api import SpotifyAPIClient

__all__ = [
    'SpotifyAPIClient'
]
