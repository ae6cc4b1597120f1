"""
Schema definitions package.
Enumerated wire values and the stored user credential record.
"""
from .spotify_enums import TopItemType, TimeRange
from .user_schema import SpotifyUserRecord, get_spotify_user_columns

__all__ = [
    'TopItemType',
    'TimeRange',
    'SpotifyUserRecord',
    'get_spotify_user_columns'
]
