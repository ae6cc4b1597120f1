"""
Utilities package for the Spotify Web API client.
Provides logging, parameter normalization, and client errors.
"""
from .logger import setup_logger, set_log_level, ColoredFormatter
from .api_utils import (
    IdList,
    SpotifyClientError,
    AuthenticationRequired,
    ConflictingParameters,
    EnumParseFailure,
    to_comma_separated,
    to_sequence,
    optional_comma_separated,
    format_for_tracks_playback,
    drop_none
)

__all__ = [
    'setup_logger',
    'set_log_level',
    'ColoredFormatter',
    'IdList',
    'SpotifyClientError',
    'AuthenticationRequired',
    'ConflictingParameters',
    'EnumParseFailure',
    'to_comma_separated',
    'to_sequence',
    'optional_comma_separated',
    'format_for_tracks_playback',
    'drop_none'
]
