"""
API Utilities Module

Single Responsibility: Shape request parameters and define client errors
- Normalize string-or-list identifier inputs
- Build fully qualified playback URIs
- Drop unset parameters before they reach the wire

This module contains helper functions shared by every catalog operation.
"""

from typing import Any, Dict, List, Optional, Sequence, Union


IdList = Union[str, Sequence[str]]

TRACK_URI_PREFIX = "spotify:track:"


class SpotifyClientError(Exception):
    """Base class for errors raised locally by the client."""
    pass


class AuthenticationRequired(SpotifyClientError):
    """Raised when a request is dispatched without an access token."""
    pass


class ConflictingParameters(SpotifyClientError, ValueError):
    """Raised when mutually exclusive arguments are supplied together."""

    def __init__(self, *names: str):
        self.names = names
        super().__init__(f"Only one of {' or '.join(names)} can be provided")


class EnumParseFailure(SpotifyClientError, ValueError):
    """Raised when a raw string does not match any known enum wire value."""

    def __init__(self, enum_name: str, value: Any):
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"'{value}' is not a valid {enum_name}")


def to_comma_separated(value: IdList) -> str:
    """
    Normalize an identifier input to its comma-separated wire form.

    Args:
        value: Already-joined string, or a sequence of identifiers

    Returns:
        The string unchanged, or the sequence joined with ','
    """
    if isinstance(value, str):
        return value
    return ','.join(value)


def to_sequence(value: IdList) -> List[str]:
    """
    Normalize an identifier input to a list of identifiers.

    Args:
        value: Comma-separated string, or a sequence of identifiers

    Returns:
        The string split on ',' (empty string gives an empty list), or a
        new list holding the sequence's items
    """
    if isinstance(value, str):
        if not value:
            return []
        return value.split(',')
    return list(value)


def optional_comma_separated(value: Optional[IdList]) -> Optional[str]:
    """Like to_comma_separated, but None or empty input yields None."""
    if not value:
        return None
    return to_comma_separated(value)


def format_for_tracks_playback(track_ids: IdList) -> List[str]:
    """
    Turn bare track IDs into URIs accepted by the playback endpoints.

    Args:
        track_ids: Comma-separated string or sequence of track IDs

    Returns:
        List of 'spotify:track:<id>' URIs, in input order
    """
    return [f"{TRACK_URI_PREFIX}{track_id}" for track_id in to_sequence(track_ids)]


def drop_none(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Return a copy of params without None-valued entries, keeping order."""
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None}
