"""
User record schema for stored Spotify credentials.
Field specification of the columns kept on a user record by the credential store.
"""
from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass
class SpotifyUserRecord:
    """
    Spotify fields persisted against an application user.

    spotify_id is unique across users; every field is nullable.
    """
    spotify_id: Optional[str] = None
    spotify_avatar: Optional[str] = None
    spotify_token: Optional[str] = None
    spotify_refresh_token: Optional[str] = None
    spotify_token_expires_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SpotifyUserRecord':
        """
        Build a record from a row or mapping.

        Unknown keys are ignored. An ISO-8601 string expiry is parsed.
        """
        values = {name: data.get(name) for name in get_spotify_user_columns()}
        expires_at = values['spotify_token_expires_at']
        if isinstance(expires_at, str):
            values['spotify_token_expires_at'] = datetime.fromisoformat(
                expires_at.replace('Z', '+00:00')
            )
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a column mapping; the expiry becomes ISO-8601."""
        data = {name: getattr(self, name) for name in get_spotify_user_columns()}
        if self.spotify_token_expires_at is not None:
            data['spotify_token_expires_at'] = self.spotify_token_expires_at.isoformat()
        return data

    def has_token(self) -> bool:
        """Check if an access token is stored."""
        return bool(self.spotify_token)

    def is_token_expired(self, now: Optional[datetime] = None) -> bool:
        """
        Check if the stored access token has expired.

        A record without an expiry is treated as not expired; naive
        datetimes are compared as UTC.
        """
        if self.spotify_token_expires_at is None:
            return False

        expires_at = self.spotify_token_expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)

        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        return now >= expires_at


def get_spotify_user_columns() -> List[str]:
    """Column names of the Spotify fields on a user record, in table order."""
    return [field.name for field in fields(SpotifyUserRecord)]
