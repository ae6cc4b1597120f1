"""Tests for the stored user credential record."""

from datetime import datetime, timedelta, timezone

from schemas import SpotifyUserRecord, get_spotify_user_columns


class TestSpotifyUserRecord:
    """Tests for SpotifyUserRecord."""

    def test_columns(self) -> None:
        assert get_spotify_user_columns() == [
            "spotify_id",
            "spotify_avatar",
            "spotify_token",
            "spotify_refresh_token",
            "spotify_token_expires_at",
        ]

    def test_defaults_are_null(self) -> None:
        record = SpotifyUserRecord()
        assert all(value is None for value in record.to_dict().values())
        assert record.has_token() is False

    def test_from_dict_ignores_unknown_keys_and_parses_expiry(self) -> None:
        record = SpotifyUserRecord.from_dict({
            "id": 7,
            "email": "someone@example.com",
            "spotify_id": "wizzler",
            "spotify_token": "abc",
            "spotify_token_expires_at": "2026-01-01T12:00:00Z",
        })
        assert record.spotify_id == "wizzler"
        assert record.has_token() is True
        assert record.spotify_token_expires_at == datetime(2026, 1, 1, 12, tzinfo=timezone.utc)

    def test_to_dict_serializes_expiry(self) -> None:
        expires = datetime(2026, 1, 1, 12, tzinfo=timezone.utc)
        record = SpotifyUserRecord(spotify_id="wizzler", spotify_token_expires_at=expires)
        assert record.to_dict()["spotify_token_expires_at"] == "2026-01-01T12:00:00+00:00"

    def test_is_token_expired(self) -> None:
        now = datetime(2026, 1, 1, 12, tzinfo=timezone.utc)
        record = SpotifyUserRecord(spotify_token="abc", spotify_token_expires_at=now)
        assert record.is_token_expired(now=now) is True
        assert record.is_token_expired(now=now - timedelta(minutes=1)) is False

    def test_is_token_expired_naive_datetimes(self) -> None:
        record = SpotifyUserRecord(spotify_token_expires_at=datetime(2026, 1, 1, 12))
        assert record.is_token_expired(now=datetime(2026, 1, 1, 13)) is True

    def test_no_expiry_is_not_expired(self) -> None:
        assert SpotifyUserRecord(spotify_token="abc").is_token_expired() is False
