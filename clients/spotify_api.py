"""
Spotify Web API client.
Builds authenticated requests for every catalog, library and player endpoint.
"""
import requests
from typing import Any, Dict, Optional, Union

from config import SpotifyConfig, get_config
from schemas import SpotifyUserRecord, TimeRange, TopItemType
from utils import (
    setup_logger,
    IdList,
    AuthenticationRequired,
    ConflictingParameters,
    to_comma_separated,
    optional_comma_separated,
    format_for_tracks_playback,
    drop_none
)


logger = setup_logger(__name__)

# Verbs whose parameters travel in a JSON body instead of the query string
BODY_METHODS = frozenset({'PUT', 'POST', 'PATCH', 'DELETE'})


class SpotifyAPIClient:
    """
    Spotify Web API client.

    Responsibilities:
    - Attach the bearer token to every request
    - Assemble endpoint paths and wire parameters
    - Normalize string-or-list identifier inputs
    - Reject conflicting arguments before any network call

    Every public method issues exactly one request and returns the raw
    requests.Response. Status codes are left to the caller.
    """

    def __init__(
        self,
        config: Optional[SpotifyConfig] = None,
        access_token: Optional[str] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize API client.

        Args:
            config: Spotify configuration (defaults to the environment config)
            access_token: OAuth access token; overrides config.access_token
            session: HTTP session used for all requests
        """
        self.config = config or get_config().spotify
        self._base_url = self.config.api_base_url
        self._access_token = access_token if access_token is not None else self.config.access_token
        self.session = session or requests.Session()

    @classmethod
    def for_user(
        cls,
        record: SpotifyUserRecord,
        config: Optional[SpotifyConfig] = None,
        session: Optional[requests.Session] = None
    ) -> 'SpotifyAPIClient':
        """
        Create a client authenticated with the token stored on a user record.

        A record without a token yields a client that raises
        AuthenticationRequired; the configured token is never used.
        """
        client = cls(config=config, session=session)
        client._access_token = record.spotify_token
        return client

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    def set_access_token(self, access_token: str) -> 'SpotifyAPIClient':
        """Replace the access token used by subsequent requests."""
        self._access_token = access_token
        return self

    def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None
    ) -> requests.Response:
        """
        Make an authenticated API request.

        Args:
            method: HTTP method
            endpoint: API endpoint (e.g., '/me/player/recently-played')
            params: Wire parameters; None values are dropped

        Returns:
            The unmodified response

        Raises:
            AuthenticationRequired: If no access token is set
        """
        if not self._access_token:
            logger.error(f"Refusing {method.upper()} {endpoint}: no access token set")
            raise AuthenticationRequired("Access token is required")

        method = method.upper()
        url = f"{self._base_url}{endpoint}"
        headers = {
            'Authorization': f'Bearer {self._access_token}',
            'Content-Type': 'application/json'
        }

        payload = drop_none(params) or None
        query, body = (None, payload) if method in BODY_METHODS else (payload, None)

        logger.debug(f"{method} {endpoint}")

        return self.session.request(
            method=method,
            url=url,
            headers=headers,
            params=query,
            json=body
        )

    # Albums

    def get_album(self, album_id: str) -> requests.Response:
        """Get catalog information for a single album."""
        return self._make_request('get', f'/albums/{album_id}')

    def get_albums(self, album_ids: IdList, market: Optional[str] = None) -> requests.Response:
        """
        Get catalog information for several albums.

        Args:
            album_ids: Album IDs as a list or comma-separated string
            market: ISO 3166-1 alpha-2 country code
        """
        return self._make_request('get', '/albums', {
            'ids': to_comma_separated(album_ids),
            'market': market
        })

    def get_album_tracks(
        self,
        album_id: str,
        market: Optional[str] = None,
        limit: int = 20,
        offset: int = 0
    ) -> requests.Response:
        """Get the tracks of an album."""
        return self._make_request('get', f'/albums/{album_id}/tracks', {
            'market': market,
            'limit': limit,
            'offset': offset
        })

    def get_user_saved_albums(
        self,
        limit: int = 20,
        offset: int = 0,
        market: Optional[str] = None
    ) -> requests.Response:
        """Get the albums saved in the current user's library."""
        return self._make_request('get', '/me/albums', {
            'limit': limit,
            'offset': offset,
            'market': market
        })

    def check_users_saved_albums(self, album_ids: IdList) -> requests.Response:
        """Check if albums are saved in the current user's library."""
        return self._make_request('get', '/me/albums/contains', {
            'ids': to_comma_separated(album_ids)
        })

    def get_new_releases(self, limit: int = 20, offset: int = 0) -> requests.Response:
        return self._make_request('get', '/browse/new-releases', {
            'limit': limit,
            'offset': offset
        })

    # Artists

    def get_artist(self, artist_id: str) -> requests.Response:
        """Get catalog information for a single artist."""
        return self._make_request('get', f'/artists/{artist_id}')

    def get_several_artists(self, artist_ids: IdList) -> requests.Response:
        return self._make_request('get', '/artists', {
            'ids': to_comma_separated(artist_ids)
        })

    def get_artists_albums(
        self,
        artist_id: str,
        include_groups: Optional[IdList] = None,
        market: Optional[str] = None,
        limit: int = 20,
        offset: int = 0
    ) -> requests.Response:
        """
        Get an artist's albums.

        Args:
            artist_id: Spotify artist ID
            include_groups: Any of album, single, appears_on, compilation;
                omitted when empty
            market: ISO 3166-1 alpha-2 country code
            limit: Page size
            offset: Index of the first item
        """
        return self._make_request('get', f'/artists/{artist_id}/albums', {
            'include_groups': optional_comma_separated(include_groups),
            'market': market,
            'limit': limit,
            'offset': offset
        })

    def get_artists_top_tracks(self, artist_id: str, market: Optional[str] = None) -> requests.Response:
        return self._make_request('get', f'/artists/{artist_id}/top-tracks', {
            'market': market
        })

    # Audiobooks

    def get_audiobook(self, audiobook_id: str) -> requests.Response:
        return self._make_request('get', f'/audiobooks/{audiobook_id}')

    def get_several_audiobooks(
        self,
        audiobook_ids: IdList,
        market: Optional[str] = None
    ) -> requests.Response:
        return self._make_request('get', '/audiobooks', {
            'ids': to_comma_separated(audiobook_ids),
            'market': market
        })

    def get_audiobook_chapters(
        self,
        audiobook_id: str,
        market: Optional[str] = None,
        limit: int = 20,
        offset: int = 0
    ) -> requests.Response:
        return self._make_request('get', f'/audiobooks/{audiobook_id}/chapters', {
            'market': market,
            'limit': limit,
            'offset': offset
        })

    def get_users_saved_audiobooks(self, limit: int = 20, offset: int = 0) -> requests.Response:
        return self._make_request('get', '/me/audiobooks', {
            'limit': limit,
            'offset': offset
        })

    def check_users_saved_audiobooks(self, audiobook_ids: IdList) -> requests.Response:
        return self._make_request('get', '/me/audiobooks/contains', {
            'ids': to_comma_separated(audiobook_ids)
        })

    # Categories

    def get_several_browse_categories(
        self,
        locale: Optional[str] = None,
        limit: int = 20,
        offset: int = 0
    ) -> requests.Response:
        """
        Get the categories used to tag items in the Spotify client.

        Args:
            locale: Language and country code, e.g. 'es_MX'
            limit: Page size
            offset: Index of the first item
        """
        return self._make_request('get', '/browse/categories', {
            'locale': locale,
            'limit': limit,
            'offset': offset
        })

    def get_single_browse_category(
        self,
        category_id: str,
        locale: Optional[str] = None
    ) -> requests.Response:
        return self._make_request('get', f'/browse/categories/{category_id}', {
            'locale': locale
        })

    # Chapters

    def get_chapter(self, chapter_id: str, market: Optional[str] = None) -> requests.Response:
        return self._make_request('get', f'/chapters/{chapter_id}', {
            'market': market
        })

    def get_several_chapters(self, chapter_ids: IdList, market: Optional[str] = None) -> requests.Response:
        return self._make_request('get', '/chapters', {
            'ids': to_comma_separated(chapter_ids),
            'market': market
        })

    # Episodes

    def get_episode(self, episode_id: str, market: Optional[str] = None) -> requests.Response:
        return self._make_request('get', f'/episodes/{episode_id}', {
            'market': market
        })

    def get_several_episodes(self, episode_ids: IdList, market: Optional[str] = None) -> requests.Response:
        return self._make_request('get', '/episodes', {
            'ids': to_comma_separated(episode_ids),
            'market': market
        })

    def get_users_saved_episodes(
        self,
        market: Optional[str] = None,
        limit: int = 20,
        offset: int = 0
    ) -> requests.Response:
        return self._make_request('get', '/me/episodes', {
            'market': market,
            'limit': limit,
            'offset': offset
        })

    def check_users_saved_episodes(self, episode_ids: IdList) -> requests.Response:
        return self._make_request('get', '/me/episodes/contains', {
            'ids': to_comma_separated(episode_ids)
        })

    # Markets

    def get_available_markets(self) -> requests.Response:
        """Get the list of markets where Spotify is available."""
        return self._make_request('get', '/markets')

    # Player

    def get_playback_state(
        self,
        market: Optional[str] = None,
        additional_types: Optional[IdList] = None
    ) -> requests.Response:
        """
        Get playback state, including track or episode, progress and device.

        Args:
            market: ISO 3166-1 alpha-2 country code
            additional_types: Item types besides track, e.g. 'episode'
        """
        return self._make_request('get', '/me/player', {
            'market': market,
            'additional_types': optional_comma_separated(additional_types)
        })

    def get_available_devices(self) -> requests.Response:
        return self._make_request('get', '/me/player/devices')

    def get_currently_playing_track(
        self,
        market: Optional[str] = None,
        additional_types: Optional[IdList] = None
    ) -> requests.Response:
        return self._make_request('get', '/me/player/currently-playing', {
            'market': market,
            'additional_types': optional_comma_separated(additional_types)
        })

    def get_recently_played_tracks(
        self,
        limit: int = 20,
        after: Optional[int] = None,
        before: Optional[int] = None
    ) -> requests.Response:
        """
        Get tracks from the current user's recently played tracks.

        Args:
            limit: Number of items to return
            after: Unix timestamp in milliseconds; items played after it
            before: Unix timestamp in milliseconds; items played before it

        Raises:
            ConflictingParameters: If both after and before are given
        """
        if after is not None and before is not None:
            raise ConflictingParameters('after', 'before')

        return self._make_request('get', '/me/player/recently-played', {
            'limit': limit,
            'after': after,
            'before': before
        })

    def get_users_queue(self) -> requests.Response:
        return self._make_request('get', '/me/player/queue')

    def resume_playback(self, device_id: str, track_ids: Optional[IdList] = None) -> requests.Response:
        """
        Start or resume playback on a device.

        Args:
            device_id: Target device
            track_ids: Bare track IDs to play; sent as spotify:track URIs
        """
        return self._make_request('put', '/me/player/play', {
            'device_id': device_id,
            'uris': format_for_tracks_playback(track_ids) if track_ids else None
        })

    def pause_playback(self, device_id: str) -> requests.Response:
        return self._make_request('put', '/me/player/pause', {
            'device_id': device_id
        })

    # Playlists

    def get_playlist(
        self,
        playlist_id: str,
        market: Optional[str] = None,
        fields: Optional[IdList] = None,
        additional_types: Optional[IdList] = None
    ) -> requests.Response:
        """
        Get a playlist owned by a Spotify user.

        Args:
            playlist_id: Spotify playlist ID
            market: ISO 3166-1 alpha-2 country code
            fields: Field filter, e.g. 'description,uri'
            additional_types: Item types besides track
        """
        return self._make_request('get', f'/playlists/{playlist_id}', {
            'market': market,
            'fields': optional_comma_separated(fields),
            'additional_types': optional_comma_separated(additional_types)
        })

    def get_playlist_items(
        self,
        playlist_id: str,
        market: Optional[str] = None,
        fields: Optional[IdList] = None,
        limit: int = 20,
        offset: int = 0,
        additional_types: Optional[IdList] = None
    ) -> requests.Response:
        return self._make_request('get', f'/playlists/{playlist_id}/tracks', {
            'market': market,
            'fields': optional_comma_separated(fields),
            'limit': limit,
            'offset': offset,
            'additional_types': optional_comma_separated(additional_types)
        })

    def get_current_users_playlists(self, limit: int = 20, offset: int = 0) -> requests.Response:
        return self._make_request('get', '/me/playlists', {
            'limit': limit,
            'offset': offset
        })

    def get_users_playlists(self, user_id: str, limit: int = 20, offset: int = 0) -> requests.Response:
        return self._make_request('get', f'/users/{user_id}/playlists', {
            'limit': limit,
            'offset': offset
        })

    def get_playlist_cover_image(self, playlist_id: str) -> requests.Response:
        return self._make_request('get', f'/playlists/{playlist_id}/images')

    # Search

    def search_for_item(
        self,
        query: str,
        types: IdList,
        market: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
        include_external: Optional[str] = None
    ) -> requests.Response:
        """
        Search the catalog.

        Args:
            query: Search query, field filters allowed (e.g. 'artist:Miles')
            types: Item types to search across, e.g. ['album', 'track']
            market: ISO 3166-1 alpha-2 country code
            limit: Page size per item type
            offset: Index of the first result
            include_external: 'audio' to include externally hosted audio
        """
        return self._make_request('get', '/search', {
            'q': query,
            'type': to_comma_separated(types),
            'market': market,
            'limit': limit,
            'offset': offset,
            'include_external': include_external
        })

    # Shows

    def get_show(self, show_id: str, market: Optional[str] = None) -> requests.Response:
        return self._make_request('get', f'/shows/{show_id}', {
            'market': market
        })

    def get_several_shows(self, show_ids: IdList, market: Optional[str] = None) -> requests.Response:
        return self._make_request('get', '/shows', {
            'ids': to_comma_separated(show_ids),
            'market': market
        })

    def get_show_episodes(
        self,
        show_id: str,
        market: Optional[str] = None,
        limit: int = 20,
        offset: int = 0
    ) -> requests.Response:
        return self._make_request('get', f'/shows/{show_id}/episodes', {
            'market': market,
            'limit': limit,
            'offset': offset
        })

    def get_users_saved_shows(self, limit: int = 20, offset: int = 0) -> requests.Response:
        return self._make_request('get', '/me/shows', {
            'limit': limit,
            'offset': offset
        })

    def check_users_saved_shows(self, show_ids: IdList) -> requests.Response:
        return self._make_request('get', '/me/shows/contains', {
            'ids': to_comma_separated(show_ids)
        })

    # Tracks

    def get_track(self, track_id: str, market: Optional[str] = None) -> requests.Response:
        """Get catalog information for a single track."""
        return self._make_request('get', f'/tracks/{track_id}', {
            'market': market
        })

    def get_several_tracks(self, track_ids: IdList, market: Optional[str] = None) -> requests.Response:
        return self._make_request('get', '/tracks', {
            'ids': to_comma_separated(track_ids),
            'market': market
        })

    def get_users_saved_tracks(
        self,
        market: Optional[str] = None,
        limit: int = 20,
        offset: int = 0
    ) -> requests.Response:
        return self._make_request('get', '/me/tracks', {
            'market': market,
            'limit': limit,
            'offset': offset
        })

    def check_users_saved_tracks(self, track_ids: IdList) -> requests.Response:
        return self._make_request('get', '/me/tracks/contains', {
            'ids': to_comma_separated(track_ids)
        })

    # Users

    def get_current_users_profile(self) -> requests.Response:
        return self._make_request('get', '/me')

    def get_users_profile(self, user_id: str) -> requests.Response:
        return self._make_request('get', f'/users/{user_id}')

    def get_followed_artists(self, after: Optional[str] = None, limit: int = 20) -> requests.Response:
        """
        Get the artists followed by the current user.

        Args:
            after: Last artist ID retrieved from the previous page
            limit: Page size
        """
        return self._make_request('get', '/me/following', {
            'type': 'artist',
            'after': after,
            'limit': limit
        })

    def check_if_user_follows(self, ids: IdList, follow_type: str = 'artist') -> requests.Response:
        """Check if the current user follows artists or other users ('artist' or 'user')."""
        return self._make_request('get', '/me/following/contains', {
            'type': follow_type,
            'ids': to_comma_separated(ids)
        })

    def check_if_current_user_follows_playlist(self, playlist_id: str, ids: IdList) -> requests.Response:
        return self._make_request('get', f'/playlists/{playlist_id}/followers/contains', {
            'ids': to_comma_separated(ids)
        })

    def get_user_top(
        self,
        item_type: Union[TopItemType, str],
        time_range: Union[TimeRange, str] = TimeRange.MEDIUM_TERM,
        limit: int = 20
    ) -> requests.Response:
        """
        Get the current user's top artists or tracks.

        Args:
            item_type: TopItemType or its wire string
            time_range: TimeRange or its wire string
            limit: Number of items to return

        Raises:
            EnumParseFailure: If a raw string is not a known wire value
        """
        item_type = _coerce(TopItemType, item_type)
        time_range = _coerce(TimeRange, time_range)

        return self._make_request('get', f'/me/top/{item_type.value}', {
            'limit': limit,
            'time_range': time_range.value
        })

    def get_user_top_tracks(
        self,
        time_range: Union[TimeRange, str] = TimeRange.MEDIUM_TERM,
        limit: int = 20
    ) -> requests.Response:
        return self.get_user_top(TopItemType.TRACKS, time_range, limit)

    def get_user_top_artists(
        self,
        time_range: Union[TimeRange, str] = TimeRange.MEDIUM_TERM,
        limit: int = 20
    ) -> requests.Response:
        return self.get_user_top(TopItemType.ARTISTS, time_range, limit)

    def get_authenticated_user(self) -> requests.Response:
        """Alias of get_current_users_profile."""
        return self.get_current_users_profile()


def _coerce(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    return enum_cls.from_string(value)
