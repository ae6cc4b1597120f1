from unittest.mock import MagicMock

import pytest
import requests

from clients import SpotifyAPIClient
from config import SpotifyConfig, reset_config
from utils import set_log_level


BASE_URL = "https://api.spotify.test/v1"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer env vars and the config singleton out of tests."""
    for key in ("SPOTIFY_API_BASE_URL", "SPOTIFY_ACCESS_TOKEN", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()
    set_log_level("INFO")


@pytest.fixture
def session() -> MagicMock:
    """Spy transport; every request returns the same canned response."""
    spy = MagicMock(spec=requests.Session)
    response = MagicMock(spec=requests.Response)
    response.status_code = 200
    spy.request.return_value = response
    return spy


@pytest.fixture
def client(session) -> SpotifyAPIClient:
    return SpotifyAPIClient(
        config=SpotifyConfig(api_base_url=BASE_URL),
        access_token="test-token",
        session=session,
    )


@pytest.fixture
def sent(session):
    """Return the keyword arguments of the single request issued through the spy."""
    def _sent() -> dict:
        assert session.request.call_count == 1
        return session.request.call_args.kwargs
    return _sent
