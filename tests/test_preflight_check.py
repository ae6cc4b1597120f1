"""Tests for the pre-flight check script."""

import preflight_check


class TestCheckConfig:
    """Tests for check_config."""

    def test_valid_config(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("SPOTIFY_ACCESS_TOKEN", "abcdefghijkl")
        assert preflight_check.check_config() is True
        out = capsys.readouterr().out
        assert "abcdefgh..." in out
        assert "abcdefghijkl" not in out

    def test_invalid_base_url(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("SPOTIFY_API_BASE_URL", "not-a-url")
        assert preflight_check.check_config() is False
        assert "SPOTIFY_API_BASE_URL" in capsys.readouterr().out


class TestCheckAuthorization:
    """Tests for check_authorization."""

    def test_skipped_without_token(self, session) -> None:
        assert preflight_check.check_authorization(session) is True
        session.request.assert_not_called()

    def test_authorized(self, monkeypatch, session, capsys) -> None:
        monkeypatch.setenv("SPOTIFY_ACCESS_TOKEN", "good-token")
        session.request.return_value.json.return_value = {"id": "wizzler", "display_name": "Wizzler"}

        assert preflight_check.check_authorization(session) is True

        kwargs = session.request.call_args.kwargs
        assert kwargs["url"].endswith("/me")
        assert kwargs["headers"]["Authorization"] == "Bearer good-token"
        assert "Wizzler" in capsys.readouterr().out

    def test_rejected_token(self, monkeypatch, session, capsys) -> None:
        monkeypatch.setenv("SPOTIFY_ACCESS_TOKEN", "expired-token")
        session.request.return_value.status_code = 401

        assert preflight_check.check_authorization(session) is False
        assert "401" in capsys.readouterr().out


class TestMain:
    """Tests for the main entry point."""

    def test_all_checks_pass(self, monkeypatch, session) -> None:
        monkeypatch.setenv("SPOTIFY_ACCESS_TOKEN", "good-token")
        session.request.return_value.json.return_value = {"id": "wizzler"}
        assert preflight_check.main(session) == 0

    def test_bad_config_stops_early(self, monkeypatch, session) -> None:
        monkeypatch.setenv("SPOTIFY_API_BASE_URL", "not-a-url")
        assert preflight_check.main(session) == 1
        session.request.assert_not_called()
