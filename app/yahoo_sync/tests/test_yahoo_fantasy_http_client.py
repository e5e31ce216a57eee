import io
import json
import urllib.error
import urllib.parse
import urllib.request

import pytest
from yahoo_sync.adapters.yahoo_fantasy_http_client import (
    STATS_BATCH_SIZE,
    YahooFantasyHttpClient,
)
from yahoo_sync.ports.yahoo_fantasy_client import YahooFantasyApiError


class FakeResponse:
    def __init__(self, body: bytes):
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def _http_error(url, code, reason, body, content_type="application/xml"):
    return urllib.error.HTTPError(
        url, code, reason, {"Content-Type": content_type}, io.BytesIO(body)
    )


class TestYahooFantasyHttpClient:
    def setup_method(self):
        self.requests = []
        self.client = YahooFantasyHttpClient(timeout_seconds=5)

    def _patch_urlopen(self, monkeypatch, routes):
        """routes: [(경로 조각, body bytes 또는 Exception)] 순서대로 매칭."""

        def fake_urlopen(req, timeout=None):
            self.requests.append((req, timeout))
            path = urllib.parse.urlsplit(req.full_url).path
            for fragment, outcome in routes:
                if path.endswith(fragment):
                    if isinstance(outcome, Exception):
                        raise outcome
                    return FakeResponse(outcome)
            raise AssertionError(f"unexpected request: {req.full_url}")

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)

    def test_request_uses_bearer_json_format_and_timeout(self, monkeypatch, user_leagues_payload):
        self._patch_urlopen(
            monkeypatch,
            [("/leagues", json.dumps(user_leagues_payload).encode("utf-8"))],
        )

        leagues = self.client.get_user_leagues(access_token="acc", game_key="465")

        assert [league.league_key for league in leagues] == ["465.l.9080"]
        req, timeout = self.requests[0]
        parsed = urllib.parse.urlsplit(req.full_url)
        assert f"{parsed.scheme}://{parsed.netloc}" == "https://fantasysports.yahooapis.com"
        assert parsed.path == "/fantasy/v2/users;use_login=1/games;game_keys=465/leagues"
        assert urllib.parse.parse_qs(parsed.query) == {"format": ["json"]}
        assert req.get_header("Authorization") == "Bearer acc"
        assert req.get_header("Accept") == "application/json"
        assert timeout == 5

    def test_all_games_endpoint_without_game_key(self, monkeypatch, user_leagues_payload):
        self._patch_urlopen(
            monkeypatch,
            [("/leagues", json.dumps(user_leagues_payload).encode("utf-8"))],
        )

        self.client.get_user_leagues(access_token="acc")

        path = urllib.parse.urlsplit(self.requests[0][0].full_url).path
        assert path == "/fantasy/v2/users;use_login=1/games/leagues"

    def test_http_error_extracts_xml_description(self, monkeypatch):
        body = (
            b'<?xml version="1.0" encoding="UTF-8"?>\n<error><description>'
            b"Please provide valid credentials.</description></error>"
        )
        self._patch_urlopen(
            monkeypatch,
            [("/teams", _http_error("https://x", 401, "Unauthorized", body))],
        )

        with pytest.raises(YahooFantasyApiError) as exc:
            self.client.get_league_teams(access_token="acc", league_key="465.l.9080")

        assert str(exc.value) == (
            "Yahoo API error: 401 Unauthorized - Please provide valid credentials."
        )

    def test_http_error_without_xml_uses_body_preview(self, monkeypatch):
        body = b"x" * 400
        self._patch_urlopen(
            monkeypatch,
            [("/teams", _http_error("https://x", 500, "Server Error", body, "text/plain"))],
        )

        with pytest.raises(YahooFantasyApiError) as exc:
            self.client.get_league_teams(access_token="acc", league_key="465.l.9080")

        assert str(exc.value) == "Yahoo API error: 500 Server Error - " + "x" * 300

    def test_xml_body_on_success_is_an_error(self, monkeypatch):
        body = b'<?xml version="1.0"?><yahoo><message>League not found</message></yahoo>'
        self._patch_urlopen(monkeypatch, [("/teams", body)])

        with pytest.raises(YahooFantasyApiError) as exc:
            self.client.get_league_teams(access_token="acc", league_key="465.l.1")

        assert str(exc.value).startswith(
            "Yahoo API returned XML instead of JSON: League not found. Response preview: <?xml"
        )

    def test_non_json_body_is_an_error(self, monkeypatch):
        self._patch_urlopen(monkeypatch, [("/teams", b"<html>maintenance</html>")])

        with pytest.raises(YahooFantasyApiError) as exc:
            self.client.get_league_teams(access_token="acc", league_key="465.l.1")

        assert str(exc.value) == (
            "Unexpected response format. Expected JSON but got: <html>maintenance</html>"
        )

    def test_network_error_is_wrapped(self, monkeypatch):
        self._patch_urlopen(monkeypatch, [("/teams", urllib.error.URLError("timed out"))])

        with pytest.raises(YahooFantasyApiError, match="timed out"):
            self.client.get_league_teams(access_token="acc", league_key="465.l.1")

    def test_league_keys_are_path_quoted(self, monkeypatch, league_teams_payload):
        self._patch_urlopen(
            monkeypatch,
            [("/teams", json.dumps(league_teams_payload()).encode("utf-8"))],
        )

        self.client.get_league_teams(access_token="acc", league_key="465.l.9080/../x?y")

        path = urllib.parse.urlsplit(self.requests[0][0].full_url).path
        assert path == "/fantasy/v2/league/465.l.9080%2F..%2Fx%3Fy/teams"

    def test_zero_records_are_filled_from_standings(
        self, monkeypatch, league_teams_payload, league_standings_payload
    ):
        self._patch_urlopen(
            monkeypatch,
            [
                ("/teams", json.dumps(league_teams_payload(with_standings=False)).encode("utf-8")),
                ("/standings", json.dumps(league_standings_payload).encode("utf-8")),
            ],
        )

        teams = self.client.get_league_teams(access_token="acc", league_key="465.l.9080")

        assert (teams[0].wins, teams[0].losses, teams[0].ties) == (7, 5, 0)
        assert (teams[1].wins, teams[1].losses, teams[1].ties) == (0, 0, 0)

    def test_season_from_game_is_cached_per_game_key(self, monkeypatch):
        league = {"fantasy_content": {"league": [[{"league_key": "465.l.9080"}]]}}
        game = {"fantasy_content": {"game": [{"game_key": "465", "season": "2025"}]}}
        self._patch_urlopen(
            monkeypatch,
            [
                ("/league/465.l.9080", json.dumps(league).encode("utf-8")),
                ("/game/465", json.dumps(game).encode("utf-8")),
            ],
        )

        first = self.client.get_league_season(access_token="acc", league_key="465.l.9080")
        second = self.client.get_league_season(access_token="acc", league_key="465.l.9080")

        assert first == second == "2025"
        paths = [urllib.parse.urlsplit(r.full_url).path for r, _ in self.requests]
        assert paths.count("/fantasy/v2/game/465") == 1

    def test_league_season_field_wins_over_game(self, monkeypatch):
        league = {"fantasy_content": {"league": [{"league_key": "465.l.9080", "season": "2025"}]}}
        self._patch_urlopen(
            monkeypatch, [("/league/465.l.9080", json.dumps(league).encode("utf-8"))]
        )

        assert self.client.get_league_season(access_token="acc", league_key="465.l.9080") == "2025"
        assert len(self.requests) == 1

    def test_roster_attaches_season_stats_in_batches(
        self, monkeypatch, team_roster_payload, player_stats_payload
    ):
        self._patch_urlopen(
            monkeypatch,
            [
                ("/roster", json.dumps(team_roster_payload).encode("utf-8")),
                (
                    "/stats;type=season;season=2025",
                    json.dumps(player_stats_payload(["465.p.6743"])).encode("utf-8"),
                ),
            ],
        )

        players = self.client.get_team_roster(
            access_token="acc", team_key="465.l.9080.t.1", season="2025"
        )

        assert players[0].stats == {"1": "20", "2": "35"}
        assert players[1].stats == {}
        stats_path = urllib.parse.urlsplit(self.requests[1][0].full_url).path
        assert stats_path == (
            "/fantasy/v2/players;player_keys=465.p.6743,465.p.7000"
            "/stats;type=season;season=2025"
        )
        assert len(self.requests) == 2 and STATS_BATCH_SIZE >= 2

    def test_roster_without_season_skips_stats(self, monkeypatch, team_roster_payload):
        self._patch_urlopen(
            monkeypatch, [("/roster", json.dumps(team_roster_payload).encode("utf-8"))]
        )

        players = self.client.get_team_roster(access_token="acc", team_key="465.l.9080.t.1")

        assert len(players) == 2
        assert len(self.requests) == 1

    def test_stats_failure_still_returns_roster(self, monkeypatch, team_roster_payload):
        self._patch_urlopen(
            monkeypatch,
            [
                ("/roster", json.dumps(team_roster_payload).encode("utf-8")),
                ("/stats;type=season;season=2025", _http_error("https://x", 400, "Bad", b"")),
            ],
        )

        players = self.client.get_team_roster(
            access_token="acc", team_key="465.l.9080.t.1", season="2025"
        )

        assert [p.stats for p in players] == [{}, {}]
