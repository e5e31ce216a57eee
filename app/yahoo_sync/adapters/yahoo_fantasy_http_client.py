from __future__ import annotations

import dataclasses
import json
import logging
import re
import urllib.error
import urllib.parse
import urllib.request

from django.core.cache import cache
from yahoo_sync.adapters.yahoo_fantasy_parser import (
    newest_season_only,
    parse_game_season,
    parse_league_info,
    parse_league_teams,
    parse_player_stats,
    parse_standings,
    parse_team_roster,
    parse_user_leagues,
    season_year,
)
from yahoo_sync.domain.fantasy import YahooLeague, YahooPlayer, YahooTeam, game_key_of
from yahoo_sync.ports.yahoo_fantasy_client import (
    YahooFantasyApiError,
    YahooFantasyClientPort,
)

logger = logging.getLogger(__name__)

YAHOO_API_BASE = "https://fantasysports.yahooapis.com/fantasy/v2"

# 한 번의 stats 요청에 담는 player_key 개수
STATS_BATCH_SIZE = 25

# game_key 의 시즌은 바뀌지 않으므로 길게 캐시
SEASON_CACHE_TIMEOUT = 60 * 60 * 24

_XML_ERROR_PATTERNS = tuple(
    re.compile(rf"<{tag}>(.*?)</{tag}>", re.IGNORECASE | re.DOTALL)
    for tag in ("description", "error", "message")
)


class YahooFantasyHttpClient(YahooFantasyClientPort):
    api_base = YAHOO_API_BASE

    def __init__(self, *, timeout_seconds: float = 10):
        self._timeout_seconds = timeout_seconds

    def get_user_leagues(
        self, *, access_token: str, game_key: str | None = None
    ) -> list[YahooLeague]:
        if game_key:
            endpoint = f"users;use_login=1/games;game_keys={_quote(game_key)}/leagues"
        else:
            endpoint = "users;use_login=1/games/leagues"
        leagues = parse_user_leagues(self._get(endpoint, access_token=access_token))
        current = newest_season_only(leagues)
        logger.info(
            "yahoo_sync_leagues_parsed total=%s newest_season=%s", len(leagues), len(current)
        )
        return current

    def get_league_season(self, *, access_token: str, league_key: str) -> str | None:
        info = parse_league_info(
            self._get(f"league/{_quote(league_key)}", access_token=access_token)
        )
        season = info.get("season") or info.get("current_season")
        if season:
            return season_year(season)

        game_key = game_key_of(league_key) or info.get("game_key")
        if not game_key:
            return None
        return self.get_game_season(access_token=access_token, game_key=game_key)

    def get_game_season(self, *, access_token: str, game_key: str) -> str | None:
        cache_key = f"yahoo_sync:season:{game_key}"
        cached = cache.get(cache_key)
        if cached:
            return cached

        season = season_year(
            parse_game_season(self._get(f"game/{_quote(game_key)}", access_token=access_token))
        )
        if season:
            cache.set(cache_key, season, timeout=SEASON_CACHE_TIMEOUT)
            logger.info("yahoo_sync_game_season game_key=%s season=%s", game_key, season)
        return season

    def get_league_teams(self, *, access_token: str, league_key: str) -> list[YahooTeam]:
        teams = parse_league_teams(
            self._get(f"league/{_quote(league_key)}/teams", access_token=access_token)
        )
        if teams and not any(team.has_record for team in teams):
            teams = self._merge_standings(teams, access_token=access_token, league_key=league_key)
        return teams

    def get_team_roster(
        self, *, access_token: str, team_key: str, season: str | None = None
    ) -> list[YahooPlayer]:
        players = parse_team_roster(
            self._get(f"team/{_quote(team_key)}/roster", access_token=access_token)
        )
        if not players or not season:
            return players

        stats = self._fetch_season_stats(
            [p.player_key for p in players], access_token=access_token, season=season
        )
        return [
            dataclasses.replace(p, stats=stats[p.player_key]) if p.player_key in stats else p
            for p in players
        ]

    def _merge_standings(
        self, teams: list[YahooTeam], *, access_token: str, league_key: str
    ) -> list[YahooTeam]:
        # teams 응답에 전적이 없으면 standings 를 따로 조회해 병합
        try:
            standings = parse_standings(
                self._get(f"league/{_quote(league_key)}/standings", access_token=access_token)
            )
        except YahooFantasyApiError as e:
            logger.warning("yahoo_sync_standings_failed league_key=%s reason=%s", league_key, e)
            return teams

        merged = []
        for team in teams:
            ranked = standings.get(team.team_key)
            if ranked is not None:
                team = dataclasses.replace(
                    team, wins=ranked.wins, losses=ranked.losses, ties=ranked.ties
                )
            merged.append(team)
        return merged

    def _fetch_season_stats(
        self, player_keys: list[str], *, access_token: str, season: str
    ) -> dict[str, dict[str, str]]:
        stats: dict[str, dict[str, str]] = {}
        for start in range(0, len(player_keys), STATS_BATCH_SIZE):
            batch = player_keys[start : start + STATS_BATCH_SIZE]
            endpoint = (
                f"players;player_keys={','.join(_quote(k) for k in batch)}"
                f"/stats;type=season;season={_quote(season)}"
            )
            try:
                stats.update(parse_player_stats(self._get(endpoint, access_token=access_token)))
            except YahooFantasyApiError as e:
                # 스탯 없이도 로스터는 반환
                logger.warning(
                    "yahoo_sync_stats_batch_failed season=%s size=%s reason=%s",
                    season,
                    len(batch),
                    e,
                )
        return stats

    def _get(self, endpoint: str, *, access_token: str, params: dict | None = None) -> dict:
        endpoint = re.sub(r"\.(json|xml)$", "", endpoint)
        query = urllib.parse.urlencode({"format": "json", **(params or {})})
        req = urllib.request.Request(
            f"{self.api_base}/{endpoint}?{query}",
            headers={
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/json",
            },
            method="GET",
        )
        try:
            with urllib.request.urlopen(req, timeout=self._timeout_seconds) as resp:
                body = resp.read().decode("utf-8", errors="replace")
        except urllib.error.HTTPError as e:
            raise YahooFantasyApiError(_http_error_message(e)) from e
        except (urllib.error.URLError, TimeoutError, OSError) as e:
            raise YahooFantasyApiError(f"Yahoo API request failed: {e}") from e

        text = body.strip()
        if text.startswith("<?xml"):
            detail = _xml_error(body) or "Received XML response instead of JSON"
            raise YahooFantasyApiError(
                f"Yahoo API returned XML instead of JSON: {detail}. "
                f"Response preview: {body[:500]}"
            )
        if not text.startswith(("{", "[")):
            raise YahooFantasyApiError(
                "Unexpected response format. Expected JSON but got: "
                f"{body[:200] or 'No response body'}"
            )
        try:
            return json.loads(body)
        except ValueError as e:
            raise YahooFantasyApiError(
                f"Failed to parse JSON response: {e}. Response preview: {body[:500]}"
            ) from e


def _http_error_message(e: urllib.error.HTTPError) -> str:
    try:
        body = e.read().decode("utf-8", errors="replace")
    except Exception:
        body = ""
    content_type = (e.headers.get("Content-Type") if e.headers else None) or ""

    detail = None
    if body.strip().startswith("<?xml") or "xml" in content_type:
        detail = _xml_error(body)
    return f"Yahoo API error: {e.code} {e.reason} - {detail or body[:300] or 'No response body'}"


def _xml_error(body: str) -> str | None:
    for pattern in _XML_ERROR_PATTERNS:
        match = pattern.search(body)
        if match:
            return match.group(1)
    return None


def _quote(value: str) -> str:
    return urllib.parse.quote(value, safe=".")
