"""
Yahoo 리그 동기화 유스케이스

브라우저가 보관하는 토큰으로 Yahoo Fantasy API 를 대신 호출합니다.
토큰이 만료(5분 이내 포함)되었으면 어떤 action 도 실행하지 않고
갱신된 토큰만 돌려줍니다. 클라이언트는 새 토큰으로 다시 요청해야 합니다.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from common.application.result import Err, Ok, Result
from common.masking import mask_secrets
from yahoo_auth.application.usecases.yahoo_token_refresh import YahooTokenRefreshUseCase
from yahoo_auth.domain.tokens import YahooTokenSet, is_expiring
from yahoo_sync.domain.fantasy import ALL_GAMES, YahooLeague, YahooTeam
from yahoo_sync.domain.roster import SyncedTeam, build_synced_team
from yahoo_sync.ports.yahoo_fantasy_client import YahooFantasyClientPort

logger = logging.getLogger(__name__)

GET_LEAGUES = "get_leagues"
GET_TEAMS = "get_teams"
SYNC_LEAGUE = "sync_league"
TOKEN_REFRESHED = "token_refreshed"


@dataclass(frozen=True, slots=True)
class YahooSyncCommand:
    action: str | None
    access_token: str | None
    refresh_token: str | None = None
    expires_at: int | None = None
    league_key: str | None = None
    game_key: str | None = None


@dataclass(frozen=True, slots=True)
class YahooSyncResult:
    action: str
    tokens: YahooTokenSet | None = None
    leagues: tuple[YahooLeague, ...] = ()
    teams: tuple[YahooTeam, ...] = ()
    synced_teams: tuple[SyncedTeam, ...] = ()


class YahooSyncUseCase:
    def __init__(
        self,
        *,
        yahoo_fantasy_client: YahooFantasyClientPort,
        token_refresh_usecase: YahooTokenRefreshUseCase,
    ):
        self._client = yahoo_fantasy_client
        self._token_refresh = token_refresh_usecase

    def execute(
        self, *, command: YahooSyncCommand, now_ms: int | None = None
    ) -> Result[YahooSyncResult]:
        if not command.access_token:
            return Err(
                code="MISSING_ACCESS_TOKEN",
                message="Missing access token. Please authenticate first.",
            )

        now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
        if is_expiring(command.expires_at, now_ms=now_ms):
            return self._refresh(command, now_ms=now_ms)

        if command.action == GET_LEAGUES:
            return self._get_leagues(command)
        if command.action == GET_TEAMS:
            return self._get_teams(command)
        if command.action == SYNC_LEAGUE:
            return self._sync_league(command)
        return Err(code="UNKNOWN_ACTION", message=f"Unknown action: {command.action}")

    def _refresh(self, command: YahooSyncCommand, *, now_ms: int) -> Result[YahooSyncResult]:
        if not command.refresh_token:
            return Err(
                code="TOKEN_EXPIRED",
                message="Token expired and no refresh token available",
            )

        # expires_at 을 넘기지 않으면 무조건 갱신
        result = self._token_refresh.execute(
            refresh_token=command.refresh_token, now_ms=now_ms
        )
        if isinstance(result, Err):
            return result
        assert isinstance(result, Ok)
        logger.info("yahoo_sync_token_refreshed action=%s", command.action)
        return Ok(YahooSyncResult(action=TOKEN_REFRESHED, tokens=result.value.tokens))

    def _get_leagues(self, command: YahooSyncCommand) -> Result[YahooSyncResult]:
        game_key = None if command.game_key == ALL_GAMES else command.game_key
        try:
            leagues = self._client.get_user_leagues(
                access_token=command.access_token, game_key=game_key
            )
        except Exception as e:
            return self._api_failure(command, e)
        return Ok(YahooSyncResult(action=GET_LEAGUES, leagues=tuple(leagues)))

    def _get_teams(self, command: YahooSyncCommand) -> Result[YahooSyncResult]:
        if not command.league_key:
            return _league_key_required(GET_TEAMS)
        try:
            teams = self._client.get_league_teams(
                access_token=command.access_token, league_key=command.league_key
            )
        except Exception as e:
            return self._api_failure(command, e)
        return Ok(YahooSyncResult(action=GET_TEAMS, teams=tuple(teams)))

    def _sync_league(self, command: YahooSyncCommand) -> Result[YahooSyncResult]:
        league_key = command.league_key
        if not league_key:
            return _league_key_required(SYNC_LEAGUE)
        access_token = command.access_token

        season = None
        try:
            season = self._client.get_league_season(
                access_token=access_token, league_key=league_key
            )
        except Exception as e:
            # 시즌 없이도 로스터는 가져올 수 있음 (스탯만 빠짐)
            logger.warning(
                "yahoo_sync_season_unavailable league_key=%s reason=%s",
                league_key,
                mask_secrets(str(e)),
            )

        try:
            yahoo_teams = self._client.get_league_teams(
                access_token=access_token, league_key=league_key
            )
        except Exception as e:
            logger.error(
                "yahoo_sync_teams_failed league_key=%s reason=%s",
                league_key,
                mask_secrets(str(e)),
            )
            return Err(
                code="TEAMS_FETCH_FAILED",
                message=(
                    f"Failed to fetch teams from Yahoo API: {e}. "
                    "Check server logs for full details."
                ),
            )

        if not yahoo_teams:
            return Err(
                code="NO_TEAMS",
                message=(
                    f"No teams found in league {league_key}. Possible reasons: league is empty, "
                    "you don't have access, or the league key is incorrect. "
                    "Check server logs for API response details."
                ),
            )

        synced: list[SyncedTeam] = []
        for team in yahoo_teams:
            try:
                roster = self._client.get_team_roster(
                    access_token=access_token, team_key=team.team_key, season=season
                )
            except Exception as e:
                # 한 팀이 실패해도 나머지 팀은 계속 진행
                logger.error(
                    "yahoo_sync_roster_failed team_key=%s reason=%s",
                    team.team_key,
                    mask_secrets(str(e)),
                )
                continue
            synced.append(build_synced_team(team, roster))

        logger.info(
            "yahoo_sync_league_synced league_key=%s season=%s teams=%s/%s",
            league_key,
            season,
            len(synced),
            len(yahoo_teams),
        )
        if not synced:
            return Err(
                code="PARSE_FAILED",
                message=(
                    "Teams were fetched but parsing resulted in 0 teams. "
                    f"This may indicate a parsing issue. Found {len(yahoo_teams)} Yahoo teams "
                    "but couldn't convert them. Check server logs for details."
                ),
            )
        return Ok(YahooSyncResult(action=SYNC_LEAGUE, synced_teams=tuple(synced)))

    def _api_failure(self, command: YahooSyncCommand, e: Exception) -> Err:
        logger.error(
            "yahoo_sync_failed action=%s reason=%s", command.action, mask_secrets(str(e))
        )
        return Err(code="YAHOO_API_ERROR", message=str(e))


def _league_key_required(action: str) -> Err:
    return Err(
        code="LEAGUE_KEY_REQUIRED",
        message=f"leagueKey is required for {action} action",
    )
