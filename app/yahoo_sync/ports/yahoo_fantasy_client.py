from __future__ import annotations

from typing import Protocol

from yahoo_sync.domain.fantasy import YahooLeague, YahooPlayer, YahooTeam


class YahooFantasyApiError(RuntimeError):
    """Fantasy API 호출/응답 해석 실패. 메시지에 Yahoo 에러 설명이 담깁니다."""


class YahooFantasyClientPort(Protocol):
    def get_user_leagues(
        self, *, access_token: str, game_key: str | None = None
    ) -> list[YahooLeague]: ...

    def get_league_season(self, *, access_token: str, league_key: str) -> str | None: ...

    def get_league_teams(self, *, access_token: str, league_key: str) -> list[YahooTeam]: ...

    def get_team_roster(
        self, *, access_token: str, team_key: str, season: str | None = None
    ) -> list[YahooPlayer]: ...
