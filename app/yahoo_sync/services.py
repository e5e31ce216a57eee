from __future__ import annotations

from common.application.result import Result
from yahoo_sync.application.container import (
    build_default_game_key,
    build_yahoo_sync_usecase,
)
from yahoo_sync.application.usecases.yahoo_sync import YahooSyncCommand, YahooSyncResult


class YahooSyncService:
    @staticmethod
    def sync(
        *,
        action: str | None,
        tokens: dict | None,
        league_key: str | None = None,
        game_key: str | None = None,
    ) -> Result[YahooSyncResult]:
        tokens = tokens or {}
        command = YahooSyncCommand(
            action=action,
            access_token=tokens.get("access_token") or None,
            refresh_token=tokens.get("refresh_token") or None,
            expires_at=tokens.get("expires_at"),
            league_key=league_key or None,
            game_key=game_key or build_default_game_key(),
        )
        return build_yahoo_sync_usecase().execute(command=command)
