from __future__ import annotations

from django.conf import settings
from yahoo_auth.application.container import build_yahoo_token_refresh_usecase
from yahoo_sync.adapters.yahoo_fantasy_http_client import YahooFantasyHttpClient
from yahoo_sync.application.usecases.yahoo_sync import YahooSyncUseCase
from yahoo_sync.domain.fantasy import DEFAULT_GAME_KEY


def build_default_game_key() -> str:
    return getattr(settings, "YAHOO_GAME_KEY", None) or DEFAULT_GAME_KEY


def build_yahoo_fantasy_client() -> YahooFantasyHttpClient:
    return YahooFantasyHttpClient(
        timeout_seconds=getattr(settings, "YAHOO_API_HTTP_TIMEOUT_SECONDS", 10),
    )


def build_yahoo_sync_usecase() -> YahooSyncUseCase:
    return YahooSyncUseCase(
        yahoo_fantasy_client=build_yahoo_fantasy_client(),
        token_refresh_usecase=build_yahoo_token_refresh_usecase(),
    )
