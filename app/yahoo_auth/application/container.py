from __future__ import annotations

from django.conf import settings
from yahoo_auth.adapters.yahoo_oauth_http_client import YahooOAuthHttpClient
from yahoo_auth.application.usecases.yahoo_oauth_callback import (
    YahooOAuthCallbackUseCase,
)
from yahoo_auth.application.usecases.yahoo_oauth_start import YahooOAuthStartUseCase
from yahoo_auth.application.usecases.yahoo_token_refresh import (
    YahooTokenRefreshUseCase,
)
from yahoo_auth.domain.redirect_uri import (
    CALLBACK_PATH,
    PRODUCTION_REDIRECT_URI,
    RedirectUriPolicy,
)


def build_redirect_uri_policy() -> RedirectUriPolicy:
    return RedirectUriPolicy(
        configured_redirect_uri=getattr(settings, "YAHOO_REDIRECT_URI", None),
        callback_path=CALLBACK_PATH,
        production_redirect_uri=getattr(
            settings, "YAHOO_PRODUCTION_REDIRECT_URI", PRODUCTION_REDIRECT_URI
        ),
        production_host_suffixes=tuple(
            getattr(settings, "YAHOO_PRODUCTION_HOST_SUFFIXES", ("netlify.app",))
        ),
        tunnel_host_suffixes=tuple(
            getattr(
                settings,
                "YAHOO_TUNNEL_HOST_SUFFIXES",
                ("trycloudflare.com", "ngrok-free.app", "ngrok.app", "ngrok.io"),
            )
        ),
    )


def build_yahoo_oauth_client() -> YahooOAuthHttpClient:
    return YahooOAuthHttpClient(
        timeout_seconds=getattr(settings, "YAHOO_OAUTH_HTTP_TIMEOUT_SECONDS", 10),
    )


def build_yahoo_oauth_start_usecase() -> YahooOAuthStartUseCase:
    return YahooOAuthStartUseCase(
        yahoo_client_id=getattr(settings, "YAHOO_CLIENT_ID", None),
    )


def build_yahoo_oauth_callback_usecase() -> YahooOAuthCallbackUseCase:
    return YahooOAuthCallbackUseCase(
        yahoo_oauth_client=build_yahoo_oauth_client(),
        yahoo_client_id=getattr(settings, "YAHOO_CLIENT_ID", None),
        yahoo_client_secret=getattr(settings, "YAHOO_CLIENT_SECRET", None),
    )


def build_yahoo_token_refresh_usecase() -> YahooTokenRefreshUseCase:
    return YahooTokenRefreshUseCase(
        yahoo_oauth_client=build_yahoo_oauth_client(),
        yahoo_client_id=getattr(settings, "YAHOO_CLIENT_ID", None),
        yahoo_client_secret=getattr(settings, "YAHOO_CLIENT_SECRET", None),
    )
