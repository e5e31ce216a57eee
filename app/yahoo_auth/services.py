from __future__ import annotations

import urllib.parse

from common.application.result import Err, Ok, Result
from django.http import HttpRequest
from yahoo_auth.application.container import (
    build_redirect_uri_policy,
    build_yahoo_oauth_callback_usecase,
    build_yahoo_oauth_start_usecase,
    build_yahoo_token_refresh_usecase,
)
from yahoo_auth.application.redirect_uri import app_root_url, resolve_redirect_uri
from yahoo_auth.application.token_codec import encode_token_set
from yahoo_auth.application.usecases.yahoo_oauth_start import YahooOAuthStartResult
from yahoo_auth.application.usecases.yahoo_token_refresh import (
    YahooTokenRefreshResult,
)
from yahoo_auth.domain.callback import YahooAuthorizationCallback

TOKENS_PARAM = "yahoo_tokens"
ERROR_PARAM = "yahoo_error"


class YahooOAuthService:
    @staticmethod
    def redirect_uri_for(request: HttpRequest) -> str:
        host = request.META.get("HTTP_HOST")
        forwarded_host = request.META.get("HTTP_X_FORWARDED_HOST")
        origin_host = host or request.META.get("SERVER_NAME") or "localhost"
        return resolve_redirect_uri(
            build_redirect_uri_policy(),
            host=host,
            forwarded_host=forwarded_host,
            origin=f"{request.scheme}://{origin_host}",
        )

    @staticmethod
    def start_yahoo_oauth(
        *, redirect_uri: str, state: str | None = None
    ) -> Result[YahooOAuthStartResult]:
        usecase = build_yahoo_oauth_start_usecase()
        return usecase.execute(redirect_uri=redirect_uri, state=state)

    @staticmethod
    def complete_yahoo_oauth(
        *, callback: YahooAuthorizationCallback, redirect_uri: str
    ) -> str:
        """
        콜백을 처리하고 브라우저를 돌려보낼 애플리케이션 루트 URL 을 반환합니다.

        결과(Ok/Err)는 여기서만 쿼리 파라미터로 직렬화합니다.
        """
        usecase = build_yahoo_oauth_callback_usecase()
        result = usecase.execute(callback=callback, redirect_uri=redirect_uri)
        return build_app_redirect_url(
            result, redirect_uri=redirect_uri, state=callback.state
        )

    @staticmethod
    def refresh_yahoo_tokens(
        *, refresh_token: str, expires_at: int | None = None
    ) -> Result[YahooTokenRefreshResult]:
        usecase = build_yahoo_token_refresh_usecase()
        return usecase.execute(refresh_token=refresh_token, expires_at=expires_at)


def build_app_redirect_url(result: Result, *, redirect_uri: str, state: str | None) -> str:
    params: dict[str, str] = {}
    if isinstance(result, Err):
        params[ERROR_PARAM] = result.message
    else:
        assert isinstance(result, Ok)
        params[TOKENS_PARAM] = encode_token_set(result.value)
        if state:
            params["state"] = state
    return f"{app_root_url(redirect_uri)}?{urllib.parse.urlencode(params)}"
