from __future__ import annotations

from typing import Protocol

from yahoo_auth.domain.tokens import YahooTokenSet


class YahooOAuthError(RuntimeError):
    """토큰 엔드포인트 호출 실패. 메시지에는 프로바이더 응답이 그대로 담깁니다."""


class YahooOAuthClientPort(Protocol):
    def exchange_code_for_token(
        self,
        *,
        code: str,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
    ) -> YahooTokenSet: ...

    def refresh_access_token(
        self,
        *,
        refresh_token: str,
        client_id: str,
        client_secret: str,
    ) -> YahooTokenSet: ...
