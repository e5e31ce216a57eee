from __future__ import annotations

import secrets
import urllib.parse
from dataclasses import dataclass

from common.application.result import Err, Ok, Result

AUTHORIZATION_ENDPOINT = "https://api.login.yahoo.com/oauth2/request_auth"
FANTASY_READ_SCOPE = "fspt-r"


@dataclass(frozen=True, slots=True)
class YahooOAuthStartResult:
    authorization_url: str
    state: str
    redirect_uri: str


class YahooOAuthStartUseCase:
    """
    Yahoo 인가 URL 생성 유스케이스.

    콜백에서 토큰 교환 시 사용하는 것과 동일하게 해석된 redirect_uri 를 받아
    authorization URL 을 만듭니다.
    """

    def __init__(self, *, yahoo_client_id: str | None):
        self._yahoo_client_id = (yahoo_client_id or "").strip()

    def execute(
        self, *, redirect_uri: str, state: str | None = None
    ) -> Result[YahooOAuthStartResult]:
        if not self._yahoo_client_id:
            return Err(
                code="CONFIG_MISSING",
                message="Yahoo OAuth client_id is not configured",
            )

        state = state or secrets.token_urlsafe(32)
        query = {
            "client_id": self._yahoo_client_id,
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "scope": FANTASY_READ_SCOPE,
            "language": "en-us",
            "state": state,
        }
        return Ok(
            YahooOAuthStartResult(
                authorization_url=f"{AUTHORIZATION_ENDPOINT}?{urllib.parse.urlencode(query)}",
                state=state,
                redirect_uri=redirect_uri,
            )
        )
