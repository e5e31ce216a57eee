from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from common.application.result import Err, Ok, Result
from common.masking import mask_secrets
from yahoo_auth.domain.tokens import YahooTokenSet, is_expiring
from yahoo_auth.ports.yahoo_oauth_client import YahooOAuthClientPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class YahooTokenRefreshResult:
    refreshed: bool
    tokens: YahooTokenSet | None = None


class YahooTokenRefreshUseCase:
    def __init__(
        self,
        *,
        yahoo_oauth_client: YahooOAuthClientPort,
        yahoo_client_id: str | None,
        yahoo_client_secret: str | None,
    ):
        self._yahoo_oauth_client = yahoo_oauth_client
        self._yahoo_client_id = yahoo_client_id
        self._yahoo_client_secret = yahoo_client_secret

    def execute(
        self,
        *,
        refresh_token: str,
        expires_at: int | None = None,
        now_ms: int | None = None,
    ) -> Result[YahooTokenRefreshResult]:
        now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
        if expires_at is not None and not is_expiring(expires_at, now_ms=now_ms):
            return Ok(YahooTokenRefreshResult(refreshed=False))

        if not self._yahoo_client_id or not self._yahoo_client_secret:
            return Err(
                code="CONFIG_MISSING",
                message="Yahoo OAuth credentials not configured",
            )

        try:
            tokens = self._yahoo_oauth_client.refresh_access_token(
                refresh_token=refresh_token,
                client_id=self._yahoo_client_id,
                client_secret=self._yahoo_client_secret,
            )
        except Exception as e:
            logger.warning("yahoo_oauth_refresh_failed reason=%s", mask_secrets(str(e)))
            return Err(code="TOKEN_REFRESH_FAILED", message=str(e))

        # Yahoo 는 refresh 응답에 refresh_token 을 생략할 수 있음
        if not tokens.refresh_token:
            tokens = YahooTokenSet(
                access_token=tokens.access_token,
                refresh_token=refresh_token,
                expires_in=tokens.expires_in,
                token_type=tokens.token_type,
                xoauth_yahoo_guid=tokens.xoauth_yahoo_guid,
                expires_at=tokens.expires_at,
            )
        return Ok(YahooTokenRefreshResult(refreshed=True, tokens=tokens))
