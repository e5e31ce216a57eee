from __future__ import annotations

import hashlib
import logging

from common.application.result import Err, Ok, Result
from common.masking import mask_secrets
from yahoo_auth.domain.callback import YahooAuthorizationCallback
from yahoo_auth.domain.tokens import YahooTokenSet
from yahoo_auth.ports.yahoo_oauth_client import YahooOAuthClientPort

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS_MESSAGE = "Yahoo OAuth credentials not configured"


class YahooOAuthCallbackUseCase:
    """
    Yahoo OAuth 콜백 처리 유스케이스.

    - 프로바이더 에러 → PROVIDER_ERROR (토큰 교환 시도 안 함)
    - code 없음 → MISSING_CODE (redirect_uri 불일치 진단 메시지 포함)
    - client_id/client_secret 미설정 → CONFIG_MISSING
    - code -> token 교환, 실패 시 TOKEN_EXCHANGE_FAILED (프로바이더 메시지 그대로)
    """

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
        self, *, callback: YahooAuthorizationCallback, redirect_uri: str
    ) -> Result[YahooTokenSet]:
        if callback.error:
            message = callback.error_description or callback.error
            logger.warning(
                "yahoo_oauth_provider_error error=%s description=%s",
                callback.error,
                mask_secrets(callback.error_description or ""),
            )
            return Err(code="PROVIDER_ERROR", message=message)

        if not callback.code:
            logger.warning(
                "yahoo_oauth_missing_code received_params=%s redirect_uri=%s",
                ",".join(callback.received_params) or "NONE",
                redirect_uri,
            )
            return Err(
                code="MISSING_CODE",
                message=_missing_code_message(callback, redirect_uri=redirect_uri),
                details={"received_params": list(callback.received_params)},
            )

        if not self._yahoo_client_id or not self._yahoo_client_secret:
            logger.error(
                "yahoo_oauth_config_missing client_id_set=%s client_secret_set=%s",
                bool(self._yahoo_client_id),
                bool(self._yahoo_client_secret),
            )
            return Err(code="CONFIG_MISSING", message=MISSING_CREDENTIALS_MESSAGE)

        try:
            tokens = self._yahoo_oauth_client.exchange_code_for_token(
                code=callback.code,
                client_id=self._yahoo_client_id,
                client_secret=self._yahoo_client_secret,
                redirect_uri=redirect_uri,
            )
        except Exception as e:
            logger.warning(
                "yahoo_oauth_token_exchange_failed state_hash=%s redirect_uri=%s reason=%s",
                _state_hash(callback.state),
                redirect_uri,
                mask_secrets(str(e)),
            )
            return Err(
                code="TOKEN_EXCHANGE_FAILED",
                message=str(e) or "Failed to exchange authorization code",
            )

        logger.info(
            "yahoo_oauth_token_exchange_succeeded state_hash=%s expires_in=%s",
            _state_hash(callback.state),
            tokens.expires_in,
        )
        return Ok(tokens)


def _missing_code_message(
    callback: YahooAuthorizationCallback, *, redirect_uri: str
) -> str:
    if not callback.received_params:
        return (
            "Yahoo redirected back but provided no parameters. "
            "This usually means the redirect URI does not match exactly.\n\n"
            "The redirect URI in your OAuth request must match EXACTLY what's "
            "configured in Yahoo Developer Portal.\n\n"
            f"Expected: {redirect_uri}\n\n"
            "Please verify:\n"
            f"1. In Yahoo Developer Portal, the Redirect URI is exactly: {redirect_uri}\n"
            "2. No trailing slashes\n"
            '3. Click "Update" to save changes\n'
            "4. Wait a few minutes for changes to propagate"
        )
    return (
        "No authorization code in callback. Received parameters: "
        + ", ".join(callback.received_params)
    )


def _state_hash(state: str | None) -> str:
    if not state:
        return "-"
    return hashlib.sha256(state.encode("utf-8")).hexdigest()[:8]
