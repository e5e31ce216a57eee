from __future__ import annotations

import base64
import json
import time
import urllib.error
import urllib.parse
import urllib.request

from yahoo_auth.domain.tokens import YahooTokenSet
from yahoo_auth.ports.yahoo_oauth_client import YahooOAuthClientPort, YahooOAuthError


class YahooOAuthHttpClient(YahooOAuthClientPort):
    token_url = "https://api.login.yahoo.com/oauth2/get_token"

    def __init__(self, *, timeout_seconds: float = 10):
        self._timeout_seconds = timeout_seconds

    def exchange_code_for_token(
        self,
        *,
        code: str,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
    ) -> YahooTokenSet:
        payload = self._post_token_request(
            {
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": redirect_uri,
            },
            client_id=client_id,
            client_secret=client_secret,
            failure_prefix="Failed to get access token",
        )
        return YahooTokenSet.from_provider_payload(payload, now_ms=_now_ms())

    def refresh_access_token(
        self,
        *,
        refresh_token: str,
        client_id: str,
        client_secret: str,
    ) -> YahooTokenSet:
        payload = self._post_token_request(
            {
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
            },
            client_id=client_id,
            client_secret=client_secret,
            failure_prefix="Failed to refresh access token",
        )
        return YahooTokenSet.from_provider_payload(payload, now_ms=_now_ms())

    def _post_token_request(
        self,
        form: dict[str, str],
        *,
        client_id: str,
        client_secret: str,
        failure_prefix: str,
    ) -> dict:
        basic = base64.b64encode(f"{client_id}:{client_secret}".encode("utf-8"))
        req = urllib.request.Request(
            self.token_url,
            data=urllib.parse.urlencode(form).encode("utf-8"),
            headers={
                "Content-Type": "application/x-www-form-urlencoded",
                "Authorization": f"Basic {basic.decode('ascii')}",
                "Accept": "application/json",
            },
            method="POST",
        )
        try:
            with urllib.request.urlopen(req, timeout=self._timeout_seconds) as resp:
                body = resp.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            # 프로바이더 에러 바디(invalid_grant 등)는 디버깅을 위해 그대로 전달
            try:
                detail = e.read().decode("utf-8", errors="replace")
            except Exception:
                detail = ""
            raise YahooOAuthError(
                f"{failure_prefix}: {detail or f'HTTP {e.code} {e.reason}'}"
            ) from e
        except (urllib.error.URLError, TimeoutError, OSError) as e:
            raise YahooOAuthError(f"{failure_prefix}: {e}") from e

        try:
            payload = json.loads(body)
        except ValueError as e:
            raise YahooOAuthError(f"{failure_prefix}: invalid JSON response") from e

        if not isinstance(payload, dict) or not payload.get("access_token"):
            raise YahooOAuthError(f"{failure_prefix}: no access_token in response")
        return payload


def _now_ms() -> int:
    return int(time.time() * 1000)
